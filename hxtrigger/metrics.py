"""Request accounting for the HTMX counter routes.

Routes opt in with ``Depends(record_request)``. Every call is tallied by
``"METHOD path"`` and by source: ``htmx`` when the demo page issued it (the
HX-Request header is set), ``direct`` for any other client. Like the count
itself the tallies are process-local and unsynchronized.
"""
from __future__ import annotations

from collections import Counter
from typing import Any, Dict

from fastapi import Request

from hxtrigger import count
from hxtrigger.htmx import is_htmx_request

_routes = Counter()
_sources = Counter()


def record_request(request: Request) -> None:
    _routes[f"{request.method} {request.url.path}"] += 1
    _sources["htmx" if is_htmx_request(request) else "direct"] += 1


def snapshot() -> Dict[str, Any]:
    """Current count plus request tallies, as served by /api/metrics."""
    return {
        "count": count.current(),
        "requests": dict(_routes),
        "sources": dict(_sources),
    }


def reset_all() -> None:
    _routes.clear()
    _sources.clear()
