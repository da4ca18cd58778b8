"""Helpers for the htmx request/response header conventions.

htmx fires client-side events named in the HX-Trigger family of response
headers. A header holding only event names is a comma-separated list; once
any event carries a detail payload the whole header becomes a JSON object
mapping event name -> detail.

Usage:
  response = Response(status_code=204)
  with_trigger(response, "latest-count")
  with_trigger(response, "notify", detail={"level": "info"}, timing="settle")
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from fastapi import Request, Response

HX_REQUEST = "HX-Request"
HX_TRIGGER = "HX-Trigger"
HX_TRIGGER_AFTER_SETTLE = "HX-Trigger-After-Settle"
HX_TRIGGER_AFTER_SWAP = "HX-Trigger-After-Swap"

# timing name -> response header
TRIGGER_HEADERS = {
    "receive": HX_TRIGGER,
    "settle": HX_TRIGGER_AFTER_SETTLE,
    "swap": HX_TRIGGER_AFTER_SWAP,
}


def _parse_triggers(value: Optional[str]) -> Dict[str, Any]:
    """Decode an existing trigger header back into an ordered event -> detail map."""
    if not value:
        return {}
    value = value.strip()
    if value.startswith("{"):
        return dict(json.loads(value))
    return {name.strip(): None for name in value.split(",") if name.strip()}


def _encode_triggers(events: Dict[str, Any]) -> str:
    if all(detail is None for detail in events.values()):
        return ", ".join(events)
    return json.dumps(events, separators=(",", ":"))


def with_trigger(
    response: Response,
    event: str,
    detail: Any = None,
    timing: str = "receive",
) -> Response:
    """Ask the client to fire ``event`` when it processes ``response``.

    Events already on the header are kept; re-adding one replaces its detail.
    Returns the response so calls can be chained.
    """
    if not event or not event.strip():
        raise ValueError("event name must be a non-empty string")
    # plain headers are comma-separated and a leading brace marks the JSON form
    if "," in event or event.strip().startswith("{"):
        raise ValueError(f"Invalid event name: {event!r}. Names may not contain ',' or start with '{{'")
    header = TRIGGER_HEADERS.get(timing)
    if header is None:
        raise ValueError(f"Invalid trigger timing: {timing!r}. Must be one of {sorted(TRIGGER_HEADERS)}")

    events = _parse_triggers(response.headers.get(header))
    events[event.strip()] = detail
    response.headers[header] = _encode_triggers(events)
    return response


def is_htmx_request(request: Request) -> bool:
    return request.headers.get(HX_REQUEST, "").lower() == "true"
