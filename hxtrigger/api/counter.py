from datetime import datetime
import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from hxtrigger import count, metrics
from hxtrigger.htmx import with_trigger

logger = logging.getLogger(__name__)

# Client-side event fired after every increment; the count display listens for it.
LATEST_COUNT = "latest-count"

# every counter route is tallied in /api/metrics
router = APIRouter(tags=["htmx"], dependencies=[Depends(metrics.record_request)])


def format_short_datetime(dt: datetime) -> str:
    """Render ``dt`` as a short general date/time, e.g. ``10/19/2026 3:07 PM``."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year} {hour}:{dt.minute:02d} {suffix}"


@router.get("/current-count", response_class=PlainTextResponse)
def current_count():
    """Return the text snippet htmx swaps into the count display."""
    return f"Current Count: {count.current()} ({format_short_datetime(datetime.now())})"


@router.post("/increase-count", status_code=204)
def increase_count():
    """Increment the count and tell listening clients to refresh.

    The empty 204 response carries an HX-Trigger header naming the
    latest-count event; htmx fires it on the client, which re-fetches
    /current-count.
    """
    n = count.increase()
    logger.debug(f"Count increased to {n}")
    return with_trigger(Response(status_code=204), LATEST_COUNT)
