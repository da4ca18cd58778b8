from fastapi import APIRouter

from hxtrigger import metrics

router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics")
def get_metrics():
    """Report the count and how often each counter route was hit, and by whom."""
    return metrics.snapshot()
