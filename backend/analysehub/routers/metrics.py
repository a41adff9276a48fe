from fastapi import APIRouter, Depends, HTTPException
from analysehub.dependencies import get_fixture_provider
from analysehub.models import MetricsResponse
from analysehub.services import DataProvider

router = APIRouter(prefix="/api/metrics", tags=["metrics"])


@router.get("", response_model=MetricsResponse)
async def get_metrics(provider: DataProvider = Depends(get_fixture_provider)):
    """
    Get the metric catalog.

    Metrics are display labels only; no values are computed here.
    """
    try:
        return await provider.get_metrics()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch metrics: {str(e)}")
