from fastapi import APIRouter, Depends, HTTPException
from analysehub.dependencies import get_fixture_provider
from analysehub.models import AdsResponse
from analysehub.services import DataProvider

router = APIRouter(prefix="/api/ads", tags=["ads"])


@router.get("", response_model=AdsResponse)
async def get_ads(provider: DataProvider = Depends(get_fixture_provider)):
    """Get every ad, keyed by ad set ID."""
    try:
        return await provider.get_ads()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch ads: {str(e)}")
