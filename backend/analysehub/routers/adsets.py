from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from analysehub.dependencies import get_fixture_provider
from analysehub.models import AdsResponse, AdsetsResponse, FilterPayload
from analysehub.services import DataProvider

router = APIRouter(prefix="/api/adsets", tags=["adsets"])


@router.get("", response_model=AdsetsResponse)
async def get_adsets(provider: DataProvider = Depends(get_fixture_provider)):
    """
    Get every ad set, keyed by campaign ID.
    """
    try:
        return await provider.get_adsets()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch ad sets: {str(e)}")


@router.post("/{adset_id}/ads", response_model=AdsResponse)
async def query_adset_ads(
    adset_id: str,
    filters: Optional[FilterPayload] = None,
    provider: DataProvider = Depends(get_fixture_provider),
):
    """
    Get the ads of one ad set.

    Args:
        adset_id: Parent ad set ID
        filters: Date range and current selections

    Returns:
        Ads keyed by ``adset_id``
    """
    try:
        adsets = await provider.get_adsets()
        known = {adset.id for group in adsets.adsets.values() for adset in group}

        if adset_id not in known:
            raise HTTPException(
                status_code=404,
                detail=f"Ad set {adset_id} not found"
            )

        return await provider.query_ads(adset_id, filters)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch ads: {str(e)}"
        )
