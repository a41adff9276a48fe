from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from analysehub.dependencies import get_fixture_provider
from analysehub.models import AdsetsResponse, CampaignsResponse, FilterPayload
from analysehub.services import DataProvider

router = APIRouter(prefix="/api/campaigns", tags=["campaigns"])


@router.get("", response_model=CampaignsResponse)
async def get_campaigns(provider: DataProvider = Depends(get_fixture_provider)):
    """
    Get all campaigns.

    Returns:
        Ordered list of campaigns under the ``campaigns`` key
    """
    try:
        return await provider.get_campaigns()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch campaigns: {str(e)}")


@router.post("", response_model=CampaignsResponse)
async def query_campaigns(
    filters: Optional[FilterPayload] = None,
    provider: DataProvider = Depends(get_fixture_provider),
):
    """
    Get campaigns scoped to a filter payload.

    Args:
        filters: Date range and current selections

    Returns:
        Campaigns matching the filter
    """
    try:
        return await provider.query_campaigns(filters)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch campaigns: {str(e)}")


@router.post("/{campaign_id}/adsets", response_model=AdsetsResponse)
async def query_campaign_adsets(
    campaign_id: str,
    filters: Optional[FilterPayload] = None,
    provider: DataProvider = Depends(get_fixture_provider),
):
    """
    Get the ad sets of one campaign.

    Args:
        campaign_id: Parent campaign ID
        filters: Date range and current selections

    Returns:
        Ad sets keyed by ``campaign_id``
    """
    try:
        campaigns = await provider.get_campaigns()

        if campaign_id not in {campaign.id for campaign in campaigns.campaigns}:
            raise HTTPException(
                status_code=404,
                detail=f"Campaign {campaign_id} not found"
            )

        return await provider.query_adsets(campaign_id, filters)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch ad sets: {str(e)}"
        )
