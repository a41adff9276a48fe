"""
Data provider that talks to the dashboard data API over HTTP.
"""
import logging
from typing import Optional, Type, TypeVar
import httpx
from pydantic import BaseModel, ValidationError

from analysehub.errors import DataFetchError
from analysehub.models import (
    AdsResponse,
    AdsetsResponse,
    CampaignsResponse,
    FilterPayload,
    MetricsResponse,
)
from analysehub.services.base import DataProvider

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class HttpDataProvider(DataProvider):
    """
    Fetches hierarchy data from ``base_url``.

    Args:
        base_url: Root of the data API (e.g., 'http://localhost:8000')
        timeout: Per-request timeout in seconds
        client: Pre-configured client to use instead of creating one
    """

    def __init__(self, base_url: str, timeout: float = 30.0, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    async def _request(
        self,
        source: str,
        method: str,
        path: str,
        model: Type[ResponseT],
        filters: Optional[FilterPayload] = None,
    ) -> ResponseT:
        body = filters.model_dump(mode="json") if filters is not None else None

        try:
            if method == "POST":
                response = await self.client.post(path, json=body or {})
            else:
                response = await self.client.get(path)
        except httpx.TimeoutException as e:
            raise DataFetchError(f"Request to {path} timed out", source=source) from e
        except httpx.HTTPError as e:
            raise DataFetchError(f"Request to {path} failed: {e}", source=source) from e

        if response.status_code != 200:
            logger.error(f"Data API error: {response.status_code} - {response.text}")
            raise DataFetchError(f"{method} {path} returned {response.status_code}", source=source)

        try:
            return model.model_validate(response.json())
        except ValueError as e:
            # ValidationError subclasses ValueError; report it as a payload problem
            kind = "Unexpected payload" if isinstance(e, ValidationError) else "Malformed JSON"
            raise DataFetchError(f"{kind} from {path}: {e}", source=source) from e

    async def get_campaigns(self) -> CampaignsResponse:
        return await self._request("campaigns", "GET", "/api/campaigns", CampaignsResponse)

    async def get_adsets(self) -> AdsetsResponse:
        return await self._request("adsets", "GET", "/api/adsets", AdsetsResponse)

    async def get_ads(self) -> AdsResponse:
        return await self._request("ads", "GET", "/api/ads", AdsResponse)

    async def get_metrics(self) -> MetricsResponse:
        return await self._request("metrics", "GET", "/api/metrics", MetricsResponse)

    async def query_campaigns(self, filters: Optional[FilterPayload] = None) -> CampaignsResponse:
        return await self._request("campaigns", "POST", "/api/campaigns", CampaignsResponse, filters)

    async def query_adsets(self, campaign_id: str, filters: Optional[FilterPayload] = None) -> AdsetsResponse:
        return await self._request(
            "adsets", "POST", f"/api/campaigns/{campaign_id}/adsets", AdsetsResponse, filters
        )

    async def query_ads(self, adset_id: str, filters: Optional[FilterPayload] = None) -> AdsResponse:
        return await self._request("ads", "POST", f"/api/adsets/{adset_id}/ads", AdsResponse, filters)

    def get_platform_name(self) -> str:
        return "http"
