"""
Data provider backed by static JSON fixture files.
"""
import asyncio
import json
import logging
from pathlib import Path
from typing import Optional, Type, TypeVar
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


class StaticFileProvider(DataProvider):
    """
    Reads ``campaigns.json``, ``adsets.json``, ``ads.json`` and ``metrics.json``
    from a directory.

    Files are re-read on every call so a reload picks up edits. The fixtures
    carry no dates, so the parametrized queries only scope by parent id.
    """

    FILES = {
        "campaigns": "campaigns.json",
        "adsets": "adsets.json",
        "ads": "ads.json",
        "metrics": "metrics.json",
    }

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    async def _read(self, source: str, model: Type[ResponseT]) -> ResponseT:
        path = self.data_dir / self.FILES[source]
        logger.debug(f"Reading {source} fixture from {path}")
        try:
            raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as e:
            raise DataFetchError(f"Could not read {path}: {e}", source=source) from e

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DataFetchError(f"Malformed JSON in {path.name}: {e}", source=source) from e

        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DataFetchError(f"Unexpected payload in {path.name}: {e}", source=source) from e

    async def get_campaigns(self) -> CampaignsResponse:
        return await self._read("campaigns", CampaignsResponse)

    async def get_adsets(self) -> AdsetsResponse:
        return await self._read("adsets", AdsetsResponse)

    async def get_ads(self) -> AdsResponse:
        return await self._read("ads", AdsResponse)

    async def get_metrics(self) -> MetricsResponse:
        return await self._read("metrics", MetricsResponse)

    async def query_campaigns(self, filters: Optional[FilterPayload] = None) -> CampaignsResponse:
        return await self.get_campaigns()

    async def query_adsets(self, campaign_id: str, filters: Optional[FilterPayload] = None) -> AdsetsResponse:
        adsets = await self.get_adsets()
        return AdsetsResponse(adsets={campaign_id: adsets.adsets.get(campaign_id, [])})

    async def query_ads(self, adset_id: str, filters: Optional[FilterPayload] = None) -> AdsResponse:
        ads = await self.get_ads()
        return AdsResponse(ads={adset_id: ads.ads.get(adset_id, [])})

    def get_platform_name(self) -> str:
        return "static"
