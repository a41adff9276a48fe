from abc import ABC, abstractmethod
from typing import Optional
from analysehub.models import (
    AdsResponse,
    AdsetsResponse,
    CampaignsResponse,
    FilterPayload,
    MetricsResponse,
)


class DataProvider(ABC):
    """
    Abstract base class for dashboard data sources.

    Today the data comes from static fixture files; the same interface is
    meant to be backed by parametrized API calls without the store or the
    loader noticing the difference.

    Implementations raise ``DataFetchError`` for any failure (I/O, HTTP,
    malformed payloads).
    """

    @abstractmethod
    async def get_campaigns(self) -> CampaignsResponse:
        """
        Retrieve every campaign.

        Returns:
            CampaignsResponse: Ordered campaign list
        """
        pass

    @abstractmethod
    async def get_adsets(self) -> AdsetsResponse:
        """
        Retrieve every ad set.

        Returns:
            AdsetsResponse: Ad sets keyed by campaign id
        """
        pass

    @abstractmethod
    async def get_ads(self) -> AdsResponse:
        """
        Retrieve every ad.

        Returns:
            AdsResponse: Ads keyed by ad set id
        """
        pass

    @abstractmethod
    async def get_metrics(self) -> MetricsResponse:
        """
        Retrieve the metric catalog.

        Returns:
            MetricsResponse: Metrics the user can choose from
        """
        pass

    @abstractmethod
    async def query_campaigns(self, filters: Optional[FilterPayload] = None) -> CampaignsResponse:
        """
        Retrieve campaigns scoped to ``filters``.

        Args:
            filters: Date range and selections to scope the request to

        Returns:
            CampaignsResponse: Campaigns matching the filter
        """
        pass

    @abstractmethod
    async def query_adsets(self, campaign_id: str, filters: Optional[FilterPayload] = None) -> AdsetsResponse:
        """
        Retrieve the ad sets of one campaign.

        Args:
            campaign_id: Parent campaign
            filters: Date range and selections to scope the request to

        Returns:
            AdsetsResponse: Mapping with a single ``campaign_id`` key
        """
        pass

    @abstractmethod
    async def query_ads(self, adset_id: str, filters: Optional[FilterPayload] = None) -> AdsResponse:
        """
        Retrieve the ads of one ad set.

        Args:
            adset_id: Parent ad set
            filters: Date range and selections to scope the request to

        Returns:
            AdsResponse: Mapping with a single ``adset_id`` key
        """
        pass

    @abstractmethod
    def get_platform_name(self) -> str:
        """
        Get the name of the data source.

        Returns:
            str: Provider identifier (e.g., 'static', 'http')
        """
        pass
