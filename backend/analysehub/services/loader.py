"""
Loads dashboard data into the store.
"""
import asyncio
import logging
from typing import Optional

from analysehub.errors import DataFetchError
from analysehub.models import DashboardData, fallback_data
from analysehub.services.base import DataProvider
from analysehub.state import DashboardStore

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load data. Please try again."


class DashboardLoader:
    """Fetches all collections in parallel and installs them in the store in one step."""

    def __init__(
        self,
        store: DashboardStore,
        provider: DataProvider,
        error_timeout_seconds: float = 5.0,
        fetch_timeout_seconds: Optional[float] = None,
    ):
        """
        Initialize the loader.

        Args:
            store: Store to populate
            provider: Source of campaigns, ad sets, ads and metrics
            error_timeout_seconds: How long a load error message stays before it is cleared
            fetch_timeout_seconds: Upper bound for the whole batched fetch (None = no limit)
        """
        self.store = store
        self.provider = provider
        self.error_timeout_seconds = error_timeout_seconds
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self.error_task: Optional[asyncio.Task] = None

    async def fetch_all(self) -> DashboardData:
        """Fetch the four collections concurrently. Any failure fails the whole batch."""
        batch = asyncio.gather(
            self.provider.get_campaigns(),
            self.provider.get_adsets(),
            self.provider.get_ads(),
            self.provider.get_metrics(),
        )

        try:
            if self.fetch_timeout_seconds is None:
                campaigns, adsets, ads, metrics = await batch
            else:
                campaigns, adsets, ads, metrics = await asyncio.wait_for(batch, self.fetch_timeout_seconds)
        except asyncio.TimeoutError as e:
            raise DataFetchError(f"Data load timed out after {self.fetch_timeout_seconds}s") from e

        return DashboardData(
            campaigns=campaigns.campaigns,
            adsets=adsets.adsets,
            ads=ads.ads,
            metrics=metrics.metrics,
        )

    async def load(self) -> bool:
        """
        Load (or reload) every collection.

        On failure the store receives the fallback dataset and a transient error
        message instead of a partial population.

        Returns:
            bool: True if the real data was loaded
        """
        self.store.start_loading()
        logger.info(f"Loading dashboard data from {self.provider.get_platform_name()} provider...")

        try:
            data = await self.fetch_all()
        except asyncio.CancelledError:
            logger.warning("Dashboard data load cancelled")
            self.store.cancel_loading()
            raise
        except Exception as e:
            logger.error(f"Failed to load dashboard data: {e}")
            self.store.fail_loading(LOAD_ERROR_MESSAGE, fallback=fallback_data())
            self._schedule_error_clear()
            return False

        self.store.load_data(data)
        logger.info(
            f"✓ Dashboard data loaded: {len(data.campaigns)} campaigns, "
            f"{len(data.adsets)} ad set groups, {len(data.ads)} ad groups, {len(data.metrics)} metrics"
        )
        return True

    def acknowledge_error(self):
        """Dismiss the current error message before its timeout."""
        self._cancel_error_clear()
        self.store.acknowledge_error()

    def _schedule_error_clear(self):
        self._cancel_error_clear()
        self.error_task = asyncio.create_task(self._clear_error_later())

    def _cancel_error_clear(self):
        if self.error_task and not self.error_task.done():
            self.error_task.cancel()
        self.error_task = None

    async def _clear_error_later(self):
        await asyncio.sleep(self.error_timeout_seconds)
        self.store.acknowledge_error()

    async def close(self):
        """Cancel the pending error timeout, if any."""
        task = self.error_task
        self._cancel_error_clear()
        if task:
            try:
                await task
            except asyncio.CancelledError:
                pass
