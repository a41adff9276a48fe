"""
Unit tests for loading data into the store.
"""
import pytest
import asyncio
from unittest.mock import AsyncMock
from analysehub.errors import DataFetchError
from analysehub.models import (
    AdsResponse,
    AdsetsResponse,
    CampaignsResponse,
    DashboardData,
    MetricsResponse,
)
from analysehub.services import LOAD_ERROR_MESSAGE, DashboardLoader, DataProvider
from analysehub.state import DashboardStore, View


class InMemoryProvider(DataProvider):
    """Serves a ``DashboardData`` instance; ``failures`` names collections that raise."""

    def __init__(self, data: DashboardData, failures=(), delay: float = 0):
        self.data = data
        self.failures = set(failures)
        self.delay = delay

    async def _serve(self, source, response):
        if self.delay:
            await asyncio.sleep(self.delay)
        if source in self.failures:
            raise DataFetchError("unavailable", source=source)
        return response

    async def get_campaigns(self):
        return await self._serve("campaigns", CampaignsResponse(campaigns=self.data.campaigns))

    async def get_adsets(self):
        return await self._serve("adsets", AdsetsResponse(adsets=self.data.adsets))

    async def get_ads(self):
        return await self._serve("ads", AdsResponse(ads=self.data.ads))

    async def get_metrics(self):
        return await self._serve("metrics", MetricsResponse(metrics=self.data.metrics))

    async def query_campaigns(self, filters=None):
        return await self.get_campaigns()

    async def query_adsets(self, campaign_id, filters=None):
        return AdsetsResponse(adsets={campaign_id: self.data.adsets.get(campaign_id, [])})

    async def query_ads(self, adset_id, filters=None):
        return AdsResponse(ads={adset_id: self.data.ads.get(adset_id, [])})

    def get_platform_name(self):
        return "memory"


@pytest.fixture
def empty_store(clock):
    return DashboardStore(clock=clock)


@pytest.mark.unit
class TestDashboardLoader:
    """Test parallel loading, fallback and error message lifecycle."""

    @pytest.mark.asyncio
    async def test_load_success(self, empty_store, sample_data):
        """Test a successful load installs every collection."""
        loader = DashboardLoader(empty_store, InMemoryProvider(sample_data))

        loaded = await loader.load()

        state = empty_store.state
        assert loaded is True
        assert [c.id for c in state.data.campaigns] == ["c1", "c2"]
        assert set(state.data.adsets) == {"c1", "c2"}
        assert set(state.data.ads) == {"as1", "as2", "as3"}
        assert len(state.data.metrics) == 15
        assert state.is_loading is False
        assert state.error_message is None

    @pytest.mark.asyncio
    async def test_load_sets_loading_flag_first(self, empty_store, sample_data):
        """Test the store reports loading before data arrives."""
        seen = []
        empty_store.subscribe(lambda event: seen.append(empty_store.state.is_loading))
        loader = DashboardLoader(empty_store, InMemoryProvider(sample_data))

        await loader.load()

        assert seen == [True, False]

    @pytest.mark.asyncio
    async def test_all_fetches_fail_uses_fallback(self, empty_store, sample_data):
        """Test a failed load installs the single-item fallback and an error message."""
        provider = InMemoryProvider(sample_data, failures={"campaigns", "adsets", "ads"})
        loader = DashboardLoader(empty_store, provider, error_timeout_seconds=60)

        loaded = await loader.load()

        state = empty_store.state
        assert loaded is False
        assert [c.id for c in state.data.campaigns] == ["camp1"]
        assert [a.id for a in state.data.adsets["camp1"]] == ["adset1"]
        assert [a.id for a in state.data.ads["adset1"]] == ["ad1"]
        assert state.error_message == LOAD_ERROR_MESSAGE
        assert state.is_loading is False

        await loader.close()

    @pytest.mark.asyncio
    async def test_single_failure_aborts_whole_load(self, store, sample_data):
        """Test one failing collection prevents any partial population."""
        provider = InMemoryProvider(sample_data, failures={"metrics"})
        loader = DashboardLoader(store, provider, error_timeout_seconds=60)

        await loader.load()

        assert [c.id for c in store.state.data.campaigns] == ["camp1"]

        await loader.close()

    @pytest.mark.asyncio
    async def test_error_cleared_on_acknowledge(self, empty_store, sample_data):
        """Test acknowledging the error clears it immediately."""
        provider = InMemoryProvider(sample_data, failures={"ads"})
        loader = DashboardLoader(empty_store, provider, error_timeout_seconds=60)
        await loader.load()

        loader.acknowledge_error()
        await asyncio.sleep(0)

        assert empty_store.state.error_message is None
        assert loader.error_task is None

    @pytest.mark.asyncio
    async def test_error_cleared_after_timeout(self, empty_store, sample_data):
        """Test the error message disappears on its own."""
        provider = InMemoryProvider(sample_data, failures={"ads"})
        loader = DashboardLoader(empty_store, provider, error_timeout_seconds=0.01)
        await loader.load()
        assert empty_store.state.error_message == LOAD_ERROR_MESSAGE

        await asyncio.sleep(0.1)

        assert empty_store.state.error_message is None

    @pytest.mark.asyncio
    async def test_fetch_timeout(self, empty_store, sample_data):
        """Test a slow provider is treated as a failed load."""
        provider = InMemoryProvider(sample_data, delay=1.0)
        loader = DashboardLoader(empty_store, provider, error_timeout_seconds=60, fetch_timeout_seconds=0.01)

        loaded = await loader.load()

        assert loaded is False
        assert empty_store.state.error_message == LOAD_ERROR_MESSAGE

        await loader.close()

    @pytest.mark.asyncio
    async def test_fetch_all_raises_on_timeout(self, empty_store, sample_data):
        """Test the batched fetch reports timeouts as DataFetchError."""
        provider = InMemoryProvider(sample_data, delay=1.0)
        loader = DashboardLoader(empty_store, provider, fetch_timeout_seconds=0.01)

        with pytest.raises(DataFetchError):
            await loader.fetch_all()

    @pytest.mark.asyncio
    async def test_fetches_run_concurrently(self, empty_store, sample_data):
        """Test the four fetches are awaited together."""
        provider = InMemoryProvider(sample_data, delay=0.2)
        loader = DashboardLoader(empty_store, provider, fetch_timeout_seconds=0.5)

        # Sequential fetches would need 0.8s and trip the timeout
        assert await loader.load() is True

    @pytest.mark.asyncio
    async def test_unexpected_exception_uses_fallback(self, empty_store):
        """Test non-fetch errors from a provider also take the fallback path."""
        provider = AsyncMock(spec=DataProvider)
        provider.get_campaigns.side_effect = ValueError("bad")
        provider.get_platform_name = lambda: "mock"
        loader = DashboardLoader(empty_store, provider, error_timeout_seconds=60)

        assert await loader.load() is False
        assert [c.id for c in empty_store.state.data.campaigns] == ["camp1"]

        await loader.close()

    @pytest.mark.asyncio
    async def test_cancelled_load_clears_loading_flag(self, store, sample_data):
        """Test cancelling a load mid-fetch keeps the data and ends loading."""
        loader = DashboardLoader(store, InMemoryProvider(sample_data, delay=1.0))
        task = asyncio.create_task(loader.load())
        await asyncio.sleep(0.01)
        assert store.state.is_loading is True

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        state = store.state
        assert state.is_loading is False
        assert state.error_message is None
        assert [c.id for c in state.data.campaigns] == ["c1", "c2"]
        assert loader.error_task is None

    @pytest.mark.asyncio
    async def test_load_notifies_all_views(self, empty_store, sample_data):
        """Test a completed load re-renders everything."""
        events = []
        empty_store.subscribe(events.append)
        loader = DashboardLoader(empty_store, InMemoryProvider(sample_data))

        await loader.load()

        assert events[-1].views == frozenset(View)


@pytest.mark.unit
class TestReloadPruning:
    """Test that replacing the collections drops stale focus and selections."""

    def test_reload_keeps_valid_selection(self, store, sample_data):
        """Test a reload with the same data keeps focus and selections."""
        store.select_campaign("c1")
        store.select_adset("as1")
        store.toggle_ad_selection("a1", True)
        store.toggle_campaign_selection("c2", True)

        state = store.load_data(sample_data)

        assert state.selected_adset_id == "as1"
        assert state.selected_ads == {"a1"}
        assert state.selected_campaigns == {"c2"}

    def test_reload_drops_missing_campaign(self, store, sample_data):
        """Test focus and child selections go when the campaign disappears."""
        store.select_campaign("c1")
        store.select_adset("as1")
        store.toggle_ad_selection("a1", True)
        store.toggle_campaign_selection("c1", True)

        reduced = sample_data.model_copy(update={
            "campaigns": [c for c in sample_data.campaigns if c.id != "c1"],
        })
        state = store.load_data(reduced)

        assert state.selected_campaign_id is None
        assert state.selected_adset_id is None
        assert state.selected_ads == set()
        assert state.selected_campaigns == set()

    def test_reload_drops_missing_adset(self, store, sample_data):
        """Test the ad set focus falls back to its campaign when the ad set disappears."""
        store.select_campaign("c1")
        store.select_adset("as1")
        store.toggle_ad_selection("a1", True)

        reduced = sample_data.model_copy(update={
            "adsets": {**sample_data.adsets, "c1": [a for a in sample_data.adsets["c1"] if a.id != "as1"]},
        })
        state = store.load_data(reduced)

        assert state.selected_campaign_id == "c1"
        assert state.selected_adset_id is None
        assert state.selected_ads == set()

    def test_reload_drops_missing_metric(self, store, sample_data):
        """Test selected metrics missing from the new catalog are removed."""
        store.toggle_metric_selection("ctr", True)
        store.toggle_metric_selection("roas", True)

        reduced = sample_data.model_copy(update={
            "metrics": [m for m in sample_data.metrics if m.id != "roas"],
        })
        state = store.load_data(reduced)

        assert state.selected_metrics == {"ctr"}
