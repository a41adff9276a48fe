"""
Unit tests for date range handling.
"""
import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError
from analysehub.state import DashboardStore, View


@pytest.mark.unit
class TestDateRange:
    """Test default range, presets and explicit ranges."""

    def test_default_range_is_last_30_days(self, store, clock):
        """Test the initial range ends now and spans 30 days."""
        date_range = store.state.date_range

        assert date_range.end == clock.now
        assert date_range.start == clock.now - timedelta(days=30)

    def test_default_range_length_is_configurable(self, clock):
        """Test the initial range honours a custom length."""
        store = DashboardStore(clock=clock, default_range_days=7)

        assert store.state.date_range.end - store.state.date_range.start == timedelta(days=7)

    def test_apply_preset(self, store, clock):
        """Test a preset ends now and starts ``days`` before."""
        state = store.apply_preset(7)

        assert state.date_range.end == clock.now
        assert state.date_range.start == clock.now - timedelta(days=7)

    def test_preset_is_not_memoized(self, store, clock):
        """Test re-applying a preset later moves both bounds."""
        first = store.apply_preset(7).date_range
        clock.advance(hours=1)

        second = store.apply_preset(7).date_range

        assert second.end == first.end + timedelta(hours=1)
        assert second.start == first.start + timedelta(hours=1)

    def test_set_date_range_replaces_wholesale(self, store):
        """Test an explicit range replaces both bounds."""
        start = datetime(2026, 1, 1)
        end = datetime(2026, 1, 31)

        state = store.set_date_range(start, end)

        assert state.date_range.start == start
        assert state.date_range.end == end

    def test_inverted_range_is_accepted(self, store):
        """Test start after end is stored as given."""
        start = datetime(2026, 2, 1)
        end = datetime(2026, 1, 1)

        state = store.set_date_range(start, end)

        assert state.date_range.start == start
        assert state.date_range.end == end

    def test_date_change_notifies_date_view(self, store, events):
        """Test date changes re-render the date display and the lists."""
        store.apply_preset(14)

        assert View.DATE in events[-1].views
        assert View.CAMPAIGNS in events[-1].views

    def test_date_change_keeps_selection(self, store):
        """Test changing dates does not touch focus or selections."""
        store.select_campaign("c1")
        store.toggle_metric_selection("ctr", True)

        state = store.apply_preset(90)

        assert state.selected_campaign_id == "c1"
        assert state.selected_metrics == {"ctr"}

    def test_mixed_timezone_bounds_are_aligned(self, store):
        """Test a naive bound next to an aware one is read as UTC."""
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)

        state = store.set_date_range(start, datetime(2026, 1, 31))

        assert state.date_range.start == start
        assert state.date_range.end == datetime(2026, 1, 31, tzinfo=timezone.utc)

    def test_mixed_timezone_inverted_range(self, store):
        """Test bounds of mixed awareness can still be compared."""
        state = store.set_date_range(datetime(2026, 2, 1), datetime(2026, 1, 1, tzinfo=timezone.utc))

        assert state.date_range.start > state.date_range.end

    def test_preset_beyond_limit_is_rejected(self, store, events):
        """Test an out-of-range preset fails validation and leaves the range alone."""
        before = store.state.date_range

        with pytest.raises(ValidationError):
            store.apply_preset(1_000_000)

        assert store.state.date_range == before
        assert events == []

    def test_longest_preset(self, store, clock):
        """Test the largest accepted preset still produces a range."""
        state = store.apply_preset(36500)

        assert state.date_range.start == clock.now - timedelta(days=36500)
