import pytest

from bodymetrics.colors import RGB
from bodymetrics.models import MeasurementEntry
from bodymetrics.selectors import FOCUS_WINDOW, compute_domain, gradient_stops, select_window


def entries_with(values, part="Chest"):
    return [
        MeasurementEntry(id=str(i), date=f"2024-02-{i + 1:02d}", values={part: v})
        for i, v in enumerate(values)
    ]


def goals(**targets):
    return lambda part: targets.get(part, 0.0)


class TestSelectWindow:
    def test_focus_view_keeps_last_thirteen(self):
        entries = entries_with(range(20))
        window = select_window(entries, zoomed_out=False)
        assert len(window) == FOCUS_WINDOW == 13
        assert window == entries[7:]

    def test_short_history_is_returned_whole(self):
        entries = entries_with(range(5))
        assert select_window(entries, zoomed_out=False) == entries

    def test_zoomed_out_returns_everything(self):
        entries = entries_with(range(20))
        assert select_window(entries, zoomed_out=True) == entries

    def test_empty_history(self):
        assert select_window([], zoomed_out=False) == []
        assert select_window([], zoomed_out=True) == []

    def test_input_is_not_mutated(self):
        entries = entries_with(range(20))
        before = list(entries)
        window = select_window(entries, zoomed_out=True)
        window.pop()
        assert entries == before


class TestComputeDomain:
    def test_flat_series_gets_fixed_padding(self):
        entries = entries_with([30, 30, 30])
        assert compute_domain(entries, {"Chest"}, goals(Chest=30)) == (28, 32)

    def test_values_and_goal_are_padded_by_fifteen_percent(self):
        entries = entries_with([10, 20])
        low, high = compute_domain(entries, {"Chest"}, goals(Chest=30))
        assert low == pytest.approx(7)
        assert high == pytest.approx(33)

    def test_empty_selection_is_auto(self):
        assert compute_domain(entries_with([1, 2]), set(), goals(Chest=3)) is None

    def test_no_entries_is_auto(self):
        assert compute_domain([], {"Chest"}, goals(Chest=3)) is None

    def test_missing_values_are_skipped_not_zeroed(self):
        entries = entries_with([40, 42]) + entries_with([33], part="Waist")
        low, high = compute_domain(entries, ["Chest"], goals(Chest=44))
        assert low == pytest.approx(40 - 0.6)
        assert high == pytest.approx(44 + 0.6)

    def test_goal_counts_even_without_matching_values(self):
        entries = entries_with([40, 42])
        low, high = compute_domain(entries, ["Chest", "Waist"], goals(Chest=44, Waist=32))
        # span 32..44 -> padding 1.8
        assert low == pytest.approx(30.2)
        assert high == pytest.approx(45.8)

    def test_lower_bound_may_go_negative(self):
        entries = entries_with([0, 1], part="Body Fat %")
        low, _ = compute_domain(entries, ["Body Fat %"], goals(**{"Body Fat %": 2}))
        assert low < 0

    def test_deterministic(self):
        entries = entries_with([12.3, 14.1, 13.7])
        results = {compute_domain(entries, ["Chest"], goals(Chest=16)) for _ in range(5)}
        assert len(results) == 1


def test_gradient_stops_span_zero_to_one():
    entries = entries_with([30, 37, 44])
    stops = gradient_stops(entries, "Chest", 44)
    assert [offset for offset, _ in stops] == [0.0, 0.5, 1.0]
    assert stops[0][1] == RGB(255, 0, 0)
    assert stops[-1][1] == RGB(255, 255, 255)


def test_gradient_stops_single_entry():
    stops = gradient_stops(entries_with([44]), "Chest", 44)
    assert stops == [(0.0, RGB(255, 255, 255))]
