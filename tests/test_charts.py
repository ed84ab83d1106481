import pytest
from matplotlib.collections import LineCollection

from bodymetrics import charts
from bodymetrics.metrics import progress_frame
from bodymetrics.models import MeasurementEntry
from bodymetrics.selectors import compute_domain


@pytest.fixture
def figures():
    opened = []
    yield opened
    for fig in opened:
        charts.close(fig)


def test_format_tick():
    assert charts.format_tick("2024-03-07") == "03/07"


def test_main_chart_uses_computed_domain(sample_state, figures):
    parts = ["Chest", "Waist"]
    fig = charts.main_chart(sample_state.entries, parts, sample_state.goal_for)
    figures.append(fig)
    ax = fig.axes[0]
    assert ax.get_ylim() == pytest.approx(compute_domain(sample_state.entries, parts, sample_state.goal_for))
    lines = [c for c in ax.collections if isinstance(c, LineCollection)]
    assert len(lines) == 2
    assert [t.get_text() for t in ax.get_xticklabels()] == ["01/01", "01/03", "01/05"]


def test_main_chart_segments_whiten_at_goal(figures):
    entries = [
        MeasurementEntry("a", "2024-01-01", {"Waist": 40.0}),
        MeasurementEntry("b", "2024-01-02", {"Waist": 32.0}),
    ]
    fig = charts.main_chart(entries, ["Waist"], lambda part: 32.0)
    figures.append(fig)
    collection = next(c for c in fig.axes[0].collections if isinstance(c, LineCollection))
    assert tuple(collection.get_colors()[0][:3]) == (1.0, 1.0, 1.0)


def test_main_chart_without_selection_or_entries(figures):
    figures.append(charts.main_chart([], [], lambda part: 0.0))
    figures.append(charts.main_chart([], ["Chest"], lambda part: 44.0))


def test_area_chart(sample_state, figures):
    fig = charts.area_chart(sample_state.entries, "Weight", 180.0)
    figures.append(fig)
    texts = [t.get_text() for t in fig.axes[0].texts]
    assert "TARGET: 180 LBS" in texts


def test_area_chart_body_fat_label(figures):
    fig = charts.area_chart([], "Body Fat %", 12.0)
    figures.append(fig)
    assert "TARGET: 12%" in [t.get_text() for t in fig.axes[0].texts]


def test_progress_chart(sample_state, figures):
    fig = charts.progress_chart(progress_frame(sample_state))
    figures.append(fig)
    assert fig.axes[0].get_ylim() == (0, 110)
