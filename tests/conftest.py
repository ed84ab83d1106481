import matplotlib
import pytest

matplotlib.use("Agg")

from bodymetrics.models import AppState, Goal, MeasurementEntry  # noqa: E402


@pytest.fixture
def sample_state() -> AppState:
    return AppState(
        entries=[
            MeasurementEntry("e1", "2024-01-01", {"Chest": 40.0, "Waist": 35.0, "Weight": 200.0}),
            MeasurementEntry("e3", "2024-01-03", {"Chest": 41.0, "Waist": 34.5, "Weight": 198.0}),
            MeasurementEntry("e5", "2024-01-05", {"Chest": 42.0, "Waist": 34.0, "Weight": 196.5}),
        ],
        goals=[Goal("Chest", 44.0), Goal("Waist", 32.0), Goal("Weight", 180.0)],
    )


@pytest.fixture
def store_path(tmp_path):
    """
    Path of the JSON store inside a fresh temporary directory.
    The parent directory does not exist yet.
    """
    return tmp_path / "data" / "body_metrics_pro_data.json"
