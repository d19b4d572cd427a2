import pytest

from tempmap.core.layout import Layout, Margin
from tempmap.data.loader import Dataset, Observation

SAMPLE_PAYLOAD = {
    "baseTemperature": 8.66,
    "monthlyVariance": [
        {"year": 1753, "month": 1, "variance": -1.366},
        {"year": 1753, "month": 2, "variance": -2.223},
        {"year": 1754, "month": 1, "variance": 0.5},
        {"year": 1760, "month": 12, "variance": 2.0},
        {"year": 1760, "month": 6, "variance": -0.25},
    ],
}


@pytest.fixture
def layout():
    return Layout(width=1000, height=500, margin=Margin(top=40, left=100, right=40, bottom=120))


@pytest.fixture
def dataset():
    return Dataset.from_json(SAMPLE_PAYLOAD)


@pytest.fixture
def single_dataset():
    return Dataset(
        base_temperature=8.66,
        monthly_variance=(Observation(year=1753, month=1, variance=-6.968),),
    )


@pytest.fixture
def sample_payload():
    return SAMPLE_PAYLOAD
