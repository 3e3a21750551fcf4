import pytest

from kinectgeometry.config import NORMALIZATION_ENV_VAR


@pytest.fixture(autouse=True)
def default_normalization(monkeypatch):
    """Every test starts from the default (Euclidean) normalization."""
    monkeypatch.delenv(NORMALIZATION_ENV_VAR, raising=False)
