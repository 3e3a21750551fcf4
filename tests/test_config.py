import logging

import pytest

from kinectgeometry import ConfigurationError, NormalizationMode
from kinectgeometry.config import (
    NORMALIZATION_ENV_VAR,
    get_normalization_mode,
    resolve_normalization_mode,
)


def test_default_mode_is_euclidean():
    assert get_normalization_mode() is NormalizationMode.EUCLIDEAN


def test_mode_from_environment_is_case_insensitive(monkeypatch):
    monkeypatch.setenv(NORMALIZATION_ENV_VAR, " LEGACY ")
    assert get_normalization_mode() is NormalizationMode.LEGACY


def test_invalid_environment_value_is_logged_and_ignored(monkeypatch, caplog):
    monkeypatch.setenv(NORMALIZATION_ENV_VAR, "bogus")
    with caplog.at_level(logging.WARNING, logger="kinectgeometry.config"):
        assert get_normalization_mode() is NormalizationMode.EUCLIDEAN
    assert "bogus" in caplog.text


@pytest.mark.parametrize("mode, expected", [
    (None, NormalizationMode.EUCLIDEAN),
    (NormalizationMode.LEGACY, NormalizationMode.LEGACY),
    ("legacy", NormalizationMode.LEGACY),
    ("Euclidean", NormalizationMode.EUCLIDEAN),
])
def test_resolve_normalization_mode(mode, expected):
    assert resolve_normalization_mode(mode) is expected


def test_resolve_rejects_unknown_mode():
    with pytest.raises(ConfigurationError):
        resolve_normalization_mode("fast")


def test_resolve_strips_whitespace_like_environment_lookup(monkeypatch):
    monkeypatch.setenv(NORMALIZATION_ENV_VAR, " legacy ")
    assert resolve_normalization_mode(" legacy ") is get_normalization_mode() is NormalizationMode.LEGACY


def test_mode_behaves_as_its_string_value():
    assert str(NormalizationMode.LEGACY) == "legacy"
    assert f"{NormalizationMode.EUCLIDEAN}" == "euclidean"
