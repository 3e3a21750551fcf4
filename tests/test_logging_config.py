import logging

import pytest

from kinectgeometry import Vector3D, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("kinectgeometry")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_logging_is_idempotent(package_logger):
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_writes_file(package_logger, tmp_path):
    log_file = tmp_path / "geometry.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))
    for handler in package_logger.handlers:
        handler.flush()
    assert "Logging initialized at INFO." in log_file.read_text(encoding="utf-8")
    for handler in package_logger.handlers:
        handler.close()


def test_zero_vector_normalization_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="kinectgeometry"):
        Vector3D.normalize_vector(Vector3D())
    assert "zero-length" in caplog.text


def test_setup_logging_reports_level(package_logger, caplog):
    with caplog.at_level(logging.DEBUG, logger="kinectgeometry"):
        setup_logging(level=logging.DEBUG)
    assert "Logging initialized at DEBUG." in caplog.text
