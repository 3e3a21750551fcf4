"""
Logging Configuration
=====================
Opt-in log output for applications embedding the geometry layer.

The geometry modules only emit records (DEBUG for degenerate normalizations
and axis construction, WARNING for a bad environment setting). Nothing is
printed until the host application, e.g. a skeleton-tracking loop, calls
`setup_logging`.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMESPACE = "kinectgeometry"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attaches console (and optionally file) output to the 'kinectgeometry' logger.

    Calling it again replaces the handlers from the previous call, so a
    tracking session can raise the level to DEBUG mid-run without duplicate
    lines.

    Args:
        level: Threshold for both the logger and its handlers.
        log_file: Optional path; the file is truncated on each call.

    Returns:
        The 'kinectgeometry' logger, for callers that want to add handlers.
    """
    geometry_logger = logging.getLogger(LOGGER_NAMESPACE)
    geometry_logger.setLevel(level)
    geometry_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        geometry_logger.addHandler(handler)

    geometry_logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return geometry_logger
