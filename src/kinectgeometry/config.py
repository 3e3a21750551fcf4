"""
Configuration & Constants
=========================
This module serves as the central registry for global constants and the
normalization switch.

Why is this file needed?
------------------------
1. Parity: Recorded motion-capture sessions were processed with a vector
   length formula that squared X twice and ignored Y. Reproducing those
   numbers requires the old formula, everything else wants the Euclidean one.
2. Single source: Tolerances used by the validation helpers live here instead
   of being scattered as literals.

Exports:
    NormalizationMode: Enum of the supported vector length formulas.
    DEFAULT_TOLERANCE (float): Zero threshold for the validation helpers.
    NORMALIZATION_ENV_VAR (str): Environment variable selecting the mode.
"""
from __future__ import annotations

import logging
import os
from enum import StrEnum
from typing import Optional, Union

from kinectgeometry.errors import ConfigurationError

logger = logging.getLogger(__name__)


class NormalizationMode(StrEnum):
    EUCLIDEAN = "euclidean"  # sqrt(x² + y² + z²)
    LEGACY = "legacy"  # sqrt(x² + x² + z²)


# Global Constants
DEFAULT_TOLERANCE: float = 1e-9
NORMALIZATION_ENV_VAR: str = "KINECTGEOMETRY_NORMALIZATION"
DEFAULT_NORMALIZATION_MODE: NormalizationMode = NormalizationMode.EUCLIDEAN


def get_normalization_mode() -> NormalizationMode:
    """
    Returns the process-wide normalization mode.

    Read from the environment on every call so tests and long-running
    applications can switch it without reloading the module. Unknown values
    are reported and ignored.
    """
    raw = os.environ.get(NORMALIZATION_ENV_VAR)
    if not raw:
        return DEFAULT_NORMALIZATION_MODE

    try:
        return NormalizationMode(raw.strip().lower())
    except ValueError:
        logger.warning(
            f"Ignoring {NORMALIZATION_ENV_VAR}='{raw}', "
            f"expected one of {[m.value for m in NormalizationMode]}"
        )
        return DEFAULT_NORMALIZATION_MODE


def resolve_normalization_mode(
    mode: Optional[Union[NormalizationMode, str]] = None
) -> NormalizationMode:
    """
    Resolves an explicit per-call mode, falling back to the configured one.

    Args:
        mode: A NormalizationMode, its string value, or None.

    Returns:
        The NormalizationMode to use.

    Raises:
        ConfigurationError: If an explicit string does not name a mode.
    """
    if mode is None:
        return get_normalization_mode()
    if isinstance(mode, NormalizationMode):
        return mode
    try:
        return NormalizationMode(str(mode).strip().lower())
    except ValueError as e:
        raise ConfigurationError(f"Unknown normalization mode: {mode!r}") from e
