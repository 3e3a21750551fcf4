"""Exception types for kinectgeometry."""


class GeometryError(Exception):
    """Base class for all errors raised by this package."""
    pass


class ConfigurationError(GeometryError):
    """An explicit setting (e.g. a normalization mode) is not recognised."""
    pass


class DegenerateInputError(GeometryError):
    """
    A geometric configuration has no finite result.

    Raised only by the opt-in validation helpers; the core operations let
    non-finite values propagate instead.
    """
    def __init__(self, operation: str, detail: str = "", message: str = ""):
        self.operation = operation
        self.detail = detail
        if not message:
            if detail:
                message = f"Degenerate input in '{operation}': {detail}"
            else:
                message = f"Degenerate input in '{operation}'"
        super().__init__(message)
