"""Exceptions raised by ecarith."""


class CurveConfigurationError(ValueError):
    """The curve selection is empty, ambiguous or names an unknown curve."""


class CurveMismatchError(ValueError):
    """Two points bound to different curves were combined."""
