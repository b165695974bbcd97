"""Process-wide selection of the active elliptic curve.

Points constructed without an explicit curve are bound to the active curve. Exactly one curve is active at any
time. It is chosen either explicitly with `select_curve`, or on first use from the `ECARITH_CURVE` environment
variable, falling back to `DEFAULT_CURVE_NAME`.

Usage example:
    >>> from ecarith import config
    >>> config.select_curve("secp256k1")
    >>> config.active_curve().name
    'secp256k1'
"""

import logging
import os

from ecarith.elliptic_curves.curve_parameters import CurveParameters, get_curve
from ecarith.util.exceptions import CurveConfigurationError

logger = logging.getLogger(__name__)

ENV_VAR = "ECARITH_CURVE"
DEFAULT_CURVE_NAME = "P-256"

_active_curve: CurveParameters | None = None


def select_curve(*names: str) -> CurveParameters:
    """Make the curve registered under the single name in `names` the active curve.

    Args:
        *names (str): The curve selection. Exactly one name must be given.

    Returns:
        The parameters of the selected curve.

    Raises:
        CurveConfigurationError: If no name or more than one name is given, or if the name is unknown.
    """
    global _active_curve  # noqa: PLW0603

    if len(names) != 1:
        msg = f"Exactly one curve must be selected: selection: {list(names)}"
        raise CurveConfigurationError(msg)
    curve = get_curve(names[0])
    _active_curve = curve
    logger.info("Active curve set to %s", curve.name)
    return curve


def selection_from_environment() -> tuple[str, ...]:
    """Return the curve selection found in `ECARITH_CURVE`, or the default one if the variable is unset.

    The variable holds a comma-separated list so that an ambiguous selection is reported rather than guessed.
    """
    value = os.environ.get(ENV_VAR)
    if value is None:
        return (DEFAULT_CURVE_NAME,)
    return tuple(name.strip() for name in value.split(",") if name.strip())


def active_curve() -> CurveParameters:
    """Return the active curve, initialising the selection on first use."""
    if _active_curve is None:
        return select_curve(*selection_from_environment())
    return _active_curve


def reset() -> None:
    """Forget the current selection. The next call to `active_curve` initialises it again."""
    global _active_curve  # noqa: PLW0603

    _active_curve = None
