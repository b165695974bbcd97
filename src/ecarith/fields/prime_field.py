"""Arithmetic helpers in the prime field F_p.

Field elements are plain Python integers. This module collects the few operations the elliptic curve
arithmetic needs on top of the built-in `int`: reduction, modular inversion and hexadecimal conversion.
"""


def reduce(value: int, modulus: int) -> int:
    """Return the representative of `value` in [0, modulus)."""
    return value % modulus


def mod_inverse(value: int, modulus: int) -> int:
    """Compute the inverse of `value` modulo `modulus`.

    Args:
        value (int): The element to invert. It is reduced modulo `modulus` first.
        modulus (int): The characteristic of the field.

    Returns:
        The unique `v` in [1, modulus) such that `value * v = 1 mod modulus`.

    Raises:
        ZeroDivisionError: If `value` is zero modulo `modulus`.
        ValueError: If `value` is not coprime to `modulus` (only possible if `modulus` is not prime).
    """
    value %= modulus
    if value == 0:
        msg = f"Zero has no inverse modulo {modulus:#x}"
        raise ZeroDivisionError(msg)
    return pow(value, -1, modulus)


def to_hex(value: int) -> str:
    """Render `value` as a lower-case hexadecimal string without prefix.

    Example:
        >>> to_hex(255)
        'ff'
        >>> to_hex(0)
        '0'
    """
    return format(value, "x")


def from_hex(hexstr: str) -> int:
    """Parse a hexadecimal string, with or without the `0x` prefix.

    Example:
        >>> from_hex("ff")
        255
        >>> from_hex("0x01ff")
        511
    """
    return int(hexstr, 16)
