"""Utility functions."""


def scalar_to_bits(scalar: int) -> list[bool]:
    """Convert a non-negative integer into its binary expansion, most significant bit first.

    The expansion of `0` is the empty list.

    Example:
        >>> scalar_to_bits(0)
        []
        >>> scalar_to_bits(1)
        [True]
        >>> scalar_to_bits(6)
        [True, True, False]
        >>> scalar_to_bits(9)
        [True, False, False, True]
    """
    if scalar < 0:
        msg = f"The scalar must be a non-negative integer: scalar: {scalar}"
        raise ValueError(msg)
    return [bool((scalar >> i) & 1) for i in reversed(range(scalar.bit_length()))]
