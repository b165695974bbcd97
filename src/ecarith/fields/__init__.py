"""fields package.

This package provides the finite field arithmetic consumed by the elliptic curve modules.

Modules:
    - prime_field: Reduction, modular inversion and hexadecimal conversion for elements of F_p, represented as
    Python integers.

Usage example:
    >>> from ecarith.fields.prime_field import mod_inverse
    >>> mod_inverse(3, 11)
    4
"""
