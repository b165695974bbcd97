"""elliptic_curves package.

This package provides modules for arithmetic over elliptic curves in Short-Weierstrass form defined over prime
fields.

Modules:
    - curve_parameters: Contains the CurveParameters class and the catalog of supported curves (P-256, secp256k1,
    P-521).
    - point: Contains the Point class implementing negation, addition, doubling, scalar multiplication and equality
    in E(F_p).

Usage example:
    >>> from ecarith.elliptic_curves.curve_parameters import SECP256K1
    >>> from ecarith.elliptic_curves.point import Point
    >>>
    >>> G = Point.generator(SECP256K1)
    >>> public_key = G * 0xC0FFEE
    >>> print(public_key)
"""
