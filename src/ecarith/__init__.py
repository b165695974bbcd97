"""ecarith: A Python package for point arithmetic on elliptic curves over prime fields.

The `ecarith` package implements the group law of short-Weierstrass elliptic curves y^2 = x^3 + a*x + b over F_p:
point negation, addition, doubling, scalar multiplication and equality. These operations are the arithmetic
primitive underlying elliptic curve cryptography (key generation, ECDH, ECDSA). Curves are taken from a fixed
catalog of standard curves (P-256, secp256k1, P-521), one of which is active process-wide.

Usage example:
    Compute the public point associated to a scalar on P-256:

    >>> from ecarith import config
    >>> from ecarith.elliptic_curves.point import Point
    >>>
    >>> config.select_curve("P-256")
    >>> G = Point.generator()
    >>> Q = G * 0x2A
    >>> Q + (-Q) == Point()
    True
"""
