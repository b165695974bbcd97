"""Points of the elliptic curve E(F_p) and the group law."""

import logging
from typing import Self

from ecarith import config
from ecarith.elliptic_curves.curve_parameters import CurveParameters
from ecarith.fields.prime_field import mod_inverse, to_hex
from ecarith.util.exceptions import CurveMismatchError
from ecarith.util.utility_functions import scalar_to_bits

logger = logging.getLogger(__name__)


class Point:
    """A point of the elliptic curve E: y^2 = x^3 + a*x + b over F_p.

    Points are represented in affine coordinates P := (x, y), except for the point at infinity O, the identity
    element of the group, whose coordinates are ignored and conventionally set to (0, 0).

    Every finite point is bound to the `CurveParameters` it is defined over. The binding is a reference to the
    shared, immutable catalog entry. If no curve is passed at construction, the active curve of
    `ecarith.config` is used. The point at infinity is the identity for every curve, so its binding is optional.

    Membership of (x, y) in E is not validated: callers are expected to supply points on the curve, see
    `CurveParameters.is_on_curve`.

    Attributes:
        x (int): The x coordinate of the point (an element in F_p).
        y (int): The y coordinate of the point (an element in F_p).
        curve (CurveParameters | None): The curve the point is bound to.
        p (int): The characteristic of the field over which the bound curve is defined.

    Example:
        >>> from ecarith.elliptic_curves.curve_parameters import P256
        >>> G = Point.generator(P256)
        >>> G + (-G) == Point()
        True
        >>> G * 2 == G + G
        True
    """

    __slots__ = ("_x", "_y", "_infinity", "_curve")

    def __init__(self, x: int | None = None, y: int | None = None, curve: CurveParameters | None = None):
        """Initialise a point.

        `Point()` is the point at infinity. `Point(x, y)` is the finite point (x, y) bound to `curve`, or to the
        active curve if `curve` is `None`.

        Args:
            x (int | None): The x coordinate of the point, or `None` for the point at infinity.
            y (int | None): The y coordinate of the point, or `None` for the point at infinity.
            curve (CurveParameters | None): The curve the point is defined over. Defaults to the active curve for
                finite points.

        Raises:
            ValueError: If only one of the two coordinates is given.
        """
        if x is None and y is None:
            self._x = 0
            self._y = 0
            self._infinity = True
            self._curve = curve
            return
        if x is None or y is None:
            msg = f"Both coordinates of a finite point must be given: x: {x}, y: {y}"
            raise ValueError(msg)

        self._x = x
        self._y = y
        self._infinity = False
        self._curve = curve if curve is not None else config.active_curve()

    @classmethod
    def infinity(cls, curve: CurveParameters | None = None) -> Self:
        """Return the point at infinity, optionally bound to `curve`."""
        return cls(curve=curve)

    @classmethod
    def generator(cls, curve: CurveParameters | None = None) -> Self:
        """Return the generator (Gx, Gy) of `curve`, or of the active curve if `curve` is `None`."""
        curve = curve if curve is not None else config.active_curve()
        return cls(curve.Gx, curve.Gy, curve)

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def curve(self) -> CurveParameters | None:
        return self._curve

    @property
    def p(self) -> int:
        """The field modulus of the curve the point is bound to.

        Raises:
            ValueError: If the point is a point at infinity that is not bound to any curve.
        """
        if self._curve is None:
            msg = "The point at infinity is not bound to a curve"
            raise ValueError(msg)
        return self._curve.p

    def is_infinity(self) -> bool:
        """Return `True` if the point is the point at infinity."""
        return self._infinity

    def set_x(self, x: int) -> None:
        """Overwrite the x coordinate of a finite point.

        The setter is meant for low-level assembly of coordinates. The caller is responsible for leaving the
        point on its curve.
        """
        self._check_finite("x")
        self._x = x

    def set_y(self, y: int) -> None:
        """Overwrite the y coordinate of a finite point. See `set_x`."""
        self._check_finite("y")
        self._y = y

    def _check_finite(self, coordinate: str) -> None:
        if self._infinity:
            msg = f"Cannot set the {coordinate} coordinate of the point at infinity"
            raise ValueError(msg)

    def __copy__(self) -> Self:
        out = Point.__new__(Point)
        out._x = self._x
        out._y = self._y
        out._infinity = self._infinity
        out._curve = self._curve
        return out

    def __deepcopy__(self, memo: dict) -> Self:
        # Coordinates are ints and curves are frozen, so a shallow copy shares nothing mutable.
        return self.__copy__()

    def __neg__(self) -> Self:
        """Compute -P.

        For P = (x, y), -P = (x, p - y mod p). The point at infinity is its own negation.
        """
        if self._infinity:
            return self.__copy__()
        return Point(self._x, (self._curve.p - self._y) % self._curve.p, self._curve)

    def __add__(self, other: Self) -> Self:
        """Compute P + Q.

        Given P = (x1, y1) and Q = (x2, y2), the sum R = (x3, y3) is computed as follows:
            - if P = O, then R = Q; if Q = O, then R = P;
            - if P = Q, then R = 2P, see `_double`;
            - if x1 = x2 and P != Q, then Q = -P and R = O;
            - otherwise, with lambda = (y2 - y1) / (x2 - x1), we have x3 = lambda^2 - x1 - x2 and
              y3 = lambda * (x1 - x3) - y1.
        All the operations are performed modulo p.

        Args:
            other (Point): The point Q to add to P.

        Returns:
            A new point R = P + Q, bound to the curve of P.

        Raises:
            CurveMismatchError: If P and Q are finite points bound to different curves.
            ZeroDivisionError: If the coordinates of P and Q are not reduced modulo p and the case analysis above
                leads to an inversion of zero.
        """
        if not isinstance(other, Point):
            return NotImplemented
        if self._infinity:
            return other.__copy__()
        if other._infinity:
            return self.__copy__()
        if self._curve != other._curve:
            msg = f"Cannot add points on different curves: {self._curve} and {other._curve}"
            raise CurveMismatchError(msg)

        if self == other:
            return self._double()
        if self._x == other._x:
            return Point.infinity(self._curve)

        p = self._curve.p
        gradient = (other._y - self._y) * mod_inverse(other._x - self._x, p) % p
        x = (gradient * gradient - self._x - other._x) % p
        y = (gradient * (self._x - x) - self._y) % p
        return Point(x, y, self._curve)

    def __sub__(self, other: Self) -> Self:
        """Compute P - Q = P + (-Q)."""
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def _double(self) -> Self:
        """Compute 2P.

        For P = (x, y) with y != 0, 2P = (x', y') where lambda = (3x^2 + a) / 2y, x' = lambda^2 - 2x and
        y' = lambda * (x - x') - y, all modulo p. If P = O or y = 0, then P = -P and 2P = O.
        """
        if self._infinity:
            return self.__copy__()
        p = self._curve.p
        if self._y % p == 0:
            return Point.infinity(self._curve)

        gradient = (3 * self._x * self._x + self._curve.a) * mod_inverse(2 * self._y, p) % p
        x = (gradient * gradient - 2 * self._x) % p
        y = (gradient * (self._x - x) - self._y) % p
        return Point(x, y, self._curve)

    def __mul__(self, scalar: int) -> Self:
        """Compute scalar * P with the double-and-add method.

        The bits of `scalar` are processed from the most significant to the least significant one. For each bit
        the accumulator, initialised to O, is doubled, and P is added to it if the bit is set.

        Args:
            scalar (int): The non-negative number of times P is added to itself. Reducing it modulo the order
                of P is left to the caller.

        Returns:
            A new point scalar * P. If `scalar` is `0` or P = O, the result is O.

        Raises:
            ValueError: If `scalar` is negative.
        """
        if not isinstance(scalar, int):
            return NotImplemented
        bits = scalar_to_bits(scalar)
        if self._infinity or not bits:
            return Point.infinity(self._curve)

        logger.debug("Multiplying a point on %s by a %d-bit scalar", self._curve, len(bits))
        out = Point.infinity(self._curve)
        for bit in bits:
            out = out._double()
            if bit:
                out = out + self
        return out

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        """Check whether P = Q.

        Two points are equal if they are both the point at infinity, or if they are both finite and have the same
        coordinates. Coordinates are compared as they are, without reduction modulo p, and the curves the points
        are bound to are not compared.
        """
        if not isinstance(other, Point):
            return NotImplemented
        if self._infinity or other._infinity:
            return self._infinity and other._infinity
        return self._x == other._x and self._y == other._y

    def __str__(self) -> str:
        if self._infinity:
            return "Point at Infinity"
        return f"Point Coordinates:\nx = {to_hex(self._x)}\ny = {to_hex(self._y)}"

    def __repr__(self) -> str:
        if self._infinity:
            return "Point(infinity)"
        return f"Point(x=0x{to_hex(self._x)}, y=0x{to_hex(self._y)}, curve={self._curve})"
