"""Parameters of short-Weierstrass elliptic curves and the catalog of supported curves."""

from dataclasses import dataclass

from ecarith.fields.prime_field import from_hex
from ecarith.util.exceptions import CurveConfigurationError


@dataclass(frozen=True)
class CurveParameters:
    """Parameters of the elliptic curve E: y^2 = x^3 + a*x + b over F_p.

    Attributes:
        name (str): The name under which the curve is registered in the catalog.
        a (int): The `a` coefficient in the Short-Weierstrass equation of the curve (an element in F_p).
        b (int): The `b` coefficient in the Short-Weierstrass equation of the curve (an element in F_p).
        p (int): The characteristic of the field F_p.
        Gx (int): The x coordinate of the generator of the group.
        Gy (int): The y coordinate of the generator of the group.
        n (int): The order of the subgroup generated by (Gx, Gy).
    """

    name: str
    a: int
    b: int
    p: int
    Gx: int  # noqa: N815
    Gy: int  # noqa: N815
    n: int

    def is_on_curve(self, x: int, y: int) -> bool:
        """Check whether (x, y) satisfies y^2 = x^3 + a*x + b mod p."""
        return (y * y - (x * x * x + self.a * x + self.b)) % self.p == 0

    def __str__(self) -> str:
        return self.name


P256 = CurveParameters(
    name="P-256",
    a=from_hex("ffffffff00000001000000000000000000000000fffffffffffffffffffffffc"),
    b=from_hex("5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b"),
    p=from_hex("ffffffff00000001000000000000000000000000ffffffffffffffffffffffff"),
    Gx=from_hex("6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"),
    Gy=from_hex("4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5"),
    n=from_hex("ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551"),
)

SECP256K1 = CurveParameters(
    name="secp256k1",
    a=0,
    b=7,
    p=from_hex("fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f"),
    Gx=from_hex("79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"),
    Gy=from_hex("483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"),
    n=from_hex("fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141"),
)

P521 = CurveParameters(
    name="P-521",
    a=from_hex(
        "01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffc"
    ),
    b=from_hex(
        "0051953eb9618e1c9a1f929a21a0b68540eea2da725b99b315f3b8b489918ef109"
        "e156193951ec7e937b1652c0bd3bb1bf073573df883d2c34f1ef451fd46b503f00"
    ),
    p=from_hex(
        "01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"
        "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"
    ),
    Gx=from_hex(
        "00c6858e06b70404e9cd9e3ecb662395b4429c648139053fb521f828af606b4d3d"
        "baa14b5e77efe75928fe1dc127a2ffa8de3348b3c1856a429bf97e7e31c2e5bd66"
    ),
    Gy=from_hex(
        "011839296a789a3bc0045c8a5fb42c7d1bd998f54449579b446817afbd17273e66"
        "2c97ee72995ef42640c550b9013fad0761353c7086a272c24088be94769fd16650"
    ),
    n=from_hex(
        "01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"
        "fa51868783bf2f966b7fcc0148f709a5d03bb5c9b8899c47aebb6fb71e91386409"
    ),
)

CURVES: dict[str, CurveParameters] = {curve.name.lower(): curve for curve in (P256, SECP256K1, P521)}

ALIASES: dict[str, str] = {
    "secp256r1": "p-256",
    "prime256v1": "p-256",
    "p256": "p-256",
    "secp521r1": "p-521",
    "p521": "p-521",
}


def get_curve(name: str) -> CurveParameters:
    """Return the catalog entry registered under `name`.

    The lookup is case-insensitive and accepts the aliases in `ALIASES`.

    Args:
        name (str): The name of the curve, e.g. `"P-256"`, `"secp256k1"` or `"secp521r1"`.

    Raises:
        CurveConfigurationError: If no curve is registered under `name`.
    """
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    if key not in CURVES:
        msg = f"Unknown curve: {name!r}. Available curves: {', '.join(curve.name for curve in CURVES.values())}"
        raise CurveConfigurationError(msg)
    return CURVES[key]
