import pytest

from ecarith.elliptic_curves.curve_parameters import P256, SECP256K1
from ecarith.fields.prime_field import from_hex, mod_inverse, reduce, to_hex


@pytest.mark.parametrize(
    ("value", "modulus", "expected"),
    [
        (3, 11, 4),
        (10, 11, 10),
        (-1, 23, 22),
        (2, SECP256K1.p, (SECP256K1.p + 1) // 2),
    ],
)
def test_mod_inverse(value, modulus, expected):
    assert mod_inverse(value, modulus) == expected
    assert value * mod_inverse(value, modulus) % modulus == 1


@pytest.mark.parametrize("value", [0, 23, -46])
def test_mod_inverse_of_zero(value):
    with pytest.raises(ZeroDivisionError, match="Zero has no inverse"):
        mod_inverse(value, 23)


def test_mod_inverse_not_coprime():
    with pytest.raises(ValueError):
        mod_inverse(4, 8)


@pytest.mark.parametrize(
    ("value", "modulus", "expected"),
    [
        (25, 23, 2),
        (-1, 23, 22),
        (P256.p, P256.p, 0),
    ],
)
def test_reduce(value, modulus, expected):
    assert reduce(value, modulus) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (255, "ff"),
        (P256.Gx, "6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"),
    ],
)
def test_to_hex(value, expected):
    assert to_hex(value) == expected


@pytest.mark.parametrize(
    ("hexstr", "expected"),
    [
        ("ff", 255),
        ("FF", 255),
        ("0x01ff", 511),
        ("00", 0),
    ],
)
def test_from_hex(hexstr, expected):
    assert from_hex(hexstr) == expected


def test_from_hex_invalid():
    with pytest.raises(ValueError):
        from_hex("xyz")
