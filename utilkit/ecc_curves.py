"""Short Weierstrass curves with a = -3 and affine point arithmetic on them."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Point:
    """An affine point; (0, 0) stands for the point at infinity."""

    x: int
    y: int

    def is_zero(self) -> bool:
        """Return True for the point at infinity."""
        return self.x == 0 and self.y == 0


INFINITY = Point(0, 0)


@dataclass(frozen=True)
class Curve:
    """Curve y^2 = x^3 - 3x + b over the prime field of ``p``."""

    name: str
    size: int
    p: int
    b: int
    gx: int
    gy: int
    n: int

    @property
    def generator(self) -> Point:
        return Point(self.gx, self.gy)


SECP128R1 = Curve(
    name="secp128r1",
    size=16,
    p=0xFFFFFFFDFFFFFFFFFFFFFFFFFFFFFFFF,
    b=0xE87579C11079F43DD824993C2CEE5ED3,
    gx=0x161FF7528B899B2D0C28607CA52C5B86,
    gy=0xCF5AC8395BAFEB13C02DA292DDED7A83,
    n=0xFFFFFFFE0000000075A30D1B9038A115,
)

SECP192R1 = Curve(
    name="secp192r1",
    size=24,
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFF,
    b=0x64210519E59C80E70FA7E9AB72243049FEB8DEECC146B9B1,
    gx=0x188DA80EB03090F67CBF20EB43A18800F4FF0AFD82FF1012,
    gy=0x07192B95FFC8DA78631011ED6B24CDD573F977A11E794811,
    n=0xFFFFFFFFFFFFFFFFFFFFFFFF99DEF836146BC9B1B4D22831,
)

SECP256R1 = Curve(
    name="secp256r1",
    size=32,
    p=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
    gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
    n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
)

SECP384R1 = Curve(
    name="secp384r1",
    size=48,
    p=int(
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFE"
        "FFFFFFFF0000000000000000FFFFFFFF",
        16,
    ),
    b=int(
        "B3312FA7E23EE7E4988E056BE3F82D19181D9C6EFE8141120314088F5013875A"
        "C656398D8A2ED19D2A85C8EDD3EC2AEF",
        16,
    ),
    gx=int(
        "AA87CA22BE8B05378EB1C71EF320AD746E1D3B628BA79B9859F741E082542A38"
        "5502F25DBF55296C3A545E3872760AB7",
        16,
    ),
    gy=int(
        "3617DE4A96262C6F5D9E98BF9292DC29F8F41DBD289A147CE9DA3113B5F0B8C0"
        "0A60B1CE1D7E819D7A431D7C90EA0E5F",
        16,
    ),
    n=int(
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFC7634D81F4372DDF"
        "581A0DB248B0A77AECEC196ACCC52973",
        16,
    ),
)

DEFAULT_CURVE = SECP256R1

_CURVES: Dict[int, Curve] = {
    curve.size: curve for curve in (SECP128R1, SECP192R1, SECP256R1, SECP384R1)
}


def curve_by_size(size: int) -> Curve:
    """Return the curve whose field elements take ``size`` bytes."""
    try:
        return _CURVES[size]
    except KeyError:
        raise ValueError(
            f"no curve of {size} bytes; choose one of {sorted(_CURVES)}"
        ) from None


def mod_sqrt(curve: Curve, value: int) -> int:
    """Return a square root of ``value`` modulo ``curve.p`` (p = 3 mod 4)."""
    return pow(value % curve.p, (curve.p + 1) // 4, curve.p)


def compress_point(curve: Curve, point: Point) -> bytes:
    """Encode a point as a parity byte (2 or 3) followed by big-endian x."""
    return bytes([2 + (point.y & 1)]) + point.x.to_bytes(curve.size, "big")


def decompress_point(curve: Curve, data: bytes) -> Point:
    """Rebuild a point from its compressed form."""
    data = bytes(data)
    if len(data) != curve.size + 1:
        raise ValueError(
            f"compressed point must be {curve.size + 1} bytes, got {len(data)}"
        )
    p = curve.p
    x = int.from_bytes(data[1:], "big")
    rhs = (x * x * x - 3 * x + curve.b) % p
    y = mod_sqrt(curve, rhs)
    if (y & 1) != (data[0] & 1):
        y = p - y
    return Point(x, y)


def point_double(curve: Curve, point: Point) -> Point:
    """Return 2 * point."""
    if point.is_zero() or point.y == 0:
        return INFINITY
    p = curve.p
    slope = (3 * point.x * point.x - 3) * pow(2 * point.y, -1, p) % p
    x = (slope * slope - 2 * point.x) % p
    y = (slope * (point.x - x) - point.y) % p
    return Point(x, y)


def point_add(curve: Curve, first: Point, second: Point) -> Point:
    """Return first + second."""
    if first.is_zero():
        return second
    if second.is_zero():
        return first
    p = curve.p
    if first.x == second.x:
        if (first.y + second.y) % p == 0:
            return INFINITY
        return point_double(curve, first)
    slope = (second.y - first.y) * pow(second.x - first.x, -1, p) % p
    x = (slope * slope - first.x - second.x) % p
    y = (slope * (first.x - x) - first.y) % p
    return Point(x, y)


def point_multiply(curve: Curve, point: Point, scalar: int) -> Point:
    """Return scalar * point for a non-negative scalar."""
    if scalar < 0:
        raise ValueError("scalar must not be negative")
    result = INFINITY
    for bit in bin(scalar)[2:]:
        result = point_double(curve, result)
        if bit == "1":
            result = point_add(curve, result, point)
    return result