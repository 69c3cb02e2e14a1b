"""ECDH key agreement and ECDSA signatures on the supported prime curves."""

import secrets
from dataclasses import dataclass

from utilkit.ecc_curves import (
    DEFAULT_CURVE,
    Curve,
    compress_point,
    decompress_point,
    point_add,
    point_multiply,
)

_MAX_TRIES = 16
_ORDER = "big"


class EccError(Exception):
    """Raised when a key, secret or signature cannot be produced."""


@dataclass(frozen=True)
class KeyPair:
    """A compressed public key and the matching big-endian private key."""

    public_key: bytes
    private_key: bytes


def _check_length(name: str, data: bytes, size: int) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(data)}")
    return data


def _scalar_bytes(data: bytes, curve: Curve) -> bytes:
    """Check that a private scalar has exactly the curve's byte size."""
    data = bytes(data)
    if len(data) != curve.size:
        raise ValueError(
            f"private key must be {curve.size} bytes, got {len(data)}"
        )
    return data


def _random_scalars(curve: Curve):
    """Yield up to the allowed number of random scalars, reduced into [0, n)."""
    for _ in range(_MAX_TRIES):
        value = int.from_bytes(secrets.token_bytes(curve.size), _ORDER)
        if value >= curve.n:
            value -= curve.n
        yield value


def make_key(curve: Curve = DEFAULT_CURVE) -> KeyPair:
    """Create a random key pair on ``curve``.

    Raises EccError if no usable private key was found.
    """
    for private in _random_scalars(curve):
        if private == 0:
            continue
        public = point_multiply(curve, curve.generator, private)
        if public.is_zero():
            continue
        scalar = private.to_bytes(curve.size, _ORDER)
        return KeyPair(public_key=compress_point(curve, public), private_key=scalar)
    raise EccError("could not generate a key pair")


def shared_secret(
    public_key: bytes, private_key: bytes, curve: Curve = DEFAULT_CURVE
) -> bytes:
    """Compute the ECDH shared secret (the x coordinate of d * Q).

    Hash the result before using it as a symmetric key. Raises EccError when
    the product is the point at infinity.
    """
    private_key = _scalar_bytes(private_key, curve)
    public = decompress_point(curve, public_key)
    scalar = int.from_bytes(private_key, _ORDER)
    product = point_multiply(curve, public, scalar)
    if product.is_zero():
        raise EccError("shared secret is the point at infinity")
    return product.x.to_bytes(curve.size, _ORDER)


def sign(
    private_key: bytes, message_hash: bytes, curve: Curve = DEFAULT_CURVE
) -> bytes:
    """Sign a message hash; the signature is r followed by s, big-endian.

    Raises EccError if no usable nonce was found.
    """
    private_key = _scalar_bytes(private_key, curve)
    message_hash = _check_length("hash", message_hash, curve.size)
    n = curve.n
    for k in _random_scalars(curve):
        if k == 0:
            continue
        point = point_multiply(curve, curve.generator, k)
        r = point.x - n if point.x >= n else point.x
        if r == 0:
            continue
        d = int.from_bytes(private_key, _ORDER)
        e = int.from_bytes(message_hash, _ORDER)
        s = (e + r * d) * pow(k, -1, n) % n
        return r.to_bytes(curve.size, _ORDER) + s.to_bytes(curve.size, _ORDER)
    raise EccError("could not generate a signature")


def verify(
    public_key: bytes,
    message_hash: bytes,
    signature: bytes,
    curve: Curve = DEFAULT_CURVE,
) -> bool:
    """Return True if ``signature`` is valid for ``message_hash`` under ``public_key``."""
    message_hash = _check_length("hash", message_hash, curve.size)
    signature = _check_length("signature", signature, 2 * curve.size)
    public = decompress_point(curve, public_key)
    n = curve.n
    r = int.from_bytes(signature[: curve.size], _ORDER)
    s = int.from_bytes(signature[curve.size:], _ORDER)
    if r == 0 or s == 0:
        return False
    if r >= n or s >= n:
        return False

    s_inv = pow(s, -1, n)
    e = int.from_bytes(message_hash, _ORDER)
    u1 = e * s_inv % n
    u2 = r * s_inv % n
    total = point_add(
        curve,
        point_multiply(curve, curve.generator, u1),
        point_multiply(curve, public, u2),
    )
    v = total.x - n if total.x >= n else total.x
    return v == r