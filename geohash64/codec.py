"""String and integer geohash encoding and decoding.

Integer hashes come in two layouts. Functions taking or returning a hash
together with its number of bits use the raw layout, with the significant
bits right-aligned. The base32 codec works on the aligned layout, with the
significant bits left-justified in a 64-bit word. Conversion between the
two goes through bits.align and bits.unalign.
"""

import logging

from geohash64 import base32
from geohash64.bits import align, deinterleave, interleave, unalign
from geohash64.box import Box, error_with_precision
from geohash64.errors import GeohashError, HashTooLongError, InvalidCharacterError
from geohash64.ranges import decode_range, encode_range

logger = logging.getLogger(__name__)

MAX_CHARS = base32.WIDTH
MAX_BITS = 64


def _check_chars(chars: int) -> None:
    if not 0 <= chars <= MAX_CHARS:
        raise ValueError(f"chars must be between 0 and {MAX_CHARS}, got {chars}")


def _check_bits(bits: int) -> None:
    if not 0 <= bits <= MAX_BITS:
        raise ValueError(f"bits must be between 0 and {MAX_BITS}, got {bits}")


def encode(lat: float, lng: float) -> str:
    """Encode (lat, lng) as a string geohash with the standard 12 characters."""
    return encode_with_precision(lat, lng, MAX_CHARS)


def encode_with_precision(lat: float, lng: float, chars: int) -> str:
    """Encode (lat, lng) as a string geohash of `chars` characters (max 12)."""
    _check_chars(chars)
    bits = 5 * chars
    inthash = encode_int_with_precision(lat, lng, bits)
    return base32.encode(align(inthash, bits))[:chars]


def encode_with_max_precision(lat: float, lng: float) -> bytes:
    """Encode (lat, lng) as a fixed 12-byte geohash buffer."""
    bits = 5 * MAX_CHARS
    inthash = encode_int_with_precision(lat, lng, bits)
    return base32.encode_as_bytes(align(inthash, bits))


def encode_int(lat: float, lng: float) -> int:
    """Encode (lat, lng) as a 64-bit integer geohash."""
    lat_int = encode_range(lat, 90)
    lng_int = encode_range(lng, 180)
    return interleave(lat_int, lng_int)


def encode_int_with_precision(lat: float, lng: float, bits: int) -> int:
    """Encode (lat, lng) as a raw integer geohash with `bits` bits."""
    _check_bits(bits)
    return unalign(encode_int(lat, lng), bits)


def bounding_box(hash: str) -> Box:
    """Return the region encoded by a string geohash."""
    bits = 5 * len(hash)
    _check_bits(bits)
    return _bounding_box_aligned(base32.decode(hash), bits)


def bounding_box_int(hash: int) -> Box:
    """Return the region encoded by a full 64-bit integer geohash."""
    return bounding_box_int_with_precision(hash, MAX_BITS)


def bounding_box_int_with_precision(hash: int, bits: int) -> Box:
    """Return the region encoded by a raw integer geohash with `bits` bits."""
    _check_bits(bits)
    return _bounding_box_aligned(align(hash, bits), bits)


def _bounding_box_aligned(full_hash: int, bits: int) -> Box:
    lat_int, lng_int = deinterleave(full_hash)
    lat = decode_range(lat_int, 90)
    lng = decode_range(lng_int, 180)
    lat_err, lng_err = error_with_precision(bits)
    return Box(
        min_lat=lat,
        max_lat=lat + lat_err,
        min_lng=lng,
        max_lng=lng + lng_err,
    )


def validate(hash: str) -> None:
    """Validate a string geohash.

    Raises:
        HashTooLongError: the hash implies more than 64 bits.
        InvalidCharacterError: the hash has a symbol outside the alphabet.
    """
    if 5 * len(hash) > MAX_BITS:
        logger.debug("Rejected geohash of length %d", len(hash))
        raise HashTooLongError(len(hash))

    for c in hash:
        if not base32.valid_byte(c):
            logger.debug("Rejected geohash %r: invalid character %r", hash, c)
            raise InvalidCharacterError(c)


def is_valid(hash: str) -> bool:
    try:
        validate(hash)
    except GeohashError:
        return False
    return True


def decode(hash: str) -> tuple[float, float]:
    """Decode a string geohash to a rounded point inside its box."""
    return bounding_box(hash).round()


def decode_center(hash: str) -> tuple[float, float]:
    """Decode a string geohash to the center of its box."""
    return bounding_box(hash).center()


def decode_int(hash: int) -> tuple[float, float]:
    return decode_int_with_precision(hash, MAX_BITS)


def decode_int_with_precision(hash: int, bits: int) -> tuple[float, float]:
    """Decode a raw integer geohash with `bits` bits to a rounded point."""
    return bounding_box_int_with_precision(hash, bits).round()


def convert_string_to_int(hash: str) -> tuple[int, int]:
    """Convert a string geohash to its raw integer form and bit precision."""
    bits = 5 * len(hash)
    _check_bits(bits)
    return unalign(base32.decode(hash), bits), bits


def convert_int_to_string(hash: int, chars: int) -> str:
    """Convert a raw integer geohash of 5*chars bits to a string geohash."""
    _check_chars(chars)
    bits = 5 * chars
    return base32.encode(align(hash, bits))[:chars]
