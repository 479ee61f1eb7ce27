from geohash64.errors import InvalidCharacterError

ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"  # Standard geohash base32 symbols
WIDTH = 12  # symbols in a full-width hash, covering bits 63..4

_DECODE_MAP = {c: i for i, c in enumerate(ALPHABET)}
_SHIFTS = tuple(59 - 5 * i for i in range(WIDTH))


def encode(hash: int) -> str:
    """Encode a left-justified 64-bit hash as 12 base32 symbols.

    The lowest 4 bits of the word are not represented.
    """
    return "".join(ALPHABET[(hash >> shift) & 0x1F] for shift in _SHIFTS)


def encode_as_bytes(hash: int) -> bytes:
    """Encode a left-justified 64-bit hash into a fixed 12-byte buffer."""
    return encode(hash).encode("ascii")


def decode(hash: str) -> int:
    """Decode base32 symbols into a left-justified 64-bit hash.

    Hashes shorter than 12 symbols leave the trailing bits zero, so a prefix
    decodes to the same high bits as the full hash.
    """
    value = 0
    for c, shift in zip(hash, _SHIFTS):
        try:
            value |= _DECODE_MAP[c] << shift
        except KeyError as e:
            raise InvalidCharacterError(c) from e
    return value


def valid_byte(b: int | str) -> bool:
    """Return True if b (a byte value or one character) is a base32 symbol."""
    if isinstance(b, int):
        b = chr(b)
    return b in _DECODE_MAP
