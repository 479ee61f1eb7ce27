MASK64 = 0xFFFFFFFFFFFFFFFF


def spread(x: int) -> int:
    """Spread the 32 bits of x into the even bit positions of a 64-bit word."""
    X = x & 0xFFFFFFFF
    X = (X | (X << 16)) & 0x0000FFFF0000FFFF
    X = (X | (X << 8)) & 0x00FF00FF00FF00FF
    X = (X | (X << 4)) & 0x0F0F0F0F0F0F0F0F
    X = (X | (X << 2)) & 0x3333333333333333
    X = (X | (X << 1)) & 0x5555555555555555
    return X


def squash(X: int) -> int:
    """Collapse the even bit positions of X into a 32-bit word.

    Odd bit positions are ignored and may hold any value.
    """
    X &= 0x5555555555555555
    X = (X | (X >> 1)) & 0x3333333333333333
    X = (X | (X >> 2)) & 0x0F0F0F0F0F0F0F0F
    X = (X | (X >> 4)) & 0x00FF00FF00FF00FF
    X = (X | (X >> 8)) & 0x0000FFFF0000FFFF
    X = (X | (X >> 16)) & 0x00000000FFFFFFFF
    return X


def interleave(x: int, y: int) -> int:
    """Interleave x (even bits) and y (odd bits) into one 64-bit key."""
    return spread(x) | (spread(y) << 1)


def deinterleave(X: int) -> tuple[int, int]:
    """Split X back into its even-bit and odd-bit 32-bit words."""
    return squash(X), squash(X >> 1)


def align(raw: int, bits: int) -> int:
    """Left-justify a raw hash of `bits` significant bits in a 64-bit word."""
    return (raw << (64 - bits)) & MASK64


def unalign(aligned: int, bits: int) -> int:
    """Right-align the top `bits` bits of a 64-bit hash."""
    return (aligned & MASK64) >> (64 - bits)
