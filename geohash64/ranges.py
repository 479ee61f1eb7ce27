EXP232 = 2.0**32  # precomputed scale for 32-bit fixed point
MASK32 = 0xFFFFFFFF


def encode_range(x: float, r: float) -> int:
    """Encode the position of x within [-r, r] as a 32-bit integer.

    The upper edge x == r wraps around to 0.
    """
    p = (x + r) / (2 * r)
    return int(p * EXP232) & MASK32


def decode_range(X: int, r: float) -> float:
    """Decode a 32-bit range encoding back to a value in [-r, r]."""
    p = X / EXP232
    return 2 * r * p - r
