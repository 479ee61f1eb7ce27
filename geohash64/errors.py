import dataclasses


class GeohashError(ValueError):
    """Base class for malformed geohash input."""


@dataclasses.dataclass(eq=False)
class HashTooLongError(GeohashError):
    """Hash holds more characters than a 64-bit integer can represent."""

    length: int
    code: str = "too_long"
    message: str = "too long"

    def __str__(self) -> str:
        return self.message


@dataclasses.dataclass(eq=False)
class InvalidCharacterError(GeohashError):
    """Hash contains a symbol outside the base-32 alphabet."""

    char: str
    code: str = "invalid_character"
    message: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = f"invalid character {self.char!r}"

    def __str__(self) -> str:
        return self.message
