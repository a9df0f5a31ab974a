from typing import Any, Optional


class LawIdError(ValueError):
    """Base class for every error raised by japanese_law_id."""


class DecodeError(LawIdError):
    """
    Raised when a fixed-width ID string (or a part of one) cannot be decoded.

    :param message: Human readable description.
    :param value: The offending input, kept for callers that want to report it.
    """

    def __init__(self, message: str, value: Optional[Any] = None) -> None:
        super().__init__(message)
        self.value = value


class UnknownTagError(DecodeError):
    """The type-code prefix or the issuing-body period tag is not recognized."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown tag: {tag!r}", tag)
        self.tag = tag


class UnknownFlagError(DecodeError):
    """A numeric discriminator is outside its documented set."""

    def __init__(self, flag: int, field: str = "flag") -> None:
        super().__init__(f"Unexpected {field}: {flag}", flag)
        self.flag = flag
        self.field = field


class UnknownBitPositionError(DecodeError):
    """A mask bit is set at a position that no issuing body of the period owns."""

    def __init__(self, position: int, period: str) -> None:
        super().__init__(f"Unexpected bit position {position} for period {period}", position)
        self.position = position
        self.period = period


class MalformedMaskError(DecodeError):
    """A binary mask contains a character other than '0' or '1'."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Unexpected mask character: {char!r}", char)
        self.char = char


class MalformedFieldError(DecodeError):
    """A fixed-width field has the wrong width, a non-numeric payload or an out-of-range value."""


class EraLookupError(LawIdError):
    """No era covers the given date."""


class PeriodLookupError(LawIdError):
    """No issuing-body period covers the given date or Wareki year."""


class ExtractionError(LawIdError):
    """Era, year or issuing body could not be located in a free-form title."""
