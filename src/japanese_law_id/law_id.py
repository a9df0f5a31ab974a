from pydantic import BaseModel, ConfigDict, field_validator

from japanese_law_id.era import Era, Wareki
from japanese_law_id.exceptions import DecodeError, MalformedFieldError, UnknownFlagError
from japanese_law_id.law_type import LawType, law_type_from_id_str, read_uint
from japanese_law_id.ministry import AnyMinistry, Ministry
from japanese_law_id.utils.logger import logger

LAW_ID_LENGTH = 15


class LawId(BaseModel):
    """
    The identifier of a legal instrument, e.g. "325M50001000004".

    Layout: era number (1 digit), Wareki year (2 digits), type code (12 characters).
    Two LawId values are equal exactly when their ID strings are equal.
    """

    model_config = ConfigDict(frozen=True)

    wareki: Wareki
    law_type: LawType

    @field_validator("wareki")
    @classmethod
    def year_fits_two_digits(cls, wareki: Wareki) -> Wareki:
        if wareki.year > 99:
            raise ValueError(f"Wareki year {wareki.year} does not fit in two digits")
        return wareki

    def to_id_str(self) -> str:
        return f"{self.wareki.era.number}{self.wareki.year:02}{self.law_type.to_id_str()}"

    @classmethod
    def from_id_str(cls, s: str) -> "LawId":
        """
        Decode a law ID string. The result re-encodes to exactly the same string.

        :raises DecodeError: if the string is not a well-formed law ID.
        """
        try:
            if len(s) != LAW_ID_LENGTH:
                raise MalformedFieldError(f"Law ID must have {LAW_ID_LENGTH} characters: {s!r}", s)

            era_number = read_uint(s[0])
            era = Era.from_number(era_number)
            if era is None:
                raise UnknownFlagError(era_number, "era number")

            year = read_uint(s[1:3])
            if year < 1:
                raise MalformedFieldError(f"Wareki year must be at least 1: {s[1:3]!r}", s[1:3])

            law_type = law_type_from_id_str(s[3:])
        except DecodeError as e:
            logger.debug(f"Failed to decode law ID {s!r}: {e}")
            raise

        return cls(wareki=Wareki(era=era, year=year), law_type=law_type)

    @staticmethod
    def from_name(text: str) -> AnyMinistry:
        """
        Identify the issuing bodies named in a title. Only the issuing bodies can be
        recovered from a title, not the instrument kind or its number.
        """
        return Ministry.from_name(text)
