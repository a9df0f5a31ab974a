import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from japanese_law_id.era import ERA_NAME_PATTERN, YEAR_EXPR_PATTERN, Date, Era, Wareki, year_from_match
from japanese_law_id.exceptions import ExtractionError
from japanese_law_id.institution import Institution
from japanese_law_id.numerals import kanji_to_int, to_half_width_digits
from japanese_law_id.utils.logger import logger

_NUMBER_CLASS = "[〇一二三四五六七八九十0-9０-９]"

# <era><year>年[<month>月][<day>日]<issuing body>(令|規則)
TITLE_PATTERN = re.compile(
    rf"(?P<era>{ERA_NAME_PATTERN}){YEAR_EXPR_PATTERN}年"
    rf"(?:(?P<month>{_NUMBER_CLASS}+)月)?"
    rf"(?:(?P<day>{_NUMBER_CLASS}+)日)?"
    r"(?P<body>.+)(?:令|規則)"
)


class TitleMatch(BaseModel):
    """The promulgation date and issuing-body text located in a title."""

    model_config = ConfigDict(frozen=True)

    wareki: Wareki
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day: Optional[int] = Field(default=None, ge=1, le=31)
    body: str = Field(..., min_length=1, description="Text between the date and the trailing 令/規則")

    @property
    def date(self) -> Optional[Date]:
        """The full Gregorian date, when both month and day were written."""
        if self.month is None or self.day is None:
            return None
        return Date(year=self.wareki.to_ad(), month=self.month, day=self.day)


def read_number(text: str) -> Optional[int]:
    """Read a number written in ASCII, full-width or kanji digits."""
    normalized = to_half_width_digits(text)
    if normalized.isascii() and normalized.isdigit():
        try:
            return int(normalized)
        except ValueError:
            return None
    return kanji_to_int(text)


def parse_title(text: str) -> Optional[TitleMatch]:
    """
    Locate the promulgation date and the issuing body in a title.

    >>> parse_title("昭和二十五年郵政省令第四号").body
    '郵政省'

    :return: The match, or None if the title does not have the expected shape.
    :raises ExtractionError: if the shape matches but a number cannot be read.
    """
    match = TITLE_PATTERN.search(text)
    if match is None:
        return None

    year = year_from_match(match)
    month = read_number(match.group("month")) if match.group("month") else None
    day = read_number(match.group("day")) if match.group("day") else None
    if year is None or (match.group("month") and month is None) or (match.group("day") and day is None):
        raise ExtractionError(f"Unreadable promulgation date in {text!r}")

    try:
        return TitleMatch(
            wareki=Wareki(era=Era(match.group("era")), year=year),
            month=month,
            day=day,
            body=match.group("body"),
        )
    except ValidationError as e:
        logger.debug(f"Rejected title {text!r}: {e}")
        raise ExtractionError(f"Invalid promulgation date in {text!r}") from e


def extract_institution(text: str) -> Optional[Institution]:
    """
    Find the institution issuing a regulation, e.g. "平成二十六年最高裁判所規則第一号".

    The issuing-body part of the title is searched when the title can be
    parsed; otherwise the whole text is.
    """
    try:
        title = parse_title(text)
    except ExtractionError:
        title = None
    if title is not None:
        found = Institution.from_name(title.body)
        if found is not None:
            return found
    return Institution.from_name(text)
