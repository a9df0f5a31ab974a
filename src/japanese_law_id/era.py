import datetime
import re
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

from japanese_law_id.exceptions import EraLookupError
from japanese_law_id.numerals import kanji_to_int, to_half_width_digits
from japanese_law_id.utils.logger import logger


class Era(str, Enum):
    """The five eras of the modern legal system, valued by their canonical names."""

    MEIJI = "明治"
    TAISHO = "大正"
    SHOWA = "昭和"
    HEISEI = "平成"
    REIWA = "令和"

    @classmethod
    def from_text(cls, text: str) -> Optional["Era"]:
        try:
            return cls(text)
        except ValueError:
            return None

    @classmethod
    def from_number(cls, number: int) -> Optional["Era"]:
        for era in cls:
            if ERA_TABLE[era].number == number:
                return era
        return None

    @property
    def text(self) -> str:
        return self.value

    @property
    def number(self) -> int:
        """1 for Meiji through 5 for Reiwa; the first character of a law ID."""
        return ERA_TABLE[self].number

    @property
    def start(self) -> int:
        """First day of the era as a YYYYMMDD integer."""
        return ERA_TABLE[self].start

    @property
    def end(self) -> Optional[int]:
        """Last day of the era as a YYYYMMDD integer, None while the era continues."""
        return ERA_TABLE[self].end

    @property
    def base_year(self) -> int:
        """The Gregorian year preceding Wareki year 1."""
        return ERA_TABLE[self].base_year

    def contains(self, key: int) -> bool:
        end = self.end
        return self.start <= key and (end is None or key <= end)


class EraBoundary(NamedTuple):
    number: int
    start: int
    end: Optional[int]
    base_year: int


# Heisei ends on 20190431 on purpose: the whole of April 2019 belongs to Heisei.
ERA_TABLE: Dict[Era, EraBoundary] = {
    Era.MEIJI: EraBoundary(1, 18681023, 19120728, 1867),
    Era.TAISHO: EraBoundary(2, 19120729, 19261224, 1911),
    Era.SHOWA: EraBoundary(3, 19261225, 19890107, 1925),
    Era.HEISEI: EraBoundary(4, 19890108, 20190431, 1988),
    Era.REIWA: EraBoundary(5, 20190501, None, 2018),
}


class Date(BaseModel):
    """
    A Gregorian calendar day. Ordering compares (year, month, day).

    Day-of-month is not checked against the month length so that boundary
    sentinels such as 2019-04-31 remain representable.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, description="Gregorian year")
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)

    @classmethod
    def from_date(cls, value: datetime.date) -> "Date":
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def from_wareki(cls, era: Era, year: int, month: int, day: int) -> "Date":
        return cls(year=Wareki(era=era, year=year).to_ad(), month=month, day=day)

    @classmethod
    def max(cls) -> "Date":
        """Sentinel for periods that have not ended."""
        return cls(year=datetime.MAXYEAR, month=12, day=31)

    def as_int(self) -> int:
        return self.year * 10000 + self.month * 100 + self.day

    def to_wareki(self) -> "Wareki":
        return to_wareki(self)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_int() < other.as_int()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_int() <= other.as_int()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_int() > other.as_int()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_int() >= other.as_int()


class Wareki(BaseModel):
    """A year expressed in the era calendar, e.g. 平成5年 or 令和元年."""

    model_config = ConfigDict(frozen=True)

    era: Era
    year: int = Field(..., ge=1, description="1-indexed year within the era")

    @classmethod
    def from_ad(cls, year: int, month: int, day: int) -> "Wareki":
        return to_wareki(Date(year=year, month=month, day=day))

    @classmethod
    def from_text(cls, text: str) -> Optional["Wareki"]:
        return parse_wareki_text(text)

    def to_ad(self) -> int:
        return self.era.base_year + self.year

    def to_text(self) -> str:
        if self.year == 1:
            return f"{self.era.value}元年"
        return f"{self.era.value}{self.year}年"


def era_for(date: Date) -> Era:
    """
    Find the era whose inclusive range contains the given date.

    :raises EraLookupError: if the date precedes 1868-10-23.
    """
    key = date.as_int()
    for era in Era:
        if era.contains(key):
            return era
    raise EraLookupError(f"No era covers {date.year:04}-{date.month:02}-{date.day:02}")


def to_wareki(date: Date) -> Wareki:
    era = era_for(date)
    return Wareki(era=era, year=date.year - era.base_year)


def to_gregorian_year(wareki: Wareki) -> int:
    return wareki.to_ad()


ERA_NAME_PATTERN = "|".join(era.value for era in Era)
KANJI_NUMERAL_CLASS = "[〇一二三四五六七八九十百]"
YEAR_EXPR_PATTERN = (
    r"(?:(?P<gan>元)"
    rf"|(?P<kansuji>{KANJI_NUMERAL_CLASS}+)"
    r"|(?P<digits>[0-9]+)"
    r"|(?P<zenkaku>[０-９]+))"
)

WAREKI_PATTERN = re.compile(rf"(?P<era>{ERA_NAME_PATTERN}){YEAR_EXPR_PATTERN}年")


def year_from_match(match: "re.Match[str]") -> Optional[int]:
    """Read the year out of a match that used YEAR_EXPR_PATTERN's named groups."""
    if match.group("gan"):
        return 1
    if match.group("kansuji"):
        return kanji_to_int(match.group("kansuji"))
    digits = match.group("digits") or match.group("zenkaku")
    if digits:
        try:
            return int(to_half_width_digits(digits))
        except ValueError:
            # digit runs past the interpreter's int conversion limit
            return None
    return None


def parse_wareki_text(text: str) -> Optional[Wareki]:
    """
    Parse the first '<era><year>年' expression found in the text.

    The year may be written as 元, in kanji numerals, in ASCII digits or in
    full-width digits: 大正元年, 昭和十五年, 昭和15年 and 昭和１５年 are all accepted.

    :return: The Wareki, or None if nothing matches or the year cannot be read.
    """
    match = WAREKI_PATTERN.search(text)
    if match is None:
        return None

    year = year_from_match(match)
    if year is None or year < 1:
        logger.debug(f"Unreadable Wareki year in {match.group(0)!r}")
        return None
    return Wareki(era=Era(match.group("era")), year=year)
