"""
Issuing bodies of ministerial ordinances and commission rules.

The naming convention splits history into six periods (M1 to M6). Each
period has its own closed set of issuing bodies and assigns each of them a
bit position between 1 and 28. A jointly issued ordinance is identified by
OR-ing the bits of all its issuing bodies into one 28-bit mask, written as
seven uppercase hexadecimal digits after the period tag ("M5" + "0001000").
Bit positions are only meaningful inside their own period.
"""

import re
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Iterable, List, Literal, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from japanese_law_id.era import Date, Wareki
from japanese_law_id.exceptions import (
    ExtractionError,
    MalformedFieldError,
    MalformedMaskError,
    PeriodLookupError,
    UnknownBitPositionError,
    UnknownTagError,
)
from japanese_law_id.extraction import TitleMatch, parse_title
from japanese_law_id.utils.logger import logger

MASK_BITS = 28
MASK_HEX_DIGITS = 7
_HEX_PATTERN = re.compile(r"[0-9A-F]{7}")


class IssuingBody(str, Enum):
    """Common base of the six per-period enumerations."""


class M1IssuingBody(IssuingBody):
    """1869-07-08 to 1943-10-31."""

    CABINET = "閣令"
    IMPERIAL_HOUSEHOLD = "宮内省令"
    GREATER_EAST_ASIA = "大東亜省令"
    INTERIOR = "内務省令"
    JUSTICE = "司法省令"
    FOREIGN_AFFAIRS = "外務省令"
    FINANCE = "大蔵省令"
    EDUCATION = "文部省令"
    HEALTH_AND_WELFARE = "厚生省令"
    AGRICULTURE_AND_COMMERCE = "農商務省令"
    COMMERCE_AND_INDUSTRY = "商工省令"
    RAILWAYS = "鉄道省令"
    COMMUNICATIONS = "逓信省令"
    ARMY_KOU = "陸軍省令（甲）"
    NAVY = "海軍省令"
    ARMY_OTSU = "陸軍省令（乙）"
    AGRICULTURE_AND_FORESTRY = "農林省令"
    COLONIZATION = "拓殖務省令"
    COLONIAL_AFFAIRS = "拓務省令"
    AGRICULTURE_AND_COMMERCE_TEMPORARY = "農商務省令（臨）"
    # e.g. 明治19年4月7日司法省令丙第1号
    JUSTICE_HEI = "司法省令（丙）"


class M2IssuingBody(IssuingBody):
    """1943-11-01 to 1945-11-30."""

    CABINET = "閣令"
    IMPERIAL_HOUSEHOLD = "宮内省令"
    GREATER_EAST_ASIA = "大東亜省令"
    INTERIOR = "内務省令"
    JUSTICE = "司法省令"
    FOREIGN_AFFAIRS = "外務省令"
    FINANCE = "大蔵省令"
    EDUCATION = "文部省令"
    HEALTH_AND_WELFARE = "厚生省令"
    AGRICULTURE_AND_COMMERCE = "農商務省令"
    COMMERCE_AND_INDUSTRY = "商工省令"
    TRANSPORT = "運輸省令"
    TRANSPORT_AND_COMMUNICATIONS = "運輸通信省令"
    ARMY_KOU = "陸軍省令（甲）"
    NAVY = "海軍省令"
    MUNITIONS = "軍需省令"
    AGRICULTURE_AND_FORESTRY = "農林省令"


class M3IssuingBody(IssuingBody):
    """1945-12-01 to 1947-05-02."""

    CABINET = "閣令"
    IMPERIAL_HOUSEHOLD = "宮内省令"
    ECONOMIC_STABILIZATION_BOARD = "経済安定本部令"
    INTERIOR = "内務省令"
    JUSTICE = "司法省令"
    FOREIGN_AFFAIRS = "外務省令"
    FINANCE = "大蔵省令"
    EDUCATION = "文部省令"
    HEALTH_AND_WELFARE = "厚生省令"
    AGRICULTURE_AND_FORESTRY = "農林省令"
    COMMERCE_AND_INDUSTRY = "商工省令"
    TRANSPORT = "運輸省令"
    COMMUNICATIONS = "逓信省令"
    FIRST_DEMOBILIZATION = "第一復員省令"
    SECOND_DEMOBILIZATION = "第二復員省令"
    PRICE_AGENCY = "物価庁令"
    CENTRAL_LABOR_RELATIONS_COMMISSION = "中央労働委員会規則"


class M4IssuingBody(IssuingBody):
    """1947-05-03 to 1949-05-31."""

    ATTORNEY_GENERAL = "法務庁令"
    PRIME_MINISTERS_AGENCY = "総理庁令"
    ECONOMIC_STABILIZATION_BOARD = "経済安定本部令"
    INTERIOR = "内務省令"
    JUSTICE = "司法省令"
    FOREIGN_AFFAIRS = "外務省令"
    FINANCE = "大蔵省令"
    EDUCATION = "文部省令"
    HEALTH_AND_WELFARE = "厚生省令"
    AGRICULTURE_AND_FORESTRY = "農林省令"
    INTERNATIONAL_TRADE_AND_INDUSTRY = "通商産業省令"
    TRANSPORT = "運輸省令"
    COMMUNICATIONS = "逓信省令"
    LABOR = "労働省令"
    CONSTRUCTION = "建設省令"
    PRICE_AGENCY = "物価庁令"
    COMMERCE_AND_INDUSTRY = "商工省令"
    CENTRAL_LABOR_RELATIONS_COMMISSION = "中央労働委員会規則"
    FAIR_TRADE_COMMISSION = "公正取引委員会規則"
    NATIONAL_PUBLIC_SAFETY_COMMISSION = "国家公安委員会規則"


class M5IssuingBody(IssuingBody):
    """1949-06-01 to 2001-01-05."""

    ATTORNEY_GENERAL = "法務庁令"
    PRIME_MINISTERS_AGENCY = "総理庁令"
    ECONOMIC_STABILIZATION_BOARD = "経済安定本部令"
    HOME_AFFAIRS = "自治省令"
    JUSTICE = "法務省令"
    FOREIGN_AFFAIRS = "外務省令"
    FINANCE = "大蔵省令"
    EDUCATION = "文部省令"
    HEALTH_AND_WELFARE = "厚生省令"
    AGRICULTURE_FORESTRY_AND_FISHERIES = "農林水産省令"
    INTERNATIONAL_TRADE_AND_INDUSTRY = "通商産業省令"
    TRANSPORT = "運輸省令"
    POSTS_AND_TELECOMMUNICATIONS = "郵政省令"
    LABOR = "労働省令"
    CONSTRUCTION = "建設省令"
    PRICE_AGENCY = "物価庁令"
    AGRICULTURE_AND_FORESTRY = "農林省令"
    TELECOMMUNICATIONS = "電気通信省令"
    CENTRAL_GOVERNMENT_REFORM_HEADQUARTERS = "中央省庁等改革推進本部令"
    RADIO_REGULATORY_COMMISSION = "電波監理委員会規則"
    CENTRAL_LABOR_RELATIONS_COMMISSION = "中央労働委員会規則"
    FAIR_TRADE_COMMISSION = "公正取引委員会規則"
    NATIONAL_PUBLIC_SAFETY_COMMISSION = "国家公安委員会規則"
    ENVIRONMENTAL_DISPUTE_COORDINATION_COMMISSION = "公害等調整委員会規則"
    PUBLIC_SECURITY_EXAMINATION_COMMISSION = "公安審査委員会規則"


class M6IssuingBody(IssuingBody):
    """2001-01-06 onward."""

    CABINET_SECRETARIAT = "内閣官房令"
    CABINET_OFFICE = "内閣府令"
    RECONSTRUCTION_AGENCY = "復興庁令"
    INTERNAL_AFFAIRS_AND_COMMUNICATIONS = "総務省令"
    JUSTICE = "法務省令"
    FOREIGN_AFFAIRS = "外務省令"
    FINANCE = "財務省令"
    EDUCATION_CULTURE_SPORTS_SCIENCE_AND_TECHNOLOGY = "文部科学省令"
    HEALTH_LABOUR_AND_WELFARE = "厚生労働省令"
    AGRICULTURE_FORESTRY_AND_FISHERIES = "農林水産省令"
    ECONOMY_TRADE_AND_INDUSTRY = "経済産業省令"
    LAND_INFRASTRUCTURE_TRANSPORT_AND_TOURISM = "国土交通省令"
    ENVIRONMENT = "環境省令"
    DEFENSE = "防衛省令"
    DIGITAL_AGENCY = "デジタル庁令"
    PERSONAL_INFORMATION_PROTECTION_COMMISSION = "特定個人情報保護委員会規則"
    JAPAN_TRANSPORT_SAFETY_BOARD = "運輸安全委員会規則"
    NUCLEAR_REGULATION_AUTHORITY = "原子力規制委員会規則"
    CENTRAL_LABOR_RELATIONS_COMMISSION = "中央労働委員会規則"
    FAIR_TRADE_COMMISSION = "公正取引委員会規則"
    NATIONAL_PUBLIC_SAFETY_COMMISSION = "国家公安委員会規則"
    ENVIRONMENTAL_DISPUTE_COORDINATION_COMMISSION = "公害等調整委員会規則"
    PUBLIC_SECURITY_EXAMINATION_COMMISSION = "公安審査委員会規則"
    CASINO_REGULATORY_COMMISSION = "カジノ管理委員会規則"


# (member, bit position, substrings that must all occur in the name)
PeriodEntry = Tuple[IssuingBody, int, Tuple[str, ...]]


class IssuingBodyPeriod:
    """
    Table-driven description of one period: its date range and, for every
    issuing body, the bit position and the rule that recognizes its name.
    All six periods share the mask codec implemented here.
    """

    def __init__(
        self,
        tag: str,
        member_type: Type[IssuingBody],
        start: Date,
        end: Date,
        entries: Sequence[PeriodEntry],
    ) -> None:
        self.tag = tag
        self.member_type = member_type
        self.start = start
        self.end = end
        self._entries: Tuple[PeriodEntry, ...] = tuple(entries)
        self._positions: Dict[IssuingBody, int] = {}
        self._members: Dict[int, IssuingBody] = {}

        for member, position, _ in self._entries:
            if not isinstance(member, member_type):
                raise TypeError(f"{member!r} does not belong to period {tag}")
            if not 1 <= position <= MASK_BITS:
                raise ValueError(f"Bit position {position} out of range in period {tag}")
            if position in self._members or member in self._positions:
                raise ValueError(f"Duplicate entry for {member!r} / {position} in period {tag}")
            self._positions[member] = position
            self._members[position] = member

        missing = set(member_type) - set(self._positions)
        if missing:
            raise ValueError(f"Period {tag} has no bit position for {sorted(m.name for m in missing)}")

    def __repr__(self) -> str:
        return f"IssuingBodyPeriod({self.tag})"

    @property
    def members(self) -> List[IssuingBody]:
        """Members in enumeration order."""
        return [member for member, _, _ in self._entries]

    def to_bit_position(self, member: IssuingBody) -> int:
        try:
            return self._positions[member]
        except KeyError:
            raise ValueError(f"{member!r} is not an issuing body of period {self.tag}") from None

    def from_bit_position(self, position: int) -> Optional[IssuingBody]:
        return self._members.get(position)

    def period_start(self) -> Date:
        return self.start

    def period_end(self) -> Date:
        return self.end

    def applicable(self, date: Date) -> bool:
        return self.start <= date <= self.end

    def applicable_wareki(self, wareki: Wareki) -> bool:
        """Year-granular test; a boundary year belongs to both adjacent periods."""
        return self.start.year <= wareki.to_ad() <= self.end.year

    def normalize(self, members: Iterable[IssuingBody]) -> Tuple[IssuingBody, ...]:
        """Deduplicate and order by descending bit position, the order a mask decodes in."""
        return tuple(sorted(set(members), key=self.to_bit_position, reverse=True))

    def encode_members(self, members: Iterable[IssuingBody]) -> str:
        """
        Pack the members into a 28-bit mask rendered as 7 uppercase hex digits.

        >>> M5_PERIOD.encode_members([M5IssuingBody.POSTS_AND_TELECOMMUNICATIONS])
        '0001000'
        """
        mask = 0
        for member in members:
            mask |= 1 << (self.to_bit_position(member) - 1)
        return f"{mask:0{MASK_HEX_DIGITS}X}"

    def decode_members(self, bits: str) -> List[IssuingBody]:
        """
        Unpack a 28-character binary string.

        Character i (0-based, left to right) stands for bit position 28 - i,
        so the leftmost character is the most significant bit.

        :raises MalformedMaskError: on a character other than '0' or '1'.
        :raises UnknownBitPositionError: if a set bit has no member in this period.
        """
        if len(bits) != MASK_BITS:
            raise MalformedFieldError(f"Mask must have {MASK_BITS} characters, got {len(bits)}", bits)

        members: List[IssuingBody] = []
        for i, char in enumerate(bits):
            if char == "1":
                position = MASK_BITS - i
                member = self.from_bit_position(position)
                if member is None:
                    raise UnknownBitPositionError(position, self.tag)
                members.append(member)
            elif char != "0":
                raise MalformedMaskError(char)
        return members

    def decode_hex(self, hex_mask: str) -> List[IssuingBody]:
        if not _HEX_PATTERN.fullmatch(hex_mask):
            raise MalformedFieldError(f"Issuing-body mask must be 7 uppercase hex digits: {hex_mask!r}", hex_mask)
        return self.decode_members(f"{int(hex_mask, 16):0{MASK_BITS}b}")

    def from_free_text(self, name: str) -> List[IssuingBody]:
        """
        Recognize every issuing body named in the text, e.g. "厚生労働省・農林水産省".

        Results follow enumeration order, not the order of appearance.
        """
        return [member for member, _, needles in self._entries if all(needle in name for needle in needles)]


M1_PERIOD = IssuingBodyPeriod(
    "M1",
    M1IssuingBody,
    Date(year=1869, month=7, day=8),
    Date(year=1943, month=10, day=31),
    [
        (M1IssuingBody.CABINET, 1, ("閣",)),
        (M1IssuingBody.IMPERIAL_HOUSEHOLD, 2, ("宮内省",)),
        (M1IssuingBody.GREATER_EAST_ASIA, 3, ("大東亜省",)),
        (M1IssuingBody.INTERIOR, 4, ("内務省",)),
        (M1IssuingBody.JUSTICE, 5, ("司法省",)),
        (M1IssuingBody.FOREIGN_AFFAIRS, 6, ("外務省",)),
        (M1IssuingBody.FINANCE, 7, ("大蔵省",)),
        (M1IssuingBody.EDUCATION, 8, ("文部省",)),
        (M1IssuingBody.HEALTH_AND_WELFARE, 9, ("厚生省",)),
        (M1IssuingBody.AGRICULTURE_AND_COMMERCE, 10, ("農商務省",)),
        (M1IssuingBody.COMMERCE_AND_INDUSTRY, 11, ("商工省",)),
        (M1IssuingBody.RAILWAYS, 12, ("鉄道省",)),
        (M1IssuingBody.COMMUNICATIONS, 13, ("逓信省",)),
        (M1IssuingBody.ARMY_KOU, 14, ("陸軍省", "甲")),
        (M1IssuingBody.NAVY, 15, ("海軍省",)),
        (M1IssuingBody.ARMY_OTSU, 16, ("陸軍省", "乙")),
        (M1IssuingBody.AGRICULTURE_AND_FORESTRY, 17, ("農林省",)),
        (M1IssuingBody.COLONIZATION, 18, ("拓殖務省",)),
        (M1IssuingBody.COLONIAL_AFFAIRS, 19, ("拓務省",)),
        (M1IssuingBody.AGRICULTURE_AND_COMMERCE_TEMPORARY, 20, ("農商務省", "臨")),
        (M1IssuingBody.JUSTICE_HEI, 21, ("司法省", "丙")),
    ],
)

M2_PERIOD = IssuingBodyPeriod(
    "M2",
    M2IssuingBody,
    Date(year=1943, month=11, day=1),
    Date(year=1945, month=11, day=30),
    [
        (M2IssuingBody.CABINET, 1, ("閣",)),
        (M2IssuingBody.IMPERIAL_HOUSEHOLD, 2, ("宮内省",)),
        (M2IssuingBody.GREATER_EAST_ASIA, 3, ("大東亜省",)),
        (M2IssuingBody.INTERIOR, 4, ("内務省",)),
        (M2IssuingBody.JUSTICE, 5, ("司法省",)),
        (M2IssuingBody.FOREIGN_AFFAIRS, 6, ("外務省",)),
        (M2IssuingBody.FINANCE, 7, ("大蔵省",)),
        (M2IssuingBody.EDUCATION, 8, ("文部省",)),
        (M2IssuingBody.HEALTH_AND_WELFARE, 9, ("厚生省",)),
        (M2IssuingBody.AGRICULTURE_AND_COMMERCE, 10, ("農商務省",)),
        (M2IssuingBody.COMMERCE_AND_INDUSTRY, 11, ("商工省",)),
        (M2IssuingBody.TRANSPORT, 12, ("運輸省",)),
        (M2IssuingBody.TRANSPORT_AND_COMMUNICATIONS, 13, ("運輸通信省",)),
        (M2IssuingBody.ARMY_KOU, 14, ("陸軍省", "甲")),
        (M2IssuingBody.NAVY, 15, ("海軍省",)),
        (M2IssuingBody.MUNITIONS, 16, ("軍需省",)),
        (M2IssuingBody.AGRICULTURE_AND_FORESTRY, 17, ("農林省",)),
    ],
)

M3_PERIOD = IssuingBodyPeriod(
    "M3",
    M3IssuingBody,
    Date(year=1945, month=12, day=1),
    Date(year=1947, month=5, day=2),
    [
        (M3IssuingBody.CABINET, 1, ("閣",)),
        (M3IssuingBody.IMPERIAL_HOUSEHOLD, 2, ("宮内省",)),
        (M3IssuingBody.ECONOMIC_STABILIZATION_BOARD, 3, ("経済安定本部",)),
        (M3IssuingBody.INTERIOR, 4, ("内務省",)),
        (M3IssuingBody.JUSTICE, 5, ("司法省",)),
        (M3IssuingBody.FOREIGN_AFFAIRS, 6, ("外務省",)),
        (M3IssuingBody.FINANCE, 7, ("大蔵省",)),
        (M3IssuingBody.EDUCATION, 8, ("文部省",)),
        (M3IssuingBody.HEALTH_AND_WELFARE, 9, ("厚生省",)),
        (M3IssuingBody.AGRICULTURE_AND_FORESTRY, 10, ("農林省",)),
        (M3IssuingBody.COMMERCE_AND_INDUSTRY, 11, ("商工省",)),
        (M3IssuingBody.TRANSPORT, 12, ("運輸省",)),
        (M3IssuingBody.COMMUNICATIONS, 13, ("逓信省",)),
        (M3IssuingBody.FIRST_DEMOBILIZATION, 14, ("第一復員省",)),
        (M3IssuingBody.SECOND_DEMOBILIZATION, 15, ("第二復員省",)),
        (M3IssuingBody.PRICE_AGENCY, 16, ("物価庁",)),
        (M3IssuingBody.CENTRAL_LABOR_RELATIONS_COMMISSION, 21, ("中央労働委員会",)),
    ],
)

M4_PERIOD = IssuingBodyPeriod(
    "M4",
    M4IssuingBody,
    Date(year=1947, month=5, day=3),
    Date(year=1949, month=5, day=31),
    [
        (M4IssuingBody.ATTORNEY_GENERAL, 1, ("法務庁",)),
        (M4IssuingBody.PRIME_MINISTERS_AGENCY, 2, ("総理庁",)),
        (M4IssuingBody.ECONOMIC_STABILIZATION_BOARD, 3, ("経済安定本部",)),
        (M4IssuingBody.INTERIOR, 4, ("内務省",)),
        (M4IssuingBody.JUSTICE, 5, ("司法省",)),
        (M4IssuingBody.FOREIGN_AFFAIRS, 6, ("外務省",)),
        (M4IssuingBody.FINANCE, 7, ("大蔵省",)),
        (M4IssuingBody.EDUCATION, 8, ("文部省",)),
        (M4IssuingBody.HEALTH_AND_WELFARE, 9, ("厚生省",)),
        (M4IssuingBody.AGRICULTURE_AND_FORESTRY, 10, ("農林省",)),
        (M4IssuingBody.INTERNATIONAL_TRADE_AND_INDUSTRY, 11, ("通商産業省",)),
        (M4IssuingBody.TRANSPORT, 12, ("運輸省",)),
        (M4IssuingBody.COMMUNICATIONS, 13, ("逓信省",)),
        (M4IssuingBody.LABOR, 14, ("労働省",)),
        (M4IssuingBody.CONSTRUCTION, 15, ("建設省",)),
        (M4IssuingBody.PRICE_AGENCY, 16, ("物価庁",)),
        (M4IssuingBody.COMMERCE_AND_INDUSTRY, 17, ("商工省",)),
        (M4IssuingBody.CENTRAL_LABOR_RELATIONS_COMMISSION, 21, ("中央労働委員会",)),
        (M4IssuingBody.FAIR_TRADE_COMMISSION, 22, ("公正取引委員会",)),
        (M4IssuingBody.NATIONAL_PUBLIC_SAFETY_COMMISSION, 23, ("国家公安委員会",)),
    ],
)

M5_PERIOD = IssuingBodyPeriod(
    "M5",
    M5IssuingBody,
    Date(year=1949, month=6, day=1),
    Date(year=2001, month=1, day=5),
    [
        (M5IssuingBody.ATTORNEY_GENERAL, 1, ("法務庁",)),
        (M5IssuingBody.PRIME_MINISTERS_AGENCY, 2, ("総理庁",)),
        (M5IssuingBody.ECONOMIC_STABILIZATION_BOARD, 3, ("経済安定本部",)),
        (M5IssuingBody.HOME_AFFAIRS, 4, ("自治省",)),
        (M5IssuingBody.JUSTICE, 5, ("法務省",)),
        (M5IssuingBody.FOREIGN_AFFAIRS, 6, ("外務省",)),
        (M5IssuingBody.FINANCE, 7, ("大蔵省",)),
        (M5IssuingBody.EDUCATION, 8, ("文部省",)),
        (M5IssuingBody.HEALTH_AND_WELFARE, 9, ("厚生省",)),
        (M5IssuingBody.AGRICULTURE_FORESTRY_AND_FISHERIES, 10, ("農林水産省",)),
        (M5IssuingBody.INTERNATIONAL_TRADE_AND_INDUSTRY, 11, ("通商産業省",)),
        (M5IssuingBody.TRANSPORT, 12, ("運輸省",)),
        (M5IssuingBody.POSTS_AND_TELECOMMUNICATIONS, 13, ("郵政省",)),
        (M5IssuingBody.LABOR, 14, ("労働省",)),
        (M5IssuingBody.CONSTRUCTION, 15, ("建設省",)),
        (M5IssuingBody.PRICE_AGENCY, 16, ("物価庁",)),
        (M5IssuingBody.AGRICULTURE_AND_FORESTRY, 17, ("農林省",)),
        (M5IssuingBody.TELECOMMUNICATIONS, 18, ("電気通信省",)),
        (M5IssuingBody.CENTRAL_GOVERNMENT_REFORM_HEADQUARTERS, 19, ("中央省庁等改革推進本部",)),
        (M5IssuingBody.RADIO_REGULATORY_COMMISSION, 20, ("電波監理委員会",)),
        (M5IssuingBody.CENTRAL_LABOR_RELATIONS_COMMISSION, 21, ("中央労働委員会",)),
        (M5IssuingBody.FAIR_TRADE_COMMISSION, 22, ("公正取引委員会",)),
        (M5IssuingBody.NATIONAL_PUBLIC_SAFETY_COMMISSION, 23, ("国家公安委員会",)),
        (M5IssuingBody.ENVIRONMENTAL_DISPUTE_COORDINATION_COMMISSION, 24, ("公害等調整委員会",)),
        (M5IssuingBody.PUBLIC_SECURITY_EXAMINATION_COMMISSION, 25, ("公安審査委員会",)),
    ],
)

M6_PERIOD = IssuingBodyPeriod(
    "M6",
    M6IssuingBody,
    Date(year=2001, month=1, day=6),
    Date.max(),
    [
        (M6IssuingBody.CABINET_SECRETARIAT, 1, ("内閣官房",)),
        (M6IssuingBody.CABINET_OFFICE, 2, ("内閣府",)),
        (M6IssuingBody.RECONSTRUCTION_AGENCY, 3, ("復興庁",)),
        (M6IssuingBody.INTERNAL_AFFAIRS_AND_COMMUNICATIONS, 4, ("総務省",)),
        (M6IssuingBody.JUSTICE, 5, ("法務省",)),
        (M6IssuingBody.FOREIGN_AFFAIRS, 6, ("外務省",)),
        (M6IssuingBody.FINANCE, 7, ("財務省",)),
        (M6IssuingBody.EDUCATION_CULTURE_SPORTS_SCIENCE_AND_TECHNOLOGY, 8, ("文部科学省",)),
        (M6IssuingBody.HEALTH_LABOUR_AND_WELFARE, 9, ("厚生労働省",)),
        (M6IssuingBody.AGRICULTURE_FORESTRY_AND_FISHERIES, 10, ("農林水産省",)),
        (M6IssuingBody.ECONOMY_TRADE_AND_INDUSTRY, 11, ("経済産業省",)),
        (M6IssuingBody.LAND_INFRASTRUCTURE_TRANSPORT_AND_TOURISM, 12, ("国土交通省",)),
        (M6IssuingBody.ENVIRONMENT, 13, ("環境省",)),
        (M6IssuingBody.DEFENSE, 14, ("防衛省",)),
        (M6IssuingBody.DIGITAL_AGENCY, 15, ("デジタル庁",)),
        (M6IssuingBody.PERSONAL_INFORMATION_PROTECTION_COMMISSION, 18, ("特定個人情報保護委員会",)),
        (M6IssuingBody.JAPAN_TRANSPORT_SAFETY_BOARD, 19, ("運輸安全委員会",)),
        (M6IssuingBody.NUCLEAR_REGULATION_AUTHORITY, 20, ("原子力規制委員会",)),
        (M6IssuingBody.CENTRAL_LABOR_RELATIONS_COMMISSION, 21, ("中央労働委員会",)),
        (M6IssuingBody.FAIR_TRADE_COMMISSION, 22, ("公正取引委員会",)),
        (M6IssuingBody.NATIONAL_PUBLIC_SAFETY_COMMISSION, 23, ("国家公安委員会",)),
        (M6IssuingBody.ENVIRONMENTAL_DISPUTE_COORDINATION_COMMISSION, 24, ("公害等調整委員会",)),
        (M6IssuingBody.PUBLIC_SECURITY_EXAMINATION_COMMISSION, 25, ("公安審査委員会",)),
        (M6IssuingBody.CASINO_REGULATORY_COMMISSION, 26, ("カジノ管理委員会",)),
    ],
)

PERIODS: Tuple[IssuingBodyPeriod, ...] = (M1_PERIOD, M2_PERIOD, M3_PERIOD, M4_PERIOD, M5_PERIOD, M6_PERIOD)


def period_for_date(date: Date) -> IssuingBodyPeriod:
    for period in PERIODS:
        if period.applicable(date):
            return period
    raise PeriodLookupError(f"No issuing-body period covers {date.year:04}-{date.month:02}-{date.day:02}")


def period_for_wareki(wareki: Wareki) -> IssuingBodyPeriod:
    """First period, in M1..M6 order, whose years include the Wareki year."""
    for period in PERIODS:
        if period.applicable_wareki(wareki):
            return period
    raise PeriodLookupError(f"No issuing-body period covers {wareki.to_text()}")


class Ministry(BaseModel):
    """
    The issuing bodies of one ministerial ordinance, all from the same period.

    Concrete subclasses (M1Ministry ... M6Ministry) fix the period; use the
    AnyMinistry annotation to accept any of them. Members are stored
    deduplicated and ordered by descending bit position.
    """

    model_config = ConfigDict(frozen=True)

    period_table: ClassVar[IssuingBodyPeriod]

    period: str
    members: Tuple[Any, ...]

    @field_validator("members", mode="before", check_fields=False)
    @classmethod
    def reject_foreign_members(cls, members: Any) -> Any:
        if getattr(cls, "period_table", None) is None:
            raise ValueError(f"{cls.__name__} has no period; construct one of M1Ministry .. M6Ministry")
        # str-valued members of another period would otherwise be coerced by value
        if isinstance(members, (list, tuple, set, frozenset)):
            for member in members:
                if isinstance(member, IssuingBody) and not isinstance(member, cls.period_table.member_type):
                    raise ValueError(f"{member!r} is not an issuing body of period {cls.period_table.tag}")
        return members

    @field_validator("members", mode="after", check_fields=False)
    @classmethod
    def normalize_members(cls, members: Tuple[IssuingBody, ...]) -> Tuple[IssuingBody, ...]:
        if not members:
            raise ValueError("At least one issuing body is required")
        return cls.period_table.normalize(members)

    def to_id_str(self) -> str:
        return f"{self.period}{self.period_table.encode_members(self.members)}"

    @staticmethod
    def from_id_str(s: str) -> "AnyMinistry":
        """
        Decode the 9-character issuing-body part of a law ID, e.g. "M50001000".

        :raises DecodeError: on an unknown period tag, a malformed mask or an empty set.
        """
        if len(s) != 2 + MASK_HEX_DIGITS:
            raise MalformedFieldError(f"Issuing-body code must have 9 characters: {s!r}", s)

        tag = s[:2]
        model = MINISTRY_TYPES.get(tag)
        if model is None:
            logger.debug(f"Unknown issuing-body period tag in {s!r}")
            raise UnknownTagError(tag)

        members = model.period_table.decode_hex(s[2:])
        if not members:
            raise MalformedFieldError(f"Issuing-body mask is empty: {s!r}", s)
        return model(members=tuple(members))

    @staticmethod
    def from_title(title: TitleMatch) -> "AnyMinistry":
        """Build the issuing-body set from an already parsed title."""
        if title.date is not None:
            period = period_for_date(title.date)
        else:
            logger.debug(f"No full date in title, selecting period by year {title.wareki.to_ad()}")
            period = period_for_wareki(title.wareki)

        members = period.from_free_text(title.body)
        if not members:
            raise ExtractionError(f"No {period.tag} issuing body recognized in {title.body!r}")
        return MINISTRY_TYPES[period.tag](members=tuple(members))

    @staticmethod
    def from_name(text: str) -> "AnyMinistry":
        """
        Identify the issuing bodies from a title such as "昭和二十五年郵政省令第四号".

        The promulgation year (and date, when given) selects the period, then
        the text before the trailing 令/規則 is matched against that period's names.

        :raises ExtractionError: if the era, year or issuing body cannot be located.
        :raises PeriodLookupError: if no period covers the promulgation date.
        """
        title = parse_title(text)
        if title is None:
            raise ExtractionError(f"Unexpected input: {text!r}")
        return Ministry.from_title(title)


class M1Ministry(Ministry):
    period_table: ClassVar[IssuingBodyPeriod] = M1_PERIOD
    period: Literal["M1"] = "M1"
    members: Tuple[M1IssuingBody, ...]


class M2Ministry(Ministry):
    period_table: ClassVar[IssuingBodyPeriod] = M2_PERIOD
    period: Literal["M2"] = "M2"
    members: Tuple[M2IssuingBody, ...]


class M3Ministry(Ministry):
    period_table: ClassVar[IssuingBodyPeriod] = M3_PERIOD
    period: Literal["M3"] = "M3"
    members: Tuple[M3IssuingBody, ...]


class M4Ministry(Ministry):
    period_table: ClassVar[IssuingBodyPeriod] = M4_PERIOD
    period: Literal["M4"] = "M4"
    members: Tuple[M4IssuingBody, ...]


class M5Ministry(Ministry):
    period_table: ClassVar[IssuingBodyPeriod] = M5_PERIOD
    period: Literal["M5"] = "M5"
    members: Tuple[M5IssuingBody, ...]


class M6Ministry(Ministry):
    period_table: ClassVar[IssuingBodyPeriod] = M6_PERIOD
    period: Literal["M6"] = "M6"
    members: Tuple[M6IssuingBody, ...]


AnyMinistry = Annotated[
    Union[M1Ministry, M2Ministry, M3Ministry, M4Ministry, M5Ministry, M6Ministry],
    Field(discriminator="period"),
]

MINISTRY_TYPES: Dict[str, Any] = {
    "M1": M1Ministry,
    "M2": M2Ministry,
    "M3": M3Ministry,
    "M4": M4Ministry,
    "M5": M5Ministry,
    "M6": M6Ministry,
}
