"""
Encode and decode Japanese law IDs and convert between Gregorian and Wareki years.
"""

__version__ = "0.1.0"
__author__ = "japanese-law-id contributors"

from japanese_law_id.era import Date, Era, Wareki, era_for, parse_wareki_text, to_gregorian_year, to_wareki
from japanese_law_id.exceptions import (
    DecodeError,
    EraLookupError,
    ExtractionError,
    LawIdError,
    MalformedFieldError,
    MalformedMaskError,
    PeriodLookupError,
    UnknownBitPositionError,
    UnknownFlagError,
    UnknownTagError,
)
from japanese_law_id.extraction import TitleMatch, extract_institution, parse_title
from japanese_law_id.institution import Institution
from japanese_law_id.law_id import LawId
from japanese_law_id.law_type import (
    Act,
    CabinetOrder,
    Constitution,
    DajokanFukoku,
    DajokanFutatsu,
    DajokanTasshi,
    ImperialOrder,
    InstitutionRegulation,
    LawType,
    LegalForce,
    LegislativeOrigin,
    MinistryOrder,
    PersonnelAuthorityRule,
    PrimeMinisterDecision,
    law_type_from_id_str,
)
from japanese_law_id.ministry import (
    PERIODS,
    AnyMinistry,
    IssuingBody,
    IssuingBodyPeriod,
    M1IssuingBody,
    M1Ministry,
    M2IssuingBody,
    M2Ministry,
    M3IssuingBody,
    M3Ministry,
    M4IssuingBody,
    M4Ministry,
    M5IssuingBody,
    M5Ministry,
    M6IssuingBody,
    M6Ministry,
    Ministry,
    period_for_date,
    period_for_wareki,
)
from japanese_law_id.numerals import kanji_to_int

__all__ = [
    "Act",
    "AnyMinistry",
    "CabinetOrder",
    "Constitution",
    "DajokanFukoku",
    "DajokanFutatsu",
    "DajokanTasshi",
    "Date",
    "DecodeError",
    "Era",
    "EraLookupError",
    "ExtractionError",
    "ImperialOrder",
    "Institution",
    "InstitutionRegulation",
    "IssuingBody",
    "IssuingBodyPeriod",
    "LawId",
    "LawIdError",
    "LawType",
    "LegalForce",
    "LegislativeOrigin",
    "M1IssuingBody",
    "M1Ministry",
    "M2IssuingBody",
    "M2Ministry",
    "M3IssuingBody",
    "M3Ministry",
    "M4IssuingBody",
    "M4Ministry",
    "M5IssuingBody",
    "M5Ministry",
    "M6IssuingBody",
    "M6Ministry",
    "MalformedFieldError",
    "MalformedMaskError",
    "Ministry",
    "MinistryOrder",
    "PERIODS",
    "PeriodLookupError",
    "PersonnelAuthorityRule",
    "PrimeMinisterDecision",
    "TitleMatch",
    "UnknownBitPositionError",
    "UnknownFlagError",
    "UnknownTagError",
    "Wareki",
    "era_for",
    "extract_institution",
    "kanji_to_int",
    "law_type_from_id_str",
    "parse_title",
    "parse_wareki_text",
    "period_for_date",
    "period_for_wareki",
    "to_gregorian_year",
    "to_wareki",
]
