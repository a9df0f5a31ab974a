from enum import Enum
from typing import Dict, Optional


class Institution(str, Enum):
    """
    Bodies outside the ministry periods that issue their own regulations
    (law IDs of the form R<8-digit code><serial>).
    """

    BOARD_OF_AUDIT = "会計検査院"
    COAST_GUARD = "海上保安庁"
    SCIENCE_COUNCIL_OF_JAPAN = "日本学術会議"
    LAND_ADJUSTMENT_COMMISSION = "土地調整委員会"
    FINANCIAL_RECONSTRUCTION_COMMISSION = "金融再生委員会"
    NATIONAL_CAPITAL_REGION_DEVELOPMENT_COMMISSION = "首都圏整備委員会"
    LOCAL_FINANCE_COMMISSION = "地方財政委員会"
    BAR_EXAMINATION_ADMINISTRATION_COMMISSION = "司法試験管理委員会"
    CPA_ADMINISTRATION_COMMISSION = "公認会計士管理委員会"
    FOREIGN_INVESTMENT_COMMISSION = "外資委員会"
    CULTURAL_PROPERTIES_PROTECTION_COMMISSION = "文化財保護委員会"
    JAPANESE_NATIONAL_COMMISSION_FOR_UNESCO = "日本ユネスコ国内委員会"
    SUPREME_COURT = "最高裁判所"
    HOUSE_OF_REPRESENTATIVES = "衆議院"
    HOUSE_OF_COUNCILLORS = "参議院"
    SEAFARERS_CENTRAL_LABOR_COMMISSION = "船員中央労働委員会"
    RADIO_REGULATORY_COMMISSION = "電波監理委員会"
    CASINO_REGULATORY_COMMISSION = "カジノ管理委員会"

    def to_int(self) -> int:
        return INSTITUTION_CODES[self]

    @classmethod
    def from_int(cls, code: int) -> Optional["Institution"]:
        """
        Look up an institution by its code.

        Code 17 is not assigned: the old table resolved it to the bar examination
        commission, which would not re-encode to the same ID.
        """
        return _INSTITUTIONS_BY_CODE.get(code)

    @classmethod
    def from_name(cls, name: str) -> Optional["Institution"]:
        """First institution, in enumeration order, whose name occurs in the text."""
        for institution in cls:
            if institution.value in name:
                return institution
        return None


INSTITUTION_CODES: Dict[Institution, int] = {
    Institution.BOARD_OF_AUDIT: 1,
    Institution.COAST_GUARD: 2,
    Institution.SCIENCE_COUNCIL_OF_JAPAN: 3,
    Institution.LAND_ADJUSTMENT_COMMISSION: 4,
    Institution.FINANCIAL_RECONSTRUCTION_COMMISSION: 5,
    Institution.NATIONAL_CAPITAL_REGION_DEVELOPMENT_COMMISSION: 6,
    Institution.LOCAL_FINANCE_COMMISSION: 7,
    Institution.BAR_EXAMINATION_ADMINISTRATION_COMMISSION: 8,
    Institution.CPA_ADMINISTRATION_COMMISSION: 9,
    Institution.FOREIGN_INVESTMENT_COMMISSION: 10,
    Institution.CULTURAL_PROPERTIES_PROTECTION_COMMISSION: 11,
    Institution.JAPANESE_NATIONAL_COMMISSION_FOR_UNESCO: 12,
    Institution.SUPREME_COURT: 13,
    Institution.HOUSE_OF_REPRESENTATIVES: 14,
    Institution.HOUSE_OF_COUNCILLORS: 15,
    Institution.SEAFARERS_CENTRAL_LABOR_COMMISSION: 16,
    Institution.RADIO_REGULATORY_COMMISSION: 18,
    Institution.CASINO_REGULATORY_COMMISSION: 19,
}

_INSTITUTIONS_BY_CODE: Dict[int, Institution] = {code: institution for institution, code in INSTITUTION_CODES.items()}
