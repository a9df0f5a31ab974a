"""
Instrument kinds and their fixed-width type codes.

Every type code is exactly 12 characters: a tag followed by zero-padded
numeric fields. Leading zeros are significant and always written.
"""

import re
from abc import abstractmethod
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Literal, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from japanese_law_id.exceptions import MalformedFieldError, UnknownFlagError, UnknownTagError
from japanese_law_id.institution import Institution
from japanese_law_id.ministry import AnyMinistry, Ministry

TYPE_CODE_LENGTH = 12
CONSTITUTION_CODE = "CONSTITUTION"

_UINT_PATTERN = re.compile(r"[0-9]+")

M = TypeVar("M", bound=BaseModel)


class LegislativeOrigin(str, Enum):
    """Who introduced an act."""

    KAKUHOU = "閣法"  # cabinet bill
    SHUIN = "衆法"  # House of Representatives members' bill
    SANIN = "参法"  # House of Councillors members' bill


class LegalForce(str, Enum):
    """Whether a pre-constitution order has the force of an act or of a cabinet order."""

    CABINET_ORDER = "政令"
    LAW = "法律"


ORIGIN_FLAGS: Dict[LegislativeOrigin, int] = {
    LegislativeOrigin.KAKUHOU: 0,
    LegislativeOrigin.SHUIN: 1000000,
    LegislativeOrigin.SANIN: 100000,
}

FORCE_FLAGS: Dict[LegalForce, int] = {
    LegalForce.CABINET_ORDER: 0,
    LegalForce.LAW: 1000000,
}

_ORIGINS_BY_FLAG = {flag: origin for origin, flag in ORIGIN_FLAGS.items()}
_FORCES_BY_FLAG = {flag: force for force, flag in FORCE_FLAGS.items()}


def read_uint(field: str) -> int:
    """Parse a fixed-width field made only of ASCII digits."""
    if not _UINT_PATTERN.fullmatch(field):
        raise MalformedFieldError(f"Expected ASCII digits, got {field!r}", field)
    return int(field)


def build(model: Type[M], **fields: Any) -> M:
    """Construct a model from decoded fields, reporting constraint violations as decode errors."""
    try:
        return model(**fields)
    except ValidationError as e:
        raise MalformedFieldError(f"Invalid {model.__name__} fields {fields}: {e.errors()[0]['msg']}", fields) from e


class _LawTypeBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def to_id_str(self) -> str:
        """The 12-character type code."""


class Constitution(_LawTypeBase):
    """憲法"""

    category: Literal["constitution"] = "constitution"

    def to_id_str(self) -> str:
        return CONSTITUTION_CODE


class Act(_LawTypeBase):
    """法律: AC + 7-digit origin flag + 3-digit number."""

    category: Literal["act"] = "act"
    origin: LegislativeOrigin
    num: int = Field(..., ge=0, le=999)

    def to_id_str(self) -> str:
        return f"AC{ORIGIN_FLAGS[self.origin]:07}{self.num:03}"


class _ForceOrder(_LawTypeBase):
    """Orders carrying a legal-force flag: tag + 7-digit flag + 3-digit number."""

    tag: ClassVar[str]

    force: LegalForce
    num: int = Field(..., ge=0, le=999)

    def to_id_str(self) -> str:
        return f"{self.tag}{FORCE_FLAGS[self.force]:07}{self.num:03}"


class CabinetOrder(_ForceOrder):
    """政令"""

    tag: ClassVar[str] = "CO"
    category: Literal["cabinet_order"] = "cabinet_order"


class ImperialOrder(_ForceOrder):
    """勅令"""

    tag: ClassVar[str] = "IO"
    category: Literal["imperial_order"] = "imperial_order"


class DajokanFukoku(_ForceOrder):
    """太政官布告"""

    tag: ClassVar[str] = "DF"
    category: Literal["dajokan_fukoku"] = "dajokan_fukoku"


class DajokanTasshi(_ForceOrder):
    """太政官達"""

    tag: ClassVar[str] = "DT"
    category: Literal["dajokan_tasshi"] = "dajokan_tasshi"


class DajokanFutatsu(_ForceOrder):
    """太政官布達"""

    tag: ClassVar[str] = "DH"
    category: Literal["dajokan_futatsu"] = "dajokan_futatsu"


class MinistryOrder(_LawTypeBase):
    """府省令 and commission rules: period tag + 7-hex-digit mask + 3-digit number."""

    category: Literal["ministry_order"] = "ministry_order"
    ministry: AnyMinistry
    num: int = Field(..., ge=0, le=999)

    def to_id_str(self) -> str:
        return f"{self.ministry.to_id_str()}{self.num:03}"


class PersonnelAuthorityRule(_LawTypeBase):
    """人事院規則: RJNJ + 2-digit kind + 3-digit serial within the kind + 3-digit amendment serial."""

    category: Literal["personnel_authority_rule"] = "personnel_authority_rule"
    kind: int = Field(..., ge=0, le=99, description="Classification of the rule")
    kind_serial_number: int = Field(..., ge=0, le=999, description="Serial number within the classification")
    amendment_serial_number: int = Field(..., ge=0, le=999, description="Serial number of the amending rule")

    def to_id_str(self) -> str:
        return f"RJNJ{self.kind:02}{self.kind_serial_number:03}{self.amendment_serial_number:03}"


class InstitutionRegulation(_LawTypeBase):
    """Regulations of an institution: R + 8-digit institution code + 3-digit number."""

    category: Literal["institution_regulation"] = "institution_regulation"
    institution: Institution
    num: int = Field(..., ge=0, le=999)

    def to_id_str(self) -> str:
        return f"R{self.institution.to_int():08}{self.num:03}"


class PrimeMinisterDecision(_LawTypeBase):
    """Rules of administrative organs decided by the Prime Minister: RPMD + MMDD + 4-digit number."""

    category: Literal["prime_minister_decision"] = "prime_minister_decision"
    month: int = Field(..., ge=1, le=12, description="Month of the decision")
    day: int = Field(..., ge=1, le=31, description="Day of the decision")
    num: int = Field(..., ge=0, le=9999, description="Serial number among decisions of the same day")

    def to_id_str(self) -> str:
        return f"RPMD{self.month:02}{self.day:02}{self.num:04}"


LawType = Annotated[
    Union[
        Constitution,
        Act,
        CabinetOrder,
        ImperialOrder,
        DajokanFukoku,
        DajokanTasshi,
        DajokanFutatsu,
        MinistryOrder,
        PersonnelAuthorityRule,
        InstitutionRegulation,
        PrimeMinisterDecision,
    ],
    Field(discriminator="category"),
]

FORCE_ORDER_TYPES: Dict[str, Type[_ForceOrder]] = {
    model.tag: model for model in (CabinetOrder, ImperialOrder, DajokanFukoku, DajokanTasshi, DajokanFutatsu)
}


def law_type_from_id_str(s: str) -> LawType:
    """
    Decode a 12-character type code.

    Four-letter tags (RJNJ, RPMD) are tested before the single-letter R tag.

    :raises UnknownTagError: if no tag matches.
    :raises UnknownFlagError: on a flag or institution code outside the documented set.
    :raises MalformedFieldError: on a wrong width, a non-digit payload or an out-of-range field.
    """
    if len(s) != TYPE_CODE_LENGTH:
        raise MalformedFieldError(f"Type code must have {TYPE_CODE_LENGTH} characters: {s!r}", s)

    if s == CONSTITUTION_CODE:
        return Constitution()

    if s.startswith("AC"):
        flag = read_uint(s[2:9])
        origin = _ORIGINS_BY_FLAG.get(flag)
        if origin is None:
            raise UnknownFlagError(flag, "legislative origin flag")
        return build(Act, origin=origin, num=read_uint(s[9:12]))

    force_order = FORCE_ORDER_TYPES.get(s[:2])
    if force_order is not None:
        flag = read_uint(s[2:9])
        force = _FORCES_BY_FLAG.get(flag)
        if force is None:
            raise UnknownFlagError(flag, "legal force flag")
        return build(force_order, force=force, num=read_uint(s[9:12]))

    if s.startswith("M"):
        ministry = Ministry.from_id_str(s[:9])
        return build(MinistryOrder, ministry=ministry, num=read_uint(s[9:12]))

    if s.startswith("RJNJ"):
        return build(
            PersonnelAuthorityRule,
            kind=read_uint(s[4:6]),
            kind_serial_number=read_uint(s[6:9]),
            amendment_serial_number=read_uint(s[9:12]),
        )

    if s.startswith("RPMD"):
        return build(
            PrimeMinisterDecision,
            month=read_uint(s[4:6]),
            day=read_uint(s[6:8]),
            num=read_uint(s[8:12]),
        )

    if s.startswith("R"):
        code = read_uint(s[1:9])
        institution = Institution.from_int(code)
        if institution is None:
            raise UnknownFlagError(code, "institution code")
        return build(InstitutionRegulation, institution=institution, num=read_uint(s[9:12]))

    raise UnknownTagError(s[:2])
