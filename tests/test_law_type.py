# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_constitution

import pytest

from japanese_law_id.exceptions import DecodeError, MalformedFieldError, UnknownFlagError, UnknownTagError
from japanese_law_id.institution import Institution
from japanese_law_id.law_type import (
    FORCE_ORDER_TYPES,
    Act,
    CabinetOrder,
    Constitution,
    DajokanFukoku,
    DajokanFutatsu,
    DajokanTasshi,
    ImperialOrder,
    InstitutionRegulation,
    LegalForce,
    LegislativeOrigin,
    MinistryOrder,
    PersonnelAuthorityRule,
    PrimeMinisterDecision,
    law_type_from_id_str,
    _LawTypeBase,
    read_uint,
)
from japanese_law_id.ministry import M5IssuingBody, M5Ministry, M6IssuingBody, M6Ministry


class TestEncode:
    def test_constitution(self) -> None:
        assert Constitution().to_id_str() == "CONSTITUTION"

    @pytest.mark.parametrize(
        "origin, expected",
        [
            (LegislativeOrigin.KAKUHOU, "AC0000000089"),
            (LegislativeOrigin.SHUIN, "AC1000000089"),
            (LegislativeOrigin.SANIN, "AC0100000089"),
        ],
    )
    def test_act(self, origin: LegislativeOrigin, expected: str) -> None:
        assert Act(origin=origin, num=89).to_id_str() == expected

    def test_force_orders(self) -> None:
        assert CabinetOrder(force=LegalForce.CABINET_ORDER, num=5).to_id_str() == "CO0000000005"
        assert CabinetOrder(force=LegalForce.LAW, num=5).to_id_str() == "CO1000000005"
        assert ImperialOrder(force=LegalForce.LAW, num=542).to_id_str() == "IO1000000542"
        assert DajokanFukoku(force=LegalForce.LAW, num=1).to_id_str() == "DF1000000001"
        assert DajokanTasshi(force=LegalForce.CABINET_ORDER, num=1).to_id_str() == "DT0000000001"
        assert DajokanFutatsu(force=LegalForce.CABINET_ORDER, num=1).to_id_str() == "DH0000000001"

    def test_ministry_order(self) -> None:
        order = MinistryOrder(ministry=M5Ministry(members=(M5IssuingBody.POSTS_AND_TELECOMMUNICATIONS,)), num=4)
        assert order.to_id_str() == "M50001000004"

    def test_personnel_authority_rule(self) -> None:
        rule = PersonnelAuthorityRule(kind=9, kind_serial_number=12, amendment_serial_number=3)
        assert rule.to_id_str() == "RJNJ09012003"

    def test_institution_regulation(self) -> None:
        regulation = InstitutionRegulation(institution=Institution.CULTURAL_PROPERTIES_PROTECTION_COMMISSION, num=9)
        assert regulation.to_id_str() == "R00000011009"

    def test_prime_minister_decision(self) -> None:
        assert PrimeMinisterDecision(month=3, day=31, num=1).to_id_str() == "RPMD03310001"

    def test_codes_are_twelve_characters(self) -> None:
        codes = [
            Constitution().to_id_str(),
            Act(origin=LegislativeOrigin.KAKUHOU, num=0).to_id_str(),
            PersonnelAuthorityRule(kind=99, kind_serial_number=999, amendment_serial_number=999).to_id_str(),
            PrimeMinisterDecision(month=12, day=31, num=9999).to_id_str(),
        ]
        assert all(len(code) == 12 for code in codes)

    def test_base_class_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            _LawTypeBase()  # type: ignore[abstract]

    def test_out_of_range_fields_rejected(self) -> None:
        with pytest.raises(ValueError):
            Act(origin=LegislativeOrigin.KAKUHOU, num=1000)
        with pytest.raises(ValueError):
            PersonnelAuthorityRule(kind=100, kind_serial_number=0, amendment_serial_number=0)
        with pytest.raises(ValueError):
            PrimeMinisterDecision(month=0, day=1, num=1)


class TestDecode:
    def test_constitution(self) -> None:
        assert law_type_from_id_str("CONSTITUTION") == Constitution()

    def test_act(self) -> None:
        assert law_type_from_id_str("AC0000000089") == Act(origin=LegislativeOrigin.KAKUHOU, num=89)
        assert law_type_from_id_str("AC0100000003") == Act(origin=LegislativeOrigin.SANIN, num=3)
        assert law_type_from_id_str("AC1000000003") == Act(origin=LegislativeOrigin.SHUIN, num=3)

    @pytest.mark.parametrize("tag", sorted(FORCE_ORDER_TYPES))
    def test_force_orders(self, tag: str) -> None:
        model = FORCE_ORDER_TYPES[tag]
        decoded = law_type_from_id_str(f"{tag}1000000123")
        assert isinstance(decoded, model)
        assert decoded == model(force=LegalForce.LAW, num=123)

    def test_ministry_order(self) -> None:
        decoded = law_type_from_id_str("M60001024060")
        assert decoded == MinistryOrder(
            ministry=M6Ministry(
                members=(
                    M6IssuingBody.ENVIRONMENT,
                    M6IssuingBody.FOREIGN_AFFAIRS,
                    M6IssuingBody.RECONSTRUCTION_AGENCY,
                )
            ),
            num=60,
        )

    def test_personnel_authority_rule(self) -> None:
        assert law_type_from_id_str("RJNJ09012003") == PersonnelAuthorityRule(
            kind=9, kind_serial_number=12, amendment_serial_number=3
        )

    def test_prime_minister_decision_before_institution(self) -> None:
        assert law_type_from_id_str("RPMD03310001") == PrimeMinisterDecision(month=3, day=31, num=1)

    def test_institution_regulation(self) -> None:
        assert law_type_from_id_str("R00000013002") == InstitutionRegulation(
            institution=Institution.SUPREME_COURT, num=2
        )

    @pytest.mark.parametrize(
        "code, flag",
        [("AC0000001001", 1), ("CO0100000001", 100000), ("R00000017001", 17), ("R00000000001", 0)],
    )
    def test_unknown_flag(self, code: str, flag: int) -> None:
        with pytest.raises(UnknownFlagError) as exc_info:
            law_type_from_id_str(code)
        assert exc_info.value.flag == flag

    @pytest.mark.parametrize("code, tag", [("XX0000000001", "XX"), ("ac0000000089", "ac"), ("M70001000001", "M7")])
    def test_unknown_tag(self, code: str, tag: str) -> None:
        with pytest.raises(UnknownTagError) as exc_info:
            law_type_from_id_str(code)
        assert exc_info.value.tag == tag

    @pytest.mark.parametrize(
        "code",
        [
            "AC000000089",
            "AC00000000089",
            "AC00000000x9",
            "AC０000000089",
            "RPMD13010001",
            "RPMD00010001",
            "RPMD01320001",
            "M50000000004",
            "RJNJ0901200x",
        ],
    )
    def test_malformed(self, code: str) -> None:
        with pytest.raises(MalformedFieldError):
            law_type_from_id_str(code)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            law_type_from_id_str("XX0000000001")
        assert issubclass(UnknownTagError, DecodeError)


@pytest.mark.parametrize("field, expected", [("0", 0), ("089", 89), ("1000000", 1000000)])
def test_read_uint(field: str, expected: int) -> None:
    assert read_uint(field) == expected


@pytest.mark.parametrize("field", ["", " 1", "-1", "+1", "１", "0x1"])
def test_read_uint_rejects(field: str) -> None:
    with pytest.raises(MalformedFieldError):
        read_uint(field)
