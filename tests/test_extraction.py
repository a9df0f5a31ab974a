# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_constitution


from typing import Optional

import pytest

from japanese_law_id.era import Date, Era, Wareki
from japanese_law_id.exceptions import ExtractionError
from japanese_law_id.extraction import TitleMatch, extract_institution, parse_title, read_number
from japanese_law_id.institution import Institution


class TestParseTitle:
    def test_year_only(self) -> None:
        title = parse_title("昭和二十五年郵政省令第四号")
        assert title is not None
        assert title.wareki == Wareki(era=Era.SHOWA, year=25)
        assert title.month is None
        assert title.day is None
        assert title.date is None
        assert title.body == "郵政省"

    def test_full_date(self) -> None:
        title = parse_title("令和5年3月31日経済産業省令第60号")
        assert title is not None
        assert title.wareki == Wareki(era=Era.REIWA, year=5)
        assert title.date == Date(year=2023, month=3, day=31)
        assert title.body == "経済産業省"

    def test_kanji_date_and_rule(self) -> None:
        title = parse_title("平成二十六年十二月一日原子力規制委員会規則第五号")
        assert title is not None
        assert title.date == Date(year=2014, month=12, day=1)
        assert title.body == "原子力規制委員会"

    def test_gannen(self) -> None:
        title = parse_title("令和元年五月七日内閣府令第一号")
        assert title is not None
        assert title.wareki == Wareki(era=Era.REIWA, year=1)
        assert title.date == Date(year=2019, month=5, day=7)

    def test_month_without_day(self) -> None:
        title = parse_title("平成十年四月厚生省令第一号")
        assert title is not None
        assert title.month == 4
        assert title.day is None
        assert title.date is None

    @pytest.mark.parametrize("text", ["", "郵政省令第四号", "昭和二十五年郵政省第四号", "Postal Ordinance No. 4"])
    def test_no_match(self, text: str) -> None:
        assert parse_title(text) is None

    @pytest.mark.parametrize(
        "text",
        ["昭和十十年郵政省令第四号", "平成十年十三月一日厚生省令第一号", "平成十年一月三十二日厚生省令第一号"],
    )
    def test_unreadable_date(self, text: str) -> None:
        with pytest.raises(ExtractionError):
            parse_title(text)


class TestTitleMatch:
    def test_body_required(self) -> None:
        with pytest.raises(ValueError):
            TitleMatch(wareki=Wareki(era=Era.SHOWA, year=25), body="")

    def test_date_needs_month_and_day(self) -> None:
        title = TitleMatch(wareki=Wareki(era=Era.HEISEI, year=13), month=1, day=6, body="総務省")
        assert title.date == Date(year=2001, month=1, day=6)


@pytest.mark.parametrize(
    "text, expected",
    [("12", 12), ("１２", 12), ("十二", 12), ("一二", 12), ("abc", None), ("十十", None)],
)
def test_read_number(text: str, expected: Optional[int]) -> None:
    assert read_number(text) == expected


class TestExtractInstitution:
    def test_from_title(self) -> None:
        assert extract_institution("平成二十六年最高裁判所規則第一号") == Institution.SUPREME_COURT

    def test_without_date(self) -> None:
        assert extract_institution("会計検査院規則第三号") == Institution.BOARD_OF_AUDIT

    def test_unreadable_date_falls_back_to_text(self) -> None:
        assert extract_institution("昭和十十年衆議院規則第一号") == Institution.HOUSE_OF_REPRESENTATIVES

    def test_not_found(self) -> None:
        assert extract_institution("昭和二十五年郵政省令第四号") is None


@pytest.mark.parametrize("digit", ["1", "１"])
def test_read_number_overlong_digit_run(digit: str) -> None:
    assert read_number(digit * 5000) is None


@pytest.mark.parametrize(
    "text",
    [
        "昭和" + "1" * 5000 + "年郵政省令第四号",
        "昭和" + "１" * 5000 + "年郵政省令第四号",
        "昭和二十五年" + "1" * 5000 + "月一日郵政省令第四号",
        "昭和二十五年四月" + "１" * 5000 + "日郵政省令第四号",
    ],
)
def test_parse_title_overlong_digit_run(text: str) -> None:
    with pytest.raises(ExtractionError):
        parse_title(text)
