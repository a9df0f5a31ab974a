from typing import Dict, Optional

KANJI_DIGITS: Dict[str, int] = {
    "〇": 0,
    "零": 0,
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
    "壱": 1,
    "弐": 2,
    "参": 3,
}

KANJI_UNITS: Dict[str, int] = {
    "十": 10,
    "百": 100,
    "千": 1000,
}

ZENKAKU_DIGITS = "０１２３４５６７８９"
HANKAKU_DIGITS = "0123456789"
_DIGIT_TABLE = str.maketrans(ZENKAKU_DIGITS, HANKAKU_DIGITS)


def to_half_width_digits(text: str) -> str:
    """Replace full-width digits (０-９) with their ASCII counterparts."""
    return text.translate(_DIGIT_TABLE)


def kanji_to_int(text: str) -> Optional[int]:
    """
    Convert a Japanese kanji numeral to an integer.

    Two notations are understood:

    - unit notation: 十五 -> 15, 二十 -> 20, 百二 -> 102, 千九百八十九 -> 1989
    - positional notation (no unit characters): 二〇 -> 20, 一九 -> 19

    :param text: The numeral, without surrounding text.
    :return: The value, or None if the text is not a well-formed numeral.
    """
    if not text:
        return None
    if any(ch not in KANJI_DIGITS and ch not in KANJI_UNITS for ch in text):
        return None

    if not any(ch in KANJI_UNITS for ch in text):
        value = 0
        for ch in text:
            value = value * 10 + KANJI_DIGITS[ch]
        return value

    total = 0
    current: Optional[int] = None
    last_unit: Optional[int] = None
    for ch in text:
        if ch in KANJI_DIGITS:
            digit = KANJI_DIGITS[ch]
            # zero never appears in unit notation, and two digits cannot be adjacent
            if digit == 0 or current is not None:
                return None
            current = digit
        else:
            unit = KANJI_UNITS[ch]
            if last_unit is not None and unit >= last_unit:
                return None
            total += (1 if current is None else current) * unit
            current = None
            last_unit = unit

    if current is not None:
        total += current
    return total
