"""Chinese numerals using the ten-thousand count method.

Large numbers are grouped by powers of 10000 (万/萬 = 10**4, 亿/億 = 10**8,
兆 = 10**12, 京 = 10**16), which is the everyday modern usage. Lowercase
numerals are the standard ones (一二三); uppercase numerals are the "banknote"
forms (壹贰叁) written on cheques and invoices to prevent tampering.

Zero handling follows the usual reading rules:

    - zeros between two non-zero digits collapse to a single 零
    - trailing zeros are not written
    - an empty or short (< 1000) lower group is introduced by 零

A number whose leading group is 10..19 drops the leading one: 十二, not 一十二.

Python 3.13+. Zero external dependencies.
"""

from numeralengine.enums import ChineseVariant, LetterCase

__all__ = ["chinese_numeral"]

_LOWER_DIGITS = "零一二三四五六七八九"
_UPPER_SIMPLIFIED_DIGITS = "零壹贰叁肆伍陆柒捌玖"
_UPPER_TRADITIONAL_DIGITS = "零壹貳參肆伍陸柒捌玖"

# Units for the thousands, hundreds and tens positions within a group.
_LOWER_UNITS = ("千", "百", "十")
_UPPER_UNITS = ("仟", "佰", "拾")

# Units for groups of four digits, lowest first.
_SIMPLIFIED_GROUP_UNITS = ("", "万", "亿", "兆", "京")
_TRADITIONAL_GROUP_UNITS = ("", "萬", "億", "兆", "京")


def _digits_for(variant: ChineseVariant, case: LetterCase) -> str:
    if case is LetterCase.LOWER:
        return _LOWER_DIGITS
    if variant is ChineseVariant.SIMPLIFIED:
        return _UPPER_SIMPLIFIED_DIGITS
    return _UPPER_TRADITIONAL_DIGITS


def _group_numeral(
    value: int, digits: str, units: tuple[str, str, str], *, leading: bool
) -> str:
    """Render one group (1..9999) of four digits."""
    thousands, rest = divmod(value, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, ones = divmod(rest, 10)

    if leading and thousands == 0 and hundreds == 0 and tens == 1:
        # 十, 十一 ... 十九
        return units[2] + (digits[ones] if ones else "")

    parts: list[str] = []
    pending_zero = False
    for digit, unit in zip(
        (thousands, hundreds, tens, ones), (*units, ""), strict=True
    ):
        if digit == 0:
            pending_zero = pending_zero or bool(parts)
            continue
        if pending_zero:
            parts.append(digits[0])
            pending_zero = False
        parts.append(digits[digit] + unit)
    return "".join(parts)


def chinese_numeral(n: int, variant: ChineseVariant, case: LetterCase) -> str:
    """Stringify a number as a Chinese numeral.

    Args:
        n: Number to convert (at most 20 decimal digits)
        variant: Simplified or Traditional characters
        case: LOWER for standard numerals, UPPER for banknote numerals

    Returns:
        The numeral; zero renders as 零

    Example:
        >>> chinese_numeral(1024, ChineseVariant.SIMPLIFIED, LetterCase.LOWER)
        '一千零二十四'
        >>> chinese_numeral(15, ChineseVariant.TRADITIONAL, LetterCase.UPPER)
        '拾伍'
        >>> chinese_numeral(100_000_001, ChineseVariant.SIMPLIFIED, LetterCase.LOWER)
        '一亿零一'
    """
    digits = _digits_for(variant, case)
    if n == 0:
        return digits[0]

    units = _LOWER_UNITS if case is LetterCase.LOWER else _UPPER_UNITS
    group_units = (
        _SIMPLIFIED_GROUP_UNITS
        if variant is ChineseVariant.SIMPLIFIED
        else _TRADITIONAL_GROUP_UNITS
    )

    groups: list[int] = []
    while n > 0:
        n, group = divmod(n, 10_000)
        groups.append(group)
    if len(groups) > len(group_units):
        msg = f"Chinese numerals support at most {4 * len(group_units)} digits"
        raise ValueError(msg)

    parts: list[str] = []
    pending_zero = False
    for index in range(len(groups) - 1, -1, -1):
        group = groups[index]
        if group == 0:
            pending_zero = pending_zero or bool(parts)
            continue
        if parts and (pending_zero or group < 1000):
            parts.append(digits[0])
        parts.append(_group_numeral(group, digits, units, leading=not parts))
        parts.append(group_units[index])
        pending_zero = False
    return "".join(parts)
