"""Tests for NumeralKind: representative characters, dispatch and range checks."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from numeralengine.constants import MAX_NUMBER
from numeralengine.diagnostics import DiagnosticCode, NumberOutOfRangeError
from numeralengine.numerals import NumeralKind, validate_number
from numeralengine.numerals.tables import GREEK_KERAIA, GREEK_ZERO_SIGN
from tests.strategies import PATTERN_KINDS, ZEROLESS_KINDS, numeral_kinds, zeroless_kinds


class TestRepresentativeCharacters:
    """Test from_char / to_char."""

    @pytest.mark.parametrize("kind", PATTERN_KINDS)
    def test_from_char_inverts_to_char(self, kind: NumeralKind) -> None:
        """Every kind reachable from pattern syntax round-trips its character."""
        assert NumeralKind.from_char(kind.to_char()) is kind

    def test_traditional_chinese_shares_simplified_characters(self) -> None:
        """Traditional Chinese kinds serialize to the Simplified characters."""
        assert NumeralKind.LOWER_TRADITIONAL_CHINESE.to_char() == "一"
        assert NumeralKind.UPPER_TRADITIONAL_CHINESE.to_char() == "壹"
        assert NumeralKind.from_char("一") is NumeralKind.LOWER_SIMPLIFIED_CHINESE
        assert NumeralKind.from_char("壹") is NumeralKind.UPPER_SIMPLIFIED_CHINESE

    @pytest.mark.parametrize("c", ["2", "b", "x", ".", ")", " ", "#", "†", "二", ""])
    def test_non_counting_characters(self, c: str) -> None:
        """Characters other than the representative ones are not counting symbols."""
        assert NumeralKind.from_char(c) is None

    def test_every_kind_has_single_character(self) -> None:
        """to_char always returns exactly one code point."""
        for kind in NumeralKind:
            assert len(kind.to_char()) == 1

    def test_str_is_value(self) -> None:
        """StrEnum members convert to their kebab-case value."""
        assert str(NumeralKind.LOWER_ROMAN) == "lower-roman"
        assert NumeralKind("circled-number") is NumeralKind.CIRCLED_NUMBER


class TestZeroRepresentation:
    """Test apply(0) for every kind."""

    @pytest.mark.parametrize("kind", ZEROLESS_KINDS)
    def test_zeroless_kinds_render_dash(self, kind: NumeralKind) -> None:
        """Systems without a zero render it as a dash."""
        assert kind.apply(0) == "-"

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (NumeralKind.ARABIC, "0"),
            (NumeralKind.LOWER_ROMAN, "n"),
            (NumeralKind.UPPER_ROMAN, "N"),
            (NumeralKind.LOWER_GREEK, GREEK_ZERO_SIGN),
            (NumeralKind.UPPER_GREEK, GREEK_ZERO_SIGN),
            (NumeralKind.LOWER_SIMPLIFIED_CHINESE, "零"),
            (NumeralKind.UPPER_SIMPLIFIED_CHINESE, "零"),
            (NumeralKind.LOWER_TRADITIONAL_CHINESE, "零"),
            (NumeralKind.UPPER_TRADITIONAL_CHINESE, "零"),
            (NumeralKind.EASTERN_ARABIC, "\u0660"),
            (NumeralKind.EASTERN_ARABIC_PERSIAN, "\u06f0"),
            (NumeralKind.DEVANAGARI_NUMBER, "\u0966"),
            (NumeralKind.BENGALI_NUMBER, "\u09e6"),
        ],
    )
    def test_systems_with_zero(self, kind: NumeralKind, expected: str) -> None:
        """Systems with a zero notation use it."""
        assert kind.apply(0) == expected


class TestApply:
    """Test representative renderings through NumeralKind.apply."""

    @pytest.mark.parametrize(
        ("kind", "n", "expected"),
        [
            (NumeralKind.ARABIC, 42, "42"),
            (NumeralKind.LOWER_LATIN, 1, "a"),
            (NumeralKind.LOWER_LATIN, 26, "z"),
            (NumeralKind.LOWER_LATIN, 27, "aa"),
            (NumeralKind.LOWER_LATIN, 702, "zz"),
            (NumeralKind.LOWER_LATIN, 703, "aaa"),
            (NumeralKind.UPPER_LATIN, 28, "AB"),
            (NumeralKind.LOWER_ROMAN, 14, "xiv"),
            (NumeralKind.UPPER_ROMAN, 2024, "MMXXIV"),
            (NumeralKind.SYMBOL, 3, "‡"),
            (NumeralKind.SYMBOL, 7, "**"),
            (NumeralKind.HEBREW, 11, "י״א"),
            (NumeralKind.HIRAGANA_AIUEO, 1, "あ"),
            (NumeralKind.HIRAGANA_IROHA, 2, "ろ"),
            (NumeralKind.KATAKANA_AIUEO, 46, "ン"),
            (NumeralKind.KATAKANA_IROHA, 1, "イ"),
            (NumeralKind.KOREAN_JAMO, 2, "ㄴ"),
            (NumeralKind.KOREAN_SYLLABLE, 3, "다"),
            (NumeralKind.BENGALI_LETTER, 1, "ক"),
            (NumeralKind.CIRCLED_NUMBER, 1, "①"),
            (NumeralKind.CIRCLED_NUMBER, 20, "\u2473"),
            (NumeralKind.CIRCLED_NUMBER, 21, "\u3251"),
            (NumeralKind.CIRCLED_NUMBER, 50, "\u32bf"),
            (NumeralKind.CIRCLED_NUMBER, 51, "①①"),
            (NumeralKind.DOUBLE_CIRCLED_NUMBER, 10, "\u24fe"),
            (NumeralKind.DOUBLE_CIRCLED_NUMBER, 11, "\u24f5\u24f5"),
            (NumeralKind.EASTERN_ARABIC, 2024, "\u0662\u0660\u0662\u0664"),
            (NumeralKind.EASTERN_ARABIC_PERSIAN, 19, "\u06f1\u06f9"),
            (NumeralKind.DEVANAGARI_NUMBER, 108, "\u0967\u0966\u096e"),
            (NumeralKind.BENGALI_NUMBER, 5, "\u09eb"),
            (NumeralKind.LOWER_SIMPLIFIED_CHINESE, 12, "十二"),
            (NumeralKind.UPPER_SIMPLIFIED_CHINESE, 2, "贰"),
            (NumeralKind.LOWER_TRADITIONAL_CHINESE, 10_000, "一萬"),
            (NumeralKind.UPPER_TRADITIONAL_CHINESE, 2, "貳"),
        ],
    )
    def test_renderings(self, kind: NumeralKind, n: int, expected: str) -> None:
        """Known values render as expected."""
        assert kind.apply(n) == expected

    def test_greek_uses_keraia(self) -> None:
        """Greek numerals below 1000 end with the keraia."""
        assert NumeralKind.LOWER_GREEK.apply(1) == "α" + GREEK_KERAIA
        assert NumeralKind.UPPER_GREEK.apply(1) == "Α" + GREEK_KERAIA

    @given(kind=numeral_kinds)
    def test_max_number_is_supported(self, kind: NumeralKind) -> None:
        """Every kind renders the largest counter value."""
        event(f"kind={kind}")
        assert kind.apply(MAX_NUMBER)

    @given(kind=numeral_kinds, n=st.integers(min_value=0, max_value=100_000))
    def test_apply_is_deterministic(self, kind: NumeralKind, n: int) -> None:
        """Applying the same kind to the same number yields the same text."""
        assert kind.apply(n) == kind.apply(n)

    @given(kind=zeroless_kinds, data=st.data())
    def test_zeroless_kinds_are_injective(self, kind: NumeralKind, data: st.DataObject) -> None:
        """Distinct positive numbers render differently in letter systems."""
        a = data.draw(st.integers(min_value=1, max_value=5000), label="a")
        b = data.draw(st.integers(min_value=1, max_value=5000).filter(lambda x: x != a), label="b")
        event(f"kind={kind}")
        assert kind.apply(a) != kind.apply(b)


class TestNumberValidation:
    """Test the accepted number domain."""

    def test_negative_rejected(self) -> None:
        """Negative numbers raise NumberOutOfRangeError."""
        with pytest.raises(NumberOutOfRangeError) as exc_info:
            NumeralKind.ARABIC.apply(-1)
        assert exc_info.value.value == -1
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NUMBER_NEGATIVE

    def test_too_large_rejected(self) -> None:
        """Numbers past MAX_NUMBER raise NumberOutOfRangeError."""
        with pytest.raises(NumberOutOfRangeError) as exc_info:
            NumeralKind.LOWER_GREEK.apply(MAX_NUMBER + 1)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NUMBER_TOO_LARGE

    @pytest.mark.parametrize("value", [True, False, 1.0, "1", None])
    def test_non_integers_rejected(self, value: object) -> None:
        """Non-int values, bool included, are rejected."""
        with pytest.raises(NumberOutOfRangeError) as exc_info:
            validate_number(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NUMBER_NOT_INTEGER

    def test_out_of_range_is_value_error(self) -> None:
        """NumberOutOfRangeError can be caught as ValueError."""
        with pytest.raises(ValueError, match="negative"):
            validate_number(-5)

    @given(n=st.integers(min_value=0, max_value=MAX_NUMBER))
    def test_domain_values_pass_through(self, n: int) -> None:
        """Values in range are returned unchanged."""
        assert validate_number(n) == n


class TestNumberingSystems:
    """Test the CLDR numbering system mapping."""

    @pytest.mark.parametrize(
        ("system_id", "kind"),
        [
            ("latn", NumeralKind.ARABIC),
            ("arab", NumeralKind.EASTERN_ARABIC),
            ("arabext", NumeralKind.EASTERN_ARABIC_PERSIAN),
            ("deva", NumeralKind.DEVANAGARI_NUMBER),
            ("beng", NumeralKind.BENGALI_NUMBER),
            ("roman", NumeralKind.UPPER_ROMAN),
            ("romanlow", NumeralKind.LOWER_ROMAN),
            ("grek", NumeralKind.UPPER_GREEK),
            ("greklow", NumeralKind.LOWER_GREEK),
            ("hebr", NumeralKind.HEBREW),
            ("hans", NumeralKind.LOWER_SIMPLIFIED_CHINESE),
            ("hansfin", NumeralKind.UPPER_SIMPLIFIED_CHINESE),
            ("hant", NumeralKind.LOWER_TRADITIONAL_CHINESE),
            ("hantfin", NumeralKind.UPPER_TRADITIONAL_CHINESE),
        ],
    )
    def test_round_trip(self, system_id: str, kind: NumeralKind) -> None:
        """Identifiers map to kinds and back."""
        assert NumeralKind.from_numbering_system(system_id) is kind
        assert kind.numbering_system == system_id

    @pytest.mark.parametrize("system_id", ["thai", "hanidec", "", "LATN"])
    def test_unknown_identifiers(self, system_id: str) -> None:
        """Identifiers without a kind yield None."""
        assert NumeralKind.from_numbering_system(system_id) is None

    def test_kinds_without_system(self) -> None:
        """Kinds CLDR does not define report None."""
        assert NumeralKind.SYMBOL.numbering_system is None
        assert NumeralKind.HIRAGANA_IROHA.numbering_system is None
