"""Hypothesis strategies for numbering patterns and counter values.

Provides custom strategies for property-based testing of the pattern parser,
serializer and formatter.
"""

from __future__ import annotations

from hypothesis import strategies as st
from hypothesis.strategies import composite

from numeralengine.constants import MAX_NUMBER
from numeralengine.numerals import NumeralKind
from numeralengine.syntax import NumberingPattern

# Kinds reachable from pattern syntax. Traditional Chinese shares its
# representative characters with Simplified Chinese.
PATTERN_KINDS: tuple[NumeralKind, ...] = tuple(
    kind
    for kind in NumeralKind
    if kind
    not in (NumeralKind.LOWER_TRADITIONAL_CHINESE, NumeralKind.UPPER_TRADITIONAL_CHINESE)
)

COUNTING_CHARS: frozenset[str] = frozenset(kind.to_char() for kind in NumeralKind)

# Separators commonly seen in document numberings.
LITERAL_ALPHABET = ".-)(]:/ §#_~"

# Kinds that render zero as "-".
ZEROLESS_KINDS: tuple[NumeralKind, ...] = (
    NumeralKind.LOWER_LATIN,
    NumeralKind.UPPER_LATIN,
    NumeralKind.SYMBOL,
    NumeralKind.HEBREW,
    NumeralKind.HIRAGANA_AIUEO,
    NumeralKind.HIRAGANA_IROHA,
    NumeralKind.KATAKANA_AIUEO,
    NumeralKind.KATAKANA_IROHA,
    NumeralKind.KOREAN_JAMO,
    NumeralKind.KOREAN_SYLLABLE,
    NumeralKind.BENGALI_LETTER,
    NumeralKind.CIRCLED_NUMBER,
    NumeralKind.DOUBLE_CIRCLED_NUMBER,
)

numeral_kinds = st.sampled_from(list(NumeralKind))
pattern_kinds = st.sampled_from(PATTERN_KINDS)
zeroless_kinds = st.sampled_from(ZEROLESS_KINDS)
counter_values = st.integers(min_value=0, max_value=MAX_NUMBER)
small_counter_values = st.integers(min_value=0, max_value=10_000)
literal_text = st.text(alphabet=LITERAL_ALPHABET, max_size=4)


@composite
def pattern_texts(draw: st.DrawFn, max_pieces: int = 4) -> str:
    """Generate valid pattern syntax such as "(1.a)"."""
    count = draw(st.integers(min_value=1, max_value=max_pieces))
    parts: list[str] = []
    for _ in range(count):
        parts.append(draw(literal_text))
        parts.append(draw(pattern_kinds).to_char())
    parts.append(draw(literal_text))
    return "".join(parts)


@composite
def numbering_patterns(draw: st.DrawFn, max_pieces: int = 4) -> NumberingPattern:
    """Generate NumberingPattern values built directly from pieces."""
    pieces = draw(
        st.lists(st.tuples(literal_text, pattern_kinds), min_size=1, max_size=max_pieces)
    )
    suffix = draw(literal_text)
    trimmed = draw(st.booleans())
    return NumberingPattern(pieces=tuple(pieces), suffix=suffix, trimmed=trimmed)
