"""Glyph tables for the built-in numeral systems.

Every table is an immutable tuple ordered by value. Alphabets for zeroless
systems start at the glyph for 1; digit tables for table-driven systems start
at the glyph for 1 as well (zero digits are never emitted).

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF001 - ambiguous-looking glyphs are the point of this module

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Zeroless alphabets
    "LOWER_LATIN",
    "UPPER_LATIN",
    "HIRAGANA_AIUEO",
    "HIRAGANA_IROHA",
    "KATAKANA_AIUEO",
    "KATAKANA_IROHA",
    "KOREAN_JAMO",
    "KOREAN_SYLLABLE",
    "BENGALI_LETTER",
    "CIRCLED_NUMBER",
    "DOUBLE_CIRCLED_NUMBER",
    # Symbol marks
    "SYMBOL_MARKS",
    # Positional decimal zero digits
    "EASTERN_ARABIC_ZERO",
    "EASTERN_ARABIC_PERSIAN_ZERO",
    "DEVANAGARI_ZERO",
    "BENGALI_ZERO",
    # Roman
    "ROMAN_VALUES",
    # Greek
    "GREEK_THOUSANDS",
    "GREEK_HUNDREDS",
    "GREEK_TENS",
    "GREEK_ONES",
    "GREEK_MYRIAD",
    "GREEK_KERAIA",
    "GREEK_ZERO_SIGN",
    # Hebrew
    "HEBREW_VALUES",
    "HEBREW_FIFTEEN",
    "HEBREW_SIXTEEN",
    "HEBREW_GERESH",
    "HEBREW_GERSHAYIM",
]

# ============================================================================
# ZEROLESS ALPHABETS
# ============================================================================

LOWER_LATIN: tuple[str, ...] = tuple("abcdefghijklmnopqrstuvwxyz")

UPPER_LATIN: tuple[str, ...] = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

# Gojūon order. Includes ん, excludes ゐ and ゑ.
HIRAGANA_AIUEO: tuple[str, ...] = tuple(
    "あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみむめもやゆよらりるれろわをん"
)

# Iroha order. Includes ゐ and ゑ, excludes ん.
HIRAGANA_IROHA: tuple[str, ...] = tuple(
    "いろはにほへとちりぬるをわかよたれそつねならむうゐのおくやまけふこえてあさきゆめみしゑひもせす"
)

KATAKANA_AIUEO: tuple[str, ...] = tuple(
    "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヲン"
)

KATAKANA_IROHA: tuple[str, ...] = tuple(
    "イロハニホヘトチリヌルヲワカヨタレソツネナラムウヰノオクヤマケフコエテアサキユメミシヱヒモセス"
)

KOREAN_JAMO: tuple[str, ...] = tuple("ㄱㄴㄷㄹㅁㅂㅅㅇㅈㅊㅋㅌㅍㅎ")

KOREAN_SYLLABLE: tuple[str, ...] = tuple("가나다라마바사아자차카타파하")

BENGALI_LETTER: tuple[str, ...] = tuple("কখগঘঙচছজঝঞটঠডঢণতথদধনপফবভমযরলশষসহ")

# ① (U+2460) to ⑳ (U+2473), ㉑ (U+3251) to ㉟ (U+325F), ㊱ (U+32B1) to ㊿ (U+32BF).
CIRCLED_NUMBER: tuple[str, ...] = (
    tuple(chr(cp) for cp in range(0x2460, 0x2474))
    + tuple(chr(cp) for cp in range(0x3251, 0x3260))
    + tuple(chr(cp) for cp in range(0x32B1, 0x32C0))
)

# ⓵ (U+24F5) to ⓾ (U+24FE).
DOUBLE_CIRCLED_NUMBER: tuple[str, ...] = tuple(chr(cp) for cp in range(0x24F5, 0x24FF))

# ============================================================================
# SYMBOL MARKS
# ============================================================================

SYMBOL_MARKS: tuple[str, ...] = ("*", "†", "‡", "§", "¶", "‖")

# ============================================================================
# POSITIONAL DECIMAL
# ============================================================================

EASTERN_ARABIC_ZERO: str = "\u0660"
EASTERN_ARABIC_PERSIAN_ZERO: str = "\u06f0"
DEVANAGARI_ZERO: str = "\u0966"
BENGALI_ZERO: str = "\u09e6"

# ============================================================================
# ROMAN
# ============================================================================

# Values from 5000 upward use U+0305 COMBINING OVERLINE (x1000).
ROMAN_VALUES: tuple[tuple[str, int], ...] = (
    ("M̅", 1_000_000),
    ("D̅", 500_000),
    ("C̅", 100_000),
    ("L̅", 50_000),
    ("X̅", 10_000),
    ("V̅", 5_000),
    ("I̅V̅", 4_000),
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

# ============================================================================
# GREEK
# ============================================================================

# (lower, upper) pairs for digits 1-9 in each decimal position.
GREEK_THOUSANDS: tuple[tuple[str, str], ...] = (
    ("͵α", "͵Α"),
    ("͵β", "͵Β"),
    ("͵γ", "͵Γ"),
    ("͵δ", "͵Δ"),
    ("͵ε", "͵Ε"),
    ("͵ϛ", "͵Ϛ"),
    ("͵ζ", "͵Ζ"),
    ("͵η", "͵Η"),
    ("͵θ", "͵Θ"),
)

GREEK_HUNDREDS: tuple[tuple[str, str], ...] = (
    ("ρ", "Ρ"),
    ("σ", "Σ"),
    ("τ", "Τ"),
    ("υ", "Υ"),
    ("φ", "Φ"),
    ("χ", "Χ"),
    ("ψ", "Ψ"),
    ("ω", "Ω"),
    ("ϡ", "Ϡ"),
)

GREEK_TENS: tuple[tuple[str, str], ...] = (
    ("ι", "Ι"),
    ("κ", "Κ"),
    ("λ", "Λ"),
    ("μ", "Μ"),
    ("ν", "Ν"),
    ("ξ", "Ξ"),
    ("ο", "Ο"),
    ("π", "Π"),
    ("ϙ", "Ϟ"),
)

GREEK_ONES: tuple[tuple[str, str], ...] = (
    ("α", "Α"),
    ("β", "Β"),
    ("γ", "Γ"),
    ("δ", "Δ"),
    ("ε", "Ε"),
    ("ϛ", "Ϛ"),
    ("ζ", "Ζ"),
    ("η", "Η"),
    ("θ", "Θ"),
)

# Capital mu marks a power of 10000.
GREEK_MYRIAD: str = "Μ"

# U+0374 GREEK NUMERAL SIGN (keraia).
GREEK_KERAIA: str = "\u0374"

# U+1018A GREEK ZERO SIGN.
GREEK_ZERO_SIGN: str = "\U0001018a"

# ============================================================================
# HEBREW
# ============================================================================

HEBREW_VALUES: tuple[tuple[str, int], ...] = (
    ("ת", 400),
    ("ש", 300),
    ("ר", 200),
    ("ק", 100),
    ("צ", 90),
    ("פ", 80),
    ("ע", 70),
    ("ס", 60),
    ("נ", 50),
    ("מ", 40),
    ("ל", 30),
    ("כ", 20),
    ("י", 10),
    ("ט", 9),
    ("ח", 8),
    ("ז", 7),
    ("ו", 6),
    ("ה", 5),
    ("ד", 4),
    ("ג", 3),
    ("ב", 2),
    ("א", 1),
)

# 15 and 16 are written 9+6 and 9+7 instead of spelling a divine name.
HEBREW_FIFTEEN: str = "ט״ו"
HEBREW_SIXTEEN: str = "ט״ז"

HEBREW_GERESH: str = "׳"
HEBREW_GERSHAYIM: str = "״"
