"""Locale utilities: normalization and CLDR numbering system lookup.

Maps a locale to the numeral kind it uses, based on the numbering systems
CLDR defines for it (default, native, traditional and finance). Requires the
optional Babel dependency for anything beyond normalize_locale().

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from numeralengine.constants import DEFAULT_NUMBERING_SYSTEM, MAX_LOCALE_CACHE_SIZE
from numeralengine.core.babel_compat import get_unknown_locale_error, require_babel
from numeralengine.diagnostics import (
    ErrorTemplate,
    UnknownLocaleError,
    UnsupportedNumberingSystemError,
)
from numeralengine.enums import NumberingSystemStyle
from numeralengine.numerals import NumeralKind

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
    "numeral_kind_for_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("zh-Hant-TW")
        'zh_Hant_TW'
        >>> normalize_locale("el")
        'el'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    require_babel("get_babel_locale")
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel locale cache."""
    get_babel_locale.cache_clear()
    logger.debug("Locale cache cleared")


def _numbering_system_id(locale: Locale, style: NumberingSystemStyle) -> str | None:
    if style is NumberingSystemStyle.DEFAULT:
        return locale.default_numbering_system
    return locale.other_numbering_systems.get(style.value)


def numeral_kind_for_locale(
    locale_code: str,
    style: NumberingSystemStyle = NumberingSystemStyle.DEFAULT,
    *,
    strict: bool = False,
) -> NumeralKind:
    """Find the numeral kind a locale uses for one of its numbering systems.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)
        style: Which CLDR numbering system of the locale to use
        strict: Raise instead of falling back to Arabic numerals

    Returns:
        The matching kind. In lenient mode, ARABIC when the locale is unknown
        or its numbering system has no numeral kind.

    Raises:
        BabelImportError: If Babel is not installed
        UnknownLocaleError: In strict mode, if the locale is not recognized
        UnsupportedNumberingSystemError: In strict mode, if the locale has no
            system for the style or the system has no numeral kind

    Example:
        >>> numeral_kind_for_locale("fa")
        <NumeralKind.EASTERN_ARABIC_PERSIAN: 'eastern-arabic-persian'>
        >>> numeral_kind_for_locale("el", NumberingSystemStyle.TRADITIONAL)
        <NumeralKind.UPPER_GREEK: 'upper-greek'>
    """
    babel_unknown_locale_error = get_unknown_locale_error()
    fallback = NumeralKind.ARABIC

    try:
        locale = get_babel_locale(locale_code)
    except (babel_unknown_locale_error, ValueError) as e:
        if strict:
            diagnostic = ErrorTemplate.locale_unknown(locale_code, str(e))
            raise UnknownLocaleError(diagnostic, locale_code=locale_code) from None
        logger.warning(
            "Unknown locale '%s': %s. Falling back to '%s' numbering system.",
            locale_code,
            e,
            DEFAULT_NUMBERING_SYSTEM,
        )
        return fallback

    system_id = _numbering_system_id(locale, style)
    kind = NumeralKind.from_numbering_system(system_id) if system_id else None
    if kind is not None:
        return kind

    if strict:
        diagnostic = ErrorTemplate.numbering_system_unsupported(locale_code, system_id or "")
        raise UnsupportedNumberingSystemError(diagnostic, system_id=system_id or "")
    logger.warning(
        "Locale '%s' has no supported %s numbering system (got %r). "
        "Falling back to '%s' numbering system.",
        locale_code,
        style.value,
        system_id,
        DEFAULT_NUMBERING_SYSTEM,
    )
    return fallback
