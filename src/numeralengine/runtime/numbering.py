"""Numbering facade: patterns and callables behind one interface.

A numbering is either a parsed pattern or a host callable. Hosts pass
numberings around as values and apply them to counter states:

    >>> numbering("1.a)", 2, 3)
    '2.c)'
    >>> numbering(lambda *ns: "-".join(map(str, ns)), 1, 2)
    '1-2'

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, overload

from numeralengine.numerals import validate_number
from numeralengine.syntax import NumberingPattern, parse_pattern_cached, serialize_pattern

from .formatter import apply_pattern
from .value_types import _NUMBERING_REQUIRES_CONTEXT_ATTR, NumberingFunction, NumberingValue

__all__ = [
    "FunctionNumbering",
    "Numbering",
    "PatternNumbering",
    "apply_numbering",
    "numbering",
    "numbering_function",
    "numbering_to_value",
    "requires_context",
    "to_numbering",
    "with_trimmed",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PatternNumbering:
    """Numbering defined by a pattern."""

    pattern: NumberingPattern


@dataclass(frozen=True, slots=True)
class FunctionNumbering:
    """Numbering defined by a host callable.

    Attributes:
        func: Called with the counter values as positional arguments
    """

    func: NumberingFunction


type Numbering = PatternNumbering | FunctionNumbering

_NUMBERING_TYPES = (PatternNumbering, FunctionNumbering)


# ============================================================================
# CONTEXT INJECTION
# ============================================================================


@overload
def numbering_function[F: Callable[..., Any]](func: F, /) -> F: ...


@overload
def numbering_function[F: Callable[..., Any]](
    func: None = None, /, *, inject_context: bool = False
) -> Callable[[F], F]: ...


def numbering_function[F: Callable[..., Any]](
    func: F | None = None, /, *, inject_context: bool = False
) -> F | Callable[[F], F]:
    """Mark a callable as a numbering function.

    Usable bare (@numbering_function) or with arguments
    (@numbering_function(inject_context=True)). With inject_context, the
    host context given to apply_numbering() is passed as keyword argument
    ``context``.

    Example:
        >>> @numbering_function(inject_context=True)
        ... def heading(*numbers, context):
        ...     return f"{context}:{numbers[-1]}"
        >>> numbering(heading, 1, 4, context="ch")
        'ch:4'
    """

    def decorator(f: F) -> F:
        if inject_context:
            setattr(f, _NUMBERING_REQUIRES_CONTEXT_ATTR, True)
        return f

    if func is not None:
        return decorator(func)
    return decorator


def requires_context(func: object) -> bool:
    """Check whether a callable was marked for context injection."""
    return getattr(func, _NUMBERING_REQUIRES_CONTEXT_ATTR, False) is True


# ============================================================================
# OPERATIONS
# ============================================================================


def apply_numbering(
    numbering: Numbering, numbers: Sequence[int], *, context: object = None
) -> NumberingValue:
    """Apply a numbering to a sequence of counter values.

    Patterns format the numbers and return a string. Functions are called
    with the numbers as positional arguments and their result is returned
    unmodified. Exceptions raised by the function propagate unchanged.

    Args:
        numbering: Pattern or function numbering
        numbers: Counter values, outermost first
        context: Opaque host value for functions marked with
            @numbering_function(inject_context=True)

    Returns:
        Formatted string for patterns, the function's result otherwise
    """
    match numbering:
        case PatternNumbering(pattern=pattern):
            return apply_pattern(pattern, numbers)
        case FunctionNumbering(func=func):
            if requires_context(func):
                return func(*numbers, context=context)
            return func(*numbers)
        case _:
            msg = f"Expected a numbering, got {type(numbering).__name__}"
            raise TypeError(msg)


def with_trimmed(numbering: Numbering) -> Numbering:
    """Trim the prefix and suffix of a pattern numbering.

    Function numberings are returned unchanged.
    """
    if isinstance(numbering, PatternNumbering):
        return PatternNumbering(numbering.pattern.with_trimmed())
    return numbering


def to_numbering(value: object) -> Numbering:
    """Cast a host value into a numbering.

    Accepts an existing numbering, a NumberingPattern, pattern syntax (str),
    or any other callable.

    Raises:
        NumberingPatternSyntaxError: If a string contains no counting symbol
        TypeError: If value is none of the accepted kinds
    """
    if isinstance(value, _NUMBERING_TYPES):
        return value
    if isinstance(value, NumberingPattern):
        return PatternNumbering(value)
    if isinstance(value, str):
        return PatternNumbering(parse_pattern_cached(value))
    if callable(value):
        return FunctionNumbering(value)
    msg = f"Expected pattern string or function, found {type(value).__name__}"
    raise TypeError(msg)


def numbering_to_value(numbering: Numbering) -> str | NumberingFunction:
    """Cast a numbering back into a host value.

    Patterns become pattern syntax; functions become the callable itself.
    """
    if isinstance(numbering, PatternNumbering):
        return serialize_pattern(numbering.pattern)
    return numbering.func


def numbering(scheme: object, *numbers: int, context: object = None) -> NumberingValue:
    """Apply a numbering scheme to counter values.

    This is the host call convention: the scheme is cast with to_numbering()
    and every number is validated before anything is formatted or called.

    Args:
        scheme: Pattern syntax, NumberingPattern, numbering or callable
        *numbers: Counter values, outermost first
        context: Opaque host value for context-injected functions

    Raises:
        NumberingPatternSyntaxError: If a string scheme is invalid
        NumberOutOfRangeError: If a number is outside 0..MAX_NUMBER
        TypeError: If scheme cannot be cast into a numbering
    """
    resolved = to_numbering(scheme)
    validated = [validate_number(n) for n in numbers]
    logger.debug("Applying %s to %d number(s)", type(resolved).__name__, len(validated))
    return apply_numbering(resolved, validated, context=context)
