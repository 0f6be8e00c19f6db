"""Value types for numbering functions.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Any, Protocol

__all__ = ["NumberingFunction", "NumberingValue"]

# Attribute name marking numbering functions that receive the host context.
# Set by the @numbering_function decorator, checked by requires_context().
_NUMBERING_REQUIRES_CONTEXT_ATTR: str = "_numbering_requires_context"

# Result of applying a numbering. Patterns always produce str; a function
# numbering may return any host value, which is passed through unchanged.
type NumberingValue = Any


class NumberingFunction(Protocol):
    """Protocol for callables usable as numberings.

    The counter values are passed as positional arguments, outermost first.
    Functions marked with @numbering_function(inject_context=True) also
    receive the host context as the keyword argument ``context``.
    """

    def __call__(self, *numbers: int, **kwargs: Any) -> NumberingValue:
        ...  # pragma: no cover  # Protocol stub - not executable
