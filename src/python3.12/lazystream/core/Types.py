#!/usr/bin/env python3.12
# pyright: reportUnusedClass=false
# https://peps.python.org/pep-0695/

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Protocol, Self

if TYPE_CHECKING:
    from .Cells import Cell, EmptyStream

__all__: list[str] = [

    # Stream Types
    'Stream', 'Thunk',

    # Ordering Types
    'Comparator', 'LessThan', 'Equality', 'CutPredicate', 'KeyFunc',

    # Combinator Callables
    'Transformer', 'Predicate', 'Folder', 'Stepper',
]

#############################################################################
#  Stream Types
# --------------
#

type Stream[T] = Cell[T] | EmptyStream
"""### A lazy stream: the empty stream, or a cell whose tail may be unforced."""


class Thunk[T](Protocol):
    """Zero-argument computation of the rest of a stream."""
    def __call__(self: Self) -> Stream[T]:
        raise NotImplementedError


#############################################################################
#  Ordering Types
# ----------------
#
class Comparator[T](Protocol):
    """Three-way comparator: negative, zero or positive, as `a` sorts
    before, with or after `b`."""
    def __call__(self: Self, a: T, b: T, /) -> int:
        raise NotImplementedError


class LessThan[T](Protocol):
    """Strict boolean ordering, `a < b`."""
    def __call__(self: Self, a: T, b: T, /) -> bool:
        raise NotImplementedError


class Equality[T](Protocol):
    def __call__(self: Self, a: T, b: T, /) -> bool:
        raise NotImplementedError


class CutPredicate[T](Protocol):
    """True when `pending` can no longer be preceded by anything still to
    come, given that the next input element is `incoming`."""
    def __call__(self: Self, pending: T, incoming: T, /) -> bool:
        raise NotImplementedError


class KeyFunc[T](Protocol):
    def __call__(self: Self, item: T, /) -> Any:
        raise NotImplementedError


#############################################################################
#  Combinator Callables
# ----------------------
#
class Transformer[T, U](Protocol):
    def __call__(self: Self, item: T, /) -> U:
        raise NotImplementedError


class Predicate[T](Protocol):
    def __call__(self: Self, item: T, /) -> bool:
        raise NotImplementedError


class Folder[A, T](Protocol):
    def __call__(self: Self, acc: A, item: T, /) -> A:
        raise NotImplementedError


class Stepper[T](Protocol):
    def __call__(self: Self, prev: T, /) -> T:
        raise NotImplementedError
