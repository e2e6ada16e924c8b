#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, Sequence

import more_itertools as MI

from .Cells import (Cell, EMPTY, Deferred, StreamIterator, Suspension,
                    as_suspension)
from .Types import Stream, Stepper, Thunk


__all__: list[str] = [
    'list2stream', 'from_list', 'list_to_stream',
    'from_iterable', 'iterator_to_stream', 'stream_to_iterator',
    'stream2list', 'stream_to_list', 'stream_length', 'show',
    'upto', 'upfrom', 'constants', 'genstream',
]


#############################################################################
#  From Python Values
# --------------------
#
def list2stream[T](*items: T) -> Stream[T]:
    """Lazy stream of the given values."""
    return from_list(items)


def from_list[T](items: Sequence[T]) -> Stream[T]:
    return _from_sequence(tuple(items), 0)


def _from_sequence[T](items: tuple[T, ...], i: int) -> Stream[T]:
    if i >= len(items):
        return EMPTY
    if i + 1 == len(items):
        return Cell(items[i])
    return Cell(items[i], lambda: _from_sequence(items, i + 1))


def list_to_stream[T](items: Iterable[T],
                      tail: Stream[T] | Suspension[T] | Thunk[T] | None = EMPTY
) -> Stream[T]:
    """Chain `items` eagerly in front of `tail`, which may be unforced."""
    suspension = as_suspension(tail)
    cells = list(items)
    if not cells:
        if isinstance(suspension, Deferred):
            return suspension.force().value
        return suspension.value
    s = Cell(cells.pop(), suspension)
    while cells:
        s = Cell(cells.pop(), s)
    return s


#############################################################################
#  Iterator Bridges
# ------------------
#
def from_iterable[T](iterable: Iterable[T]) -> Stream[T]:
    """Lazy stream over a Python iterable.  Pulls the first value now and
    each further value when its tail is forced."""
    return _pull(iter(iterable))


def _pull[T](iterator: Iterator[T]) -> Stream[T]:
    for value in iterator:
        return Cell(value, lambda: _pull(iterator))
    return EMPTY


def iterator_to_stream[T](fn: Callable[[], T], sentinel: Any = None
) -> Stream[T]:
    """Lazy stream over a pull function, ending when it returns `sentinel`."""
    return from_iterable(iter(fn, sentinel))


def stream_to_iterator[T](s: Stream[T]) -> StreamIterator[T]:
    return StreamIterator(s)


#############################################################################
#  To Python Values
# ------------------
#
def stream2list[T](s: Stream[T], n: int | None = None) -> list[T]:
    """Elements of `s`, or only the first `n`.  Does not come back from an
    infinite stream without `n`."""
    if n is None:
        return list(StreamIterator(s))
    return MI.take(n, StreamIterator(s))


stream_to_list = stream2list


def stream_length(s: Stream[Any]) -> int:
    return MI.ilen(StreamIterator(s))


def show(s: Stream[Any], n: int | None = None, sep: str = ' ') -> str:
    return sep.join(str(item) for item in stream2list(s, n))


#############################################################################
#  Generators
# ------------
#
def upto(m: int, n: int) -> Stream[int]:
    """`m, m + 1, ..., n`."""
    if m > n:
        return EMPTY
    return Cell(m, lambda: upto(m + 1, n))


def upfrom(m: int) -> Stream[int]:
    """`m, m + 1, ...` without end."""
    return Cell(m, lambda: upfrom(m + 1))


def constants[T](*values: T) -> Stream[T]:
    """The given values, over and over."""
    if not values:
        raise ValueError('constants() needs at least one value')
    return _cycle(values, 0)


def _cycle[T](values: tuple[T, ...], i: int) -> Stream[T]:
    return Cell(values[i], lambda: _cycle(values, (i + 1) % len(values)))


def genstream[T](step: Stepper[T], base: T) -> Stream[T]:
    """`base, step(base), step(step(base)), ...`"""
    return Cell(base, lambda: genstream(step, step(base)))
