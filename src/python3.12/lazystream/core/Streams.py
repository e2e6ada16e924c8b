#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-
"""Stream combinators.

Each lazy combinator builds at most the first cell of its result and
promises the rest, so combinators compose without evaluating anything the
consumer does not ask for.  `fold`, `discard` and `pick` walk eagerly.
"""

from __future__ import annotations
from operator import eq as _eq, lt as _lt
from typing import Any

from .Cells    import Cell, EMPTY, is_empty
from .Ordering import three_way
from .Types    import (Comparator, Equality, Folder, LessThan, Predicate,
                       Stream, Transformer)


__all__: list[str] = [
    'transform', 'filter', 'append', 'fuse', 'merge', 'uniq', 'fold',
    'take', 'discard', 'pick',
]


def transform[T, U](f: Transformer[T, U], s: Stream[T]) -> Stream[U]:
    if is_empty(s):
        return EMPTY
    return Cell(f(s.head), lambda: transform(f, s.tail))


def filter[T](p: Predicate[T], s: Stream[T]) -> Stream[T]:
    """Elements of `s` satisfying `p`.

    Skips ahead to the first match right away: on an infinite stream with
    no further match this does not return.
    """
    while not is_empty(s) and not p(s.head):
        s = s.tail
    if is_empty(s):
        return EMPTY
    return Cell(s.head, lambda: filter(p, s.tail))


def append[T](*streams: Stream[T]) -> Stream[T]:
    """The streams one after the other, passing over empty ones."""
    for i, s in enumerate(streams):
        if is_empty(s):
            continue
        rest = streams[i + 1:]
        if not rest:
            return s
        return Cell(s.head, lambda: append(s.tail, *rest))
    return EMPTY


def fuse[T](s1: Stream[T], s2: Stream[T], lt: LessThan[T] = _lt
) -> Stream[T]:
    """Merge two streams sorted under `lt`.  Keeps duplicates; on ties the
    head of `s1` comes first."""
    if is_empty(s2):
        return s1
    if is_empty(s1):
        return s2
    h1, h2 = s1.head, s2.head
    if lt(h2, h1):
        return Cell(h2, lambda: fuse(s1, s2.tail, lt))
    return Cell(h1, lambda: fuse(s1.tail, s2, lt))


def merge[T](s: Stream[T], t: Stream[T], cmp: Comparator[T] = three_way
) -> Stream[T]:
    """Merge two streams sorted under `cmp`, emitting heads that compare
    equal across the two streams once."""
    if is_empty(t):
        return s
    if is_empty(s):
        return t
    hs, ht = s.head, t.head
    d = cmp(hs, ht)
    if d > 0:
        return Cell(ht, lambda: merge(s, t.tail, cmp))
    if d < 0:
        return Cell(hs, lambda: merge(s.tail, t, cmp))
    return Cell(hs, lambda: merge(s.tail, t.tail, cmp))


def uniq[T](s: Stream[T], eq: Equality[T] = _eq) -> Stream[T]:
    """First element of every run of adjacent equal elements."""
    if is_empty(s):
        return EMPTY
    return Cell(s.head, lambda: uniq(_past_run(s, eq), eq))


def _past_run[T](s: Cell[T], eq: Equality[T]) -> Stream[T]:
    prev, rest = s.head, s.tail
    while not is_empty(rest) and eq(prev, rest.head):
        prev, rest = rest.head, rest.tail
    return rest


def fold[A, T](s: Stream[T], f: Folder[A, T], base: A) -> A:
    while not is_empty(s):
        base = f(base, s.head)
        s = s.tail
    return base


def take[T](s: Stream[T], n: int) -> Stream[T]:
    """The first `n` elements, lazily."""
    if n < 0:
        raise ValueError(f'take() of a negative count: {n}')
    if n == 0 or is_empty(s):
        return EMPTY
    if n == 1:
        return Cell(s.head)
    return Cell(s.head, lambda: take(s.tail, n - 1))


def discard[T](s: Stream[T], n: int) -> Stream[T]:
    """All but the first `n` elements."""
    if n < 0:
        raise ValueError(f'discard() of a negative count: {n}')
    while n > 0 and not is_empty(s):
        s = s.tail
        n -= 1
    return s


def pick[T](s: Stream[T], n: int, default: Any = None) -> T | Any:
    """Element at index `n`, or `default` if `s` ends first."""
    if n < 0:
        raise ValueError(f'pick() of a negative index: {n}')
    s = discard(s, n)
    if is_empty(s):
        return default
    return s.head
