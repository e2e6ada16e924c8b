#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-
"""Ordering conventions.

`insert`, `merge` and `cutsort` take three-way comparators (negative, zero
or positive).  `fuse` takes a strict boolean less-than, the way `sorted`
users think of `<`.  The converters below go between the two, and from key
functions, so either kind can be handed to either side.
"""

from __future__ import annotations
from bisect import bisect_right
from functools import cmp_to_key
from typing import Any, MutableSequence

from .Types import Comparator, KeyFunc, LessThan


__all__: list[str] = [
    'three_way', 'cmp_from_lt', 'lt_from_cmp', 'cmp_from_key', 'insert'
]


def three_way(a: Any, b: Any) -> int:
    """Natural ordering as a three-way comparator."""
    return (a > b) - (a < b)


def cmp_from_lt[T](lt: LessThan[T]) -> Comparator[T]:
    def cmp(a: T, b: T) -> int:
        if lt(a, b):
            return -1
        if lt(b, a):
            return 1
        return 0
    return cmp


def lt_from_cmp[T](cmp: Comparator[T]) -> LessThan[T]:
    def lt(a: T, b: T) -> bool:
        return cmp(a, b) < 0
    return lt


def cmp_from_key[T](key: KeyFunc[T], cmp: Comparator[Any] = three_way
) -> Comparator[T]:
    def by_key(a: T, b: T) -> int:
        return cmp(key(a), key(b))
    return by_key


def insert[T](seq: MutableSequence[T], element: T,
              cmp: Comparator[T] = three_way) -> int:
    """Insert `element` into `seq`, already sorted under `cmp`, keeping it
    sorted.  Lands after every element comparing equal to it.

    Binary search for the position, then a linear shift.  Returns the
    position.
    """
    key = cmp_to_key(cmp)
    index = bisect_right(seq, key(element), key=key)  # type: ignore
    seq.insert(index, element)
    return index
