#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Any, Iterable

from .Cells    import Cell, Deferred
from .Ordering import insert, three_way
from .Sources  import list_to_stream
from .Types    import Comparator, CutPredicate, KeyFunc, Stream


__all__: list[str] = ['cutsort', 'bounded_lateness']


def cutsort[T](s: Stream[T],
               cmp: Comparator[T] = three_way,
               cut: CutPredicate[T] | None = None,
               pending: Iterable[T] = ()
) -> Stream[T]:
    """Sort a possibly infinite stream, emitting elements as soon as they
    are settled.

    Elements pulled from `s` wait in `pending`, kept sorted under `cmp`.
    Before each pull, the front of `pending` is released for as long as
    `cut(front, next_input)` holds, meaning nothing still to come can sort
    before `front`.  A released batch is handed out before any more input
    is pulled.  When `s` runs out, whatever is pending follows in order.

    `pending`, if given, must already be sorted under `cmp`.  Without `cut`
    nothing settles before the input ends, which is a plain (lazy-output)
    sort of a finite stream.
    """
    return _cutsort(s, cmp, cut or _never, list(pending))


def _cutsort[T](s: Stream[T],
                cmp: Comparator[T],
                cut: CutPredicate[T],
                pending: list[T]
) -> Stream[T]:
    while isinstance(s, Cell):
        incoming = s.head
        settled = 0
        while settled < len(pending) and cut(pending[settled], incoming):
            settled += 1
        if settled:
            batch, rest = pending[:settled], pending[settled:]
            return list_to_stream(batch, Deferred(
                lambda: _cutsort(s, cmp, cut, rest)))
        insert(pending, incoming, cmp)
        s = s.tail
    return list_to_stream(pending)


def _never(pending: Any, incoming: Any) -> bool:
    return False


def bounded_lateness[T](window: Any, key: KeyFunc[T] | None = None
) -> CutPredicate[T]:
    """Cut for input where no element sorts more than `window` before any
    element that came earlier (by `key`, or the element itself).

    The front of `pending` settles once the incoming element is at least
    `window` past it.
    """
    if window < 0:
        raise ValueError(f'Negative lateness window: {window}')
    if key is None:
        def cut(pending: T, incoming: T) -> bool:
            return pending <= incoming - window  # type: ignore
    else:
        def cut(pending: T, incoming: T) -> bool:
            return key(pending) <= key(incoming) - window
    return cut
