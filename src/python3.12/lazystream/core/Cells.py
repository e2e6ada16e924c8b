#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from threading import RLock
from typing import Any, ClassVar, Final, Iterator, NoReturn, Self, TypeGuard

import loguru    as LG
import rich.repr as RR

from  .Policy import Policy
from  .Types  import Stream, Thunk
from ..config import Settings


DEBUG: Final[bool] = Settings().DEBUG

REPR_LIMIT: Final[int] = 10
"""How many realized cells `repr()` walks before eliding the rest."""


__all__: list[str] = [
    'EmptyStream', 'EMPTY', 'Cell', 'Failed',
    'Realized', 'Deferred', 'Suspension', 'StreamIterator',
    'node', 'promise', 'as_stream', 'as_suspension',
    'is_empty', 'is_node', 'is_failed', 'is_forced',
    'head', 'tail', 'drop',
]


#############################################################################
#  The Empty Stream
# ------------------
#
class EmptyStream:
    """The end of every finite stream.  All instances are the one instance,
    and it compares equal to nothing but itself."""
    __slots__ = ()
    __singleton__: ClassVar[EmptyStream]

    def __new__(cls: type[Self]) -> Self:
        if not hasattr(cls, '__singleton__'):
            cls.__singleton__ = super().__new__(cls)
        return cls.__singleton__  # type: ignore

    def __bool__(self: Self) -> bool:
        return False

    def __iter__(self: Self) -> Iterator[Any]:
        return iter(())

    def __eq__(self: Self, other: object) -> bool:
        return isinstance(other, EmptyStream)

    def __hash__(self: Self) -> int:
        return hash(EmptyStream)

    def __repr__(self: Self) -> str:
        return 'EMPTY'


EMPTY: Final[EmptyStream] = EmptyStream()


#############################################################################
#  Suspensions
# -------------
#
#  A tail slot is a `Realized` stream or a `Deferred` computation of one.
#  A realized value is either a stream proper, or a `Failed` position
#  standing for the exception the computation raised.
#
class Realized[T]:
    __slots__ = ('value',)
    value: Stream[T]

    def __init__(self: Self, value: Stream[T]) -> None:
        self.value = value

    def __repr__(self: Self) -> str:
        return f'Realized({self.value!r})'


class Deferred[T]:
    """A promise of the rest of a stream, evaluated at most once."""
    __slots__ = ('thunk', 'realized', 'lock', 'forcing')
    thunk   : Thunk[T] | None
    realized: Realized[T] | None
    lock    : RLock
    forcing : bool

    def __init__(self: Self, thunk: Thunk[T]) -> None:
        self.thunk = thunk
        self.realized = None
        self.lock = RLock()
        self.forcing = False

    def force(self: Self) -> Realized[T]:
        with self.lock:
            if self.realized is None:
                if self.forcing:
                    raise RuntimeError('promise forced during its own evaluation')
                self.forcing = True
                try:
                    self.realized = Realized(evaluate(self.thunk))  # type: ignore
                finally:
                    self.forcing = False
                self.thunk = None
            return self.realized

    def __repr__(self: Self) -> str:
        return 'Deferred(...)' if self.realized is None else repr(self.realized)


type Suspension[T] = Realized[T] | Deferred[T]

          # ╭────────────────────────────────────────────────────────╮
if DEBUG: # │ -- BEGIN IF DEBUG SECTION -- BEGIN IF DEBUG SECTION -- │
          # ╰────────────────────────────────────────────────────────╯

    def evaluate[T](thunk: Thunk[T]) -> Stream[T]:
        try:
            return as_stream(thunk())
        except Exception as error:
            LG.logger.opt(exception=error).debug(
                f'Captured failure while forcing {thunk!r}')
            return Failed(error)

      #     ╭────────────────────────────────────────────────────────╮
else: #     │ --- ELSE IF DEBUG SECTION --- ELSE IF DEBUG SECTION -- │
      #     ╰────────────────────────────────────────────────────────╯

    def evaluate[T](thunk: Thunk[T]) -> Stream[T]:
        try:
            return as_stream(thunk())
        except Exception as error:
            return Failed(error)

      #     ╭────────────────────────────────────────────────────────╮
      #     │ ---- END IF DEBUG SECTION ---- END IF DEBUG SECTION -- │
      #     ╰────────────────────────────────────────────────────────╯


#############################################################################
#  Cells
# -------
#
class Cell[T]:
    """A realized stream node: a fixed head, and a tail that is forced on
    first access and cached from then on."""
    __slots__ = ('_head', '_tail')
    _head: T
    _tail: Suspension[T]

    def __init__(self: Self,
                 head: T,
                 tail: Stream[T] | Suspension[T] | Thunk[T] | None = EMPTY
    ) -> None:
        self._head = head
        self._tail = as_suspension(tail)

    @property
    def head(self: Self) -> T:
        return self._head

    @property
    def tail(self: Self) -> Stream[T]:
        suspension = self._tail
        if isinstance(suspension, Deferred):
            suspension = suspension.force()
            # Single assignment; the closure goes with the Deferred.
            self._tail = suspension
        return suspension.value

    def __bool__(self: Self) -> bool:
        return True

    def __iter__(self: Self) -> Iterator[T]:
        return StreamIterator(self)

    def __repr__(self: Self) -> str:
        items = ('...' if item is ... else repr(item)
                 for item in peek(self, REPR_LIMIT))
        return f'{type(self).__name__}({", ".join(items)})'

    def __rich_repr__(self: Self) -> RR.Result:
        # Keyless pairs; rich would unpack a bare tuple element as one.
        for item in peek(self, REPR_LIMIT):
            yield None, item


class Failed(Cell[Any]):
    """The position of a deferred computation that raised.

    Reading `head` re-raises the captured exception, every time.  There is
    nothing after a failure: `tail` is the empty stream.
    """
    __slots__ = ('error',)
    error: Exception

    def __init__(self: Self, error: Exception) -> None:
        super().__init__(None, EMPTY)
        self.error = error

    @property
    def head(self: Self) -> NoReturn:
        raise self.error

    def __repr__(self: Self) -> str:
        return f'Failed({self.error!r})'

    def __rich_repr__(self: Self) -> RR.Result:
        yield None, self.error


def peek(cell: Cell[Any], limit: int) -> Iterator[Any]:
    """Heads of the already realized prefix of `cell`, without forcing.
    Ends with `...` if there is more, realized or not."""
    s: Stream[Any] = cell
    for _ in range(limit):
        if isinstance(s, Failed):
            yield s
            return
        if not isinstance(s, Cell):
            return
        yield s._head
        suspension = s._tail
        if isinstance(suspension, Deferred):
            yield ...
            return
        s = suspension.value
    if isinstance(s, Cell):
        yield ...


#############################################################################
#  Construction & Coercion
# -------------------------
#
def node[T](head: T,
            tail: Stream[T] | Suspension[T] | Thunk[T] | None = EMPTY
) -> Cell[T]:
    """Build a cell.  A callable `tail` is a promise of the rest."""
    return Cell(head, tail)


def promise[T](thunk: Thunk[T]) -> Deferred[T]:
    return Deferred(thunk)


def as_stream[T](value: Stream[T] | None) -> Stream[T]:
    if value is None:
        return EMPTY
    if isinstance(value, (Cell, EmptyStream)):
        return value  # type: ignore
    raise TypeError(f'Not a stream: {value!r}')


def as_suspension[T](tail: Stream[T] | Suspension[T] | Thunk[T] | None
) -> Suspension[T]:
    if isinstance(tail, (Realized, Deferred)):
        return tail  # type: ignore
    if tail is None or isinstance(tail, (Cell, EmptyStream)):
        return Realized(as_stream(tail))  # type: ignore
    if callable(tail):
        return Deferred(tail)
    raise TypeError(f'Not a stream, suspension or thunk: {tail!r}')


#############################################################################
#  Accessors
# -----------
#
def is_empty(s: Any) -> bool:
    return s is None or isinstance(s, EmptyStream)


def is_node(s: Any) -> TypeGuard[Cell[Any]]:
    return isinstance(s, Cell)


def is_failed(s: Any) -> bool:
    return isinstance(s, Failed)


def is_forced(s: Cell[Any]) -> bool:
    """Whether the tail of `s` has been computed already."""
    return isinstance(s._tail, Realized)


def head[T](s: Stream[T], policy: Policy | None = None) -> T | None:
    """First element of `s`; `None` for the empty stream, subject to the
    empty-access policy."""
    if isinstance(s, Cell):
        return s.head
    (policy or Policy.Default()).empty_access('head')
    return None


def tail[T](s: Stream[T], policy: Policy | None = None) -> Stream[T]:
    """Rest of `s`, forcing it if needed.  Never raises on behalf of the
    computation: a failure shows up as a `Failed` position."""
    if isinstance(s, Cell):
        return s.tail
    (policy or Policy.Default()).empty_access('tail')
    return EMPTY


def drop[T](s: Stream[T], policy: Policy | None = None
) -> tuple[T | None, Stream[T]]:
    """Consume one element: `value, s = drop(s)`."""
    return head(s, policy), tail(s, policy)


#############################################################################
#  Iteration
# -----------
#
class StreamIterator[T]:
    """Python iterator over a stream.

    Forces the tail of the previous cell only when the next value is asked
    for, so pulling `n` values forces `n - 1` tails.  Holds on to the current
    position only, letting the consumed prefix be collected.
    """
    __slots__ = ('stream', 'advance')
    stream : Stream[T]
    advance: bool

    def __init__(self: Self, stream: Stream[T]) -> None:
        self.stream = stream
        self.advance = False

    def __iter__(self: Self) -> Self:
        return self

    def __next__(self: Self) -> T:
        s = self.stream
        if self.advance:
            s = self.stream = s.tail  # type: ignore
        if not isinstance(s, Cell):
            self.advance = False
            raise StopIteration
        # A failed head raises below; the iterator still moves past it.
        self.advance = True
        return s.head

    def __call__(self: Self) -> T | None:
        """Closure-style pull: the next value, or `None` when exhausted."""
        return next(self, None)

    def __repr__(self: Self) -> str:
        return f'{type(self).__name__}({self.stream!r})'
