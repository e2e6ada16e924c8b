#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from enum import StrEnum
from typing import Final, Self

import loguru as LG

from ..config import Settings


__all__: list[str] = [
    'EmptyAccess', 'OnEmpty', 'Policy'
]


class EmptyAccess(LookupError):
    """`head()` or `tail()` of the empty stream, under the `fail` policy."""


class OnEmpty(StrEnum):
    SILENT = 'silent'
    WARN   = 'warn'
    FAIL   = 'fail'


class Policy:
    """How stream accessors react to being handed the empty stream.

    Accessors take an optional `policy`; without one they fall back to
    `Policy.Default()`, which follows `Settings().ON_EMPTY`.
    """
    __slots__ = ('on_empty',)
    on_empty: OnEmpty

    def __init__(self: Self, on_empty: OnEmpty | str = OnEmpty.SILENT) -> None:
        self.on_empty = OnEmpty(on_empty)

    @classmethod
    def Default(cls: type[Self]) -> Self:
        return cls(Settings().ON_EMPTY)

    def empty_access(self: Self, operation: str) -> None:
        """React to `operation` having been attempted on the empty stream.

        Returns normally under `silent` and `warn`, the caller then hands
        back its absence marker.
        """
        match self.on_empty:
            case OnEmpty.SILENT:
                return
            case OnEmpty.WARN:
                LG.logger.opt(depth=2).warning(MESSAGE.format(operation))
            case OnEmpty.FAIL:
                raise EmptyAccess(MESSAGE.format(operation))

    def __eq__(self: Self, other: object) -> bool:
        return isinstance(other, Policy) and self.on_empty == other.on_empty

    def __hash__(self: Self) -> int:
        return hash(self.on_empty)

    def __repr__(self: Self) -> str:
        return f'{type(self).__name__}({self.on_empty.value!r})'


MESSAGE: Final[str] = 'Attempt to call {}() on empty stream'
