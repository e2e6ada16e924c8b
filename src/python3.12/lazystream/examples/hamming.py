#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-
"""Hamming numbers, 2^i 3^j 5^k in increasing order, as a stream defined
in terms of itself."""

from __future__ import annotations
from typing import Annotated

import loguru         as LG
import rich.console   as RC
import rich.logging   as RL
import typer          as TR

from lazystream import Stream, node, merge, transform, show, pick


APP = TR.Typer(name='hamming', pretty_exceptions_enable=False)

STDERR = RC.Console(stderr=True, log_path=False)


def hamming() -> Stream[int]:
    def scaled(k: int) -> Stream[int]:
        return transform(lambda x: k * x, numbers)
    numbers = node(1, lambda: merge(scaled(2), merge(scaled(3), scaled(5))))
    return numbers


@APP.command()
def main(
    count: Annotated[int, TR.Option('--count', '-n', min=1)] = 20,
    verbose: Annotated[bool, TR.Option('--verbose', '-v')] = False,
) -> None:
    LG.logger.configure(handlers=[dict(
        level='DEBUG' if verbose else 'INFO',
        sink=RL.RichHandler(
            console=STDERR,
            markup=True,
            show_path=False),
        format='{message}',)])

    numbers = hamming()
    LG.logger.debug(f'Forcing {count} Hamming numbers')
    TR.echo(show(numbers, count))
    LG.logger.info(f'Hamming number #{count}: {pick(numbers, count - 1)}')


if __name__ == '__main__':
    APP()
