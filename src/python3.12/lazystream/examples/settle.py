#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-
"""Sorting an endless, slightly out-of-order stream with `cutsort`.

Reading `i` arrives as `i + jitter` with jitter in `[0, window)`, so no
reading is ever more than `window` late.  A `bounded_lateness` cut lets
each reading out as soon as nothing still to come can precede it.
"""

from __future__ import annotations
from random import Random
from typing import Annotated

import loguru         as LG
import rich.console   as RC
import rich.logging   as RL
import typer          as TR

from lazystream import (Stream, bounded_lateness, cutsort, stream2list,
                        transform, upfrom)


APP = TR.Typer(name='settle', pretty_exceptions_enable=False)

STDERR = RC.Console(stderr=True, log_path=False)


def jittered(window: float, seed: int) -> Stream[float]:
    rng = Random(seed)
    return transform(lambda i: i + rng.uniform(0, window), upfrom(0))


def settled(window: float, seed: int) -> Stream[float]:
    return cutsort(jittered(window, seed), cut=bounded_lateness(window))


@APP.command()
def main(
    count: Annotated[int, TR.Option('--count', '-n', min=1)] = 10,
    window: Annotated[float, TR.Option('--window', '-w', min=0)] = 3.0,
    seed: Annotated[int, TR.Option('--seed', '-s')] = 0,
) -> None:
    LG.logger.configure(handlers=[dict(
        level='INFO',
        sink=RL.RichHandler(
            console=STDERR,
            markup=True,
            show_path=False),
        format='{message}',)])

    arrivals = stream2list(jittered(window, seed), count)
    LG.logger.info(f'Arrival order: {[round(x, 3) for x in arrivals]}')
    for reading in stream2list(settled(window, seed), count):
        TR.echo(f'{reading:.3f}')


if __name__ == '__main__':
    APP()
