from operator import itemgetter
from random import Random

from lazystream import *


def test_three_way():
    assert three_way(1, 2) < 0
    assert three_way(2, 1) > 0
    assert three_way('a', 'a') == 0

def test_converters():
    by_lt = cmp_from_lt(lambda a, b: a < b)
    assert [by_lt(1, 2), by_lt(2, 1), by_lt(3, 3)] == [-1, 1, 0]
    lt = lt_from_cmp(three_way)
    assert lt(1, 2) and not lt(2, 1) and not lt(2, 2)
    by_length = cmp_from_key(len)
    assert by_length('aa', 'b') > 0
    assert by_length('ab', 'cd') == 0
    reversed_length = cmp_from_key(len, lambda a, b: three_way(b, a))
    assert reversed_length('aa', 'b') < 0

def test_fuse_with_converted_comparator():
    descending = lt_from_cmp(lambda a, b: three_way(b, a))
    s = fuse(list2stream(5, 3, 1), list2stream(6, 4, 2), descending)
    assert stream2list(s) == [6, 5, 4, 3, 2, 1]


#############################################################################
#  insert
#
def test_insert():
    seq = [1, 3, 5]
    assert insert(seq, 4) == 2
    assert seq == [1, 3, 4, 5]
    assert insert(seq, 0) == 0
    assert insert(seq, 9) == 5
    assert seq == [0, 1, 3, 4, 5, 9]

def test_insert_into_empty():
    seq: list[int] = []
    assert insert(seq, 7) == 0
    assert seq == [7]

def test_insert_goes_after_equals():
    by_first = cmp_from_key(itemgetter(0))
    seq = [(1, 'a'), (2, 'b'), (2, 'c'), (3, 'd')]
    assert insert(seq, (2, 'new'), by_first) == 3
    assert seq == [(1, 'a'), (2, 'b'), (2, 'c'), (2, 'new'), (3, 'd')]

def test_insert_keeps_sorted():
    rng = Random(1234)
    seq: list[int] = []
    values = [rng.randrange(50) for _ in range(200)]
    for value in values:
        insert(seq, value)
    assert seq == sorted(values)

def test_insert_is_stable():
    rng = Random(99)
    by_first = cmp_from_key(itemgetter(0))
    pairs = [(rng.randrange(5), i) for i in range(100)]
    seq: list[tuple[int, int]] = []
    for pair in pairs:
        insert(seq, pair, by_first)
    assert seq == sorted(pairs, key=itemgetter(0))
