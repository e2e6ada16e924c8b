from pytest import mark, raises

from lazystream import *

pytestmark = mark.smoke


def test_memoize_once():
    forced = [0]
    def rest() -> Stream[int]:
        forced[0] += 1
        return node(2)
    s = node(1, rest)
    first = tail(s)
    second = tail(s)
    assert forced[0] == 1
    assert first is second
    assert head(first) == 2

def test_error_idempotence():
    s = node(1, lambda: 1 // 0)
    failed = tail(s)
    assert is_failed(failed)
    with raises(ZeroDivisionError) as first:
        head(failed)
    with raises(ZeroDivisionError) as second:
        head(failed)
    assert first.value is second.value
    assert tail(s) is failed

def test_fuse_is_a_merge():
    odds = list2stream(1, 3, 5, 7, 9)
    evens = list2stream(2, 4, 6, 8, 10)
    assert stream2list(fuse(odds, evens)) == list(range(1, 11))
    assert stream2list(fuse(list2stream(1, 2, 3), list2stream(1, 2, 3))
                       ) == [1, 1, 2, 2, 3, 3]
    s = list2stream(1, 2)
    assert fuse(s, EMPTY) is s
    assert fuse(EMPTY, EMPTY) == EMPTY

def test_uniq_collapses_adjacent_runs():
    s = list2stream(1, 1, 2, 2, 3, 3, 4, 4, 5, 5)
    assert stream2list(uniq(s)) == [1, 2, 3, 4, 5]
    assert uniq(EMPTY) == EMPTY

def test_take_discard_partition():
    items = list(range(7))
    for n in range(len(items) + 1):
        s = from_list(items)
        assert stream2list(take(s, n)) + stream2list(discard(s, n)) == items

def test_fold_over_range():
    assert fold(upto(1, 100), lambda acc, x: acc + x, 0) == 5050
    assert fold(EMPTY, lambda acc, x: acc * x, 42) == 42

def test_insert_keeps_order():
    seq = [1, 3, 3, 7]
    assert insert(seq, 3) == 3
    assert seq == [1, 3, 3, 3, 7]

def test_cutsort_settles_in_order():
    swapped = transform(lambda i: i + 1 if i % 2 == 0 else i - 1, upfrom(0))
    assert stream2list(swapped, 6) == [1, 0, 3, 2, 5, 4]
    settled = cutsort(swapped, cut=bounded_lateness(2))
    assert stream2list(settled, 20) == list(range(20))

def test_upfrom_is_restartable():
    assert stream2list(upfrom(42), 10) == list(range(42, 52))
    assert stream2list(upfrom(42), 10) == list(range(42, 52))

def test_from_star_import():
    assert show(take(constants('a', 'b'), 5)) == 'a b a b a'
    assert pick(genstream(lambda x: x * 2, 1), 10) == 1024
