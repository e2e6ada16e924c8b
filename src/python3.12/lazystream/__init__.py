#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-


__all__: list[str] = [
    'Settings',

    'Stream', 'Thunk', 'Comparator', 'LessThan', 'Equality', 'CutPredicate',
    'KeyFunc', 'Transformer', 'Predicate', 'Folder', 'Stepper',

    'EmptyAccess', 'OnEmpty', 'Policy',

    'EmptyStream', 'EMPTY', 'Cell', 'Failed', 'Realized', 'Deferred',
    'Suspension', 'StreamIterator', 'node', 'promise', 'as_stream',
    'as_suspension', 'is_empty', 'is_node', 'is_failed', 'is_forced',
    'head', 'tail', 'drop',

    'list2stream', 'from_list', 'list_to_stream', 'from_iterable',
    'iterator_to_stream', 'stream_to_iterator', 'stream2list',
    'stream_to_list', 'stream_length', 'show', 'upto', 'upfrom',
    'constants', 'genstream',

    'transform', 'filter', 'append', 'fuse', 'merge', 'uniq', 'fold',
    'take', 'discard', 'pick',

    'three_way', 'cmp_from_lt', 'lt_from_cmp', 'cmp_from_key', 'insert',

    'cutsort', 'bounded_lateness',
]

from .config import Settings
from .core   import *
