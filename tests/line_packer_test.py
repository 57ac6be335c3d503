import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.line_packer import pack_lines, join_groups

def test_everything_fits_on_one_line():
    assert pack_lines([['flex', 'block'], ['p-4']], 80) == ['flex block p-4']

def test_oversized_group_forced_solo():
    lines = pack_lines([['aaaaaaaaaa'], ['b'], ['c']], 10)
    assert lines == ['aaaaaaaaaa', 'b c']

def test_group_never_split():
    group = ['p-4', 'p-2', 'px-10', 'py-12']
    assert pack_lines([group], 5) == ['p-4 p-2 px-10 py-12']

def test_groups_deferred_in_order():
    groups = [['p-4', 'p-2'], ['m-10', 'm-20'], ['gap-1']]
    assert pack_lines(groups, 10) == ['p-4 p-2', 'm-10 m-20', 'gap-1']

def test_exact_width_fits():
    assert pack_lines([['abcd'], ['efghi']], 10) == ['abcd efghi']
    assert pack_lines([['abcd'], ['efghij']], 10) == ['abcd', 'efghij']

def test_multi_group_lines_respect_width():
    groups = [['x' * n] for n in (3, 7, 2, 9, 1, 4, 12, 5)]
    lines = pack_lines(groups, 12)
    assert ' '.join(lines) == join_groups(groups)
    for line in lines:
        if len(line.split()) > 1:
            assert len(line) <= 12

def test_empty_input():
    assert pack_lines([], 80) == []
    assert pack_lines([[]], 80) == []

def test_default_width_is_80():
    groups = [['a' * 40], ['b' * 39]]
    assert pack_lines(groups) == ['a' * 40 + ' ' + 'b' * 39]
    assert pack_lines(groups + [['c']]) == ['a' * 40 + ' ' + 'b' * 39, 'c']
