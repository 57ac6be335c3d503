import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.grouping_engine import group_classes

CATEGORIES = [
    ('layout', 'flex block hidden'),
    ('spacing', 'p-* m-*'),
    ('color', 'bg-* text-*'),
]

SAMPLE_CLASSES = ['bg-red-500', 'flex', 'm-2', 'p-4', 'custom', 'text-lg', 'md:hidden', 'p-2', 'other']

def test_completeness():
    result = group_classes(SAMPLE_CLASSES, CATEGORIES, ['md'])
    assert sorted(result.all_classes()) == sorted(SAMPLE_CLASSES)

def test_duplicates_are_kept():
    classes = ['p-4', 'p-4', 'unknown', 'unknown']
    result = group_classes(classes, CATEGORIES)
    assert sorted(result.all_classes()) == sorted(classes)
    assert result.uncategorized == ['unknown', 'unknown']

def test_declared_order_not_match_order():
    result = group_classes(SAMPLE_CLASSES, CATEGORIES, ['md'])
    groups = result.category_groups()
    assert [name for name, _ in groups] == ['layout', 'spacing', 'color']
    assert groups[0][1] == [['flex'], ['md:hidden']]
    assert groups[1][1] == [['p-4', 'p-2'], ['m-2']]
    assert groups[2][1] == [['bg-red-500'], ['text-lg']]
    assert result.uncategorized == ['custom', 'other']

def test_empty_categories_omitted():
    result = group_classes(['bg-white'], CATEGORIES)
    assert result.category_groups() == [('color', [['bg-white']])]

def test_empty_input_short_circuits():
    assert group_classes([], CATEGORIES).buckets == []
    result = group_classes(['flex'], [])
    assert result.buckets == []
    assert result.uncategorized == []

def test_assignments():
    result = group_classes(['flex', 'p-4', 'nope'], CATEGORIES)
    assert result.assignments() == {'flex': ('layout', 'flex'), 'p-4': ('spacing', 'p-*')}

def test_idempotent_on_own_output():
    first = group_classes(SAMPLE_CLASSES, CATEGORIES, ['md'])
    flattened = [cls for _, groups in first.category_groups() for group in groups for cls in group]
    flattened += first.uncategorized
    second = group_classes(flattened, CATEGORIES, ['md'])
    assert second.assignments() == first.assignments()
    assert second.uncategorized == first.uncategorized

def test_calls_do_not_share_state():
    first = group_classes(['flex'], CATEGORIES)
    second = group_classes(['block'], CATEGORIES)
    assert first.category_groups() == [('layout', [['flex']])]
    assert second.category_groups() == [('layout', [['block']])]
