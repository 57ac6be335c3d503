import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.prefix_index import build_prefix_index, split_prefix_spec, strip_wildcard

def test_split_prefix_spec_whitespace():
    assert split_prefix_spec("flex  p-*\tm-*") == ['flex', 'p-*', 'm-*']
    assert split_prefix_spec("") == []
    assert split_prefix_spec(None) == []

def test_strip_wildcard():
    assert strip_wildcard('group*') == 'group'
    assert strip_wildcard('group') == 'group'
    assert strip_wildcard('*') == ''

def test_entries_sorted_longest_first():
    entries, _ = build_prefix_index([('state', 'group*'), ('hover', 'group-hover')])
    assert [e.prefix for e in entries] == ['group-hover', 'group']
    assert entries[0].length == 11
    assert entries[1].raw_key == 'group*'
    assert entries[1].is_wildcard

def test_equal_length_keeps_declaration_order():
    entries, _ = build_prefix_index([('a', 'mt-* mb-*'), ('b', 'px-*')])
    assert [e.raw_key for e in entries] == ['mt-*', 'mb-*', 'px-*']

def test_buckets_follow_declaration_order():
    _, buckets = build_prefix_index([('layout', 'flex p-*'), ('color', 'bg-*')])
    assert [b.name for b in buckets] == ['layout', 'color']
    assert [key for key, _ in buckets[0].groups] == ['flex', 'p-*']
    assert buckets[0].is_empty()

def test_literal_and_wildcard_are_distinct_buckets():
    entries, buckets = build_prefix_index([('layout', 'flex flex*')])
    assert [key for key, _ in buckets[0].groups] == ['flex', 'flex*']
    assert entries[0].bucket is not entries[1].bucket

def test_entry_references_its_bucket():
    entries, buckets = build_prefix_index([('color', 'bg-*')])
    entries[0].bucket.append('bg-red-500')
    assert buckets[0].groups == [('bg-*', ['bg-red-500'])]

def test_malformed_config_degrades():
    entries, buckets = build_prefix_index([('empty', ''), ('star', '*'), ('blank', '   ')])
    assert entries == []
    assert [b.name for b in buckets] == ['empty', 'star', 'blank']
    assert all(b.groups == [] for b in buckets)

def test_duplicate_raw_entry_shares_bucket():
    entries, buckets = build_prefix_index([('spacing', 'p-* p-*')])
    assert len(buckets[0].groups) == 1
    assert entries[0].bucket is entries[1].bucket
