"""
Prefix Index Module
Flattens the category -> prefix spec taxonomy into a sorted matcher table.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple, Iterable

logger = logging.getLogger(__name__)

WILDCARD_MARKER = '*'


@dataclass
class CategoryBucket:
    """Ordered (raw prefix key, classes) pairs for one category."""
    name: str
    groups: List[Tuple[str, List[str]]] = field(default_factory=list)

    def group_for(self, raw_key: str) -> List[str]:
        """Return the class list for raw_key, creating it at the end if missing."""
        for key, classes in self.groups:
            if key == raw_key:
                return classes
        classes = []
        self.groups.append((raw_key, classes))
        return classes

    def non_empty_groups(self) -> List[List[str]]:
        return [classes for _, classes in self.groups if classes]

    def is_empty(self) -> bool:
        return not any(classes for _, classes in self.groups)


@dataclass
class PrefixEntry:
    category: str
    prefix: str
    raw_key: str
    length: int
    # The class list in the owning CategoryBucket this entry feeds
    bucket: List[str] = field(default_factory=list, repr=False)

    @property
    def is_wildcard(self) -> bool:
        return self.raw_key.endswith(WILDCARD_MARKER)


def split_prefix_spec(spec: str) -> List[str]:
    """Split a space-separated prefix spec into raw entries."""
    if not isinstance(spec, str):
        return []
    return spec.split()


def strip_wildcard(raw_entry: str) -> str:
    if raw_entry.endswith(WILDCARD_MARKER):
        return raw_entry[:-1]
    return raw_entry


def build_prefix_index(categories: Iterable[Tuple[str, str]]) -> Tuple[List[PrefixEntry], List[CategoryBucket]]:
    """
    Build the flat matcher table and the empty bucket structure.

    Args:
        categories: Ordered (category name, prefix spec) pairs

    Returns:
        Tuple of (entries sorted by prefix length descending, buckets in
        declaration order). The sort is stable, so entries of equal length
        keep their declaration order.
    """
    entries: List[PrefixEntry] = []
    buckets: List[CategoryBucket] = []

    for category, spec in categories:
        bucket = CategoryBucket(name=category)
        buckets.append(bucket)
        for raw_entry in split_prefix_spec(spec):
            prefix = strip_wildcard(raw_entry)
            if not prefix:
                logger.debug(f"Skipping empty prefix entry '{raw_entry}' in category '{category}'")
                continue
            entries.append(PrefixEntry(
                category=category,
                prefix=prefix,
                raw_key=raw_entry,
                length=len(prefix),
                bucket=bucket.group_for(raw_entry),
            ))

    entries.sort(key=lambda entry: entry.length, reverse=True)
    logger.debug(f"Built prefix index: {len(entries)} entries across {len(buckets)} categories")
    return entries, buckets
