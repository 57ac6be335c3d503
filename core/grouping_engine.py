"""
Grouping Engine Module
Partitions a class list into ordered category buckets.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple, Iterable

from .prefix_index import CategoryBucket, build_prefix_index
from .class_matcher import ClassMatcher

logger = logging.getLogger(__name__)


@dataclass
class GroupingResult:
    buckets: List[CategoryBucket] = field(default_factory=list)
    uncategorized: List[str] = field(default_factory=list)

    def category_groups(self) -> List[Tuple[str, List[List[str]]]]:
        """Non-empty groups per category, skipping categories with no classes."""
        return [(bucket.name, bucket.non_empty_groups()) for bucket in self.buckets if not bucket.is_empty()]

    def assignments(self) -> Dict[str, Tuple[str, str]]:
        """Map each categorized class to its (category, raw prefix key)."""
        result = {}
        for bucket in self.buckets:
            for raw_key, classes in bucket.groups:
                for cls in classes:
                    result[cls] = (bucket.name, raw_key)
        return result

    def all_classes(self) -> List[str]:
        classes = [cls for bucket in self.buckets for _, group in bucket.groups for cls in group]
        return classes + list(self.uncategorized)


def group_classes(classes: Sequence[str],
                  categories: Iterable[Tuple[str, str]],
                  viewports: Sequence[str] = ()) -> GroupingResult:
    """
    Group classes by the taxonomy.

    Every class lands in exactly one bucket or in the uncategorized list,
    keeping input order within each bucket.
    """
    categories = list(categories)
    if not classes or not categories:
        return GroupingResult()

    entries, buckets = build_prefix_index(categories)
    matcher = ClassMatcher(entries, viewports)
    result = GroupingResult(buckets=buckets)
    for cls in classes:
        matcher.assign(cls, result.uncategorized)

    logger.debug(f"Grouped {len(classes)} classes, {len(result.uncategorized)} uncategorized")
    return result
