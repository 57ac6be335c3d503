"""
Class Matcher Module
Finds the owning prefix entry for a single utility class.
"""

import logging
from typing import List, Optional, Sequence

from .prefix_index import PrefixEntry

logger = logging.getLogger(__name__)

INTERPOLATION_MARKER = '${'


class ClassMatcher:
    def __init__(self, entries: List[PrefixEntry], viewports: Sequence[str]):
        # entries must already be sorted longest prefix first
        self.entries = entries
        self.viewports = [vp for vp in viewports if vp]

    def strip_viewport(self, cls: str) -> str:
        """Remove the first configured '<viewport>:' prefix, if any."""
        for viewport in self.viewports:
            marker = f"{viewport}:"
            if cls.startswith(marker):
                return cls[len(marker):]
        return cls

    @staticmethod
    def truncate_interpolation(cls: str) -> str:
        return cls.split(INTERPOLATION_MARKER, 1)[0]

    def match_key(self, cls: str) -> str:
        """The part of a class that participates in matching."""
        # Viewport strip happens before interpolation truncation
        return self.truncate_interpolation(self.strip_viewport(cls))

    def find_entry(self, cls: str) -> Optional[PrefixEntry]:
        key = self.match_key(cls)
        for entry in self.entries:
            if key.startswith(entry.prefix):
                return entry
        return None

    def assign(self, cls: str, uncategorized: List[str]) -> Optional[PrefixEntry]:
        """Append cls to its entry's bucket, or to uncategorized when nothing matches."""
        entry = self.find_entry(cls)
        if entry is None:
            logger.debug(f"Class '{cls}' is uncategorized")
            uncategorized.append(cls)
            return None
        logger.debug(f"Class '{cls}' matched '{entry.raw_key}' in '{entry.category}'")
        entry.bucket.append(cls)
        return entry
