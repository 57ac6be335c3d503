"""
Line Packer Module
Wraps the groups of one category into lines within a width budget.
"""

from typing import List, Sequence

DEFAULT_PRINT_WIDTH = 80


def join_groups(groups: Sequence[Sequence[str]]) -> str:
    return ' '.join(' '.join(group) for group in groups)


def pack_lines(groups: Sequence[Sequence[str]], print_width: int = DEFAULT_PRINT_WIDTH) -> List[str]:
    """
    Greedily pack groups into lines, front to back.

    1. Try to fit all remaining groups on the current line.
    2. While it exceeds print_width and holds more than one group, defer
       the last group to a later line.
    3. Emit the line. A single group is never split, even if it is wider
       than print_width.
    4. Repeat for the remaining groups.
    """
    lines = []
    remaining = [list(group) for group in groups if group]

    while remaining:
        count = len(remaining)
        line = join_groups(remaining)
        while len(line) > print_width and count > 1:
            count -= 1
            line = join_groups(remaining[:count])
        lines.append(line)
        remaining = remaining[count:]

    return lines
