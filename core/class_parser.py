"""
Class Parser Module
Splits a raw class attribute value into base and per-viewport classes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence


@dataclass
class ClassParseResult:
    base_classes: List[str] = field(default_factory=list)
    # viewport -> classes with the '<viewport>:' prefix removed
    viewport_classes: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict) -> 'ClassParseResult':
        """Build from either camelCase (baseClasses) or snake_case keys."""
        base = data.get('baseClasses', data.get('base_classes', []))
        viewport = data.get('viewportClasses', data.get('viewport_classes', {}))
        if not isinstance(viewport, dict):
            viewport = {}
        return cls(
            base_classes=_as_class_list(base),
            viewport_classes={str(vp): _as_class_list(classes) for vp, classes in viewport.items()},
        )


def _as_class_list(value) -> List[str]:
    """Coerce a class list value; None or unknown types become an empty list."""
    if isinstance(value, str):
        return split_class_tokens(value)
    if isinstance(value, (list, tuple)):
        return [str(c) for c in value if c is not None]
    return []


def split_class_tokens(class_string: str) -> List[str]:
    """
    Split on whitespace, keeping ${...} interpolations intact.

    Whitespace inside an interpolation (e.g. a ternary) does not end the
    token. Unbalanced braces keep the rest of the string as one token.
    """
    tokens = []
    current = []
    depth = 0
    i = 0
    while i < len(class_string):
        char = class_string[i]
        if class_string.startswith('${', i):
            depth += 1
            current.append('${')
            i += 2
            continue
        if depth:
            if char == '{':
                depth += 1
            elif char == '}':
                depth -= 1
            current.append(char)
        elif char.isspace():
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)
        i += 1
    if current:
        tokens.append(''.join(current))
    return tokens


def parse_class_string(class_string: str, viewports: Sequence[str] = ()) -> ClassParseResult:
    """Parse a class attribute value using the configured viewport labels."""
    result = ClassParseResult()
    if not class_string:
        return result
    for token in split_class_tokens(class_string):
        for viewport in viewports:
            marker = f"{viewport}:"
            if viewport and token.startswith(marker) and len(token) > len(marker):
                result.viewport_classes.setdefault(viewport, []).append(token[len(marker):])
                break
        else:
            result.base_classes.append(token)
    return result
