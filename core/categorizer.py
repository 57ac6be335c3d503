"""
Categorizer Module
Organizes Tailwind classes into category lines. Handles the separate,
separate-categorized and inline viewport grouping modes.
"""

import logging
from typing import Dict, List, Sequence, Union, Any

from tailwind.config_reader import FormatterConfig
from .class_parser import ClassParseResult, parse_class_string
from .grouping_engine import group_classes
from .line_packer import pack_lines

logger = logging.getLogger(__name__)

UNCATEGORIZED_BEFORE = 'beforeCategorized'


def _as_config(config: Union[FormatterConfig, Dict[str, Any], None]) -> FormatterConfig:
    if isinstance(config, FormatterConfig):
        return config
    return FormatterConfig.from_dict(config or {})


def _as_parse_result(parsed: Union[ClassParseResult, Dict[str, Any], None]) -> ClassParseResult:
    if isinstance(parsed, ClassParseResult):
        return parsed
    return ClassParseResult.from_dict(parsed or {})


def categorize_tailwind_classes(classes: Sequence[str],
                                config: Union[FormatterConfig, Dict[str, Any]]) -> List[str]:
    """
    Categorize classes by prefix and wrap each category to print_width.

    Returns one or more lines per non-empty category in declaration order,
    plus a single uncategorized line placed per uncategorized_position.
    """
    config = _as_config(config)
    grouping = group_classes(classes, config.categories, config.viewports)

    lines = []
    for _, groups in grouping.category_groups():
        lines.extend(pack_lines(groups, config.print_width))

    uncategorized = ' '.join(grouping.uncategorized)
    if not uncategorized:
        return lines
    if config.uncategorized_position == UNCATEGORIZED_BEFORE:
        return [uncategorized] + lines
    return lines + [uncategorized]


def _prefixed_viewport_classes(parsed: ClassParseResult, viewport: str) -> List[str]:
    return [f"{viewport}:{cls}" for cls in parsed.viewport_classes.get(viewport) or []]


def categorize_separate_mode(parsed: ClassParseResult, config: FormatterConfig,
                             categorized: bool = False) -> List[str]:
    lines = categorize_tailwind_classes(parsed.base_classes, config)

    for viewport in config.viewports:
        prefixed = _prefixed_viewport_classes(parsed, viewport)
        if not prefixed:
            continue
        viewport_lines = categorize_tailwind_classes(prefixed, config)
        if not viewport_lines:
            continue
        if categorized:
            lines.extend(viewport_lines)
        else:
            lines.append(' '.join(viewport_lines))
    return lines


def categorize_separate_categorized_mode(parsed: ClassParseResult, config: FormatterConfig) -> List[str]:
    return categorize_separate_mode(parsed, config, categorized=True)


def categorize_inline_mode(parsed: ClassParseResult, config: FormatterConfig) -> List[str]:
    all_classes = list(parsed.base_classes)
    for viewport in config.viewports:
        all_classes.extend(_prefixed_viewport_classes(parsed, viewport))
    return categorize_tailwind_classes(all_classes, config)


MODE_HANDLERS = {
    'separate': categorize_separate_mode,
    'separate-categorized': categorize_separate_categorized_mode,
    'inline': categorize_inline_mode,
}


def categorize_classes_and_viewports(parsed: Union[ClassParseResult, Dict[str, Any]],
                                     config: Union[FormatterConfig, Dict[str, Any]]) -> List[str]:
    """Dispatch on config.viewport_grouping. Unknown modes produce no lines."""
    config = _as_config(config)
    handler = MODE_HANDLERS.get(config.viewport_grouping)
    if handler is None:
        logger.warning(f"Unknown viewport grouping mode: {config.viewport_grouping}")
        return []
    logger.debug(f"Categorizing with '{config.viewport_grouping}' viewport grouping")
    return handler(_as_parse_result(parsed), config)


def format_class_string(class_string: str, config: Union[FormatterConfig, Dict[str, Any]]) -> List[str]:
    """Parse a raw class attribute value and return its formatted lines."""
    config = _as_config(config)
    return categorize_classes_and_viewports(parse_class_string(class_string, config.viewports), config)
