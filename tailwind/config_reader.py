"""
Tailwind Config Reader Module
Loads and normalizes the class formatter configuration.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Tuple, Union, Optional

from utils.file_utils import read_file_content

logger = logging.getLogger(__name__)

DEFAULT_PRINT_WIDTH = 80

VIEWPORT_GROUPING_MODES = ('separate', 'separate-categorized', 'inline')

# Key used when the formatter options live inside a larger rc file
NESTED_CONFIG_KEY = 'tailwindFormatter'

DEFAULT_VIEWPORTS = ['sm', 'md', 'lg', 'xl', '2xl']

DEFAULT_CATEGORIES: List[Tuple[str, str]] = [
    ('layout', 'container box-* block inline-* flex hidden grid table contents '
               'float-* clear-* object-* overflow-* static fixed absolute relative sticky '
               'inset-* top-* right-* bottom-* left-* visible invisible z-*'),
    ('flexbox-grid', 'basis-* flex-* grow shrink order-* grid-* col-* row-* gap-* '
                     'justify-* content-* items-* self-* place-*'),
    ('spacing', 'p-* px-* py-* pt-* pr-* pb-* pl-* m-* mx-* my-* mt-* mr-* mb-* ml-* space-*'),
    ('sizing', 'w-* min-w-* max-w-* h-* min-h-* max-h-* size-*'),
    ('typography', 'font-* text-* tracking-* leading-* list-* decoration-* underline '
                   'line-through no-underline uppercase lowercase capitalize truncate '
                   'whitespace-* break-*'),
    ('backgrounds', 'bg-* from-* via-* to-*'),
    ('borders', 'rounded-* border-* divide-* outline-* ring-*'),
    ('effects', 'shadow-* opacity-* mix-blend-* blur-* filter'),
    ('transitions', 'transition-* duration-* ease-* delay-* animate-*'),
    ('interactivity', 'cursor-* select-* resize-* scroll-* pointer-events-* '
                      'hover:* focus:* active:* group* peer*'),
]


class ConfigError(Exception):
    """Raised when a formatter config file cannot be read or decoded."""


@dataclass
class FormatterConfig:
    # Ordered (category, prefix spec) pairs; order is output order
    categories: List[Tuple[str, str]] = field(default_factory=list)
    viewports: List[str] = field(default_factory=list)
    viewport_grouping: str = 'separate'
    uncategorized_position: str = 'afterCategorized'
    print_width: int = DEFAULT_PRINT_WIDTH

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'FormatterConfig':
        """
        Build a config from a raw options dict.

        Accepts the formatter's camelCase keys (viewportGrouping,
        uncategorizedPosition, printWidth) as well as snake_case ones.
        Unusable values fall back to defaults instead of raising.
        """
        if not isinstance(data, dict):
            return cls()

        def pick(*keys, default=None):
            for key in keys:
                if key in data:
                    return data[key]
            return default

        viewports = pick('viewports', default=[]) or []
        if isinstance(viewports, str):
            viewports = viewports.split()

        config = cls(
            categories=normalize_categories(pick('categories', default=[])),
            viewports=[str(vp) for vp in viewports if vp],
            viewport_grouping=str(pick('viewportGrouping', 'viewport_grouping', default='separate')),
            uncategorized_position=str(pick('uncategorizedPosition', 'uncategorized_position',
                                            default='afterCategorized')),
            print_width=_normalize_print_width(pick('printWidth', 'print_width',
                                                    default=DEFAULT_PRINT_WIDTH)),
        )
        if config.viewport_grouping not in VIEWPORT_GROUPING_MODES:
            logger.warning(f"Unknown viewportGrouping '{config.viewport_grouping}', output will be empty")
        return config

    @classmethod
    def defaults(cls) -> 'FormatterConfig':
        return cls(categories=list(DEFAULT_CATEGORIES), viewports=list(DEFAULT_VIEWPORTS))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase dict format used by the formatter options."""
        return {
            'categories': dict(self.categories),
            'viewports': list(self.viewports),
            'viewportGrouping': self.viewport_grouping,
            'uncategorizedPosition': self.uncategorized_position,
            'printWidth': self.print_width,
        }

    def with_overrides(self, **overrides) -> 'FormatterConfig':
        values = {**self.__dict__, **{k: v for k, v in overrides.items() if v is not None}}
        values['categories'] = list(values['categories'])
        values['viewports'] = list(values['viewports'])
        values['print_width'] = _normalize_print_width(values['print_width'])
        return FormatterConfig(**values)


def normalize_categories(raw: Any) -> List[Tuple[str, str]]:
    """Turn a categories mapping or list of pairs into ordered (name, spec) pairs."""
    if isinstance(raw, dict):
        items = list(raw.items())
    elif isinstance(raw, (list, tuple)):
        items = [tuple(item) for item in raw if isinstance(item, (list, tuple)) and len(item) == 2]
    else:
        return []
    categories = []
    for name, spec in items:
        if isinstance(spec, (list, tuple)):
            spec = ' '.join(str(p) for p in spec)
        elif spec is None:
            spec = ''
        categories.append((str(name), str(spec)))
    return categories


def _normalize_print_width(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        logger.warning(f"Invalid printWidth {value!r}, using {DEFAULT_PRINT_WIDTH}")
        return DEFAULT_PRINT_WIDTH
    return value


class TailwindConfigReader:
    def __init__(self):
        self.raw_config: Dict[str, Any] = {}

    def read_config(self, config_path: Union[str, Path]) -> FormatterConfig:
        """Read a JSON formatter config file. Raises ConfigError on failure."""
        path = Path(config_path)
        logger.info(f"Reading formatter config: {path}")
        try:
            content = read_file_content(path)
            data = json.loads(content) if content.strip() else {}
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to read config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a JSON object")
        self.raw_config = self.extract_options(data)
        return FormatterConfig.from_dict(self.raw_config)

    def extract_options(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Return formatter options, whether at top level or nested in an rc file."""
        nested = data.get(NESTED_CONFIG_KEY)
        if isinstance(nested, dict):
            options = dict(nested)
            # printWidth is commonly shared with the host formatter
            if 'printWidth' not in options and 'printWidth' in data:
                options['printWidth'] = data['printWidth']
            return options
        return data


def load_config(config_path: Optional[Union[str, Path]] = None) -> FormatterConfig:
    """Load a config file, degrading to the built-in defaults on any failure."""
    if config_path is None:
        return FormatterConfig.defaults()
    try:
        return TailwindConfigReader().read_config(config_path)
    except ConfigError as e:
        logger.error(str(e), exc_info=True)
        return FormatterConfig.defaults()
