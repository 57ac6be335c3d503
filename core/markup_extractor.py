"""
Markup Extractor Module
Finds class attribute values in HTML and JSX/TSX and previews how the
categorizer would format them.
"""

import re
import logging
from typing import Dict, List, Any, Union

from bs4 import BeautifulSoup

from tailwind.config_reader import FormatterConfig
from .categorizer import format_class_string

logger = logging.getLogger(__name__)

JSX_CLASS_REGEX = re.compile(
    r'\b(?:class|className)\s*=\s*(?:"([^"]*)"|\'([^\']*)\'|\{\s*`([^`]*)`\s*\})'
)


class MarkupExtractor:
    def extract_class_attributes_html(self, content: str) -> List[Dict[str, Any]]:
        """Extract raw class attribute values from HTML using BeautifulSoup."""
        # Keep class as the raw string instead of a split list
        soup = BeautifulSoup(content, 'html.parser', multi_valued_attributes=None)
        attributes = []
        for tag in soup.find_all(True):
            class_attr = tag.get('class')
            if class_attr and class_attr.strip():
                attributes.append({
                    'value': class_attr,
                    'location': f"line {tag.sourceline} <{tag.name}>",
                })
        return attributes

    def extract_class_attributes_jsx(self, content: str) -> List[Dict[str, Any]]:
        """Extract class/className string and template literals from JSX/TSX."""
        attributes = []
        for match in JSX_CLASS_REGEX.finditer(content):
            value = next((g for g in match.groups() if g is not None), '')
            if not value.strip():
                continue
            line_no = content[:match.start()].count('\n') + 1
            attributes.append({
                'value': value,
                'location': f"line {line_no}",
            })
        return attributes

    def extract_class_attributes(self, content: str, filetype: str) -> List[Dict[str, Any]]:
        """Unified extraction function for HTML and JSX/TSX."""
        if filetype in ('html', 'htm'):
            return self.extract_class_attributes_html(content)
        elif filetype in ('jsx', 'tsx'):
            return self.extract_class_attributes_jsx(content)
        logger.warning(f"Unsupported filetype for class extraction: {filetype}")
        return []

    def preview_markup(self, content: str, filetype: str,
                       config: Union[FormatterConfig, Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Return each class attribute with the lines the categorizer produces for it."""
        if not isinstance(config, FormatterConfig):
            config = FormatterConfig.from_dict(config or {})
        previews = []
        for attribute in self.extract_class_attributes(content, filetype):
            previews.append({
                'original': attribute['value'],
                'location': attribute['location'],
                'lines': format_class_string(attribute['value'], config),
            })
        logger.info(f"Previewed {len(previews)} class attributes")
        return previews
