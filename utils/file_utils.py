"""
File Utilities Module
File reading and markup type detection for the formatter surfaces.
"""

from pathlib import Path
from typing import Optional, Union

# Markup types the extractor understands, by extension
MARKUP_EXTENSIONS = {
    '.html': 'html',
    '.htm': 'html',
    '.jsx': 'jsx',
    '.tsx': 'tsx',
}


def detect_filetype(path: Union[str, Path]) -> Optional[str]:
    """Return the markup filetype for a path, or None if unsupported."""
    return MARKUP_EXTENSIONS.get(Path(path).suffix.lower())


def read_file_content(file_path: Union[str, Path]) -> str:
    """
    Safely read file content with proper encoding.

    Args:
        file_path: Path to the file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r') as f:
            return f.read()
