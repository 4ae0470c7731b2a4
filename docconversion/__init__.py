"""
DocConversion - Document-to-Markdown Converter

Converts PDF, DOC and DOCX documents into Markdown and cleans the result:
converter banners removed, headings separated by single blank lines, blank
runs collapsed, pipe tables aligned and image captions replaced by a fixed
placeholder.
"""

from .cleanup import clean_and_format, clean_text
from .config import ConversionConfig
from .core import ConversionResult, ConversionStatus, DocConverter
from .errors import ConversionError, DocConversionError, UnsupportedFormatError

__version__ = "1.0.0"

__all__ = [
    "clean_and_format",
    "clean_text",
    "ConversionConfig",
    "ConversionResult",
    "ConversionStatus",
    "DocConverter",
    "ConversionError",
    "DocConversionError",
    "UnsupportedFormatError",
]
