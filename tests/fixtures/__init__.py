# Test fixtures
from .sample_markdown import (
    RAW_CONVERTER_MARKDOWN,
    CLEANED_MARKDOWN,
    RAW_MARKDOWN_NO_BANNER,
    CLEANED_MARKDOWN_NO_BANNER,
    make_pdf_converter,
)

__all__ = [
    "RAW_CONVERTER_MARKDOWN",
    "CLEANED_MARKDOWN",
    "RAW_MARKDOWN_NO_BANNER",
    "CLEANED_MARKDOWN_NO_BANNER",
    "make_pdf_converter",
]
