"""
Exception types shared across the package.
"""


class DocConversionError(Exception):
    """Base class for document conversion errors."""
    pass


class ConversionError(DocConversionError):
    """Raised when a converter backend fails to produce Markdown."""
    pass


class UnsupportedFormatError(DocConversionError):
    """Raised when no converter handles a file extension."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"The file extension '{extension}' is not supported.")
