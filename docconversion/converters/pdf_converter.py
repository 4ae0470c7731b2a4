"""
PDF-to-Markdown Converter

Converts PDF documents into Markdown with pymupdf4llm, which keeps headings,
tables and lists. The raw output is left for the cleanup pipeline.
"""

import logging
import os

from ..errors import ConversionError

logger = logging.getLogger(__name__)


class PDFConverter:
    """Converts PDF files to Markdown."""

    SUPPORTED_EXTENSIONS = {".pdf"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(str(file_path).lower())
        return ext in PDFConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(file_path: str, image_dir: str = None) -> str:
        """
        Convert a PDF file to Markdown text.

        Uses pymupdf4llm for structure-preserving conversion. Falls back to
        raw page text from pymupdf if pymupdf4llm is unavailable.

        Args:
            file_path: Path of the PDF
            image_dir: If given, embedded images are written there and
                referenced from the Markdown

        Raises:
            FileNotFoundError: If the PDF does not exist
            ConversionError: If the PDF cannot be read
        """
        file_path = str(file_path)
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"PDF file not found: {file_path}")

        # Primary: pymupdf4llm gives the best markdown output
        try:
            import pymupdf4llm
        except ImportError:
            pymupdf4llm = None

        if pymupdf4llm is not None:
            options = {}
            if image_dir:
                options = {"write_images": True, "image_path": str(image_dir)}
            try:
                md_text = pymupdf4llm.to_markdown(file_path, **options)
            except (RuntimeError, ValueError) as exc:
                raise ConversionError(f"Failed to convert {os.path.basename(file_path)}: {exc}") from exc
            if image_dir:
                md_text = relative_image_links(md_text, image_dir)
            return md_text

        logger.info("pymupdf4llm not installed, using plain pymupdf text for %s", file_path)
        return _extract_text(file_path)


def relative_image_links(md_text: str, image_dir) -> str:
    """
    Rewrite image links that point into image_dir as bare file names.

    pymupdf4llm links each image by the path it was written to. The Markdown
    is saved in image_dir as well, so the file name alone resolves.
    """
    image_dir = str(image_dir).rstrip("/\\")
    for prefix in {image_dir, image_dir.replace(os.sep, "/")}:
        for sep in {"/", os.sep}:
            md_text = md_text.replace(f"]({prefix}{sep}", "](")
    return md_text


def _extract_text(file_path: str) -> str:
    """Fallback: pymupdf (fitz) raw text extraction, one section per page."""
    try:
        import fitz  # pymupdf
    except ImportError:
        raise RuntimeError(
            "Neither pymupdf4llm nor pymupdf is installed. "
            "Run: pip install pymupdf4llm pymupdf"
        )

    try:
        doc = fitz.open(file_path)
    except (RuntimeError, ValueError) as exc:
        raise ConversionError(f"Failed to open {os.path.basename(file_path)}: {exc}") from exc

    pages = []
    with doc:
        for i, page in enumerate(doc):
            text = page.get_text("text")
            if text.strip():
                pages.append(f"<!-- Page {i + 1} -->\n\n{text.strip()}")
    return "\n\n---\n\n".join(pages) + "\n"
