"""
DocConversion Core Engine

Routes office documents to the matching converter backend, writes the raw
Markdown into a per-document folder and runs the cleanup pipeline over the
result. Existing Markdown output is re-cleaned rather than reconverted.
"""

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from .cleanup import pipeline
from .config import ConversionConfig
from .converters.office_converter import OfficeConverter
from .converters.pdf_converter import PDFConverter
from .errors import DocConversionError, UnsupportedFormatError

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = {".md"}


class ConversionStatus(Enum):
    """Outcome of converting or formatting one file."""
    CONVERTED = "converted"
    RECLEANED = "recleaned"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"
    MISSING = "missing"


@dataclass
class ConversionResult:
    """Typed result of a conversion; the caller decides how to report it."""
    source_file: Path
    status: ConversionStatus
    output_path: Optional[Path] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (ConversionStatus.CONVERTED, ConversionStatus.RECLEANED)


class DocConverter:
    """
    Document conversion engine.

    Converts PDF/DOC/DOCX files to Markdown and cleans Markdown files in
    place. One file's failure never affects another file.
    """

    def __init__(self, config: ConversionConfig = None):
        self.config = config or ConversionConfig()

    def convert_document(
        self,
        source_file,
        target_directory=None,
        output_file_name: str = None,
    ) -> ConversionResult:
        """
        Convert a document to Markdown and clean the result.

        The Markdown is written to target_directory/<source stem>/<output_file_name>.
        If that file already exists it is only re-cleaned (unless force is set);
        a Markdown source is cleaned in place.

        Args:
            source_file: The PDF/DOC/DOCX (or .md) file
            target_directory: Root of the output tree (default: config.target_path)
            output_file_name: Name of the Markdown file (default: config.output_file_name)

        Returns:
            A ConversionResult; a missing source gives status MISSING and
            touches nothing
        """
        source = Path(source_file)
        target_root = Path(target_directory) if target_directory else self.config.target_path
        file_name = output_file_name or self.config.output_file_name

        conversion_dir = target_root / source.stem
        conversion_file = conversion_dir / file_name

        if (
            not self.config.force
            and conversion_file.is_file()
            and conversion_file.suffix.lower() in MARKDOWN_EXTENSIONS
        ):
            logger.info("Output exists, re-cleaning %s", conversion_file)
            return self._reclean(source, conversion_file)

        if source.is_file() and source.suffix.lower() in MARKDOWN_EXTENSIONS:
            return self._reclean(source, source)

        if not source.is_file():
            logger.debug("Source %s does not exist, skipping", source)
            return ConversionResult(source, ConversionStatus.MISSING)

        try:
            converter = self._converter_for(source)
        except UnsupportedFormatError as e:
            return ConversionResult(source, ConversionStatus.UNSUPPORTED, message=str(e))

        if conversion_dir.exists():
            shutil.rmtree(conversion_dir)
        conversion_dir.mkdir(parents=True)

        result = ConversionResult(source, ConversionStatus.CONVERTED, conversion_file)
        try:
            md_text = self._run_converter(converter, source, conversion_dir)
            conversion_file.write_text(md_text, encoding="utf-8")
            logger.info("Converted %s -> %s", source, conversion_file)
        except (DocConversionError, RuntimeError) as e:
            logger.warning("Conversion of %s failed: %s", source, e)
            result = ConversionResult(source, ConversionStatus.FAILED, message=str(e))
        except OSError:
            raise
        except Exception as e:
            # Damaged input can surface as any parser error (lxml, zlib, ...)
            logger.exception("Unexpected error converting %s", source)
            message = f"{type(e).__name__}: {e}"
            result = ConversionResult(source, ConversionStatus.FAILED, message=message)

        # Clean whatever the converter produced; nothing written means no-op
        self._clean(conversion_file)
        return result

    def clean_and_format(self, markdown_file) -> ConversionResult:
        """
        Run the cleanup pipeline on a Markdown file in place.

        A missing file is a silent no-op (status MISSING).
        """
        path = Path(markdown_file)
        if path.suffix.lower() not in MARKDOWN_EXTENSIONS:
            message = str(UnsupportedFormatError(path.suffix))
            return ConversionResult(path, ConversionStatus.UNSUPPORTED, message=message)

        if not path.is_file():
            return ConversionResult(path, ConversionStatus.MISSING)
        return self._reclean(path, path)

    def convert_all(self, sources: Iterable, target_directory=None) -> list:
        """Convert every supported document under the given files/directories."""
        files = _expand(sources, self.supported_extensions())
        return [self.convert_document(f, target_directory) for f in files]

    def format_all(self, sources: Iterable) -> list:
        """Clean every Markdown file under the given files/directories."""
        files = _expand(sources, MARKDOWN_EXTENSIONS)
        return [self.clean_and_format(f) for f in files]

    def _reclean(self, source: Path, path: Path) -> ConversionResult:
        """Clean existing Markdown; text that is not UTF-8 fails only this file."""
        try:
            self._clean(path)
        except UnicodeDecodeError as e:
            logger.warning("Cannot clean %s: %s", path, e)
            message = f"{path.name} is not valid UTF-8 ({e.reason} at byte {e.start})"
            return ConversionResult(source, ConversionStatus.FAILED, message=message)
        return ConversionResult(source, ConversionStatus.RECLEANED, path)

    def _clean(self, path: Path) -> bool:
        return pipeline.clean_and_format(
            path,
            attribution=self.config.attribution,
            placeholder=self.config.placeholder,
        )

    def _run_converter(self, converter, source: Path, conversion_dir: Path) -> str:
        if converter is OfficeConverter:
            return OfficeConverter.convert(
                source,
                image_dir=conversion_dir,
                soffice=self.config.soffice,
                timeout=self.config.soffice_timeout,
            )
        return converter.convert(source, image_dir=conversion_dir)

    @staticmethod
    def _converter_for(source: Path):
        """Route a file to the converter that handles its extension."""
        for converter in (PDFConverter, OfficeConverter):
            if converter.can_handle(source):
                return converter
        raise UnsupportedFormatError(source.suffix)

    @staticmethod
    def supported_extensions() -> set:
        return PDFConverter.SUPPORTED_EXTENSIONS | OfficeConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported formats."""
        return {
            "PDF": sorted(PDFConverter.SUPPORTED_EXTENSIONS),
            "Word Documents": sorted(OfficeConverter.SUPPORTED_EXTENSIONS),
            "Markdown (format only)": sorted(MARKDOWN_EXTENSIONS),
        }


def get_files(path, search_pattern: str = "*", extensions: Iterable[str] = ()) -> list:
    """
    Recursively list files under path, sorted.

    Args:
        path: Directory to search
        search_pattern: Glob pattern matched against file names
        extensions: Allowed extensions (case-insensitive); empty means all

    Returns:
        Sorted list of matching file paths
    """
    wanted = {ext.lower() for ext in extensions}
    return sorted(
        p for p in Path(path).rglob(search_pattern)
        if p.is_file() and (not wanted or p.suffix.lower() in wanted)
    )


def _expand(sources: Iterable, extensions: Iterable[str]) -> list:
    """Files are kept as given; directories are replaced by their matching files."""
    files = []
    for source in sources:
        source = Path(source)
        if source.is_dir():
            files.extend(get_files(source, "*", extensions))
        else:
            files.append(source)
    return files
