"""
Office Document-to-Markdown Converter

Converts Word documents (.docx, and legacy .doc through LibreOffice) into
Markdown. Preserves headings, paragraphs, lists, tables and inline images.
"""

import logging
import os
import shutil
import subprocess
import tempfile
import zipfile

from ..errors import ConversionError

logger = logging.getLogger(__name__)

DEFAULT_SOFFICE_TIMEOUT = 120


class OfficeConverter:
    """Converts Word documents (.docx, .doc) to Markdown."""

    SUPPORTED_EXTENSIONS = {".docx", ".doc"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(str(file_path).lower())
        return ext in OfficeConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(
        file_path: str,
        image_dir: str = None,
        soffice: str = None,
        timeout: int = DEFAULT_SOFFICE_TIMEOUT,
    ) -> str:
        """
        Convert a Word file to Markdown.

        Args:
            file_path: Path of the .docx or .doc file
            image_dir: If given, inline images are written there and
                referenced from the Markdown
            soffice: LibreOffice binary used for .doc files (default: from PATH)
            timeout: Seconds to wait for LibreOffice

        Raises:
            FileNotFoundError: If the file does not exist
            ConversionError: If the document cannot be read or converted
        """
        file_path = str(file_path)
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        _, ext = os.path.splitext(file_path.lower())

        if ext == ".docx":
            return _convert_docx(file_path, image_dir)
        elif ext == ".doc":
            with tempfile.TemporaryDirectory() as tmp_dir:
                docx_path = _doc_to_docx(file_path, tmp_dir, soffice, timeout)
                return _convert_docx(docx_path, image_dir)
        else:
            raise ValueError(f"Unsupported Office format: {ext}")


def find_soffice(explicit: str = None) -> str:
    """Resolve the LibreOffice binary (explicit path first, then PATH)."""
    if explicit:
        if os.path.isfile(explicit):
            return explicit
        raise ConversionError(f"LibreOffice not found at {explicit}")

    found = shutil.which("soffice") or shutil.which("libreoffice")
    if not found:
        raise ConversionError(
            "LibreOffice (soffice) is required to convert .doc files. "
            "Install it or pass its path with --soffice."
        )
    return found


def _doc_to_docx(file_path: str, out_dir: str, soffice: str, timeout: int) -> str:
    """Convert a legacy .doc into .docx with LibreOffice headless."""
    binary = find_soffice(soffice)
    cmd = [binary, "--headless", "--convert-to", "docx", "--outdir", out_dir, file_path]
    logger.info("Running LibreOffice: %s", " ".join(cmd))

    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        raise ConversionError(f"LibreOffice timed out after {timeout}s converting {file_path}") from exc

    name, _ = os.path.splitext(os.path.basename(file_path))
    docx_path = os.path.join(out_dir, f"{name}.docx")

    if proc.returncode != 0 or not os.path.isfile(docx_path):
        detail = (proc.stderr or proc.stdout or "").strip()
        raise ConversionError(f"LibreOffice failed to convert {os.path.basename(file_path)} -> docx: {detail}")
    return docx_path


def _convert_docx(file_path: str, image_dir: str = None) -> str:
    """Convert a Word document to Markdown."""
    try:
        from docx import Document
        from docx.opc.exceptions import PackageNotFoundError
    except ImportError:
        raise RuntimeError("python-docx is not installed. Run: pip install python-docx")

    try:
        doc = Document(file_path)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise ConversionError(f"Failed to open {os.path.basename(file_path)}: {exc}") from exc

    paragraphs = {p._element: p for p in doc.paragraphs}
    tables = {t._element: t for t in doc.tables}
    images = _ImageExporter(doc, image_dir)
    lines = []

    for element in doc.element.body:
        if element in paragraphs:
            para = paragraphs[element]
            lines.extend(_paragraph_to_markdown(para))
            lines.extend(images.export(element))

        elif element in tables:
            lines.append(_table_to_markdown(tables[element]))
            lines.append("")

    return "\n".join(lines).strip() + "\n"


def _paragraph_to_markdown(para) -> list:
    """Map one Word paragraph to Markdown lines."""
    style_name = para.style.name if para.style else ""
    text = para.text.strip()

    if not text:
        return [""]

    # Map Word heading styles to Markdown headings
    if style_name.startswith("Heading"):
        try:
            level = int(style_name.replace("Heading", "").strip())
            level = min(level, 6)
        except ValueError:
            level = 2
        return [f"{'#' * level} {text}", ""]
    elif style_name == "Title":
        return [f"# {text}", ""]
    elif style_name.startswith("List"):
        # Detect numbered vs bullet lists
        if "Number" in style_name:
            return [f"1. {text}"]
        return [f"- {text}"]
    elif para.runs and para.runs[0].bold and len(text) < 100:
        return [f"**{text}**", ""]
    return [text, ""]


def _table_to_markdown(table) -> str:
    """Convert a docx table to a Markdown table."""
    rows = []
    for row in table.rows:
        cells = [_cell_text(cell) for cell in row.cells]
        rows.append(cells)

    if not rows:
        return ""

    # Determine column count from widest row
    col_count = max(len(r) for r in rows)
    for r in rows:
        while len(r) < col_count:
            r.append("")

    md = "| " + " | ".join(rows[0]) + " |\n"
    md += "| " + " | ".join(["---"] * col_count) + " |\n"
    for row in rows[1:]:
        md += "| " + " | ".join(row) + " |\n"

    return md


def _cell_text(cell) -> str:
    # A literal pipe would split the cell when the table is reflowed
    return cell.text.strip().replace("\n", " ").replace("|", "&#124;")


class _ImageExporter:
    """Writes inline images of a paragraph to disk and returns image lines."""

    def __init__(self, doc, image_dir: str = None):
        self.part = doc.part
        self.image_dir = image_dir
        self.written = set()

    def export(self, element) -> list:
        if not self.image_dir:
            return []

        lines = []
        for r_id in element.xpath(".//a:blip/@r:embed"):
            image_part = self.part.related_parts.get(r_id)
            if image_part is None:
                continue
            name = os.path.basename(image_part.partname)
            if name not in self.written:
                os.makedirs(self.image_dir, exist_ok=True)
                with open(os.path.join(self.image_dir, name), "wb") as f:
                    f.write(image_part.blob)
                self.written.add(name)
            lines.extend([f"![{name}]({name})", ""])
        return lines
