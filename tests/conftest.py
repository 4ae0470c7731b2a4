"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from docconversion.config import ConversionConfig
from docconversion.converters.pdf_converter import PDFConverter
from docconversion.core import DocConverter
from tests.fixtures import (
    RAW_CONVERTER_MARKDOWN,
    RAW_MARKDOWN_NO_BANNER,
    make_pdf_converter,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def target_dir(tmp_path):
    """Empty output root for conversions."""
    path = tmp_path / "target"
    path.mkdir()
    return path


@pytest.fixture
def config(target_dir):
    """Configuration writing into the temporary target directory."""
    return ConversionConfig(source_path=target_dir.parent, target_path=target_dir)


@pytest.fixture
def engine(config):
    """Create a conversion engine with the temporary configuration."""
    return DocConverter(config)


@pytest.fixture
def pdf_calls(monkeypatch):
    """Replace the PDF backend with a stub; returns the list of recorded calls."""
    calls = []
    monkeypatch.setattr(PDFConverter, "convert", staticmethod(make_pdf_converter(calls=calls)))
    return calls


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def sample_pdf(tmp_path):
    """A file with a .pdf extension (content is never parsed by the stub)."""
    file_path = tmp_path / "report.pdf"
    file_path.write_bytes(b"%PDF-1.4\n%stub\n")
    return file_path


@pytest.fixture
def raw_markdown_file(tmp_path):
    """A Markdown file holding raw converter output."""
    file_path = tmp_path / "raw.md"
    file_path.write_text(RAW_CONVERTER_MARKDOWN, encoding="utf-8")
    return file_path


@pytest.fixture
def markdown_dir(tmp_path):
    """A directory tree with Markdown and non-Markdown files."""
    root = tmp_path / "docs"
    (root / "sub").mkdir(parents=True)
    (root / "a.md").write_text(RAW_CONVERTER_MARKDOWN, encoding="utf-8")
    (root / "sub" / "b.MD").write_text(RAW_MARKDOWN_NO_BANNER, encoding="utf-8")
    (root / "notes.txt").write_text("not markdown\n\n\n", encoding="utf-8")
    return root
