"""
Conversion settings.

A ConversionConfig value is passed explicitly to DocConverter and
ReadMeCreator; nothing in the package keeps process-wide settings.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .cleanup.boilerplate import DEFAULT_ATTRIBUTION
from .cleanup.images import DEFAULT_PLACEHOLDER
from .converters.office_converter import DEFAULT_SOFFICE_TIMEOUT

DEFAULT_OUTPUT_FILE_NAME = "ReadMe.md"
DEFAULT_TEMPLATE_NAME = "rm_creator.md"


def _default_source_path() -> Path:
    return Path(os.path.expanduser("~")) / "Downloads"


@dataclass
class ConversionConfig:
    """Settings for converting, formatting and ReadMe assembly."""
    source_path: Path = field(default_factory=_default_source_path)
    target_path: Path = field(default_factory=Path.cwd)
    output_file_name: str = DEFAULT_OUTPUT_FILE_NAME
    force: bool = False  # reconvert / overwrite existing output
    attribution: str = DEFAULT_ATTRIBUTION
    placeholder: str = DEFAULT_PLACEHOLDER
    template_name: str = DEFAULT_TEMPLATE_NAME
    soffice: Optional[str] = None  # LibreOffice binary, None = search PATH
    soffice_timeout: int = DEFAULT_SOFFICE_TIMEOUT

    def __post_init__(self):
        self.source_path = Path(self.source_path)
        self.target_path = Path(self.target_path)
        if not self.output_file_name or Path(self.output_file_name).name != self.output_file_name:
            raise ValueError(f"Output file name must be a plain file name, got {self.output_file_name!r}")
        if not self.attribution:
            raise ValueError("Attribution marker must not be empty")
        if self.soffice_timeout <= 0:
            raise ValueError(f"LibreOffice timeout must be positive, got {self.soffice_timeout}")
