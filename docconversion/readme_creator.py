"""
ReadMe assembly from a template.

A template (rm_creator.md by default) is copied line by line into ReadMe.md
next to it, expanding two directives:

    [insert_file](chapter/ReadMe.md)(1)
        Include another Markdown file, pushing its headings down by the given
        number of levels and copying the images it references.

    [insert_acinfo](https://example.org/diagrams)(diagrams.txt)
        Include activity diagrams listed in a file of "title:" and
        "fileName:" lines as "### <title>" sections with an image each.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from .config import ConversionConfig

logger = logging.getLogger(__name__)

INSERT_FILE = "[insert_file]"
INSERT_ACINFO = "[insert_acinfo]"
DIAGRAM_HEADING_LEVEL = 3


def _between(text: str, start: str, end: str) -> str:
    """Text between the first `start` and the next `end`, or ""."""
    begin = text.find(start)
    if begin < 0:
        return ""
    begin += len(start)
    stop = text.find(end, begin)
    if stop < 0:
        return ""
    return text[begin:stop]


def _native_path(file_path: str) -> str:
    """Template paths use '/'; convert to the platform separator."""
    return file_path.replace("/", os.sep)


class ReadMeCreator:
    """Builds ReadMe.md files from rm_creator.md templates."""

    def __init__(self, config: ConversionConfig = None):
        self.config = config or ConversionConfig()

    def create(self, template_path, force: bool = None) -> Optional[Path]:
        """
        Expand a template into ReadMe.md in the template's directory.

        Args:
            template_path: Path of the template file
            force: Overwrite an existing ReadMe.md (default: config.force)

        Returns:
            Path of the written ReadMe.md, or None if it already existed
        """
        template = Path(template_path)
        force = self.config.force if force is None else force
        base_dir = template.parent
        readme_path = base_dir / self.config.output_file_name

        result = []
        for line in template.read_text(encoding="utf-8-sig").splitlines():
            directive = line.lower()
            if directive.startswith(INSERT_FILE):
                include_path = Path(_native_path(_between(line, "(", ")")))
                if not include_path.is_absolute():
                    include_path = base_dir / include_path
                level = _parse_level(_between(line, ")(", ")"))
                result.extend(include_readme(base_dir, include_path, level))
            elif directive.startswith(INSERT_ACINFO):
                url = _between(line, "(", ")")
                list_file = _native_path(_between(line, ")(", ")"))
                result.extend(include_activity_diagrams(base_dir, list_file, url, DIAGRAM_HEADING_LEVEL))
            else:
                result.append(line)

        if readme_path.exists() and not force:
            logger.info("%s exists, not overwriting (use force)", readme_path)
            return None

        readme_path.write_text("".join(f"{line}\n" for line in result), encoding="utf-8")
        logger.info("Wrote %s", readme_path)
        return readme_path


def _parse_level(text: str) -> int:
    try:
        return max(int(text.strip()), 0)
    except ValueError:
        return 0


def include_readme(target_dir: Path, file_path: Path, level: int) -> list:
    """
    Lines of an included Markdown file.

    Headings get `level` extra '#'. Images are copied from the included
    file's directory into target_dir; a failed copy is logged and ignored.
    """
    source_dir = file_path.parent
    result = []

    for line in file_path.read_text(encoding="utf-8-sig").splitlines():
        stripped = line.strip()
        if stripped.startswith("!["):
            image_path = _native_path(_between(line, "(", ")"))
            _copy_image(source_dir / image_path, target_dir / image_path)
            result.append(line)
        elif stripped.startswith("#"):
            result.append("#" * level + line)
        else:
            result.append(line)
    return result


def _copy_image(source: Path, destination: Path) -> None:
    if source.resolve() == destination.resolve():
        return
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
    except OSError as e:
        logger.debug("Could not copy image %s: %s", source, e)


def include_activity_diagrams(base_dir: Path, list_file: str, url: str, level: int) -> list:
    """
    Sections for the diagrams listed in base_dir/list_file.

    The list holds "title:<text>" lines, each followed by a
    "fileName:<name>" line. A missing list file yields no lines.
    """
    path = base_dir / list_file
    if not list_file or not path.is_file():
        logger.warning("Activity diagram list %s not found", path)
        return []

    result = []
    title = ""
    for line in path.read_text(encoding="utf-8-sig").splitlines():
        key, _, value = line.partition(":")
        if key == "title":
            title = value
        elif key == "fileName":
            if result:
                result.append("")
            result.append(f"{'#' * level} {title}")
            result.append("")
            result.append(f"![{title}]({url}/{value})")
    return result
