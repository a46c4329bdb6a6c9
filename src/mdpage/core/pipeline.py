"""File-level orchestration: validate input, convert, assemble, and write"""

import logging
from pathlib import Path
from typing import Optional

from mdpage.core.convert import convert
from mdpage.core.document import DEFAULT_LANG, assemble
from mdpage.core.errors import InvalidExtensionError, MissingSourceError, ProcessingError


logger = logging.getLogger(__name__)

MD_EXTENSION = ".md"


def output_path(source: Path, output_dir: Optional[Path] = None) -> Path:
    """Return <output_dir or source dir>/<source stem>.html."""
    return (output_dir if output_dir is not None else source.parent) / f"{source.stem}.html"


def validate_source(source: Path) -> None:
    """Raise InvalidExtensionError or MissingSourceError for an unusable input path."""
    if source.suffix != MD_EXTENSION:
        raise InvalidExtensionError(f"The input file must have the '{MD_EXTENSION}' extension.")
    if not source.exists():
        raise MissingSourceError(f'The file "{source}" was not found.')


def run_convert(
    source: Path,
    output_dir: Optional[Path] = None,
    lang: str = DEFAULT_LANG,
    encoding: str = "utf-8",
    ) -> Path:
    """Convert one Markdown file into a standalone HTML document. Returns the written path."""
    validate_source(source)
    out_file = output_path(source, output_dir)
    try:
        markdown = source.read_text(encoding=encoding)
        logger.debug("read %s (%d chars)", source, len(markdown))
        html = assemble(source.stem, convert(markdown), lang)
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(html, encoding="utf-8")
    except Exception as e:
        raise ProcessingError("An error occurred while processing the file:") from e
    logger.debug("wrote %s (%d chars)", out_file, len(html))
    return out_file
