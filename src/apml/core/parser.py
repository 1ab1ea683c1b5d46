import logging
from pathlib import Path

from . import ir
from .dsl_parser_impl import parse_apml

logger = logging.getLogger(__name__)


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and ``\\r`` line endings to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse_file(path: Path) -> ir.Document:
    """
    Read an APML source file and parse it.

    Args:
        path: Path to a .apml file

    Returns:
        Parsed Document

    Raises:
        ParseError: If the source has a malformed header
    """
    logger.info("Parsing %s", path)
    text = normalize_newlines(path.read_text(encoding="utf-8"))
    return parse_apml(text, path)


def parse_files(files: list[Path]) -> list[ir.Document]:
    """Parse several source files independently, in order."""
    return [parse_file(f) for f in files]
