"""
Writing generated artifacts to disk.

Backends return GeneratedFile values; this is the only place they touch the
filesystem.
"""

import logging
from pathlib import Path

from ..stacks import get_backend
from ..stacks.base import GeneratedFile
from .errors import BackendError
from .parser import parse_file

logger = logging.getLogger(__name__)


def write_artifacts(files: list[GeneratedFile], output_dir: Path) -> list[Path]:
    """
    Write each artifact under output_dir, creating parent directories.

    Args:
        files: Artifacts produced by a backend
        output_dir: Destination root

    Returns:
        Paths written, in the order given

    Raises:
        BackendError: If an artifact path escapes output_dir
    """
    root = output_dir.resolve()
    written: list[Path] = []

    for artifact in files:
        target = (root / artifact.path).resolve()
        if not target.is_relative_to(root):
            raise BackendError(f"Artifact path escapes output directory: {artifact.path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(artifact.content, encoding="utf-8")
        logger.info("Wrote %s", target)
        written.append(target)

    return written


def compile_file(input_path: Path, output_dir: Path, stack: str = "vue") -> list[Path]:
    """
    Parse one source file, run a backend over it and write the result.

    Args:
        input_path: APML source file
        output_dir: Destination root for generated files
        stack: Backend name

    Returns:
        Paths written

    Raises:
        ParseError: If the source has a malformed header
        BackendError: If the backend is unknown or fails
    """
    document = parse_file(input_path)
    files = get_backend(stack).generate(document)
    logger.info("Writing %d files to %s", len(files), output_dir)
    return write_artifacts(files, output_dir)
