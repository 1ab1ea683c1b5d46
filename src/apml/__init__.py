"""
APML - a compiler for the APML application description language.

Parses indentation-structured ``.apml`` sources into a typed document and
generates application code from it.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core import ir
from .core.dsl_parser_impl import parse_apml
from .core.errors import ApmlError, BackendError, ParseError, ValidationError
from .core.parser import parse_file


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("apml")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_apml",
    "parse_file",
    "ApmlError",
    "ParseError",
    "ValidationError",
    "BackendError",
]
