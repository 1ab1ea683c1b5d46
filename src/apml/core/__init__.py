"""Core APML functionality: IR, line-based parser, diagnostics, project manifest."""

from . import ir
from .dsl_parser_impl import Parser, parse_apml
from .errors import (
    ApmlError,
    BackendError,
    ErrorContext,
    ParseError,
    ValidationError,
)
from .lint import lint_document, require_valid
from .manifest import ProjectManifest, discover_source_files, load_manifest
from .parser import parse_file, parse_files

__all__ = [
    "ir",
    "ApmlError",
    "ParseError",
    "ValidationError",
    "BackendError",
    "ErrorContext",
    "Parser",
    "parse_apml",
    "parse_file",
    "parse_files",
    "lint_document",
    "require_valid",
    "ProjectManifest",
    "load_manifest",
    "discover_source_files",
]
