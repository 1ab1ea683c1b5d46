"""
Diagnostics pass over a parsed Document.

The parser tolerates duplicates and unresolved names; this pass reports them
without changing how parsing behaves.
"""

from collections import Counter
from pathlib import Path

from . import ir
from .errors import make_validation_error


def _duplicates(names: list[str]) -> list[str]:
    return sorted(name for name, count in Counter(names).items() if count > 1)


def validate_names(doc: ir.Document) -> tuple[list[str], list[str]]:
    """Report names declared more than once within the same section list."""
    errors: list[str] = []
    sections = {
        "data model": [m.name for m in doc.data],
        "interface": [i.name for i in doc.interfaces],
        "computed value": [c.name for c in doc.computed],
        "logic section": [s.name for s in doc.logic],
    }
    for label, names in sections.items():
        for name in _duplicates(names):
            errors.append(f"Duplicate {label} '{name}'")
    return errors, []


def validate_data_models(doc: ir.Document) -> tuple[list[str], list[str]]:
    """Check data models for unresolved references and duplicate fields."""
    errors: list[str] = []
    warnings: list[str] = []
    model_names = {m.name for m in doc.data}

    for model in doc.data:
        if not model.fields:
            warnings.append(f"Data model '{model.name}' has no fields")

        for name in _duplicates([f.name for f in model.fields]):
            errors.append(f"Data model '{model.name}' declares field '{name}' more than once")

        for field in model.fields:
            ref = field.type.referenced_model
            if ref is not None and ref not in model_names:
                warnings.append(
                    f"Field '{model.name}.{field.name}' references unknown model '{ref}'"
                )
            if field.is_required and field.is_optional:
                warnings.append(
                    f"Field '{model.name}.{field.name}' is marked both required and optional"
                )

    return errors, warnings


def validate_computed(doc: ir.Document) -> tuple[list[str], list[str]]:
    """Warn about computed values with no expression."""
    warnings = [
        f"Computed value '{value.name}' has no expression"
        for value in doc.computed
        if not value.source
    ]
    return [], warnings


def lint_document(doc: ir.Document) -> tuple[list[str], list[str]]:
    """
    Validate a Document for semantic errors and warnings.

    Args:
        doc: Parsed document

    Returns:
        Tuple of (errors, warnings)
    """
    all_errors: list[str] = []
    all_warnings: list[str] = []

    if doc.is_empty:
        all_warnings.append("Document declares nothing.")

    for rule in (validate_names, validate_data_models, validate_computed):
        errors, warnings = rule(doc)
        all_errors.extend(errors)
        all_warnings.extend(warnings)

    return all_errors, all_warnings


def require_valid(doc: ir.Document, file: Path | None = None) -> list[str]:
    """
    Lint a document and raise if it has errors.

    Returns:
        The warnings, when there are no errors

    Raises:
        ValidationError: Listing every error found
    """
    errors, warnings = lint_document(doc)
    if errors:
        raise make_validation_error("; ".join(errors), file)
    return warnings
