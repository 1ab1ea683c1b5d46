"""
Translation of APML expression text into JavaScript.

Expressions reach the backend as raw text. Only the word operators are
rewritten; everything else is passed through unchanged.
"""

import re

from ..base.utils import snake_to_camel

# Longer phrases first so "not equals" is not split by "not"
WORD_OPERATORS = [
    (re.compile(r"\s+not equals\s+"), " !== "),
    (re.compile(r"\s+equals\s+"), " === "),
    (re.compile(r"\s+and\s+"), " && "),
    (re.compile(r"\s+or\s+"), " || "),
    (re.compile(r"\s+not\s+"), " !"),
]

SNAKE_IDENTIFIER_RE = re.compile(r"\b[a-z]+(?:_[a-z]+)+\b")


def to_javascript(expression: str) -> str:
    """Rewrite APML word operators as JavaScript operators."""
    result = expression
    for pattern, replacement in WORD_OPERATORS:
        result = pattern.sub(replacement, result)
    return result


def to_vue_condition(expression: str) -> str:
    """
    Convert a condition for use in a template directive.

    Also rewrites a leading ``not`` and snake_case identifiers to camelCase.
    """
    result = to_javascript(expression)
    result = re.sub(r"^not\s+", "!", result)
    result = re.sub(r"\(\s*not\s+", "(!", result)
    return SNAKE_IDENTIFIER_RE.sub(lambda m: snake_to_camel(m.group(0)), result)


def computed_body(source: str | None) -> str:
    """Build the body of a Vue ``computed(() => ...)`` callback."""
    if not source:
        return "return null; // No expression provided"

    stripped = source.strip()
    if stripped.startswith("function("):
        return f"return {stripped};"
    if "=>" in stripped and "?" not in stripped:
        return f"return {stripped};"
    return f"return {to_javascript(stripped)};"
