"""
Data model parsing for APML.

Handles ``data <Name>:`` blocks: field lines with a type and modifiers, and a
``relationships:`` section whose body is kept as raw text.
"""

import logging
import re
from typing import TYPE_CHECKING, Any

from .. import ir

logger = logging.getLogger(__name__)

DATA_HEADER_RE = re.compile(r"^data\s+(\w+)\s*:")
FIELD_RE = re.compile(r"^(\w+):\s+(.+)$")

PRIMITIVE_TYPES = {t.value: t for t in ir.PrimitiveType}
FLAG_MODIFIERS = {m.value: m for m in ir.FieldModifier}
DEFAULT_TOKEN = "default:"


class DataParserMixin:
    """
    Mixin providing data model parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        cursor: Any
        advance: Any
        error: Any
        current_info: Any
        scoped_lines: Any
        skip_block: Any

    def parse_data_model(self) -> ir.DataModel:
        """Parse a data declaration at the cursor."""
        header = self.current_info()
        match = DATA_HEADER_RE.match(header.text)
        if not match:
            self.error(f"Invalid data declaration: '{header.text}'", header)

        name = match.group(1)
        self.advance()

        fields: list[ir.FieldSpec] = []
        relationships: list[str] = []

        for info in self.scoped_lines(header.indent):
            # relationships: (kept raw)
            if info.text == "relationships:":
                self.advance()
                relationships.extend(self.skip_block(info.indent))
                continue

            field_match = FIELD_RE.match(info.text)
            if field_match:
                fields.append(parse_field(field_match.group(1), field_match.group(2)))
            else:
                logger.debug("Ignoring line in data %s: %s", name, info.text)

        return ir.DataModel(name=name, fields=fields, relationships=relationships)


def parse_field(name: str, definition: str) -> ir.FieldSpec:
    """
    Parse the text after ``<name>:`` on a field line.

    The first token (or ``list of X`` phrase) is the type; remaining tokens
    are modifiers. Unknown modifier tokens are ignored.

    Examples:
        - "text required" -> text, [REQUIRED]
        - "number default: 0" -> number, [DefaultModifier("0")]
        - "list of Comment" -> list of model Comment
    """
    tokens = definition.split()
    field_type, i = parse_field_type(tokens, 0)

    modifiers: list[ir.FieldModifier | ir.DefaultModifier] = []
    default_value: str | None = None

    while i < len(tokens):
        token = tokens[i]
        if token in FLAG_MODIFIERS:
            modifiers.append(FLAG_MODIFIERS[token])
            i += 1
        elif token == DEFAULT_TOKEN:
            # default: VALUE
            if i + 1 < len(tokens):
                default_value = tokens[i + 1]
                modifiers.append(ir.DefaultModifier(value=default_value))
                i += 2
            else:
                i += 1
        elif token.startswith(DEFAULT_TOKEN):
            # default:VALUE
            default_value = token[len(DEFAULT_TOKEN) :]
            modifiers.append(ir.DefaultModifier(value=default_value))
            i += 1
        else:
            i += 1

    return ir.FieldSpec(
        name=name,
        type=field_type,
        modifiers=modifiers,
        default_value=default_value,
    )


def parse_field_type(tokens: list[str], i: int) -> tuple[ir.FieldType, int]:
    """
    Parse a field type starting at ``tokens[i]``.

    Returns:
        Tuple of (field type, index of the first token after the type)
    """
    token = tokens[i]

    # list of X (X may itself be a list type)
    if token == "list" and i + 2 < len(tokens) and tokens[i + 1] == "of":
        item, end = parse_field_type(tokens, i + 2)
        return ir.FieldType.list_of(item), end

    if token in PRIMITIVE_TYPES:
        return ir.FieldType.of_primitive(PRIMITIVE_TYPES[token]), i + 1

    return ir.FieldType.reference(token), i + 1
