"""TypeScript interfaces for data models."""

from ...core import ir
from ..base import Generator, GeneratorResult

TYPES_PATH = "src/types/models.ts"

PRIMITIVE_TS_TYPES = {
    ir.PrimitiveType.TEXT: "string",
    ir.PrimitiveType.NUMBER: "number",
    ir.PrimitiveType.BOOLEAN: "boolean",
    ir.PrimitiveType.DATE: "Date",
    ir.PrimitiveType.TIMESTAMP: "Date",
    ir.PrimitiveType.EMAIL: "string",
    ir.PrimitiveType.URL: "string",
    ir.PrimitiveType.UNIQUE_ID: "string",
    ir.PrimitiveType.MONEY: "number",
    ir.PrimitiveType.PERCENTAGE: "number",
}


def ts_type(field_type: ir.FieldType) -> str:
    """Map an APML field type onto a TypeScript type."""
    if field_type.kind == ir.FieldTypeKind.LIST and field_type.item is not None:
        return f"{ts_type(field_type.item)}[]"
    if field_type.kind == ir.FieldTypeKind.MODEL and field_type.model:
        return field_type.model
    if field_type.primitive is not None:
        return PRIMITIVE_TS_TYPES[field_type.primitive]
    return "any"


class TypesGenerator(Generator):
    """Generates ``src/types/models.ts`` with one interface per data model."""

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        if not self.document.data:
            return result

        lines = [
            "/**",
            " * Generated TypeScript types from APML data models",
            " * DO NOT EDIT - This file is auto-generated",
            " */",
            "",
        ]
        for model in self.document.data:
            lines.append(f"export interface {model.name} {{")
            for field in model.fields:
                optional = "?" if field.is_optional else ""
                lines.append(f"  {field.name}{optional}: {ts_type(field.type)};")
            lines.append("}")
            lines.append("")

        result.add_file(TYPES_PATH, "\n".join(lines))
        return result
