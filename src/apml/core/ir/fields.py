"""
Data model types for APML IR.

This module contains the field type system (primitive kinds, list-of, and
model references), field modifiers, and data model specifications.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class PrimitiveType(StrEnum):
    """Primitive field types in APML."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    TIMESTAMP = "timestamp"
    EMAIL = "email"
    URL = "url"
    UNIQUE_ID = "unique_id"
    MONEY = "money"
    PERCENTAGE = "percentage"


class FieldTypeKind(StrEnum):
    """Discriminator for the FieldType tagged union."""

    PRIMITIVE = "primitive"
    LIST = "list"
    MODEL = "model"


class FieldType(BaseModel):
    """
    Represents a field type.

    Exactly one of ``primitive``, ``item`` or ``model`` is set, matching ``kind``.

    Examples:
        - text: FieldType(kind=PRIMITIVE, primitive=TEXT)
        - list of Post: FieldType(kind=LIST, item=FieldType(kind=MODEL, model="Post"))
        - Author: FieldType(kind=MODEL, model="Author")
    """

    kind: FieldTypeKind
    primitive: PrimitiveType | None = None
    item: FieldType | None = None
    model: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of_primitive(cls, primitive: PrimitiveType) -> FieldType:
        return cls(kind=FieldTypeKind.PRIMITIVE, primitive=primitive)

    @classmethod
    def list_of(cls, item: FieldType) -> FieldType:
        return cls(kind=FieldTypeKind.LIST, item=item)

    @classmethod
    def reference(cls, name: str) -> FieldType:
        return cls(kind=FieldTypeKind.MODEL, model=name)

    def __str__(self) -> str:
        if self.kind == FieldTypeKind.LIST:
            return f"list of {self.item}"
        if self.kind == FieldTypeKind.MODEL:
            return str(self.model)
        return str(self.primitive)

    @property
    def referenced_model(self) -> str | None:
        """Model name referenced by this type, looking through list wrappers."""
        if self.kind == FieldTypeKind.LIST and self.item is not None:
            return self.item.referenced_model
        return self.model


FieldType.model_rebuild()


class FieldModifier(StrEnum):
    """Flag modifiers that can be applied to fields."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    UNIQUE = "unique"
    AUTO = "auto"


class DefaultModifier(BaseModel):
    """Default-value modifier (``default: VALUE`` or ``default:VALUE``)."""

    value: str

    model_config = ConfigDict(frozen=True)


class FieldSpec(BaseModel):
    """
    Specification for a single field in a data model.

    Attributes:
        name: Field identifier
        type: Field type
        modifiers: Modifiers in encounter order
        default_value: Raw default value, if a default modifier was given
    """

    name: str
    type: FieldType
    modifiers: list[FieldModifier | DefaultModifier] = Field(default_factory=list)
    default_value: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def flags(self) -> set[FieldModifier]:
        return {m for m in self.modifiers if isinstance(m, FieldModifier)}

    @property
    def is_required(self) -> bool:
        return FieldModifier.REQUIRED in self.flags

    @property
    def is_optional(self) -> bool:
        return FieldModifier.OPTIONAL in self.flags


class DataModel(BaseModel):
    """
    A ``data <Name>:`` declaration.

    Attributes:
        name: Model name
        fields: Fields in declaration order (may be empty)
        relationships: Raw lines of the ``relationships:`` section, unparsed
    """

    name: str
    fields: list[FieldSpec] = Field(default_factory=list)
    relationships: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_field(self, name: str) -> FieldSpec | None:
        for field in self.fields:
            if field.name == name:
                return field
        return None
