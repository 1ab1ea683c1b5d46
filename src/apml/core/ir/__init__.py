"""
APML Intermediate Representation (IR) types.

The IR is the AST produced by the parser and consumed read-only by the
backends. Types are organised into submodules and re-exported here.
"""

# Computed Values
from .computed import (
    ComputedFormat,
    ComputedValue,
)

# Document
from .document import (
    AppDeclaration,
    DeclarationKind,
    DeployConfig,
    Document,
    ExternalIntegration,
    IntegrationsSection,
    LogicSection,
    RealtimeConnection,
    StateMachine,
)

# Data Models
from .fields import (
    DataModel,
    DefaultModifier,
    FieldModifier,
    FieldSpec,
    FieldType,
    FieldTypeKind,
    PrimitiveType,
)

# Interfaces
from .interfaces import (
    ConditionalElement,
    InterfaceSection,
    IterationElement,
    ShowElement,
    UIElement,
    child_elements,
)

__all__ = [
    # Computed Values
    "ComputedFormat",
    "ComputedValue",
    # Document
    "AppDeclaration",
    "DeclarationKind",
    "DeployConfig",
    "Document",
    "ExternalIntegration",
    "IntegrationsSection",
    "LogicSection",
    "RealtimeConnection",
    "StateMachine",
    # Data Models
    "DataModel",
    "DefaultModifier",
    "FieldModifier",
    "FieldSpec",
    "FieldType",
    "FieldTypeKind",
    "PrimitiveType",
    # Interfaces
    "ConditionalElement",
    "InterfaceSection",
    "IterationElement",
    "ShowElement",
    "UIElement",
    "child_elements",
]
