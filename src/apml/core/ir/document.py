"""
Document-level types for APML IR.

The Document is the root of the tree produced by a single parse. Besides the
fully parsed sections it carries placeholders for constructs that are
recognised at the top level but whose bodies are only consumed.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .computed import ComputedValue
from .fields import DataModel
from .interfaces import InterfaceSection


class DeclarationKind(StrEnum):
    """Top-level construct kinds."""

    APP = "app"
    DATA = "data"
    INTERFACE = "interface"
    COMPUTED = "computed"
    LOGIC = "logic"
    STATE_MACHINE = "state_machine"
    REALTIME = "realtime"
    EXTERNAL = "external"
    INTEGRATIONS = "integrations"
    DEPLOY = "deploy"


class AppDeclaration(BaseModel):
    """
    The ``app <Name>:`` declaration.

        app feed:
          title: "X Feed"
          version: 1.0.0
          apml_version: 2.0.0-alpha.7
    """

    name: str
    title: str | None = None
    description: str | None = None
    version: str | None = None
    apml_version: str | None = None

    model_config = ConfigDict(frozen=True)


class LogicSection(BaseModel):
    """
    A ``logic <Name>:`` declaration.

    The body is consumed but not interpreted, so the collections stay empty.
    """

    name: str
    processes: list[str] = Field(default_factory=list)
    calculations: list[str] = Field(default_factory=list)
    validations: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class StateMachine(BaseModel):
    """A ``state_machine <Name>:`` declaration (body not parsed)."""

    name: str

    model_config = ConfigDict(frozen=True)


class RealtimeConnection(BaseModel):
    """A ``realtime <Name>:`` declaration (body not parsed)."""

    name: str

    model_config = ConfigDict(frozen=True)


class ExternalIntegration(BaseModel):
    """An ``external <Name>:`` declaration (body not parsed)."""

    name: str

    model_config = ConfigDict(frozen=True)


class IntegrationsSection(BaseModel):
    """The ``integrations:`` block; only the names of its direct sub-sections are kept."""

    sections: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DeployConfig(BaseModel):
    """The ``deploy:`` block; keeps the platform and the environment names."""

    platform: str | None = None
    environments: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Document(BaseModel):
    """
    Root of a parsed APML source.

    Each section list preserves declaration order. Names are not required to be
    unique and references between sections are not resolved.
    """

    app: AppDeclaration | None = None
    data: list[DataModel] = Field(default_factory=list)
    interfaces: list[InterfaceSection] = Field(default_factory=list)
    logic: list[LogicSection] = Field(default_factory=list)
    computed: list[ComputedValue] = Field(default_factory=list)
    state_machines: list[StateMachine] = Field(default_factory=list)
    realtime: list[RealtimeConnection] = Field(default_factory=list)
    external: list[ExternalIntegration] = Field(default_factory=list)
    integrations: IntegrationsSection | None = None
    deploy: DeployConfig | None = None
    declaration_order: list[tuple[DeclarationKind, str]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_data_model(self, name: str) -> DataModel | None:
        for model in self.data:
            if model.name == name:
                return model
        return None

    @property
    def is_empty(self) -> bool:
        return not self.declaration_order
