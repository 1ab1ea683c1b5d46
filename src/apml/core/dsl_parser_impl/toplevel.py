"""
Top-level declaration parsing for APML.

Handles the ``app`` declaration, ``logic`` sections, and the constructs that
are recognised but only consumed: state machines, realtime connections,
external integrations, and the ``integrations``/``deploy`` blocks.
"""

import re
from typing import TYPE_CHECKING, Any

from .. import ir
from ..lines import LineKind

APP_HEADER_RE = re.compile(r"^app\s+(\w+)\s*:")
LOGIC_HEADER_RE = re.compile(r"^logic\s+(\w+)\s*:")
NAMED_HEADER_RE = re.compile(r"^(\w+)\s+(\w+)\s*:")
UNNAMED_HEADER_RE = re.compile(r"^(\w+)\s*:\s*$")

APP_PROPERTIES = frozenset({"title", "description", "version", "apml_version"})


def unquote(value: str) -> str:
    """Strip one pair of matching surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


class TopLevelParserMixin:
    """
    Mixin providing app, logic, and shallow top-level parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        advance: Any
        error: Any
        current_info: Any
        scoped_lines: Any
        skip_block: Any

    def parse_app(self) -> ir.AppDeclaration:
        """Parse ``app <Name>:`` and its metadata properties."""
        header = self.current_info()
        match = APP_HEADER_RE.match(header.text)
        if not match:
            self.error(f"Invalid app declaration: '{header.text}'", header)

        name = match.group(1)
        self.advance()

        metadata: dict[str, str] = {}
        for info in self.scoped_lines(header.indent):
            if info.kind == LineKind.PROPERTY and info.key in APP_PROPERTIES and info.value:
                metadata[info.key] = unquote(info.value)

        return ir.AppDeclaration(name=name, **metadata)

    def parse_logic(self) -> ir.LogicSection:
        """Parse ``logic <Name>:``; the body is consumed, not interpreted."""
        header = self.current_info()
        match = LOGIC_HEADER_RE.match(header.text)
        if not match:
            self.error(f"Invalid logic declaration: '{header.text}'", header)

        name = match.group(1)
        self.advance()
        self.skip_block(header.indent)

        return ir.LogicSection(name=name)

    def parse_named_shallow(self) -> str:
        """
        Parse a ``<keyword> <Name>:`` header and consume its body.

        Returns:
            The declared name
        """
        header = self.current_info()
        match = NAMED_HEADER_RE.match(header.text)
        if not match:
            self.error(f"Invalid {header.keyword} declaration: '{header.text}'", header)

        self.advance()
        self.skip_block(header.indent)
        return match.group(2)

    def parse_integrations(self) -> ir.IntegrationsSection:
        """Parse ``integrations:``, keeping the names of its direct sub-sections."""
        header = self.expect_unnamed_header()

        sections: list[str] = []
        for info in self.scoped_lines(header.indent):
            if info.key is not None:
                sections.append(info.key)
            elif info.kind == LineKind.HEADER and info.keyword:
                sections.append(info.keyword)
            self.advance()
            self.skip_block(info.indent)

        return ir.IntegrationsSection(sections=sections)

    def parse_deploy(self) -> ir.DeployConfig:
        """Parse ``deploy:``, keeping the platform and environment names."""
        header = self.expect_unnamed_header()

        platform: str | None = None
        environments: list[str] = []
        for info in self.scoped_lines(header.indent):
            self.advance()
            if info.key == "platform" and info.value:
                platform = unquote(info.value)
            elif info.key == "environments":
                for env in self.scoped_lines(info.indent):
                    if env.key is not None:
                        environments.append(env.key)
                    self.advance()
                    self.skip_block(env.indent)
            else:
                self.skip_block(info.indent)

        return ir.DeployConfig(platform=platform, environments=environments)

    def expect_unnamed_header(self) -> Any:
        header = self.current_info()
        if not UNNAMED_HEADER_RE.match(header.text):
            self.error(f"Invalid {header.keyword} declaration: '{header.text}'", header)
        self.advance()
        return header
