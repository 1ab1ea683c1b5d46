"""
APML Parser Package.

This package provides a modular, line-based parser for APML.
The parser is built using mixins to separate parsing logic by construct type,
making it easier to maintain and extend.

The main exports are:
- Parser: The complete parser class
- parse_apml: Convenience function to parse APML text

Usage:
    from apml.core.dsl_parser_impl import parse_apml

    document = parse_apml(text)
"""

import logging
from pathlib import Path

from .. import ir
from .base import BaseParser
from .computed import ComputedParserMixin
from .data import DataParserMixin
from .interface import InterfaceParserMixin
from .toplevel import TopLevelParserMixin

logger = logging.getLogger(__name__)

TOP_LEVEL_KEYWORDS = {kind.value: kind for kind in ir.DeclarationKind}


class Parser(
    BaseParser,
    TopLevelParserMixin,
    DataParserMixin,
    InterfaceParserMixin,
    ComputedParserMixin,
):
    """
    Complete APML Parser.

    Each mixin provides parsing for a specific construct type:

    - TopLevelParserMixin: app, logic, and body-skipped constructs
    - DataParserMixin: data models, field types and modifiers
    - InterfaceParserMixin: interfaces and the recursive display tree
    - ComputedParserMixin: inline and block computed values

    A Parser instance holds a cursor and must not be shared between
    concurrent callers; create one per parse.
    """

    def parse(self) -> ir.Document:
        """
        Parse the whole input, top to bottom, in a single pass.

        Returns:
            Document with all parsed declarations

        Raises:
            ParseError: On a malformed header; no partial document is returned
        """
        app: ir.AppDeclaration | None = None
        data: list[ir.DataModel] = []
        interfaces: list[ir.InterfaceSection] = []
        logic: list[ir.LogicSection] = []
        computed: list[ir.ComputedValue] = []
        state_machines: list[ir.StateMachine] = []
        realtime: list[ir.RealtimeConnection] = []
        external: list[ir.ExternalIntegration] = []
        integrations: ir.IntegrationsSection | None = None
        deploy: ir.DeployConfig | None = None
        order: list[tuple[ir.DeclarationKind, str]] = []

        while self.cursor.has_more():
            info = self.current_info()

            if not info.is_significant:
                self.advance()
                continue

            kind = TOP_LEVEL_KEYWORDS.get(info.keyword or "") if info.indent == 0 else None

            if kind is None:
                # Unknown construct (or stray indented line): skip it and its body
                self.skip_unknown(info)
                continue

            if kind == ir.DeclarationKind.APP:
                app = self.parse_app()
                order.append((kind, app.name))

            elif kind == ir.DeclarationKind.DATA:
                model = self.parse_data_model()
                data.append(model)
                order.append((kind, model.name))

            elif kind == ir.DeclarationKind.INTERFACE:
                interface = self.parse_interface()
                interfaces.append(interface)
                order.append((kind, interface.name))

            elif kind == ir.DeclarationKind.COMPUTED:
                value = self.parse_computed()
                computed.append(value)
                order.append((kind, value.name))

            elif kind == ir.DeclarationKind.LOGIC:
                section = self.parse_logic()
                logic.append(section)
                order.append((kind, section.name))

            elif kind == ir.DeclarationKind.STATE_MACHINE:
                name = self.parse_named_shallow()
                state_machines.append(ir.StateMachine(name=name))
                order.append((kind, name))

            elif kind == ir.DeclarationKind.REALTIME:
                name = self.parse_named_shallow()
                realtime.append(ir.RealtimeConnection(name=name))
                order.append((kind, name))

            elif kind == ir.DeclarationKind.EXTERNAL:
                name = self.parse_named_shallow()
                external.append(ir.ExternalIntegration(name=name))
                order.append((kind, name))

            elif kind == ir.DeclarationKind.INTEGRATIONS:
                integrations = self.parse_integrations()
                order.append((kind, kind.value))

            elif kind == ir.DeclarationKind.DEPLOY:
                deploy = self.parse_deploy()
                order.append((kind, kind.value))

        return ir.Document(
            app=app,
            data=data,
            interfaces=interfaces,
            logic=logic,
            computed=computed,
            state_machines=state_machines,
            realtime=realtime,
            external=external,
            integrations=integrations,
            deploy=deploy,
            declaration_order=order,
        )


def parse_apml(text: str, file: Path | None = None) -> ir.Document:
    """
    Parse APML source text into a Document.

    Args:
        text: Source text with ``\\n`` line separators
        file: Source file path, used only in error messages

    Returns:
        Parsed Document

    Raises:
        ParseError: If a recognised construct has a malformed header
    """
    document = Parser(text, file).parse()
    logger.debug(
        "Parsed %s: %d data, %d interfaces, %d computed, %d logic",
        file or "<input>",
        len(document.data),
        len(document.interfaces),
        len(document.computed),
        len(document.logic),
    )
    return document


__all__ = ["Parser", "parse_apml"]
