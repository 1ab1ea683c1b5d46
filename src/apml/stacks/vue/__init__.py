"""
Vue 3 backend.

Generates a TypeScript model file, a Pinia store and one single-file
component per interface.
"""

import logging
from typing import Any

from ...core import ir
from .. import Backend, BackendCapabilities
from ..base import CompositeGenerator, GeneratedFile, Generator
from .components import ComponentsGenerator
from .store import StoreGenerator
from .types import TypesGenerator

logger = logging.getLogger(__name__)


class VueGenerator(CompositeGenerator):
    """Runs the type, store and component generators in that order."""

    def get_generators(self) -> list[Generator]:
        return [
            TypesGenerator(self.document),
            StoreGenerator(self.document),
            ComponentsGenerator(self.document),
        ]


class VueBackend(Backend):
    """Vue 3 + Pinia + TypeScript backend."""

    def generate(self, document: ir.Document, **options: Any) -> list[GeneratedFile]:
        result = VueGenerator(document).generate()
        for warning in result.warnings:
            logger.warning(warning)
        logger.debug("Vue backend produced %d files", len(result.files))
        return result.files

    def get_capabilities(self) -> BackendCapabilities:
        return BackendCapabilities(
            name="vue",
            description="Vue 3 single-file components with a Pinia store and TypeScript types",
            output_formats=["vue", "ts"],
        )


__all__ = ["VueBackend", "VueGenerator"]
