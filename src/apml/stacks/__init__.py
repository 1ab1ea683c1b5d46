"""
Backend plugin system for APML.

Backends turn a parsed Document into named artifacts (a relative path plus
text content). How many artifacts a backend produces per construct is up to
the backend.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..core import ir
from ..core.errors import BackendError
from .base import GeneratedFile

# Built-in backends: name -> module path of a package exposing `Backend` subclasses
BUILTIN_BACKENDS = {
    "vue": "apml.stacks.vue",
}


@dataclass
class BackendCapabilities:
    """
    Describes what a backend can generate.

    Used for introspection and CLI help text.
    """

    name: str
    description: str
    output_formats: list[str]  # e.g., ["vue", "ts"]


class Backend(ABC):
    """
    Abstract base class for all APML backends.

    Minimal interface for easy extensibility.
    """

    @abstractmethod
    def generate(self, document: ir.Document, **options: Any) -> list[GeneratedFile]:
        """
        Generate artifacts from a Document.

        Args:
            document: Parsed APML document
            **options: Backend-specific options passed from CLI

        Returns:
            Generated files with paths relative to the output directory

        Raises:
            BackendError: If generation fails
        """
        pass

    def get_capabilities(self) -> BackendCapabilities:
        """
        Get backend capabilities for introspection.

        Override to provide backend metadata.
        """
        return BackendCapabilities(
            name=self.__class__.__name__,
            description="No description provided",
            output_formats=["unknown"],
        )


class BackendRegistry:
    """
    Registry for backend plugins.

    Supports:
    - Manual registration via register()
    - Loading of the built-in backends
    - Lookup by name
    """

    def __init__(self) -> None:
        self._backends: dict[str, type[Backend]] = {}

    def register(self, name: str, backend_class: type[Backend]) -> None:
        """
        Register a backend class.

        Args:
            name: Backend name (used in CLI: --stack <name>)
            backend_class: Backend class (must extend Backend)

        Raises:
            BackendError: If name already registered or class invalid
        """
        if name in self._backends:
            raise BackendError(
                f"Backend '{name}' is already registered. Cannot register {backend_class.__name__}."
            )

        if not issubclass(backend_class, Backend):
            raise BackendError(f"Backend class {backend_class.__name__} must extend Backend")

        self._backends[name] = backend_class

    def get(self, name: str) -> Backend:
        """
        Get a backend instance by name.

        Raises:
            BackendError: If backend not found
        """
        if name not in self._backends:
            available = self.list_backends()
            raise BackendError(f"Backend '{name}' not found. Available backends: {available}")

        return self._backends[name]()

    def list_backends(self) -> list[str]:
        """List all registered backend names."""
        return sorted(self._backends)

    def load_builtins(self) -> None:
        """Import and register the built-in backends."""
        import importlib
        import inspect

        for name, module_path in BUILTIN_BACKENDS.items():
            if name in self._backends:
                continue
            module = importlib.import_module(module_path)
            for _attr, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, Backend) and obj is not Backend:
                    self.register(name, obj)
                    break


# Global registry instance
_registry: BackendRegistry | None = None


def get_registry() -> BackendRegistry:
    """
    Get the global backend registry.

    Loads the built-in backends on first call.
    """
    global _registry
    if _registry is None:
        _registry = BackendRegistry()
        _registry.load_builtins()
    return _registry


def register_backend(name: str, backend_class: type[Backend]) -> None:
    """Register a backend in the global registry."""
    get_registry().register(name, backend_class)


def get_backend(name: str) -> Backend:
    """
    Get a backend instance by name.

    Raises:
        BackendError: If backend not found
    """
    return get_registry().get(name)


def list_backends() -> list[str]:
    """List all available backend names."""
    return get_registry().list_backends()


__all__ = [
    "Backend",
    "BackendCapabilities",
    "BackendRegistry",
    "BackendError",
    "GeneratedFile",
    "get_registry",
    "register_backend",
    "get_backend",
    "list_backends",
]
