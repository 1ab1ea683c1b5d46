"""
Base infrastructure for modular backends.

Provides:
- Base generator classes
- Common utilities
"""

from .generator import CompositeGenerator, GeneratedFile, Generator, GeneratorResult

__all__ = [
    "CompositeGenerator",
    "GeneratedFile",
    "Generator",
    "GeneratorResult",
]
