"""
Base generator classes for modular code generation.

Generators build specific artifacts from a Document:
- TypesGenerator: model type declarations
- StoreGenerator: state store
- ComponentsGenerator: one component per interface

Generators never write to disk. They return GeneratedFile values and the
caller decides where to put them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ...core import ir


@dataclass(frozen=True)
class GeneratedFile:
    """
    A generated artifact.

    Attributes:
        path: Path relative to the output directory (forward slashes)
        content: File content
    """

    path: str
    content: str


@dataclass
class GeneratorResult:
    """
    Result from a generator execution.

    Attributes:
        files: Artifacts produced
        warnings: Any warnings to display to user
    """

    files: list[GeneratedFile] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_file(self, path: str, content: str) -> None:
        """Record a generated file."""
        self.files.append(GeneratedFile(path=path, content=content))

    def add_warning(self, warning: str) -> None:
        """Record a warning."""
        self.warnings.append(warning)

    def merge(self, other: "GeneratorResult") -> None:
        """Merge another result into this one."""
        self.files.extend(other.files)
        self.warnings.extend(other.warnings)


class Generator(ABC):
    """
    Base class for all generators.

    Example:
        class TypesGenerator(Generator):
            def generate(self) -> GeneratorResult:
                result = GeneratorResult()
                result.add_file("src/types/models.ts", self._build_types())
                return result
    """

    def __init__(self, document: ir.Document):
        """
        Initialize generator.

        Args:
            document: Parsed APML document
        """
        self.document = document

    @abstractmethod
    def generate(self) -> GeneratorResult:
        """
        Generate artifacts.

        Returns:
            GeneratorResult with the files produced
        """
        pass


class CompositeGenerator(Generator):
    """
    Generator that runs multiple sub-generators.

    Useful for organizing related generators together.
    """

    @abstractmethod
    def get_generators(self) -> list[Generator]:
        """
        Get the list of sub-generators to run.

        Returns:
            List of Generator instances
        """
        pass

    def generate(self) -> GeneratorResult:
        """
        Run all sub-generators and merge results.

        Returns:
            Combined GeneratorResult from all sub-generators
        """
        combined = GeneratorResult()
        for generator in self.get_generators():
            combined.merge(generator.generate())
        return combined
