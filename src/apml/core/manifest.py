import tomllib
from dataclasses import dataclass, field
from pathlib import Path

SOURCE_SUFFIX = ".apml"


@dataclass
class BuildConfig:
    """Code generation settings."""

    stack: str = "vue"
    output: str = "build"


@dataclass
class ProjectManifest:
    """
    Project manifest loaded from apml.toml.

    Contains project metadata, source paths and build settings.
    """

    name: str
    version: str
    source_paths: list[str] = field(default_factory=lambda: ["."])
    build: BuildConfig = field(default_factory=BuildConfig)


def load_manifest(path: Path) -> ProjectManifest:
    data = tomllib.loads(path.read_text(encoding="utf-8"))

    project = data.get("project", {})
    sources = data.get("sources", {})
    build_data = data.get("build", {})

    build_config = BuildConfig(
        stack=build_data.get("stack", "vue"),
        output=build_data.get("output", "build"),
    )

    return ProjectManifest(
        name=project.get("name", path.parent.name),
        version=project.get("version", "0.1.0"),
        source_paths=sources.get("paths", ["."]),
        build=build_config,
    )


def discover_source_files(root: Path, manifest: ProjectManifest) -> list[Path]:
    """
    Resolve manifest source paths into .apml files.

    Directories are scanned recursively; files are taken as given.
    """
    files: list[Path] = []
    for entry in manifest.source_paths:
        path = (root / entry).resolve()
        if path.is_dir():
            files.extend(sorted(path.rglob(f"*{SOURCE_SUFFIX}")))
        elif path.exists():
            files.append(path)
    return files
