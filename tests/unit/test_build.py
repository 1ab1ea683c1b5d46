"""Tests for writing generated artifacts."""

from pathlib import Path

import pytest

from apml.core.build import compile_file, write_artifacts
from apml.core.errors import BackendError, ParseError
from apml.stacks.base import GeneratedFile


class TestWriteArtifacts:
    """Tests for write_artifacts."""

    def test_creates_parent_directories(self, tmp_path: Path):
        out = tmp_path / "out"
        written = write_artifacts(
            [
                GeneratedFile(path="src/a/b.ts", content="export {};"),
                GeneratedFile(path="README.txt", content="hi"),
            ],
            out,
        )
        assert written == [(out / "src/a/b.ts").resolve(), (out / "README.txt").resolve()]
        assert (out / "src" / "a" / "b.ts").read_text() == "export {};"

    def test_overwrites_existing(self, tmp_path: Path):
        target = tmp_path / "x.txt"
        target.write_text("old")
        write_artifacts([GeneratedFile(path="x.txt", content="new")], tmp_path)
        assert target.read_text() == "new"

    def test_rejects_escaping_paths(self, tmp_path: Path):
        with pytest.raises(BackendError):
            write_artifacts([GeneratedFile(path="../evil.txt", content="")], tmp_path / "out")
        assert not (tmp_path / "evil.txt").exists()


class TestCompileFile:
    """Tests for the parse, generate, write pipeline."""

    def test_compile_feed(self, write_apml, feed_source, tmp_path: Path):
        source = write_apml(feed_source)
        out = tmp_path / "build"

        written = compile_file(source, out)

        names = sorted(p.relative_to(out.resolve()).as_posix() for p in written)
        assert names == [
            "src/components/Timeline.vue",
            "src/stores/app.ts",
            "src/types/models.ts",
        ]

    def test_parse_error_writes_nothing(self, write_apml, tmp_path: Path):
        source = write_apml("data :\n")
        out = tmp_path / "build"
        with pytest.raises(ParseError):
            compile_file(source, out)
        assert not out.exists()

    def test_unknown_stack(self, write_apml, tmp_path: Path):
        source = write_apml("data A:\n  x: text\n")
        with pytest.raises(BackendError):
            compile_file(source, tmp_path / "build", stack="react")
