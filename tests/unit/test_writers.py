"""Tests for file writer sinks."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from gradle_poet.writers import ConsoleWriter, FileWriter, FilesystemWriter


class TestFilesystemWriter:
    """Test writing scripts to disk."""

    def test_writes_relative_to_root(self, tmp_path):
        writer = FilesystemWriter(tmp_path)
        writer.write_to_file("android {\n\n}", Path("app/build.gradle"))
        assert (tmp_path / "app" / "build.gradle").read_text(encoding="utf-8") == "android {\n\n}"

    def test_absolute_path_ignores_root(self, tmp_path):
        target = tmp_path / "abs" / "build.gradle"
        FilesystemWriter(tmp_path / "elsewhere").write_to_file("x", target)
        assert target.read_text(encoding="utf-8") == "x"

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "build.gradle"
        target.write_text("old")
        FilesystemWriter().write_to_file("new", target)
        assert target.read_text(encoding="utf-8") == "new"

    def test_write_errors_propagate(self, tmp_path):
        blocker = tmp_path / "app"
        blocker.write_text("not a directory")
        with pytest.raises(OSError):
            FilesystemWriter(tmp_path).write_to_file("x", Path("app/build.gradle"))


class TestConsoleWriter:
    """Test printing scripts instead of writing them."""

    def _console(self) -> tuple[Console, StringIO]:
        buffer = StringIO()
        return Console(file=buffer, width=200, highlight=False, soft_wrap=True), buffer

    def test_prints_content_without_markup(self):
        console, buffer = self._console()
        content = "implementation fileTree(dir: 'libs', include: ['*.jar'])"
        ConsoleWriter(console, show_header=False).write_to_file(content, Path("app/build.gradle"))
        assert buffer.getvalue() == content + "\n"

    def test_tabs_written_verbatim(self):
        console, buffer = self._console()
        ConsoleWriter(console, show_header=False).write_to_file("debug {\n\tdebuggable true\n}", Path("app/build.gradle"))
        assert buffer.getvalue() == "debug {\n\tdebuggable true\n}\n"

    def test_header_names_path(self):
        console, buffer = self._console()
        ConsoleWriter(console).write_to_file("x", Path("app/build.gradle"))
        assert "app/build.gradle" in buffer.getvalue()


class TestFileWriterContract:
    """Test the abstract sink."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            FileWriter()
