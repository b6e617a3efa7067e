"""Sinks that persist rendered build scripts."""

from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.rule import Rule

from gradle_poet.console import script_console
from gradle_poet.logging_config import get_logger

logger = get_logger(__name__)


class FileWriter(ABC):
    """Abstract destination for generated files.

    Writers own all persistence concerns. Generators hand over the full
    text and do not catch or retry on failure.
    """

    @abstractmethod
    def write_to_file(self, content: str, path: Path) -> None:
        """Persist ``content`` under ``path``.

        Args:
            content: Complete file content
            path: Destination path, absolute or relative to the writer's root

        Raises:
            OSError: If the content cannot be written
        """
        pass


class FilesystemWriter(FileWriter):
    """Writes files to disk, creating parent directories as needed."""

    def __init__(self, root: Path | None = None):
        """Initialize the writer.

        Args:
            root: Directory that relative paths are resolved against.
                Defaults to the current working directory.
        """
        self.root = root

    def resolve(self, path: Path) -> Path:
        path = Path(path)
        if self.root is None or path.is_absolute():
            return path
        return self.root / path

    def write_to_file(self, content: str, path: Path) -> None:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {len(content)} characters to {target}")


class ConsoleWriter(FileWriter):
    """Prints files to a console instead of writing them (dry runs)."""

    def __init__(self, console: Console = script_console, show_header: bool = True):
        self.console = console
        self.show_header = show_header

    def write_to_file(self, content: str, path: Path) -> None:
        if self.show_header:
            self.console.print(Rule(str(path), style="dim"))
        # Bypass Rich rendering, which would expand tabs
        self.console.file.write(content + "\n")
        self.console.file.flush()
