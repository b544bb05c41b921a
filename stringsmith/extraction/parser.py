"""Base class for source parsers."""

from pathlib import Path
from typing import ClassVar, Iterator, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from ..errors import ParseError
from ..models.localized_string import LocalizedString


class Parser:
    """
    Turns one or more input files into LocalizedString records.

    Subclasses implement ``parse_path``; ``parse`` is a generator, so every
    call walks the registered inputs again from the start.
    """

    supported_extensions: ClassVar[Tuple[str, ...]] = ()

    def __init__(
        self,
        source_root_path: Optional[str] = None,
        log_level: int = 0,
        console: Optional[Console] = None,
    ):
        self.source_root_path = source_root_path
        self.log_level = log_level
        self.console = console or Console(stderr=True)
        self.paths: List[Path] = []

    @classmethod
    def supports(cls, path) -> bool:
        """Check if this parser handles the given file."""
        return Path(path).suffix.lower() in cls.supported_extensions

    def add(self, path) -> None:
        """Register an input file."""
        self.paths.append(Path(path))

    def parse(self) -> Iterator[LocalizedString]:
        """Yield records from every registered input, in registration order."""
        for path in self.paths:
            yield from self.parse_path(path)

    def parse_path(self, path: Path) -> Iterator[LocalizedString]:
        raise NotImplementedError

    def log(self, level: int, message: str) -> None:
        """Print a diagnostic line when the log level is high enough."""
        if self.log_level >= level:
            self.console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)

    def read_text(self, path: Path) -> str:
        """Read an input file as UTF-8, letting I/O errors propagate."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise ParseError(path, f"not valid UTF-8: {e}") from e
