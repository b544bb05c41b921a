"""Base class for catalog generators."""

import hashlib
import sys
from pathlib import Path
from typing import ClassVar, Iterator, List, Optional

from rich.console import Console
from rich.markup import escape

from ..config import config
from ..extraction.parser import Parser
from ..models.localized_string import LocalizedString, ResourceString

STDOUT_PATH = "-"


def resource_id(
    untranslated: str,
    plural_order: int = 0,
    name: Optional[str] = None,
    prefix: Optional[str] = None,
) -> str:
    """
    Build the platform resource id of one translated slot.

    Named strings keep their name for the singular slot and get a _P<n>
    suffix for plural slots. Unnamed strings get a stable id derived from
    the untranslated text.
    """
    if name:
        return name if plural_order == 0 else f"{name}_P{plural_order}"

    digest = hashlib.md5(untranslated.encode("utf-8")).hexdigest()
    return f"{prefix or config.resource_id_prefix}_P{plural_order}_{digest}"


class Generator:
    """
    Buffers localized strings and serializes them to one output artifact.

    Subclasses implement ``render``, which must depend only on the buffer
    so that generating twice yields identical output.
    """

    name: ClassVar[str] = ""

    def __init__(
        self,
        log_level: int = 0,
        console: Optional[Console] = None,
        resource_id_prefix: Optional[str] = None,
    ):
        self.strings: List[LocalizedString] = []
        self.resource_id_prefix = resource_id_prefix or config.resource_id_prefix
        self.log_level = log_level
        self.console = console or Console(stderr=True)

    def add(self, localized: LocalizedString) -> None:
        """Buffer one string; insertion order is output order."""
        self.strings.append(localized)

    def render(self) -> str:
        raise NotImplementedError

    def generate(self, output_path: str) -> None:
        """Write the buffered strings to output_path, or stdout for "-"."""
        self.write_output(self.render(), output_path)

    def reduce(self, master: Parser, retain: Parser) -> None:
        """
        Replace the buffer with the master strings still present in retain.

        Master order is kept. Strings that exist only in retain are not
        added: reduction drops obsolete translations, it never creates new
        entries.
        """
        retained = {localized.untranslated_singular_value for localized in retain.parse()}

        self.strings = [
            localized
            for localized in master.parse()
            if localized.untranslated_singular_value in retained
        ]
        self.log(1, f"Reduced master catalog to {len(self.strings)} strings")

    def resource_strings(self, localized: LocalizedString) -> Iterator[ResourceString]:
        """Fan a localized string out into one resource entry per translated slot."""
        singular = localized.untranslated_singular_value

        for order, translated in enumerate(localized.effective_translated_values()):
            if translated is None or (order == 0 and not singular.strip()):
                continue
            yield ResourceString(
                id=resource_id(singular, order, name=localized.name, prefix=self.resource_id_prefix),
                untranslated=singular,
                translated=translated,
            )

    def log(self, level: int, message: str) -> None:
        """Print a diagnostic line when the log level is high enough."""
        if self.log_level >= level:
            self.console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)

    @staticmethod
    def write_output(content: str, output_path: str) -> None:
        """Write text as UTF-8 to a file, or to stdout for "-"."""
        if output_path == STDOUT_PATH:
            sys.stdout.write(content)
            sys.stdout.flush()
            return

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
