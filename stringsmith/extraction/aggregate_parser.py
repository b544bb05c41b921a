"""Parser that combines several format parsers into one deduplicated stream."""

import os
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Type


from ..errors import UnsupportedFormatError
from ..models.localized_string import LocalizedString, StringKey
from .android_parser import AndroidResourceParser
from .parser import Parser
from .po_parser import PoParser
from .python_parser import PythonSourceParser

PARSER_TYPES: List[Type[Parser]] = [PoParser, AndroidResourceParser, PythonSourceParser]

REFERENCE_LINE_PATTERN = re.compile(r"^(?P<path>.*?)(?P<line>:\d+)?$")


def relativize_reference(reference: str, source_root_path: Optional[str]) -> str:
    """
    Make an absolute file:line reference relative to the source root.

    Relative references, references outside the root, and any reference
    when no root is set are returned unchanged.
    """
    if not source_root_path:
        return reference

    match = REFERENCE_LINE_PATTERN.match(reference)
    path, line = match.group("path"), match.group("line") or ""
    if not os.path.isabs(path):
        return reference

    root = os.path.abspath(source_root_path)
    absolute = os.path.abspath(path)
    if os.path.commonpath([root, absolute]) != root:
        return reference

    relative = Path(os.path.relpath(absolute, root)).as_posix()
    return f"{relative}{line}"


class AggregateParser(Parser):
    """
    Dispatches inputs to per-format parsers and merges their output.

    Records sharing an untranslated singular/plural pair are merged: the
    first sighting keeps its content and every sighting's references are
    added to it.
    """

    def __init__(self, *args, parser_types: Optional[List[Type[Parser]]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.parser_types = parser_types or PARSER_TYPES
        self.parsers: List[Parser] = []

    def supports_path(self, path) -> bool:
        """Check if any registered parser type handles the given file."""
        return any(parser_type.supports(path) for parser_type in self.parser_types)

    def add(self, path) -> None:
        """Register an input with the parser for its format."""
        for parser_type in self.parser_types:
            if parser_type.supports(path):
                parser = parser_type(
                    source_root_path=self.source_root_path,
                    log_level=self.log_level,
                    console=self.console,
                )
                parser.add(path)
                self.parsers.append(parser)
                self.paths.append(Path(path))
                return

        raise UnsupportedFormatError(path)

    def parse(self) -> Iterator[LocalizedString]:
        """Yield deduplicated records from every parser, in registration order."""
        strings: Dict[StringKey, LocalizedString] = {}

        for parser in self.parsers:
            for localized in parser.parse():
                localized.references = [
                    relativize_reference(reference, self.source_root_path)
                    for reference in localized.references
                ]

                existing = strings.get(localized.key)
                if existing is None:
                    strings[localized.key] = localized
                else:
                    existing.merge_references(localized)

        yield from strings.values()
