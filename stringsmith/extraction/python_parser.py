"""Scanner for gettext calls in Python source files."""

import ast
import os
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from ..config import config
from ..errors import ParseError
from ..models.localized_string import LocalizedString
from ..validation.placeholder_validator import PlaceholderValidator
from .parser import Parser

TRANSLATOR_COMMENT_TAG = "Translators:"


def _string_constant(node: ast.AST) -> Optional[str]:
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return node.value
    return None


def _call_name(node: ast.Call) -> Optional[str]:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


class PythonSourceParser(Parser):
    """
    Extracts literal strings passed to gettext-style functions.

    Rules:
    - _("text"), gettext("text"), N_("text") -> singular string
    - ngettext("one", "many", n) -> singular + plural string

    Only constant string literals are extracted; other calls are logged and
    skipped. A "# Translators:" comment block directly above the call
    becomes the developer comment.
    """

    supported_extensions = (".py",)

    def __init__(self, *args, keywords: Optional[Dict[str, str]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.keywords = keywords or config.PYTHON_KEYWORDS
        self.placeholder_validator = PlaceholderValidator()

    def parse_path(self, path: Path) -> Iterator[LocalizedString]:
        self.log(1, f"Scanning Python source: {path}")
        source = self.read_text(path)

        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParseError(path, f"line {e.lineno}: {e.msg}") from e
        except ValueError as e:
            # Null bytes are reported as ValueError before Python 3.12
            raise ParseError(path, str(e)) from e

        lines = source.splitlines()
        calls = [node for node in ast.walk(tree) if isinstance(node, ast.Call)]
        calls.sort(key=lambda node: (node.lineno, node.col_offset))

        for node in calls:
            kind = self.keywords.get(_call_name(node))
            if kind is None:
                continue

            localized = self._parse_call(node, kind, path, lines)
            if localized is None:
                self.log(1, f"Skipping non-literal {_call_name(node)}() call at {path}:{node.lineno}")
                continue

            if not localized.untranslated_singular_value:
                self.log(1, f"Skipping empty {_call_name(node)}() string at {path}:{node.lineno}")
                continue

            self.log(2, f"Found string: {localized.untranslated_singular_value}")
            yield localized

    def _parse_call(
        self, node: ast.Call, kind: str, path: Path, lines: List[str]
    ) -> Optional[LocalizedString]:
        """Build a record from a gettext call, or None if its arguments are not literals."""
        singular = _string_constant(node.args[0]) if node.args else None
        if singular is None:
            return None

        plural = None
        if kind == "plural":
            plural = _string_constant(node.args[1]) if len(node.args) > 1 else None
            if plural is None:
                return None

        return LocalizedString(
            untranslated_singular_value=singular,
            untranslated_plural_value=plural,
            developer_comments=self._translator_comment(lines, node.lineno),
            references=[f"{os.path.abspath(path)}:{node.lineno}"],
            string_format_hint=self.placeholder_validator.format_hint(singular),
        )

    def _translator_comment(self, lines: List[str], lineno: int) -> Optional[str]:
        """Collect the comment block directly above a line if it addresses translators."""
        block = []
        index = lineno - 2
        while index >= 0 and lines[index].strip().startswith("#"):
            block.insert(0, lines[index].strip().lstrip("#").strip())
            index -= 1

        if not block or not block[0].startswith(TRANSLATOR_COMMENT_TAG):
            return None

        block[0] = block[0][len(TRANSLATOR_COMMENT_TAG):].strip()
        return "\n".join(line for line in block if line) or None
