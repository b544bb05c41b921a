"""Advisory checks over extracted strings."""

from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models.localized_string import LocalizedString
from .placeholder_validator import PlaceholderValidator


@dataclass
class AnalyzerIssue:
    """Represents one advisory finding about a string."""

    severity: str  # error, warning, hint
    message: str
    string: LocalizedString


class StringAnalyzer:
    """
    Flags strings that are likely to cause trouble for translators.

    Checks:
    - Placeholders differ between singular and plural forms
    - Placeholders differ between source and translated values
    - Newline count changed by a translation
    - Leading or trailing whitespace in the source text
    - "..." used instead of an ellipsis character
    - Placeholders without a developer comment explaining them

    The analyzer never changes the strings it is given.
    """

    def __init__(self, console: Optional[Console] = None):
        self.strings: List[LocalizedString] = []
        self.console = console or Console(stderr=True)
        self.placeholder_validator = PlaceholderValidator()

    def add(self, localized: LocalizedString) -> None:
        self.strings.append(localized)

    def analyze(self) -> List[AnalyzerIssue]:
        """Run every check, print a report and return the findings."""
        issues: List[AnalyzerIssue] = []
        for localized in self.strings:
            issues.extend(self.check(localized))

        self._print_report(issues)
        return issues

    def check(self, localized: LocalizedString) -> List[AnalyzerIssue]:
        """Run every check against a single string."""
        issues = []
        singular = localized.untranslated_singular_value
        plural = localized.untranslated_plural_value

        def flag(severity: str, message: str) -> None:
            issues.append(AnalyzerIssue(severity=severity, message=message, string=localized))

        if plural is not None:
            is_valid, _ = self.placeholder_validator.validate(singular, plural)
            if not is_valid:
                flag("error", "Singular and plural placeholders differ")

        if localized.has_translations:
            sources = [singular] + [plural or singular] * (len(localized.translated_values) - 1)
            for source, translated in zip(sources, localized.translated_values):
                is_valid, ph_issues = self.placeholder_validator.validate(source, translated)
                for issue in ph_issues:
                    flag("error" if issue.severity == "critical" else "warning", issue.message)

                source_newlines = source.count("\n")
                trans_newlines = translated.count("\n")
                if source_newlines != trans_newlines:
                    flag("warning", f"Newline count changed: {source_newlines} → {trans_newlines}")

        if singular != singular.strip():
            flag("warning", "Leading or trailing whitespace in source text")

        if "..." in singular:
            flag("hint", "Use an ellipsis character (…) instead of three periods")

        if self.placeholder_validator.has_placeholders(singular) and not localized.developer_comments:
            flag("hint", "Placeholders without a developer comment describing them")

        return issues

    def _print_report(self, issues: List[AnalyzerIssue]) -> None:
        """Print the findings as a table."""
        if not issues:
            self.console.print(f"[green]Analyzed {len(self.strings)} strings, no issues found[/green]")
            return

        table = Table(title=f"String Analysis ({len(issues)} issues in {len(self.strings)} strings)")
        table.add_column("Severity", justify="center", width=8)
        table.add_column("String", max_width=40)
        table.add_column("Issue", max_width=50)
        table.add_column("Reference", style="dim", max_width=30)

        colors = {"error": "red", "warning": "yellow", "hint": "cyan"}
        for issue in issues:
            color = colors.get(issue.severity, "white")
            table.add_row(
                f"[{color}]{issue.severity}[/{color}]",
                escape(issue.string.untranslated_singular_value[:40]),
                escape(issue.message),
                escape(issue.string.references[0]) if issue.string.references else "",
            )

        self.console.print(table)
