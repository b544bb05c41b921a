"""Validator for format specifier placeholders."""

import re
from typing import List, Optional, Tuple
from dataclasses import dataclass


@dataclass
class PlaceholderIssue:
    """Represents a placeholder validation issue."""

    error_type: str  # count_mismatch, missing, extra, order_changed
    message: str
    severity: str  # critical, warning


class PlaceholderValidator:
    """
    Validates that format specifiers are preserved between two strings.

    Recognized format specifiers include:
    - %s, %d, %.2f, %@ - printf style
    - %1$s, %2$d - positional printf (Android)
    - %(name)s - Python named
    - {0}, {name}, {0:n} - brace style (.NET, str.format)
    - %% and {{ }} are literals and are ignored
    """

    PRINTF_PATTERN = re.compile(
        r"%"
        r"(?:"
        r"(?:\d+\$|\([A-Za-z_][A-Za-z0-9_]*\))?"  # Optional positional or named specifier
        r"[-+0 #]*"  # Optional flags
        r"(?:\d+|\*)?"  # Optional width
        r"(?:\.(?:\d+|\*))?"  # Optional precision
        r"(?:hh|h|ll|l|L|z|j|t)?"  # Optional length modifier
        r"[diouxXeEfFgGaAcspn@]"  # Conversion specifier
        r"|%"  # OR literal %%
        r")"
    )

    BRACE_PATTERN = re.compile(r"\{\{|\}\}|\{[A-Za-z0-9_]*(?:[:,][^{}]*)?\}")

    def validate(self, source: str, translation: str) -> Tuple[bool, List[PlaceholderIssue]]:
        """
        Validate that placeholders in source match those in translation.

        Args:
            source: Original source text
            translation: Translated text

        Returns:
            Tuple of (is_valid, list of issues)
        """
        issues = []

        source_placeholders = self.extract_placeholders(source)
        trans_placeholders = self.extract_placeholders(translation)

        if len(source_placeholders) != len(trans_placeholders):
            issues.append(
                PlaceholderIssue(
                    error_type="count_mismatch",
                    message=f"Placeholder count mismatch: source has {len(source_placeholders)}, "
                    f"translation has {len(trans_placeholders)}",
                    severity="critical",
                )
            )

        source_set = set(source_placeholders)
        trans_set = set(trans_placeholders)

        for placeholder in sorted(source_set - trans_set):
            issues.append(
                PlaceholderIssue(
                    error_type="missing",
                    message=f"Missing placeholder in translation: {placeholder}",
                    severity="critical",
                )
            )

        for placeholder in sorted(trans_set - source_set):
            issues.append(
                PlaceholderIssue(
                    error_type="extra",
                    message=f"Extra placeholder in translation: {placeholder}",
                    severity="critical",
                )
            )

        # Only sequential printf specifiers depend on argument order
        if not issues:
            source_sequential = [p for p in source_placeholders if self._is_sequential(p)]
            trans_sequential = [p for p in trans_placeholders if self._is_sequential(p)]

            if source_sequential != trans_sequential:
                issues.append(
                    PlaceholderIssue(
                        error_type="order_changed",
                        message="Non-positional placeholder order changed "
                        "(may cause runtime issues)",
                        severity="warning",
                    )
                )

        is_valid = not any(issue.severity == "critical" for issue in issues)
        return is_valid, issues

    def extract_placeholders(self, text: str) -> List[str]:
        """Extract all placeholders from text, literals excluded."""
        placeholders = []
        for pattern in (self.PRINTF_PATTERN, self.BRACE_PATTERN):
            for match in pattern.finditer(text):
                token = match.group(0)
                if token not in ("%%", "{{", "}}"):
                    placeholders.append(token)
        return placeholders

    def has_placeholders(self, text: str) -> bool:
        """Check if text contains any placeholders."""
        return bool(self.extract_placeholders(text))

    def format_hint(self, text: str) -> Optional[str]:
        """Get the gettext format flag describing the placeholders in text."""
        if any(self.PRINTF_PATTERN.fullmatch(p) for p in self.extract_placeholders(text)):
            return "python-format"
        if self.has_placeholders(text):
            return "python-brace-format"
        return None

    @staticmethod
    def _is_sequential(placeholder: str) -> bool:
        return placeholder.startswith("%") and "$" not in placeholder and "(" not in placeholder
