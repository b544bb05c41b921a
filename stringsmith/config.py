"""Configuration management for the string extraction pipeline."""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name, "")
    return value or None


@dataclass
class Config:
    """Application configuration."""

    # Pipeline defaults, overridden by command-line options
    generator: str = field(default_factory=lambda: os.getenv("STRINGSMITH_GENERATOR", "po"))
    source_root: Optional[str] = field(
        default_factory=lambda: _optional_env("STRINGSMITH_SOURCE_ROOT")
    )
    log_level: int = field(
        default_factory=lambda: int(os.getenv("STRINGSMITH_LOG_LEVEL", "0"))
    )

    # Prefix of derived Android resource ids (<prefix>_P<n>_<digest>)
    resource_id_prefix: str = field(
        default_factory=lambda: os.getenv("STRINGSMITH_RESOURCE_ID_PREFIX", "Str")
    )

    # Function names scanned in Python sources
    PYTHON_KEYWORDS: dict = field(default_factory=lambda: {
        "_": "singular",
        "gettext": "singular",
        "N_": "singular",
        "ngettext": "plural",
    })

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.log_level not in (0, 1, 2):
            errors.append(f"STRINGSMITH_LOG_LEVEL must be 0, 1 or 2, got {self.log_level}")
        if self.source_root and not os.path.isdir(self.source_root):
            errors.append(f"STRINGSMITH_SOURCE_ROOT is not a directory: {self.source_root}")
        if not self.resource_id_prefix:
            errors.append("STRINGSMITH_RESOURCE_ID_PREFIX must not be empty")
        return errors


# Global config instance
config = Config()
