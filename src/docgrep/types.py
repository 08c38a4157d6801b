from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .constants import PATTERN_FLAGS, VERBOSITY_PATH


class DocumentFormat(Enum):
    """Document families the search understands, plus an explicit miss."""

    ODT = "odt"
    DOC = "doc"
    DOCX = "docx"
    UNRECOGNIZED = "unrecognized"


class SkipReason(Enum):
    UNRECOGNIZED = "unrecognized extension"
    EXTRACTION_FAILED = "extraction failed"
    NO_MATCH = "no match"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable search settings, built once from the command line."""

    pattern: re.Pattern[str]
    root_path: Path
    max_depth: int | None = None  # None = unlimited
    verbosity: int = VERBOSITY_PATH

    @classmethod
    def from_args(
        cls,
        pattern: str,
        root_path: Path | str = ".",
        max_depth: int | None = None,
        verbosity: int = VERBOSITY_PATH,
        ignore_case: bool = False,
    ) -> ScanConfig:
        """Compile `pattern` and build a config. Raises re.error on a bad regex."""
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        flags = PATTERN_FLAGS | (re.IGNORECASE if ignore_case else 0)
        return cls(
            pattern=re.compile(pattern, flags),
            root_path=Path(root_path),
            max_depth=max_depth,
            verbosity=verbosity,
        )


@dataclass(frozen=True, slots=True)
class Matched:
    path: Path
    response: str


@dataclass(frozen=True, slots=True)
class Skipped:
    path: Path
    reason: SkipReason
    detail: str | None = None


Outcome = Matched | Skipped
