# src/docgrep/io/response.py
from __future__ import annotations

import os
import re

from ..constants import VERBOSITY_INDICES, VERBOSITY_PATH
from ..parsing.paragraphs import Paragraph, matching_paragraphs


def _format_indices(path: str, paragraphs: list[Paragraph]) -> str:
    indices = ", ".join(str(i) for i, _ in paragraphs)
    return f"{path} ({indices})"


def _format_paragraphs(path: str, paragraphs: list[Paragraph]) -> str:
    body = "\n".join(f"  {i}: {para}" for i, para in paragraphs)
    return f"{path}\n{body}"


def build_response(
    path: str | os.PathLike[str],
    text: str,
    pattern: re.Pattern[str],
    verbosity: int,
) -> str:
    """
    Render the output block for a document already known to match.

    Verbosity:
      1     -> "<path>"
      2     -> "<path> (0, 2)"; "<path> ()" when no single paragraph matches
      other -> "<path>" followed by one "  <index>: <paragraph>" line per
               matching paragraph; just "<path>\\n" when none match
    """
    display = os.fspath(path)
    if verbosity == VERBOSITY_PATH:
        # paragraphs are never split at this level
        return display

    paragraphs = matching_paragraphs(text, pattern)
    if verbosity == VERBOSITY_INDICES:
        return _format_indices(display, paragraphs)
    return _format_paragraphs(display, paragraphs)
