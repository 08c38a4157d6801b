# src/docgrep/parsing/paragraphs.py
"""
Paragraph-level matching over extracted plain text.

A paragraph is one "\\n"-delimited segment of the text, numbered from zero.
Whole-document matching and per-paragraph matching are independent: a
pattern that spans a line feed can match the document while matching no
single paragraph. Callers then report an empty paragraph list.
"""

from __future__ import annotations

import re

from ..constants import PARAGRAPH_SEPARATOR

Paragraph = tuple[int, str]


def document_matches(text: str, pattern: re.Pattern[str]) -> bool:
    """True if `pattern` matches anywhere in the full text."""
    return pattern.search(text) is not None


def split_paragraphs(text: str) -> list[str]:
    return text.split(PARAGRAPH_SEPARATOR)


def matching_paragraphs(text: str, pattern: re.Pattern[str]) -> list[Paragraph]:
    """Return (index, paragraph) pairs for paragraphs that match on their own."""
    return [
        (i, para) for i, para in enumerate(split_paragraphs(text)) if pattern.search(para)
    ]
