# src/docgrep/parsing/formats.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from ..constants import DOC_SUFFIX, DOCX_SUFFIX, ODT_SUFFIX
from ..types import DocumentFormat

# Suffix -> format. Suffixes never overlap (".doc" is not a suffix of "x.docx").
_FORMATS_BY_SUFFIX: Final[dict[str, DocumentFormat]] = {
    ODT_SUFFIX: DocumentFormat.ODT,
    DOC_SUFFIX: DocumentFormat.DOC,
    DOCX_SUFFIX: DocumentFormat.DOCX,
}


def _file_name(path: str | os.PathLike[str]) -> str:
    return Path(path).name


def format_for(path: str | os.PathLike[str]) -> DocumentFormat:
    """Map a path to its document family by file-name suffix (case-sensitive)."""
    name = _file_name(path)
    for suffix, fmt in _FORMATS_BY_SUFFIX.items():
        if name.endswith(suffix):
            return fmt
    return DocumentFormat.UNRECOGNIZED


def is_candidate(path: str | os.PathLike[str]) -> bool:
    return format_for(path) is not DocumentFormat.UNRECOGNIZED


def extractor_for(path: str | os.PathLike[str]) -> DocumentFormat | None:
    """Like `format_for`, but None when no extractor applies."""
    fmt = format_for(path)
    return None if fmt is DocumentFormat.UNRECOGNIZED else fmt
