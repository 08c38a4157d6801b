# src/docgrep/io/extract.py
"""
Plain-text extraction dispatch.

Public API:
    - extract_text(path, fmt) -> str
    - ExtractionError
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Final

from ..types import DocumentFormat
from .legacy_doc import extract_doc_text
from .odt import extract_odt_text
from .ooxml import extract_docx_text

__all__ = ["ExtractionError", "extract_text"]

log = logging.getLogger(__name__)

Extractor = Callable[[str | os.PathLike[str]], str]

_EXTRACTORS: Final[dict[DocumentFormat, Extractor]] = {
    DocumentFormat.ODT: extract_odt_text,
    DocumentFormat.DOC: extract_doc_text,
    DocumentFormat.DOCX: extract_docx_text,
}


class ExtractionError(Exception):
    """A document could not be opened or converted to text."""

    def __init__(self, path: str | os.PathLike[str], cause: BaseException) -> None:
        self.path = os.fspath(path)
        self.cause = cause
        super().__init__(f"{self.path}: {type(cause).__name__}: {cause}")


def extract_text(path: str | os.PathLike[str], fmt: DocumentFormat) -> str:
    """Return the plain text of `path` using the adapter for `fmt`.

    Any adapter failure (I/O, corrupt archive, bad XML, converter exit) is
    re-raised as ExtractionError. Asking for UNRECOGNIZED is a caller bug.
    """
    extractor = _EXTRACTORS.get(fmt)
    if extractor is None:
        raise ValueError(f"no extractor for {fmt!r}")
    try:
        return extractor(path)
    except Exception as e:  # noqa: BLE001
        log.debug("Extraction failed for %s: %s", path, e)
        raise ExtractionError(path, e) from e
