# src/docgrep/io/ooxml.py
from __future__ import annotations

import os

# python-docx
import docx


def extract_docx_text(path: str | os.PathLike[str]) -> str:
    """Body paragraphs of a .docx file, one per line."""
    document = docx.Document(os.fspath(path))
    return "\n".join(p.text for p in document.paragraphs)
