# src/docgrep/io/odt.py
"""
OpenDocument text (.odt) extraction.

An .odt file is a zip archive whose body lives in ``content.xml``. Every
``text:p`` / ``text:h`` element becomes one output line, in document order,
wherever it sits (lists, tables, frames). Inline markup is flattened:

    text:s           -> `text:c` spaces (default 1)
    text:tab         -> "\\t"
    text:line-break  -> "\\n"
    text:note        -> dropped (footnote/endnote bodies)
"""

from __future__ import annotations

import os
import zipfile
from xml.etree import ElementTree as ET

_TEXT_NS = "urn:oasis:names:tc:opendocument:xmlns:text:1.0"
_OFFICE_NS = "urn:oasis:names:tc:opendocument:xmlns:office:1.0"


def _tag(local: str, ns: str = _TEXT_NS) -> str:
    return f"{{{ns}}}{local}"


_PARAGRAPH_TAGS = frozenset({_tag("p"), _tag("h")})
_SPACE = _tag("s")
_TAB = _tag("tab")
_LINE_BREAK = _tag("line-break")
_NOTE = _tag("note")
_SPACE_COUNT = _tag("c")
_BODY = _tag("body", _OFFICE_NS)
_CONTENT = "content.xml"


def _inline_text(elem: ET.Element, out: list[str]) -> None:
    """Append the flattened text of `elem`'s children (not `elem.text`)."""
    for child in elem:
        if child.tag == _SPACE:
            out.append(" " * int(child.get(_SPACE_COUNT, "1")))
        elif child.tag == _TAB:
            out.append("\t")
        elif child.tag == _LINE_BREAK:
            out.append("\n")
        elif child.tag in _PARAGRAPH_TAGS:
            # text boxes and captions nested inside a paragraph
            out.append(f"\n{_paragraph_text(child)}\n")
        elif child.tag != _NOTE:
            if child.text:
                out.append(child.text)
            _inline_text(child, out)
        if child.tail:
            out.append(child.tail)


def _paragraph_text(elem: ET.Element) -> str:
    out: list[str] = [elem.text] if elem.text else []
    _inline_text(elem, out)
    return "".join(out)


def _collect_paragraphs(elem: ET.Element, out: list[str]) -> None:
    for child in elem:
        if child.tag in _PARAGRAPH_TAGS:
            out.append(_paragraph_text(child))
        else:
            _collect_paragraphs(child, out)


def content_to_text(content: bytes) -> str:
    """Flatten an ODF ``content.xml`` document into newline-joined paragraphs."""
    root = ET.fromstring(content)
    body = root.find(_BODY)
    paragraphs: list[str] = []
    _collect_paragraphs(body if body is not None else root, paragraphs)
    return "\n".join(paragraphs)


def extract_odt_text(path: str | os.PathLike[str]) -> str:
    with zipfile.ZipFile(path) as zf:
        content = zf.read(_CONTENT)
    return content_to_text(content)
