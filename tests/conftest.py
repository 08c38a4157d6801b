from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path
from xml.sax.saxutils import escape

import docx
import pytest

_ODT_CONTENT = """<?xml version="1.0" encoding="UTF-8"?>
<office:document-content
    xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0"
    xmlns:text="urn:oasis:names:tc:opendocument:xmlns:text:1.0"
    xmlns:draw="urn:oasis:names:tc:opendocument:xmlns:drawing:1.0"
    office:version="1.2">
  <office:body>
    <office:text>{body}</office:text>
  </office:body>
</office:document-content>
"""


def write_odt_xml(path: Path, body_xml: str) -> Path:
    """Write a minimal .odt whose office:text element holds `body_xml`."""
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("mimetype", "application/vnd.oasis.opendocument.text")
        zf.writestr("content.xml", _ODT_CONTENT.format(body=body_xml))
    return path


def write_odt(path: Path, paragraphs: list[str]) -> Path:
    body = "".join(f"<text:p>{escape(p)}</text:p>" for p in paragraphs)
    return write_odt_xml(path, body)


def write_docx(path: Path, paragraphs: list[str]) -> Path:
    document = docx.Document()
    for p in paragraphs:
        document.add_paragraph(p)
    document.save(str(path))
    return path


@pytest.fixture
def make_odt() -> Callable[[Path, list[str]], Path]:
    return write_odt


@pytest.fixture
def make_odt_xml() -> Callable[[Path, str], Path]:
    return write_odt_xml


@pytest.fixture
def make_docx() -> Callable[[Path, list[str]], Path]:
    return write_docx
