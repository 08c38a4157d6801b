from __future__ import annotations

import os
import subprocess
from pathlib import Path

import pytest
from docgrep.io import legacy_doc
from docgrep.io.extract import ExtractionError, extract_text
from docgrep.io.odt import content_to_text
from docgrep.types import DocumentFormat


def test_odt_paragraphs_one_per_line(tmp_path: Path, make_odt):
    path = make_odt(tmp_path / "a.odt", ["first", "second & third", ""])
    assert extract_text(path, DocumentFormat.ODT) == "first\nsecond & third\n"


def test_odt_inline_markup(tmp_path: Path, make_odt_xml):
    body = (
        '<text:h text:outline-level="1">Title</text:h>'
        '<text:p>a<text:s text:c="3"/>b<text:tab/>c<text:line-break/>d</text:p>'
        '<text:p>see<text:span> <text:span>nested</text:span></text:span> span'
        '<text:note><text:note-body><text:p>footnote</text:p></text:note-body></text:note>.</text:p>'
        "<text:list><text:list-item><text:p>item</text:p></text:list-item></text:list>"
    )
    path = make_odt_xml(tmp_path / "b.odt", body)
    assert extract_text(path, DocumentFormat.ODT) == (
        "Title\na   b\tc\nd\nsee nested span.\nitem"
    )


def test_odt_text_box_inside_paragraph_is_its_own_line(tmp_path: Path, make_odt_xml):
    body = (
        "<text:p>Before<draw:frame><draw:text-box>"
        "<text:p>caption</text:p><text:p>second</text:p>"
        "</draw:text-box></draw:frame> after</text:p>"
    )
    path = make_odt_xml(tmp_path / "frame.odt", body)
    assert extract_text(path, DocumentFormat.ODT) == "Before\ncaption\n\nsecond\n after"


def test_odt_single_space_default():
    xml = (
        b'<office:document-content xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0" '
        b'xmlns:text="urn:oasis:names:tc:opendocument:xmlns:text:1.0">'
        b"<office:body><office:text><text:p>x<text:s/>y</text:p></office:text></office:body>"
        b"</office:document-content>"
    )
    assert content_to_text(xml) == "x y"


def test_odt_not_a_zip(tmp_path: Path):
    path = tmp_path / "broken.odt"
    path.write_text("plain text pretending to be odt")
    with pytest.raises(ExtractionError) as info:
        extract_text(path, DocumentFormat.ODT)
    assert info.value.path == str(path)


def test_odt_missing_content(tmp_path: Path):
    import zipfile

    path = tmp_path / "empty.odt"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("mimetype", "application/vnd.oasis.opendocument.text")
    with pytest.raises(ExtractionError):
        extract_text(path, DocumentFormat.ODT)


def test_docx_paragraphs(tmp_path: Path, make_docx):
    path = make_docx(tmp_path / "c.docx", ["hello world", "second line"])
    text = extract_text(path, DocumentFormat.DOCX)
    assert text.endswith("hello world\nsecond line")


def test_docx_corrupt(tmp_path: Path):
    path = tmp_path / "bad.docx"
    path.write_bytes(b"\x00\x01garbage")
    with pytest.raises(ExtractionError):
        extract_text(path, DocumentFormat.DOCX)


def test_missing_file_is_extraction_error(tmp_path: Path):
    with pytest.raises(ExtractionError):
        extract_text(tmp_path / "nope.docx", DocumentFormat.DOCX)


def test_unrecognized_format_is_a_caller_error(tmp_path: Path):
    with pytest.raises(ValueError):
        extract_text(tmp_path / "x.txt", DocumentFormat.UNRECOGNIZED)


def test_doc_without_antiword(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(legacy_doc.shutil, "which", lambda name: None)
    with pytest.raises(ExtractionError) as info:
        extract_text(tmp_path / "old.doc", DocumentFormat.DOC)
    assert isinstance(info.value.cause, legacy_doc.DocConversionError)
    assert info.value.cause.stage == "antiword-not-found"


def test_doc_via_antiword(tmp_path: Path, monkeypatch):
    calls: list[list[str]] = []

    def fake_run(command, **kwargs):
        calls.append(command)
        return subprocess.CompletedProcess(command, 0, stdout="one\r\ntwo\n", stderr="")

    monkeypatch.setattr(legacy_doc.shutil, "which", lambda name: "/usr/bin/antiword")
    monkeypatch.setattr(legacy_doc.subprocess, "run", fake_run)
    path = tmp_path / "old.doc"
    assert extract_text(path, DocumentFormat.DOC) == "one\ntwo\n"
    assert calls[0][0] == "/usr/bin/antiword"
    assert calls[0][-1] == os.path.abspath(path)
    assert "UTF-8.txt" in calls[0]


def test_doc_antiword_failure(tmp_path: Path, monkeypatch):
    def fake_run(command, **kwargs):
        return subprocess.CompletedProcess(command, 1, stdout="", stderr="not a Word Document")

    monkeypatch.setattr(legacy_doc.shutil, "which", lambda name: "/usr/bin/antiword")
    monkeypatch.setattr(legacy_doc.subprocess, "run", fake_run)
    with pytest.raises(ExtractionError) as info:
        extract_text(tmp_path / "old.doc", DocumentFormat.DOC)
    assert info.value.cause.stage == "antiword-exit=1"
    assert info.value.cause.detail == "not a Word Document"
