# src/docgrep/io/legacy_doc.py
"""
Legacy binary Word (.doc) extraction through the ``antiword`` converter.

antiword must be on PATH; a missing binary or a non-zero exit is reported
as `DocConversionError`, which the dispatcher folds into ExtractionError.
"""

from __future__ import annotations

import os
import shutil
import subprocess

from ..constants import ANTIWORD_ARGS

_EXECUTABLES = ("antiword", "antiword.exe")


class DocConversionError(RuntimeError):
    def __init__(self, stage: str, detail: str | None = None) -> None:
        self.stage = stage
        self.detail = detail
        super().__init__(f"{stage}: {detail}" if detail else stage)


def find_antiword() -> str | None:
    for candidate in _EXECUTABLES:
        found = shutil.which(candidate)
        if found:
            return found
    return None


def extract_doc_text(path: str | os.PathLike[str]) -> str:
    antiword = find_antiword()
    if not antiword:
        raise DocConversionError("antiword-not-found", "antiword is not on PATH")

    command = [antiword, *ANTIWORD_ARGS, os.path.abspath(path)]
    try:
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise DocConversionError("antiword-launch", str(exc)) from exc

    if completed.returncode != 0:
        message = (completed.stderr or "").strip() or (completed.stdout or "").strip()
        raise DocConversionError(f"antiword-exit={completed.returncode}", message or None)

    return (completed.stdout or "").replace("\r\n", "\n")
