# src/docgrep/core.py
from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .io.extract import ExtractionError, extract_text
from .io.response import build_response
from .parsing.formats import extractor_for, is_candidate
from .parsing.paragraphs import document_matches
from .types import Matched, Outcome, ScanConfig, SkipReason, Skipped

log = logging.getLogger(__name__)


def _log_walk_error(err: OSError) -> None:
    log.debug("Skipping unreadable directory %s: %s", err.filename, err)


def _is_utf8_name(name: str) -> bool:
    """False for names the OS handed back with undecodable bytes (surrogates)."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def iter_candidates(root: Path, max_depth: int | None = None) -> Iterator[Path]:
    """
    Yield candidate documents under `root` in sorted traversal order.

    Files directly inside `root` are at depth 0; `max_depth=0` therefore
    stays in `root`, `max_depth=N` descends N directory levels and None
    descends without limit. Symlinked directories are not followed,
    directories that cannot be listed are skipped with their subtree, and
    entries whose names are not valid UTF-8 are skipped.
    """
    if root.is_file():
        if is_candidate(root):
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        current = Path(dirpath)
        depth = len(current.relative_to(root).parts)
        if max_depth is not None and depth >= max_depth:
            dirnames[:] = []
        else:
            dirnames[:] = sorted(d for d in dirnames if _is_utf8_name(d))
        for name in sorted(filenames):
            if _is_utf8_name(name) and is_candidate(name):
                yield current / name


def search_file(path: Path, config: ScanConfig) -> Outcome:
    """Run one candidate through extract -> match -> respond."""
    fmt = extractor_for(path)
    if fmt is None:
        return Skipped(path, SkipReason.UNRECOGNIZED)

    try:
        text = extract_text(path, fmt)
    except ExtractionError as e:
        return Skipped(path, SkipReason.EXTRACTION_FAILED, str(e.cause))

    if not document_matches(text, config.pattern):
        return Skipped(path, SkipReason.NO_MATCH)

    return Matched(path, build_response(path, text, config.pattern, config.verbosity))


def iter_outcomes(config: ScanConfig) -> Iterator[Outcome]:
    for path in iter_candidates(config.root_path, config.max_depth):
        yield search_file(path, config)


def run(config: ScanConfig) -> Iterator[str]:
    """Lazily yield one response per matching document, in traversal order."""
    for outcome in iter_outcomes(config):
        if isinstance(outcome, Matched):
            yield outcome.response
        else:
            log.debug("Skipped %s (%s)", outcome.path, outcome.reason.value)
