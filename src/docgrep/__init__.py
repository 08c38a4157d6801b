"""
docgrep package.
"""

from .core import run, search_file
from .io.response import build_response
from .parsing.formats import extractor_for, is_candidate
from .parsing.paragraphs import document_matches, matching_paragraphs
from .types import ScanConfig

__all__ = [
    "ScanConfig",
    "build_response",
    "document_matches",
    "extractor_for",
    "is_candidate",
    "matching_paragraphs",
    "run",
    "search_file",
]
__version__ = "0.1.0"
