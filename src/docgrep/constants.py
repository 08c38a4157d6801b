# src/docgrep/constants.py
from __future__ import annotations

import re
from typing import Final

# Recognised document suffixes, compared case-sensitively against the file name.
ODT_SUFFIX: Final = ".odt"
DOC_SUFFIX: Final = ".doc"
DOCX_SUFFIX: Final = ".docx"

# Paragraphs are delimited by a single line feed, nothing else.
PARAGRAPH_SEPARATOR: Final = "\n"

# ---------------------------------------------------------------------------
# Verbosity tiers
#   1 -> path only
#   2 -> path + matching paragraph indices
#   3 -> path + indices + paragraph text (also the fallback for other values)
# ---------------------------------------------------------------------------
VERBOSITY_PATH: Final = 1
VERBOSITY_INDICES: Final = 2
VERBOSITY_TEXT: Final = 3

# ^ and $ anchor per line
PATTERN_FLAGS: Final = re.MULTILINE

# antiword: UTF-8 output, no hard wrapping
ANTIWORD_ARGS: Final[tuple[str, ...]] = ("-w", "0", "-m", "UTF-8.txt")
