"""Per-line detectors. Each one looks at a single line (bytes, no terminator)."""

import re
from typing import Optional

from check_typo.domain.constants import (
    LONG_LINE,
    LONG_LINE_LIMIT,
    NON_ASCII,
    NON_PRINTING,
    SVN_KEYWORD,
    TAB,
    VERY_LONG_LINE,
    VERY_LONG_LINE_LIMIT,
    WHITE_AT_EOL,
)
from check_typo.domain.rules import Detector, Match

_TAB_RE = re.compile(rb"\t")
_NON_ASCII_RE = re.compile(rb"[\x80-\xff]")
# Printing bytes: TAB, SPC and 33..126. Bytes >= 128 are non-ascii, not non-printing.
_NON_PRINTING_RE = re.compile(rb"[^\t\x80-\xff -~]")
_WHITE_AT_EOL_RE = re.compile(rb"[ \t]+$")
_SVN_KEYWORD_RE = re.compile(rb"\$Id(: .*)?\$")


def search_detector(pattern: "re.Pattern[bytes]") -> Detector:
    """Detector reporting the first match of pattern."""

    def detect(line: bytes) -> Optional[Match]:
        found = pattern.search(line)
        if found is None:
            return None
        return Match(column=found.start() + 1)

    return detect


def length_detector(limit: int) -> Detector:
    """Detector firing on lines longer than limit, at column limit + 1."""

    def detect(line: bytes) -> Optional[Match]:
        if len(line) <= limit:
            return None
        return Match(column=limit + 1)

    return detect


LINE_DETECTORS: dict[str, Detector] = {
    TAB: search_detector(_TAB_RE),
    NON_ASCII: search_detector(_NON_ASCII_RE),
    NON_PRINTING: search_detector(_NON_PRINTING_RE),
    WHITE_AT_EOL: search_detector(_WHITE_AT_EOL_RE),
    SVN_KEYWORD: search_detector(_SVN_KEYWORD_RE),
    LONG_LINE: length_detector(LONG_LINE_LIMIT),
    VERY_LONG_LINE: length_detector(VERY_LONG_LINE_LIMIT),
}
