"""Whole-file checks: trailing newline, trailing blank lines and the copyright header."""

import re
from collections.abc import Sequence
from typing import Optional

from check_typo.domain.constants import (
    BANNER_FIRST_LINE,
    BANNER_LAST_LINE,
    COPYRIGHT_MAX_OFFSET,
    COPYRIGHT_MIN_OFFSET,
    DEFAULT_BANNER_PATTERNS,
    DEFAULT_COPYRIGHT_PATTERN,
    MISSING_HEADER,
    MISSING_LF,
    WHITE_AT_EOF,
)
from check_typo.domain.scanner import FileScan, HeaderState

_BLANK_RE = re.compile(rb"^[ \t]*$")


class HeaderRecognizer:
    """Recognizes the project banner and the copyright line that must follow it."""

    def __init__(
        self,
        banner_patterns: Sequence[str] = DEFAULT_BANNER_PATTERNS,
        copyright_pattern: str = DEFAULT_COPYRIGHT_PATTERN,
    ) -> None:
        self._banners = tuple(re.compile(p.encode("utf-8")) for p in banner_patterns)
        self._copyright = re.compile(copyright_pattern.encode("utf-8"))

    def observe(self, state: HeaderState, line_no: int, line: bytes) -> None:
        if state.banner_line is None:
            if BANNER_FIRST_LINE <= line_no <= BANNER_LAST_LINE and any(
                p.search(line) for p in self._banners
            ):
                state.banner_line = line_no
            return
        if state.copyright_found:
            return
        first = state.banner_line + COPYRIGHT_MIN_OFFSET
        last = state.banner_line + COPYRIGHT_MAX_OFFSET
        if first <= line_no <= last and self._copyright.search(line):
            state.copyright_found = True


class FileLevelChecker:
    """
    Checks that need the whole file: missing-lf, white-at-eof, missing-header.

    Header lines are observed while the file streams by; the verdicts are
    given by finish() once the last record has been read.
    """

    def __init__(self, header: Optional[HeaderRecognizer] = None) -> None:
        self._header = header or HeaderRecognizer()

    def observe(self, scan: FileScan, line_no: int, line: bytes) -> None:
        self._header.observe(scan.header, line_no, line)

    def finish(self, scan: FileScan) -> int:
        """Report file-level violations; return the effective final line number."""
        final_line = self._check_end_of_file(scan)
        if not scan.header.present:
            scan.report(MISSING_HEADER, 1, 1)
        return final_line

    @staticmethod
    def _check_end_of_file(scan: FileScan) -> int:
        line_count = scan.line_count
        last = scan.last_line or b""
        prev = scan.prev_line
        if last:
            scan.report(MISSING_LF, line_count, 1)
            prev = last
            line_count += 1
            empty_file = False
        else:
            # No content at all, or a lone LF.
            empty_file = line_count <= 1 or (line_count == 2 and prev == b"")
        if not empty_file and prev is not None and _BLANK_RE.match(prev):
            scan.report(WHITE_AT_EOF, line_count, 1)
        return line_count
