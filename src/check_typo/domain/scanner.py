"""Line scanning: per-file state and the single streaming pass over a file."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from check_typo.domain.constants import MAX_REPORTS_PER_RULE
from check_typo.domain.counters import ReportDecision, ViolationCounters
from check_typo.domain.entities import Diagnostic, Resolution
from check_typo.domain.rules import RuleCatalog

if TYPE_CHECKING:
    from check_typo.domain.rules.file_rules import FileLevelChecker


def iter_records(raw_lines: Iterable[bytes]) -> Iterator[bytes]:
    """
    Turn raw lines (as read from a binary file, LF kept) into records.

    The records are the lines without LF, plus one trailing empty record when
    the content ends with LF or is empty: the same sequence as
    `content.split(b"\\n")`, without holding the content in memory.
    """
    ended_with_lf = True
    for raw in raw_lines:
        if raw.endswith(b"\n"):
            yield raw[:-1]
            ended_with_lf = True
        else:
            yield raw
            ended_with_lf = False
    if ended_with_lf:
        yield b""


@dataclass
class HeaderState:
    """Banner line found on lines 3-5, and whether a copyright line followed it."""

    banner_line: Optional[int] = None
    copyright_found: bool = False

    @property
    def present(self) -> bool:
        return self.banner_line is not None and self.copyright_found


class FileScan:
    """
    Mutable state of one file while it is being checked.

    Owns the violation counters, the diagnostics emitted so far, and the
    one-line lookback needed by the end-of-file checks and the header state.
    Created per file and discarded with it.
    """

    def __init__(
        self,
        path: str,
        resolution: Resolution,
        catalog: RuleCatalog,
        max_reports: int = MAX_REPORTS_PER_RULE,
    ) -> None:
        self.path = path
        self.resolution = resolution
        self.catalog = catalog
        self.counters = ViolationCounters(limit=max_reports)
        self.diagnostics: list[Diagnostic] = []
        self.line_count = 0
        self.last_line: Optional[bytes] = None
        self.prev_line: Optional[bytes] = None
        self.header = HeaderState()

    def report(self, rule: str, line: int, column: int, *args: str) -> None:
        """Count a match; emit it unless suppressed or over the cap."""
        decision = self.counters.record(rule)
        if self.resolution.is_suppressed(rule) or decision is ReportDecision.SILENT:
            return
        message = self.catalog.get(rule).message(*args)
        self.diagnostics.append(Diagnostic(self.path, line, column, rule, message))
        if decision is ReportDecision.REPORT_LAST:
            self.diagnostics.append(Diagnostic.too_many(self.path, line, rule))

    def advance(self, line: bytes) -> int:
        """Move the lookback window forward; return the new line number."""
        self.line_count += 1
        self.prev_line = self.last_line
        self.last_line = line
        return self.line_count


class LineScanner:
    """Runs every line rule on every record, in one pass."""

    def __init__(self, catalog: RuleCatalog, file_checker: "FileLevelChecker") -> None:
        self._line_rules = catalog.line_rules
        self._file_checker = file_checker

    def scan(self, scan: FileScan, records: Iterable[bytes]) -> None:
        for line in records:
            line_no = scan.advance(line)
            for rule in self._line_rules:
                match = rule.detector(line) if rule.detector else None
                if match is not None:
                    scan.report(rule.name, line_no, match.column)
            self._file_checker.observe(scan, line_no, line)
