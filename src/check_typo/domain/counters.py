"""Per-file violation counting with a reporting threshold."""

from dataclasses import dataclass
from enum import Enum

from check_typo.domain.constants import MAX_REPORTS_PER_RULE


class ReportDecision(Enum):
    """What to do with a match once it has been counted."""

    REPORT = "report"
    REPORT_LAST = "report_last"
    SILENT = "silent"


@dataclass
class CappedCounter:
    """Counts every match; only the first `limit` of them are reportable."""

    limit: int = MAX_REPORTS_PER_RULE
    count: int = 0

    def record(self) -> ReportDecision:
        self.count += 1
        if self.count < self.limit:
            return ReportDecision.REPORT
        if self.count == self.limit:
            return ReportDecision.REPORT_LAST
        return ReportDecision.SILENT


class ViolationCounters:
    """Rule name -> CappedCounter, scoped to one file."""

    def __init__(self, limit: int = MAX_REPORTS_PER_RULE) -> None:
        self._limit = limit
        self._counters: dict[str, CappedCounter] = {}

    def record(self, rule: str) -> ReportDecision:
        counter = self._counters.get(rule)
        if counter is None:
            counter = self._counters[rule] = CappedCounter(limit=self._limit)
        return counter.record()

    def count(self, rule: str) -> int:
        counter = self._counters.get(rule)
        return counter.count if counter else 0

    def as_dict(self) -> dict[str, int]:
        return {rule: c.count for rule, c in self._counters.items()}
