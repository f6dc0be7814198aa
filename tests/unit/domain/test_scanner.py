"""Tests for record splitting and per-file scan state."""

import io

import pytest

from check_typo.domain.entities import Resolution
from check_typo.domain.rules import RuleCatalog
from check_typo.domain.scanner import FileScan, iter_records


@pytest.mark.parametrize(
    "content",
    [b"", b"\n", b"a", b"a\n", b"a\nb", b"a\n\n", b"\n\n\n", b"a\r\nb\r\n"],
)
def test_iter_records_matches_split(content: bytes) -> None:
    assert list(iter_records(io.BytesIO(content))) == content.split(b"\n")


class TestFileScan:
    def test_advance_keeps_one_line_of_lookback(self, catalog: RuleCatalog) -> None:
        scan = FileScan("a.ml", Resolution(), catalog)
        assert scan.advance(b"one") == 1
        assert scan.advance(b"two") == 2
        assert (scan.prev_line, scan.last_line) == (b"one", b"two")

    def test_suppressed_rule_is_counted_but_not_reported(self, catalog: RuleCatalog) -> None:
        scan = FileScan("a.ml", Resolution(suppressed=frozenset({"tab"})), catalog)
        scan.report("tab", 1, 1)
        assert scan.diagnostics == []
        assert scan.counters.count("tab") == 1

    def test_cap_appends_notice_once(self, catalog: RuleCatalog) -> None:
        scan = FileScan("a.ml", Resolution(), catalog, max_reports=2)
        for line in range(1, 5):
            scan.report("tab", line, 1)
        assert [d.notice for d in scan.diagnostics] == [False, False, True]
        assert scan.diagnostics[2].line == 2
        assert scan.counters.count("tab") == 4
