"""Diagnostic reporters: plain lines (the classic format) and JSON lines."""

import json
from typing import Callable, Optional

import typer

from check_typo.domain.entities import FileReport, RunReport
from check_typo.domain.protocols import ReporterPort

Writer = Callable[[str], None]


class TextReporter(ReporterPort):
    """Writes `path:line.column: [rule] message` lines, notices included."""

    def __init__(self, write: Optional[Writer] = None) -> None:
        self._write: Writer = write or typer.echo

    def report_file(self, report: FileReport) -> None:
        for diagnostic in report.diagnostics:
            self._write(diagnostic.render())

    def report_run(self, run: RunReport) -> None:
        """Plain output carries no summary; the run summary goes to the log."""


class JsonReporter(ReporterPort):
    """Writes one JSON object per diagnostic."""

    def __init__(self, write: Optional[Writer] = None) -> None:
        self._write: Writer = write or typer.echo

    def report_file(self, report: FileReport) -> None:
        for diagnostic in report.diagnostics:
            self._write(json.dumps(diagnostic.to_dict(), ensure_ascii=False))

    def report_run(self, run: RunReport) -> None:
        self._write(
            json.dumps(
                {
                    "summary": {
                        "checked": run.checked,
                        "skipped": run.skipped,
                        "diagnostics": sum(1 for d in run.diagnostics() if not d.notice),
                    }
                }
            )
        )
