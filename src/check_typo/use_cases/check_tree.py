"""Use Case: Check Tree - discover files under the requested paths and check each one."""

from collections.abc import Sequence

from check_typo.domain.entities import FileContext, FileReport, RunReport
from check_typo.domain.protocols import (
    FileSystemProtocol,
    ReporterPort,
    TelemetryPort,
    VersionControlProtocol,
)
from check_typo.use_cases.check_file import CheckFileUseCase


class CheckTreeUseCase:
    """Check every candidate file, one after the other, reporting as it goes."""

    def __init__(
        self,
        check_file: CheckFileUseCase,
        filesystem: FileSystemProtocol,
        vcs: VersionControlProtocol,
        reporter: ReporterPort,
        telemetry: TelemetryPort,
    ) -> None:
        self.check_file = check_file
        self.filesystem = filesystem
        self.vcs = vcs
        self.reporter = reporter
        self.telemetry = telemetry

    def execute(self, paths: Sequence[str]) -> RunReport:
        targets = list(paths) or ["."]
        self.telemetry.step(f"Checking typography in: {', '.join(targets)}")
        reports: list[FileReport] = []
        for path, explicit in self.filesystem.iter_candidates(targets, self.vcs):
            report = self.check_file.execute(self._context(path, explicit))
            if report.skipped:
                self.telemetry.debug(f"{path}: skipped ({report.resolution.reason})")
            self.reporter.report_file(report)
            reports.append(report)
        run = RunReport(files=tuple(reports))
        self.reporter.report_run(run)
        self.telemetry.step(f"Checked {run.checked} file(s), skipped {run.skipped}.")
        return run

    def _context(self, path: str, explicit: bool) -> FileContext:
        return FileContext(
            path=path,
            records=self.filesystem.open_records(path),
            is_explicit=explicit,
            is_tracked=self.vcs.is_tracked(path),
            is_binary=self.vcs.is_binary(path),
            attributes=self.vcs.attribute(path),
        )
