"""Use Case: Check File - run the rule engine over one file."""

from typing import Optional

from check_typo.domain.auditor import UnusedExceptionAuditor
from check_typo.domain.constants import MAX_REPORTS_PER_RULE
from check_typo.domain.entities import FileContext, FileReport
from check_typo.domain.exemptions import ExceptionResolver
from check_typo.domain.rules import RuleCatalog
from check_typo.domain.rules.file_rules import FileLevelChecker, HeaderRecognizer
from check_typo.domain.scanner import FileScan, LineScanner


class CheckFileUseCase:
    """
    Resolve the file's exceptions, then (unless it is exempt) scan it once and
    run the file-level checks and the unused-exception audit on the same counters.
    """

    def __init__(
        self,
        catalog: RuleCatalog,
        resolver: ExceptionResolver,
        header: Optional[HeaderRecognizer] = None,
        max_reports: int = MAX_REPORTS_PER_RULE,
    ) -> None:
        self.catalog = catalog
        self.resolver = resolver
        self.max_reports = max_reports
        self.file_checker = FileLevelChecker(header)
        self.line_scanner = LineScanner(catalog, self.file_checker)
        self.auditor = UnusedExceptionAuditor()

    def execute(self, context: FileContext) -> FileReport:
        resolution = self.resolver.resolve(context)
        if resolution.exempt:
            return FileReport(path=context.path, resolution=resolution)

        scan = FileScan(context.path, resolution, self.catalog, self.max_reports)
        self.line_scanner.scan(scan, context.records)
        final_line = self.file_checker.finish(scan)
        # unused-prop goes on the effective last line; missing-header alone is pinned to line 1.
        self.auditor.audit(scan, final_line)
        return FileReport(
            path=context.path,
            resolution=resolution,
            diagnostics=tuple(scan.diagnostics),
            counts=scan.counters.as_dict(),
        )
