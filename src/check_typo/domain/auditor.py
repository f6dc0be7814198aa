"""Flags attribute-declared exceptions that never matched anything."""

from check_typo.domain.constants import UNUSED_PROP
from check_typo.domain.scanner import FileScan


class UnusedExceptionAuditor:
    """
    Reports `unused-prop` for each rule declared in the file's attribute
    whose counter is still zero after the scan. Rules disabled globally
    (command line, configuration) are run-level policy and are not audited.
    """

    def audit(self, scan: FileScan, line: int) -> None:
        for rule in scan.resolution.declared:
            if scan.counters.count(rule) == 0:
                scan.report(UNUSED_PROP, line, 1, rule)
