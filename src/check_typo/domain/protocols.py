from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from check_typo.domain.entities import FileReport, RunReport


class TelemetryPort(Protocol):
    """Protocol for progress and problem reporting outside the diagnostics stream."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for discovering candidate files and reading their content."""

    def iter_candidates(
        self, paths: Iterable[str], vcs: "VersionControlProtocol"
    ) -> Iterator[tuple[str, bool]]:
        """Yield (path, is_explicit) for every file to consider."""
        ...

    def open_records(self, path: str) -> Iterator[bytes]:
        """Lazily yield the records of a file (see domain.scanner.iter_records)."""
        ...


class VersionControlProtocol(Protocol):
    """Protocol for the version-control metadata a file check needs."""

    def is_tracked(self, path: str) -> bool:
        ...

    def is_binary(self, path: str) -> bool:
        ...

    def attribute(self, path: str) -> str:
        """Raw value of the exception attribute ('' when not set)."""
        ...


class ReporterPort(Protocol):
    """Protocol for writing diagnostics as files are checked."""

    def report_file(self, report: "FileReport") -> None:
        ...

    def report_run(self, run: "RunReport") -> None:
        ...
