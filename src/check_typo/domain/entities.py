"""Domain entities: the file under check, its resolved rule set, and what was found."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from check_typo.domain.constants import TOO_MANY_TEMPLATE


@dataclass(frozen=True)
class FileContext:
    """
    Everything the engine is told about one candidate file.

    `records` is the content as a stream of lines without their terminator,
    with a trailing empty record when the content ends with LF (see
    check_typo.domain.scanner.iter_records). It is consumed at most once and
    only if the file is not exempt.
    """

    path: str
    records: Iterable[bytes] = ()
    is_explicit: bool = False
    is_tracked: bool = True
    is_binary: bool = False
    attributes: str = ""

    @classmethod
    def from_bytes(cls, path: str, content: bytes, **kwargs: Any) -> "FileContext":
        """Build a context from in-memory content."""
        return cls(path=path, records=content.split(b"\n"), **kwargs)


@dataclass(frozen=True)
class Resolution:
    """The effective rule set for one file. Never mutated once computed."""

    exempt: bool = False
    suppressed: frozenset[str] = frozenset()
    declared: tuple[str, ...] = ()
    reason: Optional[str] = None

    def is_suppressed(self, rule: str) -> bool:
        return rule in self.suppressed

    @classmethod
    def exemption(cls, reason: str) -> "Resolution":
        return cls(exempt=True, reason=reason)


@dataclass(frozen=True)
class Diagnostic:
    """One reported violation, or the "too many" notice that closes a rule's reports."""

    path: str
    line: int
    column: int
    rule: str
    message: str
    notice: bool = False

    @classmethod
    def too_many(cls, path: str, line: int, rule: str) -> "Diagnostic":
        return cls(
            path=path,
            line=line,
            column=0,
            rule=rule,
            message=TOO_MANY_TEMPLATE.format(rule=rule),
            notice=True,
        )

    def render(self) -> str:
        """Render as `path:line.column: [rule] message`; notices render as-is."""
        if self.notice:
            return self.message
        return f"{self.path}:{self.line}.{self.column}: [{self.rule}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "rule": self.rule,
            "message": self.message.strip() if self.notice else self.message,
            "notice": self.notice,
        }


@dataclass(frozen=True)
class FileReport:
    """Result of checking one file."""

    path: str
    resolution: Resolution
    diagnostics: tuple[Diagnostic, ...] = ()
    counts: dict[str, int] = field(default_factory=dict)

    @property
    def skipped(self) -> bool:
        return self.resolution.exempt


@dataclass(frozen=True)
class RunReport:
    """Result of a complete run over every requested path."""

    files: tuple[FileReport, ...] = ()

    @property
    def checked(self) -> int:
        return sum(1 for f in self.files if not f.skipped)

    @property
    def skipped(self) -> int:
        return sum(1 for f in self.files if f.skipped)

    def diagnostics(self) -> Iterator[Diagnostic]:
        for report in self.files:
            yield from report.diagnostics
