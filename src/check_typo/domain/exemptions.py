"""Exception resolution: which rules a file is excused from, or whether it is skipped."""

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import PurePosixPath, PurePath

from check_typo.domain.constants import (
    ALL,
    ATTRIBUTE_EMPTY_VALUES,
    LONG_LINE,
    MISSING_HEADER,
    SENTINEL_BINARY,
    SENTINEL_PRUNE,
    TAB,
)
from check_typo.domain.entities import FileContext, Resolution

PathPredicate = Callable[[str], bool]

_ATTRIBUTE_SPLIT_RE = re.compile(r"[,\s]+")


def glob_predicate(*patterns: str) -> PathPredicate:
    """Shell `case` semantics: `*` also matches `/`, matching is case sensitive."""

    def matches(path: str) -> bool:
        return any(fnmatchcase(path, pattern) for pattern in patterns)

    return matches


def under_directory(name: str) -> PathPredicate:
    """True for paths with a parent directory called `name` at any depth."""

    def matches(path: str) -> bool:
        return name in PurePosixPath(path).parts[:-1]

    return matches


@dataclass(frozen=True)
class ExemptionEntry:
    """A path pattern and the rule it excuses (or ALL to skip the file)."""

    label: str
    predicate: PathPredicate
    rule: str

    def matches(self, path: str) -> bool:
        return self.predicate(path)

    @classmethod
    def from_glob(cls, pattern: str, rule: str) -> "ExemptionEntry":
        return cls(label=pattern, predicate=glob_predicate(pattern), rule=rule)


BUILTIN_EXEMPTIONS: tuple[ExemptionEntry, ...] = (
    ExemptionEntry(
        "reference output",
        glob_predicate("*.reference", "reference", "*/reference", ".depend*", "*/.depend*"),
        ALL,
    ),
    ExemptionEntry("Makefile", glob_predicate("Makefile*", "*/Makefile*"), TAB),
    ExemptionEntry(
        "header-less build file",
        glob_predicate(
            ".gitignore",
            "*/.gitignore",
            "*.mlpack",
            "*.mllib",
            "*.mltop",
            "*.odocl",
            "*.clib",
        ),
        MISSING_HEADER,
    ),
    ExemptionEntry("ocamldoc sources", under_directory("ocamldoc"), LONG_LINE),
)


def parse_attribute(value: str) -> tuple[str, ...]:
    """Split an attribute value on commas/whitespace, dropping empties and repeats."""
    value = value.strip()
    if value in ATTRIBUTE_EMPTY_VALUES:
        return ()
    tokens: list[str] = []
    for token in _ATTRIBUTE_SPLIT_RE.split(value):
        if token and token not in tokens:
            tokens.append(token)
    return tuple(tokens)


class ExceptionResolver:
    """
    Computes the Resolution of a file.

    Sources are unioned, never overridden: the global-disable set, every
    matching path entry (built-ins first, then configured ones) and the
    rules declared in the file's attribute. Only attribute-declared rules are
    recorded as `declared`, since only they are audited for being unused.
    """

    def __init__(
        self,
        global_disable: Iterable[str] = (),
        extra_entries: Sequence[ExemptionEntry] = (),
    ) -> None:
        self._global_disable = frozenset(global_disable)
        self._entries = BUILTIN_EXEMPTIONS + tuple(extra_entries)

    def resolve(self, context: FileContext) -> Resolution:
        path = PurePath(context.path).as_posix()
        suppressed = set(self._global_disable)
        for entry in self._entries:
            if not entry.matches(path):
                continue
            if entry.rule == ALL:
                return Resolution.exemption(entry.label)
            suppressed.add(entry.rule)

        tokens = parse_attribute(context.attributes)
        if context.is_binary or SENTINEL_BINARY in tokens:
            return Resolution.exemption("binary")
        if not (context.is_tracked or context.is_explicit):
            return Resolution.exemption("untracked")

        declared = tuple(t for t in tokens if t != SENTINEL_PRUNE)
        suppressed.update(declared)
        return Resolution(suppressed=frozenset(suppressed), declared=declared)
