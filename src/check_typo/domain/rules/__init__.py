"""Domain models for typographic rules and the rule catalogue."""

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "Detector",
    "Match",
    "Rule",
    "RuleCatalog",
]

from check_typo.domain.constants import ALL_RULES
from check_typo.domain.errors import RegistryError, UnknownRuleError
from check_typo.domain.registry_types import RuleRegistryEntry
from check_typo.domain.rule_msgs import RuleMsgBuilder


@dataclass(frozen=True)
class Match:
    """Where a detector fired on a line: 1-based column."""

    column: int


Detector = Callable[[bytes], Optional[Match]]


@dataclass(frozen=True)
class Rule:
    """A named check. Line rules carry a detector; file-level rules do not."""

    name: str
    message_template: str
    description: str = ""
    detector: Optional[Detector] = None

    @property
    def is_line_rule(self) -> bool:
        return self.detector is not None

    def message(self, *args: str) -> str:
        """Render the message template; only templates with %s take args."""
        if args:
            return self.message_template % args
        return self.message_template


class RuleCatalog:
    """
    The fixed catalogue of rules, built once per process.

    Line rules keep the order of LINE_RULES so that diagnostics for one line
    always come out in the same order.
    """

    def __init__(self, rules: Sequence[Rule]) -> None:
        self._rules: dict[str, Rule] = {rule.name: rule for rule in rules}
        self._line_rules: tuple[Rule, ...] = tuple(r for r in rules if r.is_line_rule)

    @classmethod
    def from_registry(cls, registry: Mapping[str, RuleRegistryEntry]) -> "RuleCatalog":
        """Pair every known rule with its message template from the registry."""
        from check_typo.domain.rules.line_rules import LINE_DETECTORS

        rules: list[Rule] = []
        missing: list[str] = []
        for name in ALL_RULES:
            entry = RuleMsgBuilder.get_entry(registry, name)
            if not entry or not entry.get("message_template"):
                missing.append(name)
                continue
            rules.append(
                Rule(
                    name=name,
                    message_template=str(entry["message_template"]),
                    description=str(entry.get("short_description") or ""),
                    detector=LINE_DETECTORS.get(name),
                )
            )
        if missing:
            raise RegistryError(f"rule registry has no message for: {', '.join(missing)}")
        return cls(rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def get(self, name: str) -> Rule:
        return self._rules[name]

    @property
    def line_rules(self) -> tuple[Rule, ...]:
        return self._line_rules

    def validate(self, names: Iterable[str]) -> frozenset[str]:
        """Return names as a frozenset, or raise UnknownRuleError listing the strangers."""
        wanted = list(names)
        unknown = [n for n in wanted if n not in self._rules]
        if unknown:
            raise UnknownRuleError(unknown)
        return frozenset(wanted)
