"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Iterable, Mapping
from typing import cast

from check_typo.domain.constants import REGISTRY_PREFIX
from check_typo.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """
    Looks up registry entries and builds Pylint msgs dicts from them.

    Registry keys are e.g. 'typo.tab'; values are RuleRegistryEntry dicts.
    """

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_name: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry for a rule by name, pylint code or symbol."""
        entry = registry.get(f"{REGISTRY_PREFIX}{rule_name}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(REGISTRY_PREFIX) or not isinstance(e, dict):
                continue
            if rule_name in (e.get("symbol"), e.get("pylint_code")):
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], rule_names: Iterable[str]
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict for the given rule names.

        Returns { pylint_code: ("%s", symbol, description) }; the rendered rule
        message is passed as the single message argument. Rules without a
        pylint_code are skipped.
        """
        result: dict[str, tuple[str, str, str]] = {}
        for name in rule_names:
            entry = RuleMsgBuilder.get_entry(registry, name)
            if not entry or not entry.get("pylint_code"):
                continue
            symbol = entry.get("symbol") or f"typo-{name}"
            desc = entry.get("short_description") or entry.get("display_name") or name
            result[str(entry["pylint_code"])] = ("%s", str(symbol), str(desc))
        return result

    @staticmethod
    def symbol_for(registry: Mapping[str, RuleRegistryEntry], rule_name: str) -> str:
        """Return the pylint symbol of a rule (falls back to typo-<name>)."""
        entry = RuleMsgBuilder.get_entry(registry, rule_name)
        if entry and entry.get("symbol"):
            return str(entry["symbol"])
        return f"typo-{rule_name}"
