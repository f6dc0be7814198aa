"""Configuration for check-typo. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from check_typo.domain.constants import (
    DEFAULT_ATTRIBUTE,
    DEFAULT_BANNER_PATTERNS,
    DEFAULT_COPYRIGHT_PATTERN,
    DEFAULT_EXCLUDE_DIRS,
    MAX_REPORTS_PER_RULE,
)
from check_typo.domain.exemptions import ExemptionEntry

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset(
    {
        "disable",
        "attribute",
        "banner_patterns",
        "copyright_pattern",
        "max_reports_per_rule",
        "exclude_dirs",
        "exemptions",
    }
)


class ConfigurationLoader:
    """
    Immutable configuration for the checker.

    Created by Infrastructure from the [tool.check-typo] table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    Values of the wrong type are reported with a warning and replaced by defaults.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config = dict(config_dict or {})
        if self._config:
            self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys this version does not understand."""
        for key in sorted(set(config) - KNOWN_KEYS):
            logger.warning("Configuration Warning: unknown key '%s' in [tool.check-typo].", key)

    def _str_list(self, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
        raw = self._config.get(key)
        if raw is None:
            return default
        if isinstance(raw, str):
            return (raw,)
        if isinstance(raw, list) and all(isinstance(x, str) for x in raw):
            return tuple(raw)
        logger.warning("Configuration Warning: '%s' must be a list of strings; using default.", key)
        return default

    def _str(self, key: str, default: str) -> str:
        raw = self._config.get(key)
        if raw is None:
            return default
        if isinstance(raw, str) and raw:
            return raw
        logger.warning("Configuration Warning: '%s' must be a non-empty string; using default.", key)
        return default

    @property
    def disable(self) -> tuple[str, ...]:
        """Rules disabled for every file, in addition to command-line flags."""
        return self._str_list("disable", ())

    @property
    def attribute(self) -> str:
        """Name of the git attribute that lists per-file exceptions."""
        return self._str("attribute", DEFAULT_ATTRIBUTE)

    @property
    def banner_patterns(self) -> tuple[str, ...]:
        return self._str_list("banner_patterns", DEFAULT_BANNER_PATTERNS)

    @property
    def copyright_pattern(self) -> str:
        return self._str("copyright_pattern", DEFAULT_COPYRIGHT_PATTERN)

    @property
    def max_reports_per_rule(self) -> int:
        raw = self._config.get("max_reports_per_rule")
        if raw is None:
            return MAX_REPORTS_PER_RULE
        if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 1:
            return raw
        logger.warning(
            "Configuration Warning: 'max_reports_per_rule' must be a positive integer; using %d.",
            MAX_REPORTS_PER_RULE,
        )
        return MAX_REPORTS_PER_RULE

    @property
    def exclude_dirs(self) -> tuple[str, ...]:
        """Directory names never descended into during discovery."""
        return self._str_list("exclude_dirs", DEFAULT_EXCLUDE_DIRS)

    @property
    def exemptions(self) -> tuple[ExemptionEntry, ...]:
        """
        Extra path exemptions: { glob = ["rule", ...] | "rule" | "all" }.

        They accumulate with the built-in table; "all" skips matching files.
        """
        raw = self._config.get("exemptions", {})
        if not isinstance(raw, dict):
            logger.warning("Configuration Warning: 'exemptions' must be a table; ignoring it.")
            return ()
        entries: list[ExemptionEntry] = []
        for pattern, rules in raw.items():
            names = [rules] if isinstance(rules, str) else rules
            if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                logger.warning(
                    "Configuration Warning: exemption '%s' must list rule names; ignoring it.",
                    pattern,
                )
                continue
            entries.extend(ExemptionEntry.from_glob(str(pattern), n) for n in names)
        return tuple(entries)
