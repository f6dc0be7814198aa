"""Domain errors. Content violations are never errors; these are setup and usage failures."""


class CheckTypoError(Exception):
    """Base class for check-typo failures."""


class RegistryError(CheckTypoError):
    """The rule registry is missing or lacks an entry for a known rule."""


class UnknownRuleError(CheckTypoError):
    """A flag or configuration value names a rule that does not exist."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"unknown rule(s): {', '.join(names)}")
