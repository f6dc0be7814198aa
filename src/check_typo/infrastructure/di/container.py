from typing import TYPE_CHECKING, Any, Optional, cast

from check_typo.domain.config import ConfigurationLoader
from check_typo.domain.rules import RuleCatalog
from check_typo.infrastructure.config_file_loader import ConfigFileLoader
from check_typo.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from check_typo.infrastructure.gateways.git_gateway import GitAttributesGateway
from check_typo.infrastructure.reporters import JsonReporter, TextReporter
from check_typo.infrastructure.services.rule_registry import RuleRegistryService
from check_typo.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from check_typo.domain.protocols import (
        FileSystemProtocol,
        ReporterPort,
        TelemetryPort,
        VersionControlProtocol,
    )


class CheckTypoContainer:
    """Dependency Injection Container for check-typo."""

    _instance: Optional["CheckTypoContainer"] = None

    def __init__(self, config_dict: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("TelemetryPort", ProjectTelemetry())

        rule_registry = RuleRegistryService()
        self.register_singleton("RuleRegistryService", rule_registry)
        self.register_singleton(
            "RuleCatalog", RuleCatalog.from_registry(rule_registry.get_registry()))

        self.register_singleton(
            "FileSystemGateway", FileSystemGateway(config_loader.exclude_dirs))
        self.register_singleton(
            "GitAttributesGateway", GitAttributesGateway(config_loader.attribute))

        self.register_singleton("TextReporter", TextReporter())
        self.register_singleton("JsonReporter", JsonReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_rule_registry(self) -> RuleRegistryService:
        return cast(RuleRegistryService, self.get("RuleRegistryService"))

    def get_rule_catalog(self) -> RuleCatalog:
        return cast(RuleCatalog, self.get("RuleCatalog"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_vcs_gateway(self) -> "VersionControlProtocol":
        return cast("VersionControlProtocol", self.get("GitAttributesGateway"))

    def get_reporters(self) -> dict[str, "ReporterPort"]:
        """Reporters by output format name."""
        return {
            "text": cast("ReporterPort", self.get("TextReporter")),
            "json": cast("ReporterPort", self.get("JsonReporter")),
        }

    @classmethod
    def get_instance(cls) -> "CheckTypoContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = CheckTypoContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
