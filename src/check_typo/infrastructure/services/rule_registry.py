"""RuleRegistryService: loads the rule registry YAML shipped with the package."""

from pathlib import Path
from typing import Optional, cast

import yaml

from check_typo.domain.errors import RegistryError
from check_typo.domain.registry_types import RuleRegistryEntry


class RuleRegistryService:
    """Loads rule_registry.yaml; per-rule lookups go through RuleMsgBuilder."""

    def __init__(self, registry_path: Optional[str] = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            raise RegistryError(f"rule registry not found: {self._path}")
        with open(self._path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise RegistryError(f"rule registry {self._path} is not valid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise RegistryError(f"rule registry {self._path} must be a mapping")
        self._registry = cast(dict[str, RuleRegistryEntry], data)

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)
