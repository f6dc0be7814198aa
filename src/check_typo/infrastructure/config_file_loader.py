"""Load [tool.check-typo] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml, walking up from the working directory."""

    SECTION = "check-typo"

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Return the [tool.check-typo] table of the first pyproject.toml found, or {}."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Could not read %s: %s", config_file, exc)
                continue
            tool_section = data.get("tool", {}) or {}
            section = tool_section.get(ConfigFileLoader.SECTION, {}) or {}
            if section:
                logger.debug("Loaded [tool.%s] from %s", ConfigFileLoader.SECTION, config_file)
                return dict(section)
        return {}
