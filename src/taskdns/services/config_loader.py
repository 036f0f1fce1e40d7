"""Configuration loader for taskdns."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from taskdns.errors import ConfigurationError


class ConfigLoader:
    """Loads YAML configuration files for CLI defaults."""

    SUPPORTED_KEYS = {
        "cluster_id",
        "zone_id",
        "region",
        "launch_type",
        "dry_run",
        "verbose",
        "log_file",
    }

    FLAG_KEYS = {"dry_run", "verbose"}
    TRUE_VALUES = {"1", "true", "yes", "y", "on"}
    FALSE_VALUES = {"0", "false", "no", "n", "off", ""}

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise ConfigurationError(f"Invalid config file '{config_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ConfigurationError("Config file must contain a YAML mapping at the root.")

        unknown = sorted(set(parsed.keys()) - self.SUPPORTED_KEYS)
        if unknown:
            unknown_list = ", ".join(unknown)
            raise ConfigurationError(f"Unknown configuration keys: {unknown_list}")

        for key in self.FLAG_KEYS & set(parsed):
            parsed[key] = self._to_flag(key, parsed[key])

        return parsed

    def _to_flag(self, key: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in self.TRUE_VALUES:
            return True
        if text in self.FALSE_VALUES:
            return False
        raise ConfigurationError(f"Configuration key '{key}' must be true or false, got {value!r}.")
