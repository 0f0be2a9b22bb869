"""Configuration loader for the rubric parser."""

from pathlib import Path
from typing import Any

import yaml

from .models import AppConfig


class ConfigLoader:
    """Loads and validates configuration files."""

    def __init__(self, config_dir: Path | None = None):
        """Initialize the config loader.

        Args:
            config_dir: Directory relative config paths are resolved against.
                Defaults to the current directory.
        """
        self.config_dir = config_dir or Path(".")

    def load(self, config_file: str | Path | None = None) -> AppConfig:
        """Load the tool configuration from YAML.

        Args:
            config_file: Path to the config YAML file; defaults are used
                when omitted

        Returns:
            Parsed AppConfig object
        """
        if config_file is None:
            return AppConfig()

        path = self._resolve_path(config_file)
        data = self._load_yaml(path)
        return AppConfig.from_dict(data)

    def _resolve_path(self, file_path: str | Path) -> Path:
        """Resolve a config file path."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self.config_dir / path
        return path

    def _load_yaml(self, path: Path) -> dict[str, Any] | None:
        """Load and parse a YAML file."""
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data
