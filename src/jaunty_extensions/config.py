"""Configuration manager with YAML loading and validation."""

from pathlib import Path
from typing import Any

import numpy as np
import yaml

from .utils import create_rng


class ConfigManager:
    """Load and validate extension configuration from YAML files."""

    DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"

    def __init__(self, config_path: str | Path | None = None):
        """Initialize config manager.

        Args:
            config_path: Path to config file. Uses default if None.
        """
        self.config_path = Path(config_path) if config_path else self.DEFAULT_CONFIG_PATH
        self._config: dict[str, Any] = {}
        self._load_config()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r") as f:
            self._config = yaml.safe_load(f) or {}

    def _validate_config(self) -> None:
        """Validate required configuration sections exist."""
        required_sections = [
            "random",
            "geometry",
        ]

        for section in required_sections:
            if section not in self._config:
                raise ValueError(f"Missing required config section: {section}")
            if not isinstance(self._config[section], dict):
                raise ValueError(f"Config section must be a mapping: {section}")

        seed = self._config["random"].get("seed")
        if seed is not None and not isinstance(seed, int):
            raise ValueError("random.seed must be an integer or null")

        geometry = self._config["geometry"]
        for key in ("planar_epsilon", "parallel_epsilon"):
            value = geometry.get(key, 0)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"geometry.{key} must be a number")
            if value <= 0:
                raise ValueError(f"geometry.{key} must be positive")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'geometry.planar_epsilon')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, section: str) -> dict[str, Any]:
        """Get an entire config section.

        Args:
            section: Section name

        Returns:
            Section dict or empty dict if not found
        """
        return self._config.get(section, {})

    @property
    def random(self) -> dict[str, Any]:
        """Get random configuration."""
        return self._config.get("random", {})

    @property
    def geometry(self) -> dict[str, Any]:
        """Get geometry configuration."""
        return self._config.get("geometry", {})

    def create_rng(self) -> np.random.Generator:
        """Create a generator seeded from random.seed."""
        return create_rng(self.random.get("seed"))

    def line_line_intersection_kwargs(self) -> dict[str, float]:
        """Tolerances to pass to line_line_intersection."""
        return {
            "planar_epsilon": float(self.geometry["planar_epsilon"]),
            "parallel_epsilon": float(self.geometry["parallel_epsilon"]),
        }
