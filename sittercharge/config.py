"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.models import DEFAULT_RATES, RateTable


class RatesConfig(BaseModel):
    """Hourly rates in whole dollars."""
    pre_bedtime: int = DEFAULT_RATES.pre_bedtime_rate
    post_bedtime: int = DEFAULT_RATES.post_bedtime_rate
    post_midnight: int = DEFAULT_RATES.post_midnight_rate

    @field_validator("pre_bedtime", "post_bedtime", "post_midnight")
    @classmethod
    def validate_rate(cls, value: int) -> int:
        """Ensure rates are not negative."""
        if value < 0:
            raise ValueError(f"Rate must not be negative, got {value}")
        return value

    def to_rate_table(self) -> RateTable:
        """Get the rates as a domain RateTable."""
        return RateTable(
            pre_bedtime_rate=self.pre_bedtime,
            post_bedtime_rate=self.post_bedtime,
            post_midnight_rate=self.post_midnight,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    rates: RatesConfig = Field(default_factory=RatesConfig)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load_or_default(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """
        Load an explicitly given config file, or the default one if present.

        Without an explicit path and without a default config file the
        built-in rates are used.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)

        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
