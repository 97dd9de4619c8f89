"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.exceptions import ConfigurationError
from .domain.models import CourtConfig


class DefaultsConfig(BaseModel):
    """Default settings for slot generation and lookups."""
    slot_length_hours: int = 1
    horizon_months: int = 3
    availability_days: int = 7

    @field_validator("slot_length_hours", "horizon_months", "availability_days")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        """Ensure lengths and horizons are positive."""
        if value <= 0:
            raise ValueError(f"Value must be greater than zero, got {value}")
        return value


class CourtSettings(BaseModel):
    """Court configuration entry."""
    id: int
    name: str
    location: str = ""
    status: str = "ACTIVE"
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None
    operating_days: str = ""
    peak_start_time: Optional[str] = None
    peak_end_time: Optional[str] = None

    def to_court_config(self) -> CourtConfig:
        """Build the domain record for this court."""
        return CourtConfig(
            id=self.id,
            name=self.name,
            location=self.location,
            status=self.status,
            opening_time=self.opening_time,
            closing_time=self.closing_time,
            operating_days=self.operating_days,
            peak_start_time=self.peak_start_time,
            peak_end_time=self.peak_end_time,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    timezone: str = "Europe/Berlin"
    courts: List[CourtSettings] = Field(default_factory=list)
    slot_store_file: Path = Path("slots.json")

    @field_validator("courts")
    @classmethod
    def validate_courts(cls, value: List[CourtSettings]) -> List[CourtSettings]:
        """Ensure court ids are unique."""
        seen_ids: set[int] = set()
        for court in value:
            if court.id in seen_ids:
                raise ValueError(f"Duplicate court id detected: {court.id}")
            seen_ids.add(court.id)
        return value

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
            ConfigurationError: If the file is not valid YAML or has no mapping at its root
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
            raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping at the root level.")

        config = cls(**data)

        # Store paths are relative to the config file
        if not config.slot_store_file.is_absolute():
            config.slot_store_file = config_path.parent / config.slot_store_file

        return config

    def court_configs(self) -> List[CourtConfig]:
        """Return domain records for all configured courts."""
        return [court.to_court_config() for court in self.courts]

    def find_court(self, court_id: int) -> CourtSettings | None:
        """Find a court by its id."""
        for court in self.courts:
            if court.id == court_id:
                return court
        return None


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
