"""Configuration for the TitanSchools menu client"""

import logging
import os
from functools import lru_cache
from typing import Any

import yaml
from pydantic import Field
from pydantic.alias_generators import to_snake
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .formatting import FormatOptions

# Number of extra days to request as a buffer so that enough non-empty days are left to display
BUFFER_DAYS = 7

DEFAULT_RECIPE_CATEGORIES = [
    "Main Entree",  # Maybe deprecated?
    "Entrees",
    "Grain",
]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class MenuSettings(BaseSettings):
    """Settings loaded from keyword arguments, TITAN_* environment variables or .env"""

    # Identifiers
    building_id: str | None = None
    district_id: str | None = None

    # Day window
    number_of_days_to_display: int = Field(5, ge=1)
    buffer_days: int = Field(BUFFER_DAYS, ge=0)
    recipe_categories_to_include: list[str] = Field(default_factory=lambda: list(DEFAULT_RECIPE_CATEGORIES))

    # Formatting
    entree_joiner: str = " or "
    show_category_labels: bool = False
    use_oxford_comma: bool = True
    alternative_label: str = ""  # Supports a {categoryName} placeholder

    # Transport
    base_url: str = "https://api.linqconnect.com/api/"
    timeout: float = 30.0

    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TITAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def require_identifiers(self) -> None:
        if self.building_id is None:
            raise ConfigurationError("TitanSchools API client needs a buildingId config value")
        if self.district_id is None:
            raise ConfigurationError("TitanSchools API client needs a districtId config value")

    def format_options(self) -> FormatOptions:
        return FormatOptions(
            entree_joiner=self.entree_joiner,
            show_category_labels=self.show_category_labels,
            use_oxford_comma=self.use_oxford_comma,
            alternative_label=self.alternative_label,
        )


def _read_yaml(config_path: str) -> dict[str, Any] | None:
    """
    Reads a YAML file.
    Search order:
    1. Absolute path provided
    2. Relative to current working directory
    3. Relative to project root
    """
    if os.path.exists(config_path):
        with open(config_path) as f:
            return yaml.safe_load(f) or {}

    # src/titan_menu/config.py -> project root is two levels up from the package
    current_dir = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.abspath(os.path.join(current_dir, "../../"))
    root_config_path = os.path.join(project_root, config_path)

    if os.path.exists(root_config_path):
        with open(root_config_path) as f:
            return yaml.safe_load(f) or {}

    return None


def load_menu_config(config_path: str = "titan_menu.yaml", **overrides: Any) -> MenuSettings:
    """Load settings from a YAML file whose keys may be camelCase (``numberOfDaysToDisplay``) or snake_case.

    Values from the file take precedence over environment variables; ``overrides`` win over both.
    A missing file falls back to environment variables and defaults.
    """
    data = _read_yaml(config_path) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top level of {config_path}")

    values = {to_snake(str(key)): value for key, value in data.items()}
    values.update(overrides)
    return MenuSettings(**values)


@lru_cache
def get_settings() -> MenuSettings:
    """Get cached settings instance"""
    return MenuSettings()


def configure_logging(settings: MenuSettings | None = None, level_name: str | None = None) -> None:
    """Configure root logging.

    The level comes from ``level_name``, then DEBUG when ``settings.debug`` is on, then
    ``settings.log_level``, then the LOG_LEVEL env var, then INFO.
    """
    if level_name is None and settings is not None:
        level_name = "DEBUG" if settings.debug else settings.log_level
    level_name = level_name or os.getenv("LOG_LEVEL", "INFO")
    level = getattr(logging, level_name.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler()])
