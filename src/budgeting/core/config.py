#!/usr/bin/env python3
"""
Configuration Management for Offshore Budgeting

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class DateOrder(Enum):
    """Component order used when reading ambiguous numeric dates like 1/2/26."""

    MONTH_FIRST = "MDY"
    DAY_FIRST = "DMY"
    YEAR_FIRST = "YMD"


@dataclass
class SearchConfig:
    """Free-text search configuration."""

    date_order: DateOrder = DateOrder.MONTH_FIRST


@dataclass
class Config:
    """
    Main configuration class for the budgeting application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path

    # Component configurations
    search: SearchConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("BUDGETING_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_budgeting"
            data_dir = Path(os.getenv("BUDGETING_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("BUDGETING_DATA_DIR", "./data")).expanduser().resolve()

        search = SearchConfig(
            date_order=_parse_date_order(os.getenv("SEARCH_DATE_ORDER", "MDY")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            search=search,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.data_dir.exists() and not self.data_dir.is_dir():
            errors.append(f"data_dir is not a directory: {self.data_dir}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = logging.DEBUG if self.debug else getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # pandas is chatty at DEBUG
        if self.environment == Environment.PRODUCTION:
            logging.getLogger("pandas").setLevel(logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                result[field_name] = {
                    nested_name: _plain(nested_value) for nested_name, nested_value in field_value.__dict__.items()
                }
            else:
                result[field_name] = _plain(field_value)

        return result


def _plain(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


def _parse_date_order(value: str) -> DateOrder:
    """Parse SEARCH_DATE_ORDER, falling back to month-first for unknown values."""
    try:
        return DateOrder(value.strip().upper())
    except ValueError:
        logging.getLogger(__name__).warning("Unknown SEARCH_DATE_ORDER %r, using MDY", value)
        return DateOrder.MONTH_FIRST


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir
