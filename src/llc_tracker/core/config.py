#!/usr/bin/env python3
"""
Configuration Management for the Family LLC Tracker

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .currency import parse_dollars

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class LedgerConfig:
    """Location of the exported entity collections."""

    ledger_dir: Path
    key_prefix: str = "fpm_"


@dataclass
class ReconciliationConfig:
    """Mortgage payment reconciliation policy."""

    match_window_days: int = 30
    variance_tolerance: Decimal = Decimal("0.01")


@dataclass
class Config:
    """
    Main configuration class for the tracker.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    ledger: LedgerConfig
    reconciliation: ReconciliationConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("LLC_ENV", "development"))

        # Base directories
        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_llc_tracker"
            base_dir = Path(os.getenv("LLC_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("LLC_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        ledger_dir = data_dir / "ledger"
        output_dir = data_dir / "reports"

        # Ensure directories exist
        for directory in [data_dir, ledger_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        reconciliation = ReconciliationConfig(
            match_window_days=int(os.getenv("MATCH_WINDOW_DAYS", "30")),
            variance_tolerance=parse_dollars(os.getenv("VARIANCE_TOLERANCE", "0.01")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            ledger=LedgerConfig(ledger_dir=ledger_dir),
            reconciliation=reconciliation,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        # Check required directories
        for name, path in [
            ("data_dir", self.data_dir),
            ("ledger_dir", self.ledger.ledger_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if self.reconciliation.match_window_days < 0:
            errors.append("MATCH_WINDOW_DAYS must be non-negative")
        if self.reconciliation.variance_tolerance < 0:
            errors.append("VARIANCE_TOLERANCE must be non-negative")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                # Nested dataclass
                result[field_name] = {
                    nested_name: _plain_value(nested_value)
                    for nested_name, nested_value in field_value.__dict__.items()
                }
            else:
                result[field_name] = _plain_value(field_value)

        return result


def _plain_value(value: Any) -> Any:
    """Convert Path/Enum/Decimal values to JSON-friendly types."""
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    return value


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_ledger_dir() -> Path:
    """Get the ledger collections directory path."""
    return get_config().ledger.ledger_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
