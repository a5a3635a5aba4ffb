"""Configuration management for records-desk."""

import os
from dataclasses import dataclass, field

from records_desk.exceptions import ConfigurationError


@dataclass
class LedgerConfig:
    """Bank ledger configuration."""

    first_account_number: int = 1001
    currency_symbol: str = "$"


@dataclass
class FitnessConfig:
    """Fitness registry configuration."""

    default_family_size: int = 1


@dataclass
class AppConfig:
    """Main configuration for records-desk."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    fitness: FitnessConfig = field(default_factory=FitnessConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    demo_records: int = 0
    locale: str = "en_US"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        ledger = LedgerConfig(
            first_account_number=_int_env("RECORDS_DESK_FIRST_ACCOUNT", 1001),
            currency_symbol=os.getenv("RECORDS_DESK_CURRENCY", "$"),
        )
        if ledger.first_account_number < 1:
            raise ConfigurationError("RECORDS_DESK_FIRST_ACCOUNT must be positive")

        fitness = FitnessConfig(
            default_family_size=_int_env("RECORDS_DESK_FAMILY_SIZE", 1),
        )

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            ledger=ledger,
            fitness=fitness,
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
            demo_records=_int_env("DEMO_RECORDS", 0),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )


def _int_env(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
