"""Configuration management for the attendance payroll engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    database_url: str
    host: str
    port: int
    debug: bool
    log_level: str

    # Payroll policy knobs
    regular_hours_per_day: Decimal
    working_days_per_month: int
    default_overtime_rate: Decimal
    overtime_policy: str
    calculation_mode: str
    salary_basis: str

    @property
    def HOST(self) -> str:
        """Alias for host."""
        return self.host

    @property
    def PORT(self) -> int:
        """Alias for port."""
        return self.port

    @property
    def DEBUG(self) -> bool:
        """Alias for debug."""
        return self.debug

    @property
    def regular_hours_per_month(self) -> Decimal:
        return self.regular_hours_per_day * self.working_days_per_month

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            database_url=os.getenv(
                "DATABASE_URL",
                "sqlite+aiosqlite:///./payroll.db",
            ),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            regular_hours_per_day=Decimal(os.getenv("REGULAR_HOURS_PER_DAY", "8")),
            working_days_per_month=int(os.getenv("WORKING_DAYS_PER_MONTH", "22")),
            default_overtime_rate=Decimal(os.getenv("DEFAULT_OVERTIME_RATE", "1.5")),
            overtime_policy=os.getenv("OVERTIME_POLICY", "monthly").lower(),
            calculation_mode=os.getenv("CALCULATION_MODE", "hourly").lower(),
            salary_basis=os.getenv("SALARY_BASIS", "monthly").lower(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
