import math
import os
from dataclasses import dataclass

from finance.accumulation import SAVINGS_GROWTH_RATE
from finance.schemas import PERIODS_PER_YEAR


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    savings_growth_rate: float
    expense_period: str
    log_level: str
    log_json: bool
    timeline_years_max: int


def load_settings() -> Settings:
    raw_growth = os.getenv("FIRE_SAVINGS_GROWTH_RATE", str(SAVINGS_GROWTH_RATE))
    try:
        growth = float(raw_growth)
    except ValueError as exc:
        raise ConfigError(f"FIRE_SAVINGS_GROWTH_RATE must be a number, got {raw_growth!r}") from exc
    if not math.isfinite(growth) or growth <= 0:
        raise ConfigError(f"FIRE_SAVINGS_GROWTH_RATE must be positive and finite, got {growth}")
    period = os.getenv("FIRE_EXPENSE_PERIOD", "monthly").strip().lower()
    if period not in PERIODS_PER_YEAR:
        raise ConfigError(f"FIRE_EXPENSE_PERIOD must be one of {sorted(PERIODS_PER_YEAR)}, got {period!r}")
    raw_timeline = os.getenv("FIRE_TIMELINE_YEARS_MAX", "60")
    try:
        timeline_max = int(raw_timeline)
    except ValueError as exc:
        raise ConfigError(f"FIRE_TIMELINE_YEARS_MAX must be an integer, got {raw_timeline!r}") from exc
    if timeline_max < 1:
        raise ConfigError("FIRE_TIMELINE_YEARS_MAX must be at least 1")
    return Settings(
        savings_growth_rate=growth,
        expense_period=period,
        log_level=os.getenv("FIRE_LOG_LEVEL", "INFO").upper(),
        log_json=os.getenv("FIRE_LOG_JSON", "").lower() in {"1", "true", "yes"},
        timeline_years_max=timeline_max,
    )
