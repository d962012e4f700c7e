"""EngineSettings dataclass holding the forecasting constants."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .urgency import Urgency


@dataclass(frozen=True)
class EngineSettings:
    """
    Tunable constants for the forecasting engine.

    Defaults are the reference values; a fleet file may override any of them
    through its `settings:` section (camelCase keys).
    """

    # Usage estimation
    default_daily_km: float = 50
    lifetime_share_since_service: float = 0.10

    # No-history fallback
    no_history_days: int = 365

    days_per_month: float = 30
    fallback_next_service_days: int = 30

    # Tier thresholds (days, km); an item lands in the first tier either
    # measure satisfies.
    overdue_days: float = 0
    overdue_km: float = 0
    urgent_days: float = 7
    urgent_km: float = 500
    soon_days: float = 30
    soon_km: float = 2000
    horizon_days: float = 60
    horizon_km: float = 5000

    # Health score deductions per prediction
    overdue_deduction: int = 20
    urgent_deduction: int = 10
    soon_deduction: int = 5
    upcoming_deduction: int = 2

    def __post_init__(self):
        # Both are divisors in the forecaster
        for name in ("default_daily_km", "days_per_month"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{_camel(name)} must be positive")

    @property
    def tiers(self):
        """(urgency, max_days, max_km) ordered from most to least urgent."""
        return (
            (Urgency.OVERDUE, self.overdue_days, self.overdue_km),
            (Urgency.URGENT, self.urgent_days, self.urgent_km),
            (Urgency.SOON, self.soon_days, self.soon_km),
            (Urgency.UPCOMING, self.horizon_days, self.horizon_km),
        )

    def deduction_for(self, urgency: Urgency) -> int:
        return {
            Urgency.OVERDUE: self.overdue_deduction,
            Urgency.URGENT: self.urgent_deduction,
            Urgency.SOON: self.soon_deduction,
            Urgency.UPCOMING: self.upcoming_deduction,
        }[urgency]

    @classmethod
    def from_dict(cls, dct: Optional[Dict[str, Any]]) -> "EngineSettings":
        """Build settings from camelCase keys, e.g. {'defaultDailyKm': 80}."""
        if not dct:
            return cls()
        by_camel = {_camel(f.name): f.name for f in fields(cls)}
        kwargs = {}
        for key, value in dct.items():
            if key not in by_camel:
                raise ValueError(f"Unknown setting '{key}'")
            kwargs[by_camel[key]] = value
        return cls(**kwargs)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


DEFAULT_SETTINGS = EngineSettings()
