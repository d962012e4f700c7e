"""Helper functions for usage estimation and per-item forecasting."""

import logging
import math
from datetime import date, datetime
from typing import TYPE_CHECKING, Iterable, Optional, Union

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from .catalog import MaintenanceItemDefinition
from .item_type import ItemType
from .prediction import MaintenancePrediction
from .settings import DEFAULT_SETTINGS, EngineSettings
from .urgency import Urgency

if TYPE_CHECKING:
    from .log_entry import MaintenanceLogEntry
    from .vehicle import Vehicle

logger = logging.getLogger(__name__)


def to_date(value: Optional[Union[date, datetime, str]]) -> Optional[date]:
    """Coerce a date, datetime or ISO 8601 string to a date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return isoparse(str(value)).date()


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative if end is earlier)."""
    return (end - start).days


def estimate_daily_km(
    vehicle: "Vehicle", as_of: date, settings: EngineSettings = DEFAULT_SETTINGS
) -> float:
    """
    Estimate average daily distance for a vehicle. Always > 0.

    - Telematics: today - yesterday odometer, when positive
    - Last service date: lifetime share of the odometer spread over the
      days since that service
    - Otherwise: the default commercial-vehicle baseline
    """
    as_of = to_date(as_of)
    telematics = vehicle.telematics
    if telematics is not None and telematics.has_history:
        daily_km = telematics.today - telematics.yesterday
        if daily_km > 0:
            logger.debug("%s: %.1f km/day from telematics", vehicle.vehicle_id, daily_km)
            return daily_km
        logger.debug(
            "%s: ignoring non-positive telematics delta %.1f",
            vehicle.vehicle_id,
            daily_km,
        )

    if vehicle.last_service_date is not None:
        days = days_between(vehicle.last_service_date, as_of)
        if days > 0:
            daily_km = (
                vehicle.current_odometer * settings.lifetime_share_since_service / days
            )
            if daily_km > 0:
                logger.debug(
                    "%s: %.1f km/day estimated from last service",
                    vehicle.vehicle_id,
                    daily_km,
                )
                return daily_km

    logger.debug(
        "%s: using default %.1f km/day", vehicle.vehicle_id, settings.default_daily_km
    )
    return settings.default_daily_km


def find_last_service(
    logs: Iterable["MaintenanceLogEntry"], item_type: ItemType
) -> Optional["MaintenanceLogEntry"]:
    """Most recent log entry recording work on the item, or None."""
    matching = [entry for entry in logs if entry.matches(item_type)]
    if not matching:
        return None
    return max(matching, key=lambda entry: entry.date)


def classify_urgency(
    days_until_due: float,
    km_until_due: float,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> Optional[Urgency]:
    """First tier whose day or km threshold is met; None beyond the horizon."""
    for urgency, max_days, max_km in settings.tiers:
        if days_until_due <= max_days or km_until_due <= max_km:
            return urgency
    return None


def format_reason(
    km_until_due: float,
    days_until_due: float,
    days_by_km: float,
    days_by_time: Optional[float],
) -> str:
    """Explain a prediction, e.g. 'Overdue by 1,200 km' or 'Due in 12 days'."""
    km_past_due = km_until_due <= 0
    time_past_due = days_by_time is not None and days_by_time <= 0
    km_text = f"{abs(math.floor(km_until_due)):,}"
    days_text = abs(math.floor(days_until_due))

    if km_past_due and time_past_due:
        return f"Overdue by {km_text} km and {days_text} days"
    if km_past_due:
        return f"Overdue by {km_text} km"
    if time_past_due:
        return f"Overdue by {days_text} days"
    if days_by_time is None or days_by_km < days_by_time:
        return f"Due in {math.floor(km_until_due):,} km"
    return f"Due in {math.floor(days_until_due)} days"


def forecast_item(
    definition: MaintenanceItemDefinition,
    vehicle: "Vehicle",
    logs: Iterable["MaintenanceLogEntry"],
    as_of: date,
    daily_km: float,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> Optional[MaintenancePrediction]:
    """
    Forecast when one maintenance item falls due.

    Logic:
    - Baseline is the most recent matching log entry, else the vehicle's
      last service date
    - With a baseline: distance since = daily_km * days since baseline
    - Without one: assume a year has passed and the whole odometer counts
    - Due whenever distance or time runs out, whichever comes first
    - Returns None when the item is beyond the forecasting horizon
    """
    as_of = to_date(as_of)
    current_odometer = vehicle.current_odometer

    last_service = find_last_service(logs, definition.item_type)
    if last_service is not None:
        baseline = last_service.date
    else:
        baseline = vehicle.last_service_date

    if baseline is not None:
        days_since = max(0, days_between(baseline, as_of))
        km_since = daily_km * days_since
    else:
        days_since = settings.no_history_days
        km_since = current_odometer

    km_until_due = definition.interval_km - km_since
    days_by_km = km_until_due / daily_km

    days_by_time = None
    if definition.has_time_interval:
        months_since = days_since / settings.days_per_month
        days_by_time = (
            definition.interval_months - months_since
        ) * settings.days_per_month

    if days_by_time is None:
        days_until_due = days_by_km
    else:
        days_until_due = min(days_by_km, days_by_time)

    urgency = classify_urgency(days_until_due, km_until_due, settings)
    if urgency is None:
        logger.debug(
            "%s: %s beyond horizon (%.0f days, %.0f km)",
            vehicle.vehicle_id,
            definition.item_type.label,
            days_until_due,
            km_until_due,
        )
        return None

    recommended_date = as_of + relativedelta(
        days=max(0, math.floor(days_until_due))
    )

    return MaintenancePrediction(
        item_type=definition.item_type,
        urgency=urgency,
        reason=format_reason(km_until_due, days_until_due, days_by_km, days_by_time),
        recommended_date=recommended_date,
        estimated_odometer=round(current_odometer + max(0, km_until_due)),
        days_until_due=math.floor(days_until_due),
        km_until_due=math.floor(km_until_due),
        priority=urgency.priority,
        estimated_cost=definition.cost,
    )
