"""Schedule aggregation, health scoring and alert generation."""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta

from .calculations import estimate_daily_km, forecast_item, to_date
from .catalog import DEFAULT_CATALOG, MaintenanceItemDefinition
from .log_entry import MaintenanceLogEntry
from .prediction import MaintenancePrediction, MaintenanceSchedule
from .settings import DEFAULT_SETTINGS, EngineSettings
from .urgency import Urgency
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


def calculate_health_score(
    predictions: Iterable[MaintenancePrediction],
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> int:
    """100 minus a deduction per prediction by urgency, clamped to 0..100."""
    score = 100
    for prediction in predictions:
        score -= settings.deduction_for(prediction.urgency)
    return max(0, min(100, score))


def generate_alerts(predictions: Sequence[MaintenancePrediction]) -> List[str]:
    """Summarize overdue and urgent counts; other tiers produce no alert."""
    alerts = []
    overdue = sum(1 for p in predictions if p.urgency == Urgency.OVERDUE)
    urgent = sum(1 for p in predictions if p.urgency == Urgency.URGENT)
    if overdue:
        alerts.append(
            f"{overdue} maintenance item(s) overdue — immediate attention required"
        )
    if urgent:
        alerts.append(f"{urgent} maintenance item(s) due within 7 days")
    return alerts


def predict_vehicle_maintenance(
    vehicle: Vehicle,
    logs: Optional[Iterable[MaintenanceLogEntry]],
    as_of: Union[date, datetime, str],
    catalog: Sequence[MaintenanceItemDefinition] = DEFAULT_CATALOG,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> MaintenanceSchedule:
    """
    Forecast every catalog item for a vehicle and roll up the results.

    `as_of` is the invocation instant; it is read once and every date in the
    schedule is derived from it.
    """
    as_of = to_date(as_of)
    logs = list(logs or [])
    daily_km = estimate_daily_km(vehicle, as_of, settings)

    predictions = []
    for definition in catalog:
        prediction = forecast_item(definition, vehicle, logs, as_of, daily_km, settings)
        if prediction is not None:
            predictions.append(prediction)

    # sorted() is stable, so equal priorities keep catalog order
    predictions = sorted(predictions, key=lambda p: p.priority, reverse=True)

    if predictions:
        next_service_date = predictions[0].recommended_date
    else:
        next_service_date = as_of + relativedelta(
            days=settings.fallback_next_service_days
        )

    logger.debug(
        "%s: %d of %d items within horizon",
        vehicle.vehicle_id,
        len(predictions),
        len(catalog),
    )

    return MaintenanceSchedule(
        next_service_date=next_service_date,
        predictions=predictions,
        health_score=calculate_health_score(predictions, settings),
        alerts=generate_alerts(predictions),
    )
