"""
Fleet maintenance forecasting.

This package predicts when fleet vehicles need maintenance:
- ItemType: The ten maintenance categories
- Urgency: Urgency tiers (OVERDUE, URGENT, SOON, UPCOMING)
- MaintenanceItemDefinition: Interval catalog entries
- Vehicle, Telematics: Vehicle records
- MaintenanceLogEntry: Service records
- MaintenancePrediction, MaintenanceSchedule: Engine output
- Fleet: Aggregate of vehicles, logs, catalog and settings
"""

from .urgency import Urgency
from .item_type import ItemType
from .settings import EngineSettings, DEFAULT_SETTINGS
from .catalog import (
    CostRange,
    MaintenanceItemDefinition,
    DEFAULT_CATALOG,
    get_definition,
    with_overrides,
)
from .vehicle import Vehicle, Telematics
from .log_entry import MaintenanceLogEntry
from .prediction import MaintenancePrediction, MaintenanceSchedule
from .calculations import (
    to_date,
    estimate_daily_km,
    find_last_service,
    classify_urgency,
    format_reason,
    forecast_item,
)
from .scheduler import (
    calculate_health_score,
    generate_alerts,
    predict_vehicle_maintenance,
)
from .notifications import build_maintenance_notifications, format_naira
from .fleet import Fleet
from .loader import FleetFileError, load_fleet, parse_fleet

__all__ = [
    "Urgency",
    "ItemType",
    "EngineSettings",
    "DEFAULT_SETTINGS",
    "CostRange",
    "MaintenanceItemDefinition",
    "DEFAULT_CATALOG",
    "get_definition",
    "with_overrides",
    "Vehicle",
    "Telematics",
    "MaintenanceLogEntry",
    "MaintenancePrediction",
    "MaintenanceSchedule",
    "to_date",
    "estimate_daily_km",
    "find_last_service",
    "classify_urgency",
    "format_reason",
    "forecast_item",
    "calculate_health_score",
    "generate_alerts",
    "predict_vehicle_maintenance",
    "build_maintenance_notifications",
    "format_naira",
    "Fleet",
    "FleetFileError",
    "load_fleet",
    "parse_fleet",
]
