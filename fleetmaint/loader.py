"""YAML loading utilities for fleet data files."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .calculations import to_date
from .catalog import DEFAULT_CATALOG, CostRange, with_overrides
from .fleet import Fleet
from .item_type import ItemType
from .log_entry import MaintenanceLogEntry
from .settings import EngineSettings
from .vehicle import Telematics, Vehicle

logger = logging.getLogger(__name__)


class FleetFileError(ValueError):
    """A fleet file is structurally invalid."""


def _parse_date(value: Any, where: str):
    try:
        return to_date(value)
    except (ValueError, OverflowError) as e:
        raise FleetFileError(f"{where}: invalid date {value!r}") from e


def _parse_item_type(label: Any, where: str) -> ItemType:
    item_type = ItemType.from_label(label)
    if item_type is None:
        raise FleetFileError(f"{where}: unknown item type {label!r}")
    return item_type


def _parse_telematics(dct: Dict[str, Any]) -> Telematics:
    history = dct.get("odometerHistory") or {}
    return Telematics(
        dct.get("odometer"),
        history.get("today"),
        history.get("yesterday"),
    )


def _require_mapping(dct: Any, where: str) -> Dict[str, Any]:
    if not isinstance(dct, dict):
        raise FleetFileError(f"{where}: expected a mapping, got {type(dct).__name__}")
    return dct


def _parse_log_entry(dct: Dict[str, Any], where: str) -> MaintenanceLogEntry:
    _require_mapping(dct, where)
    if "date" not in dct or "type" not in dct:
        raise FleetFileError(f"{where}: log entries need 'date' and 'type'")
    if dct.get("itemType"):
        item_type = _parse_item_type(dct["itemType"], where)
    else:
        # Older records only carry free text; tag them when it is an exact label
        item_type = ItemType.from_label(dct["type"])
    return MaintenanceLogEntry(
        _parse_date(dct["date"], where),
        dct["type"],
        item_type,
        dct.get("cost"),
        dct.get("description"),
        dct.get("odometer"),
    )


def _parse_vehicle(dct: Dict[str, Any], where: str) -> Vehicle:
    _require_mapping(dct, where)
    if not dct.get("id"):
        raise FleetFileError(f"{where}: vehicle is missing 'id'")
    telematics = None
    if dct.get("telematics"):
        telematics = _parse_telematics(
            _require_mapping(dct["telematics"], f"{where}.telematics")
        )
    # Records exported from the service app nest the date under maintenance
    maintenance = _require_mapping(dct.get("maintenance") or {}, f"{where}.maintenance")
    last_service = maintenance.get("lastServiceDate") or dct.get("lastServiceDate")
    return Vehicle(
        str(dct["id"]),
        dct.get("odometer"),
        telematics,
        _parse_date(last_service, where),
        dct.get("make"),
        dct.get("model"),
        dct.get("year"),
        dct.get("plateNumber"),
    )


def _parse_catalog_overrides(items: List[Dict[str, Any]]) -> Dict[ItemType, dict]:
    overrides = {}
    for index, dct in enumerate(items):
        where = f"catalog[{index}]"
        _require_mapping(dct, where)
        item_type = _parse_item_type(dct.get("itemType"), where)
        changes = {}
        if dct.get("intervalKm") is not None:
            changes["interval_km"] = dct["intervalKm"]
        if dct.get("intervalMonths") is not None:
            changes["interval_months"] = dct["intervalMonths"]
        if dct.get("cost") is not None:
            changes["cost"] = CostRange(dct["cost"]["min"], dct["cost"]["max"])
        overrides[item_type] = changes
    return overrides


def parse_fleet(data: Dict[str, Any]) -> Fleet:
    """Build a Fleet from an already-parsed fleet document."""
    if not isinstance(data, dict) or "vehicles" not in data:
        raise FleetFileError("fleet file must have a 'vehicles' list")

    try:
        settings = EngineSettings.from_dict(data.get("settings"))
    except (AttributeError, TypeError, ValueError) as e:
        raise FleetFileError(f"settings: {e}") from e

    catalog = DEFAULT_CATALOG
    if data.get("catalog"):
        overrides = _parse_catalog_overrides(data["catalog"])
        catalog = with_overrides(overrides)
        logger.info("Applied %d catalog override(s)", len(overrides))

    vehicles = []
    logs = {}
    for index, dct in enumerate(data["vehicles"] or []):
        where = f"vehicles[{index}]"
        vehicle = _parse_vehicle(dct, where)
        if vehicle.vehicle_id in logs:
            raise FleetFileError(f"{where}: duplicate vehicle id {vehicle.vehicle_id!r}")
        vehicles.append(vehicle)
        logs[vehicle.vehicle_id] = [
            _parse_log_entry(entry, f"{where}.maintenanceLogs[{i}]")
            for i, entry in enumerate(dct.get("maintenanceLogs") or [])
        ]

    return Fleet(vehicles, logs, catalog, settings)


def load_fleet(filename: Union[str, Path]) -> Fleet:
    """Load a fleet from a YAML file."""
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    fleet = parse_fleet(data)
    logger.info("Loaded %d vehicle(s) from %s", len(fleet.vehicles), filename)
    return fleet
