"""Fleet class - the aggregate of vehicles, their logs, catalog and settings."""

from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from .catalog import DEFAULT_CATALOG, MaintenanceItemDefinition
from .log_entry import MaintenanceLogEntry
from .prediction import MaintenanceSchedule
from .scheduler import predict_vehicle_maintenance
from .settings import DEFAULT_SETTINGS, EngineSettings
from .vehicle import Vehicle


class Fleet:
    """Vehicles with their maintenance logs, plus the catalog they run against."""

    def __init__(
        self,
        vehicles: List[Vehicle],
        logs: Optional[Dict[str, List[MaintenanceLogEntry]]] = None,
        catalog: Sequence[MaintenanceItemDefinition] = DEFAULT_CATALOG,
        settings: EngineSettings = DEFAULT_SETTINGS,
    ):
        self.vehicles = vehicles
        self.logs = logs or {}
        self.catalog = tuple(catalog)
        self.settings = settings

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        """Find a vehicle by id."""
        for vehicle in self.vehicles:
            if vehicle.vehicle_id == vehicle_id:
                return vehicle
        return None

    def logs_for(self, vehicle_id: str) -> List[MaintenanceLogEntry]:
        """Maintenance logs for a vehicle, newest first."""
        entries = self.logs.get(vehicle_id, [])
        return sorted(entries, key=lambda e: e.date, reverse=True)

    def schedule_for(self, vehicle: Vehicle, as_of: date) -> MaintenanceSchedule:
        """Run the forecasting engine for one vehicle."""
        return predict_vehicle_maintenance(
            vehicle,
            self.logs.get(vehicle.vehicle_id, []),
            as_of,
            catalog=self.catalog,
            settings=self.settings,
        )

    def schedules(self, as_of: date) -> List[Tuple[Vehicle, MaintenanceSchedule]]:
        """Schedules for every vehicle, in fleet order."""
        return [(v, self.schedule_for(v, as_of)) for v in self.vehicles]

    def average_health(self, as_of: date) -> Optional[float]:
        """Mean health score across the fleet, or None for an empty fleet."""
        if not self.vehicles:
            return None
        scores = [schedule.health_score for _, schedule in self.schedules(as_of)]
        return sum(scores) / len(scores)
