"""Vehicle and Telematics classes: the read-only vehicle record."""

from datetime import date
from typing import Optional, Union

from .calculations import to_date


class Telematics:
    """Odometer readings reported by the vehicle's tracker."""

    def __init__(
        self,
        odometer: Optional[float] = None,
        today: Optional[float] = None,
        yesterday: Optional[float] = None,
    ):
        self.odometer = odometer
        self.today = today
        self.yesterday = yesterday

    @property
    def has_history(self) -> bool:
        """True when both daily odometer readings are available."""
        return self.today is not None and self.yesterday is not None


class Vehicle:
    """A fleet vehicle as supplied by the data-access layer."""

    def __init__(
        self,
        vehicle_id: str,
        odometer: Optional[float] = None,
        telematics: Optional[Telematics] = None,
        last_service_date: Optional[Union[date, str]] = None,
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        plate_number: Optional[str] = None,
    ):
        self.vehicle_id = vehicle_id
        self.odometer = odometer
        self.telematics = telematics
        self.last_service_date = to_date(last_service_date)
        self.make = make
        self.model = model
        self.year = year
        self.plate_number = plate_number

    @property
    def current_odometer(self) -> float:
        """Telematics odometer if reported, else the recorded odometer, else 0."""
        if self.telematics and self.telematics.odometer:
            return self.telematics.odometer
        return self.odometer or 0

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        parts = [str(p) for p in (self.year, self.make, self.model) if p]
        base = " ".join(parts) or self.vehicle_id
        return f"{base} ({self.plate_number})" if self.plate_number else base
