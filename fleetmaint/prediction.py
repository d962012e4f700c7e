"""MaintenancePrediction and MaintenanceSchedule dataclasses."""

from dataclasses import dataclass, field
from datetime import date
from typing import List

from .catalog import CostRange
from .item_type import ItemType
from .urgency import Urgency


@dataclass(frozen=True)
class MaintenancePrediction:
    """Forecast for one maintenance item within the horizon."""

    item_type: ItemType
    urgency: Urgency
    reason: str
    recommended_date: date
    estimated_odometer: int
    days_until_due: int
    km_until_due: int
    priority: int
    estimated_cost: CostRange

    @property
    def is_urgent(self) -> bool:
        return self.urgency in (Urgency.OVERDUE, Urgency.URGENT)

    def to_dict(self) -> dict:
        return {
            "type": self.item_type.label,
            "urgency": self.urgency.value,
            "reason": self.reason,
            "recommendedDate": self.recommended_date.isoformat(),
            "estimatedOdometer": self.estimated_odometer,
            "daysUntilDue": self.days_until_due,
            "kmUntilDue": self.km_until_due,
            "priority": self.priority,
            "estimatedCost": self.estimated_cost.to_dict(),
        }


@dataclass(frozen=True)
class MaintenanceSchedule:
    """Everything the engine returns for one vehicle."""

    next_service_date: date
    predictions: List[MaintenancePrediction] = field(default_factory=list)
    health_score: int = 100
    alerts: List[str] = field(default_factory=list)

    def count(self, urgency: Urgency) -> int:
        return sum(1 for p in self.predictions if p.urgency == urgency)

    def to_dict(self) -> dict:
        return {
            "nextServiceDate": self.next_service_date.isoformat(),
            "predictions": [p.to_dict() for p in self.predictions],
            "healthScore": self.health_score,
            "alerts": list(self.alerts),
        }
