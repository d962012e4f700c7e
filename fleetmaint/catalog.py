"""Interval catalog: distance/time intervals and cost ranges per item."""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Optional, Tuple

from .item_type import ItemType


@dataclass(frozen=True)
class CostRange:
    """Estimated cost range in Naira."""

    min: float
    max: float

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class MaintenanceItemDefinition:
    """When a maintenance item falls due and roughly what it costs."""

    item_type: ItemType
    interval_km: float
    interval_months: float
    cost: CostRange

    @property
    def has_time_interval(self) -> bool:
        return bool(self.interval_months) and self.interval_months > 0


DEFAULT_CATALOG: Tuple[MaintenanceItemDefinition, ...] = (
    MaintenanceItemDefinition(ItemType.ENGINE_OIL, 5000, 6, CostRange(8000, 15000)),
    MaintenanceItemDefinition(ItemType.OIL_FILTER, 5000, 6, CostRange(2000, 5000)),
    MaintenanceItemDefinition(ItemType.AIR_FILTER, 15000, 12, CostRange(3000, 6000)),
    MaintenanceItemDefinition(
        ItemType.TIRE_ROTATION, 10000, 12, CostRange(5000, 10000)
    ),
    MaintenanceItemDefinition(
        ItemType.BRAKE_INSPECTION, 15000, 12, CostRange(3000, 5000)
    ),
    MaintenanceItemDefinition(
        ItemType.BRAKE_REPLACEMENT, 50000, 36, CostRange(40000, 80000)
    ),
    MaintenanceItemDefinition(
        ItemType.COOLANT_FLUSH, 40000, 24, CostRange(10000, 20000)
    ),
    MaintenanceItemDefinition(
        ItemType.TRANSMISSION_SERVICE, 60000, 24, CostRange(30000, 60000)
    ),
    MaintenanceItemDefinition(ItemType.BATTERY_CHECK, 20000, 12, CostRange(2000, 3000)),
    MaintenanceItemDefinition(ItemType.SPARK_PLUGS, 50000, 36, CostRange(15000, 30000)),
)


def get_definition(
    item_type: ItemType,
    catalog: Iterable[MaintenanceItemDefinition] = DEFAULT_CATALOG,
) -> Optional[MaintenanceItemDefinition]:
    """Find the catalog entry for an item type."""
    for definition in catalog:
        if definition.item_type == item_type:
            return definition
    return None


def with_overrides(
    overrides: Dict[ItemType, dict],
    catalog: Tuple[MaintenanceItemDefinition, ...] = DEFAULT_CATALOG,
) -> Tuple[MaintenanceItemDefinition, ...]:
    """
    Return a new catalog with selected fields replaced.

    `overrides` maps an item type to any of interval_km, interval_months
    or cost. Entries keep their catalog order; the input catalog is untouched.
    """
    result = []
    for definition in catalog:
        changes = overrides.get(definition.item_type)
        result.append(replace(definition, **changes) if changes else definition)
    return tuple(result)
