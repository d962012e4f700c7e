"""ItemType enum for the maintenance categories the engine forecasts."""

from enum import Enum
from typing import Optional


class ItemType(Enum):
    """Maintenance categories. Values are the display labels."""

    ENGINE_OIL = "Engine Oil"
    OIL_FILTER = "Oil Filter"
    AIR_FILTER = "Air Filter"
    TIRE_ROTATION = "Tire Rotation"
    BRAKE_INSPECTION = "Brake Inspection"
    BRAKE_REPLACEMENT = "Brake Replacement"
    COOLANT_FLUSH = "Coolant Flush"
    TRANSMISSION_SERVICE = "Transmission Service"
    BATTERY_CHECK = "Battery Check"
    SPARK_PLUGS = "Spark Plugs"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, text: Optional[str]) -> Optional["ItemType"]:
        """
        Resolve a label such as 'engine oil' or 'ENGINE_OIL' to an ItemType.

        Matching is exact after normalizing case, spaces and underscores.
        Returns None when nothing matches.
        """
        if not text:
            return None
        wanted = text.strip().lower().replace("_", " ")
        for item_type in cls:
            if item_type.value.lower() == wanted:
                return item_type
        return None
