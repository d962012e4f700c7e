"""MaintenanceLogEntry class for recorded maintenance work."""

from datetime import date
from typing import Optional, Union

from .calculations import to_date
from .item_type import ItemType


class MaintenanceLogEntry:
    """A record of maintenance performed on a vehicle."""

    def __init__(
        self,
        date: Union[date, str],
        type: str,
        item_type: Optional[ItemType] = None,
        cost: Optional[float] = None,
        description: Optional[str] = None,
        odometer: Optional[float] = None,
    ):
        self.date = to_date(date)
        self.type = type
        self.item_type = item_type
        self.cost = cost
        self.description = description
        self.odometer = odometer

    def matches(self, item_type: ItemType) -> bool:
        """
        Check whether this entry records work on the given item.

        Tagged entries match on the tag only. Untagged entries (older
        imports) fall back to a case-insensitive substring match of the
        free-text type against the item label.
        """
        if self.item_type is not None:
            return self.item_type == item_type
        return item_type.label.lower() in (self.type or "").lower()
