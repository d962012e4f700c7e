"""Urgency enum for forecast maintenance items."""

from enum import Enum


class Urgency(Enum):
    """Urgency tiers for a predicted service. Higher priority = more urgent."""

    OVERDUE = "overdue"
    URGENT = "urgent"
    SOON = "soon"
    UPCOMING = "upcoming"

    @property
    def priority(self) -> int:
        return _PRIORITIES[self]


_PRIORITIES = {
    Urgency.OVERDUE: 5,
    Urgency.URGENT: 4,
    Urgency.SOON: 3,
    Urgency.UPCOMING: 2,
}
