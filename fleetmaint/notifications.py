"""Notification payloads for overdue and urgent predictions."""

from typing import Iterable, List

from .prediction import MaintenancePrediction
from .urgency import Urgency


def format_naira(amount: float) -> str:
    """Format an amount as Naira, e.g. '₦15,000'."""
    return f"₦{amount:,.0f}"


def build_maintenance_notifications(
    vehicle_id: str,
    vehicle_name: str,
    predictions: Iterable[MaintenancePrediction],
) -> List[dict]:
    """
    Build one notification payload per overdue or urgent prediction.

    Delivery (in-app, SMS, push) is up to the caller.
    """
    notifications = []
    for prediction in predictions:
        if not prediction.is_urgent:
            continue
        overdue = prediction.urgency == Urgency.OVERDUE
        label = "Overdue" if overdue else "Urgent"
        cost = prediction.estimated_cost
        notifications.append(
            {
                "vehicleId": vehicle_id,
                "title": f"{label}: {prediction.item_type.label} - {vehicle_name}",
                "message": (
                    f"{prediction.reason}. Estimated cost: "
                    f"{format_naira(cost.min)} - {format_naira(cost.max)}"
                ),
                "type": "warning" if overdue else "info",
                "priority": prediction.priority,
                "dueDate": prediction.recommended_date.isoformat(),
            }
        )
    return notifications
