#!/usr/bin/env python3
"""
Unified CLI for fleet maintenance forecasting.

Commands:
  schedule - Show predicted maintenance for one or all vehicles
  fleet    - Show a health summary for every vehicle
  catalog  - List maintenance intervals and cost ranges
  history  - View a vehicle's maintenance log
  notify   - Show notifications for overdue and urgent items
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from fleetmaint import (
    CostRange,
    FleetFileError,
    MaintenanceLogEntry,
    MaintenancePrediction,
    MaintenanceSchedule,
    Urgency,
    build_maintenance_notifications,
    estimate_daily_km,
    format_naira,
    load_fleet,
    to_date,
)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_km(km: Optional[float]) -> str:
    """Format distance for display."""
    return f"{km:,.0f}" if km is not None else "-"


def format_cost(cost: Optional[float]) -> str:
    """Format cost for display."""
    return format_naira(cost) if cost is not None else "-"


def format_cost_range(cost: CostRange) -> str:
    """Format a cost range for display (e.g., '₦8,000 - ₦15,000')."""
    return f"{format_naira(cost.min)} - {format_naira(cost.max)}"


def format_days(days: int) -> str:
    """Format days until due (e.g., '3mo 15d' or '-2mo 5d')."""
    sign = "-" if days < 0 else ""
    days = abs(days)
    months = days // 30
    remaining_days = days % 30
    if months > 0:
        return f"{sign}{months}mo {remaining_days}d"
    return f"{sign}{days}d"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


# =============================================================================
# Schedule command
# =============================================================================


def make_schedule_table(predictions: List[MaintenancePrediction]) -> List[List[str]]:
    """Convert predictions to table rows."""
    rows = []
    for p in predictions:
        rows.append(
            [
                p.item_type.label,
                p.urgency.value.upper(),
                p.priority,
                p.reason,
                p.recommended_date.isoformat(),
                format_km(p.km_until_due),
                format_days(p.days_until_due),
                format_cost_range(p.estimated_cost),
            ]
        )
    return rows


def print_schedule(vehicle, schedule: MaintenanceSchedule, daily_km: float):
    """Print one vehicle's schedule."""
    print(f"Vehicle: {vehicle.name} [{vehicle.vehicle_id}]")
    print(f"Odometer: {format_km(vehicle.current_odometer)} km")
    print(f"Usage: {daily_km:,.1f} km/day")
    print(f"Health score: {schedule.health_score}/100")
    print(f"Next service: {schedule.next_service_date.isoformat()}")
    for alert in schedule.alerts:
        print(f"  ! {alert}")
    print()

    if not schedule.predictions:
        print("Nothing due within the forecasting horizon.")
        print()
        return

    headers = [
        "Item",
        "Urgency",
        "Priority",
        "Reason",
        "Recommended",
        "Remaining (km)",
        "Remaining (time)",
        "Est. Cost",
    ]
    print(
        tabulate(
            make_schedule_table(schedule.predictions),
            headers=headers,
            tablefmt="simple",
        )
    )
    print()


def cmd_schedule(args, fleet, as_of: date):
    """Show predicted maintenance for one or all vehicles."""
    if args.vehicle:
        vehicle = fleet.get_vehicle(args.vehicle)
        if vehicle is None:
            print(f"Error: Unknown vehicle '{args.vehicle}'")
            return 1
        vehicles = [vehicle]
    else:
        vehicles = fleet.vehicles

    if args.json:
        output = {
            v.vehicle_id: fleet.schedule_for(v, as_of).to_dict() for v in vehicles
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    print(f"As of: {as_of.isoformat()}")
    print()
    for vehicle in vehicles:
        schedule = fleet.schedule_for(vehicle, as_of)
        daily_km = estimate_daily_km(vehicle, as_of, fleet.settings)
        print_schedule(vehicle, schedule, daily_km)

    return 0


# =============================================================================
# Fleet command
# =============================================================================


def make_fleet_table(fleet, as_of: date) -> List[List[str]]:
    """Summarize every vehicle's schedule as table rows."""
    rows = []
    for vehicle, schedule in fleet.schedules(as_of):
        rows.append(
            [
                vehicle.vehicle_id,
                vehicle.name,
                format_km(vehicle.current_odometer),
                schedule.health_score,
                schedule.count(Urgency.OVERDUE),
                schedule.count(Urgency.URGENT),
                schedule.next_service_date.isoformat(),
            ]
        )
    # Least healthy first
    rows.sort(key=lambda r: r[3])
    return rows


def cmd_fleet(args, fleet, as_of: date):
    """Show a health summary for every vehicle."""
    print(f"As of: {as_of.isoformat()}")
    print(f"Vehicles: {len(fleet.vehicles)}")
    average = fleet.average_health(as_of)
    if average is not None:
        print(f"Average health: {average:.0f}/100")
    print()

    if not fleet.vehicles:
        print("No vehicles found.")
        return 0

    headers = ["ID", "Vehicle", "Odometer", "Health", "Overdue", "Urgent", "Next"]
    print(tabulate(make_fleet_table(fleet, as_of), headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Catalog command
# =============================================================================


def cmd_catalog(args, fleet, as_of: date):
    """List maintenance intervals and cost ranges."""
    rows = []
    for definition in fleet.catalog:
        interval = [f"{definition.interval_km:,.0f} km"]
        if definition.has_time_interval:
            interval.append(f"{definition.interval_months:g} mo")
        rows.append(
            [
                definition.item_type.label,
                " / ".join(interval),
                format_cost_range(definition.cost),
            ]
        )

    headers = ["Item", "Interval", "Est. Cost"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# History command
# =============================================================================


def make_history_table(entries: List[MaintenanceLogEntry]) -> List[List[str]]:
    """Convert log entries to table rows."""
    rows = []
    for entry in entries:
        rows.append(
            [
                entry.date.isoformat(),
                entry.type,
                entry.item_type.label if entry.item_type else "-",
                format_km(entry.odometer),
                format_cost(entry.cost),
                truncate(entry.description),
            ]
        )
    return rows


def cmd_history(args, fleet, as_of: date):
    """View a vehicle's maintenance log."""
    vehicle = fleet.get_vehicle(args.vehicle)
    if vehicle is None:
        print(f"Error: Unknown vehicle '{args.vehicle}'")
        return 1

    entries = fleet.logs_for(vehicle.vehicle_id)
    if args.item:
        needle = args.item.lower()
        entries = [
            e
            for e in entries
            if needle in e.type.lower()
            or (e.item_type and needle in e.item_type.label.lower())
        ]

    total_cost = sum(e.cost for e in entries if e.cost is not None)

    print(f"Vehicle: {vehicle.name} [{vehicle.vehicle_id}]")
    if vehicle.last_service_date:
        print(f"Last service: {vehicle.last_service_date.isoformat()}")
    print(f"Log entries: {len(entries)}")
    if total_cost > 0:
        print(f"Total cost: {format_naira(total_cost)}")
    print()

    if not entries:
        print("No log entries found.")
        return 0

    headers = ["Date", "Type", "Item", "Odometer", "Cost", "Description"]
    print(tabulate(make_history_table(entries), headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Notify command
# =============================================================================


def cmd_notify(args, fleet, as_of: date):
    """Show notifications for overdue and urgent items."""
    notifications = []
    for vehicle, schedule in fleet.schedules(as_of):
        if args.vehicle and vehicle.vehicle_id != args.vehicle:
            continue
        notifications.extend(
            build_maintenance_notifications(
                vehicle.vehicle_id, vehicle.name, schedule.predictions
            )
        )

    if args.json:
        print(json.dumps(notifications, indent=2, ensure_ascii=False))
        return 0

    if not notifications:
        print("No overdue or urgent maintenance.")
        return 0

    for n in sorted(notifications, key=lambda n: n["priority"], reverse=True):
        print(n["title"])
        print(f"  {n['message']}")
    return 0


# =============================================================================
# Main
# =============================================================================


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Fleet maintenance forecaster",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleets/demo.yaml schedule
  %(prog)s fleets/demo.yaml schedule --vehicle VH-001 --as-of 2025-06-01
  %(prog)s fleets/demo.yaml schedule --json
  %(prog)s fleets/demo.yaml fleet
  %(prog)s fleets/demo.yaml catalog
  %(prog)s fleets/demo.yaml history --vehicle VH-001 --item oil
  %(prog)s fleets/demo.yaml notify
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )
    parser.add_argument(
        "--as-of",
        type=str,
        help="Forecast date in YYYY-MM-DD format (default: today)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log engine decisions to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    schedule_parser = subparsers.add_parser(
        "schedule", help="Show predicted maintenance for one or all vehicles"
    )
    schedule_parser.add_argument("--vehicle", type=str, help="Vehicle ID")
    schedule_parser.add_argument(
        "--json", action="store_true", help="Print schedules as JSON"
    )

    subparsers.add_parser("fleet", help="Show a health summary for every vehicle")
    subparsers.add_parser("catalog", help="List maintenance intervals and costs")

    history_parser = subparsers.add_parser(
        "history", help="View a vehicle's maintenance log"
    )
    history_parser.add_argument("--vehicle", type=str, required=True, help="Vehicle ID")
    history_parser.add_argument(
        "--item",
        type=str,
        help="Filter to entries containing text (case-insensitive, e.g., 'oil')",
    )

    notify_parser = subparsers.add_parser(
        "notify", help="Show notifications for overdue and urgent items"
    )
    notify_parser.add_argument("--vehicle", type=str, help="Vehicle ID")
    notify_parser.add_argument(
        "--json", action="store_true", help="Print notifications as JSON"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    try:
        as_of = to_date(args.as_of) or date.today()
    except ValueError:
        print(f"Error: Invalid date: {args.as_of}")
        return 1

    try:
        fleet = load_fleet(args.fleet_file)
    except FleetFileError as e:
        print(f"Error: {e}")
        return 1

    # Dispatch to command handler
    if args.command == "schedule":
        return cmd_schedule(args, fleet, as_of)
    elif args.command == "fleet":
        return cmd_fleet(args, fleet, as_of)
    elif args.command == "catalog":
        return cmd_catalog(args, fleet, as_of)
    elif args.command == "history":
        return cmd_history(args, fleet, as_of)
    elif args.command == "notify":
        return cmd_notify(args, fleet, as_of)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
