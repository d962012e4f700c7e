"""Flask JSON API for fleet maintenance forecasting."""

import os
from datetime import date
from pathlib import Path

from flask import Flask, abort, jsonify, request

from fleetmaint import (
    FleetFileError,
    Urgency,
    build_maintenance_notifications,
    estimate_daily_km,
    load_fleet,
    to_date,
)

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")

# Fleet file (relative to project root unless FLEET_FILE is set)
app.config["FLEET_FILE"] = os.environ.get(
    "FLEET_FILE", str(Path(__file__).parent.parent / "fleets" / "demo.yaml")
)


def get_fleet():
    """Load the configured fleet file."""
    return load_fleet(app.config["FLEET_FILE"])


def get_as_of() -> date:
    """Forecast date from ?asOf=YYYY-MM-DD, defaulting to today."""
    value = request.args.get("asOf")
    try:
        return to_date(value) or date.today()
    except ValueError:
        abort(400, description=f"Invalid asOf date: {value}")


def get_vehicle_or_404(fleet, vehicle_id: str):
    vehicle = fleet.get_vehicle(vehicle_id)
    if vehicle is None:
        abort(404, description=f"Vehicle '{vehicle_id}' not found")
    return vehicle


@app.errorhandler(400)
@app.errorhandler(404)
def json_error(error):
    return jsonify({"error": error.description}), error.code


@app.errorhandler(FleetFileError)
def fleet_file_error(error):
    return jsonify({"error": str(error)}), 500


@app.route("/api/vehicles")
def list_vehicles():
    """Every vehicle with its health summary."""
    fleet = get_fleet()
    as_of = get_as_of()

    vehicles = []
    for vehicle, schedule in fleet.schedules(as_of):
        vehicles.append({
            "id": vehicle.vehicle_id,
            "name": vehicle.name,
            "odometer": vehicle.current_odometer,
            "healthScore": schedule.health_score,
            "overdue": schedule.count(Urgency.OVERDUE),
            "urgent": schedule.count(Urgency.URGENT),
            "nextServiceDate": schedule.next_service_date.isoformat(),
        })

    return jsonify({
        "asOf": as_of.isoformat(),
        "averageHealth": fleet.average_health(as_of),
        "vehicles": vehicles,
    })


@app.route("/api/vehicles/<vehicle_id>/schedule")
def vehicle_schedule(vehicle_id: str):
    """Maintenance schedule for one vehicle, optionally filtered by urgency."""
    fleet = get_fleet()
    vehicle = get_vehicle_or_404(fleet, vehicle_id)
    as_of = get_as_of()

    schedule = fleet.schedule_for(vehicle, as_of)
    result = schedule.to_dict()

    # Filter the listed predictions only; score and alerts cover everything
    urgency_filter = request.args.get("urgency", "").lower() or None
    if urgency_filter:
        try:
            wanted = Urgency(urgency_filter)
        except ValueError:
            abort(400, description=f"Unknown urgency: {urgency_filter}")
        result["predictions"] = [
            p.to_dict() for p in schedule.predictions if p.urgency == wanted
        ]

    result["vehicleId"] = vehicle.vehicle_id
    result["asOf"] = as_of.isoformat()
    result["dailyKm"] = estimate_daily_km(vehicle, as_of, fleet.settings)
    return jsonify(result)


@app.route("/api/vehicles/<vehicle_id>/notifications")
def vehicle_notifications(vehicle_id: str):
    """Notification payloads for a vehicle's overdue and urgent items."""
    fleet = get_fleet()
    vehicle = get_vehicle_or_404(fleet, vehicle_id)
    schedule = fleet.schedule_for(vehicle, get_as_of())
    return jsonify(
        build_maintenance_notifications(
            vehicle.vehicle_id, vehicle.name, schedule.predictions
        )
    )


@app.route("/api/catalog")
def catalog():
    """Maintenance intervals and cost ranges in effect for the fleet."""
    fleet = get_fleet()
    return jsonify([
        {
            "type": d.item_type.label,
            "intervalKm": d.interval_km,
            "intervalMonths": d.interval_months,
            "estimatedCost": d.cost.to_dict(),
        }
        for d in fleet.catalog
    ])


if __name__ == "__main__":
    # Run with debug mode for development
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
