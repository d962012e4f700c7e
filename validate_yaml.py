#!/usr/bin/env python3
"""
Check fleet YAML files before the forecaster reads them.

Three layers, each reported separately:
1. YAML syntax and the JSON schema in schema.yaml
2. Loader rules the schema can't express (labels, real dates, unique ids)
3. Odometer consistency, which would otherwise skew usage estimates
"""
import sys
from pathlib import Path
from typing import Optional, Tuple

import yaml
from jsonschema import ValidationError, validate

from fleetmaint import Fleet, FleetFileError, parse_fleet


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    with open(Path(__file__).parent / "schema.yaml") as f:
        return yaml.safe_load(f)


def check_odometers(fleet: Fleet) -> list[str]:
    """Readings that contradict each other within a vehicle."""
    problems = []
    for vehicle in fleet.vehicles:
        telematics = vehicle.telematics
        if telematics is not None and telematics.has_history:
            if telematics.today < telematics.yesterday:
                problems.append(
                    f"{vehicle.vehicle_id}: odometer history runs backwards "
                    f"(today {telematics.today:,}, yesterday {telematics.yesterday:,})"
                )
        current = vehicle.current_odometer
        for entry in fleet.logs_for(vehicle.vehicle_id):
            if entry.odometer is not None and current and entry.odometer > current:
                problems.append(
                    f"{vehicle.vehicle_id}: {entry.type} on {entry.date.isoformat()} "
                    f"logged at {entry.odometer:,} km, past current {current:,} km"
                )
    return problems


def inspect_fleet_file(
    filepath: Path, schema: dict
) -> Tuple[list[str], Optional[Fleet]]:
    """Validate one file; returns (errors, fleet or None if it didn't load)."""
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
        fleet = parse_fleet(data)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"], None
    except ValidationError as e:
        errors = [f"Schema validation error: {e.message}"]
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
        return errors, None
    except FleetFileError as e:
        return [f"Fleet error: {e}"], None
    except OSError as e:
        return [f"Error: {e}"], None

    return [f"Odometer: {p}" for p in check_odometers(fleet)], fleet


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors, _ = inspect_fleet_file(filepath, schema)
    return errors


def describe(fleet: Fleet) -> str:
    log_count = sum(len(entries) for entries in fleet.logs.values())
    return f"{len(fleet.vehicles)} vehicle(s), {log_count} log entry(s)"


def main():
    """Validate all fleet YAML files in the fleets/ directory."""
    schema = load_schema()
    fleets_dir = Path(__file__).parent / "fleets"

    if not fleets_dir.exists():
        print(f"Error: fleets directory not found: {fleets_dir}")
        return 1

    yaml_files = sorted(fleets_dir.glob("*.yaml")) + sorted(fleets_dir.glob("*.yml"))
    if not yaml_files:
        print(f"Warning: No YAML files found in {fleets_dir}")
        return 0

    failed = 0
    for filepath in yaml_files:
        errors, fleet = inspect_fleet_file(filepath, schema)
        if errors:
            failed += 1
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
        else:
            print(f"OK: {filepath.name} ({describe(fleet)})")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
