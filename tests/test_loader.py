#!/usr/bin/env python3
"""Tests for YAML fleet loading."""
from datetime import date

import pytest

from fleetmaint import (
    DEFAULT_SETTINGS,
    CostRange,
    Fleet,
    FleetFileError,
    ItemType,
    MaintenanceLogEntry,
    Vehicle,
    get_definition,
    load_fleet,
    parse_fleet,
)

# =============================================================================
# load_fleet tests
# =============================================================================


class TestLoadFleet:
    """Tests for load_fleet function."""

    def test_loads_minimal_fleet(self, tmp_path):
        """Load a minimal valid fleet file."""
        yaml_content = """
vehicles:
  - id: VAN-1
    make: Toyota
    model: Hiace
    year: 2019
    odometer: 50000
"""
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text(yaml_content)

        fleet = load_fleet(yaml_file)

        assert isinstance(fleet, Fleet)
        assert len(fleet.vehicles) == 1
        vehicle = fleet.vehicles[0]
        assert isinstance(vehicle, Vehicle)
        assert vehicle.vehicle_id == "VAN-1"
        assert vehicle.make == "Toyota"
        assert vehicle.year == 2019
        assert vehicle.current_odometer == 50000
        assert vehicle.telematics is None
        assert vehicle.last_service_date is None
        assert fleet.logs_for("VAN-1") == []
        assert fleet.settings == DEFAULT_SETTINGS
        assert get_definition(ItemType.ENGINE_OIL, fleet.catalog).interval_km == 5000

    def test_loads_telematics_and_logs(self, tmp_path):
        """Load a vehicle with telematics and a maintenance log."""
        yaml_content = """
vehicles:
  - id: VAN-1
    odometer: 84210
    lastServiceDate: '2025-03-02'
    telematics:
      odometer: 84390
      odometerHistory:
        today: 84390
        yesterday: 84250
    maintenanceLogs:
      - date: '2025-03-02'
        type: Service
        itemType: Engine Oil
        cost: 12500
        description: Oil change
        odometer: 80100
      - date: 2024-11-18
        type: Brake Inspection
      - date: '2024-10-01'
        type: Air Filter Housing Repair
"""
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text(yaml_content)

        fleet = load_fleet(yaml_file)

        vehicle = fleet.get_vehicle("VAN-1")
        assert vehicle.last_service_date == date(2025, 3, 2)
        assert vehicle.current_odometer == 84390
        assert vehicle.telematics.today == 84390
        assert vehicle.telematics.yesterday == 84250

        logs = fleet.logs["VAN-1"]
        assert len(logs) == 3
        assert all(isinstance(e, MaintenanceLogEntry) for e in logs)
        assert logs[0].item_type == ItemType.ENGINE_OIL
        assert logs[0].cost == 12500
        assert logs[0].odometer == 80100
        # Unquoted YAML date
        assert logs[1].date == date(2024, 11, 18)
        # Exact label in free text is tagged on import
        assert logs[1].item_type == ItemType.BRAKE_INSPECTION
        # Anything else stays untagged
        assert logs[2].item_type is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_fleet(tmp_path / "nope.yaml")


# =============================================================================
# parse_fleet tests
# =============================================================================


class TestParseFleet:
    """Tests for parse_fleet validation and overrides."""

    def test_settings_override(self):
        fleet = parse_fleet({"settings": {"defaultDailyKm": 80}, "vehicles": []})
        assert fleet.settings.default_daily_km == 80
        assert fleet.settings.horizon_days == 60

    def test_catalog_override(self):
        fleet = parse_fleet(
            {
                "catalog": [
                    {
                        "itemType": "Engine Oil",
                        "intervalKm": 7500,
                        "cost": {"min": 9000, "max": 18000},
                    }
                ],
                "vehicles": [],
            }
        )
        oil = get_definition(ItemType.ENGINE_OIL, fleet.catalog)
        assert oil.interval_km == 7500
        assert oil.interval_months == 6
        assert oil.cost == CostRange(9000, 18000)
        assert get_definition(ItemType.ENGINE_OIL).interval_km == 5000

    def test_missing_vehicles(self):
        with pytest.raises(FleetFileError, match="vehicles"):
            parse_fleet({"settings": {}})

    def test_not_a_mapping(self):
        with pytest.raises(FleetFileError):
            parse_fleet(None)

    def test_vehicle_without_id(self):
        with pytest.raises(FleetFileError, match=r"vehicles\[0\]"):
            parse_fleet({"vehicles": [{"odometer": 100}]})

    def test_duplicate_vehicle_id(self):
        with pytest.raises(FleetFileError, match="duplicate"):
            parse_fleet({"vehicles": [{"id": "VAN-1"}, {"id": "VAN-1"}]})

    def test_unknown_item_type(self):
        data = {
            "vehicles": [
                {
                    "id": "VAN-1",
                    "maintenanceLogs": [
                        {"date": "2025-01-01", "type": "Service", "itemType": "Wipers"}
                    ],
                }
            ]
        }
        with pytest.raises(FleetFileError, match="Wipers"):
            parse_fleet(data)

    def test_unknown_catalog_item(self):
        with pytest.raises(FleetFileError, match=r"catalog\[0\]"):
            parse_fleet({"catalog": [{"itemType": "Wipers"}], "vehicles": []})

    def test_unknown_setting(self):
        with pytest.raises(FleetFileError, match="settings"):
            parse_fleet({"settings": {"horizonMiles": 3000}, "vehicles": []})

    def test_invalid_date(self):
        data = {"vehicles": [{"id": "VAN-1", "lastServiceDate": "someday"}]}
        with pytest.raises(FleetFileError, match="invalid date"):
            parse_fleet(data)

    def test_log_missing_type(self):
        data = {"vehicles": [{"id": "VAN-1", "maintenanceLogs": [{"date": "2025-01-01"}]}]}
        with pytest.raises(FleetFileError, match="maintenanceLogs"):
            parse_fleet(data)

    def test_numeric_id_becomes_string(self):
        fleet = parse_fleet({"vehicles": [{"id": 42}]})
        assert fleet.get_vehicle("42") is not None

    def test_nested_last_service_date(self):
        data = {
            "vehicles": [
                {"id": "VAN-1", "maintenance": {"lastServiceDate": "2025-02-14"}}
            ]
        }
        vehicle = parse_fleet(data).get_vehicle("VAN-1")
        assert vehicle.last_service_date == date(2025, 2, 14)

    def test_nested_last_service_date_wins(self):
        data = {
            "vehicles": [
                {
                    "id": "VAN-1",
                    "lastServiceDate": "2024-12-01",
                    "maintenance": {"lastServiceDate": "2025-02-14"},
                }
            ]
        }
        vehicle = parse_fleet(data).get_vehicle("VAN-1")
        assert vehicle.last_service_date == date(2025, 2, 14)

    def test_top_level_last_service_date_when_nested_empty(self):
        data = {
            "vehicles": [
                {"id": "VAN-1", "lastServiceDate": "2024-12-01", "maintenance": {}}
            ]
        }
        vehicle = parse_fleet(data).get_vehicle("VAN-1")
        assert vehicle.last_service_date == date(2024, 12, 1)

    @pytest.mark.parametrize(
        "data, where",
        [
            ({"vehicles": ["VAN-1"]}, r"vehicles\[0\]"),
            ({"vehicles": [{"id": "VAN-1", "maintenanceLogs": ["oil"]}]},
             r"maintenanceLogs\[0\]"),
            ({"vehicles": [{"id": "VAN-1", "telematics": 84000}]}, "telematics"),
            ({"vehicles": [{"id": "VAN-1", "maintenance": "2025-01-01"}]},
             "maintenance"),
            ({"catalog": ["Engine Oil"], "vehicles": []}, r"catalog\[0\]"),
        ],
    )
    def test_non_mapping_entries(self, data, where):
        with pytest.raises(FleetFileError, match=where):
            parse_fleet(data)

    @pytest.mark.parametrize("key", ["defaultDailyKm", "daysPerMonth"])
    def test_zero_divisor_setting(self, key):
        with pytest.raises(FleetFileError, match=key):
            parse_fleet({"settings": {key: 0}, "vehicles": [{"id": "VAN-1"}]})
