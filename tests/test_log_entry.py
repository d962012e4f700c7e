#!/usr/bin/env python3
"""Tests for MaintenanceLogEntry class."""
from datetime import date

from fleetmaint import ItemType, MaintenanceLogEntry


class TestMaintenanceLogEntry:
    """Tests for MaintenanceLogEntry construction."""

    def test_date_from_string(self):
        entry = MaintenanceLogEntry("2025-01-15", "Service")
        assert entry.date == date(2025, 1, 15)

    def test_optional_fields_default_to_none(self):
        entry = MaintenanceLogEntry(date(2025, 1, 15), "Service")
        assert entry.item_type is None
        assert entry.cost is None
        assert entry.description is None
        assert entry.odometer is None


class TestMatches:
    """Tests for associating log entries with catalog items."""

    def test_tagged_entry_matches_its_tag(self):
        entry = MaintenanceLogEntry("2025-01-15", "Service", ItemType.ENGINE_OIL)
        assert entry.matches(ItemType.ENGINE_OIL)
        assert not entry.matches(ItemType.OIL_FILTER)

    def test_tagged_entry_ignores_free_text(self):
        """A tag wins over whatever the free text happens to contain."""
        entry = MaintenanceLogEntry(
            "2025-01-15", "Air Filter Housing Repair", ItemType.BRAKE_INSPECTION
        )
        assert not entry.matches(ItemType.AIR_FILTER)

    def test_untagged_entry_uses_substring(self):
        entry = MaintenanceLogEntry("2025-01-15", "engine oil change (synthetic)")
        assert entry.matches(ItemType.ENGINE_OIL)
        assert not entry.matches(ItemType.OIL_FILTER)

    def test_untagged_generic_entry_matches_nothing(self):
        entry = MaintenanceLogEntry("2025-01-15", "Repair")
        assert not any(entry.matches(t) for t in ItemType)
