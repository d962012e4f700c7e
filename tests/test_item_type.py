#!/usr/bin/env python3
"""Tests for ItemType enum."""

from fleetmaint import ItemType


class TestItemType:
    """Tests for ItemType labels."""

    def test_ten_categories(self):
        assert len(ItemType) == 10

    def test_label_is_value(self):
        assert ItemType.ENGINE_OIL.label == "Engine Oil"
        assert ItemType.TRANSMISSION_SERVICE.label == "Transmission Service"


class TestFromLabel:
    """Tests for ItemType.from_label."""

    def test_case_insensitive(self):
        assert ItemType.from_label("engine oil") == ItemType.ENGINE_OIL
        assert ItemType.from_label("SPARK PLUGS") == ItemType.SPARK_PLUGS

    def test_enum_style_name(self):
        assert ItemType.from_label("BRAKE_INSPECTION") == ItemType.BRAKE_INSPECTION

    def test_strips_whitespace(self):
        assert ItemType.from_label("  Coolant Flush ") == ItemType.COOLANT_FLUSH

    def test_no_partial_match(self):
        """Free text that merely contains a label is not resolved."""
        assert ItemType.from_label("Air Filter Housing Repair") is None
        assert ItemType.from_label("Service") is None

    def test_empty(self):
        assert ItemType.from_label(None) is None
        assert ItemType.from_label("") is None
