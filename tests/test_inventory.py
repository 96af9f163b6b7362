"""
Tests for inventory grid filters, serial search and pole lookup
"""

import pytest

from transformer_inventory.inventory import (
    InventoryFilter,
    PoleIndex,
    filter_values,
    find_by_serial,
    format_fixed,
    is_in_service,
    is_inventory_row,
    normalize_pole_number,
    normalize_serial_input,
    search_records,
)
from transformer_inventory.records import PoleRecord, TransformerRecord


@pytest.fixture
def transformers():
    return [
        TransformerRecord(serial="2246025", manufacturer="Cooper", type="OH", kva="25",
                          pri_volt="7200", sec_volt="120/240", status="IN STOCK"),
        TransformerRecord(serial="A-77", manufacturer="GE", type="PM", kva="100",
                          pri_volt="7200", sec_volt="120/240", status="Needs Tested"),
        TransformerRecord(serial="0051", manufacturer="Howard", type="OH", kva="50",
                          pri_volt="12470", sec_volt="277/480", status="IN SERVICE",
                          location="Main St"),
        TransformerRecord(serial="9", manufacturer="Cooper", type="OH", kva="100",
                          pri_volt="7200", sec_volt="120/240", status="on hold"),
    ]


class TestStatusRules:

    def test_inventory_statuses(self, transformers):
        assert [is_inventory_row(t) for t in transformers] == [True, True, False, True]

    @pytest.mark.parametrize("status,expected", [
        ("IN SERVICE", True),
        ("in service - pole", True),
        ("Service", True),
        ("INSTALLED", True),
        ("Active", True),
        ("INACTIVE", False),
        ("IN STOCK", False),
        ("", False),
        (None, False),
    ])
    def test_in_service(self, status, expected):
        assert is_in_service(status) is expected


class TestInventoryFilter:

    def test_no_columns_keeps_inventory_rows(self, transformers):
        assert len(InventoryFilter().apply(transformers)) == 3

    def test_exact_column_matches(self, transformers):
        rows = InventoryFilter(type="OH", kva="100").apply(transformers)
        assert [t.serial for t in rows] == ["9"]

    def test_blank_means_any(self, transformers):
        rows = InventoryFilter(type="", pri_volt="7200").apply(transformers)
        assert [t.serial for t in rows] == ["2246025", "A-77", "9"]

    def test_search_all_fields(self, transformers):
        assert [t.serial for t in search_records(transformers, "main st")] == ["0051"]
        assert [t.serial for t in search_records(transformers, "cooper")] == ["2246025", "9"]
        assert search_records(transformers, "  ") == transformers

    def test_filter_values_natural_order(self, transformers):
        assert filter_values(transformers, "kva") == ["25", "50", "100"]
        assert filter_values(transformers, "location") == ["Main St"]

    def test_format_fixed(self):
        assert format_fixed("2.1") == "2.10"
        assert format_fixed(1.456, 1) == "1.5"
        assert format_fixed("n/a") == "n/a"
        assert format_fixed(None) == ""


class TestSerialSearch:

    def test_normalize_input(self):
        assert normalize_serial_input(" cp 224-60_25 ") == ("2246025", True)
        assert normalize_serial_input("A 77") == ("A77", False)
        assert normalize_serial_input(None) == ("", False)

    def test_exact_match(self, transformers):
        assert find_by_serial(transformers, "2246025").manufacturer == "Cooper"

    def test_cooper_prefix_stripped(self, transformers):
        assert find_by_serial(transformers, "CP2246025").serial == "2246025"

    def test_leading_zeros(self, transformers):
        assert find_by_serial(transformers, "02246025").serial == "2246025"
        assert find_by_serial(transformers, "51").serial == "0051"

    def test_separators_removed_from_input(self, transformers):
        # Stored "A-77" keeps its dash, typed dashes are dropped
        assert find_by_serial(transformers, "A-77") is None

    def test_not_found(self, transformers):
        assert find_by_serial(transformers, "123") is None
        assert find_by_serial(transformers, "") is None


class TestPoleIndex:

    def test_lookup_normalizes(self):
        index = PoleIndex.build([
            PoleRecord(pole_no="O83271", owner="City"),
            PoleRecord(pole_no="o 83271", owner="Duplicate"),
            PoleRecord(pole_no="", owner="Blank"),
            PoleRecord(pole_no="M12345"),
        ])
        assert len(index) == 2
        assert index.lookup(" o83271 ").owner == "City"
        assert index.lookup("M 12345").pole_no == "M12345"
        assert index.lookup("X1") is None
        assert index.lookup("") is None

    def test_normalize_pole_number(self):
        assert normalize_pole_number(" M 123 45 ") == "m12345"
