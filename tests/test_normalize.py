"""
Tests for numeric and string field normalization
"""

import math
from decimal import Decimal

import numpy as np
import pytest

from transformer_inventory.records import (
    LoadRecord,
    clean_str,
    combined_kva,
    customer_total,
    normalize_feeder,
    normalize_numeric,
)


class TestNormalizeNumeric:

    @pytest.mark.parametrize("value,expected", [
        (12, 12.0),
        (37.5, 37.5),
        ("25", 25.0),
        (" 7.5 ", 7.5),
        ("-3", -3.0),
        (0, 0.0),
        (Decimal("7.5"), 7.5),
        (np.int64(25), 25.0),
        (np.float32(2.5), 2.5),
    ])
    def test_parseable_values(self, value, expected):
        assert normalize_numeric(value) == expected

    @pytest.mark.parametrize("value", [
        None, "", "   ", "abc", "12kVA", True, False,
        math.nan, math.inf, -math.inf, "nan", "inf", [], {},
        10**400, Decimal("NaN"), "1e400",
    ])
    def test_malformed_values_are_zero(self, value):
        assert normalize_numeric(value) == 0.0

    def test_feeder_numbers(self):
        assert normalize_feeder("1203") == 1203
        assert normalize_feeder(101.0) == 101
        assert normalize_feeder(None) == 0
        assert normalize_feeder("x") == 0

    def test_clean_str(self):
        assert clean_str(None) == ""
        assert clean_str("  A ") == "A"
        assert clean_str(42) == "42"


class TestRecordSums:

    def test_customer_total_sums_all_four_fields(self):
        r = LoadRecord(101, phase1_cust=1, phase2_cust="2", phase3_cust=None, three_phase_cust=4)
        assert customer_total(r) == 7.0

    def test_combined_kva_ignores_bad_fields(self):
        r = LoadRecord(101, phase1_kva=10, phase2_kva="n/a", phase3_kva="5")
        assert combined_kva(r) == 15.0

    def test_all_null_record_is_zero(self):
        r = LoadRecord(301, phase1_kva=None, phase2_kva=None, phase3_kva=None,
                       phase1_cust=None, phase2_cust=None, phase3_cust=None, three_phase_cust=None)
        assert combined_kva(r) == 0.0
        assert customer_total(r) == 0.0
