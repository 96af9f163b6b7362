"""
Tests for report aggregation
"""

import random

import pytest

from transformer_inventory.records import LoadRecord
from transformer_inventory.reporting import Aggregate, aggregate

from conftest import rec


class TestAggregate:

    def test_empty_input_is_all_zero(self):
        a = aggregate([])
        assert a == Aggregate()
        assert a.transformer_count == 0
        assert a.customer_total == 0.0
        assert a.phase1_kva_total == 0.0
        assert a.phase2_kva_total == 0.0
        assert a.phase3_kva_total == 0.0
        assert a.combined_kva_total == 0.0

    def test_count_is_row_count(self, records):
        assert aggregate(records).transformer_count == len(records)

    def test_zero_records_still_count(self):
        zeros = [rec(101), rec(101), LoadRecord(102, phase1_kva=None, phase1_cust="")]
        a = aggregate(zeros)
        assert a.transformer_count == 3
        assert a.combined_kva_total == 0.0
        assert a.customer_total == 0.0

    def test_combined_equals_phase_sum(self, records):
        a = aggregate(records)
        assert a.combined_kva_total == a.phase1_kva_total + a.phase2_kva_total + a.phase3_kva_total

    def test_phase_totals(self, records):
        a = aggregate(records)
        assert a.phase1_kva_total == 157.0
        assert a.phase2_kva_total == 170.0
        assert a.phase3_kva_total == 105.0
        assert a.combined_kva_total == 432.0
        assert a.customer_total == 7.0

    def test_malformed_fields_do_not_poison_totals(self):
        rows = [
            LoadRecord(101, phase1_kva="abc", phase2_kva=5),
            LoadRecord(101, phase1_kva=float("nan"), phase3_kva="2.5"),
        ]
        a = aggregate(rows)
        assert a.phase1_kva_total == 0.0
        assert a.combined_kva_total == 7.5

    def test_order_independent(self, records):
        shuffled = list(records)
        random.Random(7).shuffle(shuffled)
        a, b = aggregate(records), aggregate(shuffled)
        assert a.transformer_count == b.transformer_count
        assert a.combined_kva_total == pytest.approx(b.combined_kva_total)
        assert a.customer_total == pytest.approx(b.customer_total)

    def test_accepts_generators(self, records):
        assert aggregate(r for r in records).transformer_count == len(records)

    def test_to_dict(self):
        d = aggregate([rec(101, p1=1, p2=2, p3=3, c3ph=4)]).to_dict()
        assert d == {
            "transformer_count": 1,
            "customer_total": 4.0,
            "phase1_kva_total": 1.0,
            "phase2_kva_total": 2.0,
            "phase3_kva_total": 3.0,
            "combined_kva_total": 6.0,
        }
