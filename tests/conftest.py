from pathlib import Path

import pytest

from transformer_inventory.classification import SubstationIndex
from transformer_inventory.records import LoadRecord

DATA_DIR = Path(__file__).parent.parent / "examples" / "data"


def rec(feeder, block="", p1=0.0, p2=0.0, p3=0.0, c1=0.0, c2=0.0, c3=0.0, c3ph=0.0):
    return LoadRecord(
        feeder_number=feeder,
        block=block,
        phase1_kva=p1,
        phase2_kva=p2,
        phase3_kva=p3,
        phase1_cust=c1,
        phase2_cust=c2,
        phase3_cust=c3,
        three_phase_cust=c3ph,
    )


@pytest.fixture
def records():
    """Two substations plus the THEISS feeders."""
    return [
        rec(101, "A", p1=10, c1=2),
        rec(101, "B", p2=20, c2=3),
        rec(104, "", p3=5, c3=1),
        rec(142, "A", p1=7),
        rec(301, "D", p1=40, c3ph=1),
        rec(1203, "", p1=100, p2=100, p3=100),
        rec(1209, "", p2=50),
    ]


@pytest.fixture
def index(records):
    return SubstationIndex.build(records)


@pytest.fixture
def data_dir():
    return DATA_DIR
