import pytest

from hardscape.breakdown import assemble
from hardscape.breakdown.tables import (
    BREAKDOWN_COLUMNS,
    MATERIAL_COLUMNS,
    RECONCILED_COLUMNS,
    breakdown_dataframe,
    materials_dataframe,
    reconciled_dataframe,
)
from hardscape.calculators import estimate_foundation
from hardscape.core.types import MaterialLine, TaskBreakdownItem


def _item(name: str, hours: float) -> TaskBreakdownItem:
    return TaskBreakdownItem(name=name, hours=hours, amount=1, unit="tonnes")


def test_primary_kept_even_at_zero_hours():
    primary = _item("Mortar mixing", 0)
    assert assemble(primary) == (primary,)


def test_zero_hour_and_missing_legs_dropped_in_order():
    primary = _item("KL kerbs laying", 5)
    legs = [
        _item("transport kerbs", 0.16),
        None,
        _item("transport sand", 0),
        _item("transport cement", 0.04),
    ]
    extras = [_item("leveling", 1.0), _item("empty", 0)]
    names = [item.name for item in assemble(primary, legs, extras)]
    assert names == ["KL kerbs laying", "transport kerbs", "transport cement", "leveling"]


def test_duplicate_names_are_kept():
    primary = _item("transport sand", 1)
    assert len(assemble(primary, [_item("transport sand", 1)])) == 2


def test_breakdown_dataframe_follows_breakdown(bare_config):
    result = estimate_foundation(
        {"length_m": 15, "width_m": 0.6, "depth_cm": 60, "transport": {"carrier_size_t": 1}},
        bare_config,
    )
    frame = breakdown_dataframe(result)
    assert list(frame.columns) == BREAKDOWN_COLUMNS
    assert frame["task"].tolist() == ["Foundation Excavation", "transport soil"]
    assert frame["hours"].sum() == pytest.approx(result.total_hours)

    materials = materials_dataframe(result)
    assert list(materials.columns) == MATERIAL_COLUMNS
    assert len(materials) == 2


def test_empty_frames_keep_columns():
    assert list(reconciled_dataframe([]).columns) == RECONCILED_COLUMNS


def test_material_pricing():
    line = MaterialLine(name="Sand", quantity=2.0, unit="tonnes").with_price(40.0)
    assert line.total_price == pytest.approx(80.0)
    assert line.with_price(None).total_price is None
