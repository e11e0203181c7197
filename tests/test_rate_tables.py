import pytest

from hardscape.reference.rate_tables import (
    CarrierSpec,
    build_rate_tables,
    carrier_speed,
    load_default_rate_tables,
    material_capacity,
)


def test_default_tables_are_cached():
    assert load_default_rate_tables() is load_default_rate_tables()


@pytest.mark.parametrize(
    "size,expected",
    [(0.125, 1500.0), (0.3, 2500.0), (0.5, 1000.0), (1, 4000.0), (10, 8000.0)],
)
def test_carrier_speed_exact_match(size, expected):
    assert carrier_speed(size) == pytest.approx(expected)


def test_carrier_speed_defaults_for_unknown_class():
    assert carrier_speed(2.0) == pytest.approx(4000.0)


def test_material_capacity_exact_pair_only():
    assert material_capacity("sand", 1) == pytest.approx(1.0)
    assert material_capacity("kerbsSmall", 0.125) == pytest.approx(25.0)
    assert material_capacity("sand", 2) is None
    assert material_capacity("unobtainium", 1) is None


def test_material_alias_resolves_to_canonical_key():
    tables = load_default_rate_tables()
    assert tables.canonical_material("tape1") == "type1"
    assert material_capacity("tape1", 0.5) == material_capacity("type1", 0.5)


def test_capacity_sizes_sorted():
    tables = build_rate_tables([], {"sand": {"3": 3, "1": 1, "0.5": 0.5}})
    assert tables.capacity_sizes("sand") == (0.5, 1.0, 3.0)
    assert tables.capacity_sizes("gravel") == ()


def test_build_rate_tables_accepts_specs_and_mappings():
    tables = build_rate_tables(
        [CarrierSpec(0.5, 1000.0), {"size_class_t": "2", "speed_m_per_hour": "3000"}],
        {},
    )
    assert tables.has_carrier(2)
    assert tables.carrier_speed(2) == pytest.approx(3000.0)


@pytest.mark.parametrize(
    "carriers,capacities",
    [
        ([{"size_class_t": 0, "speed_m_per_hour": 100}], {}),
        ([{"size_class_t": 1, "speed_m_per_hour": -5}], {}),
        ([], {"sand": {1: 0}}),
    ],
)
def test_build_rate_tables_rejects_non_positive_values(carriers, capacities):
    with pytest.raises(ValueError):
        build_rate_tables(carriers, capacities)
