import pytest

from hardscape.calculators import estimate, estimate_foundation, parse_inputs
from hardscape.calculators.foundation import FoundationDetails, dimension_factor
from hardscape.config.models import RateTemplate, default_config
from hardscape.core.errors import HardscapeValueError
from hardscape.reference.excavation import SOIL_PROPERTIES, SoilType

REFERENCE = {"kind": "foundation", "length_m": 15, "width_m": 0.6, "depth_cm": 60}


def test_reference_excavation_with_shovel_in_clay(bare_config):
    result = estimate_foundation({**REFERENCE, "digging_method": "shovel"}, bare_config)
    details = result.details
    assert isinstance(details, FoundationDetails)
    assert details.volume_m3 == pytest.approx(5.4)
    assert details.dimension_factor == pytest.approx(1.0)
    assert details.manual_hours == pytest.approx(12.0)
    assert details.adjusted_hours == pytest.approx(12.0)
    assert result.quantity.quantity == pytest.approx(5.4)
    assert result.quantity.unit == "m³"
    primary = result.task_breakdown[0]
    assert primary.name == "Foundation Excavation"
    assert primary.hours == pytest.approx(12.0)


def test_catalog_rate_overrides_fallback_multiplier(config):
    result = estimate_foundation(REFERENCE, config)
    primary = result.task_breakdown[0]
    assert primary.hours == pytest.approx(12.0 * 1.0)
    assert primary.template_id == "t4"
    assert result.warnings == ()


def test_missing_template_uses_fixed_multiplier_and_warns(bare_config):
    result = estimate_foundation({**REFERENCE, "digging_method": "small"}, bare_config)
    assert result.task_breakdown[0].hours == pytest.approx(12.0 / 6)
    assert result.task_breakdown[0].template_id is None
    assert len(result.warnings) == 1


@pytest.mark.parametrize("method,divisor", [("medium", 12), ("large", 25)])
def test_fallback_multipliers(bare_config, method, divisor):
    result = estimate_foundation({**REFERENCE, "digging_method": method}, bare_config)
    assert result.total_hours == pytest.approx(12.0 / divisor)


def test_legacy_excavator_template_spelling_is_recognised():
    cfg = default_config(
        [
            RateTemplate(
                id="legacy",
                name="Excavating foundation with with small excavator",
                estimated_hours_per_unit=0.2,
            )
        ]
    )
    result = estimate_foundation({**REFERENCE, "digging_method": "small"}, cfg)
    assert result.task_breakdown[0].hours == pytest.approx(12.0 * 0.2)
    assert result.task_breakdown[0].template_id == "legacy"


def test_template_without_hours_falls_back():
    cfg = default_config([RateTemplate(id="t", name="Excavating foundation with shovel")])
    result = estimate_foundation(REFERENCE, cfg)
    assert result.total_hours == pytest.approx(12.0)
    assert result.warnings


def test_materials_for_clay(bare_config):
    result = estimate_foundation(REFERENCE, bare_config)
    soil, aggregate = result.materials
    assert soil.name == "Excavated Clay Soil (loose volume)"
    assert soil.unit == "tonnes"
    assert soil.quantity == pytest.approx(5.4 * 1.2 * 1.5)
    assert aggregate.name == "Aggregate (for concrete)"
    assert aggregate.quantity == pytest.approx(5.4 * 1050 / 1000)


@pytest.mark.parametrize("soil", list(SoilType))
def test_loose_volume_never_below_raw_volume(bare_config, soil):
    assert SOIL_PROPERTIES[soil].loose_volume_coefficient >= 1.0
    result = estimate_foundation({**REFERENCE, "soil_type": soil.value}, bare_config)
    assert result.details.loose_volume_m3 >= result.details.volume_m3


@pytest.mark.parametrize("field", ["length_m", "width_m", "depth_cm"])
def test_volume_scales_linearly_with_each_dimension(bare_config, field):
    base = {"kind": "foundation", "length_m": 4, "width_m": 0.5, "depth_cm": 40}
    doubled = {**base, field: base[field] * 2}
    single = estimate_foundation(base, bare_config).details.volume_m3
    double = estimate_foundation(doubled, bare_config).details.volume_m3
    assert single == pytest.approx(4 * 0.5 * 0.4)
    assert double == pytest.approx(2 * single)


def test_dimension_factor_weights():
    assert dimension_factor(30, 0.6, 0.6) == pytest.approx(0.5 * 2 + 0.3 + 0.2)


def test_transport_leg_for_soil(bare_config):
    payload = {**REFERENCE, "transport": {"carrier_size_t": 1, "distance_m": 30}}
    result = estimate_foundation(payload, bare_config)
    names = [item.name for item in result.task_breakdown]
    assert names == ["Foundation Excavation", "transport soil"]
    leg = result.task_breakdown[1]
    # 8.1 t of clay on a 1 t dumper at 4000 m/h over 30 m.
    assert leg.amount == pytest.approx(8.1)
    assert leg.hours == pytest.approx(9 * 60 / 4000)
    assert leg.unit == "tonnes"


def test_transport_defaults_come_from_config(bare_config):
    result = estimate_foundation({**REFERENCE, "transport": {}}, bare_config)
    leg = result.task_breakdown[1]
    # 0.125 t barrow, 1500 m/h, 30 m: ceil(8.1 / 0.125) trips.
    assert leg.hours == pytest.approx(65 * 60 / 1500)


def test_numeric_strings_are_accepted(bare_config):
    result = estimate({"kind": "foundation", "length_m": "15", "width_m": "0.6", "depth_cm": "60"})
    assert result.quantity.quantity == pytest.approx(5.4)


@pytest.mark.parametrize(
    "override,field",
    [
        ({"length_m": -1}, "length_m"),
        ({"width_m": 0}, "width_m"),
        ({"depth_cm": "abc"}, "depth_cm"),
        ({"digging_method": "spade"}, "digging_method"),
    ],
)
def test_invalid_inputs_name_the_field(override, field):
    with pytest.raises(HardscapeValueError) as excinfo:
        parse_inputs({**REFERENCE, **override})
    assert excinfo.value.field == field


def test_direct_calculator_call_reports_field(bare_config):
    with pytest.raises(HardscapeValueError) as excinfo:
        estimate_foundation({"length_m": 1, "width_m": 1, "depth_cm": -5}, bare_config)
    assert excinfo.value.field == "depth_cm"


@pytest.mark.parametrize(
    "field,value",
    [
        ("length_m", "nan"),
        ("width_m", "inf"),
        ("depth_cm", float("nan")),
        ("depth_cm", "-inf"),
    ],
)
def test_non_finite_dimensions_rejected(field, value):
    with pytest.raises(HardscapeValueError) as excinfo:
        parse_inputs({**REFERENCE, field: value})
    assert excinfo.value.field == field


def test_non_finite_transport_distance_rejected(bare_config):
    with pytest.raises(HardscapeValueError) as excinfo:
        estimate_foundation({**REFERENCE, "transport": {"distance_m": "inf"}}, bare_config)
    assert excinfo.value.field == "transport.distance_m"
