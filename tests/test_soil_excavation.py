import pytest

from hardscape.calculators import estimate_soil_excavation
from hardscape.calculators.soil_excavation import SoilExcavationDetails
from hardscape.core.errors import HardscapeValueError


def test_tonnes_rated_by_excavator_template(config):
    result = estimate_soil_excavation(
        {"excavator_name": "digger", "excavator_size_t": 3, "tonnes": 12}, config
    )
    primary = result.task_breakdown[0]
    assert primary.name == "Excavation soil with Digger (3t)"
    assert primary.hours == pytest.approx(1.2)
    assert primary.template_id == "x3"
    assert result.materials[0].quantity == pytest.approx(12)
    assert result.details.from_dimensions is False


def test_tonnes_derived_from_dimensions(config):
    result = estimate_soil_excavation(
        {
            "excavator_name": "Digger",
            "excavator_size_t": 3,
            "length_m": 2,
            "width_m": 1,
            "depth_cm": 50,
        },
        config,
    )
    details = result.details
    assert isinstance(details, SoilExcavationDetails)
    assert details.soil_tonnes == pytest.approx(1.5)
    assert details.from_dimensions is True
    assert result.total_hours == pytest.approx(0.15)


def test_other_size_class_does_not_match(config):
    result = estimate_soil_excavation(
        {"excavator_name": "digger", "excavator_size_t": 1, "tonnes": 5}, config
    )
    assert result.task_breakdown[0].name == "Excavation soil with digger (1t)"
    assert result.total_hours == 0


def test_missing_template_keeps_label_and_warns(bare_config):
    result = estimate_soil_excavation(
        {"excavator_name": "digger", "excavator_size_t": 3, "tonnes": 12}, bare_config
    )
    primary = result.task_breakdown[0]
    assert primary.name == "Excavation soil with digger (3t)"
    assert primary.hours == 0
    assert primary.template_id is None
    assert len(result.warnings) == 1


def test_transport_leg_for_dug_soil(config):
    result = estimate_soil_excavation(
        {
            "excavator_name": "digger",
            "excavator_size_t": 3,
            "tonnes": 6,
            "transport": {"carrier_size_t": 3, "distance_m": 60},
        },
        config,
    )
    leg = result.task_breakdown[1]
    assert leg.name == "transport soil"
    assert leg.hours == pytest.approx(2 * 120 / 6000)
    assert leg.normalized_hours == pytest.approx(leg.hours * 30 / 60)


def test_dimensions_required_without_tonnes(bare_config):
    with pytest.raises(HardscapeValueError) as excinfo:
        estimate_soil_excavation(
            {"excavator_name": "digger", "excavator_size_t": 3, "width_m": 1}, bare_config
        )
    assert excinfo.value.field == "length_m"


def test_blank_excavator_name_rejected(bare_config):
    with pytest.raises(HardscapeValueError) as excinfo:
        estimate_soil_excavation(
            {"excavator_name": "  ", "excavator_size_t": 3, "tonnes": 1}, bare_config
        )
    assert excinfo.value.field == "excavator_name"
