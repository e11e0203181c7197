from __future__ import annotations

import pytest

from hardscape.config.models import EstimationConfig, RateTemplate, default_config
from hardscape.reference.rate_tables import build_rate_tables


@pytest.fixture
def catalog() -> tuple[RateTemplate, ...]:
    return (
        RateTemplate(id="t1", name="Laying slabs", unit="m2", estimated_hours_per_unit=0.4),
        RateTemplate(
            id="t2", name="Cutting porcelain tiles", unit="slabs", estimated_hours_per_unit=0.2
        ),
        RateTemplate(
            id="t3", name="Cutting sandstones", unit="slabs", estimated_hours_per_unit=0.15
        ),
        RateTemplate(
            id="t4",
            name="Excavating foundation with shovel",
            unit="m3",
            estimated_hours_per_unit=1.0,
        ),
        RateTemplate(id="t5", name="Transport sand by barrow", unit="tonnes"),
        RateTemplate(id="t6", name="Soil excavation by hand", unit="tonnes"),
        RateTemplate(id="k1", name="KL kerbs laying", unit="metres", estimated_hours_per_unit=0.5),
        RateTemplate(
            id="lv",
            name="preparing for the wall (leveling)",
            unit="metres",
            estimated_hours_per_unit=0.1,
        ),
        RateTemplate(id="m1", name="Mortar mixing", unit="m3", estimated_hours_per_unit=2.0),
        RateTemplate(
            id="x3",
            name="Excavation soil with Digger (3t)",
            unit="tonnes",
            estimated_hours_per_unit=0.1,
        ),
    )


@pytest.fixture
def config(catalog) -> EstimationConfig:
    return default_config(catalog)


@pytest.fixture
def bare_config() -> EstimationConfig:
    """Bundled tables with an empty catalog (every template lookup falls back)."""
    return default_config()


@pytest.fixture
def two_tonne_tables():
    return build_rate_tables(
        [{"size_class_t": 2, "speed_m_per_hour": 4000}],
        {"sand": {2: 2}},
    )
