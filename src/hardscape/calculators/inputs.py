"""Pydantic input models for each calculator family."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from hardscape.core.errors import HardscapeValueError
from hardscape.reference.excavation import DiggingMethod, SoilType
from hardscape.reference.kerbs import HunchType, KerbType
from hardscape.reference.mortar import MortarVariant


def _positive(value: float | None, name: str) -> float | None:
    if value is not None and value <= 0:
        raise ValueError(f"{name} must be > 0 (got {value}).")
    return value


class TransportInputs(BaseModel):
    """Carrier selection for the optional transport legs.

    Missing values fall back to the configuration defaults (0.125 t carrier, 30 m haul).
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    carrier_size_t: float | None = None
    distance_m: float | None = None

    @field_validator("carrier_size_t")
    @classmethod
    def _carrier_positive(cls, value: float | None) -> float | None:
        return _positive(value, "carrier_size_t")

    @field_validator("distance_m")
    @classmethod
    def _distance_non_negative(cls, value: float | None) -> float | None:
        if value is not None and value < 0:
            raise ValueError(f"distance_m must be non-negative (got {value}).")
        return value


class _CalculatorInputs(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    transport: TransportInputs | None = None


class FoundationInputs(_CalculatorInputs):
    """Strip foundation trench; depth is entered in centimetres."""

    kind: Literal["foundation"] = "foundation"
    length_m: float
    width_m: float
    depth_cm: float
    digging_method: DiggingMethod = DiggingMethod.SHOVEL
    soil_type: SoilType = SoilType.CLAY

    @field_validator("length_m", "width_m", "depth_cm")
    @classmethod
    def _dimensions_positive(cls, value: float, info: ValidationInfo) -> float:
        return _positive(value, info.field_name)

    @property
    def depth_m(self) -> float:
        return self.depth_cm / 100


class KerbInputs(_CalculatorInputs):
    """Kerb, edging or set run bedded and hunched in mortar."""

    kind: Literal["kerbs"] = "kerbs"
    kerb_type: KerbType
    length_m: float
    base_height_cm: float
    hunch: HunchType = HunchType.FULL_BOTH
    rumbled_standing: bool = False

    @field_validator("length_m", "base_height_cm")
    @classmethod
    def _dimensions_positive(cls, value: float, info: ValidationInfo) -> float:
        return _positive(value, info.field_name)


class MortarInputs(_CalculatorInputs):
    """Mortar volume either under slabs (area) or for a general pour (l × w × thickness)."""

    kind: Literal["mortar"] = "mortar"
    variant: MortarVariant = MortarVariant.GENERAL
    area_m2: float | None = None
    length_m: float | None = None
    width_m: float | None = None
    thickness_cm: float | None = None

    @field_validator("area_m2", "length_m", "width_m", "thickness_cm")
    @classmethod
    def _dimensions_positive(cls, value: float | None, info: ValidationInfo) -> float | None:
        return _positive(value, info.field_name)

    def required_fields(self) -> tuple[str, ...]:
        if self.variant is MortarVariant.SLAB:
            return ("area_m2",)
        return ("length_m", "width_m", "thickness_cm")


class SoilExcavationInputs(_CalculatorInputs):
    """Bulk soil dig; either ``tonnes`` or the three dimensions must be supplied."""

    kind: Literal["soil_excavation"] = "soil_excavation"
    excavator_name: str
    excavator_size_t: float
    tonnes: float | None = None
    length_m: float | None = None
    width_m: float | None = None
    depth_cm: float | None = None

    @field_validator("excavator_name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("excavator_name must be non-empty")
        return value

    @field_validator("excavator_size_t", "tonnes", "length_m", "width_m", "depth_cm")
    @classmethod
    def _values_positive(cls, value: float | None, info: ValidationInfo) -> float | None:
        return _positive(value, info.field_name)


class MaterialTransportInputs(_CalculatorInputs):
    """Move an arbitrary quantity of one material with one carrier."""

    kind: Literal["material_transport"] = "material_transport"
    material_type: str
    quantity: float
    unit: str = "tonnes"
    task_name: str | None = None

    @field_validator("quantity")
    @classmethod
    def _quantity_positive(cls, value: float) -> float:
        return _positive(value, "quantity")

    @field_validator("material_type")
    @classmethod
    def _material_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("material_type must be non-empty")
        return value


InputsT = TypeVar("InputsT", bound=BaseModel)

INPUT_MODELS: tuple[type[BaseModel], ...] = (
    FoundationInputs,
    KerbInputs,
    MortarInputs,
    SoilExcavationInputs,
    MaterialTransportInputs,
)

CalculatorInputs = Annotated[
    Union[
        FoundationInputs,
        KerbInputs,
        MortarInputs,
        SoilExcavationInputs,
        MaterialTransportInputs,
    ],
    Field(discriminator="kind"),
]

_INPUTS_ADAPTER: TypeAdapter[Any] = TypeAdapter(CalculatorInputs)

_TAG_ERRORS = {"union_tag_not_found", "union_tag_invalid"}


def validation_error_to_hardscape(
    exc: ValidationError, *, tag: str | None = None
) -> HardscapeValueError:
    """Collapse the first pydantic error into a field-level :class:`HardscapeValueError`."""

    first = exc.errors()[0]
    if first.get("type") in _TAG_ERRORS:
        return HardscapeValueError(f"kind: {first.get('msg')}", field="kind")
    loc = [str(part) for part in first.get("loc", ())]
    if tag is not None and loc and loc[0] == tag:
        # Discriminated unions prefix the location with the tag value.
        loc = loc[1:]
    field = ".".join(loc) or None
    message = first.get("msg", str(exc))
    text = f"{field}: {message}" if field else message
    return HardscapeValueError(text, field=field)


def parse_inputs(payload: Mapping[str, Any] | BaseModel) -> Any:
    """
    Validate a raw mapping into the calculator input variant selected by ``kind``.

    Raises
    ------
    HardscapeValueError
        If ``kind`` is unknown or any field fails validation; ``field`` names the culprit.
    """

    if isinstance(payload, INPUT_MODELS):
        return payload
    if isinstance(payload, BaseModel):
        raise HardscapeValueError(
            f"kind: {type(payload).__name__} is not a calculator input model.", field="kind"
        )
    data = dict(payload)
    try:
        return _INPUTS_ADAPTER.validate_python(data)
    except ValidationError as exc:
        tag = data.get("kind")
        raise validation_error_to_hardscape(exc, tag=str(tag) if tag else None) from exc


def coerce_inputs(payload: Mapping[str, Any] | BaseModel, model: type[InputsT]) -> InputsT:
    """Return ``payload`` as ``model``, validating mappings on the way in."""

    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        raise HardscapeValueError(
            f"Expected {model.__name__}, got {type(payload).__name__}.", field="kind"
        )
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise validation_error_to_hardscape(exc) from exc


__all__ = [
    "TransportInputs",
    "FoundationInputs",
    "KerbInputs",
    "MortarInputs",
    "SoilExcavationInputs",
    "MaterialTransportInputs",
    "CalculatorInputs",
    "INPUT_MODELS",
    "coerce_inputs",
    "parse_inputs",
    "validation_error_to_hardscape",
]
