from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Iterable

from .errors import OUT_OF_RANGE, CalculationError

# (min, max, unit, label) per numeric field
PANEL_CONSTRAINTS: dict[str, tuple[float, float, str, str]] = {
    "panel_width": (100, 5000, "mm", "Panel width"),
    "panel_height": (100, 5000, "mm", "Panel height"),
    "pixel_pitch": (0.5, 50, "mm", "Pixel pitch"),
    "brightness": (100, 10000, " nits", "Brightness"),
    "refresh_rate": (60, 10000, "Hz", "Refresh rate"),
    "viewing_angle": (60, 180, " degrees", "Viewing angle"),
    "weight": (0.1, 200, "kg", "Weight"),
    "power_consumption": (1, 5000, "W", "Power consumption"),
    "price_per_panel": (0, 10_000_000, " yen", "Price per panel"),
}

REQUIRED_TEXT_FIELDS = (
    ("model_number", "Model number"),
    ("display_name", "Display name"),
    ("series", "Series"),
    ("description", "Description"),
)
REQUIRED_NUMERIC_FIELDS = ("panel_width", "panel_height", "pixel_pitch", "brightness")
OPTIONAL_NUMERIC_FIELDS = (
    "refresh_rate",
    "viewing_angle",
    "weight",
    "power_consumption",
    "price_per_panel",
)


@dataclass(frozen=True)
class PanelModel:
    id: str
    model_number: str
    display_name: str
    series: str
    panel_width: float
    panel_height: float
    pixel_pitch: float
    brightness: float
    description: str
    refresh_rate: float | None = None
    viewing_angle: float | None = None
    weight: float | None = None
    power_consumption: float | None = None
    price_per_panel: float | None = None
    use_case: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class PanelValidationResult:
    errors: list[str]

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return math.isfinite(float(value))


def _fmt_limit(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def _range_error(field: str) -> str:
    lo, hi, unit, label = PANEL_CONSTRAINTS[field]
    return f"{label} must be between {_fmt_limit(lo)} and {_fmt_limit(hi)}{unit}"


def _in_range(field: str, value: Any) -> bool:
    lo, hi, _, _ = PANEL_CONSTRAINTS[field]
    return _is_number(value) and lo <= float(value) <= hi


def validate_panel_model(data: dict[str, Any]) -> PanelValidationResult:
    """
    Required text fields must be non-blank; numeric fields must fall inside
    PANEL_CONSTRAINTS. Optional numeric fields are only checked when present.
    """
    errors: list[str] = []

    for field, label in REQUIRED_TEXT_FIELDS:
        if not str(data.get(field) or "").strip():
            errors.append(f"{label} is required")

    for field in REQUIRED_NUMERIC_FIELDS:
        if not _in_range(field, data.get(field)):
            errors.append(_range_error(field))

    for field in OPTIONAL_NUMERIC_FIELDS:
        value = data.get(field)
        if value is None:
            continue
        if not _in_range(field, value):
            errors.append(_range_error(field))

    return PanelValidationResult(errors=errors)


def generate_panel_id(data: dict[str, Any]) -> str:
    """Explicit id wins; otherwise "{series-slug}-p{pitch}", e.g. "q-plus-p25"."""
    if data.get("id"):
        return str(data["id"])

    series_slug = str(data["series"]).lower().replace("+", "-plus")
    series_slug = re.sub(r"\s+", "-", series_slug)
    pitch = data["pixel_pitch"]
    pitch_str = str(int(pitch)) if float(pitch).is_integer() else repr(float(pitch))
    return f"{series_slug}-p{pitch_str.replace('.', '', 1)}"


def _build(data: dict[str, Any], panel_id: str) -> PanelModel:
    fields = {k: v for k, v in data.items() if k in PanelModel.__dataclass_fields__ and k != "id"}
    return PanelModel(id=panel_id, **fields)


def create_panel_model(data: dict[str, Any]) -> PanelModel:
    validation = validate_panel_model(data)
    if not validation.is_valid:
        raise CalculationError(OUT_OF_RANGE, f"Invalid panel model: {', '.join(validation.errors)}")
    return _build(data, generate_panel_id(data))


def create_panel_models(
    items: Iterable[dict[str, Any]],
) -> tuple[list[PanelModel], list[tuple[dict[str, Any], list[str]]]]:
    """Valid entries become PanelModel; invalid ones are returned with their errors."""
    panels: list[PanelModel] = []
    errors: list[tuple[dict[str, Any], list[str]]] = []
    for item in items:
        validation = validate_panel_model(item)
        if validation.is_valid:
            panels.append(_build(item, generate_panel_id(item)))
        else:
            errors.append((item, validation.errors))
    return panels, errors


def is_valid_panel_model(value: Any) -> bool:
    if isinstance(value, PanelModel):
        return True
    if not isinstance(value, dict):
        return False
    for field in ("id", "model_number", "display_name", "series", "description"):
        if not isinstance(value.get(field), str):
            return False
    return all(_is_number(value.get(field)) for field in REQUIRED_NUMERIC_FIELDS)


def validate_panel_models(
    items: Iterable[dict[str, Any]],
) -> list[tuple[dict[str, Any], PanelValidationResult]]:
    return [(item, validate_panel_model(item)) for item in items]


def format_panel_errors(errors: list[tuple[dict[str, Any], list[str]]]) -> str:
    return "\n".join(
        f'Panel "{item.get("model_number")}": {", ".join(messages)}' for item, messages in errors
    )


def parse_panel_data_from_json(text: str) -> list[PanelModel]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON format: {exc}") from exc

    if not isinstance(data, list):
        raise ValueError("JSON data must be an array of panel objects")
    if not all(isinstance(item, dict) for item in data):
        raise ValueError("JSON data must be an array of panel objects")

    panels, errors = create_panel_models(data)
    if errors:
        raise ValueError(f"Invalid panel data:\n{format_panel_errors(errors)}")
    return panels
