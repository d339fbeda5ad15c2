from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Iterable

import pandas as pd

from .calculations import CalculationResult
from .formatters import (
    format_area,
    format_aspect_ratio,
    format_currency,
    format_distance,
    format_number,
    format_panel_count,
    format_physical_size,
    format_pixel_density,
    format_resolution,
)
from .presets import CATEGORY_LABELS, Preset

PAYLOAD_SCHEMA_VERSION = "0.1"


def _iso_utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    return value


def result_to_dict(result: CalculationResult) -> dict[str, Any]:
    """JSON-ready nested dict; absent optionals (cost, panel model, price) are left out."""
    return _drop_none(asdict(result))


def build_payload(result: CalculationResult) -> dict[str, Any]:
    return {
        "schema_version": PAYLOAD_SCHEMA_VERSION,
        "generated_at": _iso_utc_now(),
        **result_to_dict(result),
    }


def result_rows(result: CalculationResult) -> list[tuple[str, str]]:
    data = result.input
    size = format_physical_size(result.physical_size.width, result.physical_size.height)
    rows = [
        ("Panel count", format_panel_count(result.panel_count, data.screen_width, data.screen_height)),
        ("Resolution", format_resolution(result.resolution.width, result.resolution.height)),
        (
            "Aspect ratio",
            format_aspect_ratio(result.resolution.width, result.resolution.height),
        ),
        ("Physical size (m)", size["meters"]),
        ("Physical size (mm)", size["millimeters"]),
        ("Area", format_area(result.physical_size.area)),
        ("Pixel density", format_pixel_density(result.pixel_density)),
        ("Viewing distance (min)", format_distance(result.viewing_distance.minimum)),
        ("Viewing distance (optimal)", format_distance(result.viewing_distance.optimal)),
        ("Viewing distance (max)", format_distance(result.viewing_distance.maximum)),
    ]
    if result.cost_estimate is not None:
        rows.append(("Total cost", format_currency(result.cost_estimate.total_cost)))
        rows.append(("Cost per m²", format_currency(result.cost_estimate.cost_per_square_meter)))
    if result.panel_model is not None:
        model = result.panel_model
        rows.append(("Panel model", f"{model.display_name} ({model.series})"))
        rows.append(("Brightness", f"{format_number(model.brightness)} nits"))
        if model.refresh_rate is not None:
            rows.append(("Refresh rate", f"{format_number(model.refresh_rate)} Hz"))
        if model.viewing_angle is not None:
            rows.append(("Viewing angle", f"{format_number(model.viewing_angle)}°"))
    return rows


def result_to_frame(result: CalculationResult) -> pd.DataFrame:
    return pd.DataFrame(result_rows(result), columns=["Metric", "Value"])


PRESET_COLUMNS = [
    "id",
    "name",
    "category",
    "panel_width",
    "panel_height",
    "led_pitch",
    "description",
    "is_custom",
]


def presets_to_frame(presets: Iterable[Preset], *, with_labels: bool = False) -> pd.DataFrame:
    df = pd.DataFrame([p.to_dict() for p in presets], columns=PRESET_COLUMNS)
    if with_labels:
        df.insert(3, "category_label", df["category"].map(CATEGORY_LABELS))
    return df
