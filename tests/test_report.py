from __future__ import annotations

import json

from ledwall_core.calculations import CalculationInput, calculate_led_wall
from ledwall_core.presets import DEFAULT_PRESETS
from ledwall_core.report import (
    PAYLOAD_SCHEMA_VERSION,
    PRESET_COLUMNS,
    build_payload,
    presets_to_frame,
    result_rows,
    result_to_dict,
    result_to_frame,
)


def _result(**overrides):
    data = {
        "panel_width": 500,
        "panel_height": 500,
        "screen_width": 4,
        "screen_height": 3,
        "led_pitch": 2.5,
    }
    data.update(overrides)
    return calculate_led_wall(CalculationInput(**data))


def test_result_to_dict_drops_absent_optionals() -> None:
    data = result_to_dict(_result())
    assert "cost_estimate" not in data
    assert "panel_model" not in data
    assert "price_per_panel" not in data["input"]
    assert data["resolution"] == {"width": 800, "height": 600, "total_pixels": 480000}
    assert data["pixel_density"] == 160000


def test_build_payload_is_json_ready() -> None:
    payload = build_payload(_result(price_per_panel=100000, selected_panel_id="q-plus-p2.5"))
    assert payload["schema_version"] == PAYLOAD_SCHEMA_VERSION
    assert "generated_at" in payload
    assert payload["cost_estimate"]["total_cost"] == 1_200_000
    assert payload["panel_model"]["id"] == "q-plus-p2.5"
    assert json.loads(json.dumps(payload, ensure_ascii=False)) == payload


def test_result_rows_basic() -> None:
    rows = dict(result_rows(_result()))
    assert rows["Panel count"] == "12 panels (4 × 3)"
    assert rows["Resolution"] == "800 × 600 px (480,000 pixels)"
    assert rows["Aspect ratio"] == "4:3"
    assert rows["Area"] == "3.00 m²"
    assert rows["Viewing distance (optimal)"] == "7.0 m"
    assert "Total cost" not in rows
    assert "Panel model" not in rows


def test_result_rows_with_cost_and_model() -> None:
    rows = dict(result_rows(_result(price_per_panel=100000, selected_panel_id="q-plus-p2.5")))
    assert rows["Total cost"] == "¥1,200,000"
    assert rows["Cost per m²"] == "¥400,000"
    assert rows["Panel model"] == "Q+2.5 (Q+)"
    assert rows["Refresh rate"] == "3,840 Hz"


def test_result_to_frame() -> None:
    df = result_to_frame(_result())
    assert list(df.columns) == ["Metric", "Value"]
    assert df.iloc[0]["Metric"] == "Panel count"


def test_presets_to_frame() -> None:
    df = presets_to_frame(DEFAULT_PRESETS)
    assert list(df.columns) == PRESET_COLUMNS
    assert len(df) == len(DEFAULT_PRESETS)

    labelled = presets_to_frame(DEFAULT_PRESETS[:1], with_labels=True)
    assert list(labelled.columns)[3] == "category_label"
    assert labelled.iloc[0]["category_label"] == "Panel size"


def test_presets_to_frame_empty() -> None:
    df = presets_to_frame([])
    assert list(df.columns) == PRESET_COLUMNS
    assert df.empty
