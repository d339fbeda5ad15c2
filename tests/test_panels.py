from __future__ import annotations

import json

import pytest

from ledwall_core.errors import OUT_OF_RANGE, CalculationError
from ledwall_core.panels import (
    PanelModel,
    create_panel_model,
    create_panel_models,
    generate_panel_id,
    is_valid_panel_model,
    parse_panel_data_from_json,
    validate_panel_model,
    validate_panel_models,
)


def _panel(**overrides) -> dict:
    data = {
        "model_number": "Q+2.5",
        "display_name": "Q+2.5",
        "series": "Q+",
        "panel_width": 640,
        "panel_height": 480,
        "pixel_pitch": 2.5,
        "brightness": 1000,
        "refresh_rate": 3840,
        "viewing_angle": 160,
        "weight": 8.0,
        "power_consumption": 220,
        "description": "High resolution indoor panel",
        "use_case": "Event venues, shopping malls",
    }
    data.update(overrides)
    return data


def test_validate_accepts_correct_panel() -> None:
    res = validate_panel_model(_panel())
    assert res.is_valid
    assert res.errors == []


def test_validate_requires_text_fields() -> None:
    res = validate_panel_model(_panel(model_number=""))
    assert not res.is_valid
    assert "Model number is required" in res.errors

    res = validate_panel_model(_panel(description="   "))
    assert "Description is required" in res.errors


@pytest.mark.parametrize(
    ("field", "value", "label"),
    [
        ("panel_width", 50, "Panel width"),
        ("panel_height", 6000, "Panel height"),
        ("pixel_pitch", 0.1, "Pixel pitch"),
        ("brightness", 50, "Brightness"),
        ("refresh_rate", 30, "Refresh rate"),
        ("viewing_angle", 200, "Viewing angle"),
        ("weight", 0, "Weight"),
        ("power_consumption", 0, "Power consumption"),
        ("price_per_panel", -1, "Price per panel"),
    ],
)
def test_validate_rejects_out_of_range(field: str, value: float, label: str) -> None:
    res = validate_panel_model(_panel(**{field: value}))
    assert not res.is_valid
    assert any(err.startswith(label) for err in res.errors)


def test_validate_range_message_format() -> None:
    res = validate_panel_model(_panel(panel_width=50))
    assert "Panel width must be between 100 and 5000mm" in res.errors


def test_validate_skips_absent_optional_fields() -> None:
    data = _panel()
    for field in ("refresh_rate", "viewing_angle", "weight", "power_consumption"):
        del data[field]
    assert validate_panel_model(data).is_valid


def test_validate_rejects_non_numeric_required_field() -> None:
    res = validate_panel_model(_panel(brightness="bright"))
    assert any("Brightness" in err for err in res.errors)


def test_generate_id_from_series_and_pitch() -> None:
    assert generate_panel_id(_panel()) == "q-plus-p25"


def test_generate_id_keeps_explicit_id() -> None:
    assert generate_panel_id(_panel(id="custom-id")) == "custom-id"


def test_generate_id_for_other_series() -> None:
    assert generate_panel_id(_panel(series="Pro X", pixel_pitch=1.5)) == "pro-x-p15"


def test_generate_id_with_two_decimal_pitch() -> None:
    assert generate_panel_id(_panel(pixel_pitch=3.91)) == "q-plus-p391"


def test_generate_id_with_integer_pitch() -> None:
    assert generate_panel_id(_panel(pixel_pitch=3)) == "q-plus-p3"


def test_create_panel_model() -> None:
    panel = create_panel_model(_panel())
    assert isinstance(panel, PanelModel)
    assert panel.id == "q-plus-p25"
    assert panel.model_number == "Q+2.5"
    assert panel.brightness == 1000


def test_create_panel_model_preserves_optional_fields() -> None:
    panel = create_panel_model(_panel())
    assert panel.refresh_rate == 3840
    assert panel.viewing_angle == 160
    assert panel.weight == 8.0
    assert panel.power_consumption == 220
    assert panel.use_case == "Event venues, shopping malls"
    assert panel.price_per_panel is None


def test_create_panel_model_rejects_invalid() -> None:
    with pytest.raises(CalculationError, match="Invalid panel model") as excinfo:
        create_panel_model(_panel(model_number=""))
    assert excinfo.value.kind == OUT_OF_RANGE


def test_create_panel_models_splits_valid_and_invalid() -> None:
    good = _panel()
    other = _panel(pixel_pitch=3.91)
    bad = _panel(panel_width=10)
    panels, errors = create_panel_models([good, bad, other])
    assert [p.id for p in panels] == ["q-plus-p25", "q-plus-p391"]
    assert len(errors) == 1
    assert errors[0][0] is bad
    assert any("Panel width" in e for e in errors[0][1])


def test_create_panel_models_empty() -> None:
    assert create_panel_models([]) == ([], [])


def test_is_valid_panel_model() -> None:
    assert is_valid_panel_model({**_panel(), "id": "q-plus-p25"})
    assert is_valid_panel_model(create_panel_model(_panel()))
    assert not is_valid_panel_model("panel")
    assert not is_valid_panel_model(None)
    assert not is_valid_panel_model({"id": "x", "model_number": "y"})
    assert not is_valid_panel_model({**_panel(), "id": 123})
    assert not is_valid_panel_model({**_panel(), "id": "x", "panel_width": "640"})


def test_validate_panel_models() -> None:
    results = validate_panel_models([_panel(), _panel(brightness=1)])
    assert [r.is_valid for _, r in results] == [True, False]


def test_parse_panel_json() -> None:
    panels = parse_panel_data_from_json(json.dumps([_panel(), _panel(pixel_pitch=1.9)]))
    assert [p.id for p in panels] == ["q-plus-p25", "q-plus-p19"]


def test_parse_panel_json_rejects_bad_json() -> None:
    with pytest.raises(ValueError, match="Invalid JSON format"):
        parse_panel_data_from_json("{not json")


def test_parse_panel_json_rejects_non_array() -> None:
    with pytest.raises(ValueError, match="must be an array"):
        parse_panel_data_from_json(json.dumps(_panel()))


def test_parse_panel_json_rejects_invalid_panels() -> None:
    with pytest.raises(ValueError, match='Invalid panel data:\nPanel "Q\\+2.5"'):
        parse_panel_data_from_json(json.dumps([_panel(panel_width=1)]))


def test_generate_id_keeps_every_pitch_digit() -> None:
    assert generate_panel_id(_panel(pixel_pitch=1.2345678)) == "q-plus-p12345678"
    assert generate_panel_id(_panel(pixel_pitch=3.0)) == "q-plus-p3"
