from __future__ import annotations

from ledwall_core.panel_models import (
    PANEL_MODELS,
    get_available_series,
    get_panel_model_by_id,
    get_panel_models_by_series,
)
from ledwall_core.panels import PanelModel, validate_panel_model
from dataclasses import asdict


def test_catalog_has_q_plus_series() -> None:
    assert len(PANEL_MODELS) == 6
    assert all(p.series == "Q+" for p in PANEL_MODELS)


def test_catalog_entries_are_complete_and_valid() -> None:
    for panel in PANEL_MODELS:
        assert isinstance(panel, PanelModel)
        assert panel.id
        assert panel.model_number
        assert panel.description
        assert validate_panel_model(asdict(panel)).is_valid, panel.id


def test_catalog_ids_are_unique() -> None:
    ids = [p.id for p in PANEL_MODELS]
    assert len(ids) == len(set(ids))


def test_get_panel_model_by_id() -> None:
    panel = get_panel_model_by_id("q-plus-p3.9")
    assert panel is not None
    assert panel.pixel_pitch == 3.91
    assert panel.panel_width == 500


def test_get_panel_model_by_unknown_id() -> None:
    assert get_panel_model_by_id("nope") is None


def test_get_panel_models_by_series() -> None:
    assert len(get_panel_models_by_series("Q+")) == 6
    assert get_panel_models_by_series("X") == []


def test_available_series_are_unique() -> None:
    assert get_available_series() == ["Q+"]
