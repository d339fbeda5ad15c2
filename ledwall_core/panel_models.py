"""
LED panel model catalog.

To add a model, append a dict to _PANEL_MODELS_DATA. Entries are validated when
the module is imported; "id" may be omitted and is then derived from series
and pitch (see panels.generate_panel_id).
"""

from __future__ import annotations

from .panels import PanelModel, create_panel_models, format_panel_errors

_PANEL_MODELS_DATA: list[dict] = [
    {
        "id": "q-plus-p1.5",
        "model_number": "Q+1.5",
        "display_name": "Q+1.5",
        "series": "Q+",
        "panel_width": 600,
        "panel_height": 337.5,
        "pixel_pitch": 1.5,
        "brightness": 800,
        "refresh_rate": 3840,
        "viewing_angle": 160,
        "weight": 6.5,
        "power_consumption": 180,
        "description": "Ultra high resolution indoor panel for very close viewing",
        "use_case": "Meeting rooms, showrooms, luxury retail",
    },
    {
        "id": "q-plus-p1.9",
        "model_number": "Q+1.9",
        "display_name": "Q+1.9",
        "series": "Q+",
        "panel_width": 600,
        "panel_height": 337.5,
        "pixel_pitch": 1.9,
        "brightness": 800,
        "refresh_rate": 3840,
        "viewing_angle": 160,
        "weight": 6.5,
        "power_consumption": 180,
        "description": "High resolution indoor panel for short viewing distances",
        "use_case": "Meeting rooms, presentation rooms, exhibitions",
    },
    {
        "id": "q-plus-p2.5",
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
        "description": "High resolution indoor panel for standard viewing distances",
        "use_case": "Event venues, shopping malls, corporate lobbies",
    },
    {
        "id": "q-plus-p3.0",
        "model_number": "Q+3.0",
        "display_name": "Q+3.0",
        "series": "Q+",
        "panel_width": 576,
        "panel_height": 576,
        "pixel_pitch": 3.0,
        "brightness": 1200,
        "refresh_rate": 3840,
        "viewing_angle": 160,
        "weight": 9.0,
        "power_consumption": 250,
        "description": "Balanced indoor panel for medium viewing distances",
        "use_case": "Event venues, halls, large meeting rooms",
    },
    {
        "id": "q-plus-p3.9",
        "model_number": "Q+3.9",
        "display_name": "Q+3.9",
        "series": "Q+",
        "panel_width": 500,
        "panel_height": 500,
        "pixel_pitch": 3.91,
        "brightness": 1200,
        "refresh_rate": 3840,
        "viewing_angle": 160,
        "weight": 7.5,
        "power_consumption": 230,
        "description": "Versatile indoor panel for a wide range of uses",
        "use_case": "Rental, events, concerts, exhibitions",
    },
    {
        "id": "q-plus-p4.8",
        "model_number": "Q+4.8",
        "display_name": "Q+4.8",
        "series": "Q+",
        "panel_width": 576,
        "panel_height": 576,
        "pixel_pitch": 4.8,
        "brightness": 1500,
        "refresh_rate": 3840,
        "viewing_angle": 160,
        "weight": 9.5,
        "power_consumption": 280,
        "description": "Indoor/outdoor panel for long viewing distances",
        "use_case": "Stadiums, large events, outdoor advertising",
    },
]


def _load_catalog() -> tuple[PanelModel, ...]:
    panels, errors = create_panel_models(_PANEL_MODELS_DATA)
    if errors:
        raise RuntimeError(f"Invalid panel model data detected:\n{format_panel_errors(errors)}")
    return tuple(panels)


PANEL_MODELS: tuple[PanelModel, ...] = _load_catalog()


def get_panel_model_by_id(panel_id: str) -> PanelModel | None:
    for model in PANEL_MODELS:
        if model.id == panel_id:
            return model
    return None


def get_panel_models_by_series(series: str) -> list[PanelModel]:
    return [model for model in PANEL_MODELS if model.series == series]


def get_available_series() -> list[str]:
    # first-seen order
    return list(dict.fromkeys(model.series for model in PANEL_MODELS))
