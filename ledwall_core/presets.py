from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Iterable

CATEGORY_PANEL_SIZE = "panel-size"
CATEGORY_PITCH = "pitch"
CATEGORY_USE_CASE = "use-case"

PRESET_CATEGORIES = (CATEGORY_PANEL_SIZE, CATEGORY_PITCH, CATEGORY_USE_CASE)

CATEGORY_LABELS = {
    CATEGORY_PANEL_SIZE: "Panel size",
    CATEGORY_PITCH: "Pitch",
    CATEGORY_USE_CASE: "Use case",
}


@dataclass(frozen=True)
class Preset:
    id: str
    name: str
    category: str
    panel_width: float
    panel_height: float
    led_pitch: float
    description: str
    is_custom: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Preset":
        """Strict parse of a stored/imported preset; raises ValueError or TypeError."""
        if not isinstance(data, dict):
            raise TypeError("preset must be an object")
        for field in ("id", "name", "description"):
            if not isinstance(data.get(field), str):
                raise ValueError(f"preset.{field} must be a string")
        category = data.get("category")
        if category not in PRESET_CATEGORIES:
            raise ValueError(f"preset.category must be one of {', '.join(PRESET_CATEGORIES)}")
        numbers = {}
        for field in ("panel_width", "panel_height", "led_pitch"):
            value = data.get(field)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise TypeError(f"preset.{field} must be a number")
            if not math.isfinite(float(value)):
                raise ValueError(f"preset.{field} must be finite")
            numbers[field] = value
        return cls(
            id=data["id"],
            name=data["name"],
            category=category,
            description=data["description"],
            is_custom=bool(data.get("is_custom", False)),
            **numbers,
        )


DEFAULT_PRESETS: tuple[Preset, ...] = (
    # panel size
    Preset(
        id="panel-500x500",
        name="500mm × 500mm",
        category=CATEGORY_PANEL_SIZE,
        panel_width=500,
        panel_height=500,
        led_pitch=3.91,
        description="Standard 500mm square panel",
    ),
    Preset(
        id="panel-320x320",
        name="320mm × 320mm",
        category=CATEGORY_PANEL_SIZE,
        panel_width=320,
        panel_height=320,
        led_pitch=2.5,
        description="Compact 320mm square panel",
    ),
    Preset(
        id="panel-250x250",
        name="250mm × 250mm",
        category=CATEGORY_PANEL_SIZE,
        panel_width=250,
        panel_height=250,
        led_pitch=2.5,
        description="Small 250mm square panel",
    ),
    # pitch
    Preset(
        id="pitch-p2.5",
        name="P2.5 (indoor, high quality)",
        category=CATEGORY_PITCH,
        panel_width=320,
        panel_height=320,
        led_pitch=2.5,
        description="High resolution indoor display, viewing distance 2.5m and up",
    ),
    Preset(
        id="pitch-p3.91",
        name="P3.91 (indoor, standard)",
        category=CATEGORY_PITCH,
        panel_width=500,
        panel_height=500,
        led_pitch=3.91,
        description="Standard indoor display, viewing distance 4m and up",
    ),
    Preset(
        id="pitch-p5",
        name="P5 (indoor / outdoor)",
        category=CATEGORY_PITCH,
        panel_width=640,
        panel_height=640,
        led_pitch=5,
        description="Indoor/outdoor display, viewing distance 5m and up",
    ),
    Preset(
        id="pitch-p10",
        name="P10 (outdoor, large screen)",
        category=CATEGORY_PITCH,
        panel_width=960,
        panel_height=960,
        led_pitch=10,
        description="Large outdoor display, viewing distance 10m and up",
    ),
    # use case
    Preset(
        id="usecase-conference",
        name="Conference room",
        category=CATEGORY_USE_CASE,
        panel_width=320,
        panel_height=320,
        led_pitch=2.5,
        description="Small high resolution display for meeting rooms (viewing distance 3-5m)",
    ),
    Preset(
        id="usecase-event",
        name="Event",
        category=CATEGORY_USE_CASE,
        panel_width=500,
        panel_height=500,
        led_pitch=3.91,
        description="Mid-size standard display for events (viewing distance 5-10m)",
    ),
    Preset(
        id="usecase-outdoor",
        name="Outdoor advertising",
        category=CATEGORY_USE_CASE,
        panel_width=960,
        panel_height=960,
        led_pitch=10,
        description="Large low resolution display for outdoor ads (viewing distance 10m and up)",
    ),
)


def get_category_label(category: str) -> str:
    return CATEGORY_LABELS[category]


def get_presets_by_category(presets: Iterable[Preset], category: str) -> list[Preset]:
    return [preset for preset in presets if preset.category == category]


def find_preset_by_id(presets: Iterable[Preset], preset_id: str) -> Preset | None:
    for preset in presets:
        if preset.id == preset_id:
            return preset
    return None
