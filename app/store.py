from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from ledwall_core.kv_store import SqliteKeyValueStore
from ledwall_core.preset_storage import PresetStore, generate_custom_id
from ledwall_core.presets import Preset

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DB_PATH = str(ROOT / "data" / "presets.sqlite")


def open_preset_store(db_path: str | Path) -> PresetStore:
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return PresetStore(SqliteKeyValueStore(path))


def _text(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def presets_from_rows(df: pd.DataFrame) -> list[Preset]:
    """
    Turns the (already validated) editor table back into custom presets.
    Rows without an id are new and get one here.
    """
    presets: list[Preset] = []
    for _, row in df.iterrows():
        preset_id = _text(row.get("id")) or generate_custom_id()
        presets.append(
            Preset.from_dict(
                {
                    "id": preset_id,
                    "name": _text(row.get("name")),
                    "category": row.get("category"),
                    "panel_width": float(row.get("panel_width")),
                    "panel_height": float(row.get("panel_height")),
                    "led_pitch": float(row.get("led_pitch")),
                    "description": _text(row.get("description")),
                    "is_custom": True,
                }
            )
        )
    return presets
