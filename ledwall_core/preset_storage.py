"""
Custom preset persistence on top of the builtin catalog.

The whole custom list lives as one JSON array under a single key. Reads never
raise (missing key, unavailable store, or bad data all mean "no customs");
writes report failure as False.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Iterable

from .kv_store import KeyValueStore, StoreError
from .presets import DEFAULT_PRESETS, Preset

logger = logging.getLogger(__name__)

STORAGE_KEY = "led-calculator-presets"
STORAGE_VERSION = "1.0"

_PROBE_KEY = "__storage_test__"
_PROTECTED_FIELDS = ("id", "is_custom")


def _iso_utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


def generate_custom_id() -> str:
    return f"custom-{int(time.time() * 1000)}-{uuid.uuid4().hex[:7]}"


class PresetStore:
    def __init__(self, store: KeyValueStore, *, key: str = STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    def is_available(self) -> bool:
        try:
            self.store.set(_PROBE_KEY, _PROBE_KEY)
            self.store.remove(_PROBE_KEY)
        except StoreError:
            return False
        return True

    def load_custom(self) -> list[Preset]:
        if not self.is_available():
            logger.warning("Preset store is not available")
            return []
        try:
            raw = self.store.get(self.key)
            if not raw:
                return []
            data = json.loads(raw)
            if not isinstance(data, list):
                return []
            return [Preset.from_dict(item) for item in data]
        except (StoreError, ValueError, TypeError) as exc:
            logger.error("Failed to load custom presets: %s", exc)
            return []

    def save_custom(self, presets: Iterable[Preset]) -> bool:
        if not self.is_available():
            logger.warning("Preset store is not available")
            return False
        payload = json.dumps([p.to_dict() for p in presets], ensure_ascii=False)
        try:
            self.store.set(self.key, payload)
        except StoreError as exc:
            logger.error("Failed to save custom presets: %s", exc)
            return False
        return True

    def has_custom(self, *preset_ids: str) -> bool:
        """True when every id is among the persisted custom presets."""
        stored = {p.id for p in self.load_custom()}
        return all(preset_id in stored for preset_id in preset_ids)

    def get_all(self) -> list[Preset]:
        return [*DEFAULT_PRESETS, *self.load_custom()]

    def add_custom(
        self,
        *,
        name: str,
        category: str,
        panel_width: float,
        panel_height: float,
        led_pitch: float,
        description: str = "",
    ) -> Preset:
        preset = Preset.from_dict(
            {
                "id": generate_custom_id(),
                "name": name,
                "category": category,
                "panel_width": panel_width,
                "panel_height": panel_height,
                "led_pitch": led_pitch,
                "description": description,
                "is_custom": True,
            }
        )
        presets = self.load_custom()
        presets.append(preset)
        self.save_custom(presets)
        logger.info("Added custom preset %s (%s)", preset.id, preset.name)
        return preset

    def update_custom(self, preset_id: str, **updates: Any) -> bool:
        presets = self.load_custom()
        for index, preset in enumerate(presets):
            if preset.id == preset_id and preset.is_custom:
                break
        else:
            return False

        changes = {k: v for k, v in updates.items() if k not in _PROTECTED_FIELDS}
        updated = Preset.from_dict({**presets[index].to_dict(), **changes})
        presets[index] = replace(updated, id=preset_id, is_custom=True)
        return self.save_custom(presets)

    def delete_custom(self, preset_id: str) -> bool:
        presets = self.load_custom()
        remaining = [p for p in presets if p.id != preset_id]
        if len(remaining) == len(presets):
            return False
        return self.save_custom(remaining)

    def export_presets(self, presets: Iterable[Preset]) -> dict[str, Any]:
        return {
            "version": STORAGE_VERSION,
            "export_date": _iso_utc_now(),
            "presets": [p.to_dict() for p in presets],
        }

    def import_presets(self, data: Any) -> list[Preset]:
        """
        Appends every preset in an export document as a new custom preset.

        Imported entries always get fresh ids so they never collide with
        existing ones.
        """
        items = data.get("presets") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise ValueError("Invalid preset data format")

        imported = [
            Preset.from_dict({**item, "id": generate_custom_id(), "is_custom": True})
            if isinstance(item, dict)
            else Preset.from_dict(item)
            for item in items
        ]
        presets = self.load_custom()
        self.save_custom([*presets, *imported])
        logger.info("Imported %d presets", len(imported))
        return imported

    def clear_custom(self) -> bool:
        if not self.is_available():
            return False
        try:
            self.store.remove(self.key)
        except StoreError as exc:
            logger.error("Failed to clear custom presets: %s", exc)
            return False
        return True
