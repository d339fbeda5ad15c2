from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

import pandas as pd

from ledwall_core.presets import PRESET_CATEGORIES

Translator = Callable[..., str]

# Default English strings for callers that do not pass a translator.
_VALIDATION_EN = {
    "validation.name_required": "name is required",
    "validation.category": "category must be panel-size, pitch, or use-case",
    "validation.field_required": "{field} is required",
    "validation.field_positive": "{field} must be > 0",
    "validation.field_number": "{field} must be a number",
    "validation.pitch_exceeds_panel": "led_pitch is larger than the panel; resolution will be 0",
    "validation.duplicate_name": "name is used by another preset",
}

NUMERIC_FIELDS = ("panel_width", "panel_height", "led_pitch")


def _tr(translator: Translator | None, key: str, **kwargs: Any) -> str:
    if translator is None:
        raw = _VALIDATION_EN.get(key, key)
        return raw.format(**kwargs) if kwargs else raw
    return translator(key, **kwargs)


@dataclass(frozen=True)
class ValidationResult:
    errors: list[str]
    warnings: list[str]
    row_status: dict[int, str]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def is_finite(value: Any) -> bool:
    try:
        num = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(num)


def _is_blank(value: Any) -> bool:
    if value is None or value == "":
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def validate_preset_rows(df: pd.DataFrame, *, translator: Translator | None = None) -> ValidationResult:
    """
    Validates the custom preset editor table before it is written back.

    Expects DataFrame with columns:
    id, name, category, panel_width, panel_height, led_pitch, description
    """
    errors: list[str] = []
    warnings: list[str] = []
    statuses: dict[int, str] = {}
    seen_names: set[str] = set()

    for idx, row in df.iterrows():
        row_errors: list[str] = []
        row_warnings: list[str] = []

        name = str(row.get("name") or "").strip()
        label = name or str(row.get("id") or f"row#{idx}")

        if not name:
            row_errors.append(_tr(translator, "validation.name_required"))
        elif name in seen_names:
            row_warnings.append(_tr(translator, "validation.duplicate_name"))
        seen_names.add(name)

        if row.get("category") not in PRESET_CATEGORIES:
            row_errors.append(_tr(translator, "validation.category"))

        values: dict[str, float] = {}
        for field in NUMERIC_FIELDS:
            val = row.get(field)
            if _is_blank(val):
                row_errors.append(_tr(translator, "validation.field_required", field=field))
            elif not is_finite(val):
                row_errors.append(_tr(translator, "validation.field_number", field=field))
            elif float(val) <= 0:
                row_errors.append(_tr(translator, "validation.field_positive", field=field))
            else:
                values[field] = float(val)

        if len(values) == len(NUMERIC_FIELDS):
            if values["led_pitch"] > min(values["panel_width"], values["panel_height"]):
                row_warnings.append(_tr(translator, "validation.pitch_exceeds_panel"))

        if row_errors:
            errors.append(f"{label}: " + "; ".join(row_errors))
            statuses[idx] = "INVALID"
        else:
            statuses[idx] = "OK"

        if row_warnings:
            warnings.append(f"{label}: " + "; ".join(row_warnings))

    return ValidationResult(errors=errors, warnings=warnings, row_status=statuses)
