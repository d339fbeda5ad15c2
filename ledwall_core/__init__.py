"""
ledwall_core: calculation engine and preset store of the LED wall calculator.

- calculations: pure CalculationInput -> CalculationResult
- preset_storage: builtin presets + custom presets in a key-value store

The two never call each other; the Streamlit app and tools/ compose them.
"""

from .calculations import CalculationInput, CalculationResult, calculate_led_wall
from .errors import CalculationError
from .kv_store import MemoryKeyValueStore, SqliteKeyValueStore, StoreError
from .panel_models import get_panel_model_by_id
from .preset_storage import PresetStore

__all__ = [
    "CalculationError",
    "CalculationInput",
    "CalculationResult",
    "MemoryKeyValueStore",
    "PresetStore",
    "SqliteKeyValueStore",
    "StoreError",
    "calculate_led_wall",
    "get_panel_model_by_id",
]
