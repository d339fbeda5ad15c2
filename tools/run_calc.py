#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Allow running as "python tools/run_calc.py" (so repo root is importable)
sys.path.insert(0, str(ROOT))

from ledwall_core.calculations import CalculationInput, calculate_led_wall  # noqa: E402
from ledwall_core.errors import CalculationError  # noqa: E402
from ledwall_core.kv_store import SqliteKeyValueStore  # noqa: E402
from ledwall_core.logging_config import setup_logging  # noqa: E402
from ledwall_core.preset_storage import PresetStore  # noqa: E402
from ledwall_core.presets import DEFAULT_PRESETS, find_preset_by_id  # noqa: E402
from ledwall_core.report import build_payload, result_rows, result_to_frame  # noqa: E402


def _panel_params(args: argparse.Namespace) -> tuple[float, float, float]:
    panel_width = args.panel_width
    panel_height = args.panel_height
    led_pitch = args.led_pitch
    if args.preset:
        if args.db:
            presets = PresetStore(SqliteKeyValueStore(args.db)).get_all()
        else:
            presets = list(DEFAULT_PRESETS)
        preset = find_preset_by_id(presets, args.preset)
        if preset is None:
            raise ValueError(f"Preset not found: {args.preset}")
        panel_width = panel_width if panel_width is not None else preset.panel_width
        panel_height = panel_height if panel_height is not None else preset.panel_height
        led_pitch = led_pitch if led_pitch is not None else preset.led_pitch
    missing = [
        name
        for name, value in (
            ("--panel-width", panel_width),
            ("--panel-height", panel_height),
            ("--led-pitch", led_pitch),
        )
        if value is None
    ]
    if missing:
        raise ValueError(f"Missing {', '.join(missing)} (or pass --preset)")
    return panel_width, panel_height, led_pitch


def main() -> int:
    ap = argparse.ArgumentParser(
        description="Calculate resolution, size, viewing distance and cost of one LED wall."
    )
    ap.add_argument("--panel-width", type=float, default=None, help="Panel width, mm.")
    ap.add_argument("--panel-height", type=float, default=None, help="Panel height, mm.")
    ap.add_argument("--led-pitch", type=float, default=None, help="LED pitch, mm.")
    ap.add_argument("--cols", type=int, required=True, help="Panels horizontally.")
    ap.add_argument("--rows", type=int, required=True, help="Panels vertically.")
    ap.add_argument("--price", type=float, default=None, help="Price per panel, yen (enables cost estimate).")
    ap.add_argument("--panel-id", default=None, help="Panel model id from the catalog (e.g. q-plus-p2.5).")
    ap.add_argument("--preset", default=None, help="Take panel size and pitch from a preset id.")
    ap.add_argument("--db", default=None, help="SQLite preset store, used to resolve custom presets.")
    ap.add_argument("--json", dest="json_out", default=None, help="Write result payload JSON to this path.")
    ap.add_argument("--csv", dest="csv_out", default=None, help="Write Metric/Value table CSV to this path.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = ap.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        panel_width, panel_height, led_pitch = _panel_params(args)
        result = calculate_led_wall(
            CalculationInput(
                panel_width=panel_width,
                panel_height=panel_height,
                screen_width=args.cols,
                screen_height=args.rows,
                led_pitch=led_pitch,
                price_per_panel=args.price,
                selected_panel_id=args.panel_id,
            )
        )
    except CalculationError as exc:
        print(f"ERROR {exc.kind}: {exc.message}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if args.json_out:
        out_path = Path(args.json_out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(
            json.dumps(build_payload(result), ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
    if args.csv_out:
        out_path = Path(args.csv_out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        result_to_frame(result).to_csv(out_path, index=False, encoding="utf-8")

    print("OK")
    for metric, value in result_rows(result):
        print(f"{metric}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
