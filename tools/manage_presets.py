#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Allow running as "python tools/manage_presets.py" (so repo root is importable)
sys.path.insert(0, str(ROOT))

from ledwall_core.kv_store import SqliteKeyValueStore  # noqa: E402
from ledwall_core.logging_config import setup_logging  # noqa: E402
from ledwall_core.preset_storage import PresetStore  # noqa: E402
from ledwall_core.presets import PRESET_CATEGORIES  # noqa: E402
from ledwall_core.report import presets_to_frame  # noqa: E402


def _cmd_list(store: PresetStore, args: argparse.Namespace) -> int:
    presets = store.load_custom() if args.custom_only else store.get_all()
    if args.category:
        presets = [p for p in presets if p.category == args.category]
    if not presets:
        print("presets: none")
        return 0
    print(presets_to_frame(presets).to_string(index=False))
    return 0


def _cmd_add(store: PresetStore, args: argparse.Namespace) -> int:
    preset = store.add_custom(
        name=args.name,
        category=args.category,
        panel_width=args.panel_width,
        panel_height=args.panel_height,
        led_pitch=args.led_pitch,
        description=args.description,
    )
    if not store.has_custom(preset.id):
        print("ERROR: preset store is not writable", file=sys.stderr)
        return 1
    print("OK")
    print("preset_id:", preset.id)
    return 0


def _cmd_delete(store: PresetStore, args: argparse.Namespace) -> int:
    if not store.delete_custom(args.preset_id):
        print(f"ERROR: custom preset not found: {args.preset_id}", file=sys.stderr)
        return 1
    print("OK")
    return 0


def _cmd_export(store: PresetStore, args: argparse.Namespace) -> int:
    payload = store.export_presets(store.load_custom())
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    print("OK")
    print("exported:", len(payload["presets"]))
    return 0


def _cmd_import(store: PresetStore, args: argparse.Namespace) -> int:
    data = json.loads(Path(args.file).read_text(encoding="utf-8"))
    imported = store.import_presets(data)
    if not store.has_custom(*(p.id for p in imported)):
        print("ERROR: preset store is not writable", file=sys.stderr)
        return 1
    print("OK")
    print("imported:", len(imported))
    return 0


def _cmd_clear(store: PresetStore, args: argparse.Namespace) -> int:
    if not store.clear_custom():
        print("ERROR: preset store is not available", file=sys.stderr)
        return 1
    print("OK")
    return 0


def main() -> int:
    ap = argparse.ArgumentParser(description="Manage LED wall presets in a SQLite key-value store.")
    ap.add_argument("--db", required=True, help="Path to SQLite preset store (e.g. data/presets.sqlite)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = ap.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List builtin and custom presets.")
    p_list.add_argument("--category", choices=PRESET_CATEGORIES, default=None)
    p_list.add_argument("--custom-only", action="store_true")
    p_list.set_defaults(func=_cmd_list)

    p_add = sub.add_parser("add", help="Add a custom preset.")
    p_add.add_argument("--name", required=True)
    p_add.add_argument("--category", choices=PRESET_CATEGORIES, required=True)
    p_add.add_argument("--panel-width", type=float, required=True, help="mm")
    p_add.add_argument("--panel-height", type=float, required=True, help="mm")
    p_add.add_argument("--led-pitch", type=float, required=True, help="mm")
    p_add.add_argument("--description", default="")
    p_add.set_defaults(func=_cmd_add)

    p_delete = sub.add_parser("delete", help="Delete a custom preset by id.")
    p_delete.add_argument("preset_id")
    p_delete.set_defaults(func=_cmd_delete)

    p_export = sub.add_parser("export", help="Export custom presets to JSON.")
    p_export.add_argument("--out", required=True, help="Output JSON path.")
    p_export.set_defaults(func=_cmd_export)

    p_import = sub.add_parser("import", help="Import presets from an export JSON file.")
    p_import.add_argument("file")
    p_import.set_defaults(func=_cmd_import)

    p_clear = sub.add_parser("clear", help="Delete all custom presets.")
    p_clear.set_defaults(func=_cmd_clear)

    args = ap.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    db_path = Path(args.db)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    store = PresetStore(SqliteKeyValueStore(db_path))
    try:
        return args.func(store, args)
    except (OSError, TypeError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
