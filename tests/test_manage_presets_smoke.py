from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TOOL = ROOT / "tools" / "manage_presets.py"


def _run(db_path: Path, *args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(TOOL), "--db", str(db_path), *args],
        capture_output=True,
        text=True,
        check=False,
        cwd=str(ROOT),
    )


def _preset_id(stdout: str) -> str:
    for line in stdout.splitlines():
        if line.startswith("preset_id:"):
            return line.split(":", 1)[1].strip()
    raise AssertionError(stdout)


def test_manage_presets_cli_smoke(tmp_path: Path) -> None:
    db_path = tmp_path / "data" / "presets.sqlite"

    added = _run(
        db_path,
        "add",
        "--name", "Hall",
        "--category", "use-case",
        "--panel-width", "500",
        "--panel-height", "500",
        "--led-pitch", "3.91",
    )
    assert added.returncode == 0, added.stderr
    preset_id = _preset_id(added.stdout)

    listed = _run(db_path, "list", "--custom-only")
    assert listed.returncode == 0, listed.stderr
    assert preset_id in listed.stdout

    export_path = tmp_path / "export.json"
    exported = _run(db_path, "export", "--out", str(export_path))
    assert exported.returncode == 0, exported.stderr
    doc = json.loads(export_path.read_text(encoding="utf-8"))
    assert doc["version"] == "1.0"
    assert [p["id"] for p in doc["presets"]] == [preset_id]

    imported = _run(db_path, "import", str(export_path))
    assert imported.returncode == 0, imported.stderr
    assert "imported: 1" in imported.stdout

    deleted = _run(db_path, "delete", preset_id)
    assert deleted.returncode == 0, deleted.stderr
    assert _run(db_path, "delete", preset_id).returncode == 1

    cleared = _run(db_path, "clear")
    assert cleared.returncode == 0, cleared.stderr
    assert "presets: none" in _run(db_path, "list", "--custom-only").stdout


def test_manage_presets_cli_rejects_bad_import(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"presets": "nope"}), encoding="utf-8")
    result = _run(tmp_path / "presets.sqlite", "import", str(bad))
    assert result.returncode == 2
    assert "Invalid preset data format" in result.stderr


def test_manage_presets_cli_fails_when_store_cannot_be_written(tmp_path: Path) -> None:
    # a directory cannot be opened as an SQLite database
    db_path = tmp_path / "not_a_db"
    db_path.mkdir()

    added = _run(
        db_path,
        "add",
        "--name", "Hall",
        "--category", "pitch",
        "--panel-width", "500",
        "--panel-height", "500",
        "--led-pitch", "2.5",
    )
    assert added.returncode == 1
    assert "OK" not in added.stdout
    assert "not writable" in added.stderr

    doc = tmp_path / "import.json"
    doc.write_text(
        json.dumps(
            {
                "version": "1.0",
                "presets": [
                    {
                        "id": "custom-1-abcdef0",
                        "name": "Hall",
                        "category": "pitch",
                        "panel_width": 500,
                        "panel_height": 500,
                        "led_pitch": 2.5,
                        "description": "",
                        "is_custom": True,
                    }
                ],
            }
        ),
        encoding="utf-8",
    )
    imported = _run(db_path, "import", str(doc))
    assert imported.returncode == 1
    assert "not writable" in imported.stderr
