"""i18n dictionary symmetry: JA/EN keys match and required keys exist."""
from __future__ import annotations

import json
from pathlib import Path


def _load_json(path: Path) -> dict:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def test_ja_en_keys_symmetric() -> None:
    """JA and EN dictionaries have identical key sets."""
    repo_root = Path(__file__).resolve().parents[1]
    ja = _load_json(repo_root / "app" / "i18n" / "ja.json")
    en = _load_json(repo_root / "app" / "i18n" / "en.json")
    assert set(ja.keys()) == set(en.keys()), (
        f"Key mismatch: JA has {set(ja.keys()) - set(en.keys())!r} not in EN; "
        f"EN has {set(en.keys()) - set(ja.keys())!r} not in JA"
    )


def test_required_keys_present() -> None:
    """Required i18n keys exist in both JA and EN."""
    repo_root = Path(__file__).resolve().parents[1]
    ja = _load_json(repo_root / "app" / "i18n" / "ja.json")
    en = _load_json(repo_root / "app" / "i18n" / "en.json")
    required = {
        "app.title",
        "sidebar.db_path",
        "sidebar.language",
        "nav.calculator",
        "nav.presets",
        "errors.calc_failed",
    }
    missing_ja = required - set(ja.keys())
    missing_en = required - set(en.keys())
    assert not missing_ja, f"JA missing keys: {missing_ja}"
    assert not missing_en, f"EN missing keys: {missing_en}"


def test_validation_keys_match_builtin_english() -> None:
    from app.validation import _VALIDATION_EN

    repo_root = Path(__file__).resolve().parents[1]
    en = _load_json(repo_root / "app" / "i18n" / "en.json")
    for key, text in _VALIDATION_EN.items():
        assert en[key] == text, key
