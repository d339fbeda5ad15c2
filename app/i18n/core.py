"""
i18n core: load_lang (cached JSON) and t(key, **kwargs).
The active language is st.session_state["lang"] (JA/EN), JA by default.
"""
from __future__ import annotations

import json
from pathlib import Path

import streamlit as st

_I18N_DIR = Path(__file__).resolve().parent
_CACHE: dict[str, dict[str, str]] = {}

LANGUAGES = ("JA", "EN")
DEFAULT_LANG = "JA"


def load_lang(lang: str) -> dict[str, str]:
    """Load locale JSON for lang (JA/EN). Cached; unknown languages load empty."""
    if lang not in _CACHE:
        path = _I18N_DIR / f"{lang.lower()}.json"
        if lang in LANGUAGES and path.exists():
            with path.open(encoding="utf-8") as f:
                _CACHE[lang] = json.load(f)
        else:
            _CACHE[lang] = {}
    return _CACHE[lang]


def current_lang() -> str:
    try:
        lang = st.session_state.get("lang", DEFAULT_LANG)
    except Exception:
        # no Streamlit runtime (tools, tests)
        return DEFAULT_LANG
    return lang if lang in LANGUAGES else DEFAULT_LANG


def t(key: str, *, lang: str | None = None, **kwargs) -> str:
    """
    Translate key in lang, or in the session language when lang is None.
    Supports .format(**kwargs). Falls back to EN, then to the key itself.
    """
    active = lang or current_lang()
    raw = load_lang(active).get(key)
    if raw is None:
        raw = load_lang("EN").get(key, key)
    if not kwargs:
        return raw
    try:
        return raw.format(**kwargs)
    except (KeyError, ValueError):
        return raw
