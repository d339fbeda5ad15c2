from __future__ import annotations

import sys
from pathlib import Path
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.i18n import DEFAULT_LANG, LANGUAGES, t  # noqa: E402
from app.store import DEFAULT_DB_PATH, open_preset_store  # noqa: E402
from app.views import calculator, presets  # noqa: E402
from ledwall_core.kv_store import StoreError  # noqa: E402
from ledwall_core.logging_config import setup_logging  # noqa: E402


def _init_state() -> None:
    state = st.session_state
    state.setdefault("db_path", DEFAULT_DB_PATH)
    state.setdefault("lang", DEFAULT_LANG)
    state.setdefault("logging_ready", False)
    if not state["logging_ready"]:
        setup_logging()
        state["logging_ready"] = True


def main() -> None:
    st.set_page_config(page_title="LED Wall Calculator", layout="wide")
    _init_state()
    state = st.session_state

    with st.sidebar:
        st.title(t("app.title"))
        st.radio(t("sidebar.language"), LANGUAGES, key="lang", horizontal=True)
        st.text_input(t("sidebar.db_path"), key="db_path")
        page = st.radio(
            t("sidebar.navigation"),
            ["calculator", "presets"],
            format_func=lambda p: t(f"nav.{p}"),
        )

    try:
        store = open_preset_store(state["db_path"])
    except (OSError, StoreError) as exc:  # pragma: no cover - UI error path
        st.error(t("errors.store_open_failed", exc=exc))
        return

    pages = {
        "calculator": calculator,
        "presets": presets,
    }

    pages[page].render(store, state)


if __name__ == "__main__":
    main()
