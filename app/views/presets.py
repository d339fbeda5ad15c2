from __future__ import annotations

import json

import streamlit as st

from app.i18n import t
from app.store import presets_from_rows
from app.ui_components import category_chip, category_label
from app.validation import validate_preset_rows
from ledwall_core.preset_storage import PresetStore
from ledwall_core.presets import DEFAULT_PRESETS, PRESET_CATEGORIES
from ledwall_core.report import presets_to_frame

EDITOR_COLUMNS = ["id", "name", "category", "panel_width", "panel_height", "led_pitch", "description"]


def _render_builtin() -> None:
    st.subheader(t("presets.builtin"))
    for category in PRESET_CATEGORIES:
        category_chip(category, t)
        df = presets_to_frame([p for p in DEFAULT_PRESETS if p.category == category])
        st.dataframe(df[EDITOR_COLUMNS[1:]], use_container_width=True, hide_index=True)


def _render_custom_editor(store: PresetStore) -> None:
    st.subheader(t("presets.custom_header"))
    customs = store.load_custom()
    df = presets_to_frame(customs)[EDITOR_COLUMNS]
    edited = st.data_editor(
        df,
        num_rows="dynamic",
        use_container_width=True,
        hide_index=True,
        key="custom_presets_editor",
        column_config={
            "id": st.column_config.TextColumn("id", disabled=True),
            "category": st.column_config.SelectboxColumn(
                t("presets.category"), options=list(PRESET_CATEGORIES), required=True
            ),
            "panel_width": st.column_config.NumberColumn("panel_width (mm)", min_value=0.0),
            "panel_height": st.column_config.NumberColumn("panel_height (mm)", min_value=0.0),
            "led_pitch": st.column_config.NumberColumn("led_pitch (mm)", min_value=0.0),
        },
    )

    validation = validate_preset_rows(edited, translator=t)
    for warning in validation.warnings:
        st.warning(warning)
    for error in validation.errors:
        st.error(error)

    if st.button(t("presets.save_table_btn"), disabled=validation.has_errors):
        if store.save_custom(presets_from_rows(edited)):
            st.success(t("presets.table_saved"))
            st.rerun()
        else:
            st.error(t("errors.store_unavailable"))


def _render_delete(store: PresetStore) -> None:
    customs = store.load_custom()
    if not customs:
        return
    cols = st.columns([3, 1], vertical_alignment="bottom")
    with cols[0]:
        idx = st.selectbox(
            t("presets.delete_select"),
            options=range(len(customs)),
            format_func=lambda i: f"{customs[i].name} ({category_label(customs[i].category, t)})",
        )
    with cols[1]:
        if st.button(t("presets.delete_btn")):
            if store.delete_custom(customs[idx].id):
                st.success(t("presets.deleted", name=customs[idx].name))
                st.rerun()
            else:
                st.error(t("errors.preset_delete_failed"))


def _render_import_export(store: PresetStore) -> None:
    st.subheader(t("presets.import_export"))
    customs = store.load_custom()
    st.download_button(
        t("presets.export_btn"),
        data=json.dumps(store.export_presets(customs), ensure_ascii=False, indent=2),
        file_name="led_presets.json",
        mime="application/json",
        disabled=not customs,
    )

    uploaded = st.file_uploader(t("presets.import_file"), type=["json"])
    if uploaded is not None and st.button(t("presets.import_btn")):
        try:
            imported = store.import_presets(json.loads(uploaded.getvalue().decode("utf-8")))
        except (TypeError, ValueError) as exc:
            st.error(t("errors.import_failed", exc=exc))
        else:
            if store.has_custom(*(p.id for p in imported)):
                st.success(t("presets.imported", count=len(imported)))
            else:
                st.error(t("errors.store_unavailable"))

    if customs and st.button(t("presets.clear_btn")):
        if store.clear_custom():
            st.success(t("presets.cleared"))
            st.rerun()
        else:
            st.error(t("errors.store_unavailable"))


def render(store: PresetStore, state) -> None:
    st.header(t("presets.header"))
    if not store.is_available():
        st.warning(t("errors.store_unavailable"))

    _render_builtin()
    _render_custom_editor(store)
    _render_delete(store)
    _render_import_export(store)
