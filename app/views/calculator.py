from __future__ import annotations

import logging

import streamlit as st

from app.i18n import t
from app.ui_components import category_label, render_result
from ledwall_core.calculations import CalculationInput, calculate_led_wall
from ledwall_core.errors import CalculationError
from ledwall_core.panel_models import PANEL_MODELS, get_panel_model_by_id
from ledwall_core.preset_storage import PresetStore
from ledwall_core.presets import PRESET_CATEGORIES, Preset

logger = logging.getLogger(__name__)

FORM_DEFAULTS = {
    "panel_width": 500.0,
    "panel_height": 500.0,
    "screen_width": 4,
    "screen_height": 3,
    "led_pitch": 2.5,
    "with_cost": False,
    "price_per_panel": 100000.0,
    "selected_panel_id": None,
}


def init_form_state(state) -> None:
    for key, value in FORM_DEFAULTS.items():
        state.setdefault(key, value)


def _apply_preset(preset: Preset) -> None:
    state = st.session_state
    state["panel_width"] = float(preset.panel_width)
    state["panel_height"] = float(preset.panel_height)
    state["led_pitch"] = float(preset.led_pitch)
    state["selected_panel_id"] = None


def _apply_panel_model() -> None:
    state = st.session_state
    panel = get_panel_model_by_id(state.get("selected_panel_id") or "")
    if panel is None:
        return
    state["panel_width"] = float(panel.panel_width)
    state["panel_height"] = float(panel.panel_height)
    state["led_pitch"] = float(panel.pixel_pitch)
    if panel.price_per_panel is not None:
        state["price_per_panel"] = float(panel.price_per_panel)


def _render_preset_picker(store: PresetStore) -> None:
    presets = store.get_all()
    if not presets:
        return
    labels = [
        f"[{category_label(p.category, t)}] {p.name}" + (" *" if p.is_custom else "")
        for p in presets
    ]
    cols = st.columns([3, 1], vertical_alignment="bottom")
    with cols[0]:
        idx = st.selectbox(
            t("calculator.preset"),
            options=range(len(presets)),
            format_func=lambda i: labels[i],
        )
    with cols[1]:
        st.button(t("calculator.apply_preset"), on_click=_apply_preset, args=(presets[idx],))
    if presets[idx].description:
        st.caption(presets[idx].description)


def _render_panel_picker() -> None:
    options = [None] + [p.id for p in PANEL_MODELS]
    st.selectbox(
        t("calculator.panel_model"),
        options=options,
        key="selected_panel_id",
        format_func=lambda pid: t("calculator.no_panel_model")
        if pid is None
        else get_panel_model_by_id(pid).display_name,
        on_change=_apply_panel_model,
    )


def _render_inputs() -> CalculationInput:
    state = st.session_state
    cols = st.columns(2)
    with cols[0]:
        st.number_input(t("form.panel_width"), min_value=0.0, step=10.0, key="panel_width")
        st.number_input(t("form.screen_width"), min_value=0, step=1, key="screen_width")
        st.number_input(t("form.led_pitch"), min_value=0.0, step=0.1, format="%.2f", key="led_pitch")
    with cols[1]:
        st.number_input(t("form.panel_height"), min_value=0.0, step=10.0, key="panel_height")
        st.number_input(t("form.screen_height"), min_value=0, step=1, key="screen_height")
        st.checkbox(t("form.with_cost"), key="with_cost")
        if state["with_cost"]:
            st.number_input(t("form.price_per_panel"), min_value=0.0, step=1000.0, key="price_per_panel")

    return CalculationInput(
        panel_width=state["panel_width"],
        panel_height=state["panel_height"],
        screen_width=state["screen_width"],
        screen_height=state["screen_height"],
        led_pitch=state["led_pitch"],
        price_per_panel=state["price_per_panel"] if state["with_cost"] else None,
        selected_panel_id=state.get("selected_panel_id"),
    )


def _render_save_as_preset(store: PresetStore, data: CalculationInput) -> None:
    with st.expander(t("calculator.save_as_preset")):
        with st.form("save_preset_form", clear_on_submit=True):
            name = st.text_input(t("presets.name"))
            category = st.selectbox(
                t("presets.category"),
                PRESET_CATEGORIES,
                format_func=lambda c: category_label(c, t),
            )
            description = st.text_input(t("presets.description"))
            submitted = st.form_submit_button(t("presets.save_btn"))

    if not submitted:
        return
    if not name.strip():
        st.error(t("validation.name_required"))
        return
    try:
        preset = store.add_custom(
            name=name.strip(),
            category=category,
            panel_width=data.panel_width,
            panel_height=data.panel_height,
            led_pitch=data.led_pitch,
            description=description.strip(),
        )
    except (TypeError, ValueError) as exc:
        st.error(t("errors.preset_save_failed", exc=exc))
        return
    if not store.has_custom(preset.id):
        st.error(t("errors.store_unavailable"))
        return
    st.success(t("presets.saved", name=preset.name))


def render(store: PresetStore, state) -> None:
    st.header(t("calculator.header"))
    init_form_state(state)

    _render_preset_picker(store)
    _render_panel_picker()
    data = _render_inputs()

    try:
        result = calculate_led_wall(data)
    except CalculationError as exc:
        logger.debug("Calculation rejected: %s (%s)", exc.message, exc.kind)
        st.error(t("errors.calc_failed", kind=exc.kind, exc=exc.message))
        return

    st.subheader(t("calculator.result"))
    render_result(result, t)
    _render_save_as_preset(store, data)
