from __future__ import annotations

import json
from typing import Callable

import streamlit as st

from ledwall_core.calculations import CalculationResult
from ledwall_core.formatters import (
    format_area,
    format_currency,
    format_distance,
    format_number,
    format_pixel_density,
)
from ledwall_core.report import build_payload, result_to_frame

_CATEGORY_KEYS = {
    "panel-size": "category.panel_size",
    "pitch": "category.pitch",
    "use-case": "category.use_case",
}


def _category_style(category: str, is_custom: bool) -> tuple[str, str]:
    """
    Returns (bg_color, fg_color) for a category pill.
    Colors are chosen to be readable in both Streamlit light/dark themes.
    """
    if is_custom:
        return "#6b21a8", "white"
    if category == "panel-size":
        return "#1d4ed8", "white"
    if category == "pitch":
        return "#1f7a3a", "white"
    if category == "use-case":
        return "#b45309", "white"
    return "#374151", "white"


def category_label(category: str, t: Callable[..., str]) -> str:
    return t(_CATEGORY_KEYS.get(category, "category.unknown"))


def category_chip(category: str, t: Callable[..., str], *, is_custom: bool = False) -> None:
    bg, fg = _category_style(category, is_custom)
    label = category_label(category, t)
    if is_custom:
        label = f"{label} · {t('presets.custom')}"
    st.markdown(
        f"""
        <span style="
          display:inline-block;
          padding:0.15rem 0.55rem;
          border-radius:999px;
          background:{bg};
          color:{fg};
          font-weight:600;
          font-size:0.85rem;
          line-height:1.4;
          white-space:nowrap;
        ">{label}</span>
        """,
        unsafe_allow_html=True,
    )


def render_result(result: CalculationResult, t: Callable[..., str]) -> None:
    res = result.resolution
    cols = st.columns(4)
    cols[0].metric(t("result.panel_count"), format_number(result.panel_count))
    cols[1].metric(t("result.resolution"), f"{format_number(res.width)} × {format_number(res.height)}")
    cols[2].metric(t("result.area"), format_area(result.physical_size.area))
    cols[3].metric(t("result.pixel_density"), format_pixel_density(result.pixel_density))

    vd = result.viewing_distance
    cols = st.columns(3)
    cols[0].metric(t("result.distance_min"), format_distance(vd.minimum))
    cols[1].metric(t("result.distance_optimal"), format_distance(vd.optimal))
    cols[2].metric(t("result.distance_max"), format_distance(vd.maximum))

    if result.cost_estimate is not None:
        cols = st.columns(2)
        cols[0].metric(t("result.total_cost"), format_currency(result.cost_estimate.total_cost))
        cols[1].metric(
            t("result.cost_per_m2"),
            format_currency(result.cost_estimate.cost_per_square_meter),
        )

    if result.panel_model is not None:
        st.caption(
            t(
                "result.panel_model",
                name=result.panel_model.display_name,
                series=result.panel_model.series,
            )
        )

    with st.expander(t("result.details")):
        st.dataframe(result_to_frame(result), use_container_width=True, hide_index=True)
        st.download_button(
            t("result.download_json"),
            data=json.dumps(build_payload(result), ensure_ascii=False, indent=2),
            file_name="led_wall_result.json",
            mime="application/json",
        )
