"""
LED wall calculation engine.

Pure functions: CalculationInput -> CalculationResult. Validation always runs
first; every failure is raised as CalculationError with a machine-checkable
kind and is never recovered from here.

Formulas:
- resolution: floor(panel / pitch) pixels per panel (no fractional LEDs)
- physical size: panel x count (mm), area in m2
- pixel density: total_pixels / area
- viewing distance: pitch, 3.5x and 10x the larger wall side (m)
- cost: panel_count x price, per m2 from the rounded total
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from .errors import INVALID_INPUT, OUT_OF_RANGE, ZERO_DIVISION, CalculationError
from .panel_models import get_panel_model_by_id
from .panels import PanelModel

PanelLookup = Callable[[str], "PanelModel | None"]

MM2_PER_M2 = 1_000_000
MM_PER_M = 1000

OPTIMAL_DISTANCE_FACTOR = 3.5
MAXIMUM_DISTANCE_FACTOR = 10.0


@dataclass(frozen=True)
class CalculationInput:
    panel_width: float
    panel_height: float
    screen_width: int
    screen_height: int
    led_pitch: float
    price_per_panel: float | None = None
    selected_panel_id: str | None = None


@dataclass(frozen=True)
class Resolution:
    width: int
    height: int
    total_pixels: int


@dataclass(frozen=True)
class PhysicalSize:
    width: float
    height: float
    area: float


@dataclass(frozen=True)
class ViewingDistance:
    minimum: float
    optimal: float
    maximum: float


@dataclass(frozen=True)
class CostEstimate:
    panel_count: int
    total_cost: int
    cost_per_square_meter: int


@dataclass(frozen=True)
class PanelModelInfo:
    id: str
    model_number: str
    display_name: str
    series: str
    brightness: float
    refresh_rate: float | None = None
    viewing_angle: float | None = None


@dataclass(frozen=True)
class CalculationResult:
    input: CalculationInput
    panel_count: int
    resolution: Resolution
    physical_size: PhysicalSize
    pixel_density: int
    viewing_distance: ViewingDistance
    cost_estimate: CostEstimate | None = None
    panel_model: PanelModelInfo | None = None


def round_half_up(value: float, ndigits: int = 0) -> float:
    # ties go towards +inf, not to even
    scale = 10**ndigits
    return math.floor(value * scale + 0.5) / scale


def _round_int(value: float) -> int:
    return int(math.floor(value + 0.5))


def _number(value: object, field: str) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise CalculationError(INVALID_INPUT, f"{field} must be a number")
    num = float(value)
    if math.isnan(num) or math.isinf(num):
        raise CalculationError(INVALID_INPUT, f"{field} must be finite")
    return num


def _is_integral(value: float) -> bool:
    return float(value).is_integer()


def validate_input(data: CalculationInput) -> None:
    panel_width = _number(data.panel_width, "panel_width")
    panel_height = _number(data.panel_height, "panel_height")
    screen_width = _number(data.screen_width, "screen_width")
    screen_height = _number(data.screen_height, "screen_height")
    led_pitch = _number(data.led_pitch, "led_pitch")

    if panel_width <= 0 or panel_height <= 0:
        raise CalculationError(INVALID_INPUT, "panel size must be greater than 0")

    if screen_width <= 0 or screen_height <= 0:
        raise CalculationError(INVALID_INPUT, "screen size (panel count) must be greater than 0")

    if not _is_integral(screen_width) or not _is_integral(screen_height):
        raise CalculationError(INVALID_INPUT, "screen size (panel count) must be an integer")

    if led_pitch <= 0:
        raise CalculationError(ZERO_DIVISION, "led_pitch must be greater than 0")

    if data.price_per_panel is not None:
        if _number(data.price_per_panel, "price_per_panel") < 0:
            raise CalculationError(INVALID_INPUT, "price_per_panel must be >= 0")

    _check_derived_range(data, panel_width, panel_height, screen_width, screen_height, led_pitch)


def _check_derived_range(
    data: CalculationInput,
    panel_width: float,
    panel_height: float,
    screen_width: float,
    screen_height: float,
    led_pitch: float,
) -> None:
    # every intermediate must stay a finite float, or int()/floor() overflow later
    panel_count = screen_width * screen_height
    pixels = (panel_width / led_pitch * screen_width) * (panel_height / led_pitch * screen_height)
    wall_width = panel_width * screen_width
    wall_height = panel_height * screen_height
    area = wall_width * wall_height / MM2_PER_M2

    derived = [
        ("panel count", panel_count),
        ("total pixels", pixels),
        ("screen area", area),
        ("viewing distance", max(wall_width, wall_height) * MAXIMUM_DISTANCE_FACTOR + led_pitch * MM_PER_M),
    ]
    if area > 0:
        derived.append(("pixel density", pixels / area))
    if data.price_per_panel is not None:
        total_cost = data.price_per_panel * panel_count
        derived.append(("total cost", total_cost))
        if area > 0:
            derived.append(("cost per square meter", total_cost / area))

    for name, value in derived:
        if not math.isfinite(value):
            raise CalculationError(OUT_OF_RANGE, f"{name} is out of range")


def calculate_panel_count(screen_width: int, screen_height: int) -> int:
    return int(screen_width * screen_height)


def calculate_resolution(data: CalculationInput) -> Resolution:
    pixels_per_panel_width = math.floor(data.panel_width / data.led_pitch)
    pixels_per_panel_height = math.floor(data.panel_height / data.led_pitch)

    width = int(pixels_per_panel_width * data.screen_width)
    height = int(pixels_per_panel_height * data.screen_height)
    return Resolution(width=width, height=height, total_pixels=width * height)


def calculate_physical_size(data: CalculationInput) -> PhysicalSize:
    width = data.panel_width * data.screen_width
    height = data.panel_height * data.screen_height
    return PhysicalSize(width=width, height=height, area=(width * height) / MM2_PER_M2)


def calculate_pixel_density(resolution: Resolution, physical_size: PhysicalSize) -> float:
    if physical_size.area == 0:
        raise CalculationError(ZERO_DIVISION, "area is zero, cannot compute pixel density")
    return resolution.total_pixels / physical_size.area


def calculate_viewing_distance(data: CalculationInput, physical_size: PhysicalSize) -> ViewingDistance:
    max_dimension = max(physical_size.width, physical_size.height)

    minimum = (data.led_pitch * 1000) / 1000
    optimal = (max_dimension * OPTIMAL_DISTANCE_FACTOR) / MM_PER_M
    maximum = (max_dimension * MAXIMUM_DISTANCE_FACTOR) / MM_PER_M

    return ViewingDistance(
        minimum=round_half_up(minimum, 1),
        optimal=round_half_up(optimal, 1),
        maximum=round_half_up(maximum, 1),
    )


def calculate_cost_estimate(panel_count: int, price_per_panel: float, area: float) -> CostEstimate:
    if area == 0:
        raise CalculationError(ZERO_DIVISION, "area is zero, cannot compute cost per square meter")

    total_cost = _round_int(panel_count * price_per_panel)
    return CostEstimate(
        panel_count=panel_count,
        total_cost=total_cost,
        cost_per_square_meter=_round_int(total_cost / area),
    )


def _panel_model_info(panel: PanelModel) -> PanelModelInfo:
    return PanelModelInfo(
        id=panel.id,
        model_number=panel.model_number,
        display_name=panel.display_name,
        series=panel.series,
        brightness=panel.brightness,
        refresh_rate=panel.refresh_rate,
        viewing_angle=panel.viewing_angle,
    )


def calculate_led_wall(
    data: CalculationInput,
    *,
    lookup: PanelLookup = get_panel_model_by_id,
) -> CalculationResult:
    """
    Full calculation for one wall.

    Cost is only estimated when price_per_panel is set; the panel summary is
    only attached when selected_panel_id resolves in the catalog (unknown ids
    are dropped silently).
    """
    validate_input(data)

    panel_count = calculate_panel_count(data.screen_width, data.screen_height)
    resolution = calculate_resolution(data)
    physical_size = calculate_physical_size(data)
    pixel_density = calculate_pixel_density(resolution, physical_size)
    viewing_distance = calculate_viewing_distance(data, physical_size)

    cost_estimate = None
    if data.price_per_panel is not None:
        cost_estimate = calculate_cost_estimate(panel_count, data.price_per_panel, physical_size.area)

    panel_model = None
    if data.selected_panel_id:
        panel = lookup(data.selected_panel_id)
        if panel is not None:
            panel_model = _panel_model_info(panel)

    return CalculationResult(
        input=data,
        panel_count=panel_count,
        resolution=resolution,
        physical_size=physical_size,
        pixel_density=_round_int(pixel_density),
        viewing_distance=viewing_distance,
        cost_estimate=cost_estimate,
        panel_model=panel_model,
    )


def mm_to_m(mm: float) -> float:
    return mm / MM_PER_M


def m_to_mm(m: float) -> float:
    return m * MM_PER_M


def mm2_to_m2(mm2: float) -> float:
    return mm2 / MM2_PER_M2


def m2_to_mm2(m2: float) -> float:
    return m2 * MM2_PER_M2
