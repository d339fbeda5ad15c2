from __future__ import annotations

import math


def format_number(value: float) -> str:
    """Thousand separators, at most three fraction digits: 1234.5 -> "1,234.5"."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_dimensions(width: float, height: float, unit: str = "") -> str:
    text = f"{format_number(width)} × {format_number(height)}"
    return f"{text} {unit}" if unit else text


def format_resolution(width: int, height: int) -> str:
    return f"{format_dimensions(width, height, 'px')} ({format_number(width * height)} pixels)"


def format_physical_size(width_mm: float, height_mm: float) -> dict[str, str]:
    return {
        "meters": f"{width_mm / 1000:.2f} × {height_mm / 1000:.2f} m",
        "millimeters": f"{format_number(width_mm)} × {format_number(height_mm)} mm",
    }


def format_area(area: float) -> str:
    return f"{area:.2f} m²"


def format_distance(meters: float) -> str:
    return f"{meters:.1f} m"


def format_currency(amount: float) -> str:
    return f"¥{format_number(amount)}"


def format_pixel_density(density: float) -> str:
    return f"{format_number(density)} pixels/m²"


def format_aspect_ratio(width: int, height: int) -> str:
    divisor = math.gcd(int(width), int(height))
    if divisor == 0:
        return f"{int(width)}:{int(height)}"
    return f"{int(width) // divisor}:{int(height) // divisor}"


def format_panel_count(total: int, width: int, height: int) -> str:
    return f"{format_number(total)} panels ({width} × {height})"
