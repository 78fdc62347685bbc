"""Escape-time iteration and colouring for the Mandelbrot and Julia sets."""

from __future__ import annotations

import enum
from dataclasses import dataclass

WIDTH = 500
HEIGHT = 500
MAX_ITER = 1000
ZOOM_FACTOR = 0.6

# Julia constant used when both user offsets are zero.
JULIA_C_REAL = -0.7
JULIA_C_COMP = 0.27015

INSIDE_COLOR = 0x00FF00


class Variant(enum.Enum):
    """Which fractal is drawn."""

    MANDELBROT = enum.auto()
    JULIA = enum.auto()


@dataclass(frozen=True)
class JuliaParams:
    """Fractal selection and the Julia offsets, given in hundredths."""

    c_real: float = 0.0
    c_comp: float = 0.0
    mode: Variant = Variant.MANDELBROT


def escape_iterations(cr: float, ci: float, zr: float, zi: float) -> int:
    """Iterate z = z*z + c from z until |z| reaches 2 or MAX_ITER steps pass."""
    iterations = 0
    while iterations < MAX_ITER and (zr * zr + zi * zi) < 4.0:
        temp = zr * zr - zi * zi + cr
        zi = 2.0 * zr * zi + ci
        zr = temp
        iterations += 1
    return iterations


def fractal_color(real: float, comp: float, params: JuliaParams) -> int:
    """Return the 0xRRGGBB colour of the point (real, comp)."""
    if params.mode is Variant.MANDELBROT:
        iterations = escape_iterations(real, comp, 0.0, 0.0)
    else:
        iterations = escape_iterations(
            JULIA_C_REAL + params.c_real / 100,
            JULIA_C_COMP + params.c_comp / 100,
            real,
            comp,
        )
    if iterations == MAX_ITER:
        return INSIDE_COLOR
    return ((iterations * 14) % 256) << 16


def map_x_to_real(x: float, x_min: float, x_max: float) -> float:
    """Map a pixel column to the real axis."""
    return x_min + (x / WIDTH) * (x_max - x_min)


def map_y_to_comp(y: float, y_min: float, y_max: float) -> float:
    """Map a pixel row to the imaginary axis."""
    return y_min + (y / HEIGHT) * (y_max - y_min)