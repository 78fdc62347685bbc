"""Compute a whole frame of fractal colours at once."""

from __future__ import annotations

import numpy as np

from fractol.fractal import (
    HEIGHT,
    INSIDE_COLOR,
    JULIA_C_COMP,
    JULIA_C_REAL,
    MAX_ITER,
    WIDTH,
    JuliaParams,
    Variant,
)
from fractol.viewport import Viewport


def _escape_grid(
    cr: np.ndarray, ci: np.ndarray, zr: np.ndarray, zi: np.ndarray
) -> np.ndarray:
    """Escape iteration counts for every element, same steps as the scalar version."""
    shape = cr.shape
    cr, ci = cr.ravel(), ci.ravel()
    zr, zi = zr.ravel().copy(), zi.ravel().copy()
    counts = np.zeros(cr.size, dtype=np.int64)

    active = np.flatnonzero(zr * zr + zi * zi < 4.0)
    zr, zi, cr, ci = zr[active], zi[active], cr[active], ci[active]
    for _ in range(MAX_ITER):
        if active.size == 0:
            break
        temp = zr * zr - zi * zi + cr
        zi = 2.0 * zr * zi + ci
        zr = temp
        counts[active] += 1
        keep = zr * zr + zi * zi < 4.0
        if not keep.all():
            active, zr, zi, cr, ci = active[keep], zr[keep], zi[keep], cr[keep], ci[keep]
    return counts.reshape(shape)


def render_pixels(viewport: Viewport, params: JuliaParams) -> np.ndarray:
    """Return a HEIGHT x WIDTH array of 0xRRGGBB colours for the view."""
    xs = np.arange(WIDTH, dtype=np.float64)
    ys = np.arange(HEIGHT, dtype=np.float64)
    real = viewport.x_min + (xs / WIDTH) * (viewport.x_max - viewport.x_min)
    comp = viewport.y_min + (ys / HEIGHT) * (viewport.y_max - viewport.y_min)
    real_grid, comp_grid = np.meshgrid(real, comp)

    if params.mode is Variant.MANDELBROT:
        counts = _escape_grid(
            real_grid, comp_grid, np.zeros_like(real_grid), np.zeros_like(comp_grid)
        )
    else:
        cr = np.full(real_grid.shape, JULIA_C_REAL + params.c_real / 100)
        ci = np.full(real_grid.shape, JULIA_C_COMP + params.c_comp / 100)
        counts = _escape_grid(cr, ci, real_grid, comp_grid)

    colors = np.where(counts == MAX_ITER, INSIDE_COLOR, ((counts * 14) % 256) << 16)
    return colors.astype(np.uint32)


def to_rgb(pixels: np.ndarray) -> np.ndarray:
    """Split 0xRRGGBB values into a trailing axis of red, green and blue bytes."""
    values = np.asarray(pixels, dtype=np.uint32)
    return np.stack(
        [(values >> 16) & 0xFF, (values >> 8) & 0xFF, values & 0xFF], axis=-1
    ).astype(np.uint8)