"""Mandelbrot and Julia set viewer with mouse-wheel zoom."""

__version__ = "0.1.0"