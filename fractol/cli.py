"""Command-line entry point: parse arguments and open the fractal window."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from fractol.fractal import HEIGHT, WIDTH, JuliaParams, Variant
from fractol.libft.output import putstr_fd
from fractol.libft.strings import atoi
from fractol.render import render_pixels, to_rgb
from fractol.viewport import Viewport

USAGE = 'Usage: "./fractol mandelbrot" or "./fractol julia <value1> <value2>"'
WINDOW_TITLE = "test"


class UsageError(Exception):
    """The command line does not name a known fractal with its arguments."""


def is_str_num(text: Optional[str]) -> bool:
    """True when ``text`` is an optional sign followed only by digits."""
    if text is None:
        return False
    body = text[1:] if text[:1] in ("+", "-") else text
    if text[:1] in ("+", "-") and not body:
        return False
    return all("0" <= ch <= "9" for ch in body)


def parse_args(argv: Sequence[str]) -> JuliaParams:
    """Turn the arguments after the program name into fractal parameters.

    Raises UsageError for an unknown form and ValueError when the Julia
    offsets are not integers.
    """
    args = list(argv)
    if len(args) == 1 and args[0] == "mandelbrot":
        return JuliaParams(mode=Variant.MANDELBROT)
    if len(args) == 3 and args[0] == "julia":
        real, comp = args[1], args[2]
        if not (is_str_num(real) and is_str_num(comp)):
            raise ValueError("julia parameters must be integers")
        return JuliaParams(float(atoi(real)), float(atoi(comp)), Variant.JULIA)
    raise UsageError(USAGE)


def run_window(viewport: Viewport, params: JuliaParams) -> None:
    """Show the fractal and zoom with the mouse wheel until closed or Escape."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        def draw() -> None:
            rgb = to_rgb(render_pixels(viewport, params))
            surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        draw()
        running = True
        while running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                if viewport.handle_scroll(event.button, x, y):
                    draw()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        params = parse_args(argv)
    except UsageError as error:
        putstr_fd(str(error), sys.stderr)
        return 1
    except ValueError:
        # Bad Julia offsets close the program quietly with success.
        return 0
    run_window(Viewport.default(), params)
    return 0


if __name__ == "__main__":
    sys.exit(main())