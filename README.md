# fractol

A small interactive fractal viewer. It draws the Mandelbrot set or a Julia
set in a 500 × 500 window. You can zoom in and out with the mouse wheel.

## Installing

```
pip install .
```

This installs `numpy` and `pygame` as well. To run the tests, install the
`test` extra (`pip install .[test]`) and run `pytest`.

## Running

To show the Mandelbrot set:

```
fractol mandelbrot
```

To show a Julia set:

```
fractol julia <value1> <value2>
```

Each value is a whole number with an optional leading `+` or `-`. The two
values move the Julia constant away from `-0.7 + 0.27015i` in steps of one
hundredth. `value1` moves the real part and `value2` moves the imaginary part.
For example, `fractol julia 0 0` draws the set for `c = -0.7 + 0.27015i`.
`fractol julia 10 -5` draws it for `c = -0.6 + 0.22015i`.

With any other arguments, `fractol` prints a usage message on standard error
and exits with status 1. If the two Julia values are not whole numbers,
`fractol` exits quietly with status 0 and opens no window.

## Controls

| Input               | Action                                     |
|---------------------|--------------------------------------------|
| Scroll wheel up     | Zoom in around the pointer (factor 0.6)    |
| Scroll wheel down   | Zoom out around the pointer (factor 1/0.6) |
| Escape              | Quit                                       |
| Window close button | Quit                                       |

## Colouring

A point that has not escaped after 1000 iterations is drawn in green
(`0x00FF00`). Every other point is drawn in a shade of red,
`((iterations * 14) % 256) << 16`.

## Using it as a library

You can use the pieces without opening a window:

```python
from fractol.fractal import JuliaParams, Variant, fractal_color
from fractol.viewport import Viewport
from fractol.render import render_pixels, to_rgb

view = Viewport.default()              # x in [-2, 1], y in [-1.5, 1.5]
params = JuliaParams(0.0, 0.0, Variant.MANDELBROT)
pixels = render_pixels(view, params)   # 500 x 500 uint32 array of 0xRRGGBB
rgb = to_rgb(pixels)                   # 500 x 500 x 3 uint8 array

colour = fractal_color(-0.5, 0.0, params)
view.zoom(-0.5, 0.0, 0.6)              # zoom in, keeping (-0.5, 0) fixed
view.handle_scroll(5, 250, 250)        # wheel-down at a pixel; returns True
```

The modules are:

- `fractol.fractal`: `Variant`, `JuliaParams`, `escape_iterations`,
  `fractal_color`, `map_x_to_real` and `map_y_to_comp`.
- `fractol.viewport`: `Viewport`, with `default`, `zoom` and
  `handle_scroll`.
- `fractol.render`: `render_pixels` and `to_rgb`.
- `fractol.cli`: `main`, `parse_args`, `is_str_num`, `run_window` and
  `UsageError`.

`fractol.libft` holds small helpers that the viewer uses:

- `chars`: character classes and case conversion.
- `strings`: string parsing, searching and bounded copies.
- `memory`: byte-buffer helpers.
- `linked_list`: a singly linked list.
- `output`: writing to a stream or a file descriptor.

## Limits

The viewer only zooms. It has no panning, no way to change colours or the
iteration limit, and no way to save an image. The window size is fixed at
500 × 500.