"""The visible rectangle of the complex plane and how scrolling zooms it."""

from __future__ import annotations

from dataclasses import dataclass

from fractol.fractal import HEIGHT, WIDTH, ZOOM_FACTOR, map_x_to_real, map_y_to_comp

SCROLL_UP = 4
SCROLL_DOWN = 5


@dataclass
class Viewport:
    """Bounds of the complex-plane region shown in the window."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @classmethod
    def default(cls) -> "Viewport":
        """The starting view, three units tall, centred on -0.5."""
        original_y_range = 3.0
        x_center = -0.5
        new_x_range = (WIDTH // HEIGHT) * original_y_range
        return cls(
            x_min=x_center - new_x_range / 2,
            x_max=x_center + new_x_range / 2,
            y_min=-original_y_range / 2,
            y_max=original_y_range / 2,
        )

    def zoom(self, c_real: float, c_comp: float, factor: float) -> None:
        """Scale the view by ``factor`` keeping (c_real, c_comp) in place."""
        current_width = self.x_max - self.x_min
        current_height = self.y_max - self.y_min
        x_scale = (current_width * factor) / current_width
        y_scale = (current_height * factor) / current_height
        self.x_min = c_real - x_scale * (c_real - self.x_min)
        self.x_max = c_real + x_scale * (self.x_max - c_real)
        self.y_min = c_comp - y_scale * (c_comp - self.y_min)
        self.y_max = c_comp + y_scale * (self.y_max - c_comp)

    def handle_scroll(self, button: int, x: int, y: int) -> bool:
        """Zoom in on button 4 and out on button 5 around pixel (x, y).

        Returns whether the view changed.
        """
        c_real = map_x_to_real(x, self.x_min, self.x_max)
        c_comp = map_y_to_comp(y, self.y_min, self.y_max)
        if button == SCROLL_UP:
            self.zoom(c_real, c_comp, ZOOM_FACTOR)
        elif button == SCROLL_DOWN:
            self.zoom(c_real, c_comp, 1.0 / ZOOM_FACTOR)
        else:
            return False
        return True