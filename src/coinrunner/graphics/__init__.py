"""Graphics module for Coin Runner rendering."""

from coinrunner.graphics.primitives import draw_rect, draw_circle, fill, new_buffer
from coinrunner.graphics.scene import render_session

__all__ = [
    "draw_rect",
    "draw_circle",
    "fill",
    "new_buffer",
    "render_session",
]
