"""
Playfield display backed by a numpy buffer.

The game draws into the buffer; the window turns it into a pygame
surface each frame.
"""

import pygame
import numpy as np
from numpy.typing import NDArray

from coinrunner.graphics.primitives import new_buffer


class PlayfieldDisplay:
    """RGB frame buffer sized to the window."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = new_buffer(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> NDArray[np.uint8]:
        return self._buffer

    def resize(self, width: int, height: int) -> None:
        """Reallocate the buffer for a new window size."""
        if (width, height) == (self._width, self._height):
            return
        self._width = width
        self._height = height
        self._buffer = new_buffer(width, height)

    def render(self) -> pygame.Surface:
        """Render buffer to a pygame surface."""
        return pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
