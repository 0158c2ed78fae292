"""Texture capability and the bundled texture adapters.

The packers and the atlas facade only ever talk to the Texture interface:
a size, a direct sampler and a rotated sampler. How pixels are stored is up to
the implementation. Three adapters are provided:
- PixelBufferTexture: a numpy pixel buffer of shape (height, width, channels)
- ImageTexture: a Pillow image
- ColorTexture: a single solid color of a given size, read-only

Coordinates treat (0, 0) as the top left pixel, as Pillow does.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np
from PIL import Image

from .type_annotations import Pixel, PixelBuffer, Size


class Texture(ABC):
    """Read-only access to a rectangular grid of pixels."""

    @abstractmethod
    def width(self) -> int:
        pass

    @abstractmethod
    def height(self) -> int:
        pass

    @abstractmethod
    def get(self, x: int, y: int) -> Optional[Pixel]:
        """Get the pixel at (x, y), or None if the point is outside the texture."""
        pass

    def get_rotated(self, x: int, y: int) -> Optional[Pixel]:
        """Get a pixel of this texture as seen turned 90 degrees clockwise.

        The rotated view is height() pixels wide and width() pixels tall.
        """
        return self.get(y, self.height() - x - 1)

    def size(self) -> Size:
        return self.width(), self.height()

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width() and 0 <= y < self.height()


class MutableTexture(Texture):
    """A texture whose pixels can be written."""

    @abstractmethod
    def set(self, x: int, y: int, pixel: Pixel) -> None:
        pass


class PixelBufferTexture(MutableTexture):
    """Texture backed by a numpy pixel buffer.

    A 2D buffer is viewed as a single channel (height, width, 1) buffer.
    """

    def __init__(self, buffer: PixelBuffer) -> None:
        buffer = np.asarray(buffer)
        if buffer.ndim == 2:
            buffer = buffer[:, :, np.newaxis]
        if buffer.ndim != 3 or not 1 <= buffer.shape[2] <= 4:
            raise TypeError("buffer must have the shape (height, width, 1 to 4 channels), but has shape {}"
                            .format(buffer.shape))
        self.buffer = buffer

    @classmethod
    def new(cls, size: Size, color: Sequence[float] = (0.0, 0.0, 0.0, 0.0), dtype=np.single) -> "PixelBufferTexture":
        """Create a texture of the given (width, height) filled with a single color."""
        width, height = size
        return cls(np.full((height, width, len(color)), fill_value=color, dtype=dtype))

    def width(self) -> int:
        return self.buffer.shape[1]

    def height(self) -> int:
        return self.buffer.shape[0]

    def channels(self) -> int:
        return self.buffer.shape[2]

    def get(self, x: int, y: int) -> Optional[Pixel]:
        if not self.contains(x, y):
            return None
        return tuple(self.buffer[y, x].tolist())

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        if not self.contains(x, y):
            raise IndexError("({}, {}) is outside of the {}x{} texture".format(x, y, self.width(), self.height()))
        self.buffer[y, x] = pixel


class ImageTexture(MutableTexture):
    """Texture backed by a Pillow image."""

    def __init__(self, image: Image.Image) -> None:
        self.image = image

    @classmethod
    def open(cls, path, mode: Optional[str] = "RGBA") -> "ImageTexture":
        image = Image.open(path)
        if mode and image.mode != mode:
            image = image.convert(mode)
        else:
            image.load()
        return cls(image)

    def width(self) -> int:
        return self.image.width

    def height(self) -> int:
        return self.image.height

    def get(self, x: int, y: int) -> Optional[Pixel]:
        if not self.contains(x, y):
            return None
        pixel = self.image.getpixel((x, y))
        return pixel if isinstance(pixel, tuple) else (pixel,)

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        if not self.contains(x, y):
            raise IndexError("({}, {}) is outside of the {}x{} texture".format(x, y, self.width(), self.height()))
        # Single band images take a bare value
        value = pixel[0] if len(self.image.getbands()) == 1 else tuple(pixel)
        self.image.putpixel((x, y), value)


class ColorTexture(Texture):
    """Read-only texture where every pixel is the same color."""

    def __init__(self, size: Size, color: Pixel) -> None:
        width, height = size
        if width < 0 or height < 0:
            raise ValueError("size must not be negative, got {}".format(size))
        if not 1 <= len(color) <= 4:
            raise TypeError("A color can have between 1 and 4 (inclusive) components, but found {} in {}"
                            .format(len(color), color))
        self._width = width
        self._height = height
        self.color = tuple(color)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def get(self, x: int, y: int) -> Optional[Pixel]:
        return self.color if self.contains(x, y) else None
