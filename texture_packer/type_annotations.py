"""Type annotations for texture_packer.

This module defines the type hints shared by the packers, the texture
adapters and the exporter. It centralizes them to avoid repetition and keep
the pixel and size vocabulary consistent.
"""

from typing import Tuple, Union

from numpy import ndarray

Size = Tuple[int, int]

# A 'pixel buffer' is a numpy array viewed in the 3D shape (height, width, channels)
PixelBuffer = ndarray

# Pixels are opaque to the packer; the bundled adapters return tuples of 1 to 4 channels
RPixel = Tuple[float]
RGPixel = Tuple[float, float]
RGBPixel = Tuple[float, float, float]
RGBAPixel = Tuple[float, float, float, float]
Pixel = Union[RPixel, RGPixel, RGBPixel, RGBAPixel, Tuple[int, ...]]
