"""Export of packed atlases to pixel buffers, images and frame manifests.

The atlas itself is a read-only view over its source textures. The functions
here render that view into new pixel storage and describe the frames in a
form that can be saved next to the image, e.g. as JSON.

Typical usage example:
    atlas = TexturePacker(config)
    ...
    export_image(atlas).save('atlas.png')
    with open('atlas.json', 'w') as f:
        json.dump(frames_manifest(atlas), f)
"""

import logging
from typing import Any, Dict

import numpy as np
from PIL import Image

from .globs import debug_print
from .packer_types import Rect
from .textures import ImageTexture, PixelBufferTexture, Texture
from .texture_packer import TexturePacker
from .type_annotations import PixelBuffer

logger = logging.getLogger(__name__)

# Pillow modes storing one byte per band
EIGHT_BIT_MODES = {"L", "LA", "RGB", "RGBA", "RGBX", "CMYK"}


def export_buffer(texture: Texture, channels: int = 4, dtype=np.single) -> PixelBuffer:
    """Render a texture into a new pixel buffer.

    Pixels are written into the first channels of the buffer, so a pixel with
    fewer channels than the buffer leaves the rest at 0. Points the texture
    returns no pixel for, such as the gaps between atlas frames, stay 0 in
    every channel.

    Args:
        texture: Texture to render, typically a TexturePacker.
        channels: Number of channels of the new buffer.
        dtype: numpy dtype of the new buffer.

    Returns:
        A (height, width, channels) pixel buffer.

    Raises:
        ValueError: If the texture has no pixels, e.g. an empty atlas.
    """
    width, height = texture.width(), texture.height()
    if width <= 0 or height <= 0:
        raise ValueError("Cannot export an empty {}x{} texture".format(width, height))

    buffer = np.zeros((height, width, channels), dtype=dtype)
    if isinstance(texture, TexturePacker):
        for frame in texture.frames():
            source = texture.textures()[frame.key]
            if not frame.rotated:
                pixels = _source_buffer(source, channels)
            elif type(source).get_rotated is Texture.get_rotated:
                # Clockwise, matching Texture.get_rotated
                pixels = np.rot90(_source_buffer(source, channels), k=-1)
            else:
                pixels = _sample_buffer(source.get_rotated, frame.frame.w, frame.frame.h)
            _paste(buffer, pixels, frame.frame)
    else:
        _paste(buffer, _source_buffer(texture, channels), Rect(0, 0, width, height))
    return buffer


def export_image(texture: Texture, mode: str = "RGBA") -> Image.Image:
    """Render a texture into a new Pillow image.

    Channel values are expected in the 0 to 255 range and are clipped to it.

    Raises:
        ValueError: If mode does not store one byte per band.
    """
    if mode not in EIGHT_BIT_MODES:
        raise ValueError("Cannot export to mode {!r}, supported modes are {}".format(
            mode, ", ".join(sorted(EIGHT_BIT_MODES))))
    bands = len(Image.new(mode, (1, 1)).getbands())
    buffer = export_buffer(texture, channels=bands)
    pixels = np.clip(buffer, 0, 255).astype(np.uint8)
    return Image.frombytes(mode, (pixels.shape[1], pixels.shape[0]), pixels.tobytes())


def frames_manifest(atlas: TexturePacker) -> Dict[str, Any]:
    """Describe the frames of an atlas in the order they were packed."""
    return {
        "frames": {frame.key: frame.to_dict() for frame in atlas.frames()},
        "meta": {
            "size": {"w": atlas.width(), "h": atlas.height()},
        },
    }


def _source_buffer(texture: Texture, channels: int) -> PixelBuffer:
    if isinstance(texture, PixelBufferTexture):
        return texture.buffer
    if isinstance(texture, ImageTexture):
        image = texture.image
        # Opaque images get their alpha band when the target has one
        if channels == 4 and image.mode != "RGBA":
            image = image.convert("RGBA")
        pixels = np.asarray(image)
        return pixels[:, :, np.newaxis] if pixels.ndim == 2 else pixels

    debug_print("Sampling {}x{} {} pixel by pixel".format(texture.width(), texture.height(), type(texture).__name__))
    return _sample_buffer(texture.get, texture.width(), texture.height())


def _sample_buffer(sample, width: int, height: int) -> PixelBuffer:
    rows = []
    for y in range(height):
        rows.append([sample(x, y) for x in range(width)])
    channels = max((len(pixel) for row in rows for pixel in row if pixel is not None), default=1)
    buffer = np.zeros((height, width, channels), dtype=np.single)
    for y, row in enumerate(rows):
        for x, pixel in enumerate(row):
            if pixel is not None:
                buffer[y, x, :len(pixel)] = pixel
    return buffer


def _paste(target: PixelBuffer, source: PixelBuffer, rect: Rect) -> None:
    if source.shape[:2] != (rect.h, rect.w):
        raise TypeError("Source of shape {} cannot be pasted into {}".format(source.shape, rect))
    num_channels = min(source.shape[2], target.shape[2])
    if num_channels < source.shape[2]:
        logger.debug("Dropping %d channels pasting into %s", source.shape[2] - num_channels, rect)
    target[rect.y:rect.bottom(), rect.x:rect.right(), :num_channels] = source[:, :, :num_channels]
