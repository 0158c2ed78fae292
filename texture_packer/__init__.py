"""texture_packer: skyline based texture atlas packing.

This package packs rectangular textures into a single atlas, keeping the
packed textures addressable as one composite read-only texture, and can
render the atlas to numpy buffers or Pillow images together with a frame
manifest.

MIT License

Copyright (c) 2024 texture_packer contributors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

__version__ = "0.3.0"

from .exporter import export_buffer, export_image, frames_manifest  # noqa: E402
from .packer_types import (  # noqa: E402
    Frame,
    Rect,
    Segment,
    TexturePackerAlgorithm,
    TexturePackerConfig,
)
from .packers import Packer, SkylineInvariantError, SkylinePacker, get_packer  # noqa: E402
from .texture_packer import TexturePacker  # noqa: E402
from .textures import (  # noqa: E402
    ColorTexture,
    ImageTexture,
    MutableTexture,
    PixelBufferTexture,
    Texture,
)

__all__ = [
    "ColorTexture",
    "Frame",
    "ImageTexture",
    "MutableTexture",
    "Packer",
    "PixelBufferTexture",
    "Rect",
    "Segment",
    "SkylineInvariantError",
    "SkylinePacker",
    "Texture",
    "TexturePacker",
    "TexturePackerAlgorithm",
    "TexturePackerConfig",
    "export_buffer",
    "export_image",
    "frames_manifest",
    "get_packer",
]
