import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to sys.path so texture_packer imports without installing
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from texture_packer import (  # noqa: E402
    ColorTexture,
    PixelBufferTexture,
    SkylinePacker,
    TexturePackerConfig,
)


@pytest.fixture
def make_packer():
    """Factory for skyline packers with a given canvas."""
    def _make(max_width=100, max_height=100, allow_rotation=False):
        return SkylinePacker(TexturePackerConfig(max_width, max_height, allow_rotation))
    return _make


@pytest.fixture
def box():
    """Factory for solid textures of a given size, only their size matters to the packer."""
    def _box(w, h, color=(255, 255, 255, 255)):
        return ColorTexture((w, h), color)
    return _box


@pytest.fixture
def coordinate_texture():
    """Factory for textures whose pixels encode their own (x, y) coordinates."""
    def _make(w, h):
        buffer = np.zeros((h, w, 4), dtype=np.uint8)
        buffer[:, :, 0] = np.arange(w)[np.newaxis, :]
        buffer[:, :, 1] = np.arange(h)[:, np.newaxis]
        buffer[:, :, 3] = 255
        return PixelBufferTexture(buffer)
    return _make
