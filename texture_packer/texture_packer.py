"""Texture atlas built from packed source textures.

TexturePacker takes ownership of the textures submitted to it, places them
with the configured packing algorithm and then behaves as a single read-only
texture: sampling a pixel of the atlas samples the source texture placed
there, turning the coordinates for textures that were placed rotated.

The atlas is never rendered into its own pixel storage here, see
texture_packer.exporter for that.

A TexturePacker is not safe to share between threads without external
locking.

Typical usage example:
    atlas = TexturePacker(TexturePackerConfig(max_width=512, max_height=512))
    for name, path in sprites.items():
        if atlas.pack_own(name, ImageTexture.open(path)) is None:
            print("{} did not fit".format(name))
    image = export_image(atlas)
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .packer_types import Frame, TexturePackerConfig
from .packers import Packer, get_packer
from .textures import Texture
from .type_annotations import Pixel

logger = logging.getLogger(__name__)


class TexturePacker(Texture):
    """Atlas of packed textures exposed as one read-only texture.

    Attributes:
        config: Settings of the packing session.
        packer: Strategy used to place textures.
    """

    def __init__(self, config: Optional[TexturePackerConfig] = None, packer: Optional[Packer] = None) -> None:
        """Initialize an empty atlas.

        Args:
            config: Packing settings, TexturePackerConfig() if not given.
            packer: Packing strategy to use instead of the one selected by
                config.algorithm. Its config is used when config is not given.

        Raises:
            ValueError: If both are given and config differs from packer.config.
        """
        if packer is not None:
            if config is not None and config != packer.config:
                raise ValueError("Config {!r} does not match the packer config {!r}".format(config, packer.config))
            config = packer.config
        self.config = config or TexturePackerConfig()
        self.packer = packer or get_packer(self.config)
        self._textures: Dict[str, Texture] = {}
        self._frames: List[Frame] = []

    def pack_own(self, key: str, texture: Texture) -> Optional[Frame]:
        """Take ownership of a texture and place it in the atlas.

        The texture is kept under its key even if it did not fit.

        Args:
            key: Unique identifier of the texture.
            texture: Texture to place.

        Returns:
            The texture's frame, or None if there was no room for it.

        Raises:
            KeyError: If a texture was already submitted under key.
        """
        if key in self._textures:
            raise KeyError("A texture named {!r} was already packed".format(key))

        frame = self.packer.pack(key, texture)
        if frame is not None:
            self._frames.append(frame)
        else:
            logger.warning("Texture %r (%dx%d) does not fit in the atlas", key, texture.width(), texture.height())

        self._textures[key] = texture
        return frame

    pack = pack_own

    def frames(self) -> Tuple[Frame, ...]:
        """Get the frames of all placed textures in the order they were packed."""
        return tuple(self._frames)

    def textures(self) -> Mapping[str, Texture]:
        return MappingProxyType(self._textures)

    def get_frame(self, key: str) -> Optional[Frame]:
        return next((frame for frame in self._frames if frame.key == key), None)

    def get_frame_at(self, x: int, y: int) -> Optional[Frame]:
        """Get the frame covering a point of the atlas.

        Frames never overlap, so the first match is the only one.
        """
        for frame in self._frames:
            if frame.frame.contains_point(x, y):
                return frame
        return None

    def is_empty(self) -> bool:
        return not self._frames

    def width(self) -> int:
        """Width of the bounding box of all frames.

        This is one more than the largest frame right edge, or 0 when nothing
        was placed.
        """
        if not self._frames:
            return 0
        return max(frame.frame.right() for frame in self._frames) + 1

    def height(self) -> int:
        """Height of the bounding box of all frames.

        This is one more than the largest frame bottom edge, or 0 when nothing
        was placed.
        """
        if not self._frames:
            return 0
        return max(frame.frame.bottom() for frame in self._frames) + 1

    def get(self, x: int, y: int) -> Optional[Pixel]:
        frame = self.get_frame_at(x, y)
        if frame is None:
            return None

        texture = self._textures[frame.key]
        x -= frame.frame.x
        y -= frame.frame.y
        return texture.get_rotated(x, y) if frame.rotated else texture.get(x, y)

    def __len__(self) -> int:
        return len(self._frames)

    def __contains__(self, key) -> bool:
        return key in self._textures
