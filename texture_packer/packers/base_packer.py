"""Interface implemented by every packing algorithm.

A packer owns the free-space model of one packing session. It is handed one
texture at a time and either places it, returning the Frame describing where
it went, or returns None when the texture does not fit any more. A failed
pack leaves the packer's state untouched, so the caller is free to skip the
texture and carry on, or to start a new session with a larger canvas.

Packers keep mutable state and are not safe to share between threads without
external locking.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..packer_types import Frame, TexturePackerConfig
from ..textures import Texture


class Packer(ABC):
    """Base class for packing strategies.

    Attributes:
        config: Settings of the packing session.
    """

    def __init__(self, config: TexturePackerConfig) -> None:
        self.config = config

    @abstractmethod
    def pack(self, key: str, texture: Texture) -> Optional[Frame]:
        """Place a texture.

        Args:
            key: Identifier recorded in the returned frame.
            texture: Texture to place, only its size is read.

        Returns:
            The placement, or None if the texture cannot fit within the
            configured bounds.
        """
        pass
