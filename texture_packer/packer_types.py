"""Data types shared by the packers and the atlas facade.

Rect and Frame are immutable once created, so they are named tuples. Segment
is the only mutable record: the skyline updater shrinks segments in place.
"""

from enum import Enum
from typing import Any, Dict, NamedTuple

from .globs import (
    DEFAULT_ALLOW_ROTATION,
    DEFAULT_MAX_HEIGHT,
    DEFAULT_MAX_WIDTH,
    MAX_ATLAS_SIZE,
)


# __dict__ based baseclass
class _Base:
    def __repr__(self):
        items = ("{}={}".format(k, repr(v)) for k, v in self.__dict__.items())
        return "{}({})".format(type(self).__name__, ", ".join(items))

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.__dict__ == other.__dict__


class Segment(_Base):
    """One run of the skyline contour.

    Every canvas column in [x, x + w) is occupied up to height y.
    """

    def __init__(self, x: int, y: int, w: int):
        self.x = x
        self.y = y
        self.w = w

    def right(self) -> int:
        return self.x + self.w


class Rect(NamedTuple):
    """Axis-aligned rectangle with its top-left corner at (x, y)."""

    x: int
    y: int
    w: int
    h: int

    def right(self) -> int:
        return self.x + self.w

    def bottom(self) -> int:
        return self.y + self.h

    def area(self) -> int:
        return self.w * self.h

    def contains_point(self, x: int, y: int) -> bool:
        return self.x <= x < self.right() and self.y <= y < self.bottom()

    def intersects(self, other: "Rect") -> bool:
        return (
            self.x < other.right()
            and other.x < self.right()
            and self.y < other.bottom()
            and other.y < self.bottom()
        )


class Frame(NamedTuple):
    """Where one texture ended up in the atlas.

    Attributes:
        key: Identifier the texture was submitted under.
        frame: Occupied rectangle in atlas coordinates. For rotated frames
            its width is the texture's height and vice versa.
        rotated: True if the texture was placed turned 90 degrees.
        trimmed: Always False, transparent borders are never cropped.
        source: The full extent of the source texture, (0, 0, width, height).
    """

    key: str
    frame: Rect
    rotated: bool
    trimmed: bool
    source: Rect

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frame": self.frame._asdict(),
            "rotated": self.rotated,
            "trimmed": self.trimmed,
            "spriteSourceSize": self.source._asdict(),
            "sourceSize": {"w": self.source.w, "h": self.source.h},
        }


class TexturePackerAlgorithm(Enum):
    """Packing algorithms a TexturePacker can be configured with."""

    SKYLINE = "skyline"


class TexturePackerConfig:
    """Settings for one packing session.

    The config is treated as immutable once a packer has been created from it.

    Attributes:
        max_width: Hard limit on the atlas width in pixels.
        max_height: Hard limit on the atlas height in pixels.
        allow_rotation: Whether textures may be placed turned 90 degrees.
        algorithm: Packing algorithm to use.
    """

    def __init__(
        self,
        max_width: int = DEFAULT_MAX_WIDTH,
        max_height: int = DEFAULT_MAX_HEIGHT,
        allow_rotation: bool = DEFAULT_ALLOW_ROTATION,
        algorithm: TexturePackerAlgorithm = TexturePackerAlgorithm.SKYLINE,
    ) -> None:
        for name, value in (("max_width", max_width), ("max_height", max_height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("{} must be an integer, got {!r}".format(name, value))
            if not 0 < value <= MAX_ATLAS_SIZE:
                raise ValueError("{} must be between 1 and {}, got {}".format(name, MAX_ATLAS_SIZE, value))
        if not isinstance(algorithm, TexturePackerAlgorithm):
            raise ValueError("algorithm must be a TexturePackerAlgorithm, got {!r}".format(algorithm))

        self._max_width = max_width
        self._max_height = max_height
        self._allow_rotation = bool(allow_rotation)
        self._algorithm = algorithm

    @property
    def max_width(self) -> int:
        return self._max_width

    @property
    def max_height(self) -> int:
        return self._max_height

    @property
    def allow_rotation(self) -> bool:
        return self._allow_rotation

    @property
    def algorithm(self) -> TexturePackerAlgorithm:
        return self._algorithm

    def __repr__(self):
        return "{}(max_width={}, max_height={}, allow_rotation={}, algorithm={})".format(
            type(self).__name__, self._max_width, self._max_height, self._allow_rotation, self._algorithm
        )

    def __eq__(self, other):
        return isinstance(other, TexturePackerConfig) and (
            (self._max_width, self._max_height, self._allow_rotation, self._algorithm)
            == (other._max_width, other._max_height, other._allow_rotation, other._algorithm)
        )

    def __hash__(self):
        return hash((self._max_width, self._max_height, self._allow_rotation, self._algorithm))
