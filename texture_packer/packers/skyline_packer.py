"""Skyline bin packing algorithm for arranging textures in atlases.

The free space of the canvas is described by a skyline: an ordered list of
segments covering the full canvas width, each one recording how high the
columns below it are already filled. A texture is placed on top of the
skyline at the position that keeps the new top edge as low as possible,
preferring narrower supporting segments on ties. Placing a texture raises the
skyline under it, and neighbouring segments of equal height are merged so the
segment count follows the number of distinct heights rather than the number
of placed textures.

The packer is a heuristic and makes no optimality guarantee. It keeps mutable
state and is not safe to share between threads without external locking.

Typical usage example:
    packer = SkylinePacker(TexturePackerConfig(max_width=256, max_height=256))
    frame = packer.pack('grass', ColorTexture((32, 32), (0, 255, 0, 255)))
"""

import logging
from typing import List, Optional, Tuple

from ..globs import debug_print
from ..packer_types import Frame, Rect, Segment, TexturePackerConfig
from ..textures import Texture
from .base_packer import Packer

logger = logging.getLogger(__name__)


class SkylineInvariantError(AssertionError):
    """Indicates the skyline reached a state the algorithm can never produce.

    This is a bug in the packer, not a condition callers should handle.
    """

    pass


class SkylinePacker(Packer):
    """Skyline bin packing implementation.

    Attributes:
        config: Settings of the packing session.
        skylines: Segments of the skyline in ascending x order.
    """

    def __init__(self, config: TexturePackerConfig) -> None:
        super().__init__(config)
        self.skylines: List[Segment] = [Segment(0, 0, config.max_width)]

    def pack(self, key: str, texture: Texture) -> Optional[Frame]:
        """Place a texture on the skyline.

        Args:
            key: Identifier recorded in the returned frame.
            texture: Texture to place, only its size is read.

        Returns:
            The frame for the texture, or None if it does not fit. The
            skyline is left unchanged when None is returned.

        Raises:
            ValueError: If the texture has no pixels.
        """
        width = texture.width()
        height = texture.height()
        if width <= 0 or height <= 0:
            raise ValueError("Cannot pack {!r} with empty size {}x{}".format(key, width, height))

        found = self.find_skyline(width, height)
        if found is None:
            logger.info("No room for %r (%dx%d) in %dx%d atlas", key, width, height,
                        self.config.max_width, self.config.max_height)
            return None

        index, rect = found
        self.split(index, rect)
        self.merge()
        self.check_invariants()

        frame = Frame(
            key=key,
            frame=rect,
            rotated=width != rect.w,
            trimmed=False,
            source=Rect(0, 0, width, height),
        )
        debug_print("Packed", key, "at", rect, "rotated" if frame.rotated else "")
        return frame

    def can_put(self, i: int, w: int, h: int) -> Optional[int]:
        """Check if a w x h rectangle can rest on the skyline starting at segment i.

        The rectangle sits on the highest segment it spans.

        Args:
            i: Index of the segment the rectangle's left edge is aligned to.
            w: Width required.
            h: Height required.

        Returns:
            The y coordinate of the rectangle's top edge, or None if it would
            cross the right or bottom edge of the canvas.
        """
        x = self.skylines[i].x
        if x + w > self.config.max_width:
            return None

        width_left = w
        y = self.skylines[i].y
        while True:
            y = max(y, self.skylines[i].y)
            if y + h > self.config.max_height:
                return None
            if self.skylines[i].w >= width_left:
                return y
            width_left -= self.skylines[i].w
            i += 1
            if i >= len(self.skylines):
                raise SkylineInvariantError(
                    "Skyline ended {}px short of the canvas width {}".format(width_left, self.config.max_width)
                )

    def find_skyline(self, w: int, h: int) -> Optional[Tuple[int, Rect]]:
        """Find the best position for a w x h rectangle.

        Every segment is tried as the left edge of the rectangle, upright and,
        when rotation is allowed, turned. The lowest resulting top edge wins,
        ties go to the narrower starting segment.

        Args:
            w: Width required.
            h: Height required.

        Returns:
            Tuple of (segment index, placed rectangle) or None if the
            rectangle fits nowhere. The rectangle has w and h swapped when the
            rotated orientation was chosen.
        """
        min_height = None
        min_width = None
        best = None

        orientations = [(w, h)]
        if self.config.allow_rotation and w != h:
            orientations.append((h, w))

        for i, skyline in enumerate(self.skylines):
            for rect_w, rect_h in orientations:
                y = self.can_put(i, rect_w, rect_h)
                if y is None:
                    continue
                if (min_height is None or y + rect_h < min_height
                        or (y + rect_h == min_height and skyline.w < min_width)):
                    min_height = y + rect_h
                    min_width = skyline.w
                    best = (i, Rect(skyline.x, y, rect_w, rect_h))

        return best

    def split(self, index: int, rect: Rect) -> None:
        """Raise the skyline under a newly placed rectangle.

        Inserts a segment for the rectangle's top edge at index, then trims
        the following segments it covers.

        Args:
            index: Segment index returned by find_skyline.
            rect: Rectangle returned by find_skyline.
        """
        if not 0 <= index < len(self.skylines):
            raise SkylineInvariantError("Segment index {} out of range for {} segments".format(
                index, len(self.skylines)))

        skyline = Segment(rect.x, rect.y + rect.h, rect.w)
        if skyline.right() > self.config.max_width or skyline.y > self.config.max_height:
            raise SkylineInvariantError("Placement {} exceeds the {}x{} canvas".format(
                rect, self.config.max_width, self.config.max_height))

        self.skylines.insert(index, skyline)

        i = index + 1
        while i < len(self.skylines):
            previous = self.skylines[i - 1]
            current = self.skylines[i]
            if current.x < previous.x:
                raise SkylineInvariantError("Skyline out of order at segment {}: {} before {}".format(
                    i, previous, current))

            if current.x >= previous.right():
                break

            shrink = previous.right() - current.x
            if current.w <= shrink:
                # Fully covered; the next segment is compared against the same new segment
                del self.skylines[i]
            else:
                current.x += shrink
                current.w -= shrink
                break

    def merge(self) -> None:
        """Merge adjacent segments of the same height."""
        i = 1
        while i < len(self.skylines):
            if self.skylines[i - 1].y == self.skylines[i].y:
                self.skylines[i - 1].w += self.skylines[i].w
                del self.skylines[i]
            else:
                i += 1

    def check_invariants(self) -> None:
        """Check the skyline partitions the canvas width without gaps or overlaps.

        Raises:
            SkylineInvariantError: If the skyline is malformed.
        """
        x = 0
        for i, skyline in enumerate(self.skylines):
            if skyline.x != x or skyline.w <= 0:
                raise SkylineInvariantError("Segment {} {} does not continue the skyline at x={}".format(
                    i, skyline, x))
            if skyline.y > self.config.max_height:
                raise SkylineInvariantError("Segment {} {} is above the canvas height {}".format(
                    i, skyline, self.config.max_height))
            x = skyline.right()
        if x != self.config.max_width:
            raise SkylineInvariantError("Skyline covers {}px of the {}px canvas width".format(
                x, self.config.max_width))
