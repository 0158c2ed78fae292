"""
Tests for the TexturePacker atlas: ownership of textures, bounding box size
and sampling of the composite texture.
"""

import logging

import pytest

from texture_packer import (
    MutableTexture,
    Rect,
    SkylinePacker,
    Texture,
    TexturePacker,
    TexturePackerConfig,
)


@pytest.fixture
def atlas():
    return TexturePacker(TexturePackerConfig(100, 100, allow_rotation=False))


class TestPacking:
    """Tests for pack_own() and the frame bookkeeping."""

    def test_pack_own_when_fits_then_frame_recorded(self, atlas, box):
        frame = atlas.pack_own("a", box(10, 10))

        assert atlas.frames() == (frame,)
        assert atlas.get_frame("a") == frame
        assert len(atlas) == 1
        assert "a" in atlas

    def test_pack_when_called_then_same_as_pack_own(self, atlas, box):
        frame = atlas.pack("a", box(10, 10))

        assert atlas.get_frame("a") == frame

    def test_pack_own_when_does_not_fit_then_texture_kept_without_frame(self, atlas, box, caplog):
        caplog.set_level(logging.WARNING, logger="texture_packer")
        texture = box(200, 10)

        frame = atlas.pack_own("huge", texture)

        assert frame is None
        assert "huge" in atlas
        assert atlas.textures()["huge"] is texture
        assert atlas.get_frame("huge") is None
        assert len(atlas) == 0
        assert "does not fit" in caplog.text

    def test_pack_own_when_key_reused_then_key_error(self, atlas, box):
        atlas.pack_own("a", box(10, 10))

        with pytest.raises(KeyError):
            atlas.pack_own("a", box(5, 5))
        assert len(atlas) == 1

    def test_frames_when_packed_then_insertion_order(self, atlas, box):
        for key, size in (("big", 50), ("small", 10), ("medium", 30)):
            atlas.pack_own(key, box(size, size))

        assert [f.key for f in atlas.frames()] == ["big", "small", "medium"]

    def test_textures_when_mutated_then_type_error(self, atlas, box):
        atlas.pack_own("a", box(10, 10))

        with pytest.raises(TypeError):
            atlas.textures()["b"] = box(1, 1)

    def test_packer_when_injected_then_used(self, box):
        config = TexturePackerConfig(64, 64, allow_rotation=False)
        packer = SkylinePacker(config)
        atlas = TexturePacker(packer=packer)

        atlas.pack_own("a", box(64, 10))

        assert atlas.config is config
        assert atlas.packer is packer
        assert [(s.x, s.y, s.w) for s in packer.skylines] == [(0, 10, 64)]

    def test_packer_when_config_differs_then_value_error(self):
        packer = SkylinePacker(TexturePackerConfig(64, 64, allow_rotation=False))

        with pytest.raises(ValueError):
            TexturePacker(TexturePackerConfig(128, 128, allow_rotation=False), packer)

    def test_packer_when_equal_config_given_then_packer_config_kept(self, box):
        packer = SkylinePacker(TexturePackerConfig(64, 64, allow_rotation=False))
        atlas = TexturePacker(TexturePackerConfig(64, 64, allow_rotation=False), packer)

        assert atlas.config is packer.config
        assert atlas.pack_own("a", box(64, 10)) is not None
        assert atlas.pack_own("b", box(64, 60)) is None

    def test_default_config_when_none_given_then_skyline_packer(self):
        atlas = TexturePacker()

        assert isinstance(atlas.packer, SkylinePacker)
        assert atlas.config == TexturePackerConfig()


class TestSize:
    """Tests for width() and height()."""

    def test_size_when_empty_then_zero(self, atlas):
        assert atlas.is_empty()
        assert atlas.width() == 0
        assert atlas.height() == 0

    def test_size_when_packed_then_bounding_box_plus_one(self, box):
        """Scenario D: max right 149 and max bottom 89 give a 150x90 atlas."""
        atlas = TexturePacker(TexturePackerConfig(200, 200, allow_rotation=False))

        frame = atlas.pack_own("a", box(149, 89))

        assert frame.frame == Rect(0, 0, 149, 89)
        assert not atlas.is_empty()
        assert atlas.width() == 150
        assert atlas.height() == 90

    def test_size_when_several_frames_then_tight_box_not_canvas(self, atlas, box):
        atlas.pack_own("a", box(30, 20))
        atlas.pack_own("b", box(25, 40))

        # b sits right of a at (30, 0)
        assert atlas.width() == 56
        assert atlas.height() == 41


class TestSampling:
    """Tests for get() on the composite texture."""

    def test_get_when_inside_frame_then_source_pixel(self, atlas, coordinate_texture):
        atlas.pack_own("a", coordinate_texture(10, 10))
        atlas.pack_own("b", coordinate_texture(20, 5))

        assert atlas.get(3, 4) == (3, 4, 0, 255)
        # b is placed at (10, 0)
        assert atlas.get_frame("b").frame == Rect(10, 0, 20, 5)
        assert atlas.get(12, 1) == (2, 1, 0, 255)
        assert atlas.get(29, 4) == (19, 4, 0, 255)

    def test_get_when_outside_every_frame_then_none(self, atlas, coordinate_texture):
        atlas.pack_own("a", coordinate_texture(10, 10))
        atlas.pack_own("b", coordinate_texture(20, 5))

        assert atlas.get(15, 7) is None
        assert atlas.get(500, 500) is None
        assert atlas.get_frame_at(15, 7) is None

    def test_get_when_rotated_then_samples_turned_texture(self, coordinate_texture):
        atlas = TexturePacker(TexturePackerConfig(100, 50, allow_rotation=True))

        frame = atlas.pack_own("tall", coordinate_texture(20, 80))

        assert frame.rotated
        assert frame.frame == Rect(0, 0, 80, 20)
        # Turned clockwise: the top left of the atlas shows the bottom left of the source
        assert atlas.get(0, 0) == (0, 79, 0, 255)
        assert atlas.get(79, 0) == (0, 0, 0, 255)
        assert atlas.get(79, 19) == (19, 0, 0, 255)
        assert atlas.get(10, 5) == (5, 69, 0, 255)

    def test_get_when_empty_then_none(self, atlas):
        assert atlas.get(0, 0) is None


class TestReadOnly:
    """The atlas is a read-only texture."""

    def test_atlas_when_inspected_then_not_mutable(self, atlas):
        assert isinstance(atlas, Texture)
        assert not isinstance(atlas, MutableTexture)
        assert not hasattr(atlas, "set")

    def test_set_when_called_then_attribute_error(self, atlas, box):
        atlas.pack_own("a", box(10, 10))

        with pytest.raises(AttributeError):
            atlas.set(0, 0, (0, 0, 0, 0))
