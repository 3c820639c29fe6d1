# tests/test_resolve.py
# Unit tests for texture reference resolution through texture and image tables.
# Exists to ensure misses degrade to None plus exactly one diagnostic, never an exception.
# RELEVANT FILES:python/gltfmat/resolve.py,python/gltfmat/diagnostics.py

import pytest

from gltfmat.diagnostics import CollectingSink, LogCode, LogLevel
from gltfmat.resolve import get_texture
from gltfmat.schema import TextureDescription, TextureInfo


def test_resolves_existing_reference(image_table):
    textures, images = image_table
    sink = CollectingSink()
    assert get_texture(TextureInfo(index=2), textures, images, sink) is images[2]
    assert len(sink) == 0


@pytest.mark.parametrize("info", [None, TextureInfo(index=-1)])
def test_absent_reference_is_silent(image_table, info):
    textures, images = image_table
    sink = CollectingSink()
    assert get_texture(info, textures, images, sink) is None
    assert len(sink) == 0


def test_texture_index_out_of_range(image_table):
    textures, images = image_table
    sink = CollectingSink()
    assert get_texture(TextureInfo(index=len(textures)), textures, images, sink) is None
    assert sink.codes() == [LogCode.TEXTURE_NOT_FOUND]
    assert sink.entries[0].level is LogLevel.ERROR


def test_missing_texture_table():
    sink = CollectingSink()
    assert get_texture(TextureInfo(index=0), None, [], sink) is None
    assert sink.codes() == [LogCode.TEXTURE_NOT_FOUND]


@pytest.mark.parametrize("source", [None, -2, 99])
def test_image_index_out_of_range(image_table, source):
    _, images = image_table
    sink = CollectingSink()
    textures = [TextureDescription(source=source)]
    assert get_texture(TextureInfo(index=0), textures, images, sink) is None
    assert sink.codes() == [LogCode.IMAGE_NOT_FOUND]


def test_missing_image_table_or_undecoded_image(image_table):
    textures, images = image_table
    sink = CollectingSink()
    assert get_texture(TextureInfo(index=0), textures, None, sink) is None
    holes = [None] + list(images[1:])
    assert get_texture(TextureInfo(index=0), textures, holes, sink) is None
    assert sink.count(LogCode.IMAGE_NOT_FOUND) == 2
