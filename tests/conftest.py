# tests/conftest.py
# Shared pytest setup for gltfmat.
# Ensures `import gltfmat` works from a fresh clone and provides image table fixtures.
# RELEVANT FILES:python/gltfmat/__init__.py,pyproject.toml
import sys
from pathlib import Path

import numpy as np
import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _ensure_python_path():
    pkg_dir = _repo_root() / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()

from gltfmat.defaults import reset_default_template  # noqa: E402
from gltfmat.schema import TextureDescription  # noqa: E402
from gltfmat.textures import ImageBuffer  # noqa: E402


def _solid_rgba8(rgba, w=2, h=2):
    img = np.zeros((h, w, 4), dtype=np.uint8)
    img[...] = rgba
    return img


@pytest.fixture(autouse=True)
def _fresh_default_template():
    reset_default_template()
    yield
    reset_default_template()


@pytest.fixture
def image_table():
    """Five distinct 2x2 images, one texture per image."""
    images = [
        ImageBuffer(_solid_rgba8((200, 100, 50, 255)), name="base"),
        ImageBuffer(_solid_rgba8((0, 64, 255, 255)), name="mr"),
        ImageBuffer(_solid_rgba8((128, 128, 255, 255)), name="normal"),
        ImageBuffer(_solid_rgba8((200, 10, 20, 30)), name="occlusion"),
        ImageBuffer(_solid_rgba8((255, 255, 0, 255)), name="emissive"),
    ]
    textures = [TextureDescription(source=i) for i in range(len(images))]
    return textures, images
