# python/gltfmat/textures.py
# Decoded image buffers handed to the material translator by the loader.
# Exists to normalize numpy RGBA8 arrays and expose glTF channel conventions.
# RELEVANT FILES:python/gltfmat/repack.py,python/gltfmat/resolve.py,tests/test_textures.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

ArrayLike = Union[np.ndarray, "np.typing.NDArray[np.uint8]"]


@dataclass(eq=False)
class ImageBuffer:
    """A decoded RGBA8 image, shape ``(height, width, 4)``."""

    data: np.ndarray
    name: Optional[str] = None
    srgb: bool = True

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def __repr__(self) -> str:
        return f"ImageBuffer(name={self.name!r}, size={self.width}x{self.height}, srgb={self.srgb})"


def _ensure_rgba8(arr: np.ndarray) -> np.ndarray:
    if not isinstance(arr, np.ndarray):
        raise TypeError("texture must be a numpy array")

    if arr.dtype != np.uint8:
        raise TypeError("texture dtype must be uint8")

    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError("texture must be (H,W,3|4)")

    if arr.flags.c_contiguous is False:
        arr = np.ascontiguousarray(arr)

    if arr.shape[2] == 3:
        h, w, _ = arr.shape
        rgba = np.empty((h, w, 4), dtype=np.uint8)
        rgba[..., :3] = arr
        rgba[..., 3] = 255
        return rgba
    return arr


def image_from_array(arr: ArrayLike, name: Optional[str] = None, srgb: bool = True) -> ImageBuffer:
    """Wrap a decoded ``(H, W, 3|4)`` uint8 array as an :class:`ImageBuffer`.

    RGB input is promoted to RGBA with an opaque alpha channel.
    """
    return ImageBuffer(data=_ensure_rgba8(np.asarray(arr)), name=name, srgb=srgb)


def gltf_mr_channels(arr: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return (roughness, metallic) channels from a glTF MR texture.

    Convention: G = roughness, B = metallic.

    """
    rgba = _ensure_rgba8(arr)
    rough = rgba[..., 1]
    metal = rgba[..., 2]
    return rough, metal
