# python/gltfmat/repack.py
# Channel repacking for glTF data maps whose layout differs from the Standard shader.
# Exists so metallic-roughness and occlusion images can be sampled as the shader expects.
# RELEVANT FILES:python/gltfmat/textures.py,python/gltfmat/translator.py,tests/test_repack.py

from __future__ import annotations

import logging
from enum import Enum

import numpy as np

from .textures import ImageBuffer, _ensure_rgba8, gltf_mr_channels

logger = logging.getLogger(__name__)


class RepackMode(Enum):
    METALLIC_SMOOTHNESS = "metallic-smoothness"
    OCCLUSION = "occlusion"


_NAME_SUFFIX = {
    RepackMode.METALLIC_SMOOTHNESS: "metal_smooth",
    RepackMode.OCCLUSION: "occlusion",
}


def _validated_pixels(image: ImageBuffer) -> np.ndarray:
    if not isinstance(image, ImageBuffer):
        raise TypeError(f"image must be an ImageBuffer, got {type(image).__name__}")
    rgba = _ensure_rgba8(image.data)
    if rgba.shape[0] == 0 or rgba.shape[1] == 0:
        raise ValueError(f"cannot repack zero-area image {image.name!r} ({rgba.shape[1]}x{rgba.shape[0]})")
    return rgba


def _metallic_smoothness(src: np.ndarray) -> np.ndarray:
    out = np.empty_like(src)
    rough, _ = gltf_mr_channels(src)
    out[..., 0] = rough
    out[..., 1] = rough
    out[..., 2] = rough
    out[..., 3] = 255 - rough
    return out


def _occlusion(src: np.ndarray) -> np.ndarray:
    out = np.empty_like(src)
    occ = src[..., 0]
    out[..., 0] = occ
    out[..., 1] = occ
    out[..., 2] = occ
    out[..., 3] = 255
    return out


_TRANSFORMS = {
    RepackMode.METALLIC_SMOOTHNESS: _metallic_smoothness,
    RepackMode.OCCLUSION: _occlusion,
}


def repack(image: ImageBuffer, mode: RepackMode) -> ImageBuffer:
    """Return a new image with channels rearranged for ``mode``.

    The source buffer is never modified. Output has the same width and
    height, is tagged linear (``srgb=False``) and gets a derived name.

    Raises ``ValueError`` for zero-area images or unknown modes.
    """
    if not isinstance(mode, RepackMode):
        try:
            mode = RepackMode(mode)
        except ValueError:
            raise ValueError(f"Unknown repack mode: {mode!r}") from None
    src = _validated_pixels(image)
    logger.warning(
        "Converting %r (%dx%d) to %s layout (slow operation)", image.name, image.width, image.height, mode.value
    )
    out = _TRANSFORMS[mode](src)
    name = f"{image.name}_{_NAME_SUFFIX[mode]}" if image.name else None
    return ImageBuffer(data=out, name=name, srgb=False)


def metallic_roughness_to_metallic_smoothness(image: ImageBuffer) -> ImageBuffer:
    """Roughness (G) to grayscale RGB, smoothness ``255 - G`` in alpha."""
    return repack(image, RepackMode.METALLIC_SMOOTHNESS)


def occlusion_to_grayscale(image: ImageBuffer) -> ImageBuffer:
    """Occlusion (R) replicated into G and B, alpha forced opaque."""
    return repack(image, RepackMode.OCCLUSION)
