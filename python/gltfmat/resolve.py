# python/gltfmat/resolve.py
# Texture reference lookup through the texture and image tables.
# Exists so missing or out-of-range references degrade to an empty slot plus a diagnostic.
# RELEVANT FILES:python/gltfmat/translator.py,python/gltfmat/diagnostics.py,tests/test_resolve.py

from __future__ import annotations

from typing import Optional, Sequence

from .diagnostics import DiagnosticsSink, LogCode
from .schema import TextureDescription, TextureInfo
from .textures import ImageBuffer


def get_texture(
    info: Optional[TextureInfo],
    textures: Optional[Sequence[TextureDescription]],
    images: Optional[Sequence[Optional[ImageBuffer]]],
    sink: DiagnosticsSink,
) -> Optional[ImageBuffer]:
    """Resolve ``info`` to a decoded image, or ``None``.

    An absent reference (``None`` or negative index) returns ``None`` quietly.
    A texture or image index outside its table reports one error to ``sink``.
    """
    if info is None or info.index < 0:
        return None

    index = info.index
    if textures is None or index >= len(textures):
        sink.error(LogCode.TEXTURE_NOT_FOUND, f"Texture #{index} not found")
        return None

    source = textures[index].source
    if source is None or source < 0 or images is None or source >= len(images) or images[source] is None:
        sink.error(LogCode.IMAGE_NOT_FOUND, f"Image #{source} not found")
        return None
    return images[source]
