# python/gltfmat/alpha.py
# Alpha-mode to render-state table (blend factors, depth write, bucket, keywords).
# Exists so every translated material gets a complete, consistent render state.
# RELEVANT FILES:python/gltfmat/params.py,python/gltfmat/translator.py,tests/test_alpha.py

from __future__ import annotations

from typing import Dict, Optional

from .params import (
    ALPHA_KEYWORDS,
    BlendFactor,
    Keyword,
    MaterialParameterSet,
    RenderBucket,
    RenderState,
    Slot,
)
from .schema import AlphaMode

_STATES: Dict[AlphaMode, RenderState] = {
    AlphaMode.OPAQUE: RenderState(
        src_blend=BlendFactor.ONE,
        dst_blend=BlendFactor.ZERO,
        z_write=True,
        bucket=RenderBucket.OPAQUE,
        render_type="Opaque",
    ),
    AlphaMode.MASK: RenderState(
        src_blend=BlendFactor.ONE,
        dst_blend=BlendFactor.ZERO,
        z_write=True,
        bucket=RenderBucket.ALPHA_TEST,
        render_type="TransparentCutout",
    ),
    AlphaMode.BLEND: RenderState(
        src_blend=BlendFactor.SRC_ALPHA,
        dst_blend=BlendFactor.ONE_MINUS_SRC_ALPHA,
        z_write=False,
        bucket=RenderBucket.TRANSPARENT,
        render_type="Transparent",
    ),
}

_KEYWORD: Dict[AlphaMode, Optional[Keyword]] = {
    AlphaMode.OPAQUE: None,
    AlphaMode.MASK: Keyword.ALPHA_TEST,
    AlphaMode.BLEND: Keyword.ALPHA_BLEND,
}


def render_state_for(mode: AlphaMode) -> RenderState:
    """Return the render state row for ``mode``."""
    return _STATES[AlphaMode.parse(mode)]


def apply_alpha_mode(params: MaterialParameterSet, mode: AlphaMode, cutoff: float = 0.5) -> None:
    """Put ``params`` into the render state for ``mode``.

    All alpha keywords are cleared before the mode's own keyword is enabled,
    so at most one of them is ever set. The cutoff scalar is written for
    ``MASK`` only.
    """
    mode = AlphaMode.parse(mode)
    params.render_state = _STATES[mode]
    for keyword in ALPHA_KEYWORDS:
        params.disable_keyword(keyword)
    own = _KEYWORD[mode]
    if own is not None:
        params.enable_keyword(own)
    if mode is AlphaMode.MASK:
        params.set_scalar(Slot.ALPHA_CUTOFF, cutoff)
