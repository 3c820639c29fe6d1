# python/gltfmat/defaults.py
# Process-wide baseline material template, built once on first use.
# Exists so every translation starts from the same opaque white material.
# RELEVANT FILES:python/gltfmat/translator.py,python/gltfmat/params.py,tests/test_defaults.py

from __future__ import annotations

import threading
from typing import Optional

from .params import MaterialParameterSet, RenderState, ShaderSetup, Slot

_TEMPLATE: Optional[MaterialParameterSet] = None
_TEMPLATE_LOCK = threading.Lock()


def _build_template() -> MaterialParameterSet:
    params = MaterialParameterSet(name="Default", setup=ShaderSetup.METALLIC, render_state=RenderState())
    params.set_color(Slot.BASE_COLOR, (1.0, 1.0, 1.0, 1.0))
    return params


def _shared_template() -> MaterialParameterSet:
    # Never handed out; racing first callers all observe the same instance.
    global _TEMPLATE
    template = _TEMPLATE
    if template is None:
        with _TEMPLATE_LOCK:
            if _TEMPLATE is None:
                _TEMPLATE = _build_template()
            template = _TEMPLATE
    return template


def get_default_template() -> MaterialParameterSet:
    """Return a fresh copy of the shared baseline template.

    The shared instance is built once and stays read-only; changes to the
    returned copy do not reach later translations.
    """
    return _shared_template().copy()


def reset_default_template() -> None:
    """Drop the cached template (tests only)."""
    global _TEMPLATE
    with _TEMPLATE_LOCK:
        _TEMPLATE = None
