# python/gltfmat/__init__.py
# Public API for glTF material translation and texture channel repacking
# Exists to re-export the translator, its inputs and its outputs from one place
# RELEVANT FILES: python/gltfmat/translator.py, python/gltfmat/repack.py, tests/test_translator.py

from .alpha import apply_alpha_mode, render_state_for
from .config import TranslatorConfig, load_translator_config
from .defaults import get_default_template
from .diagnostics import CollectingSink, DiagnosticsSink, LogCode, LogEntry, LoggingSink, LogLevel
from .params import (
    BlendFactor,
    ColorValue,
    Keyword,
    MaterialParameterSet,
    RenderBucket,
    RenderState,
    ScalarValue,
    ShaderSetup,
    Slot,
    TextureValue,
    WrapMode,
    to_bindings,
)
from .repack import RepackMode, metallic_roughness_to_metallic_smoothness, occlusion_to_grayscale, repack
from .resolve import get_texture
from .schema import (
    AlphaMode,
    MaterialDescription,
    NormalTextureInfo,
    OcclusionTextureInfo,
    PbrMetallicRoughness,
    PbrSpecularGlossiness,
    TextureDescription,
    TextureInfo,
    parse_materials,
    parse_textures,
)
from .textures import ImageBuffer, gltf_mr_channels, image_from_array
from .translator import MaterialTranslator, TranslationResult, translate

__version__ = "0.1.0"

__all__ = [
    "AlphaMode",
    "BlendFactor",
    "CollectingSink",
    "ColorValue",
    "DiagnosticsSink",
    "ImageBuffer",
    "Keyword",
    "LogCode",
    "LogEntry",
    "LogLevel",
    "LoggingSink",
    "MaterialDescription",
    "MaterialParameterSet",
    "MaterialTranslator",
    "NormalTextureInfo",
    "OcclusionTextureInfo",
    "PbrMetallicRoughness",
    "PbrSpecularGlossiness",
    "RenderBucket",
    "RenderState",
    "RepackMode",
    "ScalarValue",
    "ShaderSetup",
    "Slot",
    "TextureDescription",
    "TextureInfo",
    "TextureValue",
    "TranslationResult",
    "TranslatorConfig",
    "WrapMode",
    "apply_alpha_mode",
    "get_default_template",
    "get_texture",
    "gltf_mr_channels",
    "image_from_array",
    "load_translator_config",
    "metallic_roughness_to_metallic_smoothness",
    "occlusion_to_grayscale",
    "parse_materials",
    "parse_textures",
    "render_state_for",
    "repack",
    "to_bindings",
    "translate",
]
