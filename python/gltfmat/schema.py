# python/gltfmat/schema.py
# Immutable glTF 2.0 material and texture records plus their JSON parsers.
# Exists to give the translator typed input instead of raw glTF dictionaries.
# RELEVANT FILES:python/gltfmat/translator.py,python/gltfmat/resolve.py,tests/test_schema.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

Color3 = Tuple[float, float, float]
Color4 = Tuple[float, float, float, float]

SPEC_GLOSS_EXTENSION = "KHR_materials_pbrSpecularGlossiness"


class AlphaMode(Enum):
    OPAQUE = "OPAQUE"
    MASK = "MASK"
    BLEND = "BLEND"

    @classmethod
    def parse(cls, value: Any) -> "AlphaMode":
        if isinstance(value, AlphaMode):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            logger.warning("Unknown alphaMode %r, using OPAQUE", value)
            return cls.OPAQUE


@dataclass(frozen=True)
class TextureInfo:
    index: int
    tex_coord: int = 0


@dataclass(frozen=True)
class NormalTextureInfo(TextureInfo):
    scale: float = 1.0


@dataclass(frozen=True)
class OcclusionTextureInfo(TextureInfo):
    strength: float = 1.0


@dataclass(frozen=True)
class TextureDescription:
    """Entry of the glTF ``textures`` array; ``source`` indexes the image table."""

    source: Optional[int] = None
    sampler: Optional[int] = None

    @classmethod
    def from_gltf(cls, data: Mapping[str, Any]) -> "TextureDescription":
        _require_mapping(data, "texture")
        return cls(
            source=_maybe_int(data.get("source")),
            sampler=_maybe_int(data.get("sampler")),
        )


@dataclass(frozen=True)
class PbrMetallicRoughness:
    base_color_factor: Color4 = (1.0, 1.0, 1.0, 1.0)
    metallic_factor: float = 1.0
    roughness_factor: float = 1.0
    base_color_texture: Optional[TextureInfo] = None
    metallic_roughness_texture: Optional[TextureInfo] = None

    @classmethod
    def from_gltf(cls, data: Mapping[str, Any]) -> "PbrMetallicRoughness":
        _require_mapping(data, "pbrMetallicRoughness")
        return cls(
            base_color_factor=_to_color4(data.get("baseColorFactor", (1.0, 1.0, 1.0, 1.0)), "baseColorFactor"),
            metallic_factor=_unit(data.get("metallicFactor", 1.0)),
            roughness_factor=_unit(data.get("roughnessFactor", 1.0)),
            base_color_texture=_texture_info(data.get("baseColorTexture")),
            metallic_roughness_texture=_texture_info(data.get("metallicRoughnessTexture")),
        )


@dataclass(frozen=True)
class PbrSpecularGlossiness:
    diffuse_factor: Color4 = (1.0, 1.0, 1.0, 1.0)
    diffuse_texture: Optional[TextureInfo] = None
    specular_factor: Color3 = (1.0, 1.0, 1.0)
    glossiness_factor: float = 1.0
    specular_glossiness_texture: Optional[TextureInfo] = None

    @classmethod
    def from_gltf(cls, data: Mapping[str, Any]) -> "PbrSpecularGlossiness":
        _require_mapping(data, SPEC_GLOSS_EXTENSION)
        return cls(
            diffuse_factor=_to_color4(data.get("diffuseFactor", (1.0, 1.0, 1.0, 1.0)), "diffuseFactor"),
            diffuse_texture=_texture_info(data.get("diffuseTexture")),
            specular_factor=_to_color3(data.get("specularFactor", (1.0, 1.0, 1.0)), "specularFactor"),
            glossiness_factor=_unit(data.get("glossinessFactor", 1.0)),
            specular_glossiness_texture=_texture_info(data.get("specularGlossinessTexture")),
        )


@dataclass(frozen=True)
class MaterialDescription:
    """A glTF material.

    ``pbr_metallic_roughness`` and ``specular_glossiness`` are independent:
    either, both or neither may be present.
    """

    name: Optional[str] = None
    pbr_metallic_roughness: Optional[PbrMetallicRoughness] = None
    specular_glossiness: Optional[PbrSpecularGlossiness] = None
    normal_texture: Optional[NormalTextureInfo] = None
    occlusion_texture: Optional[OcclusionTextureInfo] = None
    emissive_texture: Optional[TextureInfo] = None
    emissive_factor: Color3 = (0.0, 0.0, 0.0)
    alpha_mode: AlphaMode = AlphaMode.OPAQUE
    alpha_cutoff: float = 0.5
    double_sided: bool = False

    @classmethod
    def from_gltf(cls, data: Mapping[str, Any]) -> "MaterialDescription":
        _require_mapping(data, "material")
        pbr = data.get("pbrMetallicRoughness")
        extensions = data.get("extensions") or {}
        _require_mapping(extensions, "material.extensions")
        spec_gloss = extensions.get(SPEC_GLOSS_EXTENSION)

        normal = data.get("normalTexture")
        occlusion = data.get("occlusionTexture")
        name = data.get("name")
        return cls(
            name=None if name is None else str(name),
            pbr_metallic_roughness=None if pbr is None else PbrMetallicRoughness.from_gltf(pbr),
            specular_glossiness=None if spec_gloss is None else PbrSpecularGlossiness.from_gltf(spec_gloss),
            normal_texture=None if normal is None else NormalTextureInfo(
                index=_index(normal),
                tex_coord=int(normal.get("texCoord", 0)),
                scale=float(normal.get("scale", 1.0)),
            ),
            occlusion_texture=None if occlusion is None else OcclusionTextureInfo(
                index=_index(occlusion),
                tex_coord=int(occlusion.get("texCoord", 0)),
                strength=_unit(occlusion.get("strength", 1.0)),
            ),
            emissive_texture=_texture_info(data.get("emissiveTexture")),
            emissive_factor=_to_color3(data.get("emissiveFactor", (0.0, 0.0, 0.0)), "emissiveFactor"),
            alpha_mode=AlphaMode.parse(data.get("alphaMode", "OPAQUE")),
            alpha_cutoff=_unit(data.get("alphaCutoff", 0.5)),
            double_sided=bool(data.get("doubleSided", False)),
        )


def parse_materials(document: Mapping[str, Any]) -> List[MaterialDescription]:
    """Parse the ``materials`` array of a glTF document mapping."""
    return [MaterialDescription.from_gltf(item) for item in document.get("materials", [])]


def parse_textures(document: Mapping[str, Any]) -> List[TextureDescription]:
    """Parse the ``textures`` array of a glTF document mapping."""
    return [TextureDescription.from_gltf(item) for item in document.get("textures", [])]


def _require_mapping(value: Any, label: str) -> None:
    if not isinstance(value, Mapping):
        raise TypeError(f"{label} must be a mapping, got {type(value).__name__}")


def _maybe_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def _index(data: Mapping[str, Any]) -> int:
    _require_mapping(data, "textureInfo")
    if "index" not in data:
        raise ValueError("textureInfo requires an index")
    return int(data["index"])


def _texture_info(data: Optional[Mapping[str, Any]]) -> Optional[TextureInfo]:
    if data is None:
        return None
    return TextureInfo(index=_index(data), tex_coord=int(data.get("texCoord", 0)))


def _unit(value: Any) -> float:
    number = float(value)
    if math.isnan(number):
        raise ValueError("factor must be a number, got NaN")
    return max(0.0, min(1.0, number))


def _to_color3(value: Any, label: str) -> Color3:
    if isinstance(value, (list, tuple)) and len(value) == 3:
        return (_unit(value[0]), _unit(value[1]), _unit(value[2]))
    raise ValueError(f"{label} must be a sequence of three numeric values")


def _to_color4(value: Any, label: str) -> Color4:
    if isinstance(value, (list, tuple)) and len(value) == 4:
        return (_unit(value[0]), _unit(value[1]), _unit(value[2]), _unit(value[3]))
    raise ValueError(f"{label} must be a sequence of four numeric values")
