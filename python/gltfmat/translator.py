# python/gltfmat/translator.py
# glTF material to Standard-shader parameter set translation.
# Exists to turn MaterialDescription records into renderer-ready parameters plus repacked maps.
# RELEVANT FILES:python/gltfmat/schema.py,python/gltfmat/repack.py,python/gltfmat/alpha.py,tests/test_translator.py
"""Material translation.

The translator applies the specular-glossiness extension and the
metallic-roughness block as independent layers over a copy of the default
template: a material carrying both gets both sets of slots. Texture
references that cannot be resolved leave their slot empty and report a
diagnostic; the translation itself never raises for them.

Two glTF maps do not match the Standard shader layout and are repacked into
new buffers (see :mod:`gltfmat.repack`). Those buffers are returned in
``TranslationResult.auxiliary`` and belong to the caller.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

from .alpha import apply_alpha_mode
from .config import ConfigSource, load_translator_config
from .defaults import get_default_template
from .diagnostics import DiagnosticsSink, LogCode, LoggingSink
from .params import Keyword, MaterialParameterSet, ShaderSetup, Slot, WrapMode
from .repack import metallic_roughness_to_metallic_smoothness, occlusion_to_grayscale
from .resolve import get_texture
from .schema import MaterialDescription, TextureDescription
from .textures import ImageBuffer


class TranslationResult(NamedTuple):
    params: MaterialParameterSet
    auxiliary: List[ImageBuffer]


class MaterialTranslator:
    """Translate glTF materials with a fixed :class:`TranslatorConfig`."""

    def __init__(self, config: ConfigSource = None):
        self.config = load_translator_config(config)

    def get_default_material(self) -> MaterialParameterSet:
        return get_default_template()

    def _bind(self, params: MaterialParameterSet, slot: Slot, image: ImageBuffer,
              wrap: Optional[WrapMode] = None) -> None:
        params.set_texture(
            slot,
            image,
            scale=self.config.texture_scale,
            offset=self.config.texture_offset,
            wrap=wrap,
        )

    def translate(
        self,
        material: MaterialDescription,
        textures: Optional[Sequence[TextureDescription]],
        images: Optional[Sequence[Optional[ImageBuffer]]],
        sink: Optional[DiagnosticsSink] = None,
    ) -> TranslationResult:
        if not isinstance(material, MaterialDescription):
            raise TypeError(f"material must be a MaterialDescription, got {type(material).__name__}")
        if sink is None:
            sink = LoggingSink()

        params = get_default_template()
        params.name = material.name
        auxiliary: List[ImageBuffer] = []

        spec_gloss = material.specular_glossiness
        if spec_gloss is not None:
            params.setup = ShaderSetup.SPECULAR
            diffuse = get_texture(spec_gloss.diffuse_texture, textures, images, sink)
            if diffuse is not None:
                self._bind(params, Slot.BASE_COLOR_MAP, diffuse)
            else:
                params.set_color(Slot.BASE_COLOR, spec_gloss.diffuse_factor)
            spec_gloss_map = get_texture(spec_gloss.specular_glossiness_texture, textures, images, sink)
            if spec_gloss_map is not None:
                self._bind(params, Slot.SPEC_GLOSS_MAP, spec_gloss_map)
                params.enable_keyword(Keyword.SPEC_GLOSS_MAP)
            else:
                params.set_color(Slot.SPECULAR_COLOR, spec_gloss.specular_factor)
                params.set_scalar(Slot.GLOSSINESS, spec_gloss.glossiness_factor)

        pbr = material.pbr_metallic_roughness
        if pbr is not None:
            params.set_color(Slot.BASE_COLOR, pbr.base_color_factor)
            params.set_scalar(Slot.METALLIC, pbr.metallic_factor)
            params.set_scalar(Slot.SMOOTHNESS, 1.0 - pbr.roughness_factor)

            base = get_texture(pbr.base_color_texture, textures, images, sink)
            if base is not None:
                self._bind(params, Slot.BASE_COLOR_MAP, base, wrap=self.config.base_color_wrap_mode)

            mr = get_texture(pbr.metallic_roughness_texture, textures, images, sink)
            if mr is not None:
                # TODO: bind the glTF layout directly once a shader variant samples G/B natively.
                metal_smooth = metallic_roughness_to_metallic_smoothness(mr)
                self._bind(params, Slot.METALLIC_GLOSS_MAP, metal_smooth)
                params.enable_keyword(Keyword.METALLIC_GLOSS_MAP)
                auxiliary.append(metal_smooth)

        normal_info = material.normal_texture
        normal = get_texture(normal_info, textures, images, sink)
        if normal is not None:
            self._bind(params, Slot.NORMAL_MAP, normal)
            params.set_scalar(Slot.NORMAL_SCALE, getattr(normal_info, "scale", 1.0))
            params.enable_keyword(Keyword.NORMAL_MAP)

        occlusion_info = material.occlusion_texture
        occlusion = get_texture(occlusion_info, textures, images, sink)
        if occlusion is not None:
            occlusion_map = occlusion_to_grayscale(occlusion)
            self._bind(params, Slot.OCCLUSION_MAP, occlusion_map)
            params.set_scalar(Slot.OCCLUSION_STRENGTH, getattr(occlusion_info, "strength", 1.0))
            auxiliary.append(occlusion_map)

        emissive = get_texture(material.emissive_texture, textures, images, sink)
        if emissive is not None:
            self._bind(params, Slot.EMISSION_MAP, emissive)
            params.enable_keyword(Keyword.EMISSION)

        apply_alpha_mode(params, material.alpha_mode, material.alpha_cutoff)

        # Enables only; a black factor leaves a texture-enabled keyword alone.
        if any(c > self.config.emission_threshold for c in material.emissive_factor):
            params.set_color(Slot.EMISSION_COLOR, material.emissive_factor)
            params.enable_keyword(Keyword.EMISSION)

        if material.double_sided:
            sink.warning(
                LogCode.DOUBLE_SIDED_UNSUPPORTED,
                f"Double sided shading is not supported (material {material.name!r})",
            )

        return TranslationResult(params, auxiliary)


def translate(
    material: MaterialDescription,
    textures: Optional[Sequence[TextureDescription]],
    images: Optional[Sequence[Optional[ImageBuffer]]],
    sink: Optional[DiagnosticsSink] = None,
    config: ConfigSource = None,
) -> TranslationResult:
    """Translate ``material`` with a one-off :class:`MaterialTranslator`."""
    return MaterialTranslator(config).translate(material, textures, images, sink)
