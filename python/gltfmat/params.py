# python/gltfmat/params.py
# Typed shader parameter set produced by the material translator.
# Exists to keep slots, keywords and render state closed and typed inside the core.
# RELEVANT FILES:python/gltfmat/translator.py,python/gltfmat/alpha.py,tests/test_params.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Set, Tuple, Union

from .textures import ImageBuffer

Color4 = Tuple[float, float, float, float]


class ValueKind(Enum):
    SCALAR = "scalar"
    COLOR = "color"
    TEXTURE = "texture"


class Slot(Enum):
    BASE_COLOR = ("base-color", ValueKind.COLOR)
    BASE_COLOR_MAP = ("base-color-map", ValueKind.TEXTURE)
    METALLIC = ("metallic", ValueKind.SCALAR)
    SMOOTHNESS = ("smoothness", ValueKind.SCALAR)
    METALLIC_GLOSS_MAP = ("metallic-gloss-map", ValueKind.TEXTURE)
    SPECULAR_COLOR = ("specular-color", ValueKind.COLOR)
    GLOSSINESS = ("glossiness", ValueKind.SCALAR)
    SPEC_GLOSS_MAP = ("spec-gloss-map", ValueKind.TEXTURE)
    NORMAL_MAP = ("normal-map", ValueKind.TEXTURE)
    NORMAL_SCALE = ("normal-scale", ValueKind.SCALAR)
    OCCLUSION_MAP = ("occlusion-map", ValueKind.TEXTURE)
    OCCLUSION_STRENGTH = ("occlusion-strength", ValueKind.SCALAR)
    EMISSION_MAP = ("emission-map", ValueKind.TEXTURE)
    EMISSION_COLOR = ("emission-color", ValueKind.COLOR)
    ALPHA_CUTOFF = ("alpha-cutoff", ValueKind.SCALAR)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def kind(self) -> ValueKind:
        return self.value[1]


class Keyword(Enum):
    NORMAL_MAP = "normal-map"
    METALLIC_GLOSS_MAP = "metallic-gloss-map"
    SPEC_GLOSS_MAP = "spec-gloss-map"
    EMISSION = "emission"
    ALPHA_TEST = "alpha-test"
    ALPHA_BLEND = "alpha-blend"
    ALPHA_PREMULTIPLY = "alpha-premultiply"


ALPHA_KEYWORDS = (Keyword.ALPHA_TEST, Keyword.ALPHA_BLEND, Keyword.ALPHA_PREMULTIPLY)


class ShaderSetup(Enum):
    METALLIC = "metallic"
    SPECULAR = "specular"


class WrapMode(Enum):
    REPEAT = "repeat"
    CLAMP = "clamp"
    MIRROR = "mirror"


class BlendFactor(Enum):
    """Blend factors, valued as the engine's integer blend enum."""

    ZERO = 0
    ONE = 1
    SRC_ALPHA = 5
    ONE_MINUS_SRC_ALPHA = 10


class RenderBucket(Enum):
    """Draw-order bucket; value is the render queue (-1 keeps the shader default)."""

    OPAQUE = -1
    ALPHA_TEST = 2450
    TRANSPARENT = 3000

    @property
    def queue(self) -> int:
        return self.value


@dataclass(frozen=True)
class RenderState:
    src_blend: BlendFactor = BlendFactor.ONE
    dst_blend: BlendFactor = BlendFactor.ZERO
    z_write: bool = True
    bucket: RenderBucket = RenderBucket.OPAQUE
    render_type: str = "Opaque"


@dataclass(frozen=True)
class ScalarValue:
    value: float


@dataclass(frozen=True)
class ColorValue:
    rgba: Color4


@dataclass(frozen=True)
class TextureValue:
    image: ImageBuffer
    scale: Tuple[float, float] = (1.0, 1.0)
    offset: Tuple[float, float] = (0.0, 0.0)
    wrap: Optional[WrapMode] = None


ParamValue = Union[ScalarValue, ColorValue, TextureValue]

_KIND_OF = {ScalarValue: ValueKind.SCALAR, ColorValue: ValueKind.COLOR, TextureValue: ValueKind.TEXTURE}


def _as_color4(color) -> Color4:
    values = tuple(float(c) for c in color)
    if len(values) == 3:
        return values + (1.0,)
    if len(values) == 4:
        return values
    raise ValueError(f"color must have 3 or 4 components, got {len(values)}")


@dataclass
class MaterialParameterSet:
    name: Optional[str] = None
    setup: ShaderSetup = ShaderSetup.METALLIC
    slots: Dict[Slot, ParamValue] = field(default_factory=dict)
    keywords: Set[Keyword] = field(default_factory=set)
    render_state: RenderState = field(default_factory=RenderState)

    def _assign(self, slot: Slot, value: ParamValue) -> None:
        if not isinstance(slot, Slot):
            raise TypeError(f"slot must be a Slot, got {type(slot).__name__}")
        if _KIND_OF[type(value)] is not slot.kind:
            raise TypeError(f"slot {slot.label} holds {slot.kind.value} values, not {_KIND_OF[type(value)].value}")
        self.slots[slot] = value

    def set_scalar(self, slot: Slot, value: float) -> None:
        self._assign(slot, ScalarValue(float(value)))

    def set_color(self, slot: Slot, color) -> None:
        self._assign(slot, ColorValue(_as_color4(color)))

    def set_texture(self, slot: Slot, image: ImageBuffer, *, scale=(1.0, 1.0), offset=(0.0, 0.0),
                    wrap: Optional[WrapMode] = None) -> None:
        if not isinstance(image, ImageBuffer):
            raise TypeError(f"texture slot {slot.label} requires an ImageBuffer")
        self._assign(slot, TextureValue(image, tuple(scale), tuple(offset), wrap))

    def get(self, slot: Slot) -> Optional[ParamValue]:
        return self.slots.get(slot)

    def has(self, slot: Slot) -> bool:
        return slot in self.slots

    def enable_keyword(self, keyword: Keyword) -> None:
        self.keywords.add(keyword)

    def disable_keyword(self, keyword: Keyword) -> None:
        self.keywords.discard(keyword)

    def is_enabled(self, keyword: Keyword) -> bool:
        return keyword in self.keywords

    def textures(self) -> Iterator[Tuple[Slot, TextureValue]]:
        for slot, value in self.slots.items():
            if isinstance(value, TextureValue):
                yield slot, value

    def copy(self) -> "MaterialParameterSet":
        # ParamValue and RenderState are immutable; shallow container copies suffice.
        return MaterialParameterSet(
            name=self.name,
            setup=self.setup,
            slots=dict(self.slots),
            keywords=set(self.keywords),
            render_state=self.render_state,
        )


# Unity Standard shader binding names
STANDARD_SHADER_NAMES: Dict[Any, str] = {
    Slot.BASE_COLOR: "_Color",
    Slot.BASE_COLOR_MAP: "_MainTex",
    Slot.METALLIC: "_Metallic",
    Slot.SMOOTHNESS: "_Glossiness",
    Slot.METALLIC_GLOSS_MAP: "_MetallicGlossMap",
    Slot.SPECULAR_COLOR: "_SpecColor",
    Slot.GLOSSINESS: "_Glossiness",
    Slot.SPEC_GLOSS_MAP: "_SpecGlossMap",
    Slot.NORMAL_MAP: "_BumpMap",
    Slot.NORMAL_SCALE: "_BumpScale",
    Slot.OCCLUSION_MAP: "_OcclusionMap",
    Slot.OCCLUSION_STRENGTH: "_OcclusionStrength",
    Slot.EMISSION_MAP: "_EmissionMap",
    Slot.EMISSION_COLOR: "_EmissionColor",
    Slot.ALPHA_CUTOFF: "_Cutoff",
    Keyword.NORMAL_MAP: "_NORMALMAP",
    Keyword.METALLIC_GLOSS_MAP: "_METALLICGLOSSMAP",
    Keyword.SPEC_GLOSS_MAP: "_SPECGLOSSMAP",
    Keyword.EMISSION: "_EMISSION",
    Keyword.ALPHA_TEST: "_ALPHATEST_ON",
    Keyword.ALPHA_BLEND: "_ALPHABLEND_ON",
    Keyword.ALPHA_PREMULTIPLY: "_ALPHAPREMULTIPLY_ON",
}

SHADER_NAMES = {
    ShaderSetup.METALLIC: "Standard",
    ShaderSetup.SPECULAR: "Standard (Specular setup)",
}


def to_bindings(params: MaterialParameterSet, names: Mapping[Any, str] = STANDARD_SHADER_NAMES) -> Dict[str, Any]:
    """Resolve a parameter set to engine property names.

    Scalars become floats, colors RGBA tuples and textures stay
    :class:`TextureValue`. Slots or keywords without a name in ``names``
    are skipped.
    """
    properties: Dict[str, Any] = {}
    for slot, value in params.slots.items():
        prop = names.get(slot)
        if prop is None:
            continue
        if isinstance(value, ScalarValue):
            properties[prop] = value.value
        elif isinstance(value, ColorValue):
            properties[prop] = value.rgba
        else:
            properties[prop] = value

    state = params.render_state
    properties["_SrcBlend"] = state.src_blend.value
    properties["_DstBlend"] = state.dst_blend.value
    properties["_ZWrite"] = 1 if state.z_write else 0

    return {
        "name": params.name,
        "shader": SHADER_NAMES[params.setup],
        "properties": properties,
        "keywords": sorted(names[k] for k in params.keywords if k in names),
        "tags": {"RenderType": state.render_type},
        "render_queue": state.bucket.queue,
    }
