# tests/test_schema.py
# Unit tests for glTF material and texture JSON parsing.
# Exists to ensure glTF defaults, clamping and the spec-gloss extension are read correctly.
# RELEVANT FILES:python/gltfmat/schema.py

import pytest

from gltfmat.schema import (
    AlphaMode,
    MaterialDescription,
    NormalTextureInfo,
    OcclusionTextureInfo,
    PbrMetallicRoughness,
    TextureDescription,
    TextureInfo,
    parse_materials,
    parse_textures,
)


def test_empty_material_uses_gltf_defaults():
    mat = MaterialDescription.from_gltf({})
    assert mat.name is None
    assert mat.pbr_metallic_roughness is None
    assert mat.specular_glossiness is None
    assert mat.emissive_factor == (0.0, 0.0, 0.0)
    assert mat.alpha_mode is AlphaMode.OPAQUE
    assert mat.alpha_cutoff == 0.5
    assert mat.double_sided is False


def test_full_material():
    data = {
        "name": "Helmet",
        "pbrMetallicRoughness": {
            "baseColorFactor": [0.5, 0.5, 0.5, 1.0],
            "metallicFactor": 0.2,
            "roughnessFactor": 0.9,
            "baseColorTexture": {"index": 0},
            "metallicRoughnessTexture": {"index": 1, "texCoord": 1},
        },
        "normalTexture": {"index": 2, "scale": 0.8},
        "occlusionTexture": {"index": 3, "strength": 0.6},
        "emissiveTexture": {"index": 4},
        "emissiveFactor": [1.0, 0.5, 0.0],
        "alphaMode": "MASK",
        "alphaCutoff": 0.3,
        "doubleSided": True,
    }
    mat = MaterialDescription.from_gltf(data)
    pbr = mat.pbr_metallic_roughness
    assert mat.name == "Helmet"
    assert pbr.base_color_factor == (0.5, 0.5, 0.5, 1.0)
    assert pbr.metallic_factor == pytest.approx(0.2)
    assert pbr.roughness_factor == pytest.approx(0.9)
    assert pbr.base_color_texture == TextureInfo(index=0)
    assert pbr.metallic_roughness_texture == TextureInfo(index=1, tex_coord=1)
    assert mat.normal_texture == NormalTextureInfo(index=2, scale=0.8)
    assert mat.occlusion_texture == OcclusionTextureInfo(index=3, strength=0.6)
    assert mat.emissive_texture.index == 4
    assert mat.emissive_factor == (1.0, 0.5, 0.0)
    assert mat.alpha_mode is AlphaMode.MASK
    assert mat.alpha_cutoff == pytest.approx(0.3)
    assert mat.double_sided is True


def test_pbr_defaults():
    pbr = PbrMetallicRoughness.from_gltf({})
    assert pbr.base_color_factor == (1.0, 1.0, 1.0, 1.0)
    assert pbr.metallic_factor == 1.0
    assert pbr.roughness_factor == 1.0


def test_spec_gloss_extension():
    data = {
        "extensions": {
            "KHR_materials_pbrSpecularGlossiness": {
                "diffuseFactor": [0.1, 0.2, 0.3, 0.4],
                "specularFactor": [0.9, 0.8, 0.7],
                "glossinessFactor": 0.25,
                "specularGlossinessTexture": {"index": 5},
            }
        }
    }
    sg = MaterialDescription.from_gltf(data).specular_glossiness
    assert sg.diffuse_factor == (0.1, 0.2, 0.3, 0.4)
    assert sg.specular_factor == (0.9, 0.8, 0.7)
    assert sg.glossiness_factor == 0.25
    assert sg.diffuse_texture is None
    assert sg.specular_glossiness_texture.index == 5


def test_factors_are_clamped():
    mat = MaterialDescription.from_gltf(
        {"pbrMetallicRoughness": {"metallicFactor": 3.0, "roughnessFactor": -1.0}, "alphaCutoff": 2.0}
    )
    assert mat.pbr_metallic_roughness.metallic_factor == 1.0
    assert mat.pbr_metallic_roughness.roughness_factor == 0.0
    assert mat.alpha_cutoff == 1.0


def test_unknown_alpha_mode_falls_back_to_opaque():
    assert MaterialDescription.from_gltf({"alphaMode": "ADDITIVE"}).alpha_mode is AlphaMode.OPAQUE
    assert AlphaMode.parse("blend") is AlphaMode.BLEND


def test_structural_errors_raise():
    with pytest.raises(TypeError, match="mapping"):
        MaterialDescription.from_gltf([])
    with pytest.raises(ValueError, match="baseColorFactor"):
        MaterialDescription.from_gltf({"pbrMetallicRoughness": {"baseColorFactor": [1, 1, 1]}})
    with pytest.raises(ValueError, match="index"):
        MaterialDescription.from_gltf({"normalTexture": {"scale": 1.0}})


def test_materials_are_immutable():
    mat = MaterialDescription(name="x")
    with pytest.raises(AttributeError):
        mat.name = "y"


def test_parse_document_arrays():
    doc = {
        "materials": [{"name": "a"}, {"name": "b", "doubleSided": True}],
        "textures": [{"source": 0, "sampler": 1}, {}],
    }
    materials = parse_materials(doc)
    textures = parse_textures(doc)
    assert [m.name for m in materials] == ["a", "b"]
    assert textures == [TextureDescription(source=0, sampler=1), TextureDescription()]
    assert parse_materials({}) == []


@pytest.mark.parametrize(
    "data",
    [
        {"pbrMetallicRoughness": {"metallicFactor": float("nan")}},
        {"pbrMetallicRoughness": {"baseColorFactor": [1.0, float("nan"), 1.0, 1.0]}},
        {"emissiveFactor": [float("nan"), 0.0, 0.0]},
        {"alphaCutoff": "nan"},
        {"occlusionTexture": {"index": 0, "strength": float("nan")}},
    ],
)
def test_nan_factors_rejected(data):
    with pytest.raises(ValueError, match="NaN"):
        MaterialDescription.from_gltf(data)
