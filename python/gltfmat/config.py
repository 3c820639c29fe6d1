# python/gltfmat/config.py
# Translator configuration parsing (texture transform, wrap mode, emission threshold)
# Exists to let import pipelines tune translation from mappings or JSON files
# RELEVANT FILES: python/gltfmat/translator.py, python/gltfmat/params.py, tests/test_config.py
from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .params import WrapMode

ConfigSource = Union["TranslatorConfig", Mapping[str, Any], str, Path, None]

_WRAP_MODES: Dict[str, str] = {
    "repeat": "repeat",
    "wrap": "repeat",
    "clamp": "clamp",
    "clamptoedge": "clamp",
    "mirror": "mirror",
    "mirroredrepeat": "mirror",
}


def _normalize_key(value: Any) -> str:
    return "".join(
        c
        for c in str(value).strip().lower()
        if c not in {"-", "_", " ", "."}
    )


def _normalize_choice(value: Any, mapping: Mapping[str, str], label: str) -> str:
    key = _normalize_key(value)
    if key not in mapping:
        raise ValueError(f"Unknown {label}: {value!r}")
    return mapping[key]


def _to_float2(value: Any, label: str) -> Tuple[float, float]:
    if value is None:
        raise ValueError(f"{label} requires two floats")
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (float(value[0]), float(value[1]))
    raise ValueError(f"{label} must be a sequence of two numeric values")


@dataclass
class TranslatorConfig:
    # glTF UV origin is top-left; flip V for bottom-left samplers
    texture_scale: Tuple[float, float] = (1.0, -1.0)
    texture_offset: Tuple[float, float] = (0.0, 1.0)
    base_color_wrap: str = "clamp"
    emission_threshold: float = 0.0

    @property
    def base_color_wrap_mode(self) -> WrapMode:
        return WrapMode(self.base_color_wrap)

    def to_dict(self) -> dict:
        return {
            "texture_scale": list(self.texture_scale),
            "texture_offset": list(self.texture_offset),
            "base_color_wrap": self.base_color_wrap,
            "emission_threshold": self.emission_threshold,
        }

    def copy(self) -> "TranslatorConfig":
        return copy.deepcopy(self)

    def validate(self) -> None:
        if self.base_color_wrap not in _WRAP_MODES.values():
            raise ValueError(f"base_color_wrap must be one of {sorted(set(_WRAP_MODES.values()))}")
        if self.emission_threshold < 0.0:
            raise ValueError("emission_threshold must be >= 0")
        if self.texture_scale[0] == 0.0 or self.texture_scale[1] == 0.0:
            raise ValueError("texture_scale entries must be non-zero")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["TranslatorConfig"] = None) -> "TranslatorConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        if "texture_scale" in data:
            base.texture_scale = _to_float2(data["texture_scale"], "texture_scale")
        if "texture_offset" in data:
            base.texture_offset = _to_float2(data["texture_offset"], "texture_offset")
        if "base_color_wrap" in data:
            base.base_color_wrap = _normalize_choice(data["base_color_wrap"], _WRAP_MODES, "wrap mode")
        if "emission_threshold" in data:
            base.emission_threshold = float(data["emission_threshold"])
        return base


def _load_from_path(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, Mapping):
        raise TypeError(f"config file {path} must contain a JSON object")
    return data


def load_translator_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> TranslatorConfig:
    if isinstance(config, TranslatorConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = TranslatorConfig.from_mapping(config)
    elif isinstance(config, (str, Path)):
        cfg = TranslatorConfig.from_mapping(_load_from_path(Path(config)))
    elif config is None:
        cfg = TranslatorConfig()
    else:
        raise TypeError("config must be TranslatorConfig, mapping, path, or None")

    if overrides:
        cfg = TranslatorConfig.from_mapping(overrides, cfg)
    cfg.validate()
    return cfg
