"""Typed configuration schema and loader for the layout2pdf package."""

from __future__ import annotations

import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PageSettings(BaseModel):
    """Page geometry in PDF points."""

    width: confloat(gt=0.0)
    height: confloat(gt=0.0)
    left_margin: confloat(ge=0.0)
    right_margin: confloat(ge=0.0)
    top_baseline: confloat(ge=0.0)
    bottom_baseline: confloat(ge=0.0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _margins_fit(self) -> "PageSettings":
        if self.left_margin + self.right_margin >= self.width:
            raise ValueError("margins leave no usable width")
        return self

    @property
    def usable_width(self) -> float:
        return self.width - self.left_margin - self.right_margin


class TextSettings(BaseModel):
    """Font and line metrics."""

    default_font_size: conint(ge=1)
    line_gap: confloat(ge=0.0)
    char_width_factor: confloat(gt=0.0)
    base_font: str
    font_resource: str

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Byte encoding of text placed into content streams."""

    encoding: str
    encoding_errors: Literal["strict", "replace", "ignore"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    page: PageSettings
    text: TextSettings
    output: OutputSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_defaults() -> dict[str, Any]:
    """Return the packaged ``defaults.yml`` as a plain mapping."""

    with (
        importlib_resources.files("layout2pdf.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        return yaml.safe_load(f) or {}


def load_config(path: str | os.PathLike[str] | None = None) -> ConfigModel:
    """Load configuration from defaults and an optional user override file.

    Raises ``pydantic.ValidationError`` for unknown keys or invalid values and
    ``OSError`` when ``path`` cannot be read.
    """

    merged = load_defaults()
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Configuration root must be a mapping: {path}")
        merged = deep_merge_dicts(merged, overrides)

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "PageSettings",
    "TextSettings",
    "OutputSettings",
    "deep_merge_dicts",
    "load_defaults",
    "load_config",
]
