"""Typed configuration schema and loader for the txt2pdf package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, model_validator

FONT_SIZE_ENV = "TXT2PDF_FONT_SIZE"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LayoutConfig(BaseModel):
    """Page geometry and text metrics, in millimetres."""

    page_width: confloat(gt=0.0) = 210.0
    page_height: confloat(gt=0.0) = 297.0
    margin_top: confloat(ge=0.0) = 10.0
    margin_bottom: confloat(ge=0.0) = 10.0
    margin_left: confloat(ge=0.0) = 20.0
    margin_right: confloat(ge=0.0) = 10.0
    font_size: confloat(gt=0.0) = 12.0
    char_width_ratio: confloat(gt=0.0) = 0.17
    line_height_ratio: confloat(gt=0.0) = 0.5
    width_model: Literal["approximate", "metrics"] = "approximate"

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _check_usable_area(self) -> "LayoutConfig":
        if self.usable_width <= 0:
            raise ValueError("margins leave no usable page width")
        if self.usable_height <= 0:
            raise ValueError("margins leave no usable page height")
        return self

    @property
    def usable_width(self) -> float:
        return self.page_width - self.margin_left - self.margin_right

    @property
    def usable_height(self) -> float:
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def avg_char_width(self) -> float:
        return self.font_size * self.char_width_ratio

    @property
    def line_height(self) -> float:
        return self.font_size * self.line_height_ratio


class OutputSettings(BaseModel):
    """Document metadata written into the PDF."""

    title: str = "Text to PDF"
    author: str | None = None

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    layout: LayoutConfig
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


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``TXT2PDF_FONT_SIZE`` environment variable.
    """

    with (
        importlib_resources.files("txt2pdf.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    if environ.get(FONT_SIZE_ENV):
        merged = deep_merge_dicts(merged, {"layout": {"font_size": environ[FONT_SIZE_ENV]}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "FONT_SIZE_ENV",
    "ConfigModel",
    "LayoutConfig",
    "OutputSettings",
    "deep_merge_dicts",
    "load_config",
]
