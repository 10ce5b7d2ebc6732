"""Typed plugin settings and their decoding."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from z_contract_linter.exceptions import SettingsDecodeError


class Element(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class LinterSettings(BaseModel):
    """Settings accepted by the plugin.

    None of these fields influence the analysis yet.
    """

    model_config = ConfigDict(extra="ignore")

    one: str = ""
    two: list[Element] = []
    three: Element | None = None


def decode_settings(raw: Any) -> LinterSettings:
    """Decode a free-form payload into LinterSettings.

    Accepts None (all defaults), a mapping, or an existing LinterSettings.
    Unknown keys are ignored.
    """
    if raw is None:
        return LinterSettings()
    if isinstance(raw, LinterSettings):
        return raw
    if not isinstance(raw, dict):
        raise SettingsDecodeError(f"expected a mapping, got {type(raw).__name__}")
    try:
        return LinterSettings.model_validate(raw)
    except ValidationError as e:
        raise SettingsDecodeError(str(e)) from e
