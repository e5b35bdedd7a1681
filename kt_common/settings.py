"""Transmittal settings loaded from YAML with environment overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from kt_common.config.env import (
    parse_bool_env,
    parse_float_env,
    parse_int_env,
    parse_list_env,
)
from kt_common.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_FIXED_LABELS: tuple[str, ...] = ("Number", "Name", "Current")

_ENV_OVERRIDES: dict[str, tuple[str, Callable[[str | None], Any]]] = {
    "KT_TRANSMITTAL_FILE": ("file_name", lambda value: value),
    "KT_TRANSMITTAL_SHEET": ("sheet_name", lambda value: value),
    "KT_FIXED_LABELS": ("fixed_labels", parse_list_env),
    "KT_PLACEHOLDER": ("placeholder", lambda value: value),
    "KT_HEADER_ROW_HEIGHT": ("header_row_height", parse_float_env),
    "KT_FIXED_COLUMN_WIDTH": ("fixed_column_width", parse_float_env),
    "KT_SECONDARY_COLUMN_WIDTH": ("secondary_column_width", parse_float_env),
    "KT_HEADER_ROTATION": ("header_rotation", parse_int_env),
    "KT_FUZZY_FILTER": ("fuzzy_filter", parse_bool_env),
    "KT_SORT_SHEETS": ("sort_sheets", parse_bool_env),
    "KT_SORT_REVISIONS": ("sort_revisions", parse_bool_env),
}


class TransmittalSettings(BaseModel):
    """Export and selection behaviour for the document transmittal."""

    file_name: str = Field(default="Doctrans.xlsx", min_length=1)
    sheet_name: str = Field(default="Doctrans", min_length=1, max_length=31)
    fixed_labels: tuple[str, ...] = Field(default=DEFAULT_FIXED_LABELS)
    placeholder: str = Field(default="-")
    header_row_height: float = Field(default=150.0, gt=0)
    fixed_column_width: float = Field(default=30.0, gt=0)
    secondary_column_width: float = Field(default=5.0, gt=0)
    header_rotation: int = Field(default=90, ge=0, le=180)
    fuzzy_filter: bool = False
    sort_sheets: bool = True
    sort_revisions: bool = True

    model_config = {"extra": "ignore"}

    @field_validator("fixed_labels")
    @classmethod
    def _validate_fixed_labels(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) != 3:
            raise ValueError("fixed_labels must name the number, name and current columns")
        return value


def _load_file_data(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(
            f"Settings file not found: {path}", context={"path": path}
        )
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Settings file is not valid YAML: {path}",
            context={"path": path},
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Settings file must contain a mapping at the top level.",
            context={"path": path},
        )
    section = data.get("transmittal", data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            "Settings section 'transmittal' must be a mapping.",
            context={"path": path},
        )
    return dict(section)


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for env_name, (field_name, parser) in _ENV_OVERRIDES.items():
        parsed = parser(environ.get(env_name))
        if parsed is not None:
            overrides[field_name] = parsed
    return overrides


def load_settings(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> TransmittalSettings:
    """Load settings.

    Priority: environment variables > settings file > defaults.
    """
    data: dict[str, Any] = {}
    if path is not None:
        data.update(_load_file_data(path))
    overrides = _env_overrides(os.environ if environ is None else environ)
    if overrides:
        logger.debug("Applying settings overrides from environment: %s", sorted(overrides))
    data.update(overrides)
    try:
        return TransmittalSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid transmittal settings.",
            context={"path": path, "errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
