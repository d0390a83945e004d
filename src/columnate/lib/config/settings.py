"""Layout configuration loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "columnate.toml"
WIDTH_ENV = "COLUMNATE_WIDTH"


@dataclass(frozen=True, slots=True)
class ColumnateConfig:
    """Resolved configuration for columnation."""

    width: int = 80


_SECTION_KEY_MAP: dict[str, dict[str, str]] = {
    "layout": {
        "width": "width",
        "max_width": "width",
    },
}

_TOP_LEVEL_KEY_MAP: dict[str, str] = {
    "width": "width",
    "max_width": "width",
}


def _coerce_width(*, raw_value: object, source: str) -> int:
    if isinstance(raw_value, bool) or not isinstance(raw_value, int):
        raise ValueError(
            f"Invalid value for '{source}': expected int, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    if raw_value < 1:
        raise ValueError(f"Invalid value for '{source}': expected int >= 1, got {raw_value!r}.")
    return raw_value


def _coerce_env_width(raw_value: str) -> int:
    try:
        value = int(raw_value.strip())
    except ValueError as error:
        raise ValueError(
            f"Invalid environment override '{WIDTH_ENV}': expected int, got {raw_value!r}."
        ) from error
    return _coerce_width(raw_value=value, source=WIDTH_ENV)


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        section_map = _SECTION_KEY_MAP.get(key)
        if section_map is not None:
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for '{key}' in '{path}': expected table.")
            for section_key, section_value in cast("dict[str, object]", raw_value).items():
                field_name = section_map.get(section_key)
                if field_name is None:
                    logger.warning(
                        "Ignoring unknown columnate config key '%s.%s'.",
                        key,
                        section_key,
                    )
                    continue
                values[field_name] = _coerce_width(
                    raw_value=section_value,
                    source=f"{key}.{section_key}",
                )
            continue

        field_name = _TOP_LEVEL_KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown columnate config key '%s'.", key)
            continue
        values[field_name] = _coerce_width(raw_value=raw_value, source=key)


def resolve_config_path(explicit: Path | None = None, cwd: Path | None = None) -> Path | None:
    """Return the config file to read, or None when there is nothing to load.

    An explicit path must exist; the implicit ``columnate.toml`` is optional.
    """

    if explicit is not None:
        if not explicit.is_file():
            raise FileNotFoundError(f"Config file not found: {explicit}")
        return explicit
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(
    path: Path | None = None,
    *,
    cwd: Path | None = None,
    width: int | None = None,
) -> ColumnateConfig:
    """Load TOML config, then apply ``COLUMNATE_WIDTH`` and an explicit ``width``."""

    values: dict[str, object] = {"width": ColumnateConfig().width}
    resolved = resolve_config_path(path, cwd)
    if resolved is not None:
        try:
            payload_obj = tomllib.loads(resolved.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as error:
            raise ValueError(f"Invalid TOML in '{resolved}': {error}") from error
        _apply_toml_payload(
            values=values,
            payload=cast("dict[str, object]", payload_obj),
            path=resolved,
        )
        logger.debug("Loaded columnate config from %s.", resolved)

    raw_env = os.getenv(WIDTH_ENV)
    if raw_env is not None:
        values["width"] = _coerce_env_width(raw_env)

    config = ColumnateConfig(width=cast("int", values["width"]))
    if width is not None:
        config = replace(config, width=_coerce_width(raw_value=width, source="--width"))
    return config
