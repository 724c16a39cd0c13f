"""Config loading entry points for filehasher."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import FileHasherConfig

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[assignment]

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "filehasher.default.yaml"

ENV_ALGORITHM = "FILEHASHER_ALGORITHM"
ENV_BUFFER_SIZE = "FILEHASHER_BUFFER_SIZE"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> FileHasherConfig:
    """Load the configuration applying environment variables and optional overrides.

    Precedence, lowest first: built-in defaults, the default YAML file, ``path``,
    ``FILEHASHER_*`` environment variables, ``overrides``.
    """

    if DEFAULT_CONFIG_PATH.exists():
        default_data = _expect_mapping(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)
    else:
        default_data = {}

    config_data: dict[str, Any] = {}
    if path:
        config_data = _expect_mapping(_read_structured_file(path), path)

    merged: dict[str, Any] = _deep_merge(default_data, config_data)
    merged = _deep_merge(merged, _environment_overrides())

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    try:
        return FileHasherConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the consolidated default configuration to ``dest``."""

    dest.parent.mkdir(parents=True, exist_ok=True)

    merged = FileHasherConfig().model_dump(mode="json")
    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")
    if dest.suffix.lower() in {".json"}:
        dest.write_text(json.dumps(merged, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(merged, sort_keys=False),
        encoding="utf-8",
    )


def _environment_overrides() -> dict[str, Any]:
    """Collect ``FILEHASHER_*`` variables into a nested override mapping."""

    hashing: dict[str, Any] = {}
    algorithm = os.getenv(ENV_ALGORITHM)
    if algorithm:
        hashing["algorithm"] = algorithm.strip()

    buffer_size = os.getenv(ENV_BUFFER_SIZE)
    if buffer_size:
        try:
            hashing["buffer_size"] = int(buffer_size)
        except ValueError as exc:
            raise ConfigError(f"{ENV_BUFFER_SIZE} must be an integer, got {buffer_size!r}.") from exc

    return {"hashing": hashing} if hashing else {}


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    if suffix == ".toml":
        return tomllib.loads(text)
    if suffix == ".json":
        return json.loads(text)

    raise ConfigError(f"Unsupported config format for {path}")


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``hashing.buffer_size``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        converted = _expand_single_override(key, value)
        result = _deep_merge(result, converted)
    return result


def _expand_single_override(key: Any, value: Any) -> dict[str, Any]:
    if isinstance(key, str) and "." in key:
        parts = key.split(".")
        cursor: dict[str, Any] = {}
        root = cursor
        for segment in parts[:-1]:
            next_cursor: dict[str, Any] = {}
            cursor[segment] = next_cursor
            cursor = next_cursor
        cursor[parts[-1]] = value
        return root
    return {key: value}


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_ALGORITHM",
    "ENV_BUFFER_SIZE",
    "load_config",
    "dump_example_config",
]
