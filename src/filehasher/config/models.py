"""Pydantic models describing filehasher configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filehasher.hashing.algorithms import DEFAULT_ALGORITHM, resolve_algorithm
from filehasher.hashing.digest import DEFAULT_BUFFER_SIZE


class HashingConfig(BaseModel):
    """Digest defaults applied when the caller does not pass explicit values."""

    model_config = ConfigDict(extra="forbid")

    algorithm: str = DEFAULT_ALGORITHM
    buffer_size: int = Field(default=DEFAULT_BUFFER_SIZE, ge=1)
    manifest_suffix: Optional[str] = None

    @field_validator("algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        """Normalise the algorithm name, rejecting ones hashlib cannot build."""

        return resolve_algorithm(value)

    @property
    def effective_manifest_suffix(self) -> str:
        """Sidecar suffix, defaulting to ``.<algorithm>``."""

        return self.manifest_suffix or f".{self.algorithm}"


class RuntimeConfig(BaseModel):
    """Execution-time settings such as log destinations."""

    model_config = ConfigDict(extra="forbid")

    log_path: Optional[Path] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {value!r}")
        return level


class FileHasherConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


__all__ = ["FileHasherConfig", "HashingConfig", "RuntimeConfig"]
