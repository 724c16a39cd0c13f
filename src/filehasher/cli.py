"""Command-line entry points for filehasher."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer

from filehasher.config import ConfigError, FileHasherConfig, dump_example_config, load_config
from filehasher.hashing import (
    FileHasherError,
    available_algorithms,
    compute_digest,
    to_hex,
    verify_file,
)
from filehasher.util.logging import configure_logging
from filehasher.util.manifest import manifest_path_for, read_checksum_manifest, write_checksum_manifest

app = typer.Typer(add_completion=False, help="Compute and verify file digests")

ERROR_EXIT_CODE = 2


def _load(config: Optional[Path], algorithm: Optional[str], buffer_size: Optional[int]) -> FileHasherConfig:
    overrides: dict[str, Any] = {}
    if algorithm:
        overrides["hashing.algorithm"] = algorithm
    if buffer_size is not None:
        overrides["hashing.buffer_size"] = buffer_size
    try:
        cfg = load_config(config, overrides=overrides)
    except ConfigError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=ERROR_EXIT_CODE) from exc
    configure_logging(log_path=cfg.runtime.log_path, level=cfg.runtime.log_level)
    return cfg


@app.command()
def digest(
    path: Path = typer.Argument(..., help="File to hash"),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="Hash algorithm (default md5)"),
    buffer_size: Optional[int] = typer.Option(None, "--buffer-size", "-b", help="Read buffer size in bytes"),
    config: Optional[Path] = typer.Option(None, help="Optional YAML/TOML/JSON config file"),
    write_manifest: bool = typer.Option(False, "--write-manifest", help="Write a <file>.<algorithm> sidecar"),
) -> None:
    """Print the hex digest of a file."""

    cfg = _load(config, algorithm, buffer_size)
    try:
        hex_value = to_hex(compute_digest(path, cfg.hashing.algorithm, cfg.hashing.buffer_size))
    except FileHasherError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=ERROR_EXIT_CODE) from exc

    typer.echo(f"{hex_value}  {path}")
    if write_manifest:
        try:
            dest = write_checksum_manifest(path, hex_value, suffix=cfg.hashing.effective_manifest_suffix)
        except FileHasherError as exc:
            typer.echo(f"error: {exc}", err=True)
            raise typer.Exit(code=ERROR_EXIT_CODE) from exc
        typer.echo(f"Wrote {dest}", err=True)


@app.command()
def verify(
    path: Path = typer.Argument(..., help="File to check"),
    expected: Optional[str] = typer.Option(None, "--expected", "-e", help="Expected hex digest"),
    manifest: Optional[Path] = typer.Option(None, "--manifest", "-m", help="Checksum manifest to read"),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="Hash algorithm (default md5)"),
    buffer_size: Optional[int] = typer.Option(None, "--buffer-size", "-b", help="Read buffer size in bytes"),
    config: Optional[Path] = typer.Option(None, help="Optional YAML/TOML/JSON config file"),
) -> None:
    """Exit 0 when the file matches the expected digest, 1 otherwise."""

    cfg = _load(config, algorithm, buffer_size)
    try:
        if expected is None:
            if manifest is None:
                manifest = manifest_path_for(path, cfg.hashing.effective_manifest_suffix)
            expected = read_checksum_manifest(manifest)
        matched = verify_file(path, expected, cfg.hashing.algorithm, cfg.hashing.buffer_size)
    except FileHasherError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=ERROR_EXIT_CODE) from exc

    if not matched:
        typer.echo(f"{path}: FAILED")
        raise typer.Exit(code=1)
    typer.echo(f"{path}: OK")


@app.command()
def algorithms() -> None:
    """List the hash algorithms this runtime supports."""

    for name in available_algorithms():
        typer.echo(name)


@app.command()
def dump_config(dest: Path = typer.Argument(..., help="Destination .yaml or .json file")) -> None:
    """Write the default configuration to a file."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=ERROR_EXIT_CODE) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
