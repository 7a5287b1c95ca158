"""Detection of the version of the package in the current directory."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

from promptparts.utils import read_file


def format_version(version: str) -> str:
    """Strip quotes and whitespace from a version and prefix it with "v"."""
    return f"v{version.replace(chr(34), '').strip()}"


def _lookup(data: Any, *keys: str) -> str | None:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data if isinstance(data, str) else None


def _load_toml(text: str) -> dict[str, Any] | None:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        return None


def extract_cargo_version(file_contents: str) -> str | None:
    """Return the formatted package.version from Cargo.toml text."""
    raw = _lookup(_load_toml(file_contents), "package", "version")
    return None if raw is None else format_version(raw)


def extract_package_version(file_contents: str) -> str | None:
    """Return the formatted version from package.json text."""
    try:
        data = json.loads(file_contents)
    except ValueError:
        return None
    raw = _lookup(data, "version")
    if raw is None or raw == "null":
        return None
    return format_version(raw)


def extract_poetry_version(file_contents: str) -> str | None:
    """Return the formatted tool.poetry.version from pyproject.toml text."""
    raw = _lookup(_load_toml(file_contents), "tool", "poetry", "version")
    return None if raw is None else format_version(raw)


_MANIFESTS = (
    ("Cargo.toml", extract_cargo_version),
    ("package.json", extract_package_version),
    ("pyproject.toml", extract_poetry_version),
)


def get_package_version(directory: str | os.PathLike[str] = ".") -> str | None:
    """Return the version from the first readable manifest in ``directory``.

    Manifests are tried in the order Cargo.toml, package.json, pyproject.toml;
    only the first one that can be read is consulted.
    """
    base = Path(directory)
    for name, extract in _MANIFESTS:
        try:
            contents = read_file(base / name)
        except (OSError, ValueError):
            continue
        return extract(contents)
    return None