"""Detection of the active AWS profile and region."""

from __future__ import annotations

import os
from pathlib import Path


def _config_location() -> Path | None:
    env_path = os.environ.get("AWS_CONFIG_FILE")
    if env_path is not None:
        return Path(env_path)
    try:
        return Path.home() / ".aws" / "config"
    except RuntimeError:
        return None


def _read_lines(path: Path) -> list[str] | None:
    """Return the file's lines, skipping any that are not valid UTF-8."""
    try:
        data = path.read_bytes()
    except OSError:
        return None
    lines = []
    for raw in data.split(b"\n"):
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            continue
    if data.endswith(b"\n"):
        lines.pop()
    return lines


def get_aws_region_from_config(profile: str | None = None) -> str | None:
    """Return the region set for ``profile`` (or the default section) in the AWS config.

    The config file is $AWS_CONFIG_FILE or ~/.aws/config.
    """
    location = _config_location()
    if location is None:
        return None
    lines = _read_lines(location)
    if lines is None:
        return None

    header = f"[profile {profile}]" if profile is not None else "[default]"
    try:
        start = lines.index(header)
    except ValueError:
        return None

    for line in lines[start + 1:]:
        if line.startswith("["):
            break
        if line.startswith("region"):
            parts = line.split("=")
            if len(parts) < 2:
                return None
            return parts[1].strip()
    return None


def get_aws_profile_and_region() -> tuple[str | None, str | None]:
    """Return the active profile and region.

    $AWS_DEFAULT_REGION wins over $AWS_REGION; without either, the region is
    read from the config section of the active profile.
    """
    profile = os.environ.get("AWS_PROFILE")
    region = os.environ.get("AWS_REGION")
    default_region = os.environ.get("AWS_DEFAULT_REGION")

    if default_region is not None:
        return profile, default_region
    if region is not None:
        return profile, region
    return profile, get_aws_region_from_config(profile)


def get_aws_region() -> str | None:
    """Return the active region, ignoring any profile."""
    region = os.environ.get("AWS_REGION")
    default_region = os.environ.get("AWS_DEFAULT_REGION")
    if default_region is not None:
        return default_region
    if region is not None:
        return region
    return get_aws_region_from_config(None)