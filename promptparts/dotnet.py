"""Detection of the .NET SDK version in use for the current directory."""

from __future__ import annotations

import enum
import json
import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

from promptparts.utils import read_file

log = logging.getLogger(__name__)

GLOBAL_JSON_FILE = "global.json"
PROJECT_JSON_FILE = "project.json"

_PROJECT_EXTENSIONS = frozenset({"csproj", "fsproj", "xproj"})


class FileType(enum.Enum):
    """Kinds of files that mark a .NET project."""

    PROJECT_JSON = "project_json"
    PROJECT_FILE = "project_file"
    GLOBAL_JSON = "global_json"
    SOLUTION_FILE = "solution_file"


@dataclass(frozen=True)
class DotnetFile:
    """A .NET-related file found in a directory."""

    path: Path
    file_type: FileType


def get_pinned_sdk_version(json_text: str) -> str | None:
    """Return the SDK version pinned in global.json text, prefixed with "v"."""
    try:
        parsed = json.loads(json_text)
    except ValueError:
        return None
    if not isinstance(parsed, dict):
        return None
    sdk = parsed.get("sdk")
    if not isinstance(sdk, dict):
        return None
    version = sdk.get("version")
    if not isinstance(version, str):
        return None
    return f"v{version}"


def get_pinned_sdk_version_from_file(path: str | os.PathLike[str]) -> str | None:
    """Read a global.json file and return its pinned SDK version, if any."""
    try:
        json_text = read_file(path)
    except (OSError, ValueError):
        return None
    log.debug("Checking if .NET SDK version is pinned in: %s", path)
    return get_pinned_sdk_version(json_text)


def get_dotnet_file_type(path: str | os.PathLike[str]) -> FileType | None:
    """Classify a path as a .NET file, or return None if it is not one."""
    p = Path(path)
    name = p.name.lower()
    if name == GLOBAL_JSON_FILE:
        return FileType.GLOBAL_JSON
    if name == PROJECT_JSON_FILE:
        return FileType.PROJECT_JSON

    extension = p.suffix[1:].lower() if p.suffix else ""
    if extension == "sln":
        return FileType.SOLUTION_FILE
    if extension in _PROJECT_EXTENSIONS:
        return FileType.PROJECT_FILE
    return None


def get_local_dotnet_files(paths: list[str | os.PathLike[str]]) -> list[DotnetFile]:
    """Pick out the .NET files among ``paths``, keeping their order."""
    found = []
    for path in paths:
        file_type = get_dotnet_file_type(path)
        if file_type is not None:
            found.append(DotnetFile(Path(path), file_type))
    return found


def _check_directory_for_global_json(directory: Path) -> str | None:
    global_json = directory / GLOBAL_JSON_FILE
    log.debug("Checking if global.json exists at: %s", global_json)
    if global_json.exists():
        return get_pinned_sdk_version_from_file(global_json)
    return None


def try_find_nearby_global_json(
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Look for a pinned SDK version in the parent directory or the repository root.

    The parent is skipped when the current directory is itself the repository root.
    """
    current = Path(current_dir)
    root = Path(repo_root) if repo_root is not None else None

    candidates: list[Path] = []
    if root != current and current.parent != current:
        candidates.append(current.parent)
    if root is not None and (not candidates or candidates[-1] != root):
        candidates.append(root)

    for directory in candidates:
        if directory == current:
            continue
        version = _check_directory_for_global_json(directory)
        if version is not None:
            return version
    return None


def estimate_dotnet_version(
    files: list[DotnetFile],
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Work out the SDK version from the project files without a full CLI call."""
    relevant = (
        next((f for f in files if f.file_type is FileType.GLOBAL_JSON), None)
        or next((f for f in files if f.file_type is FileType.SOLUTION_FILE), None)
        or next(iter(files), None)
    )
    if relevant is None:
        return None

    if relevant.file_type is FileType.GLOBAL_JSON:
        return get_pinned_sdk_version_from_file(relevant.path) or get_latest_sdk_from_cli()
    if relevant.file_type is FileType.SOLUTION_FILE:
        # A global.json above a solution file is assumed not to exist.
        return get_latest_sdk_from_cli()
    return try_find_nearby_global_json(current_dir, repo_root) or get_latest_sdk_from_cli()


def get_version_from_cli() -> str | None:
    """Return the version reported by `dotnet --version`, prefixed with "v"."""
    try:
        result = subprocess.run(
            ["dotnet", "--version"], capture_output=True, check=False
        )
    except OSError as error:
        log.warning("Failed to execute `dotnet --version`. %s", error)
        return None
    try:
        version = result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def get_latest_sdk_from_cli() -> str | None:
    """Return the newest SDK listed by `dotnet --list-sdks`, prefixed with "v".

    Falls back to `dotnet --version` when listing is not supported.
    """
    try:
        result = subprocess.run(
            ["dotnet", "--list-sdks"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as error:
        log.warning("Failed to execute `dotnet --list-sdks`. %s", error)
        return None

    if result.returncode != 0:
        log.warning(
            "Received a non-success exit code from `dotnet --list-sdks`. "
            "Falling back to `dotnet --version`."
        )
        return get_version_from_cli()

    try:
        output = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None

    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if not lines:
        log.warning("Unable to parse the output from `dotnet --list-sdks`.")
        return None
    latest = lines[-1]
    bracket = latest.find("[")
    take_until = bracket - 1
    if bracket < 1 or take_until <= 1:
        log.warning("Unable to parse the output from `dotnet --list-sdks`.")
        return None
    return f"v{latest[:take_until]}"