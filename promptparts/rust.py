"""Detection of the rustc toolchain version in use for a directory."""

from __future__ import annotations

import enum
import os
import subprocess
from pathlib import Path, PurePath

_MISSING_PREFIX = "error: toolchain '"
_MISSING_SUFFIX = "' is not installed\n"


class RustcOutcome(enum.Enum):
    """Result kinds of running `rustup run <toolchain> rustc --version`."""

    RUSTC_VERSION = "rustc_version"
    TOOLCHAIN_NAME = "toolchain_name"
    RUSTUP_NOT_WORKING = "rustup_not_working"
    ERROR = "error"


def env_rustup_toolchain() -> str | None:
    """Return the toolchain named by $RUSTUP_TOOLCHAIN, stripped of whitespace."""
    value = os.environ.get("RUSTUP_TOOLCHAIN")
    return None if value is None else value.strip()


def extract_toolchain_from_rustup_override_list(
    stdout: str, cwd: str | os.PathLike[str]
) -> str | None:
    """Return the toolchain of the first override whose directory contains ``cwd``."""
    if stdout == "no overrides\n":
        return None
    current = PurePath(cwd)
    for line in stdout.splitlines():
        words = line.split()
        if len(words) < 2:
            continue
        directory, toolchain = words[0], words[1]
        if current.is_relative_to(PurePath(directory)):
            return toolchain
    return None


def execute_rustup_override_list(cwd: str | os.PathLike[str]) -> str | None:
    """Ask rustup for directory overrides and return the one applying to ``cwd``."""
    try:
        result = subprocess.run(
            ["rustup", "override", "list"], capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        stdout = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return extract_toolchain_from_rustup_override_list(stdout, cwd)


def _read_first_line(path: Path) -> str | None:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, ValueError):
        return None
    lines = content.splitlines()
    if not lines:
        return None
    return lines[0].strip()


def find_rust_toolchain_file(current_dir: str | os.PathLike[str]) -> str | None:
    """Return the first line of the nearest `rust-toolchain` file, searching upwards."""
    start = Path(current_dir)
    for directory in (start, *start.parents):
        toolchain = _read_first_line(directory / "rust-toolchain")
        if toolchain is not None:
            return toolchain
    return None


def extract_toolchain_from_rustup_run_rustc_version(
    returncode: int, stdout: bytes, stderr: bytes
) -> tuple[RustcOutcome, str | None]:
    """Interpret the result of `rustup run <toolchain> rustc --version`.

    Returns the outcome kind together with the rustc output or the name of a
    toolchain that is not installed.
    """
    if returncode == 0:
        try:
            return RustcOutcome.RUSTC_VERSION, stdout.decode("utf-8")
        except UnicodeDecodeError:
            return RustcOutcome.ERROR, None
    try:
        message = stderr.decode("utf-8")
    except UnicodeDecodeError:
        return RustcOutcome.ERROR, None
    if (
        message.startswith(_MISSING_PREFIX)
        and message.endswith(_MISSING_SUFFIX)
        and len(message) >= len(_MISSING_PREFIX) + len(_MISSING_SUFFIX)
    ):
        name = message[len(_MISSING_PREFIX): len(message) - len(_MISSING_SUFFIX)]
        return RustcOutcome.TOOLCHAIN_NAME, name
    return RustcOutcome.ERROR, None


def execute_rustup_run_rustc_version(toolchain: str) -> tuple[RustcOutcome, str | None]:
    """Run rustc through rustup for ``toolchain`` without installing anything."""
    try:
        result = subprocess.run(
            ["rustup", "run", toolchain, "rustc", "--version"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return RustcOutcome.RUSTUP_NOT_WORKING, None
    return extract_toolchain_from_rustup_run_rustc_version(
        result.returncode, result.stdout, result.stderr
    )


def execute_rustc_version() -> str | None:
    """Return the raw output of `rustc --version`, or None if rustc cannot run."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], capture_output=True, check=False
        )
    except OSError:
        return None
    return result.stdout.decode("utf-8")


def format_rustc_version(rustc_stdout: str) -> str:
    """Turn e.g. "rustc 1.34.0 (91856ed52 2019-04-10)" into "v1.34.0"."""
    paren = rustc_stdout.find("(")
    head = rustc_stdout if paren < 0 else rustc_stdout[:paren]
    return f"v{head.replace('rustc', '').strip()}"


def get_rust_version(current_dir: str | os.PathLike[str]) -> str | None:
    """Return the compiler version for ``current_dir``, honouring rustup overrides."""
    toolchain = env_rustup_toolchain()
    if toolchain is None:
        toolchain = execute_rustup_override_list(current_dir)
    if toolchain is None:
        toolchain = find_rust_toolchain_file(current_dir)

    if toolchain is None:
        output = execute_rustc_version()
        return None if output is None else format_rustc_version(output)

    kind, value = execute_rustup_run_rustc_version(toolchain)
    match kind:
        case RustcOutcome.RUSTC_VERSION:
            return format_rustc_version(value or "")
        case RustcOutcome.TOOLCHAIN_NAME:
            return value
        case RustcOutcome.RUSTUP_NOT_WORKING:
            output = execute_rustc_version()
            return None if output is None else format_rustc_version(output)
        case _:
            return None