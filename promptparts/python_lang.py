"""Detection of the Python version and active virtual environment."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import PurePath

log = logging.getLogger(__name__)

_PREFIX = "Python "


def format_python_version(python_stdout: str) -> str:
    """Turn e.g. "Python 3.7.2" into "v3.7.2"."""
    text = python_stdout
    while text.startswith(_PREFIX):
        text = text[len(_PREFIX):]
    return f"v{text.strip()}"


def get_python_version() -> str | None:
    """Return the output of `python --version`, from stdout or, if empty, stderr."""
    try:
        result = subprocess.run(
            ["python", "--version"], capture_output=True, check=False
        )
    except OSError:
        return None
    if result.returncode != 0:
        log.warning(
            "Non-Zero exit code '%s' when executing `python --version`",
            result.returncode,
        )
        return None
    # Older interpreters report their version on stderr.
    output = result.stdout if result.stdout else result.stderr
    return output.decode("utf-8")


def get_pyenv_version() -> str | None:
    """Return the output of `pyenv version-name`, or None if it cannot be run."""
    try:
        result = subprocess.run(
            ["pyenv", "version-name"], capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None


def get_python_virtual_env() -> str | None:
    """Return the directory name of the active $VIRTUAL_ENV, if any."""
    venv = os.environ.get("VIRTUAL_ENV")
    if venv is None:
        return None
    name = PurePath(venv).name
    if name in ("", ".."):
        return None
    return name