"""Small file helpers."""

from __future__ import annotations

import os
from pathlib import Path


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the text contents of a file, raising OSError if it cannot be read."""
    return Path(path).read_text(encoding="utf-8")