"""Detection of the installed Ruby version."""

from __future__ import annotations

import subprocess


def format_ruby_version(ruby_version: str) -> str | None:
    """Turn `ruby -v` output such as "ruby 2.6.0p0 ..." into "v2.6.0".

    Returns None when the second word is missing or shorter than five bytes.
    """
    words = ruby_version.split()
    if len(words) < 2:
        return None
    head = words[1].encode("utf-8")[:5]
    if len(head) < 5:
        return None
    try:
        version = head.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def get_ruby_version() -> str | None:
    """Return the raw output of `ruby -v`, or None if it cannot be run."""
    try:
        result = subprocess.run(["ruby", "-v"], capture_output=True, check=False)
    except OSError:
        return None
    return result.stdout.decode("utf-8")