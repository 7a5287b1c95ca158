"""Detection of the Java runtime version from `java -Xinternalversion` output."""

from __future__ import annotations

import os
import subprocess

_VERSION_CHARS = frozenset("0123456789.")


def _take_version(text: str) -> str | None:
    """Return the leading run of digits and dots, or None if there is none."""
    end = 0
    for char in text:
        if char not in _VERSION_CHARS:
            break
        end += 1
    return text[:end] or None


def _after(text: str, marker: str) -> str | None:
    """Return the text following the first occurrence of ``marker``."""
    index = text.find(marker)
    if index < 0:
        return None
    return text[index + len(marker):]


def parse_jre_version(text: str) -> str | None:
    """Parse the Java version from `java -Xinternalversion` output.

    Recognises forms such as "JRE (1.8.0_222-b10)",
    "JRE (Zulu 8.40.0.25-CA-linux64) (1.8.0_222-b10)" and "VM (1.8.0_222-b10)".
    """
    rest = _after(text, "JRE (")
    if rest is None:
        rest = _after(text, "VM (")
    if rest is None:
        return None

    version = _take_version(rest)
    if version is not None:
        return version

    # Vendor-tagged form: skip to the next parenthesised group.
    rest = _after(rest, "(")
    if rest is None:
        return None
    return _take_version(rest)


def format_java_version(java_out: str) -> str | None:
    """Return the Java version prefixed with "v", or None if it cannot be found."""
    version = parse_jre_version(java_out)
    return None if version is None else f"v{version}"


def combine_outputs(stdout: bytes, stderr: bytes) -> str:
    """Join standard output and error; some vendors print the version to stderr."""
    return stdout.decode("utf-8") + stderr.decode("utf-8")


def get_java_version() -> str | None:
    """Run the Java executable and return its combined version output."""
    java_home = os.environ.get("JAVA_HOME")
    java_command = f"{java_home}/bin/java" if java_home is not None else "java"
    try:
        result = subprocess.run(
            [java_command, "-Xinternalversion"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return None
    return combine_outputs(result.stdout, result.stderr)