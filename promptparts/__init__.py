"""Helpers for an informative shell prompt: styled segments, paths, durations, time and toolchain versions."""

__version__ = "0.1.0"