"""Trimming of the host name shown in the prompt."""

from __future__ import annotations


def trim_hostname(host: str, trim_at: str) -> str:
    """Cut ``host`` at the first occurrence of ``trim_at``; an empty marker keeps it whole."""
    if not trim_at:
        return host
    index = host.find(trim_at)
    if index < 0:
        return host
    return host[:index]