"""Selection of the shell edit mode for the prompt character."""

from __future__ import annotations

import enum


class ShellEditMode(enum.Enum):
    """Vi-style edit modes of the shell line editor."""

    NORMAL = "normal"
    INSERT = "insert"


_NORMAL_KEYMAPS = frozenset({("fish", "default"), ("zsh", "vicmd")})


def resolve_edit_mode(shell: str, keymap: str = "viins") -> ShellEditMode:
    """Map a shell's keymap name to an edit mode; anything unrecognised is insert mode."""
    if (shell, keymap) in _NORMAL_KEYMAPS:
        return ShellEditMode.NORMAL
    return ShellEditMode.INSERT