"""Description of an ongoing git operation (merge, rebase, bisect, ...)."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")


class RepoState(enum.Enum):
    """States a git repository can be in."""

    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert_sequence"
    CHERRY_PICK = "cherry_pick"
    CHERRY_PICK_SEQUENCE = "cherry_pick_sequence"
    BISECT = "bisect"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase_interactive"
    REBASE_MERGE = "rebase_merge"
    APPLY_MAILBOX = "apply_mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply_mailbox_or_rebase"


@dataclass(frozen=True)
class StateLabel:
    """Segment name and default message for a repository state."""

    segment_name: str
    message_default: str


@dataclass(frozen=True)
class StateProgress:
    """Step counter of a multi-step operation."""

    current: int
    total: int


@dataclass(frozen=True)
class StateDescription:
    """What is going on in a repository; no label means the repository is clean."""

    label: StateLabel | None = None
    progress: StateProgress | None = None

    @property
    def is_clean(self) -> bool:
        return self.label is None


MERGE_LABEL = StateLabel("merge", "MERGING")
REVERT_LABEL = StateLabel("revert", "REVERTING")
CHERRY_LABEL = StateLabel("cherry_pick", "CHERRY-PICKING")
BISECT_LABEL = StateLabel("bisect", "BISECTING")
AM_LABEL = StateLabel("am", "AM")
REBASE_LABEL = StateLabel("rebase", "REBASING")
AM_OR_REBASE_LABEL = StateLabel("am_or_rebase", "AM/REBASE")

_LABELS = {
    RepoState.MERGE: MERGE_LABEL,
    RepoState.REVERT: REVERT_LABEL,
    RepoState.REVERT_SEQUENCE: REVERT_LABEL,
    RepoState.CHERRY_PICK: CHERRY_LABEL,
    RepoState.CHERRY_PICK_SEQUENCE: CHERRY_LABEL,
    RepoState.BISECT: BISECT_LABEL,
    RepoState.APPLY_MAILBOX: AM_LABEL,
    RepoState.APPLY_MAILBOX_OR_REBASE: AM_OR_REBASE_LABEL,
}

_REBASE_STATES = frozenset(
    {RepoState.REBASE, RepoState.REBASE_INTERACTIVE, RepoState.REBASE_MERGE}
)


def _read_count(path: Path) -> int | None:
    try:
        text = path.read_text(encoding="utf-8").strip()
    except (OSError, ValueError):
        return None
    if not _UNSIGNED.fullmatch(text):
        return None
    return int(text)


def _progress(dot_git: Path, current_path: str, total_path: str) -> StateProgress | None:
    current = _read_count(dot_git / current_path)
    if current is None:
        return None
    total = _read_count(dot_git / total_path)
    if total is None:
        return None
    return StateProgress(current, total)


def describe_rebase(root: str | os.PathLike[str]) -> StateDescription:
    """Describe a rebase, reading its progress from the files under .git."""
    dot_git = Path(root) / ".git"
    if (dot_git / "rebase-merge").exists():
        progress = _progress(dot_git, "rebase-merge/msgnum", "rebase-merge/end")
    elif (dot_git / "rebase-apply").exists():
        progress = _progress(dot_git, "rebase-apply/next", "rebase-apply/last")
    else:
        progress = None
    return StateDescription(REBASE_LABEL, progress)


def get_state_description(
    state: RepoState, root: str | os.PathLike[str]
) -> StateDescription:
    """Return the description of ``state`` for the repository at ``root``."""
    if state is RepoState.CLEAN:
        return StateDescription()
    if state in _REBASE_STATES:
        return describe_rebase(root)
    return StateDescription(_LABELS[state])