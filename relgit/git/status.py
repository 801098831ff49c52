"""Working-tree status model.

Parsed from ``git status --porcelain=v1 -b``. ``Repository.is_dirty`` is
``not status.is_clean``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

__all__ = ["GitStatus", "StatusEntry", "parse_status"]


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single entry in git status.

    Attributes:
        xy: Two-character status code (e.g., "M ", " M", "??")
        path: File path
    """

    xy: str
    path: str

    @property
    def is_staged(self) -> bool:
        return self.xy != "??" and self.xy[0] != " "

    @property
    def is_untracked(self) -> bool:
        return self.xy == "??"


@dataclass(frozen=True, slots=True)
class GitStatus:
    """Branch info plus every changed, staged or untracked path."""

    branch: str
    upstream: str | None = None
    ahead: int = 0
    behind: int = 0
    entries: tuple[StatusEntry, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """True if working tree has no changes, untracked files included."""
        return len(self.entries) == 0

    @property
    def staged(self) -> list[StatusEntry]:
        return [e for e in self.entries if e.is_staged]

    @property
    def untracked(self) -> list[StatusEntry]:
        return [e for e in self.entries if e.is_untracked]


def parse_status(output: str) -> GitStatus:
    lines = [ln for ln in output.splitlines() if ln.strip()]
    if not lines:
        return GitStatus(branch="")

    # First line: ## branch...upstream [ahead N, behind M]
    branch_line = lines[0] if lines[0].startswith("##") else "##"
    branch, upstream = _parse_branch_line(branch_line)
    ahead, behind = _parse_ahead_behind(branch_line)

    body = lines[1:] if lines[0].startswith("##") else lines
    entries = tuple(e for e in (_parse_entry(ln) for ln in body) if e is not None)

    return GitStatus(
        branch=branch,
        upstream=upstream,
        ahead=ahead,
        behind=behind,
        entries=entries,
    )


def _parse_branch_line(line: str) -> tuple[str, str | None]:
    s = line.strip()[2:].lstrip()
    s = s.split(" [", 1)[0].strip()
    if s.startswith("No commits yet on "):
        s = s.removeprefix("No commits yet on ")
    if "..." in s:
        left, right = s.split("...", 1)
        return (left.strip(), right.strip())
    return (s, None)


def _parse_ahead_behind(line: str) -> tuple[int, int]:
    match = re.search(r"\[([^\]]+)\]", line)
    if not match:
        return (0, 0)

    inside = match.group(1)
    ahead_match = re.search(r"ahead\s+(\d+)", inside)
    behind_match = re.search(r"behind\s+(\d+)", inside)
    return (
        int(ahead_match.group(1)) if ahead_match else 0,
        int(behind_match.group(1)) if behind_match else 0,
    )


def _parse_entry(line: str) -> StatusEntry | None:
    # XY path, or "?? path" for untracked files
    if len(line) < 4:
        return None
    return StatusEntry(xy=line[:2], path=line[3:])
