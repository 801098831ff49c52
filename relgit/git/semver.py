from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from functools import total_ordering

from relgit.constants import PRERELEASE_ROLLS_BACK_PATCH, TAG_PREFIX
from relgit.core.result import Err, Ok, Result
from relgit.git.errors import GitError
from relgit.git.urls import release_branch_name

_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_TAG_RE = re.compile(
    rf"{TAG_PREFIX}(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)


def _identifier_key(ident: str) -> tuple[int, int, str]:
    # Numeric identifiers sort numerically and below alphanumeric ones.
    if ident.isdigit():
        return (0, int(ident), "")
    return (1, 0, ident)


@total_ordering
@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    pre: tuple[str, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    def __str__(self) -> str:
        s = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            s += "-" + ".".join(self.pre)
        if self.build:
            s += "+" + ".".join(self.build)
        return s

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() < other._precedence()

    def _precedence(self) -> tuple[int, int, int, tuple[int, tuple[tuple[int, int, str], ...]]]:
        if not self.pre:
            return (self.major, self.minor, self.patch, (1, ()))
        return (
            self.major,
            self.minor,
            self.patch,
            (0, tuple(_identifier_key(p) for p in self.pre)),
        )

    def to_tag(self) -> str:
        return f"{TAG_PREFIX}{self}"

    @property
    def is_prerelease(self) -> bool:
        return len(self.pre) > 0

    @property
    def is_non_patch_final(self) -> bool:
        """True for x.y.0 releases without a pre-release marker."""
        return self.patch == 0 and not self.pre

    def release_branch(self) -> str:
        return release_branch_name(self.major, self.minor)

    def attributed_release(self) -> SemVer:
        """The patch release this tag belongs to.

        With ``PRERELEASE_ROLLS_BACK_PATCH`` a pre-release of patch N (for
        example v1.2.4-beta.1) is in progress on top of N-1, so it is
        attributed to v1.2.3. Patch 0 pre-releases and finals are returned
        unchanged.
        """
        if PRERELEASE_ROLLS_BACK_PATCH and self.pre and self.patch > 0:
            return replace(self, patch=self.patch - 1, pre=(), build=())
        return self

    def previous_patch(self) -> SemVer:
        if self.patch == 0:
            raise ValueError(f"{self.to_tag()} has no previous patch release")
        return SemVer(self.major, self.minor, self.patch - 1)


def parse_tag(tag: str) -> SemVer | None:
    """Parse ``v<major>.<minor>.<patch>[-<pre>][+<build>]``; None if it does not match."""
    m = _TAG_RE.fullmatch(tag)
    if m is None:
        return None
    pre = tuple(m.group(4).split(".")) if m.group(4) else ()
    build = tuple(m.group(5).split(".")) if m.group(5) else ()
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)), pre, build)


def parse_version(tag: str) -> Result[SemVer, GitError]:
    version = parse_tag(tag)
    if version is None:
        return Err(
            GitError(
                kind="invalid_input",
                message=f"tag {tag!r} is not a semantic version",
            )
        )
    return Ok(version)
