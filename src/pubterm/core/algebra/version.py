"""Version types usable inside ranges and terms.

A version only has to be totally ordered and hashable for the term algebra.
Ranges additionally need to know the least version of the type and the
immediate successor of any version, so that an exact version ``v`` can be
stored as the half-open interval ``[v, v.bump())``.

Two concrete version types are provided:

- ``NumberVersion``: a single non-negative integer, handy for tests.
- ``SemanticVersion``: ``MAJOR.MINOR.PATCH`` following SemVer precedence.

References
----------
.. [SemVer] Preston-Werner, T. (2013). "Semantic Versioning 2.0.0."
   https://semver.org/
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pubterm.exceptions import VersionParseError

V = TypeVar("V", bound="Version")


class Version(Protocol):
    """Structural contract for versions stored in a ``Range``.

    Terms only compare versions; hashing, ``lowest()`` and ``bump()`` are
    what ``Range`` needs for hashable values, canonical lower bounds and
    exact or inclusive intervals.
    """

    @classmethod
    def lowest(cls: type[V]) -> V:
        """Return the least version of this type."""
        ...

    def bump(self: V) -> V:
        """Return the smallest version strictly greater than this one."""
        ...

    def __lt__(self, other: object) -> bool: ...

    def __le__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...


# ---------------------------------------------------------------------------
# NumberVersion: a plain counter
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class NumberVersion:
    """A version made of a single non-negative integer."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise VersionParseError(f"Version number must be >= 0: {self.value}")

    @classmethod
    def lowest(cls) -> NumberVersion:
        return cls(0)

    def bump(self) -> NumberVersion:
        return NumberVersion(self.value + 1)

    def __str__(self) -> str:
        return str(self.value)


# ---------------------------------------------------------------------------
# SemanticVersion: MAJOR.MINOR.PATCH
# ---------------------------------------------------------------------------

_SEMVER_RE = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z\-.]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z\-.]+))?$"
)


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A semantic version ordered by ``(major, minor, patch)``.

    Pre-release and build metadata are accepted by ``parse()`` but stripped,
    so ``1.0.0-alpha`` and ``1.0.0+build.5`` both map to ``1.0.0``. Field
    order drives the generated comparison methods.

    Attributes:
        major: Incremented for incompatible API changes.
        minor: Incremented for backwards compatible features.
        patch: Incremented for backwards compatible fixes.
    """

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Parse a semantic version string such as ``"1.2.3"``.

        Args:
            text: Version string, surrounding whitespace allowed.

        Returns:
            The parsed version.

        Raises:
            VersionParseError: If the string is not a valid semantic version.
        """
        m = _SEMVER_RE.match(text.strip())
        if not m:
            raise VersionParseError(f"Invalid semantic version: {text!r}")
        return cls(int(m.group("major")), int(m.group("minor")), int(m.group("patch")))

    @classmethod
    def lowest(cls) -> SemanticVersion:
        return cls.zero()

    @classmethod
    def zero(cls) -> SemanticVersion:
        return cls(0, 0, 0)

    @classmethod
    def one(cls) -> SemanticVersion:
        return cls(1, 0, 0)

    def bump(self) -> SemanticVersion:
        """Successor of this version, which is the next patch release."""
        return self.bump_patch()

    def bump_patch(self) -> SemanticVersion:
        return SemanticVersion(self.major, self.minor, self.patch + 1)

    def bump_minor(self) -> SemanticVersion:
        return SemanticVersion(self.major, self.minor + 1, 0)

    def bump_major(self) -> SemanticVersion:
        return SemanticVersion(self.major + 1, 0, 0)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
