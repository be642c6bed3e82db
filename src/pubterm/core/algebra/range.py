"""Version ranges: finite unions of half-open version intervals.

A ``Range`` is stored as a sorted tuple of segments ``(start, end)``, each
denoting the half-open interval ``[start, end)``:

- ``start is None`` means the segment starts at the lowest version.
- ``end is None`` means the segment is unbounded above.

Segments are disjoint and never adjacent (``end`` of one segment is strictly
lower than ``start`` of the next), and no bound equals the lowest version of
its type. Every set of versions therefore has exactly one representation,
so structural equality of two ranges is set equality. All constructors and
operations below preserve this canonical form.

Boolean algebra
---------------
``negate``, ``intersection`` and ``union`` make ranges a Boolean algebra with
``Range.none()`` as bottom and ``Range.any()`` as top. Union is derived from
the other two through De Morgan's law.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Tuple

from pubterm.core.algebra.version import V

Segment = Tuple[Optional[V], Optional[V]]


def _start_bound(version: V) -> V | None:
    """Canonical lower bound: the lowest version is stored as ``None``."""
    return None if version == type(version).lowest() else version


def _max_start(a: V | None, b: V | None) -> V | None:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


def _min_end(a: V | None, b: V | None) -> V | None:
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


def _end_le(a: V | None, b: V | None) -> bool:
    """``a <= b`` where ``None`` stands for +infinity."""
    if b is None:
        return True
    if a is None:
        return False
    return a <= b


def _non_empty(start: V | None, end: V | None) -> bool:
    if start is None or end is None:
        return True
    return start < end


def _is_lowest(version: V | None) -> bool:
    return version is not None and version == type(version).lowest()


def _normalize(segments: tuple[Segment, ...]) -> tuple[Segment, ...]:
    """Sort and merge arbitrary segments into the canonical form.

    Empty segments are dropped and a start at the lowest version becomes
    ``None``. Overlapping or adjacent segments are merged.
    """
    pieces: list[Segment] = []
    for start, end in segments:
        if _is_lowest(start):
            start = None
        if _is_lowest(end) or not _non_empty(start, end):
            continue
        pieces.append((start, end))
    pieces.sort(key=lambda seg: (seg[0] is not None, seg[0]))

    merged: list[Segment] = []
    for start, end in pieces:
        if merged:
            last_start, last_end = merged[-1]
            if last_end is None:
                break
            if start is None or not last_end < start:
                merged[-1] = (last_start, None if end is None else max(last_end, end))
                continue
        merged.append((start, end))
    return tuple(merged)


# ---------------------------------------------------------------------------
# Range: canonical union of intervals
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Range(Generic[V]):
    """An immutable set of versions.

    Segments passed to the constructor may be unsorted, overlapping or
    adjacent; they are normalized on construction so that equal sets of
    versions always compare equal. The class-level constructors
    (``exact``, ``higher_than``, ``between``, ...) are the usual way in.

    Attributes:
        segments: Sorted, disjoint, non-adjacent ``(start, end)`` pairs.
    """

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", _normalize(tuple(self.segments)))

    # -- constructors -------------------------------------------------------

    @classmethod
    def none(cls) -> Range[V]:
        """The empty set of versions."""
        return cls(())

    @classmethod
    def any(cls) -> Range[V]:
        """The set of all versions."""
        return cls(((None, None),))

    @classmethod
    def exact(cls, version: V) -> Range[V]:
        """Only ``version``."""
        return cls(((_start_bound(version), version.bump()),))

    @classmethod
    def higher_than(cls, version: V) -> Range[V]:
        """Versions ``>= version``."""
        return cls(((_start_bound(version), None),))

    @classmethod
    def strictly_higher_than(cls, version: V) -> Range[V]:
        """Versions ``> version``."""
        return cls(((version.bump(), None),))

    @classmethod
    def strictly_lower_than(cls, version: V) -> Range[V]:
        """Versions ``< version``."""
        if version == type(version).lowest():
            return cls.none()
        return cls(((None, version),))

    @classmethod
    def lower_than(cls, version: V) -> Range[V]:
        """Versions ``<= version``."""
        return cls(((None, version.bump()),))

    @classmethod
    def between(cls, low: V, high: V) -> Range[V]:
        """Versions in ``[low, high)``; empty when ``low >= high``."""
        if low < high:
            return cls(((_start_bound(low), high),))
        return cls.none()

    # -- set operations -----------------------------------------------------

    def negate(self) -> Range[V]:
        """Complement of this range."""
        segments: list[Segment] = []
        start: V | None = None
        for seg_start, seg_end in self.segments:
            if seg_start is not None:
                segments.append((start, seg_start))
            if seg_end is None:
                return Range(tuple(segments))
            start = seg_end
        segments.append((start, None))
        return Range(tuple(segments))

    def intersection(self, other: Range[V]) -> Range[V]:
        """Versions present in both ranges.

        Walks both sorted segment lists in lockstep, always advancing the
        segment that ends first.
        """
        segments: list[Segment] = []
        left_iter = iter(self.segments)
        right_iter = iter(other.segments)
        left = next(left_iter, None)
        right = next(right_iter, None)
        while left is not None and right is not None:
            start = _max_start(left[0], right[0])
            end = _min_end(left[1], right[1])
            if _non_empty(start, end):
                segments.append((start, end))
            if _end_le(left[1], right[1]):
                left = next(left_iter, None)
            else:
                right = next(right_iter, None)
        return Range(tuple(segments))

    def union(self, other: Range[V]) -> Range[V]:
        """Versions present in either range."""
        return self.negate().intersection(other.negate()).negate()

    # -- queries ------------------------------------------------------------

    def contains(self, version: V) -> bool:
        """Check whether ``version`` belongs to this range."""
        for start, end in self.segments:
            if end is not None and not version < end:
                continue
            return start is None or start <= version
        return False

    def __contains__(self, version: object) -> bool:
        return self.contains(version)  # type: ignore[arg-type]

    def is_empty(self) -> bool:
        return not self.segments

    def __str__(self) -> str:
        if not self.segments:
            return "∅"
        return " | ".join(_format_segment(start, end) for start, end in self.segments)


def _format_segment(start: V | None, end: V | None) -> str:
    if start is None and end is None:
        return "∗"
    if end is None:
        return f">= {start}"
    if start is None:
        return f"< {end}"
    if end == start.bump():
        return str(start)
    return f">= {start}, < {end}"
