"""Terms: signed propositions over a set of versions.

A term is the fundamental unit of operation of conflict-driven version
resolution. It states something about the version selected for a single
package:

- ``Positive(r)``: a version is selected and it lies in ``r``.
- ``Negative(r)``: no version is selected, or the selected one lies outside
  ``r``.

Every term has a truth value for every selection state, including "nothing
selected". Two terms are the recurring neutral elements of this algebra:

- ``Negative(Range.none())`` is always true (``Term.any()``).
- ``Positive(Range.none())`` is always false (``Term.empty()``).

Relations
---------
Given a set of terms S assumed jointly true and another term t:

- S *satisfies* t if t must be true whenever every term in S is true.
- S *contradicts* t if t must be false whenever every term in S is true.
- Otherwise S is *inconclusive* for t.

All operations are pure and total; terms are immutable, hashable values.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable

from pubterm.core.algebra.range import Range
from pubterm.core.algebra.version import V


# ---------------------------------------------------------------------------
# Relation: outcome of a relation query
# ---------------------------------------------------------------------------


class Relation(Enum):
    """Relation between a set of terms S and another term t."""

    SATISFIED = "satisfied"
    """t must be true whenever every term in S is true."""

    CONTRADICTED = "contradicted"
    """t must be false whenever every term in S is true."""

    INCONCLUSIVE = "inconclusive"
    """Neither of the above."""


# ---------------------------------------------------------------------------
# Term: Positive / Negative
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Term(Generic[V]):
    """Base class of ``Positive`` and ``Negative``; never built directly.

    Attributes:
        range: The set of versions the proposition talks about.
    """

    range: Range[V]

    def __post_init__(self) -> None:
        if type(self) is Term:
            raise TypeError("Term is abstract; build a Positive or Negative term")

    @staticmethod
    def any() -> Term[V]:
        """The term that is always true."""
        return Negative(Range.none())

    @staticmethod
    def empty() -> Term[V]:
        """The term that is never true."""
        return Positive(Range.none())

    @staticmethod
    def exact(version: V) -> Term[V]:
        """A positive term matching exactly one version."""
        return Positive(Range.exact(version))

    # -- base methods -------------------------------------------------------

    def is_positive(self) -> bool:
        return isinstance(self, Positive)

    def is_negative(self) -> bool:
        return isinstance(self, Negative)

    def negate(self) -> Term[V]:
        """Negate a term.

        Evaluation of a negated term always returns the opposite of the
        evaluation of the original one.
        """
        if isinstance(self, Positive):
            return Negative(self.range)
        return Positive(self.range)

    def accept_version(self, version: V) -> bool:
        """Evaluate the term for a selected version."""
        if isinstance(self, Positive):
            return self.range.contains(version)
        return not self.range.contains(version)

    def accept_optional_version(self, version: V | None) -> bool:
        """Evaluate the term for a selected version or for no selection."""
        if version is None:
            return isinstance(self, Negative)
        return self.accept_version(version)

    # -- set operations -----------------------------------------------------

    def intersection(self, other: Term[V]) -> Term[V]:
        """Compute the intersection of two terms.

        If at least one term is positive, the intersection is also positive.
        """
        match (self, other):
            case (Positive(r1), Positive(r2)):
                return Positive(r1.intersection(r2))
            case (Positive(r1), Negative(r2)):
                return Positive(r1.intersection(r2.negate()))
            case (Negative(r1), Positive(r2)):
                return Positive(r1.negate().intersection(r2))
            case _:
                # Both negative.
                return Negative(self.range.union(other.range))

    def union(self, other: Term[V]) -> Term[V]:
        """Compute the union of two terms.

        If at least one term is negative, the union is also negative.
        """
        return self.negate().intersection(other.negate()).negate()

    @staticmethod
    def intersect_all(terms: Iterable[Term[V]]) -> Term[V] | None:
        """Intersect every term of ``terms``; None when there are none."""
        iterator = iter(terms)
        first = next(iterator, None)
        if first is None:
            return None
        return functools.reduce(Term.intersection, iterator, first)

    def subset_of(self, other: Term[V]) -> bool:
        """Indicate if this term is a subset of another term.

        Just like for sets, t1 is a subset of t2 if and only if
        t1 ∩ t2 = t1.
        """
        return self == self.intersection(other)

    # -- relations ----------------------------------------------------------

    def satisfied_by(self, terms: Iterable[Term[V]]) -> bool:
        """Check if a set of terms satisfies this term."""
        intersection = Term.intersect_all(terms)
        if intersection is None:
            return self == Term.any()
        return intersection.subset_of(self)

    def contradicted_by(self, terms: Iterable[Term[V]]) -> bool:
        """Check if a set of terms contradicts this term."""
        intersection = Term.intersect_all(terms)
        if intersection is None:
            return self == Term.empty()
        return intersection.intersection(self) == Term.empty()

    def relation_with(self, other_terms: Iterable[Term[V]] | None) -> Relation:
        """Check if a set of terms satisfies or contradicts this term.

        ``None`` and an empty iterable both stand for "no evidence", which
        only satisfies the always-true term.
        """
        others = Term.intersect_all(other_terms) if other_terms is not None else None
        if others is None:
            others = Term.any()
        full_intersection = self.intersection(others)
        if full_intersection == others:
            return Relation.SATISFIED
        if full_intersection == Term.empty():
            return Relation.CONTRADICTED
        return Relation.INCONCLUSIVE

    def __str__(self) -> str:
        if isinstance(self, Positive):
            return str(self.range)
        return f"Not ( {self.range} )"


@dataclass(frozen=True)
class Positive(Term[V]):
    """True exactly when a selected version lies in ``range``.

    For example ``Positive(Range.between(1.0.0, 2.0.0))`` is true if a
    version is selected and lies in ``[1.0.0, 2.0.0)``.
    """


@dataclass(frozen=True)
class Negative(Term[V]):
    """True when no version is selected or the selected one is outside ``range``.

    For example ``Negative(Range.strictly_lower_than(3.0.0))`` is true if the
    selected version is ``>= 3.0.0`` or if nothing is selected at all.
    """
