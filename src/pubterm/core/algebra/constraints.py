"""Version constraint strings turned into ranges and terms.

Constraint semantics follow npm / PEP 440 conventions with support for exact
match (``==``), range (``>=``, ``<=``, ``>``, ``<``), not-equal (``!=``),
caret (``^``), tilde (``~``), wildcard (``*``), and compound comma-separated
constraints. A compound constraint is the conjunction of its atoms, i.e. the
intersection of their ranges.

Terms are written as a constraint optionally prefixed by ``not``::

    >=1.0.0,<2.0.0        Positive([1.0.0, 2.0.0))
    not ==1.5.0           Negative({1.5.0})
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pubterm.core.algebra.range import Range
from pubterm.core.algebra.term import Negative, Positive, Term
from pubterm.core.algebra.version import SemanticVersion
from pubterm.exceptions import ConstraintError

logger = logging.getLogger(__name__)


# Regex to tokenize a single constraint atom like ">=1.2.3" or "==0.1.0"
_CONSTRAINT_ATOM_RE = re.compile(
    r"^\s*(?P<op>==|!=|>=|<=|>|<|\^|~)\s*"
    r"(?P<ver>(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z\-.]+)?(?:\+[0-9A-Za-z\-.]+)?)\s*$"
)

_NEGATION_RE = re.compile(r"^\s*not\s+(?P<rest>.+)$", re.IGNORECASE)


def _atom_range(atom: str) -> Range[SemanticVersion]:
    """Translate a single constraint atom into a range."""
    m = _CONSTRAINT_ATOM_RE.match(atom)
    if not m:
        raise ConstraintError(f"Invalid constraint atom: {atom!r}")

    op = m.group("op")
    target = SemanticVersion.parse(m.group("ver"))

    if op == "==":
        return Range.exact(target)
    elif op == "!=":
        return Range.exact(target).negate()
    elif op == ">=":
        return Range.higher_than(target)
    elif op == "<=":
        return Range.lower_than(target)
    elif op == ">":
        return Range.strictly_higher_than(target)
    elif op == "<":
        return Range.strictly_lower_than(target)
    elif op == "^":
        # Caret: same major, >= target. If major is 0, same major.minor.
        if target.major == 0:
            return Range.between(target, target.bump_minor())
        return Range.between(target, target.bump_major())
    elif op == "~":
        # Tilde: same major.minor, patch >= target patch.
        return Range.between(target, target.bump_minor())
    else:  # pragma: no cover
        raise ConstraintError(f"Unknown operator: {op!r}")


@dataclass(frozen=True)
class VersionConstraint:
    """A version constraint specification, analogous to npm/pip syntax.

    Supports:
    - Exact match: ``==1.0.0``
    - Not-equal: ``!=1.0.0``
    - Minimum (inclusive): ``>=1.0.0``
    - Maximum (inclusive): ``<=2.0.0``
    - Minimum (exclusive): ``>1.0.0``
    - Maximum (exclusive): ``<2.0.0``
    - Caret: ``^1.2.3`` (``>=1.2.3,<2.0.0``; ``^0.2.3`` is ``>=0.2.3,<0.3.0``)
    - Tilde: ``~1.2.0`` (``>=1.2.0,<1.3.0``)
    - Wildcard (any version): ``*``
    - Compound (comma-separated, all must hold): ``>=1.0.0,<2.0.0``

    Attributes:
        raw: The raw constraint string as authored (e.g., ">=1.0.0,<2.0.0").
    """

    raw: str

    def to_range(self) -> Range[SemanticVersion]:
        """Build the set of versions allowed by this constraint.

        Raises:
            ConstraintError: If an atom is malformed or the constraint is empty.
        """
        stripped = self.raw.strip()
        if stripped == "*":
            return Range.any()

        atoms = [a.strip() for a in stripped.split(",") if a.strip()]
        if not atoms:
            raise ConstraintError(f"Empty constraint: {self.raw!r}")

        result: Range[SemanticVersion] = Range.any()
        for atom in atoms:
            result = result.intersection(_atom_range(atom))
        logger.debug("Constraint %r parsed to %s", self.raw, result)
        return result

    def to_term(self) -> Term[SemanticVersion]:
        """The positive term "a version satisfying this constraint is selected"."""
        return Positive(self.to_range())

    def satisfies(self, version: str) -> bool:
        """Check whether a version string satisfies this constraint.

        Args:
            version: A semantic version string (e.g., "1.2.3").

        Returns:
            True if the version satisfies every atom in this constraint.

        Raises:
            VersionParseError: If *version* is not a valid semantic version.
            ConstraintError: If the constraint itself is malformed.
        """
        return self.to_range().contains(SemanticVersion.parse(version))

    def __repr__(self) -> str:
        return f"VersionConstraint({self.raw!r})"


def parse_term(text: str) -> Term[SemanticVersion]:
    """Parse a term written as ``[not] <constraint>``.

    Raises:
        ConstraintError: If the constraint part is malformed.
    """
    m = _NEGATION_RE.match(text)
    if m:
        return Negative(VersionConstraint(m.group("rest")).to_range())
    return VersionConstraint(text).to_term()
