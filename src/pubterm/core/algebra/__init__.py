"""Term algebra for conflict-driven version resolution.

This package implements signed propositions over version sets (terms),
the ranges they are built on, and the relation queries a resolution
engine runs during unit propagation. All public names are re-exported
here::

    from pubterm.core.algebra import Term, Positive, Negative, Relation, Range

Formal Definition
-----------------
For a package whose selected version is ``s`` (``s`` may be "nothing"):

- **Positive(R)** is true iff ``s`` is a version and ``s`` is in ``R``
- **Negative(R)** is true iff ``s`` is nothing or ``s`` is not in ``R``
- **S satisfies t** iff ``∩S ⊆ t``
- **S contradicts t** iff ``∩S ∩ t = ∅``
"""

from pubterm.core.algebra.constraints import VersionConstraint, parse_term
from pubterm.core.algebra.range import Range
from pubterm.core.algebra.term import Negative, Positive, Relation, Term
from pubterm.core.algebra.version import NumberVersion, SemanticVersion, Version

__all__ = [
    "Negative",
    "NumberVersion",
    "Positive",
    "Range",
    "Relation",
    "SemanticVersion",
    "Term",
    "Version",
    "VersionConstraint",
    "parse_term",
]
