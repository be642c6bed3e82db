"""Property-based tests for the term algebra.

Verifies that terms form a Boolean algebra under negate / intersection /
union, that every operation agrees with a truth table computed directly from
the definition of Positive and Negative, and that the relation queries agree
with each other and with brute-force entailment.

Versions are drawn from ``NumberVersion(0..20)``; every range bound stays
below ``SELECTIONS``' upper end, so evaluating a term on ``SELECTIONS``
decides its meaning completely.
"""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from pubterm.core.algebra import Negative, NumberVersion, Positive, Range, Relation, Term


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

SELECTIONS: list[NumberVersion | None] = [None] + [NumberVersion(i) for i in range(30)]

bounds = st.integers(min_value=0, max_value=20)


@st.composite
def ranges(draw: st.DrawFn) -> Range[NumberVersion]:
    """Arbitrary finite union of intervals, optionally with an unbounded tail."""
    result: Range[NumberVersion] = Range.none()
    for low, high in draw(st.lists(st.tuples(bounds, bounds), max_size=4)):
        result = result.union(Range.between(NumberVersion(low), NumberVersion(high)))
    if draw(st.booleans()):
        result = result.union(Range.higher_than(NumberVersion(draw(bounds))))
    return result


@st.composite
def terms(draw: st.DrawFn) -> Term[NumberVersion]:
    r = draw(ranges())
    return Positive(r) if draw(st.booleans()) else Negative(r)


evidence = st.lists(terms(), min_size=1, max_size=4)


def truth_table(term: Term[NumberVersion]) -> list[bool]:
    """Evaluate a term straight from its definition, without accept_*()."""
    table = []
    for selection in SELECTIONS:
        inside = selection is not None and term.range.contains(selection)
        if isinstance(term, Positive):
            table.append(inside)
        else:
            table.append(not inside)
    return table


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


class TestEvaluation:
    """accept_version / accept_optional_version match the definition."""

    @given(t=terms())
    def test_accept_optional_version_matches_definition(self, t: Term[NumberVersion]) -> None:
        assert [t.accept_optional_version(s) for s in SELECTIONS] == truth_table(t)

    @given(t=terms())
    def test_accept_version_matches_optional(self, t: Term[NumberVersion]) -> None:
        for s in SELECTIONS[1:]:
            assert t.accept_version(s) == t.accept_optional_version(s)

    @given(t=terms())
    def test_negation_flips_truth_table(self, t: Term[NumberVersion]) -> None:
        assert truth_table(t.negate()) == [not b for b in truth_table(t)]


# ---------------------------------------------------------------------------
# Boolean algebra laws
# ---------------------------------------------------------------------------


class TestNegationLaws:
    """Laws for term negation."""

    @given(t=terms())
    def test_double_negation(self, t: Term[NumberVersion]) -> None:
        """negate(negate(t)) == t."""
        assert t.negate().negate() == t


class TestIntersectionLaws:
    """Algebraic laws for term intersection."""

    @given(a=terms(), b=terms())
    def test_truth_table(self, a: Term[NumberVersion], b: Term[NumberVersion]) -> None:
        """(a ∩ b)(s) == a(s) and b(s) for every selection s."""
        expected = [x and y for x, y in zip(truth_table(a), truth_table(b))]
        assert truth_table(a.intersection(b)) == expected

    @given(a=terms(), b=terms())
    def test_commutativity(self, a: Term[NumberVersion], b: Term[NumberVersion]) -> None:
        assert a.intersection(b) == b.intersection(a)

    @given(a=terms(), b=terms(), c=terms())
    def test_associativity(
        self, a: Term[NumberVersion], b: Term[NumberVersion], c: Term[NumberVersion]
    ) -> None:
        lhs = a.intersection(b).intersection(c)
        rhs = a.intersection(b.intersection(c))
        assert lhs == rhs

    @given(a=terms())
    def test_idempotency(self, a: Term[NumberVersion]) -> None:
        assert a.intersection(a) == a

    @given(a=terms())
    def test_any_identity(self, a: Term[NumberVersion]) -> None:
        assert a.intersection(Term.any()) == a

    @given(a=terms())
    def test_empty_absorbing(self, a: Term[NumberVersion]) -> None:
        assert a.intersection(Term.empty()) == Term.empty()


class TestUnionLaws:
    """Algebraic laws for term union."""

    @given(a=terms(), b=terms())
    def test_truth_table(self, a: Term[NumberVersion], b: Term[NumberVersion]) -> None:
        """(a ∪ b)(s) == a(s) or b(s) for every selection s."""
        expected = [x or y for x, y in zip(truth_table(a), truth_table(b))]
        assert truth_table(a.union(b)) == expected

    @given(a=terms(), b=terms())
    def test_de_morgan(self, a: Term[NumberVersion], b: Term[NumberVersion]) -> None:
        assert a.union(b) == a.negate().intersection(b.negate()).negate()

    @given(a=terms(), b=terms())
    def test_commutativity(self, a: Term[NumberVersion], b: Term[NumberVersion]) -> None:
        assert a.union(b) == b.union(a)

    @given(a=terms(), b=terms(), c=terms())
    def test_associativity(
        self, a: Term[NumberVersion], b: Term[NumberVersion], c: Term[NumberVersion]
    ) -> None:
        assert a.union(b).union(c) == a.union(b.union(c))

    @given(a=terms())
    def test_idempotency(self, a: Term[NumberVersion]) -> None:
        assert a.union(a) == a


class TestSubsetLaws:
    """Laws for the subset relation."""

    @given(a=terms())
    def test_reflexivity(self, a: Term[NumberVersion]) -> None:
        assert a.subset_of(a)

    @given(a=terms(), b=terms())
    def test_matches_implication(self, a: Term[NumberVersion], b: Term[NumberVersion]) -> None:
        """a ⊆ b iff a(s) implies b(s) for every selection s."""
        implied = all(not x or y for x, y in zip(truth_table(a), truth_table(b)))
        assert a.subset_of(b) == implied


# ---------------------------------------------------------------------------
# Relations
# ---------------------------------------------------------------------------


class TestRelationLaws:
    """relation_with, satisfied_by and contradicted_by agree with each other."""

    @given(t=terms(), ev=evidence)
    def test_satisfied_matches_brute_force(
        self, t: Term[NumberVersion], ev: list[Term[NumberVersion]]
    ) -> None:
        tables = [truth_table(e) for e in ev]
        rows = [all(col) for col in zip(*tables)]
        entailed = all(not row or value for row, value in zip(rows, truth_table(t)))
        assert t.satisfied_by(ev) == entailed

    @given(t=terms(), ev=evidence)
    def test_contradicted_matches_brute_force(
        self, t: Term[NumberVersion], ev: list[Term[NumberVersion]]
    ) -> None:
        tables = [truth_table(e) for e in ev] + [truth_table(t)]
        assert t.contradicted_by(ev) == (not any(all(col) for col in zip(*tables)))

    @given(t=terms(), ev=evidence)
    def test_relation_consistent_with_predicates(
        self, t: Term[NumberVersion], ev: list[Term[NumberVersion]]
    ) -> None:
        """SATISFIED iff satisfied_by; otherwise CONTRADICTED iff contradicted_by.

        Unsatisfiable evidence both satisfies and contradicts every term;
        relation_with reports it as SATISFIED.
        """
        relation = t.relation_with(ev)
        satisfied = t.satisfied_by(ev)
        contradicted = t.contradicted_by(ev)
        if satisfied:
            assert relation is Relation.SATISFIED
        elif contradicted:
            assert relation is Relation.CONTRADICTED
        else:
            assert relation is Relation.INCONCLUSIVE

    @given(t=terms())
    def test_empty_evidence_sentinels(self, t: Term[NumberVersion]) -> None:
        assert t.satisfied_by([]) == (t == Negative(Range.none()))
        assert t.contradicted_by([]) == (t == Positive(Range.none()))

    @given(t=terms())
    def test_no_evidence_equals_empty_evidence(self, t: Term[NumberVersion]) -> None:
        assert t.relation_with(None) is t.relation_with([])
