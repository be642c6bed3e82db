"""Rich output formatting helpers for the pubterm CLI.

Provides consistent, relation-colored terminal output for relation queries,
term evaluations and canonical ranges.

Relation Color Mapping:
    SATISFIED = bold green, CONTRADICTED = bold red, INCONCLUSIVE = yellow
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pubterm.core.algebra import Relation, Term

_RELATION_STYLES: dict[Relation, str] = {
    Relation.SATISFIED: "bold green",
    Relation.CONTRADICTED: "bold red",
    Relation.INCONCLUSIVE: "yellow",
}

console = Console()


def relation_style(relation: Relation) -> str:
    """Return the Rich style string for a given relation."""
    return _RELATION_STYLES.get(relation, "white")


def term_kind(term: Term[Any]) -> str:
    return "positive" if term.is_positive() else "negative"


def print_relation(
    term: Term[Any],
    evidence: list[Term[Any]],
    relation: Relation,
) -> None:
    """Print the evidence table and the relation verdict for one term.

    Args:
        term: The term being classified.
        evidence: Terms assumed jointly true (may be empty).
        relation: Result of ``term.relation_with(evidence)``.
    """
    if evidence:
        table = Table(title="Evidence", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("Term", style="bold")
        for index, given in enumerate(evidence, start=1):
            table.add_row(str(index), term_kind(given), str(given))
        console.print(table)
    else:
        console.print("[dim]No evidence given.[/dim]")

    header = Text.assemble(
        ("Term: ", "bold"), (str(term), ""),
        ("  Relation: ", "bold"), (relation.name, relation_style(relation)),
    )
    console.print(Panel(header, title="Relation"))


def print_evaluation(term: Term[Any], version: str | None, accepted: bool) -> None:
    """Print whether a term accepts a version (or the absence of one)."""
    verdict = Text("ACCEPTED", style="bold green") if accepted else Text(
        "REJECTED", style="bold red"
    )
    selection = version if version is not None else "no version selected"
    header = Text.assemble(
        ("Term: ", "bold"), (str(term), ""),
        ("  Selection: ", "bold"), (selection, "dim"),
        ("  ", ""), verdict,
    )
    console.print(Panel(header, title="Evaluation"))


def relation_to_json(
    term: Term[Any],
    evidence: list[Term[Any]],
    relation: Relation,
) -> dict[str, Any]:
    """Convert a relation query to a JSON-serializable dict."""
    return {
        "term": str(term),
        "kind": term_kind(term),
        "evidence": [
            {"term": str(given), "kind": term_kind(given)} for given in evidence
        ],
        "relation": relation.name,
    }
