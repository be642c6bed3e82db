"""``pubterm relation <term>``: Classify a term against a set of evidence.

Each ``--given`` option adds one term to the evidence, which is assumed to
be jointly true. The term is then reported as SATISFIED (the evidence forces
it true), CONTRADICTED (the evidence forces it false) or INCONCLUSIVE.

Terms are constraints optionally prefixed by ``not``, e.g. ``">=1.0.0,<2.0.0"``
or ``"not ==1.5.0"``.

Exit Codes:
    0: Relation computed and displayed.
    2: A term could not be parsed.
"""

from __future__ import annotations

import json
import logging
import sys

import click

from pubterm.cli.output import print_relation, relation_to_json
from pubterm.core.algebra import parse_term
from pubterm.exceptions import PubTermError

logger = logging.getLogger(__name__)


@click.command("relation")
@click.argument("term")
@click.option(
    "--given", "given", multiple=True,
    help="Evidence term assumed true (repeatable).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def relation_command(term: str, given: tuple[str, ...], output_format: str) -> None:
    """Classify TERM against the evidence given with --given.

    Without any --given option there is no evidence, and only the
    always-true term is reported as satisfied.
    """
    try:
        subject = parse_term(term)
        evidence = [parse_term(text) for text in given]
    except PubTermError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)

    relation = subject.relation_with(evidence if evidence else None)
    logger.debug("%s against %d evidence terms: %s", subject, len(evidence), relation)

    if output_format == "json":
        click.echo(json.dumps(relation_to_json(subject, evidence, relation), indent=2))
    else:
        print_relation(subject, evidence, relation)
