"""``pubterm check <term> [version]``: Evaluate a term for one selection.

Evaluates the term for the given version, or for "no version selected" when
the version argument is omitted.

Exit Codes:
    0: The term accepts the selection.
    1: The term rejects the selection.
    2: The term or the version could not be parsed.
"""

from __future__ import annotations

import json
import sys

import click

from pubterm.cli.output import print_evaluation, term_kind
from pubterm.core.algebra import SemanticVersion, parse_term
from pubterm.exceptions import PubTermError


@click.command("check")
@click.argument("term")
@click.argument("version", required=False)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def check_command(term: str, version: str | None, output_format: str) -> None:
    """Check whether TERM accepts VERSION.

    Omit VERSION to evaluate TERM for the state where no version of the
    package is selected. Exit code 0 if accepted, 1 if rejected.
    """
    try:
        subject = parse_term(term)
        selected = SemanticVersion.parse(version) if version is not None else None
    except PubTermError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)

    accepted = subject.accept_optional_version(selected)

    if output_format == "json":
        click.echo(json.dumps({
            "term": str(subject),
            "kind": term_kind(subject),
            "version": str(selected) if selected is not None else None,
            "accepted": accepted,
        }, indent=2))
    else:
        print_evaluation(subject, str(selected) if selected is not None else None, accepted)

    sys.exit(0 if accepted else 1)
