"""``pubterm range <constraint>``: Print the canonical range of a constraint.

Exit Codes:
    0: Range displayed.
    2: The constraint could not be parsed.
"""

from __future__ import annotations

import sys

import click

from pubterm.cli.output import console
from pubterm.core.algebra import VersionConstraint
from pubterm.exceptions import PubTermError


@click.command("range")
@click.argument("constraint")
def range_command(constraint: str) -> None:
    """Print the normalized set of versions allowed by CONSTRAINT."""
    try:
        versions = VersionConstraint(constraint).to_range()
    except PubTermError as exc:
        click.echo(f"Error: {exc}")
        sys.exit(2)
    console.print(str(versions), highlight=False)
