"""pubterm CLI: Inspect version terms and their relations.

Entry point for the ``pubterm`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    relation: Classify a term against evidence terms.
    check: Evaluate a term for a version or for no selection.
    range: Print the canonical range of a constraint.

Usage::

    pubterm relation "^1.2.0" --given ">=1.3.0,<1.4.0"
    pubterm relation "not ==2.0.0" --given "<2.0.0" --format json
    pubterm check ">=1.0.0,!=1.5.0" 1.5.0
    pubterm check "not *"
    pubterm range "~1.2.0,!=1.2.3"
"""

from __future__ import annotations

import click

from pubterm import __version__
from pubterm.cli.check import check_command
from pubterm.cli.range_cmd import range_command
from pubterm.cli.relation import relation_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """pubterm: Term algebra for version resolution.

    Build positive and negative version terms from constraint strings and
    check how they relate: satisfied, contradicted or inconclusive.
    """


# Register all subcommands
cli.add_command(relation_command)
cli.add_command(check_command)
cli.add_command(range_command)
