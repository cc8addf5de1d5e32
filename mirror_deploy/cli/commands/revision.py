"""Revision command implementation"""

import json

import click

from ..decorators import scm_options, with_strategy


@click.command()
@click.option('--json', 'as_json', is_flag=True, help='Print the resolved reference as JSON')
@scm_options
@with_strategy
def revision(strategy, as_json):
    """Print the commit the configured reference resolves to"""
    sha = strategy.resolve_revision()

    if as_json:
        click.echo(json.dumps(strategy.resolved.to_dict(), indent=2))
    else:
        click.echo(sha)
