"""Config command implementation"""

import click

from ..decorators import scm_options, load_config
from ..utils.output import format_config, print_error
from ...api.exceptions import MirrorDeployError


@click.command()
@scm_options
@click.pass_context
def config(ctx, **kwargs):
    """Show the effective configuration

    Values come from the configuration file, MIRROR_DEPLOY_* environment
    variables and command line options, in that order of precedence.
    """
    try:
        effective = load_config(ctx, kwargs)
    except MirrorDeployError as e:
        print_error(e)
        ctx.exit(1)

    format_config(effective)

    missing = effective.missing_fields(require_release=True)
    if missing:
        click.echo(f"Missing: {', '.join(missing)}")
