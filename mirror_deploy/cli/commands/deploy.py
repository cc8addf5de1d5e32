"""Deploy command implementation"""

import json

import click

from ..decorators import scm_options, with_strategy
from ..utils.output import console, format_release_result


@click.command()
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@scm_options
@with_strategy
def deploy(strategy, as_json):
    """Mirror, resolve and release in one run

    Examples:

        # Release a branch
        mirror-deploy deploy --repo-url https://example.com/app.git \\
            --repo-path /var/www/app/repo --release-path /var/www/app/releases/1 \\
            --branch main

        # Release a tag, only the app/ subtree
        mirror-deploy -c deploy.yaml deploy --branch v1.2.0 --repo-tree app
    """
    if not as_json:
        console.print(f"[cyan]Deploying {strategy.config.branch} to {strategy.config.release_path}...[/cyan]")

    result = strategy.deploy()

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        format_release_result(result)
