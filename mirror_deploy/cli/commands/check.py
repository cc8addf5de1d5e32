"""Check command implementation"""

import click

from ..decorators import scm_options, with_strategy
from ..utils.output import console
from ...constants import MSG_REMOTE_REACHABLE
from ...utils.url_utils import mask_credentials


@click.command()
@scm_options
@with_strategy
def check(strategy):
    """Check that the remote repository is reachable

    Lists the remote HEAD without cloning anything.
    """
    strategy.check_reachable()
    console.print(MSG_REMOTE_REACHABLE.format(url=mask_credentials(strategy.config.url_with_credentials)))
