"""Release command implementation"""

import click

from ..decorators import scm_options, with_strategy
from ..utils.output import console
from ...constants import MSG_RELEASE_CREATED


@click.command()
@scm_options
@with_strategy
def release(strategy):
    """Copy the mirror into the release directory

    With the default rsync strategy symbolic links are copied as real
    files and .git* entries are excluded. Existing files in the release
    directory are kept.
    """
    strategy.release()
    console.print(MSG_RELEASE_CREATED.format(path=strategy.config.release_path))
