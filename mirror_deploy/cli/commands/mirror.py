"""Mirror command implementation"""

import click

from ..decorators import scm_options, with_strategy
from ..utils.output import console
from ...constants import MSG_MIRROR_CLONED, MSG_MIRROR_UPDATED
from ...models import MirrorAction


@click.command()
@scm_options
@with_strategy
def mirror(strategy):
    """Clone the mirror, or update it when it already exists

    An update repoints origin, fetches with prune, checks out the
    reference detached and updates submodules.
    """
    action = strategy.ensure_mirror()

    if action == MirrorAction.CLONED:
        console.print(MSG_MIRROR_CLONED.format(path=strategy.config.repo_path))
    else:
        console.print(MSG_MIRROR_UPDATED.format(
            path=strategy.config.repo_path,
            tracking=strategy.classification.tracking_name
        ))
