"""Strategy construction decorators for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import print_error
from ...api.exceptions import MirrorDeployError
from ...api.strategy import GitMirrorStrategy
from ...exporters import ExporterFactory
from ...services import ConfigService

SCM_OPTION_KEYS = [
    "repo_url",
    "branch",
    "repo_path",
    "release_path",
    "repo_tree",
    "export_strategy",
    "git_http_username",
    "git_http_password",
]


def scm_options(func: Callable) -> Callable:
    """Add the configuration override options shared by all commands"""
    options = [
        click.option('--repo-url', help='Remote repository URL'),
        click.option('--branch', '-b', help='Branch, tag or commit to release'),
        click.option('--repo-path', help='Local mirror path'),
        click.option('--release-path', help='Release directory'),
        click.option('--repo-tree', help='Subtree of the repository to release'),
        click.option('--strategy', 'export_strategy',
                     type=click.Choice(ExporterFactory.supported()),
                     help='Export strategy'),
        click.option('--http-username', 'git_http_username', help='HTTP username for the remote'),
        click.option('--http-password', 'git_http_password', help='HTTP password for the remote'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def load_config(ctx: click.Context, kwargs: dict):
    """Pop override options from kwargs and load the effective config"""
    overrides = {key: kwargs.pop(key, None) for key in SCM_OPTION_KEYS}
    return ConfigService(ctx.obj.config_path).load(overrides)


def with_strategy(func: Callable) -> Callable:
    """Decorator that builds a GitMirrorStrategy for the command

    The strategy is passed as the first positional argument. Any
    MirrorDeployError raised while building or running the command is
    printed and turned into exit status 1.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()

        try:
            config = load_config(ctx, kwargs)
            strategy = GitMirrorStrategy(config, backend=ctx.obj.backend)
            return func(strategy, *args, **kwargs)
        except MirrorDeployError as e:
            print_error(e)
            if ctx.obj.debug:
                raise
            ctx.exit(1)

    return wrapper
