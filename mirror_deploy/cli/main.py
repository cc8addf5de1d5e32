# mirror_deploy/cli/main.py
"""Main CLI entry point for mirror-deploy"""

import logging
import os
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..backends import CommandBackend
from ..constants import APP_NAME, ENV_LOG_LEVEL, LOG_FORMAT

# Import all commands
from .commands import (
    check,
    mirror,
    revision,
    release,
    deploy,
    config,
)

console = Console(stderr=True)


def resolve_log_level(name: Optional[str]) -> int:
    """Map a level name to its number, WARNING for unknown names"""
    level = logging.getLevelName((name or "WARNING").strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = resolve_log_level(os.environ.get(ENV_LOG_LEVEL))

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object

    ``backend`` is None for the default local subprocess backend.
    """

    def __init__(self, backend: Optional[CommandBackend] = None):
        self.backend = backend
        self.config_path: Optional[str] = None
        self.verbose: bool = False
        self.debug: bool = False


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False),
              help='Configuration file (YAML)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.pass_context
def cli(ctx, config_path, verbose, debug, quiet):
    """Mirror Deploy - release a git reference from a local mirror

    Keeps a mirror of the remote repository, resolves a branch, tag or
    commit to an exact revision and copies it into a release directory,
    dereferencing symbolic links and initializing submodules.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.ensure_object(Context)
    ctx.obj.config_path = config_path
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(check.check)
cli.add_command(mirror.mirror)
cli.add_command(revision.revision)
cli.add_command(release.release)
cli.add_command(deploy.deploy)
cli.add_command(config.config)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
