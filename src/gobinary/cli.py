"""gobinary command line entry point.

Usage:
    gobinary install
    gobinary uninstall

Meant to be wired into package.json scripts::

    "scripts": {
        "postinstall": "gobinary install",
        "preuninstall": "gobinary uninstall"
    }
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence

import click

from gobinary import __version__
from gobinary.domain.settings import InstallerEnvironment
from gobinary.factories import create_http_client, create_installer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.group()
@click.version_option(version=__version__, prog_name="gobinary")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Install a Go binary published as a GitHub release asset."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["environment"] = InstallerEnvironment.from_process()


@cli.command()
@click.pass_context
def install(ctx: click.Context) -> None:
    """Download the release asset and place the binary in npm's bin directory."""
    environment: InstallerEnvironment = ctx.obj["environment"]

    with create_http_client() as client:
        result = create_installer(environment, client).install()

    if not result.success:
        raise click.ClickException(result.error or "Installation failed")

    logger.info("Installed binary at %s", result.installed_path)


@cli.command()
@click.pass_context
def uninstall(ctx: click.Context) -> None:
    """Remove the binary from npm's bin directory."""
    environment: InstallerEnvironment = ctx.obj["environment"]

    result = create_installer(environment).uninstall()

    if not result.success:
        raise click.ClickException(result.error or "Uninstallation failed")


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI and exit.

    Usage errors and command failures both exit with status 1 after a
    message on standard error.
    """
    try:
        cli.main(
            args=list(argv) if argv is not None else None,
            prog_name="gobinary",
            standalone_mode=False,
        )
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
