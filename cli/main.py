#!/usr/bin/env python3
"""
NFT Collection Wizard - Command Line Interface

Launches the interactive collection configuration wizard and renders the
resulting schema.
"""

from typing import Optional

import click

from cli.commands.init_config import init_config
from cli.context import CLIContext, pass_context
from cli.output import FORMATS


@click.group(context_settings={'help_option_names': ['-h', '--help']},
             invoke_without_command=True)
@click.option('--config-file', '-c',
              type=click.Path(exists=True, dir_okay=False),
              help='Path to configuration file')
@click.option('--profile',
              type=click.Choice(['interactive', 'ci']),
              help='Configuration profile to apply')
@click.option('--output-format', '-o',
              type=click.Choice(list(FORMATS)),
              help='Output format')
@click.option('--verbose', '-v',
              count=True,
              help='Increase verbosity (-v for INFO, -vv for DEBUG)')
@click.option('--version',
              is_flag=True,
              help='Show version information')
@pass_context
@click.pass_context
def cli(click_ctx: click.Context, ctx: CLIContext, config_file: Optional[str], profile: Optional[str],
        output_format: Optional[str], verbose: int, version: bool):
    """
    NFT Collection Wizard

    Interactively builds the configuration schema of an NFT collection:
    metadata, NFT fields and behaviours, supply, minting, royalties and
    primary market listings.

    Examples:
        nftwizard init-config
        nftwizard -o yaml init-config --output-file collection.yml
    """

    if version:
        from cli import __version__
        click.echo(f"NFT Collection Wizard v{__version__}")
        click_ctx.exit(0)

    if click_ctx.invoked_subcommand is None:
        click.echo(click_ctx.get_help())
        click_ctx.exit(0)

    ctx.config_file = config_file
    ctx.profile = profile
    ctx.output_format = output_format

    # Verbosity from config applies unless raised on the command line
    ctx.verbose = verbose
    ctx.setup_logging()
    ctx.load_config()
    ctx.verbose = max(verbose, ctx.get_config('cli.verbose', 0))
    ctx.setup_logging()

    ctx.logger.debug("CLI initialized with context")


cli.add_command(init_config)


def main():
    """Console script entry point."""
    cli(prog_name='nftwizard')


if __name__ == '__main__':
    main()
