#!/usr/bin/env python3
"""
Collection Configuration Command for the NFT Collection Wizard CLI

Runs the interactive wizard against the terminal and renders or saves the
resulting collection schema.
"""

from pathlib import Path
from typing import Optional

import click

from cli.context import CLIContext, handle_cli_error, pass_context
from cli.help import format_examples_help, get_command_examples, get_troubleshooting_guide
from cli.output import save_schema_file
from cli.prompts import ClickPromptDriver
from nft.wizard import CollectionWizard


@click.command('init-config')
@click.option('--output-file', type=click.Path(dir_okay=False),
              help='Save the schema to a JSON file (YAML for .yml/.yaml)')
@click.option('--max-attempts', type=click.IntRange(min=1),
              help='Rejected answers allowed per question before giving up')
@click.option('--show-examples', is_flag=True, help='Show usage examples and exit')
@pass_context
@handle_cli_error
def init_config(ctx: CLIContext, output_file: Optional[str], max_attempts: Optional[int],
                show_examples: bool):
    """
    Build a collection configuration interactively.

    Asks for the collection metadata, NFT fields and behaviours, supply
    policy, minting strategies, royalty policy and primary market listings,
    then prints the finished schema.

    Examples:
        nftwizard init-config
        nftwizard init-config --output-file collection.yml
    """

    if show_examples:
        click.echo(format_examples_help(get_command_examples('init-config')))
        click.echo("Troubleshooting:\n")
        click.echo(get_troubleshooting_guide())
        return

    attempts = max_attempts or ctx.get_config('wizard.max_field_attempts', 3)
    ctx.logger.info(f"Starting wizard with up to {attempts} attempt(s) per question")

    wizard = CollectionWizard(ClickPromptDriver(), max_field_attempts=attempts)
    schema = wizard.run()
    schema_data = schema.to_dict()

    click.echo()
    ctx.output(schema_data)

    if output_file:
        path = Path(output_file)
        if not path.is_absolute():
            path = Path(ctx.get_config('wizard.output_dir', '.')) / path

        saved = save_schema_file(schema_data, str(path))
        ctx.logger.info(f"Schema saved to {saved}")
        click.echo(f"\n✅ Collection schema saved to {saved}")
