#!/usr/bin/env python3
"""
Terminal Prompt Driver for the NFT Collection Wizard

Implements the wizard's PromptDriver on top of click's prompt helpers.
"""

from typing import List, Sequence

import click

from nft.exceptions import InputFormatError
from nft.validators import Validator, validate_text
from nft.wizard import PromptDriver


def _validated(validator: Validator):
    """Adapt a wizard validator to a click value_proc so click re-prompts on failure."""
    def value_proc(value: str) -> str:
        try:
            return validator(value)
        except InputFormatError as e:
            raise click.BadParameter(str(e))
    return value_proc


def parse_index_list(text: str, option_count: int) -> List[int]:
    """
    Parse a comma/space separated list of 1-based option numbers.

    Returns:
        Zero-based indices in the order given, without duplicates

    Raises:
        click.BadParameter: If an entry is not a number in range
    """
    indices: List[int] = []
    for token in text.replace(',', ' ').split():
        if not (token.isascii() and token.isdigit()) or not 1 <= int(token) <= option_count:
            raise click.BadParameter(f"'{token}' is not an option number between 1 and {option_count}")
        index = int(token) - 1
        if index not in indices:
            indices.append(index)
    return indices


class ClickPromptDriver(PromptDriver):
    """Prompt driver that talks to the terminal through click."""

    def _echo_options(self, options: Sequence[str]) -> None:
        for number, option in enumerate(options, start=1):
            click.echo(f"  {number}) {option}")

    def text(self, prompt: str, validator: Validator = validate_text) -> str:
        return click.prompt(prompt, default="", show_default=False,
                            value_proc=_validated(validator))

    def confirm(self, prompt: str) -> bool:
        return click.confirm(prompt, default=False)

    def select(self, prompt: str, options: Sequence[str]) -> int:
        click.echo(prompt)
        self._echo_options(options)
        number = click.prompt("Option", type=click.IntRange(1, len(options)))
        return number - 1

    def multi_select(self, prompt: str, options: Sequence[str]) -> List[int]:
        click.echo(prompt)
        self._echo_options(options)
        return click.prompt(
            "Options (comma separated numbers, empty for none)",
            default="", show_default=False,
            value_proc=lambda text: parse_index_list(text, len(options)),
        )

    def notify_error(self, message: str) -> None:
        click.secho(message, fg='red', err=True)
