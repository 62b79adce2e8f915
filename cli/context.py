#!/usr/bin/env python3
"""
Shared CLI Context for the NFT Collection Wizard

Holds the per-invocation state (configuration, verbosity, output format)
shared by the command group and its commands, plus the error handling
decorator applied to every command.
"""

import functools
import logging
import sys
import traceback
from typing import Any, Optional

import click
import yaml

from cli.config import ConfigurationManager
from cli.help import get_troubleshooting_guide
from cli.output import OutputFormatter
from nft.exceptions import ConstraintViolation

STDERR_HANDLER = "nftwizard-stderr"


class CLIContext:
    """Global CLI context for sharing state across commands."""

    def __init__(self):
        self.config_file: Optional[str] = None
        self.profile: Optional[str] = None
        self.output_format: Optional[str] = None
        self.verbose: int = 0
        self.config_manager: Optional[ConfigurationManager] = None
        self.logger: logging.Logger = logging.getLogger('nftwizard-cli')

    def setup_logging(self):
        """Configure logging based on verbosity level."""
        log_levels = {
            0: logging.WARNING,
            1: logging.INFO,
            2: logging.DEBUG
        }

        level = log_levels.get(min(self.verbose, 2), logging.DEBUG)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # CLI messages and the wizard core share one stderr handler
        for name in ('nftwizard-cli', 'nft'):
            logger = logging.getLogger(name)
            logger.setLevel(level)
            handler = next((h for h in logger.handlers if h.get_name() == STDERR_HANDLER), None)
            if handler is None:
                handler = logging.StreamHandler()
                handler.set_name(STDERR_HANDLER)
                handler.setFormatter(formatter)
                logger.addHandler(handler)
            handler.setStream(sys.stderr)

    def load_config(self):
        """Load configuration from files, profile and environment."""
        self.config_manager = ConfigurationManager(self.config_file, self.profile)
        try:
            self.config_manager.load()
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise click.ClickException(f"Failed to load config: {e}")
        self.logger.info(f"Configuration sources: {', '.join(self.config_manager.get_sources())}")

        errors = self.config_manager.validate()
        if errors:
            raise click.ClickException("Invalid configuration: " + "; ".join(errors))

    def get_config(self, key: str, default: Any = None) -> Any:
        """Get configuration value with fallback to default."""
        if self.config_manager is None:
            return default
        return self.config_manager.get(key, default)

    def output(self, data: Any, format_override: Optional[str] = None):
        """Output data in specified format."""
        format_type = format_override or self.output_format or self.get_config('cli.output_format', 'table')
        formatter = OutputFormatter(format_type, self.get_config('cli.color_output', True))
        click.echo(formatter.format(data))


pass_context = click.make_pass_decorator(CLIContext, ensure=True)


def handle_cli_error(func):
    """Decorator to handle CLI errors gracefully."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit):
            raise
        except (KeyboardInterrupt, click.Abort):
            click.echo("\nOperation cancelled by user.", err=True)
            sys.exit(130)
        except Exception as e:
            ctx = click.get_current_context(silent=True)
            cli_ctx = ctx.find_object(CLIContext) if ctx is not None else None

            click.echo(f"Error: {e}", err=True)
            if isinstance(e, ConstraintViolation):
                click.echo(get_troubleshooting_guide('retries').strip(), err=True)
            if cli_ctx is not None and cli_ctx.verbose >= 2:
                click.echo(traceback.format_exc(), err=True)
            else:
                click.echo("Use -vv for detailed error information.", err=True)

            sys.exit(1)

    return wrapper

