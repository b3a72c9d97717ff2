"""
Command-line interface for symtseries.

This module provides the main entry point for the symtseries CLI.
"""

import click
import importlib
import pkgutil
from pathlib import Path


# Create the main Click group
@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="symtseries")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Symbolic (SAX) encoding and lower-bounding comparison of time series."""
    ctx.ensure_object(dict)


# Dynamically load all command modules
def register_commands() -> None:
    """Dynamically discover and register all command modules."""
    commands_pkg = Path(__file__).parent / "commands"

    # Import all modules in the commands package
    for _, module_name, _ in pkgutil.iter_modules([str(commands_pkg)]):
        module = importlib.import_module(f"symtseries.cli.commands.{module_name}")

        # Look for register_*_commands functions and call them
        for name, func in module.__dict__.items():
            if name.startswith("register_") and name.endswith("_commands"):
                func(cli)


# Register all commands
register_commands()


# Main entry point
def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
