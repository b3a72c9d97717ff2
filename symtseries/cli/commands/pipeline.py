"""YAML-based pipeline CLI commands."""

import sys

import click
from pathlib import Path


def register_pipeline_commands(cli: click.Group) -> None:
    """Register pipeline-related commands."""
    @cli.command("run", help="Run SAX pipeline from YAML configuration")
    @click.argument("config", type=click.Path(exists=True, path_type=Path))
    @click.option(
        "--validate-only",
        is_flag=True,
        help="Only validate configuration, don't run pipeline"
    )
    def run(config: Path, validate_only: bool):
        """Run SAX pipeline from YAML configuration file.

        Examples:

        \b
            symtseries run configs/meter_stream.yaml
            symtseries run configs/meter_stream.yaml --validate-only
        """
        from ...config import PipelineConfig
        from ...pipeline import run_pipeline

        try:
            cfg = PipelineConfig.from_yaml(config)
        except Exception as e:
            click.echo(f"Configuration error: {e}", err=True)
            sys.exit(1)

        if validate_only:
            click.echo(f"Configuration valid: {config}")
            click.echo(f"  Input: {cfg.input.path}")
            click.echo(f"  SAX: n={cfg.sax.n}, w={cfg.sax.w}, c={cfg.sax.c}")
            click.echo(f"  Mode: {cfg.stream.mode} (step={cfg.stream.step})")
            click.echo(f"  Output: {cfg.output.path or '<stdout>'} ({cfg.output.format})")
            return

        cfg.logging.apply()
        try:
            run_pipeline(cfg)
        except Exception as e:
            click.echo(f"Pipeline failed: {e}", err=True)
            sys.exit(1)
