"""YAML-based pipeline CLI commands."""

import click
from pathlib import Path

from ...config import PipelineConfig
from ...pipeline import run_pipeline


def register_pipeline_commands(cli: click.Group) -> None:
    """Register pipeline-related commands."""
    @cli.command("run", help="Run distance pipeline from YAML configuration")
    @click.argument("config", type=click.Path(exists=True, path_type=Path))
    @click.option(
        "--validate-only",
        is_flag=True,
        help="Only validate configuration, don't run pipeline"
    )
    def run(config: Path, validate_only: bool):
        """Run distance pipeline from YAML configuration file.

        Examples:

        \b
            elasticdist run configs/sensors.yaml
            elasticdist run configs/sensors.yaml --validate-only
        """
        try:
            cfg = PipelineConfig.from_yaml(config)
        except (ValueError, TypeError) as e:
            raise click.ClickException(f"Configuration error: {e}")

        if validate_only:
            click.echo(f"Configuration valid: {config}")
            click.echo(f"  Dataset: {cfg.dataset.path}")
            click.echo(f"  Distance: {cfg.distance.variant} (band={cfg.distance.band_size})")
            click.echo(f"  Output: {cfg.output.path}")
            return

        try:
            summary = run_pipeline(cfg)
        except (ValueError, OSError) as e:
            raise click.ClickException(f"Pipeline failed: {e}")

        click.echo(f"Series: {summary['n_series']}")
        click.echo(f"Unreachable pairs: {summary['n_unreachable']}")
        click.echo(f"Output: {summary['output']}")
        for i, nbrs in summary.get("neighbors", {}).items():
            click.echo(f"  {i}: {', '.join(str(j) for j in nbrs)}")
