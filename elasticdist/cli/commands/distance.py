"""Distance CLI commands."""

import click

from ...band import BandConfig, DEFAULT_BAND_SIZE
from ...distances import distance
from ...distances.engine import ENGINES
from ...exceptions import ElasticDistError


def _parse_series(value: str):
    try:
        return [float(v) for v in value.split(",") if v.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated numbers, got {value!r}")


def register_distance_commands(cli: click.Group) -> None:
    """Register single-pair distance commands."""
    @cli.command("distance", help="Distance between two comma-separated series")
    @click.argument("seq_a")
    @click.argument("seq_b")
    @click.option("--band", "band_size", type=float, default=DEFAULT_BAND_SIZE,
                  show_default=True, help="Band width as a fraction of len(SEQ_B)")
    @click.option("--variant", default="dtw", show_default=True)
    @click.option("--engine", type=click.Choice(ENGINES), default="auto",
                  show_default=True)
    def distance_cmd(seq_a: str, seq_b: str, band_size: float, variant: str,
                     engine: str):
        """Print the distance between SEQ_A and SEQ_B.

        Examples:

        \b
            elasticdist distance 1,2,3 1,2,2,3 --band 1.0
        """
        try:
            d = distance(_parse_series(seq_a), _parse_series(seq_b),
                         BandConfig(band_size), variant, engine)
        except ElasticDistError as e:
            raise click.ClickException(str(e))
        click.echo(f"{d:.12g}")
