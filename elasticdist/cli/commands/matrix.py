"""Pairwise matrix CLI commands."""

from pathlib import Path
from typing import Optional

import click
import numpy as np

from ...band import BandConfig, DEFAULT_BAND_SIZE
from ...exceptions import ElasticDistError
from ...io import load_series, save_matrix
from ...pairwise import pairwise_distances


def register_matrix_commands(cli: click.Group) -> None:
    """Register pairwise matrix commands."""
    @cli.command("matrix", help="Pairwise distance matrix for a file of series")
    @click.argument("input_path", type=click.Path(exists=True, path_type=Path))
    @click.option("--band", "band_size", type=float, default=DEFAULT_BAND_SIZE,
                  show_default=True)
    @click.option("--variant", default="dtw", show_default=True)
    @click.option("--n-jobs", type=int, default=1, show_default=True)
    @click.option("--delimiter", default=",", show_default=True)
    @click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
                  help="Write the matrix here instead of printing it")
    @click.option("--format", "fmt", type=click.Choice(["auto", "npy", "csv", "json"]),
                  default="auto", show_default=True)
    def matrix(input_path: Path, band_size: float, variant: str, n_jobs: int,
               delimiter: str, output: Optional[Path], fmt: str):
        """Compute D[i, j] = distance(series_i, series_j) for every pair.

        INPUT_PATH holds one series per line (.csv/.txt) or per row (.npy).
        """
        try:
            series = load_series(input_path, delimiter=delimiter)
            D = pairwise_distances(series, BandConfig(band_size), variant, n_jobs)
        except (ElasticDistError, ValueError) as e:
            raise click.ClickException(str(e))

        if output is None:
            for row in D:
                click.echo(",".join(f"{v:.12g}" for v in row))
        else:
            save_matrix(D, output, fmt)
            click.echo(f"Wrote {D.shape[0]}x{D.shape[1]} matrix to {output}")
        n_inf = int(np.isinf(D).sum())
        if n_inf:
            click.echo(f"{n_inf} pairs have no admissible alignment", err=True)
