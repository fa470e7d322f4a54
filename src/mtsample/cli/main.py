"""CLI entry point for mtsample."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from mtsample.config.defaults import COURSE_CLASS_COUNTS, default_experiment_config
from mtsample.config.schema import GeneratorConfig
from mtsample.core.engine import run_experiments
from mtsample.core.generator import MersenneTwister
from mtsample.core.reference import check_reference_vectors
from mtsample.core.rng import make_rng
from mtsample.io.serialize import dump_frequency_csv, dump_results_summary
from mtsample.io.yaml_loader import load_config_file
from mtsample.models.classes import FrequencyTable, class_frequencies
from mtsample.utils.exceptions import MtsampleError

_INTERVALS = ("closed", "half-open", "open", "res53")


def _build_rng(seed: int | None, key: tuple[int, ...]) -> MersenneTwister:
    if seed is not None and key:
        raise click.UsageError("--seed and --key are mutually exclusive")
    try:
        return make_rng(seed, list(key) if key else None)
    except MtsampleError as exc:
        raise click.ClickException(str(exc)) from exc


def _echo_table(table: FrequencyTable) -> None:
    click.echo("Class probabilities:")
    click.echo(" ".join(f"{lab}: {p:.6f} |" for lab, p in zip(table.labels, table.probabilities)))
    click.echo("Cumulative probabilities:")
    click.echo(" ".join(f"{lab}: {c:.6f} |" for lab, c in zip(table.labels, table.cumulative)))


seed_option = click.option("--seed", default=None, type=int, help="Scalar 32-bit seed.")
key_option = click.option(
    "--key",
    multiple=True,
    type=int,
    help="Seed key word (repeatable) for array seeding.",
)
count_option = click.option(
    "--count", default=10, show_default=True, type=click.IntRange(min=0), help="Number of draws."
)


@click.group()
@click.version_option(package_name="mtsample")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """mtsample — Mersenne Twister generator and sampling experiments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@seed_option
@key_option
@count_option
@click.option(
    "--format",
    "word_format",
    type=click.Choice(["u32", "u31"]),
    default="u32",
    show_default=True,
    help="Full 32-bit words or 31-bit words.",
)
def words(seed: int | None, key: tuple[int, ...], count: int, word_format: str) -> None:
    """Print raw integer draws."""
    rng = _build_rng(seed, key)
    draw = rng.next_u32 if word_format == "u32" else rng.next_u31
    for _ in range(count):
        click.echo(draw())


@cli.command()
@seed_option
@key_option
@count_option
@click.option(
    "--interval",
    type=click.Choice(_INTERVALS),
    default="half-open",
    show_default=True,
    help="closed [0,1], half-open [0,1), open (0,1) or res53 [0,1) at 53-bit resolution.",
)
def reals(seed: int | None, key: tuple[int, ...], count: int, interval: str) -> None:
    """Print real draws on the unit interval."""
    rng = _build_rng(seed, key)
    draw = {
        "closed": rng.next_real_closed,
        "half-open": rng.next_real_half_open,
        "open": rng.next_real_open,
        "res53": rng.next_real_53,
    }[interval]
    for _ in range(count):
        click.echo(f"{draw():.10f}")


@cli.command()
@click.argument("counts", nargs=-1, type=click.IntRange(min=0))
@click.option("--csv", "as_csv", is_flag=True, help="Print the table as CSV.")
def table(counts: tuple[int, ...], as_csv: bool) -> None:
    """Print class probabilities for observed COUNTS (defaults to a worked example)."""
    values = list(counts) if counts else COURSE_CLASS_COUNTS
    try:
        freq = class_frequencies(values)
    except MtsampleError as exc:
        raise click.ClickException(str(exc)) from exc
    if as_csv:
        click.echo(dump_frequency_csv(freq), nl=False)
    else:
        _echo_table(freq)


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a JSON or YAML config file. Uses defaults if not provided.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write results JSON.",
)
@seed_option
def run(config_path: Path | None, output_path: Path | None, seed: int | None) -> None:
    """Run the uniform, class and exponential experiments."""
    try:
        config = load_config_file(config_path) if config_path else default_experiment_config()
        # CLI overrides
        if seed is not None:
            config = config.model_copy(update={"generator": GeneratorConfig(seed=seed)})
        result = run_experiments(config)
    except (MtsampleError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    uni = config.uniform
    click.echo(f"Uniform draws on [{uni.low}, {uni.high}):")
    for x in result.uniform_draws:
        click.echo(f"  {x:f}")

    counts = result.class_counts
    click.echo(f"\nClass draws: {counts.total}")
    click.echo(" ".join(f"{lab}: {c} |" for lab, c in zip(counts.labels, counts.counts)))
    _echo_table(result.class_table)

    expo = config.exponential
    summary = result.exponential_summary
    click.echo(f"\nExponential mean {expo.mean}: average after {summary.n} draws = {summary.mean:f}")
    click.echo("Histogram: " + " ".join(f"{int(c)} |" for c in result.exponential_histogram))

    if output_path is not None:
        output_path.write_text(dump_results_summary(result))
        click.echo(f"\nResults written to {output_path}")


@cli.command()
def verify() -> None:
    """Check the generator against published MT19937 outputs."""
    failed = False
    for check in check_reference_vectors():
        status = "ok" if check.passed else "MISMATCH"
        click.echo(f"{check.name}: {status}")
        if not check.passed:
            failed = True
            click.echo(f"  expected {list(check.expected)}")
            click.echo(f"  actual   {list(check.actual)}")
    if failed:
        raise click.ClickException("Reference vectors do not match")


if __name__ == "__main__":
    cli()
