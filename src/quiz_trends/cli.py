from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer

from quiz_trends.config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from quiz_trends.features.aggregates import AggregationTable, aggregate
from quiz_trends.features.categories import category_options, extract_categories
from quiz_trends.features.comparison import compare as compare_categories
from quiz_trends.features.series import build_series
from quiz_trends.io.read import SourceUnavailableError, load_rows
from quiz_trends.logging import configure_logging
from quiz_trends.models import AccuracySeries, Attempt
from quiz_trends.pipeline.dashboard import prepare_attempts, run_all
from quiz_trends.preprocess.buckets import BucketFn, bucket_function

app = typer.Typer(no_args_is_help=True, add_completion=False)


class GranularityOption(str, Enum):
    day = "day"
    week = "week"


def _load_app_config(config_path: Path) -> AppConfig:
    return load_config(config_path)


def _load_attempts(csv: Path, cfg: AppConfig) -> tuple[Attempt, ...]:
    try:
        rows = load_rows(csv, columns=cfg.columns)
    except SourceUnavailableError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    normalized = prepare_attempts(rows, cfg)
    if normalized.skipped:
        typer.echo(f"Skipped {normalized.skipped} malformed rows", err=True)
    return normalized.attempts


def _bucket_fn(granularity: GranularityOption | None, default: str) -> BucketFn:
    return bucket_function(granularity.value if granularity else default)


def _category_table(
    attempts: tuple[Attempt, ...],
    cfg: AppConfig,
    granularity: GranularityOption | None,
) -> AggregationTable:
    return aggregate(
        attempts,
        bucket_fn=_bucket_fn(granularity, cfg.aggregation.category_granularity),
        group_by_category=True,
    )


def _echo_series(series: AccuracySeries, heading: str) -> None:
    typer.echo(heading)
    if series.is_empty:
        typer.echo("  (no data for this selection)")
        return
    for label, value in zip(series.labels, series.values):
        typer.echo(f"  {label}\t{value:.1f}")


@app.command()
def categories(
    csv: Path = typer.Option(..., exists=True, readable=True, resolve_path=True),
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, exists=True, readable=True, resolve_path=True),
) -> None:
    """List the categories present in a quiz results CSV."""
    cfg = _load_app_config(config)
    configure_logging(cfg.logging.level)
    attempts = _load_attempts(csv, cfg)
    for category in category_options(extract_categories(attempts)):
        typer.echo(category)


@app.command()
def series(
    csv: Path = typer.Option(..., exists=True, readable=True, resolve_path=True),
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, exists=True, readable=True, resolve_path=True),
    category: str | None = typer.Option(
        None,
        help="Category to chart. Omit for accuracy across all categories.",
    ),
    granularity: GranularityOption | None = typer.Option(
        None,
        help="Bucket size. Defaults to the configured granularity.",
    ),
) -> None:
    """Print the accuracy series for one category or for all attempts."""
    cfg = _load_app_config(config)
    configure_logging(cfg.logging.level)
    attempts = _load_attempts(csv, cfg)
    if category is None:
        table = aggregate(
            attempts,
            bucket_fn=_bucket_fn(granularity, cfg.aggregation.overall_granularity),
            group_by_category=False,
        )
        _echo_series(build_series(table), "overall")
        return
    table = _category_table(attempts, cfg, granularity)
    _echo_series(build_series(table, category), category)


@app.command()
def compare(
    csv: Path = typer.Option(..., exists=True, readable=True, resolve_path=True),
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, exists=True, readable=True, resolve_path=True),
    category: str = typer.Option(..., help="First category."),
    against: str = typer.Option(..., help="Category to compare with."),
    granularity: GranularityOption | None = typer.Option(
        None,
        help="Bucket size. Defaults to the configured category granularity.",
    ),
) -> None:
    """Print accuracy series for two categories side by side."""
    cfg = _load_app_config(config)
    configure_logging(cfg.logging.level)
    attempts = _load_attempts(csv, cfg)
    table = _category_table(attempts, cfg, granularity)
    first, second = compare_categories(table, category, against)
    _echo_series(first, category)
    _echo_series(second, against)


@app.command("run-all")
def run_all_command(
    csv: Path = typer.Option(..., exists=True, readable=True, resolve_path=True),
    out: Path = typer.Option(Path("out"), resolve_path=True),
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, exists=True, readable=True, resolve_path=True),
    category: str = typer.Option("", help="Selected category for the category chart."),
    against: str = typer.Option("", help="Category to compare with."),
) -> None:
    """Write accuracy tables, charts and a summary for a quiz results CSV."""
    cfg = _load_app_config(config)
    configure_logging(cfg.logging.level)
    try:
        summary_path = run_all(
            csv_path=csv,
            out_dir=out,
            config=cfg,
            selected_category=category,
            compare_category=against,
        )
    except SourceUnavailableError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Run complete. Summary: {summary_path}")


if __name__ == "__main__":
    app()
