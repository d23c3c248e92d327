"""
Command-Line Interface for the motion acceptance library.
Uses 'click' for CLI argument parsing and command structure.
"""
import json
import logging
from pathlib import Path
from typing import Optional

import click

from .capture import extract_calibration
from .config import EvaluationConfig
from .constants import RESULT_HEADER
from .dataset import parse_time_series
from .evaluation import load_test_description, process_test
from .exceptions import AcceptanceError

logger = logging.getLogger("MotionAcceptanceCLI")


def _load_config(config_path: Optional[str], log_level: Optional[str]) -> EvaluationConfig:
    config = EvaluationConfig.from_file(config_path) if config_path else EvaluationConfig()
    if log_level:
        config.log_level = log_level.upper()
    return config


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file with evaluation settings.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (overrides the configuration file).",
)
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], log_level: Optional[str]):
    """Acceptance testing of motion sensing devices."""
    try:
        config = _load_config(config_path, log_level)
    except AcceptanceError as exc:
        raise click.ClickException(str(exc)) from exc
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ctx.obj = config


@main.command()
@click.argument("capture_file", type=click.Path(dir_okay=False))
@click.option(
    "--verify-magic/--no-verify-magic",
    default=None,
    help="Reject windows with a wrong magic header (default from configuration).",
)
@click.pass_obj
def calibration(config: EvaluationConfig, capture_file: str, verify_magic: Optional[bool]):
    """Decode both calibration windows of CAPTURE_FILE and print them as JSON."""
    if verify_magic is None:
        verify_magic = config.verify_magic
    try:
        result = extract_calibration(capture_file, verify_magic=verify_magic)
    except AcceptanceError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(result.to_dict(), indent=2))


@main.command()
@click.argument("description", type=click.Path(exists=True, dir_okay=False))
@click.argument("dataset", type=click.File("r"))
@click.option("--test-name", default=None, help="Test name; defaults to the description file name.")
@click.option("--version", "version", default="unknown", show_default=True, help="Version that produced DATASET.")
@click.pass_obj
def evaluate(config: EvaluationConfig, description: str, dataset, test_name: Optional[str], version: str):
    """
    Compare DATASET (a recorded time series, '-' for stdin) with the move in DESCRIPTION.

    Prints one space-delimited metric record per line, preceded by a header.
    """
    test_name = test_name or Path(description).name
    try:
        test_description = load_test_description(description)
        series = parse_time_series(dataset, delimiter=config.delimiter)
        records = process_test(
            test_name, version, series, test_description, config.time_scale
        )
    except AcceptanceError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(" ".join(RESULT_HEADER))
    for record in records:
        click.echo(" ".join(str(field) for field in record.as_row()))


if __name__ == "__main__":
    main()
