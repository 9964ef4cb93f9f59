#!/usr/bin/env python3
"""
Games catalog minifier - command line entry point.

Merges duplicate games in a catalog file and writes the result. Names are
canonicalized through an optional alias table before merging; with
--levenshtein, names that look alike but were not merged are listed for
review.

Usage:
    python -m gamesdb.main games.json games.min.json
    python -m gamesdb.main games.json games.min.json --aliases aliases.json5
    python -m gamesdb.main games.json games.min.json --aliases aliases.json5 -l
"""

import sys
from pathlib import Path

import click
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gamesdb.config import get_settings
from gamesdb.deduplication import format_report
from gamesdb.errors import UsageError
from gamesdb.minify import MinifyOptions, MinifyResult, minify
from gamesdb.utils.logging import setup_logging


console = Console()
err_console = Console(stderr=True)


def print_plain(text: str, target: Console = console) -> None:
    """Print text verbatim; game names may contain rich markup characters."""
    target.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_summary(result: MinifyResult) -> None:
    table = Table(title="Minify Summary")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Input Records", str(result.records_read))
    table.add_row("Unique Records", str(result.records_written))
    table.add_row("Merged Records", str(result.records_merged))
    table.add_row("Aliases Applied", f"{result.aliases_applied} / {result.aliases_loaded}")
    table.add_row("Output", escape(str(result.output_path)))
    console.print(table)


def print_near_duplicates(result: MinifyResult) -> None:
    """Print the near-duplicate report, closest pairs first."""
    print_plain("Levenshtein distances (in sorted order):")
    for line in format_report(result.near_duplicates or []):
        print_plain(line)


def fail(error: Exception) -> None:
    """Report a fatal error and exit with status 1."""
    print_plain("An error occurred:", err_console)
    print_plain(str(error), err_console)
    logger.opt(exception=error).debug("Run failed")
    logger.error(f"{type(error).__name__}: {error}")
    sys.exit(1)


@click.command()
@click.argument("input_path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.argument("output_path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--aliases", "aliases_path", type=click.Path(dir_okay=False, path_type=Path), help="JSON5 file mapping raw names to canonical names")
@click.option("-l", "--levenshtein", is_flag=True, help="Report near-duplicate names by edit distance")
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Threads for the near-duplicate scan")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Also write logs to this file")
def cli(
    input_path: Path | None,
    output_path: Path | None,
    aliases_path: Path | None,
    levenshtein: bool,
    workers: int | None,
    debug: bool,
    log_file: Path | None,
):
    """Merge duplicate games in INPUT_PATH and write the catalog to OUTPUT_PATH."""
    try:
        settings = get_settings()
        setup_logging(
            level="DEBUG" if debug else settings.log_level,
            log_file=log_file or settings.log_file,
        )

        if input_path is None:
            raise UsageError("Input file not provided.")
        if output_path is None:
            raise UsageError("Output file not provided.")

        options = MinifyOptions(
            input_path=input_path,
            output_path=output_path,
            aliases_path=aliases_path,
            levenshtein=levenshtein,
            workers=workers or settings.scan_workers,
            progress_interval=settings.progress_interval,
        )
        result = minify(options)
    except Exception as e:
        fail(e)

    if levenshtein:
        print_near_duplicates(result)
    print_summary(result)


def main() -> None:
    """Console script entry point; every failure exits with status 1."""
    try:
        cli.main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        err_console.print("Aborted!")
        sys.exit(1)


if __name__ == "__main__":
    main()
