"""Command-line interface for setsmaps."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from setsmaps import __version__
from setsmaps.anagrams import is_anagram
from setsmaps.constants import (
    DEFAULT_DEGREE_COLUMN,
    DEFAULT_DELIMITER,
    DEFAULT_FEED_TIMEOUT,
    PAIR_SEPARATOR,
    USGS_ALL_DAY_URL,
)
from setsmaps.degrees import DegreeSummaryConfig, summarize_degrees
from setsmaps.earthquakes import FeedConfig, FeedError, fetch_feed, parse_feed
from setsmaps.models import EarthquakeEvent, SymmetricPair
from setsmaps.pairs import find_symmetric_pairs

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_WIDTH = 120
MIN_OUTPUT_WIDTH = 60

console = Console(width=DEFAULT_OUTPUT_WIDTH)

_NOISY_EXTERNAL_LOGGERS = (
    "charset_normalizer",
    "requests",
    "urllib3",
)


class _SetsmapsLogFilter(logging.Filter):
    """Filter log records so non-setsmaps INFO chatter is hidden by default."""

    def __init__(self, *, include_external_info: bool) -> None:
        """Create a log filter configured for CLI verbosity.

        :param include_external_info: Allow noisy external INFO logs through.
        """
        super().__init__()
        self.include_external_info = include_external_info

    def filter(self, record: logging.LogRecord) -> bool:
        """Decide whether a log record should be emitted.

        :param record: Candidate log record.
        :return: ``False`` for noisy INFO messages from non-setsmaps modules.
        """
        if record.name.startswith("setsmaps"):
            return True
        if self.include_external_info:
            return True
        return record.levelno >= logging.WARNING


def _set_console(output_width: int) -> None:
    """Set global console used by all rich output helpers."""
    global console
    console = Console(width=output_width)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.addFilter(_SetsmapsLogFilter(include_external_info=verbose))
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    quiet_level = logging.DEBUG if verbose else logging.WARNING
    for logger_name in _NOISY_EXTERNAL_LOGGERS:
        logging.getLogger(logger_name).setLevel(quiet_level)


def _validate_positive_int(
    _ctx: click.Context, _param: click.Parameter, value: int | None
) -> int | None:
    """Validate an optional positive integer option value.

    :param _ctx: Click callback context (unused).
    :param _param: Click callback parameter metadata (unused).
    :param value: Candidate value.
    :return: Value if it is strictly positive or unset.
    :raises click.BadParameter: When value is ``<= 0``.
    """
    if value is not None and value <= 0:
        raise click.BadParameter("must be > 0")
    return value


def _validate_positive_float(_ctx: click.Context, _param: click.Parameter, value: float) -> float:
    """Validate a positive float option value.

    :param _ctx: Click callback context (unused).
    :param _param: Click callback parameter metadata (unused).
    :param value: Candidate value.
    :return: Value if it is strictly positive.
    :raises click.BadParameter: When value is ``<= 0``.
    """
    if value <= 0:
        raise click.BadParameter("must be > 0")
    return value


def _validate_delimiter(_ctx: click.Context, _param: click.Parameter, value: str) -> str:
    """Validate a single-character delimiter.

    :param _ctx: Click callback context (unused).
    :param _param: Click callback parameter metadata (unused).
    :param value: Candidate delimiter.
    :return: Value if it is exactly one character.
    :raises click.BadParameter: When value is empty or longer than one character.
    """
    if len(value) != 1:
        raise click.BadParameter("must be a single character")
    return value


def _validate_output_width(_ctx: click.Context, _param: click.Parameter, value: int) -> int:
    """Validate output width for rich table rendering.

    :param _ctx: Click callback context (unused).
    :param _param: Click callback parameter metadata (unused).
    :param value: Desired output width.
    :return: Value if it meets the minimum width.
    :raises click.BadParameter: When value is below the minimum width.
    """
    if value < MIN_OUTPUT_WIDTH:
        raise click.BadParameter(f"must be >= {MIN_OUTPUT_WIDTH}")
    return value


def _prepare_output(*, as_json: bool, verbose: bool, output_width: int) -> None:
    _set_console(output_width)
    if not as_json:
        setup_logging(verbose)


def _report_error(exc: Exception, *, verbose: bool) -> None:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    if verbose:
        console.print_exception()


def read_tokens(path: Path) -> list[str]:
    """Read whitespace-separated tokens from a file.

    :param path: File holding tokens.
    :return: Tokens in file order.
    """
    return path.read_text(encoding="utf-8", errors="replace").split()


def _dedupe(tokens: list[str]) -> list[str]:
    unique = list(dict.fromkeys(tokens))
    if len(unique) != len(tokens):
        logger.debug("Dropped %d duplicate tokens", len(tokens) - len(unique))
    return unique


def _sorted_pairs(pairs: set[SymmetricPair]) -> list[SymmetricPair]:
    return sorted(pairs, key=lambda pair: (pair.small, pair.big))


def _sorted_degrees(degrees: dict[str, int]) -> list[tuple[str, int]]:
    return sorted(degrees.items(), key=lambda item: (-item[1], item[0]))


def print_pairs(pairs: set[SymmetricPair], token_count: int) -> None:
    """Print symmetric pairs as a rich table.

    :param pairs: Pairs to render.
    :param token_count: Number of input tokens, for the title.
    :return: ``None``.
    """
    if not pairs:
        console.print(f"[yellow]No symmetric pairs among {token_count} tokens.[/yellow]")
        return

    table = Table(
        title=f"Symmetric Pairs ({len(pairs)} from {token_count} tokens)",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Pair", style="cyan", no_wrap=True)

    for idx, pair in enumerate(_sorted_pairs(pairs), start=1):
        table.add_row(str(idx), escape(str(pair)))

    console.print(table)


def print_pairs_json(pairs: set[SymmetricPair]) -> None:
    """Output symmetric pairs as JSON."""
    payload = {
        "count": len(pairs),
        "pairs": [str(pair) for pair in _sorted_pairs(pairs)],
    }
    print(json.dumps(payload, indent=2, sort_keys=True))


def print_degrees(degrees: dict[str, int]) -> None:
    """Print degree counts as a rich table, most common first.

    :param degrees: Mapping of degree to count.
    :return: ``None``.
    """
    if not degrees:
        console.print("[yellow]No degree values found.[/yellow]")
        return

    table = Table(title="Degree Summary", show_header=True, header_style="bold")
    table.add_column("Degree", style="cyan", no_wrap=True)
    table.add_column("Count", style="green", justify="right", no_wrap=True)

    for degree, count in _sorted_degrees(degrees):
        table.add_row(escape(degree), str(count))
    table.add_section()
    table.add_row("Total", str(sum(degrees.values())), style="bold")

    console.print(table)


def print_degrees_json(degrees: dict[str, int]) -> None:
    """Output degree counts as JSON."""
    payload = {"total": sum(degrees.values()), "degrees": degrees}
    print(json.dumps(payload, indent=2, sort_keys=True))


def print_quakes(events: list[EarthquakeEvent]) -> None:
    """Print earthquake events as a rich table in feed order.

    :param events: Events to render.
    :return: ``None``.
    """
    if not events:
        console.print("[yellow]No earthquakes with both place and magnitude.[/yellow]")
        return

    table = Table(title="Earthquakes Today", show_header=True, header_style="bold")
    table.add_column("Magnitude", style="green", justify="right", width=10, no_wrap=True)
    table.add_column("Place", style="cyan")

    for event in events:
        table.add_row(f"{event.magnitude:.2f}", escape(event.place))

    console.print(table)


def print_quakes_json(events: list[EarthquakeEvent]) -> None:
    """Output earthquake events as JSON."""
    payload = {
        "count": len(events),
        "events": [
            {"place": event.place, "magnitude": event.magnitude, "summary": event.summary}
            for event in events
        ],
    }
    print(json.dumps(payload, indent=2, sort_keys=True))


def _add_common_output_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach shared output options to commands.

    :param func: Click command function.
    :return: Decorated click command function.
    """
    options = [
        click.option(
            "--json",
            "as_json",
            is_flag=True,
            help="Output JSON instead of rich tables",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Verbose logging"),
        click.option(
            "--output-width",
            type=int,
            default=DEFAULT_OUTPUT_WIDTH,
            show_default=True,
            callback=_validate_output_width,
            help="Width used for rich terminal rendering",
        ),
    ]

    for option in reversed(options):
        func = option(func)
    return func


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="setsmaps")
def cli() -> None:
    """Set and map exercises: symmetric pairs, degree counts, anagrams, earthquakes."""


@cli.command("pairs", help="Find symmetric two-letter word pairs")
@click.argument("tokens", nargs=-1)
@click.option(
    "--file",
    "token_file",
    type=click.Path(path_type=Path),
    default=None,
    help="Read whitespace-separated tokens from a file",
)
@_add_common_output_options
def pairs_command(
    tokens: tuple[str, ...],
    token_file: Path | None,
    as_json: bool,
    verbose: bool,
    output_width: int,
) -> None:
    """Find tokens whose reverse is also present.

    :param tokens: Tokens given on the command line.
    :param token_file: Optional file with extra tokens.
    :param as_json: Output JSON instead of a table.
    :param verbose: Enable debug-level logging.
    :param output_width: Width used for rich output.
    :return: ``None``.
    """
    _prepare_output(as_json=as_json, verbose=verbose, output_width=output_width)

    all_tokens = list(tokens)
    if token_file is not None:
        try:
            all_tokens.extend(read_tokens(token_file))
        except OSError as exc:
            _report_error(exc, verbose=verbose)
            raise click.exceptions.Exit(1) from exc

    if not all_tokens:
        raise click.UsageError("Provide tokens as arguments or with --file.")

    all_tokens = _dedupe(all_tokens)
    pairs = find_symmetric_pairs(all_tokens)

    if as_json:
        print_pairs_json(pairs)
    else:
        print_pairs(pairs, len(all_tokens))

    raise click.exceptions.Exit(0)


@cli.command("degrees", help="Count values in one column of a census file")
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--column",
    type=int,
    default=DEFAULT_DEGREE_COLUMN + 1,
    show_default=True,
    callback=_validate_positive_int,
    help="1-based column holding the degree",
)
@click.option(
    "--delimiter",
    default=DEFAULT_DELIMITER,
    show_default=True,
    callback=_validate_delimiter,
    help="Field delimiter",
)
@_add_common_output_options
def degrees_command(
    path: Path,
    column: int,
    delimiter: str,
    as_json: bool,
    verbose: bool,
    output_width: int,
) -> None:
    """Summarize a census file.

    :param path: Header-less delimited file.
    :param column: 1-based column index.
    :param delimiter: Field delimiter.
    :param as_json: Output JSON instead of a table.
    :param verbose: Enable debug-level logging.
    :param output_width: Width used for rich output.
    :return: ``None``.
    """
    _prepare_output(as_json=as_json, verbose=verbose, output_width=output_width)

    config = DegreeSummaryConfig(column=column - 1, delimiter=delimiter)
    try:
        degrees = summarize_degrees(path, config)
    except OSError as exc:
        _report_error(exc, verbose=verbose)
        raise click.exceptions.Exit(1) from exc

    if as_json:
        print_degrees_json(degrees)
    else:
        print_degrees(degrees)

    raise click.exceptions.Exit(0)


@cli.command("anagram", help="Check whether two words are anagrams")
@click.argument("word1")
@click.argument("word2")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
def anagram_command(word1: str, word2: str, as_json: bool) -> None:
    """Exit 0 when the words are anagrams, 1 otherwise."""
    result = is_anagram(word1, word2)

    if as_json:
        payload = {"word1": word1, "word2": word2, "is_anagram": result}
        print(json.dumps(payload, indent=2, sort_keys=True))
    elif result:
        console.print(
            f"[green]{escape(repr(word1))} and {escape(repr(word2))} are anagrams.[/green]"
        )
    else:
        console.print(
            f"[yellow]{escape(repr(word1))} and {escape(repr(word2))} are not anagrams.[/yellow]"
        )

    raise click.exceptions.Exit(0 if result else 1)


@cli.command("quakes", help="Summarize today's earthquakes from the USGS feed")
@click.option("--url", default=USGS_ALL_DAY_URL, show_default=True, help="GeoJSON feed URL")
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_FEED_TIMEOUT,
    show_default=True,
    callback=_validate_positive_float,
    help="Request timeout in seconds",
)
@click.option(
    "--limit",
    type=int,
    default=None,
    callback=_validate_positive_int,
    help="Show at most this many events",
)
@_add_common_output_options
def quakes_command(
    url: str,
    timeout: float,
    limit: int | None,
    as_json: bool,
    verbose: bool,
    output_width: int,
) -> None:
    """Fetch the earthquake feed and print place/magnitude summaries.

    :param url: Feed URL.
    :param timeout: Request timeout in seconds.
    :param limit: Optional cap on printed events.
    :param as_json: Output JSON instead of a table.
    :param verbose: Enable debug-level logging.
    :param output_width: Width used for rich output.
    :return: ``None``.
    """
    _prepare_output(as_json=as_json, verbose=verbose, output_width=output_width)

    try:
        config = FeedConfig(url=url, timeout=timeout)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--url'") from exc

    try:
        events = parse_feed(fetch_feed(config))
    except FeedError as exc:
        _report_error(exc, verbose=verbose)
        raise click.exceptions.Exit(1) from exc

    if limit is not None:
        events = events[:limit]

    if as_json:
        print_quakes_json(events)
    else:
        print_quakes(events)

    raise click.exceptions.Exit(0)


@cli.command("info", help="Print tool defaults")
def info_command() -> None:
    """Print version and default settings."""
    click.echo(f"setsmaps {__version__}")
    click.echo(f"Pair separator: {PAIR_SEPARATOR!r}")
    click.echo(f"Default degree column (1-based): {DEFAULT_DEGREE_COLUMN + 1}")
    click.echo(f"Default delimiter: {DEFAULT_DELIMITER!r}")
    click.echo(f"Earthquake feed: {USGS_ALL_DAY_URL}")
    click.echo(f"Feed timeout: {DEFAULT_FEED_TIMEOUT}s")
    click.echo(f"Default output width: {DEFAULT_OUTPUT_WIDTH}")
    click.echo("Run with --help for CLI usage")


def main() -> int:
    """CLI program entrypoint.

    :return: Process exit code from click dispatch.
    """
    argv = sys.argv[1:]

    try:
        result = cli.main(args=argv, prog_name="setsmaps", standalone_mode=False)
        if isinstance(result, int):
            return result
    except click.exceptions.Exit as exc:
        return int(exc.exit_code)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
