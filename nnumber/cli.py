"""Click CLI — the main entry point for nnumber.

Commands:
  nnumber convert VALUE     ICAO address -> tail number, or tail number -> ICAO
  nnumber to-tail ICAO      ICAO address -> tail number
  nnumber to-icao TAIL      Tail number -> ICAO address
  nnumber info VALUE        Table with both forms and the sequence position
  nnumber config            Show or change ~/.nnumber/config.yaml
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .codec import Conversion, icao_to_tail, tail_to_icao
from .config import load_config, save_config
from .icao import (
    US_START,
    format_icao,
    is_military,
    is_n_number_address,
    is_us_address,
    normalize_icao,
    parse_icao,
)

console = Console()
err_console = Console(stderr=True)


def _setup_logging(level: str) -> None:
    """Route the package's log records to stderr through rich."""
    log = logging.getLogger("nnumber")
    log.handlers[:] = [RichHandler(console=err_console, show_path=False, show_time=False)]
    log.setLevel(getattr(logging, level.upper(), logging.WARNING))


@click.group()
@click.version_option(version=__version__, prog_name="nnumber")
@click.option("-v", "--verbose", is_flag=True, help="Log rejected input at debug level")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Convert between US ICAO addresses and N-number tail registrations."""
    cfg = load_config()
    _setup_logging("DEBUG" if verbose else str(cfg["logging"]["level"]))
    ctx.obj = cfg


def _normalize_tail(tail: str, cfg: dict) -> str:
    tail = tail.strip()
    if cfg["cli"]["normalize_case"]:
        tail = tail.upper()
    return tail


def _dispatch(value: str, cfg: dict) -> tuple[str, str, Conversion]:
    """Pick the direction from the first character.

    Returns (kind, normalized input, conversion), kind being "icao" or "tail".
    """
    first = value.strip()[:1].upper()
    if first == "N":
        tail = _normalize_tail(value, cfg)
        return "tail", tail, tail_to_icao(tail)
    if first in ("A", "0"):
        icao = normalize_icao(value)
        return "icao", icao, icao_to_tail(icao)
    raise click.BadParameter(
        "expected an ICAO address (A.....) or a tail number (N...)", param_hint="VALUE"
    )


def _emit(source: str, result: Conversion) -> None:
    if not result.ok:
        err_console.print(f"[red]Invalid:[/] {escape(source)}: {escape(result.error)}")
        sys.exit(1)
    click.echo(result.value)


@cli.command()
@click.argument("value")
@click.pass_obj
def convert(cfg: dict, value: str):
    """Convert in whichever direction VALUE calls for.

    \b
    Examples:
      nnumber convert A061D9      # -> N12345
      nnumber convert N12345      # -> A061D9
    """
    _, source, result = _dispatch(value, cfg)
    _emit(source, result)


@cli.command("to-tail")
@click.argument("icao")
def to_tail(icao: str):
    """Convert an ICAO address to its N-number."""
    source = normalize_icao(icao)
    _emit(source, icao_to_tail(source))


@cli.command("to-icao")
@click.argument("tail")
@click.pass_obj
def to_icao(cfg: dict, tail: str):
    """Convert an N-number to its ICAO address."""
    source = _normalize_tail(tail, cfg)
    _emit(source, tail_to_icao(source))


@cli.command()
@click.argument("value")
@click.pass_obj
def info(cfg: dict, value: str):
    """Show an identifier in both forms with its place in the numbering."""
    kind, source, result = _dispatch(value, cfg)
    if not result.ok:
        _emit(source, result)

    icao, tail = (result.value, source) if kind == "tail" else (source, result.value)
    addr = parse_icao(icao)
    offset = addr - US_START

    table = Table(title=f"{tail} / {icao}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("ICAO", format_icao(addr))
    table.add_row("Registration", tail)
    table.add_row("Block", _classify(addr))
    table.add_row("Offset", f"{offset} (0x{offset:05X})")
    table.add_row("Sequence index", str(offset - 1) if offset else "-")
    table.add_row("Suffix", _letter_suffix(tail) or "-")

    console.print(table)


@cli.command("config")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              default=None, help="Log level for rejected input and diagnostics")
@click.option("--normalize-case/--strict-case", default=None,
              help="Uppercase tail numbers before converting")
@click.pass_obj
def config_cmd(cfg: dict, log_level: str | None, normalize_case: bool | None):
    """Show the configuration, or update it with the given options."""
    if log_level is not None:
        cfg["logging"]["level"] = log_level.upper()
    if normalize_case is not None:
        cfg["cli"]["normalize_case"] = normalize_case

    if log_level is not None or normalize_case is not None:
        path = save_config(cfg)
        console.print(f"[bold]Config saved:[/] {path}")

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("logging.level", str(cfg["logging"]["level"]))
    table.add_row("cli.normalize_case", "true" if cfg["cli"]["normalize_case"] else "false")
    console.print(table)


def _classify(addr: int) -> str:
    if is_military(addr):
        return "US military"
    if is_n_number_address(addr):
        return "US civil (N-number)"
    if is_us_address(addr):
        return "US"
    return "non-US"


def _letter_suffix(tail: str) -> str:
    """Letter suffix of a registration; a fifth character is not a suffix."""
    body = tail[1:]
    letters = body.lstrip("0123456789")
    if len(body) - len(letters) >= 4:
        return ""
    return letters
