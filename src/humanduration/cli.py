"""Click CLI entry point for humanduration."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click
import yaml
from pydantic import ValidationError
from rich.markup import escape

from humanduration import __version__
from humanduration.config import load_config
from humanduration.errors import DurationError
from humanduration.formatter import format_duration
from humanduration.models import Duration
from humanduration.parser import parse_duration
from humanduration.units import NANOS_PER_SEC, U64_MAX
from humanduration.utils.logging import console, err_console, get_logger, setup_logging

log = get_logger(__name__)

OUTPUT_CHOICES = ["human", "seconds", "nanos", "json"]


def render(text: str, duration: Duration, output: str) -> str:
    if output == "seconds":
        if duration.nanoseconds:
            return f"{duration.seconds}.{duration.nanoseconds:09d}"
        return str(duration.seconds)
    if output == "nanos":
        return str(duration.as_nanos())
    if output == "json":
        return json.dumps({
            "input": text,
            "seconds": duration.seconds,
            "nanoseconds": duration.nanoseconds,
            "formatted": str(format_duration(duration)),
        }, ensure_ascii=False)
    return str(format_duration(duration))


def caret_line(text: str, span: tuple[int, int]) -> str:
    """Underline a byte span of ``text`` with carets."""
    raw = text.encode("utf-8")
    start, end = span
    column = len(raw[:start].decode("utf-8", errors="ignore"))
    width = len(raw[start:end].decode("utf-8", errors="ignore"))
    return " " * column + "^" * max(width, 1)


def report_error(text: str, error: DurationError) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {escape(str(error))}")
    if error.span is not None:
        err_console.print(f"  {escape(text)}")
        err_console.print(f"  {caret_line(text, error.span)}")


def _flatten(data: Any, prefix: str = "") -> dict[str, Any]:
    items: dict[str, Any] = {}
    if isinstance(data, dict):
        for key, value in data.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            items.update(_flatten(value, path))
    elif isinstance(data, list):
        for index, value in enumerate(data):
            items.update(_flatten(value, f"{prefix}[{index}]"))
    else:
        items[prefix] = data
    return items


def _lookup(data: Any, dotted: str) -> Any:
    current = data
    for part in dotted.split("."):
        if not isinstance(current, dict) or part not in current:
            raise KeyError(dotted)
        current = current[part]
    return current


@click.group()
@click.version_option(version=__version__, prog_name="humanduration")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to humanduration.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """humanduration: parse and format durations like "2h 37min"."""
    setup_logging(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


@cli.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "-o", "--output",
    type=click.Choice(OUTPUT_CHOICES),
    default=None,
    help="Output format (defaults to the config file setting)",
)
@click.pass_context
def parse(ctx: click.Context, values: tuple[str, ...], output: str | None) -> None:
    """Parse one or more duration strings."""
    try:
        config = load_config(ctx.obj["config_path"])
    except (yaml.YAMLError, ValidationError) as e:
        err_console.print(f"[red bold]Invalid config:[/red bold] {escape(str(e))}")
        sys.exit(1)
    output = output or config.output.format

    failed = 0
    for text in values:
        preset = config.resolve_preset(text)
        if preset is not None:
            log.debug("Resolved preset %r to %r", text, preset)
            console.print(escape(render(text, preset, output)))
            continue
        try:
            duration = parse_duration(text)
        except DurationError as e:
            report_error(text, e)
            failed += 1
            continue
        console.print(escape(render(text, duration, output)))

    if failed:
        sys.exit(1)


@cli.command("format")
@click.argument("seconds", type=click.IntRange(0, U64_MAX))
@click.option(
    "-n", "--nanos",
    type=click.IntRange(0, NANOS_PER_SEC - 1),
    default=0,
    help="Sub-second nanoseconds",
)
def format_(seconds: int, nanos: int) -> None:
    """Format a number of seconds as a human-friendly duration."""
    console.print(str(format_duration(Duration(seconds, nanos))))


@cli.command()
@click.argument("yaml_file", type=click.Path(exists=True))
@click.option(
    "-k", "--key", "keys",
    multiple=True,
    help="Dotted key to check (repeatable); defaults to every string value",
)
def check(yaml_file: str, keys: tuple[str, ...]) -> None:
    """Check that duration values in a YAML file parse."""
    try:
        data = yaml.safe_load(Path(yaml_file).read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        err_console.print(f"[red bold]Invalid YAML:[/red bold] {escape(str(e))}")
        sys.exit(1)

    if keys:
        entries: dict[str, Any] = {}
        for key in keys:
            try:
                entries[key] = _lookup(data, key)
            except KeyError:
                entries[key] = None
    else:
        entries = {k: v for k, v in _flatten(data).items() if isinstance(v, str)}

    if not entries:
        console.print("[yellow]No duration values found[/yellow]")
        return

    failed = 0
    for key, value in entries.items():
        if value is None:
            err_console.print(f"[red]{escape(key)}:[/red] key not found")
            failed += 1
            continue
        text = str(value)
        try:
            duration = parse_duration(text)
        except DurationError as e:
            err_console.print(f"[red]{escape(key)}:[/red] {escape(repr(text))}")
            report_error(text, e)
            failed += 1
            continue
        console.print(f"[green]{escape(key)}:[/green] {escape(str(format_duration(duration)))}")

    console.print(f"{len(entries) - failed}/{len(entries)} values OK")
    if failed:
        sys.exit(1)
