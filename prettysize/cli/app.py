from __future__ import annotations

import logging
from dataclasses import replace
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from result import Err

from prettysize.config.defaults import default_config
from prettysize.config.loader import load_config, sample_config_json
from prettysize.models.enums import Base, Style
from prettysize.models.errors import SizeError
from prettysize.models.size import Size
from prettysize.services.parsing import try_parse_size
from prettysize.services.serialization import dumps
from prettysize.services.summary import render_sizes

console = Console()

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def run(
    values: Annotated[
        list[str] | None,
        typer.Argument(help="Sizes to render, e.g. 1024, '12.5 MB', 3GiB."),
    ] = None,
    base: Annotated[Base | None, typer.Option("--base", "-b", help="Unit base: 2 (KiB, MiB) or 10 (KB, MB).")] = None,
    style: Annotated[Style | None, typer.Option("--style", "-s", help="How unit names are spelled.")] = None,
    scale: Annotated[int | None, typer.Option("--scale", help="Fixed number of decimal places.")] = None,
    total: Annotated[bool, typer.Option("--total", "-t", help="Append the sum of all sizes.")] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Print byte counts as JSON.")] = False,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
    config_path: Annotated[str | None, typer.Option("--config", help="Path to a config JSON file.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log config resolution.")] = False,
) -> None:
    _configure_logging(verbose)

    if sample_config:
        console.print(sample_config_json())
        raise typer.Exit(0)

    config_result = load_config(config_path)
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()

    overrides: dict[str, object] = {}
    if base is not None:
        overrides["base"] = base
    if style is not None:
        overrides["style"] = style
    if scale is not None:
        overrides["scale"] = max(0, scale)
    if overrides:
        config = replace(config, **overrides)
    logger.debug("Formatting with %s", config)

    if not values:
        console.print("[red]No sizes given.[/]")
        raise typer.Exit(1)

    entries: list[tuple[str, Size]] = []
    for text in values:
        parsed = try_parse_size(text)
        if isinstance(parsed, Err):
            console.print(f"[red]{escape(parsed.unwrap_err().message)}[/]")
            raise typer.Exit(1)
        entries.append((text, parsed.unwrap()))

    summed: Size | None = None
    if total:
        try:
            summed = sum((size for _, size in entries), Size.zero())
        except SizeError as exc:
            console.print(f"[red]Total is not representable: {escape(exc.message)}[/]")
            raise typer.Exit(1) from exc

    if json_output:
        payload: dict[str, object] = {"sizes": [{"input": text, "bytes": size} for text, size in entries]}
        if summed is not None:
            payload["total"] = summed
        typer.echo(dumps(payload))
        return

    render_sizes(console, entries, config.to_format_spec(), bar_width=config.bar_width, total=summed)


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
