from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prettysize.models.size import Size
from prettysize.services.formatting import FormatSpec, relative_bar


def sizes_table(
    entries: list[tuple[str, Size]],
    spec: FormatSpec,
    *,
    bar_width: int = 16,
    total: Size | None = None,
) -> Table:
    table = Table(title="Sizes", header_style="bold cyan")
    table.add_column("Input")
    table.add_column("Bytes", justify="right")
    table.add_column("Size", justify="right")
    if bar_width > 0:
        table.add_column("Share")

    largest = max((abs(size.bytes()) for _, size in entries), default=0)
    for text, size in entries:
        row: list[str] = [escape(text), f"{size.bytes():,}", size.format(spec)]
        if bar_width > 0:
            row.append(relative_bar(abs(size.bytes()), largest, bar_width))
        table.add_row(*row)

    if total is not None:
        table.add_section()
        total_row: list[str] = [
            "[bold]Total[/bold]",
            f"[bold]{total.bytes():,}[/bold]",
            f"[bold]{total.format(spec)}[/bold]",
        ]
        if bar_width > 0:
            total_row.append("")
        table.add_row(*total_row)
    return table


def render_sizes(
    console: Console,
    entries: list[tuple[str, Size]],
    spec: FormatSpec,
    *,
    bar_width: int = 16,
    total: Size | None = None,
) -> None:
    console.print(sizes_table(entries, spec, bar_width=bar_width, total=total))
