"""
TeaCodec Console Output
========================

Rich-based display of codec results and key tables, built on the
shared :class:`~shared.console.TeaConsole`.
"""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import TeaConsole
from teacodec.core.models import CodecResult, KeyTableSummary, Operation
from teacodec.errors import TeaCodecError

_OPERATION_COLOURS: dict[str, str] = {
    "encode": "bright_green",
    "decode": "bright_cyan",
}


class CodecConsoleOutput:
    """Console formatters for codec results.

    Usage::

        console = TeaConsole()
        output = CodecConsoleOutput(console)
        output.display_result(codec.transform(Operation.ENCODE, "abc"))
        output.display_table(codec.describe())
    """

    def __init__(self, console: Optional[TeaConsole] = None) -> None:
        self.console = console or TeaConsole()
        self._rich = self.console.rich

    def display_result(self, result: CodecResult) -> None:
        """Show input and output of one transform in a panel."""
        operation = Operation(result.operation).value
        colour = _OPERATION_COLOURS.get(operation, "white")

        body = Text()
        body.append("Input:  ", style="bold")
        body.append(f"{result.input}\n")
        body.append("Output: ", style="bold")
        body.append(result.output, style=colour)
        body.append(
            f"\n\n{len(result.input)} -> {len(result.output)} characters"
            f"  |  offset {result.offset}"
            f"  |  alphabet {result.alphabet_size}",
            style="dim",
        )

        self._rich.print(
            Panel(body, title=operation.title(), border_style=colour)
        )

    def display_table(self, summary: KeyTableSummary) -> None:
        """Render the forward table, flagging shadowed entries."""
        self.console.section("Key Table")

        tbl = Table(
            title=(
                f"Keys {summary.first_key}-{summary.last_key} "
                f"({summary.distinct_characters} distinct of "
                f"{summary.alphabet_size})"
            ),
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Key", justify="right")
        tbl.add_column("Code", style="bold")
        tbl.add_column("Char")
        tbl.add_column("Status")

        for entry in summary.entries:
            status = (
                "[yellow]shadowed[/yellow]" if entry.shadowed else "[green]live[/green]"
            )
            tbl.add_row(
                str(entry.key),
                entry.code,
                escape(repr(entry.character)),
                status,
            )

        self._rich.print(tbl)

        if summary.shadowed_codes:
            self.console.warning(
                "Repeated characters; these codes decode but are never "
                "produced by encode: " + ", ".join(summary.shadowed_codes)
            )

    def display_error(self, error: TeaCodecError) -> None:
        self.console.error(f"{error.message} [{error.kind}]")
