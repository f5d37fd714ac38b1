"""
TeaCodec Console Interface
===========================

Rich-powered console abstraction providing a uniform presentation layer
for the TeaCodec command-line interface: banner, section headers,
and coloured status messages.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

_TEA_THEME = Theme(
    {
        "tea.banner": "bold bright_cyan",
        "tea.section": "bold bright_magenta",
        "tea.success": "bold green",
        "tea.warning": "bold yellow",
        "tea.error": "bold red",
        "tea.info": "bold bright_blue",
        "tea.dim": "dim white",
        "tea.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  _____ ___   _       ___  ___  ___  ___  ___
 |_   _| __| /_\     / __|/ _ \|   \| __|/ __|
   | | | _| / _ \   | (__| (_) | |) | _|| (__
   |_| |___/_/ \_\   \___|\___/|___/|___|\___|
[/bright_cyan]"""

_TAGLINE = "Positional Substitution Codec"


class TeaConsole:
    """Unified console interface for TeaCodec output.

    Usage::

        con = TeaConsole()
        con.banner()
        con.section("Encode")
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress regular output (useful in library / test mode).
                    Errors are still written to stderr.
        """
        self._console = Console(
            theme=_TEA_THEME,
            quiet=quiet,
            highlight=False,
        )
        self._err_console = Console(
            theme=_TEA_THEME,
            stderr=True,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the TeaCodec ASCII-art banner."""
        subtitle = (
            f"[tea.highlight]{_TAGLINE}[/tea.highlight]\n"
            f"[tea.dim]Version: {version}[/tea.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="tea.section", characters="─")

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[tea.success][✔] SUCCESS:[/tea.success] {escape(message)}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[tea.warning][⚠] WARNING:[/tea.warning] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print *message* to stderr, even when the console is quiet."""
        self._err_console.print(
            f"[tea.error][✘] ERROR:[/tea.error] {escape(message)}"
        )
