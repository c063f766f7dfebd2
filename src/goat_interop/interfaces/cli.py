"""CLI interface implementation using Typer."""

from typing import Annotated

import typer
from rich.console import Console

from goat_interop.core import UINT32_MAX, Goat, UInt32RangeError, do_math
from goat_interop.models.io import WelcomeMessage
from goat_interop.utils.settings import get_goat_settings

from .base import BaseInterface

# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False)


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        self.app = typer.Typer(
            name="goat-interop",
            help="Goat Interop CLI",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="welcome")(self.welcome)
        self.app.command(name="describe")(self.describe)
        self.app.command(name="triple")(self.triple)

        # Show the welcome message when no command is specified
        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(self, ctx: typer.Context) -> None:  # pragma: no cover
        """Run when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            self.welcome()
            raise typer.Exit(0)

    def _fail(self, message: str, exc: Exception) -> None:
        console.print(f"[red]{message}: {exc}[/red]")
        console.file.flush()
        self.logger.error(message, error=str(exc))
        raise typer.Exit(1) from exc

    def welcome(self) -> None:
        """Display welcome message."""
        msg = WelcomeMessage()
        console.print(msg.message)
        console.print(msg.hint)
        console.file.flush()

    def describe(
        self,
        increments: Annotated[
            int | None,
            typer.Option(
                "--increments",
                "-n",
                help="How many horns to grow before describing the goat.",
            ),
        ] = None,
    ) -> None:
        """Grow a goat's horns and describe it."""
        if increments is None:
            increments = get_goat_settings().initial_increments
        if not 0 <= increments <= UINT32_MAX:
            self._fail(
                "Invalid horn count",
                ValueError(
                    f"increments must be between 0 and {UINT32_MAX}, got {increments}",
                ),
            )
            return

        self.logger.info("Describing goat", increments=increments)

        goat = Goat.new()
        for _ in range(increments):
            goat.increment()

        console.print(goat.describe())
        console.file.flush()

    def triple(
        self,
        value: Annotated[
            int,
            typer.Argument(help="Unsigned 32-bit integer to triple."),
        ],
    ) -> None:
        """Print three times VALUE with 32-bit wraparound."""
        self.logger.info("Tripling value", value=value)

        try:
            result = do_math(value)
        except UInt32RangeError as exc:
            self._fail("Invalid value", exc)
            return

        self.logger.debug("Tripled value", value=value, result=result)
        console.print(str(result))
        console.file.flush()

    def run(self) -> None:
        """Run the CLI interface."""
        # Let Typer handle the command parsing
        self.app()
