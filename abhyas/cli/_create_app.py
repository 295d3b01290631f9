"""Create the main Typer CLI app."""

from pathlib import Path

import typer

from ..api.config.AbhyasConfig import AbhyasConfig
from ..api.link.cmd_import import cmd_import
from ..logging_config import get_logger, setup_logging
from ._run_interactive import _run_interactive
from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay
from .link import link

logger = get_logger("cli")


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Abhyas - practice a worklist of links. Run without a command for the interactive menu.",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(link(), name="link")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Command output format: json or yaml"),
        file: Path | None = typer.Option(
            None, "--file", "-f", help="Add links from a file, one per line", exists=True, dir_okay=False
        ),
        interactive: bool = typer.Option(
            False, "--interactive", "-i", help="With --file, open the interactive menu after importing"
        ),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(2)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is not None and file is not None:
            typer.echo("Error: --file cannot be combined with a command", err=True)
            raise typer.Exit(2)

        try:
            config = AbhyasConfig.load()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None

        try:
            setup_logging(config.log.level, config.log.path)
        except OSError as e:
            typer.echo(f"Error: could not open log file {config.log.path}: {e}", err=True)
            raise typer.Exit(1) from None

        if ctx.invoked_subcommand is not None:
            return

        cli_display = CLIDisplay()
        if file is not None:
            code = _run_single_execution(cmd_import, (file,), {}, cli_display, display)
            if code != 0 or not interactive:
                raise typer.Exit(code)

        logger.info("Starting interactive session")
        raise typer.Exit(_run_interactive(config, cli_display))

    return app
