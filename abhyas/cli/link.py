"""Link Typer app factory."""

from pathlib import Path

import typer

from ..api.link.cmd_add import cmd_add
from ..api.link.cmd_complete import cmd_complete
from ..api.link.cmd_delete import cmd_delete
from ..api.link.cmd_import import cmd_import
from ..api.link.cmd_list import cmd_list
from ..api.link.cmd_next import cmd_next
from ..api.link.cmd_reset import cmd_reset
from ..api.link.cmd_show import cmd_show
from ..api.link.cmd_skip import cmd_skip
from ..api.link.cmd_status import cmd_status
from ._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Manage tracked links without the interactive menu",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd() -> None:
        """Count total, completed and skipped links."""
        _handle_stage_result(cmd_status)()

    @app.command(name="list")
    def list_cmd(
        status: str = typer.Option("all", "--status", "-s", help="all, solved, skipped or incomplete"),
    ) -> None:
        """List links, optionally filtered by status."""
        _handle_stage_result(cmd_list)(status=status)

    @app.command(name="add")
    def add_cmd(url: str = typer.Argument(..., help="Link to start tracking")) -> None:
        """Add a new link."""
        _handle_stage_result(cmd_add)(url=url)

    @app.command(name="delete")
    def delete_cmd(url: str = typer.Argument(..., help="Link to stop tracking")) -> None:
        """Delete a link."""
        _handle_stage_result(cmd_delete)(url=url)

    @app.command(name="next")
    def next_cmd() -> None:
        """Show the next link that is neither solved nor skipped."""
        _handle_stage_result(cmd_next)()

    @app.command(name="show")
    def show_cmd(url: str = typer.Argument(..., help="Link to look up")) -> None:
        """Show a link with its solved count."""
        _handle_stage_result(cmd_show)(url=url)

    @app.command(name="complete")
    def complete_cmd(url: str = typer.Argument(..., help="Link to mark as solved")) -> None:
        """Mark a link as complete."""
        _handle_stage_result(cmd_complete)(url=url)

    @app.command(name="skip")
    def skip_cmd(url: str = typer.Argument(..., help="Link to skip")) -> None:
        """Skip a link."""
        _handle_stage_result(cmd_skip)(url=url)

    @app.command(name="reset")
    def reset_cmd(target: str = typer.Argument(..., help="skipped or completed")) -> None:
        """Move all skipped or all completed links back to incomplete."""
        _handle_stage_result(cmd_reset)(target=target)

    @app.command(name="import")
    def import_cmd(
        path: Path = typer.Argument(..., help="File with one link per line", exists=True, dir_okay=False),
    ) -> None:
        """Add links from a file, skipping ones already tracked."""
        _handle_stage_result(cmd_import)(path=path)

    return app
