"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from ..api.config.get_package_version import get_package_version
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"abhyas {get_package_version()}")
        return 0

    app = _create_app()
    try:
        result = app(args=argv, prog_name="abhyas", standalone_mode=False)
        return result if isinstance(result, int) else 0
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 2
    except click.exceptions.Abort:
        return 130
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
