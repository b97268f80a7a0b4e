"""Knowledge base CLI - Main entry point."""

from typing import Annotated

import typer

import knowledgebase
from knowledgebase.cli.context import CLIContext, get_database_url

# Create main Typer app
app = typer.Typer(
    name="knowledgebase",
    help="Knowledge base CLI - define object types and store them",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    database: Annotated[
        str | None,
        typer.Option(
            "--database",
            "-d",
            envvar="KNOWLEDGEBASE_URL",
            help="Embedded store URL (SQLite)",
        ),
    ] = None,
    echo: Annotated[
        bool,
        typer.Option(
            "--echo",
            "-e",
            help="Echo SQL statements to console",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON (machine-readable)",
        ),
    ] = False,
) -> None:
    """Initialize CLI context with global options."""
    ctx.obj = CLIContext(
        database_url=get_database_url(database),
        echo=echo,
        json_output=json_output,
    )


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"Knowledge Base v{knowledgebase.__version__}")


# Register command groups
from knowledgebase.cli.commands import object_types  # noqa: E402

app.add_typer(object_types.app, name="types")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
