"""Object type management commands."""

from typing import Annotated

import typer

from knowledgebase.cli.context import CLIContext
from knowledgebase.cli.output import OutputFormatter
from knowledgebase.cli.parsing import parse_attribute_spec, read_json_file
from knowledgebase.core.types import ObjectType
from knowledgebase.exceptions import ObjectTypeNotFoundError, StorageError, ValidationError

# Create object type subcommand group
app = typer.Typer(help="Manage object types")


@app.command("list")
def types_list(ctx: typer.Context) -> None:
    """List all stored object types."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        object_types = cli_ctx.get_storage().list_object_types()
        if cli_ctx.json_output:
            formatter.print_data([ot.to_document() for ot in object_types])
        else:
            table_data = [
                {
                    "Name": ot.name,
                    "Attributes": ", ".join(ot.labels()),
                    "Identity": ", ".join(ot.id_parts),
                }
                for ot in object_types
            ]
            formatter.print_table(
                f"Object types ({len(object_types)} total)",
                table_data,
                ["Name", "Attributes", "Identity"],
            )
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()


@app.command("describe")
def types_describe(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Object type name")],
) -> None:
    """Show an object type with its attributes."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        storage = cli_ctx.get_storage()
        object_type = storage.get_object_type(name)
        if object_type is None:
            available = [ot.name for ot in storage.list_object_types()]
            raise ObjectTypeNotFoundError(name, available)
        formatter.print_object_type(object_type)
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()


@app.command("create")
def types_create(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Object type name (e.g., Book)")],
    attributes: Annotated[
        list[str] | None,
        typer.Option(
            "--attribute",
            "-a",
            help="Attribute spec: name:DataType[:id]. Can be repeated.",
        ),
    ] = None,
    from_file: Annotated[
        str | None,
        typer.Option(
            "--from-file",
            help="Load the object type document from a JSON file",
        ),
    ] = None,
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Replace an existing object type of the same name"),
    ] = False,
) -> None:
    """Create a new object type.

    Examples:

        # Inline attributes
        knowledgebase types create Book -a "isbn:String:id" -a "pages:Int"

        # From JSON document
        knowledgebase types create Book --from-file book.json
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        if from_file:
            document = read_json_file(from_file)
            file_name = document.setdefault("name", name)
            if file_name != name:
                raise ValidationError(
                    f"Name in {from_file} is '{file_name}' but the command names '{name}'.",
                    {"object_type_name": name, "document_name": file_name},
                )
            object_type = ObjectType.from_document(document)
        else:
            object_type = ObjectType(name=name)
            for spec in attributes or []:
                object_type.add_attribute(**parse_attribute_spec(spec))

        stored = cli_ctx.get_storage().create_object_type(object_type, overwrite=overwrite)
        if stored is None:
            raise StorageError(f"Object type '{name}' was not written.")

        formatter.print_success(
            f"Created object type '{stored.name}'",
            {
                "name": stored.name,
                "attributes": len(stored.attributes),
                "id_parts": stored.id_parts,
            },
        )
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()


@app.command("add-attribute")
def types_add_attribute(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Object type name")],
    spec: Annotated[str, typer.Argument(help="Attribute spec: name:DataType[:id]")],
) -> None:
    """Add an attribute to a stored object type.

    Example:

        knowledgebase types add-attribute Book "title:String"
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        storage = cli_ctx.get_storage()
        object_type = storage.get_object_type(name)
        if object_type is None:
            raise ObjectTypeNotFoundError(name)

        attribute = object_type.add_attribute(**parse_attribute_spec(spec))
        if storage.update_object_type(object_type) is None:
            raise ObjectTypeNotFoundError(name)

        formatter.print_success(
            f"Added attribute '{attribute.name}' to '{name}'",
            {"attribute": attribute.label, "is_id_part": attribute.is_id_part},
        )
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()


@app.command("delete")
def types_delete(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Object type name")],
) -> None:
    """Delete a stored object type."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        removed = cli_ctx.get_storage().delete_object_type(ObjectType(name=name))
        if removed is None:
            raise ObjectTypeNotFoundError(name)
        formatter.print_success(f"Deleted object type '{name}'", {"name": name})
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()
