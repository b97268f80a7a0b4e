"""Output formatting for CLI commands."""

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from knowledgebase.core.types import ObjectType
from knowledgebase.exceptions import KnowledgeBaseError

console = Console()


class OutputFormatter:
    """Formats output for terminal or JSON mode."""

    def __init__(self, json_mode: bool = False) -> None:
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
        """
        self.json_mode = json_mode

    def print_table(
        self,
        title: str,
        data: list[dict[str, Any]],
        columns: list[str],
    ) -> None:
        """Print data as Rich table or JSON array.

        Args:
            title: Table title
            data: List of row dictionaries
            columns: Column names to display
        """
        if self.json_mode:
            print(json.dumps(data, default=str, indent=2))
        else:
            table = Table(title=title, show_header=True, header_style="bold magenta")
            for col in columns:
                table.add_column(col)
            for row in data:
                table.add_row(*[str(row.get(col, "")) for col in columns])
            console.print(table)

    def print_object_type(self, object_type: ObjectType) -> None:
        """Print an object type with its attributes.

        Args:
            object_type: Object type to display
        """
        if self.json_mode:
            print(json.dumps(object_type.to_document(), indent=2))
            return

        console.print(f"\n[bold]Object type:[/bold] {object_type.name}")
        if object_type.id_parts:
            console.print(f"Identity: {', '.join(object_type.id_parts)}")

        if object_type.attributes:
            console.print(f"\n[bold]Attributes ({len(object_type.attributes)}):[/bold]")
            attributes_table = Table(show_header=True, header_style="bold cyan")
            attributes_table.add_column("Name")
            attributes_table.add_column("Type")
            attributes_table.add_column("Id part")

            for attribute in object_type.attributes:
                attributes_table.add_row(
                    attribute.name,
                    attribute.data_type.value,
                    "✓" if attribute.is_id_part else "",
                )
            console.print(attributes_table)
        else:
            console.print("No attributes defined.", style="dim")

    def print_success(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Print success message.

        Args:
            message: Success message
            details: Optional details to display
        """
        if self.json_mode:
            output = {"success": True, "message": message}
            if details:
                output.update(details)
            print(json.dumps(output, default=str, indent=2))
        else:
            console.print(f"✓ {message}", style="green")
            if details:
                for key, value in details.items():
                    console.print(f"  {key}: {value}", style="dim")

    def print_error(self, error: Exception) -> None:
        """Print error message.

        Args:
            error: Exception to display
        """
        if self.json_mode:
            if isinstance(error, KnowledgeBaseError):
                print(json.dumps(error.to_dict(), indent=2))
            else:
                print(json.dumps({"error": str(error)}, indent=2))
        else:
            error_text = str(error)
            if isinstance(error, KnowledgeBaseError) and error.context:
                context_str = "\n".join(f"{k}: {v}" for k, v in error.context.items())
                error_text = f"{error_text}\n\n{context_str}"

            panel = Panel(
                error_text,
                title="[red]Error[/red]",
                border_style="red",
            )
            console.print(panel)

    def print_data(self, data: Any) -> None:
        """Print generic data (dict, list, etc.).

        Args:
            data: Data to print
        """
        if self.json_mode:
            print(json.dumps(data, default=str, indent=2))
        else:
            console.print(data)
