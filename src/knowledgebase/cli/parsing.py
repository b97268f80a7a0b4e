"""Input parsing utilities for CLI commands."""

import json
from pathlib import Path
from typing import Any

from knowledgebase.core.types import DataType


def parse_attribute_spec(spec: str) -> dict[str, Any]:
    """Parse attribute specification string.

    Format: name:DataType[:id]

    Examples:
        "isbn:String:id" → {"name": "isbn", "data_type": "String", "is_id_part": True}
        "pages:Int" → {"name": "pages", "data_type": "Int", "is_id_part": False}

    Args:
        spec: Attribute specification string

    Returns:
        Attribute dictionary ready for ObjectType.add_attribute(**attr)

    Raises:
        ValueError: If spec format is invalid
    """
    parts = spec.split(":")
    if len(parts) < 2 or len(parts) > 3 or not parts[0]:
        raise ValueError(
            f"Invalid attribute spec: '{spec}'. Expected format: name:DataType[:id] "
            f"with DataType one of {', '.join(DataType.values())}"
        )

    attribute: dict[str, Any] = {
        "name": parts[0],
        "data_type": parts[1],
        "is_id_part": False,
    }

    if len(parts) == 3:
        if parts[2] != "id":
            raise ValueError(f"Invalid modifier: '{parts[2]}'. Supported: id")
        attribute["is_id_part"] = True

    return attribute


def read_json_file(path: str) -> dict[str, Any]:
    """Read single JSON object from file.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON object

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file contains invalid JSON
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with file_path.open("r") as f:
        return json.load(f)
