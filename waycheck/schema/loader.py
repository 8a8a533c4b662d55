"""YAML loading and parsing for road-network documents."""

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import GraphDocument


def load_yaml(path: str | Path) -> dict:
    """Load a YAML (or JSON) file and return the raw data.

    Args:
        path: Path to the file.

    Returns:
        The parsed data as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def parse_graph(path: str | Path) -> GraphDocument:
    """Load and parse a file into a GraphDocument.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    data = load_yaml(path)
    document = _parse_graph_data(data)
    logger.debug(
        f"Loaded {path}: {len(document.nodes)} nodes, {len(document.ways)} ways"
    )
    return document


def parse_graph_from_string(yaml_string: str) -> GraphDocument:
    """Parse a YAML string into a GraphDocument.

    Args:
        yaml_string: The YAML content as a string.

    Returns:
        The parsed GraphDocument.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SchemaLoadError(f"Expected YAML mapping at root, got {type(data).__name__}")

    return _parse_graph_data(data)


def _parse_graph_data(data: dict) -> GraphDocument:
    """Validate raw data into a GraphDocument, collecting pydantic errors."""
    try:
        return GraphDocument.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e
