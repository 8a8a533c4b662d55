"""Schema layer for parsing and validating road-network documents."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import GraphDocument, NodeSpec, WaySpec
from .loader import load_yaml, parse_graph, parse_graph_from_string

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "GraphDocument",
    "NodeSpec",
    "WaySpec",
    "load_yaml",
    "parse_graph",
    "parse_graph_from_string",
]
