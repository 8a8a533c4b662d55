"""Graph-related exceptions."""


class GraphIntegrityError(Exception):
    """Raised when a lookup references a node or edge missing from the graph."""

    def __init__(self, message: str, identifier: int | None = None):
        self.identifier = identifier
        super().__init__(message)
