"""waycheck: data-quality checks for sectioned road-network graphs."""

__version__ = "0.1.0"
