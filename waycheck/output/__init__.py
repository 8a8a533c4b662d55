"""Output formatting for check results."""

from .formatter import format_check_result

__all__ = ["format_check_result"]
