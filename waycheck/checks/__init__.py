"""Road-network checks and the runner that applies them."""

from .base import CheckFlag, CheckResult, Rule
from .boundary import is_edge_with_synthetic_boundary_node
from .config import ConfigurationError, ShortSegmentConfig, load_configuration
from .gates import is_gate_like
from .short_segment import ShortSegmentRule
from .valence import LowValenceNodes, find_low_valence_node, main_edge_count
from .runner import check_graph_file, run_checks

__all__ = [
    "CheckFlag",
    "CheckResult",
    "Rule",
    "is_edge_with_synthetic_boundary_node",
    "ConfigurationError",
    "ShortSegmentConfig",
    "load_configuration",
    "is_gate_like",
    "ShortSegmentRule",
    "LowValenceNodes",
    "find_low_valence_node",
    "main_edge_count",
    "check_graph_file",
    "run_checks",
]
