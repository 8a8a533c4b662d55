"""Check runner that evaluates rules over every edge of a graph."""

from pathlib import Path
from typing import Any, Iterable

from loguru import logger

from ..graph.builder import build_graph
from ..graph.road_graph import RoadGraph
from ..schema.loader import parse_graph
from .base import CheckResult, Rule
from .short_segment import ShortSegmentRule


def run_checks(graph: RoadGraph, rules: Iterable[Rule]) -> CheckResult:
    """Run rules against every edge of a graph.

    Edges are visited in identifier order so the flag order is stable.

    Args:
        graph: The road graph.
        rules: The rules to apply.

    Returns:
        Combined CheckResult from all rules.
    """
    result = CheckResult()

    for rule in rules:
        rule_result = CheckResult()
        for edge in graph.edges():
            if not rule.is_eligible(edge):
                continue
            rule_result.evaluated += 1
            flag = rule.evaluate(graph, edge)
            if flag is not None:
                rule_result.add_flag(flag)

        logger.info(
            f"{rule.name}: {len(rule_result.flags)} flag(s) "
            f"from {rule_result.evaluated} eligible edge(s)"
        )
        result.merge(rule_result)

    return result


def check_graph_file(
    path: str | Path, settings: dict[str, Any] | None = None
) -> CheckResult:
    """Load a road-network file and run the short segment check on it.

    The rule is configured before the file is read so configuration errors
    surface first.

    Args:
        path: Path to the YAML or JSON road-network document.
        settings: Raw dotted-key settings for the short segment check.

    Returns:
        CheckResult from the check.

    Raises:
        ConfigurationError: If the settings are invalid.
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the document fails schema validation.
    """
    rule = ShortSegmentRule.from_configuration(settings)
    document = parse_graph(path)
    graph = build_graph(document)
    logger.info(
        f"Built graph from {path}: {graph.node_count()} nodes, {graph.edge_count()} edges"
    )
    return run_checks(graph, [rule])
