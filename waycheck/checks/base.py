"""Base classes for check flags and results."""

from dataclasses import dataclass, field
from typing import Any, Protocol

from ..graph.entities import Location
from ..graph.road_graph import RoadGraph


@dataclass
class CheckFlag:
    """A single flagged map object."""

    check: str
    identifier: int
    instruction: str
    points: list[Location] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.check} [{self.identifier}] - {self.instruction}"


@dataclass
class CheckResult:
    """Result of running checks over a graph."""

    flags: list[CheckFlag] = field(default_factory=list)
    evaluated: int = 0

    @property
    def has_flags(self) -> bool:
        return len(self.flags) > 0

    def add_flag(self, flag: CheckFlag) -> None:
        """Add a flag to the result."""
        self.flags.append(flag)

    def merge(self, other: "CheckResult") -> None:
        """Merge another result into this one."""
        self.flags.extend(other.flags)
        self.evaluated += other.evaluated


class Rule(Protocol):
    """What the runner needs from a check."""

    name: str

    def is_eligible(self, obj: object) -> bool: ...

    def evaluate(self, graph: RoadGraph, obj: object) -> CheckFlag | None: ...
