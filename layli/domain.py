"""Core diagram entities: nodes, edges, paths and their invariants.

These types carry no dependencies beyond the standard library. They are
the vocabulary used by parsers, layout engines, pathfinders and renderers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class ValidationError(ValueError):
    """Raised when a diagram, node or edge breaks one of its invariants."""


class LayoutType(str, Enum):
    """Available layout algorithms."""

    FLOW_SQUARE = "flow-square"
    TOPO_SORT = "topo-sort"
    TARJAN = "tarjan"
    ABSOLUTE = "absolute"
    RANDOM_SHORTEST = "random-shortest-square"


class PathfindingAlgorithm(str, Enum):
    """Available pathfinding algorithms."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BIDIRECTIONAL = "bidirectional"


class PathfindingHeuristic(str, Enum):
    """Heuristic functions usable by A*."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


@dataclass(frozen=True)
class Position:
    """An X, Y coordinate on the grid."""

    x: int = 0
    y: int = 0

    def distance(self, other: Position) -> float:
        """Euclidean distance to ``other``."""
        dx = float(self.x - other.x)
        dy = float(self.y - other.y)
        return math.sqrt(dx * dx + dy * dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Bounds:
    """A rectangle given by its top-left and bottom-right corners."""

    top_left: Position
    bottom_right: Position

    def width(self) -> int:
        """Horizontal extent of the rectangle."""
        return self.bottom_right.x - self.top_left.x

    def height(self) -> int:
        """Vertical extent of the rectangle."""
        return self.bottom_right.y - self.top_left.y

    def contains(self, point: Position) -> bool:
        """Whether ``point`` lies inside the rectangle, edges included."""
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )

    def __str__(self) -> str:
        return f"Bounds({self.top_left} to {self.bottom_right})"


@dataclass
class Node:
    """A box in the diagram."""

    id: str = ""
    contents: str = ""
    position: Position = field(default_factory=Position)
    width: int = 0
    height: int = 0
    class_name: str = ""
    style: str = ""

    def validate(self) -> None:
        """Raise :class:`ValidationError` if the node is malformed."""
        if not self.id:
            raise ValidationError("node ID cannot be empty")
        if self.width < 0 or self.height < 0:
            raise ValidationError("node dimensions must be non-negative")

    def bounds(self) -> Bounds:
        """The rectangle the node occupies."""
        return Bounds(
            top_left=self.position,
            bottom_right=Position(
                self.position.x + self.width, self.position.y + self.height
            ),
        )

    def center(self) -> Position:
        """The centre point, rounded toward the node's origin."""
        return Position(
            self.position.x + _half(self.width),
            self.position.y + _half(self.height),
        )

    def __str__(self) -> str:
        return f"Node({self.id} at {self.position} [{self.width}x{self.height}])"


@dataclass
class Path:
    """A series of positions forming an edge route."""

    points: list[Position] = field(default_factory=list)

    def length(self) -> float:
        """Total Euclidean length of all segments."""
        return sum(a.distance(b) for a, b in zip(self.points, self.points[1:]))

    def corners(self) -> int:
        """Number of points at which the step vector changes."""
        count = 0
        for prev, curr, nxt in zip(self.points, self.points[1:], self.points[2:]):
            before = (curr.x - prev.x, curr.y - prev.y)
            after = (nxt.x - curr.x, nxt.y - curr.y)
            if before != after:
                count += 1
        return count

    def __str__(self) -> str:
        if not self.points:
            return "Path(empty)"
        return f"Path({len(self.points)} points)"


@dataclass
class Edge:
    """A connection between two nodes, identified by their ids."""

    id: str = ""
    source: str = ""
    target: str = ""
    path: Path | None = None
    class_name: str = ""
    style: str = ""

    def validate(self) -> None:
        """Raise :class:`ValidationError` if the edge is malformed."""
        if not self.source or not self.target:
            raise ValidationError("edge must have from and to nodes")
        if self.source == self.target:
            raise ValidationError("edge cannot connect node to itself")

    def __str__(self) -> str:
        return f"Edge({self.source} -> {self.target})"


@dataclass
class PathfindingConfig:
    """Pathfinding algorithm settings."""

    algorithm: str = ""
    heuristic: str = ""


@dataclass
class DiagramConfig:
    """Diagram-wide settings."""

    layout_type: str = ""
    layout_attempts: int = 0
    node_width: int = 0
    node_height: int = 0
    border: int = 0
    margin: int = 0
    spacing: int = 0
    path_attempts: int = 0
    path_strategy: str = ""
    pathfinding: PathfindingConfig = field(default_factory=PathfindingConfig)
    styles: dict[str, str] = field(default_factory=dict)


@dataclass
class Diagram:
    """A complete diagram specification."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    config: DiagramConfig = field(default_factory=DiagramConfig)

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any diagram invariant is broken."""
        if not self.nodes:
            raise ValidationError("must specify at least 1 node")

        for node in self.nodes:
            node.validate()

        known = {node.id for node in self.nodes}
        for edge in self.edges:
            edge.validate()
            if edge.source not in known:
                raise ValidationError(
                    f"edge references non-existent node: {edge.source}"
                )
            if edge.target not in known:
                raise ValidationError(
                    f"edge references non-existent node: {edge.target}"
                )

        cfg = self.config
        if cfg.node_width <= 0 or cfg.node_height <= 0:
            raise ValidationError("node dimensions must be positive")
        if not 0 <= cfg.margin <= 10:
            raise ValidationError("margin must be between 0 and 10")
        if not 0 < cfg.path_attempts <= 10000:
            raise ValidationError("path attempts must be between 1 and 10000")
        if not 0 < cfg.layout_attempts <= 10000:
            raise ValidationError("layout attempts must be between 1 and 10000")