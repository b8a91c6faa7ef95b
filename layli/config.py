"""Reading diagram configuration files written in YAML."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

import yaml

from layli.domain import (
    Diagram,
    DiagramConfig,
    Edge,
    Node,
    PathfindingConfig,
    Position,
)
from layli.usecases import FileReader

_TAG = "tag:yaml.org,2002:"
_NULL = _TAG + "null"
_INT = _TAG + "int"
_FLOAT = _TAG + "float"
_INT64_LIMIT = 2**63

_VALID_ALGORITHMS = ("dijkstra", "astar", "bidirectional")
_VALID_HEURISTICS = ("euclidean", "manhattan")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is invalid."""


class _Loader(yaml.SafeLoader):
    """Safe loader that also recognises exponent floats without a dot."""


_Loader.add_implicit_resolver(
    _FLOAT,
    re.compile(r"^[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?$"),
    list("-+0123456789."),
)


@dataclass
class _RawPath:
    attempts: int = 0
    strategy: str = ""
    algorithm: str = ""
    heuristic: str = ""
    class_name: str = ""


@dataclass
class _RawPosition:
    x: int = 0
    y: int = 0


@dataclass
class _RawNode:
    id: str = ""
    contents: str = ""
    position: _RawPosition = field(default_factory=_RawPosition)
    class_name: str = ""
    style: str = ""


@dataclass
class _RawEdge:
    id: str = ""
    source: str = ""
    target: str = ""
    class_name: str = ""
    style: str = ""


@dataclass
class _RawConfig:
    layout: str = ""
    layout_attempts: int = 0
    path: _RawPath = field(default_factory=_RawPath)
    nodes: list[_RawNode] = field(default_factory=list)
    edges: list[_RawEdge] = field(default_factory=list)
    node_width: int = 0
    node_height: int = 0
    border: int = 0
    margin: int = 0
    styles: dict[str, str] | None = None


def _short_tag(tag: str) -> str:
    return "!!" + tag[len(_TAG):] if tag.startswith(_TAG) else tag


class _Decoder:
    """Turns a composed YAML node tree into the raw configuration records."""

    def __init__(self, loader: _Loader) -> None:
        self._loader = loader
        self.errors: list[str] = []

    def _fail(self, node: yaml.Node, target: str) -> None:
        line = node.start_mark.line + 1
        if isinstance(node, yaml.ScalarNode):
            what = f"{_short_tag(node.tag)} `{node.value}`"
        elif isinstance(node, yaml.SequenceNode):
            what = "!!seq"
        else:
            what = "!!map"
        self.errors.append(f"line {line}: cannot unmarshal {what} into {target}")

    @staticmethod
    def _is_null(node: yaml.Node) -> bool:
        return isinstance(node, yaml.ScalarNode) and node.tag == _NULL

    def _fields(self, node: yaml.Node, target: str) -> Iterator[tuple[str, yaml.Node]]:
        if self._is_null(node):
            return
        if not isinstance(node, yaml.MappingNode):
            self._fail(node, target)
            return
        for key, value in node.value:
            if isinstance(key, yaml.ScalarNode):
                yield key.value, value

    def _fill(
        self,
        node: yaml.Node,
        target: str,
        record: Any,
        fields: dict[str, tuple[str, Callable[[yaml.Node], Any]]],
    ) -> Any:
        for key, value in self._fields(node, target):
            spec = fields.get(key)
            if spec is not None:
                attr, decode = spec
                setattr(record, attr, decode(value))
        return record

    def string(self, node: yaml.Node) -> str:
        if self._is_null(node):
            return ""
        if isinstance(node, yaml.ScalarNode):
            return node.value
        self._fail(node, "string")
        return ""

    def integer(self, node: yaml.Node) -> int:
        if self._is_null(node):
            return 0
        if isinstance(node, yaml.ScalarNode) and node.tag in (_INT, _FLOAT):
            value = self._loader.construct_object(node)
            if isinstance(value, float):
                if not math.isfinite(value):
                    self._fail(node, "int")
                    return 0
                value = int(value)
            if -_INT64_LIMIT <= value < _INT64_LIMIT:
                return value
        self._fail(node, "int")
        return 0

    def _sequence(self, node: yaml.Node, target: str) -> list[yaml.Node]:
        if self._is_null(node):
            return []
        if isinstance(node, yaml.SequenceNode):
            return list(node.value)
        self._fail(node, target)
        return []

    def styles(self, node: yaml.Node) -> dict[str, str] | None:
        if self._is_null(node):
            return None
        return {key: self.string(value) for key, value in self._fields(node, "styles")}

    def position(self, node: yaml.Node) -> _RawPosition:
        return self._fill(
            node,
            "position",
            _RawPosition(),
            {"x": ("x", self.integer), "y": ("y", self.integer)},
        )

    def path(self, node: yaml.Node) -> _RawPath:
        return self._fill(
            node,
            "path",
            _RawPath(),
            {
                "attempts": ("attempts", self.integer),
                "strategy": ("strategy", self.string),
                "algorithm": ("algorithm", self.string),
                "heuristic": ("heuristic", self.string),
                "class": ("class_name", self.string),
            },
        )

    def node(self, node: yaml.Node) -> _RawNode:
        return self._fill(
            node,
            "node",
            _RawNode(),
            {
                "id": ("id", self.string),
                "contents": ("contents", self.string),
                "position": ("position", self.position),
                "class": ("class_name", self.string),
                "style": ("style", self.string),
            },
        )

    def edge(self, node: yaml.Node) -> _RawEdge:
        return self._fill(
            node,
            "edge",
            _RawEdge(),
            {
                "id": ("id", self.string),
                "from": ("source", self.string),
                "to": ("target", self.string),
                "class": ("class_name", self.string),
                "style": ("style", self.string),
            },
        )

    def nodes(self, node: yaml.Node) -> list[_RawNode]:
        return [self.node(item) for item in self._sequence(node, "nodes")]

    def edges(self, node: yaml.Node) -> list[_RawEdge]:
        return [self.edge(item) for item in self._sequence(node, "edges")]

    def config(self, node: yaml.Node | None) -> _RawConfig:
        if node is None:
            return _RawConfig()
        return self._fill(
            node,
            "config",
            _RawConfig(),
            {
                "layout": ("layout", self.string),
                "layout-attempts": ("layout_attempts", self.integer),
                "path": ("path", self.path),
                "nodes": ("nodes", self.nodes),
                "edges": ("edges", self.edges),
                "width": ("node_width", self.integer),
                "height": ("node_height", self.integer),
                "border": ("border", self.integer),
                "margin": ("margin", self.integer),
                "styles": ("styles", self.styles),
            },
        )


def _decode(text: str | bytes) -> _RawConfig:
    loader = _Loader(text)
    try:
        try:
            root = loader.get_single_node()
        except yaml.YAMLError as exc:
            raise ConfigError(f"reading config file: yaml: {exc}") from exc
        decoder = _Decoder(loader)
        cfg = decoder.config(root)
    finally:
        loader.dispose()
    if decoder.errors:
        details = "\n  ".join(decoder.errors)
        raise ConfigError(f"reading config file: yaml: unmarshal errors:\n  {details}")
    return cfg


def _apply_defaults(cfg: _RawConfig) -> None:
    if cfg.path.attempts == 0:
        cfg.path.attempts = 20
    if not cfg.path.algorithm:
        cfg.path.algorithm = "dijkstra"
    if not cfg.path.heuristic:
        cfg.path.heuristic = "euclidean"
    if cfg.node_width == 0:
        cfg.node_width = 5
    if cfg.node_height == 0:
        cfg.node_height = 3
    if cfg.margin == 0:
        cfg.margin = 2
    if cfg.border == 0:
        cfg.border = 1
    if cfg.layout_attempts == 0:
        cfg.layout_attempts = 10
    for number, edge in enumerate(cfg.edges, start=1):
        if not edge.id:
            edge.id = f"edge-{number}"


def _validate(cfg: _RawConfig) -> None:
    if cfg.path.attempts > 10000:
        raise ConfigError("cannot specify more that 10000 path attempts")
    if cfg.path.algorithm and cfg.path.algorithm not in _VALID_ALGORITHMS:
        raise ConfigError(
            f"invalid pathfinding algorithm: {cfg.path.algorithm}. "
            "Valid options: dijkstra, astar, bidirectional"
        )
    if cfg.path.heuristic and cfg.path.heuristic not in _VALID_HEURISTICS:
        raise ConfigError(
            f"invalid heuristic: {cfg.path.heuristic}. Valid options: euclidean, manhattan"
        )
    if cfg.margin > 10:
        raise ConfigError("margin cannot be larger than 10")
    if cfg.layout_attempts > 10000:
        raise ConfigError("cannot specify more that 10000 layout attempts")
    if not cfg.nodes:
        raise ConfigError("must specify at least 1 node")
    if any(not node.id for node in cfg.nodes):
        raise ConfigError("all nodes must have an id")

    node_ids = {node.id for node in cfg.nodes}
    for edge in cfg.edges:
        if not edge.source or not edge.target:
            raise ConfigError("all edges must have a from and a to")
        if edge.source == edge.target:
            raise ConfigError("edges cannot have the same from and to")
        if edge.source not in node_ids or edge.target not in node_ids:
            raise ConfigError("all edges must have a from and a to that are valid node ids")


def _to_domain(cfg: _RawConfig) -> Diagram:
    nodes = [
        Node(
            id=n.id,
            contents=n.contents,
            position=Position(n.position.x, n.position.y),
            width=cfg.node_width,
            height=cfg.node_height,
            class_name=n.class_name,
            style=n.style,
        )
        for n in cfg.nodes
    ]
    edges = [
        Edge(
            id=e.id,
            source=e.source,
            target=e.target,
            class_name=e.class_name,
            style=e.style,
        )
        for e in cfg.edges
    ]
    return Diagram(
        nodes=nodes,
        edges=edges,
        config=DiagramConfig(
            layout_type=cfg.layout,
            layout_attempts=cfg.layout_attempts,
            node_width=cfg.node_width,
            node_height=cfg.node_height,
            border=cfg.border,
            margin=cfg.margin,
            spacing=20,
            path_attempts=cfg.path.attempts,
            path_strategy=cfg.path.strategy,
            pathfinding=PathfindingConfig(
                algorithm=cfg.path.algorithm, heuristic=cfg.path.heuristic
            ),
            styles=dict(cfg.styles) if cfg.styles is not None else {},
        ),
    )


def parse_config_text(text: str | bytes) -> Diagram:
    """Build a diagram from the text of a configuration file."""
    cfg = _decode(text)
    _apply_defaults(cfg)
    _validate(cfg)
    return _to_domain(cfg)


class YAMLParser:
    """Reads YAML configuration files through a file reader."""

    def __init__(self, reader: FileReader) -> None:
        self.reader = reader

    def parse(self, path: str) -> Diagram:
        """Read the file at ``path`` and build a diagram from it."""
        try:
            data = self.reader.read(path)
        except OSError as exc:
            raise ConfigError(f"reading config file: {exc}") from exc
        return parse_config_text(data)