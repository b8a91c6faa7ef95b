"""Application workflows and the ports they depend on.

A use case coordinates domain entities with external concerns such as
reading configuration, arranging nodes, routing edges and rendering. It
only talks to those concerns through the protocols defined here, so any
implementation that provides the right methods can be plugged in.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Protocol

from layli.domain import Diagram


class DiagramGenerationError(Exception):
    """Raised when one stage of diagram generation fails."""

    def __init__(self, stage: str, cause: BaseException) -> None:
        super().__init__(f"{stage}: {cause}")
        self.stage = stage
        self.cause = cause


class ConfigParser(Protocol):
    """Reads a configuration file and returns a diagram."""

    def parse(self, path: str) -> Diagram:
        """Read the file at ``path`` and build a diagram from it."""
        ...


class LayoutEngine(Protocol):
    """Positions the nodes of a diagram."""

    def arrange(self, diagram: Diagram) -> None:
        """Set the position and size of every node in ``diagram``."""
        ...


class Pathfinder(Protocol):
    """Calculates the routes of a diagram's edges."""

    def find_paths(self, diagram: Diagram) -> None:
        """Set the path of every edge in ``diagram``."""
        ...


class Renderer(Protocol):
    """Writes a positioned diagram to an output file."""

    def render(self, diagram: Diagram, output_path: str) -> None:
        """Render ``diagram`` to ``output_path``."""
        ...


class FileReader(Protocol):
    """Reads whole files."""

    def read(self, path: str) -> bytes:
        """Return the contents of the file at ``path``."""
        ...


class FileWriter(Protocol):
    """Writes whole files."""

    def write(self, path: str, data: bytes) -> None:
        """Replace the contents of the file at ``path`` with ``data``."""
        ...


@contextmanager
def _stage(name: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        raise DiagramGenerationError(name, exc) from exc


class GenerateDiagram:
    """The full pipeline: parse, validate, arrange, route and render."""

    def __init__(
        self,
        parser: ConfigParser,
        layout_engine: LayoutEngine,
        pathfinder: Pathfinder,
        renderer: Renderer,
    ) -> None:
        self.parser = parser
        self.layout_engine = layout_engine
        self.pathfinder = pathfinder
        self.renderer = renderer

    def execute(self, config_path: str, output_path: str) -> None:
        """Generate the diagram described at ``config_path`` into ``output_path``."""
        with _stage("parse config"):
            diagram = self.parser.parse(config_path)
        with _stage("validate diagram"):
            diagram.validate()
        with _stage("arrange layout"):
            self.layout_engine.arrange(diagram)
        with _stage("find paths"):
            self.pathfinder.find_paths(diagram)
        with _stage("render diagram"):
            self.renderer.render(diagram, output_path)