# layli

Building blocks for box-and-arrow diagrams laid out on a grid:

- `layli.domain`: the diagram model. `Diagram`, `DiagramConfig`,
  `PathfindingConfig`, `Node`, `Edge`, `Path`, `Position` and `Bounds`, plus
  the `LayoutType`, `PathfindingAlgorithm` and `PathfindingHeuristic`
  enumerations. `validate()` on a diagram, node or edge raises
  `ValidationError` when an invariant is broken.
- `layli.config`: `YAMLParser` and `parse_config_text`, which read a YAML
  diagram description, apply defaults, check limits and raise `ConfigError`
  on bad input.
- `layli.tarjan.Graph`: strongly connected components in topological order.
- `layli.topological.Graph`: nodes ordered by depth so that sources come
  before their targets; cycles are tolerated.
- `layli.usecases`: the `GenerateDiagram` workflow and the protocols it
  depends on (`ConfigParser`, `LayoutEngine`, `Pathfinder`, `Renderer`,
  `FileReader`, `FileWriter`).
- `layli.filesystem`: `OSFileReader` and `OSFileWriter` (files are created
  with mode 0644).
- `layli.random_service`: a lock-protected, seedable `Shuffler` and a
  module-level `shuffle` function.

## Installation

```
pip install .
```

## Configuration files

A diagram is described in YAML:

```yaml
layout: flow-square
width: 5
height: 3
margin: 2
border: 1
path:
  attempts: 20
  algorithm: dijkstra
nodes:
  - id: a
    contents: "Hello"
  - id: b
    contents: "World"
edges:
  - from: a
    to: b
styles:
  ".highlight": "fill: yellow;"
```

Unset values fall back to: node width 5, height 3, margin 2, border 1,
20 path attempts, 10 layout attempts, the `dijkstra` algorithm and the
`euclidean` heuristic; spacing is always 20. Edges without an `id` are named
`edge-1`, `edge-2`, … by position. Path and layout attempts above 10000, a
margin above 10, an unknown algorithm or heuristic, no nodes, a node without
an id, and edges that are missing an end, loop on one node or name an unknown
node are all rejected with `ConfigError`. In the resulting model an edge's
`from` and `to` are held as `Edge.source` and `Edge.target`.

```python
from layli.config import YAMLParser, parse_config_text
from layli.filesystem import OSFileReader

diagram = YAMLParser(OSFileReader()).parse("diagram.layli")
diagram.validate()

with open("diagram.layli") as handle:
    same = parse_config_text(handle.read())
```

## Generating a diagram

`GenerateDiagram(parser, layout_engine, pathfinder, renderer).execute(config_path, output_path)`
parses, validates, arranges, routes and renders in that order. A failure in
any stage is raised as `DiagramGenerationError`, whose `stage` is one of
`"parse config"`, `"validate diagram"`, `"arrange layout"`, `"find paths"`
or `"render diagram"` and whose `cause` is the original exception.

## Graph ranking

```python
from layli.tarjan import Graph

g = Graph()
g.add_edge("A", "B")
g.add_edge("B", "A")
g.add_edge("B", "C")
print(g.rank_nodes())   # [['A', 'B'], ['C']]
```

```python
from layli.topological import Graph

g = Graph()
g.add_edge("A", "B")
print(g.rank_nodes())   # ['A', 'B']
```

## Deterministic shuffling

`Shuffler(seed).shuffle(items)` shuffles a list in place; the same seed gives
the same order. `layli.random_service.shuffle(items)` uses a shared shuffler;
when the environment variable `LAYLI_TEST_SEED` is set, it reseeds with a
fixed value on every call, so results repeat.

## What this package does not do

There is no layout engine, pathfinder or renderer here, and no command-line
tool. `GenerateDiagram` runs only with implementations of `LayoutEngine`,
`Pathfinder` and `Renderer` that you supply; the package itself does not
position nodes, route edges or produce SVG or image output.

## Running the tests

```
pip install .[test]
pytest
```