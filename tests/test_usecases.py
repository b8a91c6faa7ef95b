import pytest

from layli.domain import Diagram, DiagramConfig, Edge, Node
from layli.usecases import DiagramGenerationError, GenerateDiagram


def _config():
    return DiagramConfig(
        node_width=5, node_height=5, margin=1, path_attempts=100, layout_attempts=100
    )


def _two_node_diagram():
    return Diagram(
        nodes=[Node(id="a", width=5, height=5), Node(id="b", width=5, height=5)],
        edges=[Edge(id="e1", source="a", target="b")],
        config=_config(),
    )


class Recorder:
    def __init__(self):
        self.calls = []


class FakeParser:
    def __init__(self, recorder, result=None, error=None):
        self.recorder = recorder
        self.result = result
        self.error = error

    def parse(self, path):
        self.recorder.calls.append(("parse", path))
        if self.error:
            raise self.error
        return self.result


class FakeLayout:
    def __init__(self, recorder, error=None):
        self.recorder = recorder
        self.error = error

    def arrange(self, diagram):
        self.recorder.calls.append(("arrange", diagram))
        if self.error:
            raise self.error


class FakePathfinder:
    def __init__(self, recorder, error=None):
        self.recorder = recorder
        self.error = error

    def find_paths(self, diagram):
        self.recorder.calls.append(("pathfind", diagram))
        if self.error:
            raise self.error


class FakeRenderer:
    def __init__(self, recorder, error=None):
        self.recorder = recorder
        self.error = error

    def render(self, diagram, output_path):
        self.recorder.calls.append(("render", diagram, output_path))
        if self.error:
            raise self.error


def _build(diagram, parse_error=None, layout_error=None, path_error=None, render_error=None):
    rec = Recorder()
    uc = GenerateDiagram(
        FakeParser(rec, diagram, parse_error),
        FakeLayout(rec, layout_error),
        FakePathfinder(rec, path_error),
        FakeRenderer(rec, render_error),
    )
    return uc, rec


def _names(rec):
    return [call[0] for call in rec.calls]


def test_execute_success():
    diagram = _two_node_diagram()
    uc, rec = _build(diagram)

    uc.execute("test.layli", "output.svg")

    assert rec.calls == [
        ("parse", "test.layli"),
        ("arrange", diagram),
        ("pathfind", diagram),
        ("render", diagram, "output.svg"),
    ]


def test_execute_parse_error():
    uc, rec = _build(None, parse_error=ValueError("syntax error"))

    with pytest.raises(DiagramGenerationError) as info:
        uc.execute("bad.layli", "output.svg")

    assert "parse config" in str(info.value)
    assert "syntax error" in str(info.value)
    assert info.value.stage == "parse config"
    assert _names(rec) == ["parse"]


def test_execute_validation_error():
    diagram = Diagram(nodes=[], edges=[], config=DiagramConfig())
    uc, rec = _build(diagram)

    with pytest.raises(DiagramGenerationError) as info:
        uc.execute("test.layli", "output.svg")

    assert "validate diagram" in str(info.value)
    assert _names(rec) == ["parse"]


def test_execute_layout_error():
    diagram = Diagram(nodes=[Node(id="a", width=5, height=5)], config=_config())
    uc, rec = _build(diagram, layout_error=RuntimeError("layout failed"))

    with pytest.raises(DiagramGenerationError) as info:
        uc.execute("test.layli", "output.svg")

    assert "arrange layout" in str(info.value)
    assert _names(rec) == ["parse", "arrange"]


def test_execute_pathfinding_error():
    diagram = _two_node_diagram()
    uc, rec = _build(diagram, path_error=RuntimeError("no path found"))

    with pytest.raises(DiagramGenerationError) as info:
        uc.execute("test.layli", "output.svg")

    assert "find paths" in str(info.value)
    assert _names(rec) == ["parse", "arrange", "pathfind"]


def test_execute_render_error():
    diagram = _two_node_diagram()
    cause = OSError("cannot write file")
    uc, rec = _build(diagram, render_error=cause)

    with pytest.raises(DiagramGenerationError) as info:
        uc.execute("test.layli", "output.svg")

    assert "render diagram" in str(info.value)
    assert info.value.cause is cause
    assert _names(rec) == ["parse", "arrange", "pathfind", "render"]


def test_constructor_keeps_collaborators():
    rec = Recorder()
    parser = FakeParser(rec)
    layout = FakeLayout(rec)
    pathfinder = FakePathfinder(rec)
    renderer = FakeRenderer(rec)

    uc = GenerateDiagram(parser, layout, pathfinder, renderer)

    assert uc.parser is parser
    assert uc.layout_engine is layout
    assert uc.pathfinder is pathfinder
    assert uc.renderer is renderer


def test_call_order():
    diagram = Diagram(nodes=[Node(id="a", width=5, height=5)], config=_config())
    uc, rec = _build(diagram)

    uc.execute("test.layli", "output.svg")

    assert _names(rec) == ["parse", "arrange", "pathfind", "render"]