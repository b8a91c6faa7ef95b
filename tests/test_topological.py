from layli.topological import Graph


def test_from_is_to_left():
    g = Graph()
    g.add_edge("A", "B")

    assert g.rank_nodes() == ["A", "B"]


def test_handles_cycle():
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("C", "A")

    assert g.rank_nodes() == ["A", "B", "C"]


def test_chain_is_ordered():
    g = Graph()
    g.add_edge("C", "D")
    g.add_edge("A", "B")
    g.add_edge("B", "C")

    result = g.rank_nodes()
    assert result.index("A") < result.index("B") < result.index("C") < result.index("D")


def test_duplicate_nodes_removed():
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    g.add_edge("B", "C")

    result = g.rank_nodes()
    assert sorted(result) == ["A", "B", "C"]
    assert g.nodes == ["A", "B", "C"]


def test_empty_graph():
    assert Graph().rank_nodes() == []