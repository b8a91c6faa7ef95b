"""Strongly connected components using Tarjan's algorithm."""

from __future__ import annotations


class Graph:
    """A directed graph whose nodes are ranked into strongly connected components."""

    def __init__(self) -> None:
        self.edges: dict[str, list[str]] = {}
        self._nodes: list[str] = []

    @property
    def vertex_count(self) -> int:
        """Number of nodes that have at least one outgoing edge."""
        return len(self._nodes)

    def add_edge(self, u: str, v: str) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        if u not in self.edges:
            self._nodes.append(u)
            self.edges[u] = []
        self.edges[u].append(v)

    def rank_nodes(self) -> list[list[str]]:
        """Return the strongly connected components in topological order."""
        counter = 0
        stack: list[str] = []
        on_stack: set[str] = set()
        low_link: dict[str, int] = {}
        index_of: dict[str, int] = {}
        components: list[list[str]] = []

        def strong_connect(node: str) -> None:
            nonlocal counter
            index_of[node] = counter
            low_link[node] = counter
            counter += 1
            stack.append(node)
            on_stack.add(node)

            for neighbour in self.edges.get(node, ()):
                if neighbour not in index_of:
                    strong_connect(neighbour)
                    low_link[node] = min(low_link[node], low_link[neighbour])
                elif neighbour in on_stack:
                    low_link[node] = min(low_link[node], index_of[neighbour])

            if low_link[node] == index_of[node]:
                component: list[str] = []
                while True:
                    popped = stack.pop()
                    on_stack.discard(popped)
                    component.append(popped)
                    if popped == node:
                        break
                components.append(component)

        for node in self._nodes:
            if node not in index_of:
                strong_connect(node)

        return [list(reversed(component)) for component in reversed(components)]