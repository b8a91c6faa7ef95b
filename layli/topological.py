"""Rank nodes of a directed graph by depth, tolerating cycles."""

from __future__ import annotations


class Graph:
    """A directed graph whose nodes are ordered by their depth-first rank."""

    def __init__(self) -> None:
        self.nodes: list[str] = []
        self.edges: dict[str, list[str]] = {}
        self.visited: set[str] = set()
        self.node_ranks: dict[str, int] = {}
        self.sorted: list[str] = []

    def add_edge(self, source: str, target: str) -> None:
        """Add a directed edge from ``source`` to ``target``."""
        self.nodes.append(source)
        self.nodes.append(target)
        self.edges.setdefault(source, []).append(target)

    def rank_nodes(self) -> list[str]:
        """Return nodes ordered so that sources come before their targets."""
        self.nodes = list(dict.fromkeys(self.nodes))
        for node in self.nodes:
            if node not in self.visited:
                self._dfs(node)
        self.sorted.sort(key=lambda n: self.node_ranks.get(n, 0))
        self.sorted.reverse()
        return self.sorted

    def _dfs(self, node: str) -> int:
        if node in self.visited:
            return self.node_ranks.get(node, 0)
        self.visited.add(node)

        max_rank = max((self._dfs(n) for n in self.edges.get(node, ())), default=-1)
        self.node_ranks[node] = max_rank + 1 if max_rank >= 0 else 0
        self.sorted.append(node)
        return self.node_ranks[node]