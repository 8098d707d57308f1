"""Directed graph of hashable nodes with DOT output."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

E = TypeVar("E", bound=Hashable)


def _ordered(items: Iterable[E]) -> list[E]:
    """Return ``items`` sorted when they can be compared, else in given order."""
    items = list(items)
    try:
        return sorted(items)  # type: ignore[type-var]
    except TypeError:
        return items


class Graph(Generic[E]):
    """A directed graph stored as a mapping from each node to its successors.

    A node added with outgoing edges, or alone, is a key of the mapping; a
    node reached only as the target of an edge is not, and counts as a sink.
    """

    def __init__(self) -> None:
        self._graph: dict[E, dict[E, None]] = {}

    def connected(self, node: E) -> set[E]:
        """Return the successors of ``node``."""
        return set(self._graph.get(node, ()))

    def incoming(self, node: E) -> set[E]:
        """Return the nodes with an edge to ``node``."""
        return {source for source, targets in self._graph.items() if node in targets}

    def edges(self) -> list[tuple[E, E]]:
        """Return every edge as a ``(source, target)`` pair, in node order."""
        return [
            (source, target)
            for source in _ordered(self._graph)
            for target in _ordered(self._graph[source])
        ]

    def nodes(self) -> set[E]:
        """Return every node, whether a source or a target of an edge."""
        found = set(self._graph)
        for targets in self._graph.values():
            found.update(targets)
        return found

    def sources(self) -> set[E]:
        """Return the added nodes that no edge points to."""
        found = set(self._graph)
        for targets in self._graph.values():
            found.difference_update(targets)
        return found

    def sinks(self) -> set[E]:
        """Return the nodes that were only ever reached as edge targets."""
        return {node for node in self.nodes() if node not in self._graph}

    def to_dot(self) -> str:
        """Return the graph in DOT format."""
        lines = [
            "digraph G {\n",
            "rankdir = TB\n",
            'node[label = "", shape = ]\n',
        ]
        lines.extend(
            f'node[label = "{node}, fontname = Helvetica", fontsize = 10];\n'
            for node in _ordered(self.nodes())
        )
        lines.extend(f"{source} -> {target};\n" for source, target in self.edges())
        lines.append("}\n")
        return "".join(lines)

    def add(self, node: E, target: E | None = None) -> None:
        """Add ``node``, and an edge from it to ``target`` when one is given."""
        targets = self._graph.setdefault(node, {})
        if target is not None:
            targets[target] = None

    def clear(self) -> None:
        """Remove every node and edge."""
        self._graph.clear()

    def erase_edge(self, node: E, target: E) -> None:
        """Remove the edge from ``node`` to ``target`` if there is one."""
        targets = self._graph.get(node)
        if targets is not None:
            targets.pop(target, None)

    def remove(self, node: E) -> None:
        """Remove ``node`` and its outgoing edges."""
        self._graph.pop(node, None)

    def has_edge(self, source: E, target: E) -> bool:
        """Tell whether there is an edge from ``source`` to ``target``."""
        return target in self._graph.get(source, ())

    def has_node(self, node: E) -> bool:
        """Tell whether ``node`` was added with ``add``."""
        return node in self._graph

    def __bool__(self) -> bool:
        return bool(self._graph)

    def __repr__(self) -> str:
        return f"Graph({self.edges()!r})"