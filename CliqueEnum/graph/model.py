from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

import networkx as nx
from CliqueEnum.errors import InvalidGraphError
from pydantic import BaseModel, Field, PrivateAttr, ValidationError, model_validator


class Graph(Protocol):
    """Read-only view of an undirected graph consumed by the clique searches."""

    def vertex_count(self) -> int: ...

    def edge_count(self) -> int: ...

    def adjacent(self, u: int, v: int) -> bool: ...

    def label(self, v: int) -> str: ...


class CliqueGraph(BaseModel):
    name: str = ""
    number_of_nodes: int = Field(ge=0)
    adjacency_list: List[List[int]]
    labels: Optional[List[str]] = None

    _neighbors: List[set] = PrivateAttr(default_factory=list)
    _sorted_neighbors: List[Tuple[int, ...]] = PrivateAttr(default_factory=list)
    _num_edges: int = PrivateAttr(default=0)

    @model_validator(mode="after")
    def _check_adjacency(self) -> "CliqueGraph":
        n = self.number_of_nodes
        if len(self.adjacency_list) != n:
            raise ValueError(
                f"adjacency_list has {len(self.adjacency_list)} rows for {n} nodes"
            )
        if self.labels is not None and len(self.labels) != n:
            raise ValueError(f"{len(self.labels)} labels given for {n} nodes")
        for u, row in enumerate(self.adjacency_list):
            for v in row:
                if not 0 <= v < n:
                    raise ValueError(f"Edge ({u},{v}) out of bounds for n={n}")
                if u == v:
                    raise ValueError(f"Self loop on vertex {u}")
        return self

    def model_post_init(self, __context) -> None:
        # Bad entries are skipped here; _check_adjacency rejects them.
        # Asymmetric input is symmetrised.
        n = self.number_of_nodes
        neighbors = [set() for _ in range(n)]
        for u, row in enumerate(self.adjacency_list[:n]):
            for v in row:
                if 0 <= v < n and v != u:
                    neighbors[u].add(v)
                    neighbors[v].add(u)
        self._neighbors = neighbors
        self._sorted_neighbors = [tuple(sorted(s)) for s in neighbors]
        self._num_edges = sum(len(s) for s in neighbors) // 2

    @classmethod
    def build(
        cls,
        number_of_nodes: int,
        adjacency_list: List[List[int]],
        labels: Optional[List[str]] = None,
        name: str = "",
    ) -> "CliqueGraph":
        try:
            return cls(
                name=name,
                number_of_nodes=number_of_nodes,
                adjacency_list=adjacency_list,
                labels=labels,
            )
        except ValidationError as e:
            raise InvalidGraphError(str(e)) from e

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Tuple[int, int]],
        labels: Optional[List[str]] = None,
        name: str = "",
    ) -> "CliqueGraph":
        if n < 0:
            raise InvalidGraphError(f"Negative vertex count {n}")
        adjacency_list: List[List[int]] = [[] for _ in range(n)]
        for u, v in edges:
            if not (0 <= u < n and 0 <= v < n):
                raise InvalidGraphError(f"Edge ({u},{v}) out of bounds for n={n}")
            adjacency_list[u].append(v)
        return cls.build(n, adjacency_list, labels=labels, name=name)

    @classmethod
    def from_networkx(cls, G: nx.Graph, name: str = "") -> "CliqueGraph":
        """
        Converts a networkx graph. Nodes are renumbered in iteration order and
        their original names are kept as display labels.
        """
        nodes = list(G.nodes())
        index = {node: i for i, node in enumerate(nodes)}
        adjacency_list = [
            [index[w] for w in G.neighbors(node) if w != node] for node in nodes
        ]
        labels = [str(node) for node in nodes]
        return cls.build(len(nodes), adjacency_list, labels=labels, name=name)

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(range(self.number_of_nodes))
        for u in range(self.number_of_nodes):
            G.add_edges_from((u, v) for v in self._sorted_neighbors[u] if u < v)
        return G

    def vertex_count(self) -> int:
        return self.number_of_nodes

    def edge_count(self) -> int:
        return self._num_edges

    def adjacent(self, u: int, v: int) -> bool:
        return v in self._neighbors[u]

    def neighbors(self, v: int) -> Sequence[int]:
        """Neighbours of v in increasing id order."""
        return self._sorted_neighbors[v]

    def degree(self, v: int) -> int:
        return len(self._neighbors[v])

    def label(self, v: int) -> str:
        if self.labels is None:
            return str(v)
        return self.labels[v]
