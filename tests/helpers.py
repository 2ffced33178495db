import networkx as nx
from CliqueEnum.graph.model import CliqueGraph

TRIANGLE = CliqueGraph.from_edges(3, [(0, 1), (1, 2), (2, 0)], labels=["A", "B", "C"])
PATH = CliqueGraph.from_edges(3, [(0, 1), (1, 2)], labels=["A", "B", "C"])
EDGELESS = CliqueGraph.from_edges(3, [], labels=["A", "B", "C"])


def random_graph(n: int, p: float, seed: int) -> CliqueGraph:
    return CliqueGraph.from_networkx(nx.gnp_random_graph(n, p, seed=seed))


def nx_maximal_cliques(graph: CliqueGraph, min_size: int = 1, max_size=None):
    return {
        frozenset(c)
        for c in nx.find_cliques(graph.to_networkx())
        if len(c) >= min_size and (max_size is None or len(c) <= max_size)
    }


def complete_graph(n: int) -> CliqueGraph:
    return CliqueGraph.build(n, [[v for v in range(n) if v != u] for u in range(n)])
