from collections import Counter
from typing import Dict, List, Sequence

import numpy as np
from CliqueEnum.graph.model import Graph


class CliqueValidator:
    def __init__(self, graph: Graph):
        """
        Checks search results against the graph they were computed on.

        Args:
        - graph (Graph): The graph to validate against.
        """
        self.graph = graph

    def is_clique(self, nodes: Sequence[int]) -> bool:
        """
        Returns True if the given nodes are distinct, in range and pairwise adjacent.
        """
        node_set = set(nodes)
        # 0. Check if the node set is empty
        if len(node_set) == 0:
            return False

        # 1. Check for duplicates or out-of-range nodes
        if len(node_set) != len(nodes):
            return False
        if not node_set.issubset(range(self.graph.vertex_count())):
            return False

        # 2. Check if all pairs of nodes are connected
        for i in range(len(nodes)):
            for j in range(i + 1, len(nodes)):
                if not self.graph.adjacent(nodes[i], nodes[j]):
                    return False
        return True

    def is_maximal(self, nodes: Sequence[int]) -> bool:
        """
        Returns True if no vertex outside `nodes` is adjacent to all of them.
        """
        node_set = set(nodes)
        for candidate in range(self.graph.vertex_count()):
            if candidate in node_set:
                continue
            if all(self.graph.adjacent(candidate, v) for v in nodes):
                return False  # Clique can be extended
        return True

    def is_valid_maximal_clique(self, nodes: Sequence[int]) -> bool:
        return self.is_clique(nodes) and self.is_maximal(nodes)

    def validate(self, cliques: List[Sequence[int]]) -> np.ndarray:
        """
        Returns a 0/1 array, one entry per clique.
        """
        return np.array(
            [1 if self.is_valid_maximal_clique(c) else 0 for c in cliques],
            dtype=np.int8,
        )

    @staticmethod
    def size_profile(cliques: List[Sequence[int]]) -> Dict[int, int]:
        counts = Counter(len(c) for c in cliques)
        return dict(sorted(counts.items()))
