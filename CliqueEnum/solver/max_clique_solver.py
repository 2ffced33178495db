import time
from typing import Iterable, List, Optional

import bittensor as bt
from CliqueEnum.graph.model import Graph
from CliqueEnum.solver.accumulators import BestClique
from CliqueEnum.solver.enumerator import Tracer
from CliqueEnum.solver.partition import Partition, SearchFrame
from CliqueEnum.solver.seeds import validate_seeds


class MaxCliqueSolver:
    def __init__(self, graph: Graph, tracer: Optional[Tracer] = None):
        self.graph = graph
        self.n = graph.vertex_count()
        self.adjacent = graph.adjacent
        self.tracer = tracer
        self.clique: List[int] = [0] * max(self.n, 1)
        self.best = BestClique()
        self.nodes_expanded = 0

    def max_clique(
        self, seeds: Optional[Iterable[int]] = None, best: Optional[BestClique] = None
    ) -> BestClique:
        """
        Branch and bound search for one maximum clique.

        Without seeds the search starts from the empty clique with every vertex
        as a candidate. With seeds each seed is expanded like the enumeration
        driver does, which finds the maximum over the cliques whose smallest
        vertex is a seed. Passing a register carries an incumbent across calls.
        """
        self.best = best if best is not None else BestClique()
        if seeds is None:
            if self.n:
                self._expand_max(Partition.all_candidates(self.n), 0)
            return self.best

        for u in validate_seeds(seeds, self.n):
            partition = Partition.for_seed(u, self.n, self.adjacent)
            self.clique[0] = u
            if partition.ce == 0:
                self.best.offer([u])
            elif partition.num_candidates() + 1 >= self.best.size:
                self._expand_max(partition, 1)
        return self.best

    def _expand_max(self, root: Partition, lc: int):
        adjacent = self.adjacent
        first = self._pivot_frame(root, lc)
        stack = [first] if first is not None else []
        while stack:
            frame = stack[-1]
            if frame.pending and not frame.settle_pivot_branch(adjacent):
                stack.pop()
                continue
            if frame.k <= 0:
                stack.pop()
                continue

            old, lc = frame.partition, frame.lc
            old.swap_in(frame.s)
            u = old.vertices[old.ne]
            new = old.restrict(adjacent)
            self.nodes_expanded += 1

            self.clique[lc] = u
            frame.pending = True
            if new.ce == 0 and lc + 1 >= self.best.size:
                self.best.offer(self.clique[: lc + 1])
                bt.logging.trace(f"max size {lc + 1}: {self.best.clique}")
            elif new.ne < new.ce and new.num_candidates() + lc + 1 >= self.best.size:
                child = self._pivot_frame(new, lc + 1)
                if child is not None:
                    stack.append(child)

    def _pivot_frame(self, old: Partition, lc: int) -> Optional[SearchFrame]:
        if old.ne == old.ce:
            return None
        if self.tracer is not None:
            self.tracer(old.excluded(), self.clique[:lc], old.candidates())
        return SearchFrame.with_pivot(old, lc, self.adjacent)


def find_maximum_clique(graph: Graph, seeds: Optional[Iterable[int]] = None):
    t0 = time.perf_counter()
    solver = MaxCliqueSolver(graph)
    best = solver.max_clique(seeds)
    runtime = time.perf_counter() - t0
    bt.logging.info(
        f"Maximum clique of size {best.size} found in {runtime:.3f}s "
        f"({solver.nodes_expanded} expansions)"
    )
    return {
        "omega": best.size,
        "witness": sorted(best.clique),
        "nodes_expanded": solver.nodes_expanded,
        "runtime_sec": runtime,
    }
