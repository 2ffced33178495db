import time
from typing import Callable, Iterable, List, Optional, Sequence

import bittensor as bt
from CliqueEnum.errors import ReportingError
from CliqueEnum.graph.model import Graph
from CliqueEnum.reporting.reporter import CollectingReporter, Reporter
from CliqueEnum.solver.accumulators import CliqueHistogram
from CliqueEnum.solver.config import Algorithm, SearchConfig
from CliqueEnum.solver.partition import Partition, SearchFrame
from CliqueEnum.solver.seeds import validate_seeds

# tracer(excluded, clique prefix, candidates)
Tracer = Callable[[Sequence[int], Sequence[int], Sequence[int]], None]


def logging_tracer(graph: Graph) -> Tracer:
    def trace(excluded, clique, candidates):
        bt.logging.trace(
            " ".join(graph.label(v) for v in excluded)
            + "\t| "
            + " ".join(graph.label(v) for v in clique)
            + "\t| "
            + " ".join(graph.label(v) for v in candidates)
        )

    return trace


class CliqueEnumerator:
    """
    Enumerates the maximal cliques of a graph whose size lies in
    [config.min_size, config.max_size], seed by seed.

    Every maximal clique is found from exactly one seed: its smallest vertex.
    The histogram accumulates over all calls to enumerate_all, so disjoint
    seed lists can be run one after another on the same enumerator.
    """

    def __init__(
        self,
        graph: Graph,
        config: Optional[SearchConfig] = None,
        reporter: Optional[Reporter] = None,
        tracer: Optional[Tracer] = None,
    ):
        self.graph = graph
        self.n = graph.vertex_count()
        self.adjacent = graph.adjacent
        self.config = config or SearchConfig()
        self.reporter = reporter
        self.lb = self.config.min_size
        self.ub = self.config.upper_bound(self.n)
        if tracer is None and self.config.trace:
            tracer = logging_tracer(graph)
        self.tracer = tracer
        self.histogram = CliqueHistogram(self.n)
        self.clique: List[int] = [0] * max(self.n, 1)
        self.nodes_expanded = 0

    def enumerate_all(self, seeds: Optional[Iterable[int]] = None) -> CliqueHistogram:
        seeds = validate_seeds(range(self.n) if seeds is None else seeds, self.n)
        plain = self.config.algorithm == Algorithm.NON_PIVOTING
        expand = self._expand_plain if plain else self._expand_pivot

        start_time = time.perf_counter()
        for u in seeds:
            seed_time = time.perf_counter()
            partition = Partition.for_seed(u, self.n, self.adjacent)
            subtasks = partition.num_candidates()
            if subtasks < self.lb - 1:
                continue
            self.clique[0] = u
            if partition.ce == 0:
                # Isolated vertex: a maximal clique on its own.
                if self.lb <= 1:
                    self._found(1)
            elif plain and partition.dominated(self.adjacent):
                # A lower neighbour sees every candidate: no maximal clique starts at u.
                pass
            else:
                expand(partition, 1)
            bt.logging.debug(
                f"task {u:4d} : {subtasks} subtasks, {time.perf_counter() - seed_time:f} seconds"
            )

        bt.logging.debug(
            f"Enumerated {len(seeds)} seeds in {time.perf_counter() - start_time:.3f}s, "
            f"{self.histogram.total(self.lb)} cliques, {self.nodes_expanded} expansions"
        )
        if self.reporter is not None:
            try:
                self.reporter.on_complete(
                    self.histogram, self.n, self.graph.edge_count()
                )
            except Exception as e:
                raise ReportingError(f"Reporter failed to complete: {e}") from e
        return self.histogram

    def _found(self, size: int):
        self.histogram.record(size)
        if self.config.emit and self.reporter is not None:
            clique = self.clique[:size]
            try:
                self.reporter.on_clique_found(clique)
            except Exception as e:
                raise ReportingError(f"Reporter failed on clique {clique}: {e}") from e

    def _trace(self, old: Partition, lc: int):
        if self.tracer is not None:
            self.tracer(old.excluded(), self.clique[:lc], old.candidates())

    def _expand_plain(self, root: Partition, lc: int):
        """Tries the candidates in the order they are stored."""
        adjacent = self.adjacent
        stack = [SearchFrame(root, lc)]
        while stack:
            frame = stack[-1]
            old, lc = frame.partition, frame.lc
            if frame.pending:
                frame.pending = False
                old.ne += 1
                if old.dominated(adjacent):
                    stack.pop()
                    continue
            if old.ne >= old.ce:
                stack.pop()
                continue

            self._trace(old, lc)
            u = old.vertices[old.ne]
            new = old.restrict(adjacent)
            self.nodes_expanded += 1

            self.clique[lc] = u
            frame.pending = True
            if new.ce == 0 and lc + 1 >= self.lb:
                self._found(lc + 1)
            elif new.ne < new.ce:
                stack.append(SearchFrame(new, lc + 1))

    def _pivot_frame(self, old: Partition, lc: int) -> Optional[SearchFrame]:
        if old.ne == old.ce:
            return None
        self._trace(old, lc)
        return SearchFrame.with_pivot(old, lc, self.adjacent)

    def _expand_pivot(self, root: Partition, lc: int):
        """Branches only on the pivot and the candidates it is not adjacent to."""
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
            if lc + 1 <= self.ub:
                if new.ce == 0 and lc + 1 >= self.lb:
                    self._found(lc + 1)
                elif new.ne < new.ce:
                    child = self._pivot_frame(new, lc + 1)
                    if child is not None:
                        stack.append(child)


def enumerate_maximal_cliques(
    graph: Graph,
    min_size: int = 1,
    max_size: Optional[int] = None,
    algorithm: Algorithm = Algorithm.PIVOTING,
    seeds: Optional[Iterable[int]] = None,
    emit: bool = True,
):
    config = SearchConfig.create(
        min_size=min_size, max_size=max_size, algorithm=algorithm, emit=emit
    )
    reporter = CollectingReporter()
    enumerator = CliqueEnumerator(graph, config, reporter=reporter)
    t0 = time.perf_counter()
    histogram = enumerator.enumerate_all(seeds)
    return {
        "cliques": reporter.cliques,
        "histogram": histogram.as_dict(min_size),
        "total": histogram.total(min_size),
        "max_size": histogram.max_size(),
        "nodes_expanded": enumerator.nodes_expanded,
        "runtime_sec": time.perf_counter() - t0,
    }
