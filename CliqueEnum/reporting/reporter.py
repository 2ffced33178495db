import sys
from typing import List, Optional, Protocol, Sequence, TextIO

from CliqueEnum.graph.model import Graph
from CliqueEnum.solver.accumulators import CliqueHistogram


class Reporter(Protocol):
    def on_clique_found(self, clique: Sequence[int]) -> None: ...

    def on_complete(
        self, histogram: CliqueHistogram, vertex_count: int, edge_count: int
    ) -> None: ...


class CollectingReporter:
    """Keeps every reported clique in memory, in discovery order."""

    def __init__(self):
        self.cliques: List[List[int]] = []
        self.histogram: Optional[CliqueHistogram] = None
        self.vertex_count = 0
        self.edge_count = 0

    def on_clique_found(self, clique: Sequence[int]) -> None:
        self.cliques.append(list(clique))

    def on_complete(
        self, histogram: CliqueHistogram, vertex_count: int, edge_count: int
    ) -> None:
        self.histogram = histogram
        self.vertex_count = vertex_count
        self.edge_count = edge_count


class StreamReporter:
    """
    Writes one tab separated line of vertex labels per clique, followed by the
    size profile once the run completes.
    """

    def __init__(self, graph: Graph, stream: Optional[TextIO] = None, min_size: int = 1):
        self.graph = graph
        self.stream = stream
        self.min_size = min_size

    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def on_clique_found(self, clique: Sequence[int]) -> None:
        self._out().write("\t".join(self.graph.label(v) for v in clique) + "\n")

    def on_complete(
        self, histogram: CliqueHistogram, vertex_count: int, edge_count: int
    ) -> None:
        out = self._out()
        profile = histogram.as_dict(min_size=self.min_size)
        out.write("Size\tNumber\n")
        for size, count in profile.items():
            out.write(f"{size}\t{count}\n")
        out.write("\n")
        out.write(f"No. of vertices : {vertex_count}\n")
        out.write(f"No. of edges    : {edge_count}\n")
        out.write(f"No. of cliques  : {sum(profile.values())}\n")
        out.write(f"Max clique size : {max(profile, default=0)}\n")


class MultiReporter:
    def __init__(self, *reporters: Reporter):
        self.reporters = reporters

    def on_clique_found(self, clique: Sequence[int]) -> None:
        for reporter in self.reporters:
            reporter.on_clique_found(clique)

    def on_complete(
        self, histogram: CliqueHistogram, vertex_count: int, edge_count: int
    ) -> None:
        for reporter in self.reporters:
            reporter.on_complete(histogram, vertex_count, edge_count)
