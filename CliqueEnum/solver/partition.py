from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

Adjacency = Callable[[int, int], bool]


@dataclass
class Partition:
    """
    Vertices still relevant to the current clique prefix.

    vertices[0:ne] is the excluded region (already tried, kept for pruning)
    and vertices[ne:ce] the candidate region. Each frame owns its own list.
    """

    vertices: List[int]
    ne: int
    ce: int

    @classmethod
    def for_seed(cls, u: int, n: int, adjacent: Adjacency) -> "Partition":
        """Neighbours of u below it are excluded, neighbours above it are candidates."""
        vertices = [v for v in range(u) if adjacent(v, u)]
        ne = len(vertices)
        vertices.extend(v for v in range(u + 1, n) if adjacent(u, v))
        return cls(vertices, ne, len(vertices))

    @classmethod
    def all_candidates(cls, n: int) -> "Partition":
        return cls(list(range(n)), 0, n)

    def excluded(self) -> List[int]:
        return self.vertices[: self.ne]

    def candidates(self) -> List[int]:
        return self.vertices[self.ne : self.ce]

    def num_candidates(self) -> int:
        return self.ce - self.ne

    def swap_in(self, s: int) -> None:
        """Moves the vertex at position s to the head of the candidate region."""
        old = self.vertices
        old[s], old[self.ne] = old[self.ne], old[s]

    def restrict(self, adjacent: Adjacency) -> "Partition":
        """
        Partition for the prefix extended by u = vertices[ne]: both regions are
        filtered down to the neighbours of u, u itself is dropped.
        """
        old = self.vertices
        u = old[self.ne]
        new = [v for v in old[: self.ne] if adjacent(u, v)]
        new_ne = len(new)
        new.extend(v for v in old[self.ne + 1 : self.ce] if adjacent(u, v))
        return Partition(new, new_ne, len(new))

    def choose_pivot(self, adjacent: Adjacency) -> Tuple[int, int, int]:
        """
        Picks the vertex of the whole partition with the fewest non-neighbours
        among the candidates (first one wins on ties).

        Returns (pivot, position of the first candidate to branch on, number
        of branches). A candidate pivot is its own non-neighbour and is branched
        on first, which adds one branch.
        """
        old = self.vertices
        ne, ce = self.ne, self.ce
        fixp = old[0]
        minnod = ce + 1
        nod = 0
        s = pos = 0
        for i in range(ce):
            p = old[i]
            count = 0
            for j in range(ne, ce):
                if not adjacent(p, old[j]):
                    count += 1
                    pos = j
            if count < minnod:
                fixp = p
                minnod = count
                if i < ne:
                    s = pos
                else:
                    s = i
                    nod = 1
        return fixp, s, minnod + nod

    def next_non_neighbor(self, p: int, adjacent: Adjacency) -> Optional[int]:
        """Position of the first candidate not adjacent to p, None if p sees them all."""
        old = self.vertices
        for s in range(self.ne, self.ce):
            if not adjacent(p, old[s]):
                return s
        return None

    def dominated(self, adjacent: Adjacency) -> bool:
        """True when some excluded vertex is adjacent to every candidate."""
        old = self.vertices
        remaining = old[self.ne : self.ce]
        return any(
            all(adjacent(x, y) for y in remaining) for x in old[: self.ne]
        )


class SearchFrame:
    """
    One level of a depth-first search kept on an explicit stack.

    `pending` is set once the frame has branched on vertices[ne]; the branch
    is settled (demoted to excluded) when control comes back to the frame.
    """

    __slots__ = ("partition", "lc", "pivot", "s", "k", "pending")

    def __init__(self, partition: Partition, lc: int, pivot: int = 0, s: int = 0, k: int = 0):
        self.partition = partition
        self.lc = lc
        self.pivot = pivot
        self.s = s
        self.k = k
        self.pending = False

    @classmethod
    def with_pivot(cls, partition: Partition, lc: int, adjacent: Adjacency) -> "SearchFrame":
        pivot, s, k = partition.choose_pivot(adjacent)
        return cls(partition, lc, pivot, s, k)

    def settle_pivot_branch(self, adjacent: Adjacency) -> bool:
        """
        Demotes the vertex just branched on and picks the next non-neighbour of
        the pivot. Returns False when the frame has no branch left.
        """
        self.pending = False
        self.partition.ne += 1
        if self.k > 1:
            s = self.partition.next_non_neighbor(self.pivot, adjacent)
            if s is None:
                return False
            self.s = s
        self.k -= 1
        return self.k > 0
