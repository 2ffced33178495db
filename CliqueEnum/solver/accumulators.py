from typing import Dict, List, Optional

import numpy as np


class CliqueHistogram:
    """Number of maximal cliques found, indexed by clique size."""

    def __init__(self, n: int):
        self.counts = np.zeros(n + 1, dtype=np.uint64)

    def record(self, size: int) -> None:
        self.counts[size] += 1

    def __getitem__(self, size: int) -> int:
        if size < 0 or size >= len(self.counts):
            return 0
        return int(self.counts[size])

    def as_dict(self, min_size: int = 1) -> Dict[int, int]:
        return {
            int(size): int(self.counts[size])
            for size in np.nonzero(self.counts)[0]
            if size >= min_size
        }

    def total(self, min_size: int = 1) -> int:
        return int(self.counts[min_size:].sum())

    def max_size(self) -> int:
        nonzero = np.nonzero(self.counts)[0]
        return int(nonzero[-1]) if len(nonzero) else 0

    def merge(self, other: "CliqueHistogram") -> "CliqueHistogram":
        """Adds the counts of another (worker-local) histogram into this one."""
        if len(other.counts) > len(self.counts):
            grown = np.zeros(len(other.counts), dtype=np.uint64)
            grown[: len(self.counts)] = self.counts
            self.counts = grown
        self.counts[: len(other.counts)] += other.counts
        return self

    def __repr__(self) -> str:
        return f"CliqueHistogram({self.as_dict()})"


class BestClique:
    """Largest clique seen so far. Equal sizes overwrite the incumbent."""

    def __init__(self, clique: Optional[List[int]] = None):
        self.clique: List[int] = list(clique) if clique else []

    @property
    def size(self) -> int:
        return len(self.clique)

    def offer(self, clique: List[int]) -> bool:
        if len(clique) >= self.size:
            self.clique = list(clique)
            return True
        return False

    def merge(self, other: "BestClique") -> "BestClique":
        # Ties go to the register merged last.
        self.offer(other.clique)
        return self

    def __repr__(self) -> str:
        return f"BestClique(size={self.size}, clique={self.clique})"
