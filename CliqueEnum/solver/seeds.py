import operator
from typing import Iterable, List

from CliqueEnum.errors import InvalidSeedError


def validate_seeds(seeds: Iterable[int], n: int) -> List[int]:
    """Checks that seeds are distinct vertex ids in [0, n) and returns them as a list."""
    checked: List[int] = []
    seen = set()
    for seed in seeds:
        try:
            u = operator.index(seed)
        except TypeError as e:
            raise InvalidSeedError(f"Seed {seed!r} is not an integer vertex id") from e
        if not 0 <= u < n:
            raise InvalidSeedError(f"Seed {u} out of range for n={n}")
        if u in seen:
            raise InvalidSeedError(f"Seed {u} appears more than once")
        seen.add(u)
        checked.append(u)
    return checked


def split_seeds(n: int, workers: int, rank: int) -> List[int]:
    """Round-robin share of the vertex ids for one of `workers` independent runs."""
    if workers < 1:
        raise InvalidSeedError(f"workers must be positive, got {workers}")
    if not 0 <= rank < workers:
        raise InvalidSeedError(f"rank {rank} out of range for {workers} workers")
    return list(range(rank, n, workers))
