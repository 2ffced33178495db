"""Tests for CliqueEnum/solver/partition.py"""

from CliqueEnum.graph.model import CliqueGraph
from CliqueEnum.solver.partition import Partition

# 0-1, 0-2, 1-2, 2-3, 3-4
GRAPH = CliqueGraph.from_edges(5, [(0, 1), (0, 2), (1, 2), (2, 3), (3, 4)])


class TestPartition:
    def test_for_seed_splits_at_seed(self):
        partition = Partition.for_seed(2, 5, GRAPH.adjacent)
        assert partition.excluded() == [0, 1]
        assert partition.candidates() == [3]
        assert (partition.ne, partition.ce) == (2, 3)

    def test_all_candidates(self):
        partition = Partition.all_candidates(3)
        assert partition.excluded() == []
        assert partition.candidates() == [0, 1, 2]

    def test_restrict_keeps_neighbors_of_head_candidate(self):
        partition = Partition([1, 2, 3, 4], 1, 4)
        new = partition.restrict(GRAPH.adjacent)
        # u = 2: excluded 1 is a neighbour, candidates 3 is, 4 is not
        assert new.excluded() == [1]
        assert new.candidates() == [3]

    def test_restrict_drops_head_itself(self):
        partition = Partition([0, 1, 2], 0, 3)
        new = partition.restrict(GRAPH.adjacent)
        assert 0 not in new.vertices
        assert new.candidates() == [1, 2]

    def test_restrict_leaves_parent_untouched(self):
        partition = Partition([0, 1, 2], 0, 3)
        partition.restrict(GRAPH.adjacent)
        assert partition.vertices == [0, 1, 2]
        assert (partition.ne, partition.ce) == (0, 3)

    def test_swap_in(self):
        partition = Partition([0, 1, 2, 3], 1, 4)
        partition.swap_in(3)
        assert partition.vertices == [0, 3, 2, 1]

    def test_choose_pivot_candidate_counts_itself(self):
        # candidates 0, 1, 2 form a triangle: every candidate misses only itself
        partition = Partition([0, 1, 2], 0, 3)
        fixp, s, k = partition.choose_pivot(GRAPH.adjacent)
        assert (fixp, s, k) == (0, 0, 2)

    def test_choose_pivot_first_minimum_wins(self):
        # excluded 4 misses both candidates, excluded 3 misses only candidate 1
        partition = Partition([4, 3, 1, 2], 2, 4)
        fixp, s, k = partition.choose_pivot(GRAPH.adjacent)
        assert fixp == 3
        assert partition.vertices[s] == 1
        assert k == 1

    def test_choose_pivot_excluded_seeing_all_candidates(self):
        partition = Partition([2, 0, 1], 1, 3)
        fixp, s, k = partition.choose_pivot(GRAPH.adjacent)
        assert fixp == 2
        assert k == 0

    def test_next_non_neighbor(self):
        partition = Partition([0, 1, 4, 2], 1, 4)
        assert partition.next_non_neighbor(0, GRAPH.adjacent) == 2
        partition.ne = 3
        assert partition.next_non_neighbor(0, GRAPH.adjacent) is None

    def test_dominated(self):
        assert Partition([2, 0, 1], 1, 3).dominated(GRAPH.adjacent)
        assert not Partition([4, 0, 1], 1, 3).dominated(GRAPH.adjacent)

    def test_dominated_without_candidates(self):
        assert Partition([0, 1], 2, 2).dominated(GRAPH.adjacent)
