"""Tests for CliqueEnum/reporting/reporter.py and CliqueEnum/scoring/clique_scoring.py"""

import io

from CliqueEnum.reporting.reporter import CollectingReporter, MultiReporter, StreamReporter
from CliqueEnum.scoring.clique_scoring import CliqueValidator
from CliqueEnum.solver.config import SearchConfig
from CliqueEnum.solver.enumerator import CliqueEnumerator
from helpers import PATH, TRIANGLE


class TestStreamReporter:
    def test_cliques_and_profile(self):
        out = io.StringIO()
        CliqueEnumerator(PATH, reporter=StreamReporter(PATH, out)).enumerate_all()
        assert out.getvalue() == (
            "A\tB\n"
            "B\tC\n"
            "Size\tNumber\n"
            "2\t2\n"
            "\n"
            "No. of vertices : 3\n"
            "No. of edges    : 2\n"
            "No. of cliques  : 2\n"
            "Max clique size : 2\n"
        )

    def test_counting_only_prints_profile(self):
        out = io.StringIO()
        enumerator = CliqueEnumerator(
            TRIANGLE, SearchConfig(emit=False), reporter=StreamReporter(TRIANGLE, out)
        )
        enumerator.enumerate_all()
        assert out.getvalue().startswith("Size\tNumber\n3\t1\n")

    def test_nothing_found(self):
        out = io.StringIO()
        enumerator = CliqueEnumerator(
            TRIANGLE,
            SearchConfig(min_size=4),
            reporter=StreamReporter(TRIANGLE, out, min_size=4),
        )
        enumerator.enumerate_all()
        assert "No. of cliques  : 0\n" in out.getvalue()
        assert out.getvalue().endswith("Max clique size : 0\n")


class TestMultiReporter:
    def test_fans_out(self):
        first, second = CollectingReporter(), CollectingReporter()
        CliqueEnumerator(PATH, reporter=MultiReporter(first, second)).enumerate_all()
        assert first.cliques == second.cliques == [[0, 1], [1, 2]]
        assert second.histogram.as_dict() == {2: 2}


class TestCliqueValidator:
    def test_clique_checks(self):
        validator = CliqueValidator(PATH)
        assert validator.is_clique([0, 1])
        assert not validator.is_clique([0, 2])
        assert not validator.is_clique([])
        assert not validator.is_clique([1, 1])
        assert not validator.is_clique([1, 7])

    def test_maximality(self):
        validator = CliqueValidator(TRIANGLE)
        assert not validator.is_maximal([0, 1])
        assert validator.is_maximal([0, 1, 2])

    def test_validate(self):
        validator = CliqueValidator(PATH)
        assert validator.validate([[0, 1], [1], [0, 2]]).tolist() == [1, 0, 0]

    def test_size_profile(self):
        assert CliqueValidator.size_profile([[0, 1], [2], [3, 4]]) == {1: 1, 2: 2}
