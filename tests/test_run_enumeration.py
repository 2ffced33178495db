"""Tests for CliqueEnum/run_enumeration.py"""

import json

from CliqueEnum.run_enumeration import main


def write_graph(tmp_path):
    path = tmp_path / "graph.txt"
    # triangle a-b-c with a pendant vertex d on c
    path.write_text("a b\nb c\na c\nc d\n")
    return str(path)


class TestMain:
    def test_enumerates_and_prints_profile(self, tmp_path, capsys):
        assert main(["--graph.path", write_graph(tmp_path)]) == 0
        out = capsys.readouterr().out
        assert "a\tb\tc\n" in out
        assert "c\td\n" in out
        assert "No. of cliques  : 2\n" in out
        assert "Max clique size : 3\n" in out

    def test_min_size_and_verify(self, tmp_path, capsys):
        path = write_graph(tmp_path)
        code = main(
            ["--graph.path", path, "--search.min_size", "3", "--search.algorithm", "v1", "--search.verify"]
        )
        assert code == 0
        out = capsys.readouterr().out
        assert "c\td\n" not in out
        assert "3\t1\n" in out

    def test_maximum_clique(self, tmp_path, capsys):
        assert main(["--graph.path", write_graph(tmp_path), "--search.algorithm", "max"]) == 0
        out = capsys.readouterr().out
        result = json.loads(out[out.index("{") : out.rindex("}") + 1])
        assert result["omega"] == 3
        assert result["witness_labels"] == ["a", "b", "c"]

    def test_missing_file(self, tmp_path):
        assert main(["--graph.path", str(tmp_path / "missing.txt")]) == 2

    def test_missing_graph_path(self):
        assert main([]) == 2

    def test_bad_seed(self, tmp_path):
        assert main(["--graph.path", write_graph(tmp_path), "--search.seeds", "9"]) == 2

    def test_malformed_clq(self, tmp_path):
        path = tmp_path / "graph.clq"
        path.write_text("p edge 3 1\ne 1 x\n")
        assert main(["--graph.path", str(path)]) == 2

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"number_of_nodes": 2}))
        assert main(["--graph.path", str(path)]) == 2

    def test_verify_with_no_emit_is_rejected(self, tmp_path):
        path = write_graph(tmp_path)
        assert main(["--graph.path", path, "--search.verify", "--search.no_emit"]) == 2
