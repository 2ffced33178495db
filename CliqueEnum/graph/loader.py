import json
import os
from typing import Dict, List, Optional, Tuple

from CliqueEnum.errors import InvalidGraphError
from CliqueEnum.graph.model import CliqueGraph

FORMATS = ("edges", "clq", "json")


def load_edge_list(path: str) -> CliqueGraph:
    """
    Reads an edge list: one `u v` pair per line, separated by whitespace or a
    comma, `#` starts a comment line.

    When every token is an integer the ids are used as 0-indexed vertex ids.
    Otherwise tokens are vertex labels, numbered in order of first appearance.
    """
    pairs: List[Tuple[str, str]] = []
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.replace(",", " ").split()
            if len(parts) < 2:
                raise InvalidGraphError(f"{path}:{lineno}: expected 'u v', got {line!r}")
            pairs.append((parts[0], parts[1]))

    if all(u.isdigit() and v.isdigit() for u, v in pairs):
        edges = [(int(u), int(v)) for u, v in pairs]
        n = max((max(u, v) + 1 for u, v in edges), default=0)
        return CliqueGraph.from_edges(n, edges, name=os.path.basename(path))

    index: Dict[str, int] = {}
    for u, v in pairs:
        for token in (u, v):
            if token not in index:
                index[token] = len(index)
    edges = [(index[u], index[v]) for u, v in pairs]
    return CliqueGraph.from_edges(
        len(index), edges, labels=list(index), name=os.path.basename(path)
    )


def _parse_int(token: str, path: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise InvalidGraphError(f"{path}:{lineno}: expected an integer, got {token!r}") from e


def load_clq(path: str) -> CliqueGraph:
    """Reads a DIMACS `.clq` file (`p edge n m`, 1-indexed `e u v` lines)."""
    number_of_nodes: Optional[int] = None
    edges: List[Tuple[int, int]] = []
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("c"):
                continue  # skip comments or empty lines
            parts = line.split()
            if line.startswith("p"):
                if len(parts) < 4:
                    raise InvalidGraphError(f"{path}:{lineno}: malformed problem line {line!r}")
                number_of_nodes = _parse_int(parts[2], path, lineno)
            elif line.startswith("e"):
                if len(parts) < 3:
                    raise InvalidGraphError(f"{path}:{lineno}: malformed edge line {line!r}")
                u = _parse_int(parts[1], path, lineno)
                v = _parse_int(parts[2], path, lineno)
                edges.append((u - 1, v - 1))
    if number_of_nodes is None:
        raise InvalidGraphError(f"{path}: missing 'p edge' line")
    return CliqueGraph.from_edges(number_of_nodes, edges, name=os.path.basename(path))


def load_json(path: str) -> CliqueGraph:
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidGraphError(f"{path}: not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidGraphError(f"{path}: expected a JSON object, got {type(data).__name__}")
    if "adjacency_list" not in data:
        raise InvalidGraphError(f"{path}: missing 'adjacency_list'")
    adjacency_list = data["adjacency_list"]
    number_of_nodes = data.get("number_of_nodes")
    if number_of_nodes is None:
        if not isinstance(adjacency_list, list):
            raise InvalidGraphError(f"{path}: 'adjacency_list' must be a list")
        number_of_nodes = len(adjacency_list)
    return CliqueGraph.build(
        number_of_nodes,
        adjacency_list,
        labels=data.get("labels"),
        name=data.get("name", os.path.basename(path)),
    )


def load_graph(path: str, fmt: Optional[str] = None) -> CliqueGraph:
    if fmt is None:
        suffix = os.path.splitext(path)[1].lower()
        fmt = {".clq": "clq", ".json": "json"}.get(suffix, "edges")
    if fmt == "edges":
        return load_edge_list(path)
    if fmt == "clq":
        return load_clq(path)
    if fmt == "json":
        return load_json(path)
    raise InvalidGraphError(f"Unknown graph format {fmt!r}, expected one of {FORMATS}")
