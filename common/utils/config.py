import argparse

import bittensor as bt
from CliqueEnum.errors import InvalidConfigError
from CliqueEnum.graph.loader import FORMATS
from CliqueEnum.solver.config import Algorithm, SearchConfig

ALGORITHMS = ("v1", "v2", "max")


def add_args(parser: argparse.ArgumentParser):
    """
    Adds graph and search arguments to the parser.
    """
    parser.add_argument(
        "--graph.path",
        type=str,
        help="Path to the graph file.",
        default=None,
    )
    parser.add_argument(
        "--graph.format",
        type=str,
        choices=FORMATS,
        help="Graph file format, guessed from the file suffix when omitted.",
        default=None,
    )
    parser.add_argument(
        "--search.algorithm",
        type=str,
        choices=ALGORITHMS,
        help="v1: no pivoting, v2: pivoting with size bound, max: one maximum clique.",
        default="v2",
    )
    parser.add_argument(
        "--search.min_size",
        type=int,
        help="Smallest clique size to count and report.",
        default=1,
    )
    parser.add_argument(
        "--search.max_size",
        type=int,
        help="Largest clique size to explore (v2 only).",
        default=None,
    )
    parser.add_argument(
        "--search.seeds",
        type=int,
        nargs="*",
        help="Seed vertices to expand, in order. Defaults to every vertex.",
        default=None,
    )
    parser.add_argument(
        "--search.workers",
        type=int,
        help="Number of independent runs the vertex set is split across.",
        default=1,
    )
    parser.add_argument(
        "--search.rank",
        type=int,
        help="Which share of the split this run expands.",
        default=0,
    )
    parser.add_argument(
        "--search.no_emit",
        action="store_true",
        help="Only count cliques, do not print them.",
        default=False,
    )
    parser.add_argument(
        "--search.trace",
        action="store_true",
        help="Log every search frame at trace level.",
        default=False,
    )
    parser.add_argument(
        "--search.verify",
        action="store_true",
        help="Check every reported clique against the graph.",
        default=False,
    )


def config(args=None) -> "bt.Config":
    """
    Returns the configuration object for the command line.
    """
    parser = argparse.ArgumentParser(
        description="Enumerate maximal cliques within a size range, or find one maximum clique."
    )
    bt.logging.add_args(parser)
    add_args(parser)
    return bt.Config(parser, args=args)


def check_config(config: "bt.Config") -> SearchConfig:
    if not config.graph.path:
        raise InvalidConfigError("--graph.path is required")
    if config.search.verify and config.search.no_emit:
        raise InvalidConfigError(
            "--search.verify checks the reported cliques and cannot be combined with --search.no_emit"
        )
    algorithm = config.search.algorithm
    if algorithm == "max":
        algorithm = Algorithm.PIVOTING
    return SearchConfig.create(
        min_size=config.search.min_size,
        max_size=config.search.max_size,
        algorithm=algorithm,
        emit=not config.search.no_emit,
        trace=config.search.trace,
    )
