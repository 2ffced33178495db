import json
import sys
import time

import bittensor as bt
from CliqueEnum import enumerator_int_version, enumerator_version
from CliqueEnum.errors import (
    InvalidConfigError,
    InvalidGraphError,
    InvalidSeedError,
    ReportingError,
)
from CliqueEnum.graph.loader import load_graph
from CliqueEnum.reporting.reporter import (
    CollectingReporter,
    MultiReporter,
    StreamReporter,
)
from CliqueEnum.scoring.clique_scoring import CliqueValidator
from CliqueEnum.solver.enumerator import CliqueEnumerator
from CliqueEnum.solver.max_clique_solver import find_maximum_clique
from CliqueEnum.solver.seeds import split_seeds
from common.utils.config import check_config, config


def main(argv=None) -> int:
    try:
        cfg = config(argv)
        search_config = check_config(cfg)
    except InvalidConfigError as e:
        bt.logging.error(f"Invalid configuration: {e}")
        return 2

    bt.logging.set_config(config=cfg.logging)
    if search_config.trace:
        bt.logging.set_trace(True)
    bt.logging.info(f"CliqueEnum {enumerator_version} ({enumerator_int_version})")

    try:
        graph = load_graph(cfg.graph.path, cfg.graph.format)
        bt.logging.info(
            f"Loaded {cfg.graph.path}: {graph.vertex_count()} vertices, {graph.edge_count()} edges"
        )
        seeds = cfg.search.seeds
        if seeds is None and cfg.search.workers > 1:
            seeds = split_seeds(
                graph.vertex_count(), cfg.search.workers, cfg.search.rank
            )

        if cfg.search.algorithm == "max":
            result = find_maximum_clique(graph, seeds)
            result["witness_labels"] = [graph.label(v) for v in result["witness"]]
            sys.stdout.write(json.dumps(result, indent=2) + "\n")
            cliques = [result["witness"]] if result["witness"] else []
        else:
            collector = CollectingReporter()
            reporter = StreamReporter(graph, min_size=search_config.min_size)
            if cfg.search.verify:
                reporter = MultiReporter(reporter, collector)
            enumerator = CliqueEnumerator(graph, search_config, reporter=reporter)
            start_time = time.perf_counter()
            histogram = enumerator.enumerate_all(seeds)
            bt.logging.info(
                f"Found {histogram.total(search_config.min_size)} maximal cliques "
                f"in {time.perf_counter() - start_time:.3f}s"
            )
            cliques = collector.cliques
    except (FileNotFoundError, InvalidGraphError, InvalidSeedError) as e:
        bt.logging.error(f"Invalid input: {e}")
        return 2
    except ReportingError as e:
        bt.logging.error(f"Output failed: {e}")
        return 1

    if cfg.search.verify:
        valid = CliqueValidator(graph).validate(cliques)
        if valid.all():
            bt.logging.success(f"All {len(valid)} cliques are valid maximal cliques")
        else:
            bt.logging.warning(
                f"{int(len(valid) - valid.sum())} of {len(valid)} cliques are not maximal cliques"
            )
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
