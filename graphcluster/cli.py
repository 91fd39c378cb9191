"""Command-line interface for graphcluster."""

import argparse
import logging
import sys
from typing import Dict, List, Optional

import networkx as nx
import pandas as pd

from .config.schema import load_config, validate_config, to_clustering_config
from .core.errors import GraphClusterError
from .core.graph import WEIGHT
from .core.random import set_seed
from .provider import AlgorithmProvider, available_algorithms


def load_graph(path: str, directed: bool = False) -> nx.Graph:
    """
    Read a tab-separated edge list into a multigraph.

    Each line holds ``source``, ``target`` and an optional ``weight``
    (default 1.0). Repeated pairs are kept as parallel edges.
    """
    edges = pd.read_csv(path, sep="\t", header=None, comment="#", dtype=str)
    if edges.shape[1] < 2:
        raise ValueError(f"{path}: expected at least two columns")

    edges = edges.iloc[:, :3]
    edges.columns = ["source", "target", WEIGHT][:edges.shape[1]]
    if WEIGHT in edges.columns:
        edges[WEIGHT] = edges[WEIGHT].astype(float).fillna(1.0)
    else:
        edges[WEIGHT] = 1.0

    graph = nx.MultiDiGraph() if directed else nx.MultiGraph()
    for row in edges.itertuples(index=False):
        graph.add_edge(row.source, row.target, weight=row.weight)
    return graph


def parse_params(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse ``key=value`` arguments."""
    params = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        params[key] = value
    return params


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="graphcluster: graph clustering with interchangeable algorithms"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    run_parser = subparsers.add_parser("run", help="Cluster a graph")
    run_parser.add_argument("edges", help="Path to tab-separated edge list")
    run_parser.add_argument("-a", "--algorithm", default="components", help="Algorithm name")
    run_parser.add_argument("-p", "--param", action="append", metavar="KEY=VALUE", help="Algorithm parameter")
    run_parser.add_argument("-c", "--config", help="Path to config YAML file (overrides -a/-p)")
    run_parser.add_argument("--directed", action="store_true", help="Treat edges as directed")
    run_parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    run_parser.add_argument("--seed", type=int, help="Global random seed for randomized algorithms")

    subparsers.add_parser("list", help="List available algorithms")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        if args.seed is not None:
            set_seed(args.seed)

        if args.config:
            config = load_config(args.config)
            errors = validate_config(config)
            if errors:
                print("Configuration errors:", file=sys.stderr)
                for e in errors:
                    print(f"  - {e}", file=sys.stderr)
                return 1
            clustering_config = to_clustering_config(config)
            algorithm, params = clustering_config.name, clustering_config.params
        else:
            algorithm, params = args.algorithm, parse_params(args.param)

        try:
            provider = AlgorithmProvider(algorithm, params)
            graph = load_graph(args.edges, directed=args.directed)
            clustering = provider(graph).get_clustering()
        except (GraphClusterError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        for i, cluster in enumerate(clustering):
            members = ", ".join(sorted(str(node) for node in cluster))
            print(f"{i}\t{len(cluster)}\t{members}")

    elif args.command == "list":
        print("Available algorithms:")
        for name in available_algorithms():
            print(f"  - {name}")

    else:
        parser.print_help()

    return 0


if __name__ == "__main__":
    sys.exit(main())
