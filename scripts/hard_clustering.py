#!/usr/bin/env python3
"""
Cluster a small example graph with every hard clustering algorithm.

Usage:
    python scripts/hard_clustering.py
"""

import networkx as nx

from graphcluster import AlgorithmProvider
from graphcluster.clustering import SpectralClustering
from graphcluster.points import KMeansClusterer


def build_graph() -> nx.MultiGraph:
    graph = nx.MultiGraph()
    graph.add_nodes_from(["a", "b", "c", "d", "e"])
    graph.add_edge("a", "b")
    graph.add_edge("a", "c")
    graph.add_edge("a", "c")
    graph.add_edge("d", "e")
    return graph


def format_clusters(clustering) -> str:
    return str([sorted(cluster) for cluster in clustering])


def main():
    graph = build_graph()
    print(f"Graph: {sorted(graph.nodes())}, edges: {list(graph.edges())}")

    for name, params in [
        ("empty", None),
        ("singleton", None),
        ("together", None),
        ("components", None),
        ("cw", {"mode": "top"}),
        ("mcl", {"e": "2", "r": "2.0"}),
    ]:
        clustering = AlgorithmProvider(name, params)(graph).get_clustering()
        print(f"{name} clusters: {format_clusters(clustering)}")

    spectral = SpectralClustering.Builder(clusterer=KMeansClusterer(2), k=2).build(graph)
    print(f"spectral clusters (k=2): {format_clusters(spectral.get_clustering())}")


if __name__ == "__main__":
    main()
