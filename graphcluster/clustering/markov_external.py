"""Markov Clustering through the official ``mcl`` executable."""

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Hashable, List, Optional

import networkx as nx

from .base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from .markov import DEFAULT_R
from ..config.parameters import Parameters
from ..core.errors import ConfigurationError
from ..core.graph import require_undirected, vertex_index_mapping, WEIGHT, DEFAULT_WEIGHT
from ..core.types import Clustering
from ..core.registry import get_registry

logger = logging.getLogger(__name__)


class MarkovClusteringExternal(ClusteringAlgorithm):
    """
    Runs the MCL binary (https://micans.org/mcl/) on the graph.

    The graph is written in the ABC label format with vertex indices as
    labels, so arbitrary vertex objects survive the round trip. Vertices
    the binary does not report, such as isolated ones, become singletons.
    Failures of the process are propagated as
    ``subprocess.CalledProcessError``.
    """

    class Builder(ClusteringAlgorithmBuilder):
        def __init__(self, path: Optional[Path] = None, r: float = DEFAULT_R, threads: int = 1):
            """
            Args:
                path: Path to the ``mcl`` executable.
                r: Inflation parameter.
                threads: Number of threads used by the binary.
            """
            self.path = path
            self.r = r
            self.threads = threads

        def build(self, graph: nx.Graph) -> "MarkovClusteringExternal":
            return MarkovClusteringExternal(graph, self.path, self.r, self.threads)

    def __init__(self, graph: nx.Graph, path: Optional[Path], r: float = DEFAULT_R, threads: int = 1):
        if path is None:
            raise ConfigurationError("path to the mcl executable must be specified")
        if r <= 0:
            raise ConfigurationError(f"MCL inflation must be positive, got {r}")
        if threads < 1:
            raise ConfigurationError(f"thread count must be positive, got {threads}")
        super().__init__(require_undirected(graph, "MCL"))
        self.path = Path(path)
        self.r = r
        self.threads = threads

    def _compute(self) -> Clustering:
        mapping = vertex_index_mapping(self.graph)
        nodes = list(mapping)

        with tempfile.TemporaryDirectory() as tmpdir:
            input_path = os.path.join(tmpdir, "graph.abc")
            output_path = os.path.join(tmpdir, "clusters.txt")

            with open(input_path, "w") as f:
                for u, v, weight in self.graph.edges(data=WEIGHT, default=DEFAULT_WEIGHT):
                    f.write(f"{mapping[u]}\t{mapping[v]}\t{weight}\n")

            cmd = [
                str(self.path),
                input_path,
                "--abc",
                "-I", str(self.r),
                "-te", str(self.threads),
                "-o", output_path,
            ]

            logger.debug("Running %s", " ".join(cmd))
            subprocess.run(cmd, capture_output=True, text=True, check=True)

            with open(output_path, "r") as f:
                clusters = self._parse(f, nodes)

        return Clustering.of(clusters)

    @staticmethod
    def _parse(lines, nodes: List[Hashable]) -> List[List[Hashable]]:
        clusters: List[List[Hashable]] = []
        seen = set()

        for line in lines:
            line = line.strip()
            if not line:
                continue
            cluster = [nodes[int(index)] for index in line.split("\t")]
            seen.update(cluster)
            clusters.append(cluster)

        for node in nodes:
            if node not in seen:
                clusters.append([node])

        return clusters


def _markov_clustering_external(params: Parameters) -> ClusteringAlgorithmBuilder:
    params.require("bin")
    return MarkovClusteringExternal.Builder(
        path=params.get_path("bin"),
        r=params.get_float("r", DEFAULT_R),
        threads=params.get_threads("threads"),
    )


get_registry("algorithms").register("mcl-bin", factory=_markov_clustering_external)
