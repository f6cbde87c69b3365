"""
Railway layout.

Assigns every commit a ``(lane, row)`` grid position: rows run from the
newest commit at the top down to the oldest, and each line of history keeps
its own lane for as long as it lasts.
"""

from typing import Dict, List, Mapping, Optional, Set, Tuple

import networkx as nx

from .dates import as_aware
from .models import CommitInfo

Position = Tuple[int, int]


def _timestamp(commit: CommitInfo) -> float:
    signature = commit.committer or commit.author
    if signature is None:
        return 0.0
    return as_aware(signature.when).timestamp()


def commit_graph(commits: Mapping[str, CommitInfo]) -> nx.DiGraph:
    """
    Build the commit DAG with an edge from every commit to each of its parents.

    Parents outside ``commits`` are left out.
    """
    graph = nx.DiGraph()
    graph.add_nodes_from(commits)
    for sha, commit in commits.items():
        graph.add_edges_from((sha, parent) for parent in commit.parents if parent in commits)
    return graph


def compute_children(commits: Mapping[str, CommitInfo]) -> Dict[str, Set[str]]:
    """Map each commit to the set of its children present in ``commits``."""
    graph = commit_graph(commits)
    return {sha: set(graph.predecessors(sha)) for sha in graph}


def topological_order(commits: Mapping[str, CommitInfo]) -> List[str]:
    """
    Order commits newest first, never listing a parent before its children.

    Among the commits whose children have all been listed, the one with the
    latest committer date goes first; the sha breaks ties.
    """
    graph = commit_graph(commits)
    return list(nx.lexicographical_topological_sort(
        graph, key=lambda sha: (-_timestamp(commits[sha]), sha)))


def _free_lane(lanes: List[Optional[str]]) -> int:
    for index, waiting_for in enumerate(lanes):
        if waiting_for is None:
            return index
    lanes.append(None)
    return len(lanes) - 1


def compute_positions(commits: Mapping[str, CommitInfo]) -> Dict[str, Position]:
    """
    Assign a ``(lane, row)`` position to every commit.

    Args:
        commits: Mapping of full commit hash -> commit

    Returns:
        Mapping of full commit hash -> (lane, row)
    """
    # lanes[i] holds the sha lane i is reserved for, or None when free
    lanes: List[Optional[str]] = []
    positions: Dict[str, Position] = {}

    for row, sha in enumerate(topological_order(commits)):
        reserved = [index for index, waiting_for in enumerate(lanes) if waiting_for == sha]
        if reserved:
            lane = reserved[0]
            for index in reserved[1:]:
                lanes[index] = None
        else:
            lane = _free_lane(lanes)
        positions[sha] = (lane, row)
        lanes[lane] = None

        parents = [parent for parent in commits[sha].parents if parent in commits]
        for number, parent in enumerate(parents):
            if parent in lanes:
                continue
            if number == 0:
                lanes[lane] = parent
            else:
                lanes[_free_lane(lanes)] = parent

    return positions
