import datetime

from railway_report.layout import commit_graph, compute_children, compute_positions, topological_order

from conftest import NOW, make_commit


def at(hours: int) -> datetime.datetime:
    return NOW - datetime.timedelta(hours=hours)


def linear_history():
    return {
        "c1": make_commit("c1", when=at(3)),
        "c2": make_commit("c2", parents=["c1"], when=at(2)),
        "c3": make_commit("c3", parents=["c2"], when=at(1)),
    }


def merge_history():
    # c1 - c2 ------- m
    #   \            /
    #    b1 ------ b2
    return {
        "c1": make_commit("c1", when=at(10)),
        "c2": make_commit("c2", parents=["c1"], when=at(8)),
        "b1": make_commit("b1", parents=["c1"], when=at(9)),
        "b2": make_commit("b2", parents=["b1"], when=at(7)),
        "m": make_commit("m", parents=["c2", "b2"], when=at(1)),
    }


#============================================
def test_children_map() -> None:
    children = compute_children(merge_history())
    assert children["c1"] == {"c2", "b1"}
    assert children["b2"] == {"m"}
    assert children["m"] == set()


#============================================
def test_children_ignores_unknown_parents() -> None:
    commits = {"c2": make_commit("c2", parents=["outside"])}
    assert compute_children(commits) == {"c2": set()}


#============================================
def test_topological_order_newest_first() -> None:
    assert topological_order(linear_history()) == ["c3", "c2", "c1"]


#============================================
def test_children_precede_parents_despite_clock_skew() -> None:
    """
    A parent dated after its child is still listed below it.
    """
    commits = {
        "p": make_commit("p", when=at(1)),
        "c": make_commit("c", parents=["p"], when=at(5)),
    }
    assert topological_order(commits) == ["c", "p"]


#============================================
def test_linear_history_single_lane() -> None:
    positions = compute_positions(linear_history())
    assert positions == {"c3": (0, 0), "c2": (0, 1), "c1": (0, 2)}


#============================================
def test_merge_opens_second_lane() -> None:
    positions = compute_positions(merge_history())
    assert positions["m"] == (0, 0)
    assert positions["c2"][0] == 0
    assert positions["b2"][0] == 1
    assert positions["b1"][0] == 1
    # the fork point returns to the first lane
    assert positions["c1"] == (0, 4)
    rows = sorted(row for _, row in positions.values())
    assert rows == [0, 1, 2, 3, 4]


#============================================
def test_empty_history() -> None:
    assert compute_positions({}) == {}


#============================================
def test_commit_graph_edges_point_to_parents() -> None:
    graph = commit_graph(merge_history())
    assert set(graph.successors("m")) == {"c2", "b2"}
    assert set(graph.predecessors("c1")) == {"c2", "b1"}
    assert graph.number_of_edges() == 5


#============================================
def test_commit_graph_drops_outside_parents() -> None:
    graph = commit_graph({"c2": make_commit("c2", parents=["outside"])})
    assert list(graph.nodes) == ["c2"]
    assert graph.number_of_edges() == 0


#============================================
def test_equal_dates_ordered_by_sha() -> None:
    when = at(1)
    commits = {sha: make_commit(sha, when=when) for sha in ("b", "a", "c")}
    assert topological_order(commits) == ["a", "b", "c"]


#============================================
def test_naive_and_aware_dates_compare_as_utc() -> None:
    """
    A naive committer date counts as UTC when ordering heads.
    """
    naive = (NOW - datetime.timedelta(hours=1)).replace(tzinfo=None)
    commits = {
        "old": make_commit("old", when=at(2)),
        "new": make_commit("new", when=naive),
    }
    assert topological_order(commits) == ["new", "old"]
