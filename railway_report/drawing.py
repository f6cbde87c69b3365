"""
SVG drawing of the railway diagram.

Commits become circles at their layout position, parent links become lane
coloured lines, and branch heads, tags and commit summaries are written as
text beside the graph. Every commit circle uses the full commit hash as its
id; that is what the popup script looks up.
"""

import html
from typing import List, Mapping, Set, Tuple

from .models import CommitInfo

LANE_WIDTH = 16
ROW_HEIGHT = 24
PADDING = 16
NODE_RADIUS = 5
CHAR_WIDTH = 7
SUMMARY_LENGTH = 72

LANE_COLORS = (
    "#4e79a7", "#f28e2b", "#e15759", "#76b7b2",
    "#59a14f", "#edc948", "#b07aa1", "#ff9da7",
)


def _lane_color(lane: int) -> str:
    return LANE_COLORS[lane % len(LANE_COLORS)]


def _center(position: Tuple[int, int]) -> Tuple[int, int]:
    lane, row = position
    return PADDING + lane * LANE_WIDTH, PADDING + row * ROW_HEIGHT


def _edge_path(child: Tuple[int, int], parent: Tuple[int, int], bend_at_child: bool) -> str:
    x1, y1 = child
    x2, y2 = parent
    if x1 == x2:
        return f"M {x1} {y1} L {x2} {y2}"
    half = ROW_HEIGHT // 2
    if bend_at_child:
        return f"M {x1} {y1} C {x1} {y1 + half} {x2} {y1 + half} {x2} {y1 + ROW_HEIGHT} L {x2} {y2}"
    return f"M {x1} {y1} L {x1} {y2 - ROW_HEIGHT} C {x1} {y2 - half} {x2} {y2 - half} {x2} {y2}"


def _shorten(text: str, limit: int = SUMMARY_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 1].rstrip() + "…"


def draw_railway(
    commits: Mapping[str, CommitInfo],
    positions: Mapping[str, Tuple[int, int]],
    heads: Mapping[str, List[str]],
    tags: Mapping[str, List[str]],
    children: Mapping[str, Set[str]],
) -> str:
    """
    Draw positioned commits as an SVG document.

    Args:
        commits: Mapping of full commit hash -> commit
        positions: Mapping of full commit hash -> (lane, row)
        heads: Mapping of commit hash -> branch names pointing at it
        tags: Mapping of commit hash -> tag names pointing at it
        children: Mapping of commit hash -> hashes of its children

    Returns:
        SVG markup. The root element has no id.
    """
    placed = [sha for sha in commits if sha in positions]
    lane_count = max((positions[sha][0] for sha in placed), default=0) + 1
    row_count = max((positions[sha][1] for sha in placed), default=-1) + 1
    text_x = PADDING + lane_count * LANE_WIDTH

    edges: List[str] = []
    nodes: List[str] = []
    labels: List[str] = []
    longest = 0

    for sha in sorted(placed, key=lambda s: positions[s][1]):
        commit = commits[sha]
        lane, _ = positions[sha]
        x, y = _center(positions[sha])
        parents = [parent for parent in commit.parents if parent in positions]
        is_merge = len(parents) > 1

        for number, parent in enumerate(parents):
            merge_edge = is_merge and number > 0
            color = _lane_color(positions[parent][0] if merge_edge else lane)
            path = _edge_path((x, y), _center(positions[parent]), merge_edge)
            edges.append(f'<path d="{path}" stroke="{color}" stroke-width="2" fill="none"/>')

        classes = ["commit"]
        if is_merge:
            classes.append("merge")
        if len(children.get(sha, ())) > 1:
            classes.append("fork")
        fill = "#ffffff" if is_merge else _lane_color(lane)
        nodes.append(
            f'<circle id="{html.escape(sha)}" class="{" ".join(classes)}" cx="{x}" cy="{y}" r="{NODE_RADIUS}" '
            f'fill="{fill}" stroke="{_lane_color(lane)}" stroke-width="2" tabindex="0"/>'
        )

        parts: List[str] = []
        line = ""
        for kind, names in (("head", heads.get(sha, [])), ("tag", tags.get(sha, []))):
            for name in names:
                parts.append(f'<tspan class="ref {kind}">[{html.escape(name)}]</tspan> ')
                line += f"[{name}] "
        summary = _shorten(commit.summary)
        parts.append(f'<tspan class="summary">{html.escape(summary)}</tspan>')
        line += summary
        longest = max(longest, len(line))
        labels.append(f'<text x="{text_x}" y="{y + 4}">{"".join(parts)}</text>')

    width = text_x + longest * CHAR_WIDTH + PADDING
    height = 2 * PADDING + max(row_count - 1, 0) * ROW_HEIGHT
    return "\n".join([
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
        '<g class="edges">', *edges, "</g>",
        '<g class="nodes">', *nodes, "</g>",
        '<g class="labels">', *labels, "</g>",
        "</svg>",
    ])

