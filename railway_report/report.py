"""
HTML report assembly.

This module combines the rendered railway graphic, the commit display
records and the bundled template fragments into one self-contained HTML
document.
"""

import html
import json
import logging
import re
from typing import Mapping, Optional, TextIO

from .errors import SerializationError
from .models import CommitData
from .resources import ResourceStore, load_default_store
from .template import TemplateResolver

# Set up logging
logger = logging.getLogger("railway-report.report")

HTML_TEMPLATE = "html_template.html"
SVG_ANCHOR_ID = "railway_svg"

_ID_ATTR_RE = re.compile(r"\sid\s*=")

# characters that must not appear raw inside a <script> element
_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def ensure_svg_anchor(svg: str, anchor_id: str = SVG_ANCHOR_ID) -> str:
    """
    Give the root ``<svg>`` element an id the popup script can find.

    The id is only added when the root element has no id at all; an
    existing id is left as it is.
    """
    if f'id="{anchor_id}"' in svg or f"id='{anchor_id}'" in svg:
        return svg
    start = svg.find("<svg")
    if start < 0:
        return svg
    end = svg.find(">", start)
    if end < 0:
        return svg
    tag = svg[start:end]
    if _ID_ATTR_RE.search(tag):
        return svg
    if tag.endswith("/"):
        end -= 1
    return svg[:end] + f' id="{anchor_id}"' + svg[end:]


def serialize_commit_data(commit_data: Mapping[str, CommitData]) -> str:
    """
    Serialize commit records to JSON safe for embedding in a script.

    Raises:
        SerializationError: If a record cannot be converted to JSON
    """
    try:
        payload = {key: commit_data[key].to_dict() for key in sorted(commit_data)}
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"Failed to serialize commit data: {e}") from e
    for char, escaped in _SCRIPT_UNSAFE.items():
        text = text.replace(char, escaped)
    return text


class ReportAssembler:
    """
    Build the final HTML document for one report.

    Args:
        store: Resources the template is resolved against. Defaults to the
               bundled resources.
        template_name: Name of the top-level template resource
    """

    def __init__(self, store: Optional[ResourceStore] = None, template_name: str = HTML_TEMPLATE) -> None:
        self.resolver = TemplateResolver(store if store is not None else load_default_store())
        self.template_name = template_name

    def build_html(self, svg: str, commit_data: Mapping[str, CommitData], title: str) -> str:
        """
        Assemble the complete HTML document.

        Args:
            svg: Rendered railway graphic
            commit_data: Mapping of full commit hash -> CommitData
            title: Report title, escaped before insertion

        Returns:
            The complete HTML document

        Raises:
            ResourceNotFoundError: If the template references a missing resource
            CyclicReferenceError: If the template references itself
            SerializationError: If the commit data cannot be serialized
        """
        data = serialize_commit_data(commit_data)
        values = {
            "title": html.escape(title),
            "svg": ensure_svg_anchor(svg),
            "data": data,
        }
        document = self.resolver.render(self.template_name, values)
        logger.debug("Assembled document of %d chars for %d commits", len(document), len(commit_data))
        return document

    def write_html(self, stream: TextIO, svg: str, commit_data: Mapping[str, CommitData], title: str) -> None:
        """Build the document and write it to ``stream``; nothing is written on failure."""
        document = self.build_html(svg, commit_data, title)
        stream.write(document)
