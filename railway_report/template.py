"""
Template resolution.

Templates are plain text with two kinds of markers:

- ``{{ name }}`` references, replaced by the (recursively expanded) content
  of the named resource;
- ``((% key %))`` placeholders, replaced by values computed for one report.

References are expanded first, so placeholders may live in included
fragments. Nothing else is interpreted: there are no conditionals, loops or
expressions.
"""

import logging
import re
from typing import Mapping, Optional, Tuple

from .errors import CyclicReferenceError
from .resources import ResourceStore

# Set up logging
logger = logging.getLogger("railway-report.template")

REFERENCE_OPEN = "{{"
REFERENCE_CLOSE = "}}"

PLACEHOLDER_RE = re.compile(r"\(\(% (\w+) %\)\)")


def placeholder(key: str) -> str:
    """Return the literal placeholder marker for ``key``."""
    return f"((% {key} %))"


def replace_placeholders(text: str, values: Mapping[str, str]) -> str:
    """
    Replace every ``((% key %))`` marker whose key is in ``values``.

    The buffer is scanned once, so substituted values are never scanned again
    and the result does not depend on the order of the keys. Markers with
    unknown keys are left untouched.
    """
    def _substitute(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key in values:
            return values[key]
        return match.group(0)

    return PLACEHOLDER_RE.sub(_substitute, text)


class TemplateResolver:
    """
    Expand resource references against a ResourceStore.

    Args:
        store: Resources that references are resolved against
    """

    def __init__(self, store: ResourceStore) -> None:
        self.store = store

    def replace_references(self, text: str) -> str:
        """
        Expand all ``{{ name }}`` references in ``text``, depth first.

        Each reference is spliced in at the offset where it was found, so the
        same reference may occur any number of times. Scanning resumes after
        the inserted content.

        Raises:
            ResourceNotFoundError: If a referenced resource does not exist
            CyclicReferenceError: If a resource includes itself
        """
        return self._expand(text, ())

    def _expand(self, text: str, chain: Tuple[str, ...]) -> str:
        result = text
        begin = 0
        while True:
            start = result.find(REFERENCE_OPEN, begin)
            if start < 0:
                break
            end = result.find(REFERENCE_CLOSE, start + len(REFERENCE_OPEN))
            if end < 0:
                break
            name = result[start + len(REFERENCE_OPEN):end].strip()
            if name in chain:
                raise CyclicReferenceError(chain + (name,))

            content = self._expand(self.store.get(name), chain + (name,))
            logger.debug("Expanded reference %s (%d chars)", name, len(content))

            result = result[:start] + content + result[end + len(REFERENCE_CLOSE):]
            begin = start + len(content)
        return result

    def render(self, name: str, values: Optional[Mapping[str, str]] = None) -> str:
        """
        Load a template, expand its references and fill in its placeholders.

        Args:
            name: Name of the top-level template resource
            values: Placeholder values keyed by placeholder name

        Returns:
            The fully resolved document
        """
        expanded = self._expand(self.store.get(name), (name,))
        return replace_placeholders(expanded, values or {})
