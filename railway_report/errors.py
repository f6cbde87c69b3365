"""
Exceptions raised while building a railway report.
"""

from typing import Sequence


class ReportError(RuntimeError):
    """Base class for all report generation failures."""


class ResourceNotFoundError(ReportError):
    """A referenced resource does not exist in the resource store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Resource not found: {name}")
        self.name = name


class CyclicReferenceError(ReportError):
    """A resource references itself, directly or through other resources."""

    def __init__(self, chain: Sequence[str]) -> None:
        super().__init__("Cyclic resource reference: " + " -> ".join(chain))
        self.chain = list(chain)


class SerializationError(ReportError):
    """Commit data could not be converted to its embedded JSON form."""


class FetchError(ReportError):
    """Repository data could not be fetched from GitHub."""
