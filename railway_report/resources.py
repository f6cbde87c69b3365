"""
Read-only store of the text fragments the report is assembled from.

The bundled fragments live in the ``resources`` directory of this package
and are read once; every report generation shares the same store.
"""

import functools
import logging
import types
from importlib import resources as importlib_resources
from typing import Mapping

from .errors import ResourceNotFoundError

# Set up logging
logger = logging.getLogger("railway-report.resources")

RESOURCE_PACKAGE = "railway_report"
RESOURCE_ROOT = "resources"


class ResourceStore:
    """
    Name-addressed, immutable collection of text resources.

    Args:
        contents: Mapping of resource name -> text. The mapping is copied, so
                  later changes to it are not visible through the store.
    """

    def __init__(self, contents: Mapping[str, str]) -> None:
        self._contents = types.MappingProxyType(dict(contents))

    @classmethod
    def from_package(cls, package: str = RESOURCE_PACKAGE, root: str = RESOURCE_ROOT) -> "ResourceStore":
        """
        Load every file directly under ``<package>/<root>``.

        Args:
            package: Package holding the resource directory
            root: Name of the resource directory inside the package

        Returns:
            ResourceStore keyed by file name
        """
        contents = {}
        for entry in importlib_resources.files(package).joinpath(root).iterdir():
            if entry.is_file():
                contents[entry.name] = entry.read_text(encoding="utf-8")
        logger.debug("Loaded %d resources from %s/%s", len(contents), package, root)
        return cls(contents)

    def get(self, name: str) -> str:
        """
        Return the text of a resource.

        Raises:
            ResourceNotFoundError: If no resource has that name
        """
        try:
            return self._contents[name]
        except KeyError:
            raise ResourceNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._contents

    def __len__(self) -> int:
        return len(self._contents)


@functools.lru_cache(maxsize=None)
def load_default_store() -> ResourceStore:
    """Return the store of bundled resources, loading it on first use."""
    return ResourceStore.from_package()
