"""
Issue reference linking.

Rewrites ``org#123`` references found in commit titles and bodies into
links to the matching GitHub issue.
"""

import re
from typing import Optional

GITHUB_URL = "https://github.com"

ISSUE_RE = re.compile(r"(\w+)#(\d+)")


class IssueLinker:
    """
    Turn ``org#number`` references into issue links.

    A reference whose organisation matches the owner of the configured slug
    links into that repository; any other reference is treated as its own
    repository path. The output is raw markup: escape the surrounding text
    before linking, not after.

    Args:
        slug: Repository slug in ``owner/name`` form. Empty disables linking.
    """

    def __init__(self, slug: Optional[str] = None) -> None:
        self.slug = slug or ""
        self.owner = self.slug.split("/", 1)[0] if "/" in self.slug else ""

    def _replace(self, match: "re.Match[str]") -> str:
        org, number = match.group(1), match.group(2)
        path = self.slug if org == self.owner else org
        return f'<a target="_blank" href="{GITHUB_URL}/{path}/issues/{number}">{org}#{number}</a>'

    def link(self, text: str) -> str:
        if not self.slug:
            return text
        return ISSUE_RE.sub(self._replace, text)


def issue_link(text: str, slug: Optional[str]) -> str:
    """Shortcut for ``IssueLinker(slug).link(text)``."""
    return IssueLinker(slug).link(text)
