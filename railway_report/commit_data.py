"""
Commit data assembly.

Turns raw commits into the display records embedded in the report: parsed
message, linked issue references, mail-linked author and committer, and
absolute plus relative dates.
"""

import datetime
import html
import logging
from typing import Dict, Mapping, Optional

from .dates import format_rfc3339, pretty_date
from .linker import IssueLinker
from .models import CommitData, CommitInfo, CommitMessage, Signature
from .parser import CommitParser

# Set up logging
logger = logging.getLogger("railway-report.commit_data")

SHORT_HASH_LENGTH = 7


def _mail_link(signature: Signature) -> str:
    return f'<a href="mailto:{html.escape(signature.email)}">{html.escape(signature.name)}</a>'


def build_commit_data(
    full_hash: str,
    commit: CommitInfo,
    linker: IssueLinker,
    now: Optional[datetime.datetime] = None,
) -> CommitData:
    """
    Build the display record for a single complete commit.

    Args:
        full_hash: Full commit hash, shortened for display
        commit: The commit to convert; must satisfy ``commit.is_complete()``
        linker: Issue linker configured with the repository slug
        now: Reference time for relative dates

    Returns:
        CommitData for the commit
    """
    message = commit.message or ""
    commit_type, scope, title = CommitParser.parse_summary(commit.summary)
    body = CommitParser.extract_body(message)

    # commit text is escaped before the links are added
    title = linker.link(html.escape(title, quote=False))
    body = linker.link(html.escape(body, quote=False))

    return CommitData(
        hash=full_hash[:SHORT_HASH_LENGTH],
        author=_mail_link(commit.author),
        committer=_mail_link(commit.committer),
        message=CommitMessage(
            type=commit_type,
            scope=scope,
            title=title,
            body=body,
            is_breaking=CommitParser.is_breaking(message),
        ),
        authored_date=format_rfc3339(commit.author.when),
        committed_date=format_rfc3339(commit.committer.when),
        authored_date_delta=pretty_date(commit.author.when, now),
        committed_date_delta=pretty_date(commit.committer.when, now),
    )


def generate_commit_data(
    commits: Mapping[str, Optional[CommitInfo]],
    slug: Optional[str] = None,
    now: Optional[datetime.datetime] = None,
) -> Dict[str, CommitData]:
    """
    Build display records for a collection of commits.

    Missing or incomplete commits are skipped without error, so one broken
    upstream entry never fails the whole report.

    Args:
        commits: Mapping of full commit hash -> commit (or None)
        slug: Repository slug ``owner/name`` used for issue links
        now: Reference time for relative dates, defaults to the current time

    Returns:
        Mapping of full commit hash -> CommitData
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    linker = IssueLinker(slug)
    result: Dict[str, CommitData] = {}

    for full_hash, commit in commits.items():
        if commit is None or not commit.is_complete():
            logger.debug("Skipping incomplete commit %s", full_hash)
            continue
        result[full_hash] = build_commit_data(full_hash, commit, linker, now)

    logger.debug("Built commit data for %d of %d commits", len(result), len(commits))
    return result
