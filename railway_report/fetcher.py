"""
GitHub data fetching module.

This module handles all GitHub API interactions for fetching repository
metadata, commit history and the branch heads and tags pointing into it
using PyGithub.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from .dates import as_aware
from .errors import FetchError
from .models import CommitInfo, RepoMeta, Signature

# External libs
try:
    from github import Github, Repository, Commit
except Exception as e:
    raise RuntimeError("PyGithub is required. Install with: pip install PyGithub") from e

# Set up logging
logger = logging.getLogger("railway-report.fetcher")

RefMap = Dict[str, List[str]]


def _signature(git_author) -> Optional[Signature]:
    """Convert a PyGithub GitAuthor into a Signature, or None if incomplete."""
    if git_author is None or git_author.date is None:
        return None
    return Signature(name=git_author.name or "", email=git_author.email or "", when=as_aware(git_author.date))


class GitHubFetcher:
    """
    Fetch commits, refs and repository metadata from GitHub using PyGithub.

    Args:
        token: Personal access token (or None for unauthenticated, but rate-limited).
    """

    def __init__(self, token: Optional[str] = None) -> None:
        try:
            self._g = Github(login_or_token=token) if token else Github()
            logger.debug("GitHub client initialized (authenticated=%s)", bool(token))
        except Exception as e:
            logger.error("Failed to initialize GitHub client: %s", e)
            raise FetchError(f"GitHub client initialization failed: {e}") from e

    def _get_repo(self, owner: str, repo_name: str) -> "Repository.Repository":
        return self._g.get_repo(f"{owner}/{repo_name}")

    def fetch_repo_meta(self, owner: str, repo_name: str) -> RepoMeta:
        """
        Fetch repository metadata from GitHub.

        Args:
            owner: Repository owner username
            repo_name: Repository name

        Returns:
            RepoMeta object; its full_name doubles as the slug for issue links

        Raises:
            FetchError: If repository cannot be accessed or found
        """
        try:
            repo = self._get_repo(owner, repo_name)
            meta = RepoMeta(
                full_name=repo.full_name,
                description=repo.description,
                url=repo.html_url,
                default_branch=repo.default_branch,
            )
            logger.info("Fetched metadata for %s", meta.full_name)
            return meta
        except Exception as e:
            error_msg = f"Failed to fetch repository metadata for {owner}/{repo_name}: {e}"
            logger.error(error_msg)
            raise FetchError(error_msg) from e

    def fetch_commits(
        self,
        owner: str,
        repo_name: str,
        branch: Optional[str] = None,
        max_commits: int = 500,
    ) -> Dict[str, CommitInfo]:
        """
        Fetch commit history from GitHub repository.

        Commits come back most recent first; the parents of the oldest
        fetched commits may lie outside the returned mapping.

        Args:
            owner: Repository owner username
            repo_name: Repository name
            branch: Branch, tag or sha to start from (default branch if None)
            max_commits: Maximum number of commits to fetch (default: 500)

        Returns:
            Mapping of full sha -> CommitInfo

        Raises:
            FetchError: If commits cannot be fetched
        """
        try:
            repo = self._get_repo(owner, repo_name)
            commits = repo.get_commits(sha=branch) if branch else repo.get_commits()
            result: Dict[str, CommitInfo] = {}

            logger.info("Fetching up to %d commits from %s/%s", max_commits, owner, repo_name)

            for c in commits:
                if len(result) >= max_commits:
                    break

                try:
                    commit_obj: Commit.Commit = c.commit
                    result[c.sha] = CommitInfo(
                        sha=c.sha,
                        message=commit_obj.message,
                        author=_signature(commit_obj.author),
                        committer=_signature(commit_obj.committer),
                        parents=tuple(p.sha for p in c.parents),
                    )
                except Exception as e:
                    logger.debug("Skipping commit due to error: %s", e)
                    continue

            logger.info("Successfully fetched %d commits from %s/%s", len(result), owner, repo_name)
            return result

        except Exception as e:
            error_msg = f"Failed to fetch commits for {owner}/{repo_name}: {e}"
            logger.error(error_msg)
            raise FetchError(error_msg) from e

    def fetch_refs(self, owner: str, repo_name: str) -> Tuple[RefMap, RefMap]:
        """
        Fetch branch heads and tags.

        Returns:
            (heads, tags), each mapping a commit sha to the ref names pointing at it

        Raises:
            FetchError: If refs cannot be fetched
        """
        try:
            repo = self._get_repo(owner, repo_name)
            heads: RefMap = defaultdict(list)
            tags: RefMap = defaultdict(list)
            for branch in repo.get_branches():
                heads[branch.commit.sha].append(branch.name)
            for tag in repo.get_tags():
                tags[tag.commit.sha].append(tag.name)
            logger.info("Fetched %d branch heads and %d tags from %s/%s",
                        sum(len(v) for v in heads.values()), sum(len(v) for v in tags.values()),
                        owner, repo_name)
            return dict(heads), dict(tags)
        except Exception as e:
            error_msg = f"Failed to fetch refs for {owner}/{repo_name}: {e}"
            logger.error(error_msg)
            raise FetchError(error_msg) from e
