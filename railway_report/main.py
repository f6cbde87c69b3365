#!/usr/bin/env python3
"""
Main driver script for the railway report.

This script provides the command-line interface and coordinates all modules
to turn a GitHub repository's commit history into an HTML railway diagram.

Usage (example):
    python -m railway_report.main --user octocat --repo Hello-World --token GITHUB_TOKEN --output railway.html
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .commit_data import generate_commit_data
from .drawing import draw_railway
from .fetcher import GitHubFetcher
from .layout import compute_children, compute_positions
from .report import ReportAssembler

logger = logging.getLogger("railway-report")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate an HTML railway diagram from GitHub commit history.")
    parser.add_argument("--user", "-u", required=True, help="GitHub owner/username")
    parser.add_argument("--repo", "-r", required=True, help="Repository name")
    parser.add_argument("--token", "-t", default=os.environ.get("GITHUB_TOKEN"),
                        help="GitHub token (defaults to $GITHUB_TOKEN; recommended to avoid rate limits)")
    parser.add_argument("--branch", "-b", default=None, help="Branch, tag or sha to start from")
    parser.add_argument("--max-commits", type=int, default=500, help="Maximum number of commits to fetch")
    parser.add_argument("--title", default=None, help="Report title (defaults to OWNER/REPO)")
    parser.add_argument("--output", "-o", default="railway.html", help="Output HTML filename")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the railway report.

    Fetches the repository history, lays it out, draws it and writes the
    assembled HTML document. The output file is only written once the whole
    document has been built.
    """
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        logger.info("Starting railway report for %s/%s", args.user, args.repo)
        fetcher = GitHubFetcher(token=args.token)

        meta = fetcher.fetch_repo_meta(args.user, args.repo)
        commits = fetcher.fetch_commits(args.user, args.repo, branch=args.branch, max_commits=args.max_commits)
        if not commits:
            logger.warning("No commits found for repository %s", meta.full_name)
            print(f"Warning: No commits found for repository {meta.full_name}")
            return
        heads, tags = fetcher.fetch_refs(args.user, args.repo)

        logger.info("Laying out %d commits...", len(commits))
        positions = compute_positions(commits)
        children = compute_children(commits)
        svg = draw_railway(commits, positions, heads, tags, children)

        logger.info("Building commit data...")
        commit_data = generate_commit_data(commits, slug=meta.full_name)

        title = args.title or meta.full_name
        document = ReportAssembler().build_html(svg, commit_data, title)

        logger.info("Writing report to %s", args.output)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(document)

        logger.info("Railway report completed successfully")
        print(f"✓ Railway report generated: {args.output}")
        print(f"  Repository: {meta.full_name}")
        print(f"  Commits drawn: {len(positions)}")

    except KeyboardInterrupt:
        logger.info("Railway report interrupted by user")
        print("\nOperation cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error("Railway report failed: %s", e)
        print(f"Error: railway report failed - {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
