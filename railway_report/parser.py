"""
Commit message parsing module.

This module splits commit messages into the Conventional Commits parts
(type, scope, title) plus a cleaned-up body and a breaking-change flag.
"""

from typing import Tuple

BREAKING_MARKER = "BREAKING CHANGE:"


def _has_space(text: str) -> bool:
    return any(ch.isspace() for ch in text)


class CommitParser:
    """
    Parse commit messages of the form ``type(scope): title``.

    Summaries that only look like a prefix by accident (prose containing a
    colon, such as ``fix this: something``) are kept whole as the title.
    """

    @staticmethod
    def parse_summary(summary: str) -> Tuple[str, str, str]:
        """
        Parse the first line of a commit message.

        Args:
            summary: First line of the commit message

        Returns:
            (type, scope, title); type and scope are empty when the summary
            carries no recognizable prefix, in which case title is the whole
            summary.
        """
        colon = summary.find(": ")
        if colon < 0:
            return "", "", summary

        prefix = summary[:colon].strip()
        title = summary[colon + 2:].strip()

        paren = prefix.find("(")
        if paren >= 0:
            commit_type = prefix[:paren].strip()
            rest = prefix[paren + 1:]
            close = rest.find(")")
            if close >= 0:
                if _has_space(commit_type):
                    return "", "", summary
                return commit_type, rest[:close].strip(), title

        if _has_space(prefix):
            return "", "", summary
        return prefix, "", title

    @staticmethod
    def extract_body(message: str) -> str:
        """
        Return everything after the summary line.

        Leading blank lines are dropped and soft-wrapped lines (a trailing
        space before the line break) are joined back into one paragraph.
        """
        lines = message.split("\n")
        if len(lines) < 2:
            return ""
        body_lines = lines[1:]
        while body_lines and not body_lines[0].strip():
            body_lines = body_lines[1:]
        body = "\n".join(body_lines).strip()
        return body.replace(" \r\n", " ").replace(" \n", " ")

    @staticmethod
    def is_breaking(message: str) -> bool:
        return BREAKING_MARKER in message
