import datetime

import pytest

from railway_report.models import CommitInfo, Signature

NOW = datetime.datetime(2024, 6, 1, 12, 0, 0, tzinfo=datetime.timezone.utc)


def make_commit(sha, message="chore: update", parents=(), when=None, name="Jane Doe", email="jane@example.com"):
    """Build a complete CommitInfo with identical author and committer."""
    when = when or NOW - datetime.timedelta(days=2)
    signature = Signature(name=name, email=email, when=when)
    return CommitInfo(sha=sha, message=message, author=signature, committer=signature, parents=tuple(parents))


@pytest.fixture
def now():
    return NOW
