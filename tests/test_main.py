import datetime
import importlib
from unittest import mock

import pytest

from railway_report.errors import FetchError
from railway_report.models import RepoMeta

from conftest import NOW, make_commit

# the package re-exports main(), so fetch the module itself
driver = importlib.import_module("railway_report.main")

META = RepoMeta(full_name="acme/repo", description=None, url="https://github.com/acme/repo", default_branch="main")


@pytest.fixture
def fetcher():
    with mock.patch.object(driver, "GitHubFetcher") as fetcher_cls:
        instance = fetcher_cls.return_value
        instance.fetch_repo_meta.return_value = META
        instance.fetch_commits.return_value = {
            "a" * 40: make_commit("a" * 40, "feat(api): add login acme#4", when=NOW - datetime.timedelta(days=1)),
            "b" * 40: make_commit("b" * 40, "fix bug", parents=["a" * 40]),
        }
        instance.fetch_refs.return_value = ({"b" * 40: ["main"]}, {})
        yield instance


#============================================
def test_main_writes_report(fetcher, tmp_path) -> None:
    output = tmp_path / "railway.html"
    driver.main(["--user", "acme", "--repo", "repo", "--output", str(output)])
    document = output.read_text(encoding="utf-8")
    assert "<title>acme/repo</title>" in document
    assert 'id="railway_svg"' in document
    assert "https://github.com/acme/repo/issues/4" in document
    fetcher.fetch_commits.assert_called_once_with("acme", "repo", branch=None, max_commits=500)


#============================================
def test_main_custom_title(fetcher, tmp_path) -> None:
    output = tmp_path / "out.html"
    driver.main(["-u", "acme", "-r", "repo", "-o", str(output), "--title", "History & Co"])
    assert "<title>History &amp; Co</title>" in output.read_text(encoding="utf-8")


#============================================
def test_main_failure_exits_without_output(fetcher, tmp_path) -> None:
    fetcher.fetch_commits.side_effect = FetchError("Failed to fetch commits for acme/repo: boom")
    output = tmp_path / "railway.html"
    with pytest.raises(SystemExit) as excinfo:
        driver.main(["--user", "acme", "--repo", "repo", "--output", str(output)])
    assert excinfo.value.code == 1
    assert not output.exists()
