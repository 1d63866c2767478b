"""Tests for the top-level folio CLI."""

from __future__ import annotations

import logging

import pytest
import yaml
from click.testing import CliRunner
from rich.logging import RichHandler

from folio import __version__
from folio.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    # main() installs a RichHandler on the root logger
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(level)


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_groups_registered(runner):
    result = runner.invoke(main, ["--help"])
    for name in ("posts", "taxonomy", "series", "tabs", "music", "url"):
        assert name in result.output


class TestUrlCommand:
    """Test folio url."""

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["post", "devops/docker-basics"], "/posts/devops/docker-basics/"),
            (["tag", "C++"], "/tags/c%2B%2B/"),
            (["category", "DevOps"], "/categories/devops/"),
            (["series", "deep-dive"], "/series/deep-dive/"),
            (["page", "posts"], "/posts/"),
            (["page", "posts", "--page", "3"], "/posts/page/3/"),
        ],
    )
    def test_paths(self, runner, mock_site_root, args, expected):
        result = runner.invoke(main, ["url", *args])
        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_base_path_and_absolute(self, runner, mock_site_root):
        (mock_site_root / "folio.yaml").write_text(
            yaml.dump({"base_path": "/portfolio", "site_url": "https://me.dev"}),
            encoding="utf-8",
        )
        result = runner.invoke(main, ["url", "tag", "Python", "--absolute"])
        assert result.exit_code == 0
        assert result.output.strip() == "https://me.dev/portfolio/tags/python/"

    def test_defaults_outside_a_site(self, runner, monkeypatch):
        from folio.core import config as config_module

        def _missing():
            raise FileNotFoundError("no site")

        monkeypatch.setattr(config_module, "get_site_root", _missing)
        result = runner.invoke(main, ["url", "post", "hello"])
        assert result.exit_code == 0
        assert result.output.strip() == "/posts/hello/"

    def test_bad_page(self, runner, mock_site_root):
        result = runner.invoke(main, ["url", "page", "posts", "--page", "0"])
        assert result.exit_code == 1

    def test_malformed_id(self, runner, mock_site_root):
        result = runner.invoke(main, ["url", "post", "../etc"])
        assert result.exit_code == 1
