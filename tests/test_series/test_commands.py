"""Tests for series CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from folio.series.commands import series


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def series_posts(create_content_file):
    create_content_file(
        slug="intro", title="Intro", published="2024-01-01",
        extra_fm={"series": {"id": "getting-started", "part": 1}},
    )
    create_content_file(
        slug="setup", title="Setup", published="2024-01-05",
        extra_fm={"series": {"id": "getting-started", "part": 2}},
    )
    create_content_file(
        slug="internals", title="Internals", published="2024-02-01",
        extra_fm={"series": {"id": "deep-dive", "part": 1}},
    )


class TestSeriesList:
    """Test folio series list."""

    def test_json_sorted_by_status(self, runner, series_posts):
        result = runner.invoke(series, ["list", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [s["id"] for s in data] == ["deep-dive", "getting-started"]
        assert data[1]["count"] == 2
        assert data[1]["status"] == "completed"

    def test_featured_skips_empty_series(self, runner, create_content_file):
        create_content_file(
            slug="internals", extra_fm={"series": {"id": "deep-dive", "part": 1}}
        )
        result = runner.invoke(series, ["list", "--featured", "--json"])
        assert [s["id"] for s in json.loads(result.output)] == ["deep-dive"]

    def test_table(self, runner, series_posts):
        result = runner.invoke(series, ["list"])
        assert result.exit_code == 0
        assert "Getting Started" in result.output


class TestSeriesShow:
    """Test folio series show."""

    def test_posts_in_part_order(self, runner, series_posts):
        result = runner.invoke(series, ["show", "getting-started", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["url"] == "/series/getting-started/"
        assert data["count"] == 2
        assert data["series"]["title"] == "Getting Started"
        assert [p["id"] for p in data["posts"]] == ["intro", "setup"]

    def test_unknown_series_is_empty(self, runner, series_posts):
        result = runner.invoke(series, ["show", "nope", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["series"] is None
        assert data["count"] == 0
        assert data["posts"] == []

    def test_text_output(self, runner, series_posts):
        result = runner.invoke(series, ["show", "getting-started"])
        assert result.exit_code == 0
        assert "A beginner series" in result.output
        assert "Setup" in result.output
