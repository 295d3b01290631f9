"""Unit tests for link cmd_list."""

import pytest

from abhyas.api.config.DatabaseConfig import DatabaseConfig
from abhyas.api.link.cmd_list import cmd_list
from abhyas.api.link.LinkStore import LinkStore
from tests.conftest import run_cmd

pytestmark = pytest.mark.link


@pytest.fixture
def seeded(abhyas_home):
    with LinkStore(DatabaseConfig()) as store:
        store.bulk_import(["a", "b", "c"])
        store.mark_complete("a")
        store.skip_link("b")


def test_list_all(seeded):
    result = run_cmd(cmd_list)
    assert result.success
    assert result.output["count"] == 3
    assert result.output["links"][0] == {"url": "a", "solved_count": 1, "status": "solved"}


@pytest.mark.parametrize(("status", "urls"), [("solved", ["a"]), ("skipped", ["b"]), ("incomplete", ["c"])])
def test_list_filtered(seeded, status, urls):
    result = run_cmd(cmd_list, status)
    assert result.success
    assert [link["url"] for link in result.output["links"]] == urls


def test_list_empty_is_success(abhyas_home):
    result = run_cmd(cmd_list, "solved")
    assert result.success
    assert result.output["count"] == 0
    assert result.output["links"] == []
    assert result.result == "No solved links"


def test_list_unknown_status(abhyas_home):
    result = run_cmd(cmd_list, "done")
    assert not result.success
    assert "Unknown status" in result.output["errors"][0]
