"""Unit tests for link commands that change a single link."""

import pytest

from abhyas.api.config.DatabaseConfig import DatabaseConfig
from abhyas.api.link.cmd_add import cmd_add
from abhyas.api.link.cmd_complete import cmd_complete
from abhyas.api.link.cmd_delete import cmd_delete
from abhyas.api.link.cmd_next import cmd_next
from abhyas.api.link.cmd_show import cmd_show
from abhyas.api.link.cmd_skip import cmd_skip
from abhyas.api.link.LinkStatus import LinkStatus
from abhyas.api.link.LinkStore import LinkStore
from tests.conftest import run_cmd

pytestmark = pytest.mark.link


class TestCmdAdd:
    def test_add(self, abhyas_home):
        result = run_cmd(cmd_add, "https://a")
        assert result.success
        assert result.output["added"] is True
        with LinkStore(DatabaseConfig()) as store:
            assert store.list_urls() == ["https://a"]

    def test_add_duplicate(self, abhyas_home):
        run_cmd(cmd_add, "https://a")
        result = run_cmd(cmd_add, "https://a")
        assert not result.success
        assert result.output["added"] is False
        assert "already exists" in result.output["errors"][0]

    def test_add_blank(self, abhyas_home):
        result = run_cmd(cmd_add, " ")
        assert not result.success


class TestCmdDelete:
    def test_delete(self, abhyas_home):
        run_cmd(cmd_add, "a")
        result = run_cmd(cmd_delete, "a")
        assert result.success
        assert result.output["deleted"] is True
        assert result.output["warnings"] == []

    def test_delete_missing_warns(self, abhyas_home):
        result = run_cmd(cmd_delete, "a")
        assert result.success
        assert result.output["deleted"] is False
        assert result.output["warnings"] == ["Link not found: a"]


class TestCmdNext:
    def test_next_none(self, abhyas_home):
        result = run_cmd(cmd_next)
        assert result.success
        assert result.output["link"] is None

    def test_next(self, abhyas_home):
        run_cmd(cmd_add, "a")
        result = run_cmd(cmd_next)
        assert result.output["link"] == {"url": "a", "solved_count": 0, "status": "incomplete"}


class TestCmdShow:
    def test_show(self, abhyas_home):
        run_cmd(cmd_add, "a")
        run_cmd(cmd_complete, "a")
        result = run_cmd(cmd_show, "a")
        assert result.success
        assert result.output["link"]["solved_count"] == 1

    def test_show_missing(self, abhyas_home):
        result = run_cmd(cmd_show, "a")
        assert not result.success
        assert result.output["link"] is None


class TestCmdCompleteAndSkip:
    def test_complete_twice(self, abhyas_home):
        run_cmd(cmd_add, "a")
        run_cmd(cmd_complete, "a")
        result = run_cmd(cmd_complete, "a")
        assert result.success
        assert result.output["solved_count"] == 2

    def test_complete_missing(self, abhyas_home):
        result = run_cmd(cmd_complete, "a")
        assert not result.success
        assert result.output["solved_count"] == -1

    def test_skip(self, abhyas_home):
        run_cmd(cmd_add, "a")
        result = run_cmd(cmd_skip, "a")
        assert result.success
        with LinkStore(DatabaseConfig()) as store:
            assert store.get_link("a").status is LinkStatus.SKIPPED

    def test_skip_missing(self, abhyas_home):
        result = run_cmd(cmd_skip, "a")
        assert not result.success
        assert result.output["skipped"] is False
