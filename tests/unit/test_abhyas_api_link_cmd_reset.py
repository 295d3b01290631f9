"""Unit tests for link cmd_reset."""

import pytest

from abhyas.api.config.DatabaseConfig import DatabaseConfig
from abhyas.api.link.cmd_reset import cmd_reset
from abhyas.api.link.LinkStore import LinkStore
from tests.conftest import run_cmd

pytestmark = pytest.mark.link


def test_reset_skipped_twice(abhyas_home):
    with LinkStore(DatabaseConfig()) as store:
        store.bulk_import(["a", "b"])
        store.skip_link("a")
        store.skip_link("b")
    first = run_cmd(cmd_reset, "skipped")
    second = run_cmd(cmd_reset, "skipped")
    assert first.output["reset_count"] == 2
    assert second.success
    assert second.output["reset_count"] == 0
    assert first.result == "Changed 2 Skipped Links To Incomplete Links"


def test_reset_completed(abhyas_home):
    with LinkStore(DatabaseConfig()) as store:
        store.add_link("a")
        store.mark_complete("a")
    result = run_cmd(cmd_reset, "completed")
    assert result.success
    assert result.output["reset_count"] == 1


def test_reset_unknown_target(abhyas_home):
    result = run_cmd(cmd_reset, "everything")
    assert not result.success
    assert result.output["reset_count"] == -1
