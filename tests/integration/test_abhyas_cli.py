"""Integration tests for the abhyas CLI."""

import json

import pytest
from typer.testing import CliRunner

from abhyas.api.config.DatabaseConfig import DatabaseConfig
from abhyas.api.link.LinkStatus import LinkStatus
from abhyas.api.link.LinkStore import LinkStore
from abhyas.cli import main
from abhyas.cli._create_app import _create_app

pytestmark = pytest.mark.cli

runner = CliRunner()

# Main menu positions, numbered from 1
CHECK_STATUS, GET_LINK, ADD_LINK, DELETE_LINK, SEARCH_LINK, OTHER, EXIT = range(1, 8)


def _answers(*answers) -> str:
    return "".join(f"{answer}\n" for answer in answers)


class TestLinkCommands:
    def test_add_then_status(self, abhyas_home):
        result = runner.invoke(_create_app(), ["link", "add", "https://a"])
        assert result.exit_code == 0, result.output
        assert "Successfully added the link: https://a" in result.output

        result = runner.invoke(_create_app(), ["link", "status"])
        assert result.exit_code == 0
        assert "total: 1" in result.output

    def test_duplicate_add_fails(self, abhyas_home):
        runner.invoke(_create_app(), ["link", "add", "https://a"])
        result = runner.invoke(_create_app(), ["link", "add", "https://a"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_list_json(self, abhyas_home):
        with LinkStore(DatabaseConfig()) as store:
            store.bulk_import(["a", "b"])
            store.mark_complete("b")
        result = runner.invoke(_create_app(), ["--display", "json", "link", "list", "--status", "solved"])
        assert result.exit_code == 0
        assert '"url": "b"' in result.output
        assert '"url": "a"' not in result.output

    def test_complete_skip_and_reset(self, abhyas_home):
        app = _create_app()
        runner.invoke(app, ["link", "add", "a"])
        assert runner.invoke(app, ["link", "complete", "a"]).exit_code == 0
        assert runner.invoke(app, ["link", "skip", "missing"]).exit_code == 1
        result = runner.invoke(app, ["link", "reset", "completed"])
        assert result.exit_code == 0
        assert "reset_count: 1" in result.output

    def test_import_command(self, abhyas_home, tmp_path):
        path = tmp_path / "links.txt"
        path.write_text("a\nb\na\n", encoding="utf-8")
        result = runner.invoke(_create_app(), ["link", "import", str(path)])
        assert result.exit_code == 0
        assert "inserted_count: 2" in result.output
        assert "skipped_count: 1" in result.output

    def test_no_subcommand_shows_help(self, abhyas_home):
        result = runner.invoke(_create_app(), ["link"])
        assert result.exit_code == 0
        assert "status" in result.output

    def test_invalid_display(self, abhyas_home):
        result = runner.invoke(_create_app(), ["--display", "xml", "link", "status"])
        assert result.exit_code == 2

    def test_bad_config(self, abhyas_home):
        abhyas_home.mkdir(parents=True)
        (abhyas_home / "config.json").write_text(json.dumps({"log": {"level": "LOUD"}}))
        result = runner.invoke(_create_app(), ["link", "status"])
        assert result.exit_code == 1
        assert "log.level" in result.output


class TestFileOption:
    def test_file_imports_and_exits(self, abhyas_home, tmp_path):
        with LinkStore(DatabaseConfig()) as store:
            store.add_link("a")
        path = tmp_path / "links.txt"
        path.write_text("a\nb\nb\nc\n", encoding="utf-8")

        result = runner.invoke(_create_app(), ["--file", str(path)])

        assert result.exit_code == 0, result.output
        assert "Added 2 link(s)" in result.output
        with LinkStore(DatabaseConfig()) as store:
            assert store.list_urls() == ["a", "b", "c"]

    def test_file_then_interactive(self, abhyas_home, tmp_path):
        path = tmp_path / "links.txt"
        path.write_text("https://a\n", encoding="utf-8")
        result = runner.invoke(
            _create_app(), ["--file", str(path), "--interactive"], input=_answers(GET_LINK, 1, EXIT)
        )
        assert result.exit_code == 0, result.output
        with LinkStore(DatabaseConfig()) as store:
            assert store.get_link("https://a").status is LinkStatus.SOLVED

    def test_missing_file_is_usage_error(self, abhyas_home, tmp_path):
        result = runner.invoke(_create_app(), ["--file", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2

    def test_file_with_command_rejected(self, abhyas_home, tmp_path):
        path = tmp_path / "links.txt"
        path.write_text("a\n", encoding="utf-8")
        result = runner.invoke(_create_app(), ["--file", str(path), "link", "status"])
        assert result.exit_code == 2


class TestInteractive:
    def test_exit(self, abhyas_home):
        result = runner.invoke(_create_app(), [], input=_answers(EXIT))
        assert result.exit_code == 0
        assert "successfully quit" in result.output

    def test_add_link(self, abhyas_home):
        result = runner.invoke(_create_app(), [], input=_answers(ADD_LINK, "https://a", EXIT))
        assert result.exit_code == 0, result.output
        with LinkStore(DatabaseConfig()) as store:
            assert store.list_urls() == ["https://a"]

    def test_end_of_input_cancels(self, abhyas_home):
        result = runner.invoke(_create_app(), [], input="")
        assert result.exit_code == 1
        assert "User cancelled the operation" in result.output

    def test_storage_unavailable(self, abhyas_home, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")
        abhyas_home.mkdir(parents=True)
        (abhyas_home / "config.json").write_text(json.dumps({"database": {"filename": str(blocker / "abhyas.db")}}))
        result = runner.invoke(_create_app(), [], input=_answers(EXIT))
        assert result.exit_code == 1
        assert "DB connection failed" in result.output


class TestMain:
    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("abhyas ")

    def test_link_status(self, abhyas_home):
        assert main(["link", "status"]) == 0

    def test_unknown_command(self, abhyas_home, capsys):
        assert main(["nope"]) == 2
        assert "Usage error" in capsys.readouterr().err

    def test_file_not_utf8_fails_cleanly(self, abhyas_home, tmp_path, capsys):
        path = tmp_path / "links.bin"
        path.write_bytes(b"https://a\n\xff\xfe bad\n")
        assert main(["--file", str(path)]) == 1
        assert "Failed to read" in capsys.readouterr().err

    def test_unexpected_exception_reported(self, monkeypatch, capsys):
        def broken_app(**kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("abhyas.cli._create_app._create_app", lambda: broken_app)
        assert main(["link", "status"]) == 1
        assert "Unhandled error: boom" in capsys.readouterr().err
