"""Tests for the Typer CLI."""

from rich.console import Console
from typer.testing import CliRunner

from adapters.resource import url
from cli.main import app
from cli.ui_components import build_request_panel

runner = CliRunner()


class TestUrlCommand:
    def test_logical_name_with_id_and_action(self):
        result = runner.invoke(
            app, ["url", "library", "--id", "lib-1", "--action", "sync", "--base-url", "https://host"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "https://host/rest/com/vmware/content/library/id:lib-1?~action=sync"

    def test_param_wins_over_action(self):
        result = runner.invoke(
            app, ["url", "tag", "--action", "list", "--param", "x=y", "--base-url", "https://host"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "https://host/rest/com/vmware/cis/tagging/tag?x=y"

    def test_raw_path_and_repeated_ids(self):
        result = runner.invoke(app, ["url", "/custom", "--id", "a", "--id", "b", "--base-url", "https://host"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "https://host/rest/custom/id:a/id:b"

    def test_unknown_resource(self):
        result = runner.invoke(app, ["url", "nope", "--base-url", "https://host"])
        assert result.exit_code == 2

    def test_malformed_param(self):
        result = runner.invoke(app, ["url", "tag", "--param", "novalue", "--base-url", "https://host"])
        assert result.exit_code == 2


class TestRequestCommand:
    def test_shows_body(self):
        result = runner.invoke(
            app, ["request", "post", "category", "--body", '{"create_spec": {"name": "env"}}', "--base-url", "https://h"]
        )
        assert result.exit_code == 0, result.output
        assert "POST" in result.output
        assert '{"create_spec":{"name":"env"}}' in result.output

    def test_rejects_invalid_json(self):
        result = runner.invoke(app, ["request", "post", "category", "--body", "{", "--base-url", "https://h"])
        assert result.exit_code == 2


class TestPathsCommand:
    def test_lists_registry(self):
        result = runner.invoke(app, ["paths"])
        assert result.exit_code == 0
        assert "session" in result.output
        assert "/rest" in result.output


class TestRequestPanel:
    def test_shows_deferred_encoding_error(self, connection):
        req = url(connection, "/x").request("POST", {"bad": {1, 2}})
        console = Console(record=True, width=200)
        console.print(build_request_panel(req))
        assert "not JSON serializable" in console.export_text()
