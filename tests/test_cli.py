"""Tests for the command-line interface."""

import httpx
import pytest
import respx
from click.testing import CliRunner

from conftest import chat_response
from terminai import __version__
from terminai.cli import cli

XAI_URL = "https://api.x.ai/v1/chat/completions"
OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def env(bin_dir) -> dict[str, str]:
    """Environment with the fake search path and an xAI key."""
    return {"PATH": str(bin_dir), "XAI_API_KEY": "xai-test-key"}


class TestCli:
    """Test the terminai command."""

    def test_version(self, runner) -> None:
        """Test the version option."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_valid_command(self, runner, env) -> None:
        """Test the pass-through message for an installed command."""
        with respx.mock(assert_all_called=False) as mock:
            result = runner.invoke(cli, ["--", "git", "status"], env=env)

        assert result.exit_code == 0
        assert result.stdout == "Command 'git status' exists, executing normally.\n"
        assert mock.calls.call_count == 0

    @respx.mock
    def test_suggestion_printed_verbatim(self, runner, env) -> None:
        """Test that markup-like text in a suggestion is printed as is."""
        route = respx.post(XAI_URL).mock(
            return_value=httpx.Response(200, json=chat_response("try `ls -la` [bold]now[/bold]"))
        )

        result = runner.invoke(cli, ["--", "gti", "status"], env=env)

        assert route.call_count == 1
        assert result.exit_code == 0
        assert result.stdout == "try `ls -la` [bold]now[/bold]\n"

    @respx.mock
    def test_suggestion_keeps_tabs_and_newlines(self, runner, env) -> None:
        """Test that whitespace in a suggestion is not rewritten."""
        content = "try:\n\tgit status\n\n  :smile: done"
        respx.post(XAI_URL).mock(return_value=httpx.Response(200, json=chat_response(content)))

        result = runner.invoke(cli, ["--", "gti"], env=env)

        assert result.exit_code == 0
        assert result.stdout == content + "\n"

    @respx.mock
    def test_leading_hyphen_arguments(self, runner, env) -> None:
        """Test that options after the command word belong to the command."""
        route = respx.post(XAI_URL).mock(return_value=httpx.Response(200, json=chat_response()))

        result = runner.invoke(cli, ["gti", "--verbose", "-x"], env=env)

        assert result.exit_code == 0
        assert "gti --verbose -x" in route.calls.last.request.content.decode()

    def test_no_command(self, runner, env) -> None:
        """Test that running without a command is an error."""
        result = runner.invoke(cli, [], env=env)

        assert result.exit_code == 1
        assert "No command provided" in result.stderr

    def test_missing_api_key(self, runner, bin_dir) -> None:
        """Test that a missing key is reported without a request."""
        with respx.mock(assert_all_called=False) as mock:
            result = runner.invoke(cli, ["--", "gti"], env={"PATH": str(bin_dir)})

        assert result.exit_code == 1
        assert "XAI_API_KEY" in result.stderr
        assert result.stdout == ""
        assert mock.calls.call_count == 0

    @respx.mock
    def test_server_error(self, runner, env) -> None:
        """Test that HTTP 500 exits non-zero with a message."""
        respx.post(XAI_URL).mock(return_value=httpx.Response(500, text="boom"))

        result = runner.invoke(cli, ["--", "gti"], env=env)

        assert result.exit_code == 1
        assert "HTTP 500" in result.stderr
        assert result.exception is None or isinstance(result.exception, SystemExit)

    @respx.mock
    def test_provider_option(self, runner, bin_dir) -> None:
        """Test choosing provider and model on the command line."""
        route = respx.post(OPENROUTER_URL).mock(return_value=httpx.Response(200, json=chat_response("ok")))

        result = runner.invoke(
            cli,
            ["--provider", "openrouter", "--model", "x/y", "--", "gti"],
            env={"PATH": str(bin_dir), "OPENROUTER_API_KEY": "or-key"},
        )

        assert result.exit_code == 0
        assert result.stdout == "ok\n"
        assert route.call_count == 1
        assert b'"model":"x/y"' in route.calls.last.request.content.replace(b" ", b"")

    def test_unknown_provider_env(self, runner, env) -> None:
        """Test that an unknown API_PROVIDER is reported."""
        result = runner.invoke(cli, ["--", "gti"], env={**env, "API_PROVIDER": "nope"})

        assert result.exit_code == 1
        assert "Unknown provider" in result.stderr

    def test_bad_config_file(self, runner, env, tmp_path) -> None:
        """Test that a malformed config file is reported."""
        path = tmp_path / "bad.toml"
        path.write_text("provider = [\n")

        result = runner.invoke(cli, ["--config", str(path), "--", "git"], env=env)

        assert result.exit_code == 1
        assert "Invalid config file" in result.stderr

    def test_timing(self, runner, env) -> None:
        """Test reporting processing time on stderr."""
        result = runner.invoke(cli, ["--timing", "--", "ls"], env=env)

        assert result.exit_code == 0
        assert "Processing time:" in result.stderr
