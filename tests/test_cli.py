"""Tests for the SCV command-line host."""

import tempfile
from pathlib import Path

from click.testing import CliRunner

from scv.cli import main


def _invoke(state: Path, *args, owner: str = "alice.testnet"):
    runner = CliRunner()
    return runner.invoke(
        main,
        ["--state", str(state), *args],
        env={"SCV_OWNER": owner, "SCV_CONFIG": ""},
    )


def test_create_get_revoke():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "registry.json"

        assert _invoke(state, "init").exit_code == 0
        assert state.exists()

        result = _invoke(state, "create", "1001", "Who am I", "5", "link file cv")
        assert result.exit_code == 0, result.output

        result = _invoke(state, "get", "1001")
        assert result.exit_code == 0
        assert "Who am I" in result.output

        result = _invoke(state, "info", "1001")
        assert "title: Who am I" in result.output

        assert _invoke(state, "revoke", "1001").exit_code == 0

        result = _invoke(state, "info", "1001")
        assert result.exit_code == 0
        assert "Item not found" in result.output


def test_init_twice_fails():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "registry.json"
        _invoke(state, "init")

        result = _invoke(state, "init")
        assert result.exit_code == 1
        assert "Already initialized" in result.output


def test_duplicate_and_missing():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "registry.json"
        _invoke(state, "init")
        _invoke(state, "create", "7", "A", "1", "x")

        result = _invoke(state, "create", "7", "B", "2", "y")
        assert result.exit_code == 1
        assert "already added" in result.output

        result = _invoke(state, "revoke", "8")
        assert result.exit_code == 1
        assert "No item found" in result.output


def test_commands_before_init_fail():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "registry.json"

        result = _invoke(state, "get", "1")
        assert result.exit_code == 1
        assert "not been initialized" in result.output


def test_bad_identifier():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "registry.json"
        _invoke(state, "init")

        result = _invoke(state, "revoke", "not-a-number")
        assert result.exit_code == 1


def test_reset_requires_owner():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "registry.json"
        _invoke(state, "init")
        for i in range(1, 6):
            _invoke(state, "create", str(i), f"item {i}", str(i), "x")

        result = _invoke(state, "reset", "--caller", "bob.testnet")
        assert result.exit_code == 1
        assert "contract owner" in result.output
        assert "item 5" in _invoke(state, "get", "5").output

        result = _invoke(state, "reset", "--caller", "alice.testnet")
        assert result.exit_code == 0
        assert "No item 5" in _invoke(state, "get", "5").output


def test_negative_score_reports_range():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "registry.json"
        _invoke(state, "init")

        result = _invoke(state, "create", "1", "t", "-5", "c")
        assert result.exit_code == 2
        assert "No such option" not in result.output
        assert "0<=x<=65535" in result.output
        assert "No item 1" in _invoke(state, "get", "1").output


def test_bad_config_file_is_a_usage_error():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "registry.json"
        config = Path(tmpdir) / "scv.yaml"
        config.write_text("- owner\n")

        result = _invoke(state, "--config", str(config), "init")
        assert result.exit_code == 2
        assert "must contain a mapping" in result.output
        assert not state.exists()
