"""Tests for CLI module."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from disjointset.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "disjointset" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "mst" in result.output
    assert "components" in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# mst command
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("strategy", ["full", "halving"])
def test_mst_stdout(runner: CliRunner, city_edges_path: Path, strategy: str) -> None:
    """Test mst prints selected edges as JSONL."""
    result = runner.invoke(cli, ["mst", str(city_edges_path), "--strategy", strategy])

    assert result.exit_code == 0
    edge_lines = [line for line in result.output.splitlines() if line.startswith("{")]
    assert [json.loads(line)["weight"] for line in edge_lines] == [100, 400, 750, 1000, 1200]
    assert "total weight 3450" in result.output


@pytest.mark.unit
def test_mst_output_file(runner: CliRunner, city_edges_path: Path, tmp_path: Path) -> None:
    """Test --output writes JSONL edges to a file."""
    output = tmp_path / "forest.jsonl"

    result = runner.invoke(cli, ["mst", str(city_edges_path), "-o", str(output)])

    assert result.exit_code == 0
    rows = [json.loads(line) for line in output.read_text().splitlines()]
    assert rows[0] == {"source": "Philadelphia", "target": "New York", "weight": 100}
    assert len(rows) == 5
    assert "Selected 5 edges across 1 tree(s)" in result.output


@pytest.mark.unit
def test_mst_unknown_strategy(runner: CliRunner, city_edges_path: Path) -> None:
    """Test click rejects strategies outside the registry."""
    result = runner.invoke(cli, ["mst", str(city_edges_path), "--strategy", "bogus"])

    assert result.exit_code == 2
    assert "bogus" in result.output


@pytest.mark.unit
def test_mst_missing_file(runner: CliRunner, tmp_path: Path) -> None:
    """Test a missing edges file is a usage error."""
    result = runner.invoke(cli, ["mst", str(tmp_path / "absent.jsonl")])

    assert result.exit_code == 2


@pytest.mark.unit
def test_mst_malformed_edges(
    runner: CliRunner, write_edges: Callable[..., Path], tmp_path: Path
) -> None:
    """Test malformed input exits 1 and records an error event."""
    path = write_edges([{"source": "a", "target": "b", "weight": "x"}])
    log_path = tmp_path / "events.jsonl"

    result = runner.invoke(cli, ["mst", str(path), "--log", str(log_path)])

    assert result.exit_code == 1
    assert "line 1" in result.output

    events = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert [e["event"] for e in events] == ["run_started", "error", "run_finished"]
    assert events[1]["data"]["exception_class"] == "EdgeFormatError"
    assert events[2]["data"]["status"] == "failed"


@pytest.mark.unit
def test_mst_unhashable_endpoint(runner: CliRunner, write_edges: Callable[..., Path]) -> None:
    """Test an object endpoint is reported as a handled error, not a crash."""
    path = write_edges([{"source": {"x": 1}, "target": "b", "weight": 1}])

    result = runner.invoke(cli, ["mst", str(path)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "must be hashable" in result.output


@pytest.mark.unit
def test_mst_unwritable_log_path(
    runner: CliRunner, city_edges_path: Path, tmp_path: Path
) -> None:
    """Test a log path under a regular file exits 1 with a message."""
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")

    result = runner.invoke(cli, ["mst", str(city_edges_path), "--log", str(blocker / "events.jsonl")])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error" in result.output


@pytest.mark.unit
def test_mst_verbose_error_logs_traceback(
    runner: CliRunner, write_edges: Callable[..., Path], tmp_path: Path
) -> None:
    """Test verbose mode records the traceback in the error event."""
    path = write_edges(["{broken"])
    log_path = tmp_path / "events.jsonl"

    result = runner.invoke(cli, ["mst", str(path), "-v", "--log", str(log_path)])

    assert result.exit_code == 1
    assert "Traceback" in result.output
    events = [json.loads(line) for line in log_path.read_text().splitlines()]
    error = next(e for e in events if e["event"] == "error")
    assert "Traceback" in error["data"]["traceback"]


@pytest.mark.unit
def test_mst_quiet_error_omits_traceback(
    runner: CliRunner, write_edges: Callable[..., Path], tmp_path: Path
) -> None:
    """Test non-verbose error events carry no traceback."""
    path = write_edges(["{broken"])
    log_path = tmp_path / "events.jsonl"

    runner.invoke(cli, ["mst", str(path), "--log", str(log_path)])

    events = [json.loads(line) for line in log_path.read_text().splitlines()]
    error = next(e for e in events if e["event"] == "error")
    assert "traceback" not in error["data"]


@pytest.mark.unit
def test_mst_verbose(runner: CliRunner, city_edges_path: Path) -> None:
    """Test verbose mode reports input details."""
    result = runner.invoke(cli, ["mst", str(city_edges_path), "-v"])

    assert result.exit_code == 0
    assert "Loaded 11 edges" in result.output
    assert "Strategy: full" in result.output


# ---------------------------------------------------------------------------
# components command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_components(runner: CliRunner, write_edges: Callable[..., Path]) -> None:
    """Test components prints one JSON array per group."""
    path = write_edges(
        [
            {"source": "a", "target": "b", "weight": 1},
            {"source": "c", "target": "d", "weight": 1},
            {"source": "d", "target": "e", "weight": 1},
        ]
    )

    result = runner.invoke(cli, ["components", str(path), "-s", "halving"])

    assert result.exit_code == 0
    assert [json.loads(line) for line in result.output.splitlines()] == [
        ["a", "b"],
        ["c", "d", "e"],
    ]


@pytest.mark.unit
def test_components_malformed(runner: CliRunner, write_edges: Callable[..., Path]) -> None:
    """Test malformed input exits 1."""
    path = write_edges(["not json"])

    result = runner.invoke(cli, ["components", str(path)])

    assert result.exit_code == 1
    assert "Error" in result.output
