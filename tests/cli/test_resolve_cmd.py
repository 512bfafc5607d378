"""Tests for ``treeresolver resolve`` and ``treeresolver inspect``.

Verifies:
    - Exit codes 0 (all linked), 1 (unlinked present), 2 (bad manifest).
    - Text output mentions roots and unlinked nodes.
    - JSON output has the expected structure.
    - ``inspect`` shows relations and rejects unknown names.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from treeresolver.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


class TestResolveCommand:
    """Tests for ``treeresolver resolve``."""

    def test_fully_linked_exits_0(
        self, runner: CliRunner, linked_manifest: Path
    ) -> None:
        result = runner.invoke(cli, ["resolve", str(linked_manifest)])
        assert result.exit_code == 0
        assert "All nodes linked" in result.output

    def test_unlinked_exits_1(
        self, runner: CliRunner, graph_manifest: Path
    ) -> None:
        result = runner.invoke(cli, ["resolve", str(graph_manifest)])
        assert result.exit_code == 1
        assert "Unlinked nodes" in result.output
        assert "worker" in result.output
        assert "missing queue" in result.output

    def test_json_output(self, runner: CliRunner, graph_manifest: Path) -> None:
        result = runner.invoke(
            cli, ["resolve", str(graph_manifest), "--format", "json"]
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["mode"] == "graph"
        assert data["roots"] == ["db", "cache"]
        assert data["order"] == ["db", "cache", "api", "web"]
        assert data["unlinked"] == ["worker", "left", "right"]
        assert data["nodes"]["web"]["ancestors"] == ["api", "cache", "db"]

    def test_tree_manifest(self, runner: CliRunner, tree_manifest: Path) -> None:
        result = runner.invoke(
            cli, ["resolve", str(tree_manifest), "--format", "json"]
        )
        data = json.loads(result.output)
        assert data["mode"] == "tree"
        assert data["nodes"]["spellcheck"]["root"] == "app"
        assert data["unlinked"] == ["orphan"]

    def test_invalid_manifest_exits_2(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        bad = tmp_path / "bad.yaml"
        bad.write_text("mode: forest\nnodes: []\n")
        result = runner.invoke(cli, ["resolve", str(bad)])
        assert result.exit_code == 2
        assert "Error" in result.output
        assert "unknown mode" in result.output

    def test_invalid_manifest_json_error(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        bad = tmp_path / "dup.yaml"
        bad.write_text("nodes:\n  - name: a\n  - name: a\n")
        result = runner.invoke(cli, ["resolve", str(bad), "--format", "json"])
        assert result.exit_code == 2
        assert "already declared" in json.loads(result.output)["error"]

    def test_nonexistent_path(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "/nonexistent/manifest.yaml"])
        assert result.exit_code == 2

    def test_empty_manifest(self, runner: CliRunner, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yaml"
        empty.write_text("nodes: []\n")
        result = runner.invoke(cli, ["resolve", str(empty)])
        assert result.exit_code == 0
        assert "No nodes declared" in result.output

    def test_tree_manifest_in_graph_mode_keeps_parents(
        self, runner: CliRunner, tree_manifest: Path
    ) -> None:
        result = runner.invoke(
            cli,
            ["resolve", str(tree_manifest), "--mode", "graph", "--format", "json"],
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["roots"] == ["app"]
        assert data["unlinked"] == ["orphan"]

    def test_verbose_flag(self, runner: CliRunner, linked_manifest: Path) -> None:
        result = runner.invoke(cli, ["-v", "resolve", str(linked_manifest)])
        assert result.exit_code == 0


class TestInspectCommand:
    """Tests for ``treeresolver inspect``."""

    def test_inspect_text(self, runner: CliRunner, graph_manifest: Path) -> None:
        result = runner.invoke(cli, ["inspect", str(graph_manifest), "api"])
        assert result.exit_code == 0
        assert "Node Detail" in result.output
        assert "LINKED" in result.output

    def test_inspect_json(self, runner: CliRunner, graph_manifest: Path) -> None:
        result = runner.invoke(
            cli, ["inspect", str(graph_manifest), "api", "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "api"
        assert data["parents"] == ["cache", "db"]
        assert data["children"] == ["web"]
        assert data["linked"] is True

    def test_inspect_tree_root(self, runner: CliRunner, tree_manifest: Path) -> None:
        result = runner.invoke(cli, ["inspect", str(tree_manifest), "spellcheck"])
        assert result.exit_code == 0
        assert "app" in result.output

    def test_inspect_unknown_name(
        self, runner: CliRunner, graph_manifest: Path
    ) -> None:
        result = runner.invoke(cli, ["inspect", str(graph_manifest), "ghost"])
        assert result.exit_code == 2
        assert "not declared" in result.output
