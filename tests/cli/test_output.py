"""Tests for CLI output formatting helpers.

Verifies:
    - Status style mapping.
    - Node status classification.
    - Output functions produce non-empty output without errors.
"""

from __future__ import annotations

import pytest

from treeresolver.cli.output import (
    node_status,
    print_node_detail,
    print_resolution,
    status_style,
)
from treeresolver.core.linker import DepResolver, TreeResolver


@pytest.fixture
def result():
    tree = DepResolver()
    tree.add_instance("a")
    tree.add_instance("b", "a")
    tree.add_instance("c", ["a", "missing"])
    return tree.build()


class TestStatusStyles:
    def test_root_is_bold_green(self) -> None:
        assert status_style("root") == "bold green"

    def test_linked_is_cyan(self) -> None:
        assert status_style("linked") == "cyan"

    def test_unlinked_is_bold_red(self) -> None:
        assert status_style("unlinked") == "bold red"

    def test_unknown_is_white(self) -> None:
        assert status_style("other") == "white"


class TestNodeStatus:
    def test_classification(self, result) -> None:
        assert node_status(result, "a") == "root"
        assert node_status(result, "b") == "linked"
        assert node_status(result, "c") == "unlinked"


class TestPrinters:
    def test_print_resolution(self, result, capsys) -> None:
        print_resolution(result, "graph")
        out = capsys.readouterr().out
        assert "Dependency Resolution (graph)" in out
        assert "missing missing" in out

    def test_print_resolution_tree(self, capsys) -> None:
        tree = TreeResolver()
        tree.add_instance("h", "i")
        tree.add_instance("i", "h")
        print_resolution(tree.build(), "tree")
        out = capsys.readouterr().out
        assert "circular or blocked" in out

    def test_print_node_detail(self, result, capsys) -> None:
        print_node_detail(result, "b")
        out = capsys.readouterr().out
        assert "Node Detail" in out
        assert "Ancestors" in out
