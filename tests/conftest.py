"""Shared fixtures for treeresolver tests."""

import json
import pathlib

import pytest


@pytest.fixture
def graph_manifest(tmp_path: pathlib.Path) -> pathlib.Path:
    """A multi-parent YAML manifest with one missing parent and one cycle."""
    manifest = tmp_path / "services.yaml"
    manifest.write_text(
        "mode: graph\n"
        "nodes:\n"
        "  - name: db\n"
        "  - name: cache\n"
        "  - name: api\n"
        "    parents: [db]\n"
        "    optional: [cache, metrics]\n"
        "    payload: {port: 8080}\n"
        "  - name: web\n"
        "    parents: api\n"
        "  - name: worker\n"
        "    parents: [db, queue]\n"
        "  - name: left\n"
        "    parents: [right]\n"
        "  - name: right\n"
        "    parents: [left]\n"
    )
    return manifest


@pytest.fixture
def linked_manifest(tmp_path: pathlib.Path) -> pathlib.Path:
    """A JSON manifest in which every node links."""
    manifest = tmp_path / "linked.json"
    manifest.write_text(json.dumps({
        "nodes": [
            {"name": "core"},
            {"name": "auth", "parents": ["core"]},
            {"name": "billing", "parents": ["core", "auth"]},
        ],
    }))
    return manifest


@pytest.fixture
def tree_manifest(tmp_path: pathlib.Path) -> pathlib.Path:
    """A single-parent manifest."""
    manifest = tmp_path / "plugins.yml"
    manifest.write_text(
        "mode: tree\n"
        "nodes:\n"
        "  - name: app\n"
        "  - name: editor\n"
        "    parent: app\n"
        "  - name: spellcheck\n"
        "    parent: editor\n"
        "  - name: orphan\n"
        "    parent: nowhere\n"
    )
    return manifest
