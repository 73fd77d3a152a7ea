"""Shared fixtures for the mdshell test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from mdshell.config import CWD_ENV, SNAPSHOT_ENV, WIDTH_ENV
from mdshell.tree import MetadataTree, build_tree

SAMPLE_SNAPSHOT: dict[str, Any] = {
    "brokers": {
        "1": {"registration": "host=a:9092", "isFenced": "false"},
        "2": {"registration": "host=b:9092", "isFenced": "true"},
    },
    "topics": {
        "orders": {"id": "Qm1x", "partitions": {"0": "leader=1", "1": "leader=2"}},
        "payments": {"id": "Zt9c", "partitions": {}},
    },
    "features": {},
    "clusterId": "J8s2uQ",
    "epoch": 42,
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host settings out of the tests."""
    for name in (SNAPSHOT_ENV, WIDTH_ENV, CWD_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_tree() -> MetadataTree:
    return build_tree(SAMPLE_SNAPSHOT)


@pytest.fixture
def snapshot_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write the sample snapshot and point MDSHELL_SNAPSHOT at it."""
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SAMPLE_SNAPSHOT))
    monkeypatch.setenv(SNAPSHOT_ENV, str(path))
    return path
