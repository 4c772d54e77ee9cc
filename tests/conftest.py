"""Pytest configuration and fixtures"""
import matplotlib

matplotlib.use("Agg")

import pytest

from crossroads.graph import RoadNetwork


@pytest.fixture
def chain():
    """Road network 1-2-3-4"""
    return RoadNetwork.from_edges(4, [(1, 2), (2, 3), (3, 4)])


@pytest.fixture
def write_input(tmp_path, monkeypatch):
    """Write an input.txt into a fresh working directory and return its path"""
    monkeypatch.chdir(tmp_path)

    def _write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
