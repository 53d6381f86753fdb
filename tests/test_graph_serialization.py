"""Tests for saving and loading graphs as JSON."""

import json

import pytest

from pathsearch.utils.graph_serialization import (
    GraphData,
    data_to_graph,
    graph_to_data,
    load_graph,
    save_graph,
)


def test_save_and_load(example_graph, tmp_path):
    filepath = tmp_path / "graphs" / "demo.json"
    save_graph(graph_to_data(example_graph, start="A", target="E", name="demo"), str(filepath))

    loaded = load_graph(str(filepath))
    graph = data_to_graph(loaded)

    assert loaded.start == "A"
    assert loaded.target == "E"
    assert loaded.name == "demo"
    assert sorted(graph.nodes) == ["A", "B", "C", "D", "E"]
    assert sorted(graph.edges()) == sorted(example_graph.edges())
    assert graph.heuristic == "zero"


def test_saved_file_layout(example_graph, tmp_path):
    filepath = tmp_path / "demo.json"
    save_graph(graph_to_data(example_graph), str(filepath))

    data = json.loads(filepath.read_text())

    assert data["version"] == "1.0"
    assert ["A", "B", 1.0] in data["edges"]
    assert data["start"] is None


def test_from_dict_defaults():
    graph_data = GraphData.from_dict({"nodes": ["x", "y"], "edges": [["x", "y", 2]]})

    assert graph_data.edges == [("x", "y", 2.0)]
    assert graph_data.heuristic == "zero"
    assert graph_data.start is None


@pytest.mark.parametrize("data", [
    {"nodes": ["x"]},
    {"edges": []},
    {"nodes": ["x", "y"], "edges": [["x", "y"]]},
    {"nodes": ["a"], "edges": [5]},
    {"nodes": ["x", "y"], "edges": [["x", "y", None]]},
    {"nodes": ["x", "y"], "edges": [["x", "y", "cheap"]]},
])
def test_from_dict_rejects_malformed_data(data):
    with pytest.raises(ValueError):
        GraphData.from_dict(data)


def test_edge_to_unknown_node_rejected():
    graph_data = GraphData(nodes=["x"], edges=[("x", "y", 1.0)])
    with pytest.raises(ValueError):
        data_to_graph(graph_data)


def test_load_invalid_json(tmp_path):
    filepath = tmp_path / "broken.json"
    filepath.write_text("{not json")

    with pytest.raises(ValueError):
        load_graph(str(filepath))


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_graph(str(tmp_path / "missing.json"))
