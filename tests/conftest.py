from pathlib import Path

import pytest

from netlat.models import CableRecord, Material
from netlat.topology import Graph


ROOT = Path(__file__).resolve().parents[1]

# (source, destination, material, bandwidth, length_m): the five-vertex sample network
SAMPLE_CABLES = [
    (0, 2, "optical", 10000, 10),
    (0, 3, "optical", 10000, 10),
    (1, 2, "optical", 10000, 10),
    (1, 3, "optical", 10000, 10),
    (0, 4, "copper", 100, 8),
    (1, 4, "copper", 100, 8),
    (2, 4, "copper", 100, 8),
    (3, 4, "copper", 100, 8),
]


def build(vertex_count, cables):
    g = Graph(vertex_count)
    for s, d, material, bandwidth, length in cables:
        for e in CableRecord(s, d, Material(material), bandwidth, length).to_edges():
            g.add_edge(e)
    return g


@pytest.fixture
def sample_graph():
    return build(5, SAMPLE_CABLES)


@pytest.fixture
def sample_file():
    return ROOT / "sample_network.txt"


@pytest.fixture
def make_graph():
    return build
