import pytest

from shortest_paths.algorithms.floyd_warshall import floyd_warshall
from shortest_paths.algorithms.floyd_warshall_numpy import floyd_warshall_numpy

BASIC_EDGES = [
    (0, 1, 10),
    (0, 3, 5),
    (1, 3, 2),
    (1, 2, 1),
    (2, 4, 4),
    (3, 1, 3),
    (3, 2, 9),
    (3, 4, 2),
    (4, 2, 6),
]

NEGATIVE_CYCLE_EDGES = [(0, 1, -1), (1, 2, -2), (2, 0, -3)]

NEGATIVE_EDGES = [(0, 1, -2), (1, 2, 3), (2, 3, -4), (0, 3, 1)]


@pytest.fixture(params=[floyd_warshall, floyd_warshall_numpy], ids=["python", "numpy"])
def engine(request):
    """Ambas implementaciones deben cumplir el mismo contrato."""
    return request.param


@pytest.fixture
def basic_graph():
    return 5, list(BASIC_EDGES)


@pytest.fixture
def negative_edges_graph():
    return 4, list(NEGATIVE_EDGES)


@pytest.fixture
def negative_cycle_graph():
    return 3, list(NEGATIVE_CYCLE_EDGES)
