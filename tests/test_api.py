"""
Pruebas del servicio FastAPI
"""

import pytest
from fastapi.testclient import TestClient

from shortest_paths.main import MAX_VERTICES, app


@pytest.fixture
def client():
    return TestClient(app)


class TestShortestPaths:

    @pytest.mark.parametrize("backend", ["python", "numpy"])
    def test_basic_graph(self, client, backend, basic_graph):
        resp = client.post(
            "/shortest-paths",
            json={"num_vertices": 5, "edges": basic_graph[1], "backend": backend},
        )
        body = resp.json()

        assert resp.status_code == 200
        assert body["backend_used"] == backend
        assert body["distances"][0] == [0, 8, 9, 5, 7]
        assert body["distances"][1][0] is None
        assert body["next"][0][1] == 3
        assert body["has_negative_cycle"] is False

    def test_unknown_backend_falls_back_to_python(self, client):
        resp = client.post(
            "/shortest-paths",
            json={"num_vertices": 1, "edges": [], "backend": "gpu"},
        )
        assert resp.json()["backend_used"] == "python"

    def test_negative_cycle(self, client, negative_cycle_graph):
        resp = client.post(
            "/shortest-paths",
            json={"num_vertices": 3, "edges": negative_cycle_graph[1]},
        )
        assert resp.json()["has_negative_cycle"] is True

    def test_negative_vertex_count_is_rejected(self, client):
        resp = client.post("/shortest-paths", json={"num_vertices": -2, "edges": []})
        assert resp.status_code == 422

    def test_oversized_graph_is_rejected(self, client):
        resp = client.post(
            "/shortest-paths",
            json={"num_vertices": MAX_VERTICES + 1, "edges": []},
        )
        assert resp.status_code == 422

    def test_largest_allowed_graph(self, client):
        resp = client.post(
            "/shortest-paths",
            json={"num_vertices": MAX_VERTICES, "edges": [], "backend": "numpy"},
        )
        body = resp.json()
        assert resp.status_code == 200
        assert len(body["distances"]) == MAX_VERTICES

    def test_out_of_range_edge(self, client):
        resp = client.post(
            "/shortest-paths",
            json={"num_vertices": 2, "edges": [[0, 2, 1]]},
        )
        assert resp.json()["error"].startswith("OutOfRangeEdge")

    def test_weight_out_of_int64(self, client):
        resp = client.post(
            "/shortest-paths",
            json={"num_vertices": 2, "edges": [[0, 1, 2 ** 63]], "backend": "numpy"},
        )
        assert resp.json()["error"].startswith("WeightOutOfRange")

    def test_malformed_edge_is_rejected(self, client):
        resp = client.post(
            "/shortest-paths",
            json={"num_vertices": 2, "edges": [[0, 1]]},
        )
        assert resp.status_code == 422


class TestPath:

    def test_path_found(self, client, basic_graph):
        resp = client.post(
            "/path",
            json={"num_vertices": 5, "edges": basic_graph[1], "source": 0, "target": 2},
        )
        assert resp.json() == {"path": [0, 3, 1, 2], "distance": 9, "has_negative_cycle": False}

    def test_no_path(self, client, basic_graph):
        resp = client.post(
            "/path",
            json={"num_vertices": 5, "edges": basic_graph[1], "source": 2, "target": 0},
        )
        body = resp.json()
        assert "error" in body
        assert body["path"] == []

    def test_oversized_path_request_is_rejected(self, client):
        resp = client.post(
            "/path",
            json={"num_vertices": MAX_VERTICES * 1000, "edges": [], "source": 0, "target": 0},
        )
        assert resp.status_code == 422

    def test_vertex_out_of_range(self, client, basic_graph):
        resp = client.post(
            "/path",
            json={"num_vertices": 5, "edges": basic_graph[1], "source": 0, "target": 9},
        )
        body = resp.json()
        assert body["error"].startswith("OutOfRangeEdge")
        assert body["path"] == []


class TestStartupGraph:

    def test_routing_table(self, client):
        body = client.get("/routing-table").json()

        assert body["nodes"] == ["R0", "R1", "R3", "R2", "R4"]
        assert body["distances"][0] == [0, 8, 5, 9, 7]
        assert body["next"][0][3] == "R3"
        assert body["has_negative_cycle"] is False

    def test_route(self, client):
        body = client.get("/route", params={"source": "R0", "target": "R2"}).json()
        assert body["path"] == ["R0", "R3", "R1", "R2"]
        assert body["distance"] == 9
        assert "warning" not in body

    def test_route_unreachable(self, client):
        body = client.get("/route", params={"source": "R2", "target": "R0"}).json()
        assert body["path"] == []
        assert "error" in body

    def test_route_unknown_node(self, client):
        body = client.get("/route", params={"source": "R0", "target": "R9"}).json()
        assert body["error"] == "Nodos desconocidos: R9"

    def test_report(self, client):
        resp = client.get("/report")
        assert resp.status_code == 200
        assert resp.text.startswith("Distance Matrix:")
        assert resp.text.endswith("Negative Cycle: No")
