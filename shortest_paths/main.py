import os
from typing import Any, Dict, List, Tuple

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from shortest_paths.algorithms.floyd_warshall import (
    ComputationCancelled,
    InvalidEdge,
    InvalidVertexCount,
    OutOfRangeEdge,
    floyd_warshall,
    reconstruct_path,
)
from shortest_paths.algorithms.floyd_warshall_numpy import WeightOutOfRange, floyd_warshall_numpy
from shortest_paths.utils.graph_loader import DATA_PATH, load_graph
from shortest_paths.utils.matrix_format import format_result

ENGINE_ERRORS = (InvalidVertexCount, InvalidEdge, OutOfRangeEdge, WeightOutOfRange, ComputationCancelled)

# Floyd–Warshall es O(V³) en tiempo y O(V²) en memoria
MAX_VERTICES = 300
MAX_EDGES = MAX_VERTICES * MAX_VERTICES


class GraphRequest(BaseModel):
    num_vertices: int = Field(ge=0, le=MAX_VERTICES)
    edges: List[Tuple[int, int, int]] = Field(default_factory=list, max_length=MAX_EDGES)
    backend: str = "python"


class PathRequest(BaseModel):
    num_vertices: int = Field(ge=0, le=MAX_VERTICES)
    edges: List[Tuple[int, int, int]] = Field(default_factory=list, max_length=MAX_EDGES)
    source: int
    target: int


app = FastAPI()

print("Cargando grafo de rutas desde CSV...")

GRAPH_DATA_PATH = os.getenv("GRAPH_DATA_PATH", DATA_PATH)
NODE_IDS, EDGES = load_graph(base_path=GRAPH_DATA_PATH)
NODE_INDEX = {label: i for i, label in enumerate(NODE_IDS)}
DIST, NEXT, HAS_NEGATIVE_CYCLE = floyd_warshall(len(NODE_IDS), EDGES)

print(f"Tabla de rutas lista: {len(NODE_IDS)} nodos, {len(EDGES)} aristas.")


def run_backend(num_vertices: int, edges: List[Tuple[int, int, int]], backend: str):
    """Ejecuta Floyd–Warshall con el backend pedido ('python' o 'numpy')."""
    name = (backend or "python").lower()
    if name == "numpy":
        return name, floyd_warshall_numpy(num_vertices, edges)
    return "python", floyd_warshall(num_vertices, edges)


def error_body(e: Exception, **extra) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": f"{type(e).__name__}: {str(e)}"}
    body.update(extra)
    return body


def labelled_path(path: List[int]) -> List[str]:
    return [NODE_IDS[v] for v in path]


@app.post("/shortest-paths")
def all_pairs(req: GraphRequest):
    try:
        backend_used, (dist, next_matrix, has_negative_cycle) = run_backend(
            req.num_vertices, req.edges, req.backend
        )
    except ENGINE_ERRORS as e:
        return error_body(e)

    return {
        "distances": dist,
        "next": next_matrix,
        "has_negative_cycle": has_negative_cycle,
        "backend_used": backend_used,
    }


@app.post("/path")
def path(req: PathRequest):
    try:
        dist, next_matrix, has_negative_cycle = floyd_warshall(req.num_vertices, req.edges)
        route = reconstruct_path(next_matrix, req.source, req.target)
    except ENGINE_ERRORS as e:
        return error_body(e, path=[])

    if not route:
        return {
            "error": "No existe un camino entre los vértices pedidos.",
            "path": [],
            "has_negative_cycle": has_negative_cycle,
        }

    return {
        "path": route,
        "distance": dist[req.source][req.target],
        "has_negative_cycle": has_negative_cycle,
    }


@app.get("/routing-table")
async def routing_table():
    return {
        "nodes": NODE_IDS,
        "distances": DIST,
        "next": [[None if v is None else NODE_IDS[v] for v in row] for row in NEXT],
        "has_negative_cycle": HAS_NEGATIVE_CYCLE,
    }


@app.get("/route")
async def route(source: str, target: str):
    unknown = [label for label in (source, target) if label not in NODE_INDEX]
    if unknown:
        return {"error": f"Nodos desconocidos: {', '.join(unknown)}", "path": []}

    i, j = NODE_INDEX[source], NODE_INDEX[target]
    nodes = reconstruct_path(NEXT, i, j)
    if not nodes:
        return {"error": f"No existe un camino de {source} a {target}.", "path": []}

    result: Dict[str, Any] = {
        "source": source,
        "target": target,
        "path": labelled_path(nodes),
        "distance": DIST[i][j],
    }
    if HAS_NEGATIVE_CYCLE:
        result["warning"] = "El grafo tiene un ciclo negativo; la distancia no es confiable."
    return result


@app.get("/report", response_class=PlainTextResponse)
async def report():
    return format_result(DIST, NEXT, HAS_NEGATIVE_CYCLE, labels=NODE_IDS)
