import os
from typing import Any, Dict, List, Tuple

import networkx as nx
import pandas as pd

DATA_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")

Edge = Tuple[int, int, int]


def integral_weight(weight, where: str) -> int:
    """Convierte el peso a int; un peso fraccionario o no numérico es un error."""
    try:
        is_integral = float(weight).is_integer()
    except (TypeError, ValueError):
        is_integral = False
    if not is_integral:
        raise ValueError(f"Peso no entero en {where}: {weight!r}")
    return int(weight)


def index_edges(rows) -> Tuple[List[Any], List[Edge]]:
    """
    Asigna índices densos (0..n-1) a las etiquetas de los nodos, en orden de
    primera aparición, y traduce cada fila (origen, destino, peso) a índices.
    Se respeta el orden de entrada para que gane la última arista repetida.
    Un peso fraccionario lanza ValueError indicando la fila.
    """
    index: Dict[Any, int] = {}
    node_ids: List[Any] = []
    edges: List[Edge] = []

    for pos, (source, target, weight) in enumerate(rows):
        w = integral_weight(weight, f"la fila {pos} ({source} -> {target})")
        for label in (source, target):
            if label not in index:
                index[label] = len(node_ids)
                node_ids.append(label)
        edges.append((index[source], index[target], w))

    return node_ids, edges


def load_graph(base_path=DATA_PATH, filename="aristas.csv"):
    """
    Carga el CSV de aristas y construye la lista para Floyd–Warshall.
    - Columnas esperadas: 'source', 'target', 'weight'
    - Los nodos se identifican por su etiqueta (texto) y se numeran en orden
      de aparición
    - Si un nodo aislado debe existir, basta una fila 'source' con 'target'
      igual a sí mismo y peso 0
    Retorna: (node_ids, edges)
    """
    edges_path = os.path.join(base_path, filename)
    edges_df = pd.read_csv(edges_path)

    missing = {"source", "target", "weight"} - set(edges_df.columns)
    if missing:
        raise ValueError(f"Faltan columnas en {edges_path}: {sorted(missing)}")

    sources = edges_df["source"].astype(str)
    targets = edges_df["target"].astype(str)
    rows = zip(sources, targets, edges_df["weight"])
    node_ids, edges = index_edges(rows)

    print(f"Grafo cargado con {len(node_ids)} nodos y {len(edges)} aristas.")
    return node_ids, edges


def graph_from_edges(node_ids: List[Any], edges: List[Edge]) -> nx.DiGraph:
    """Construye un nx.DiGraph con las etiquetas originales y el atributo 'weight'."""
    G = nx.DiGraph()
    G.add_nodes_from(node_ids)
    for u, v, w in edges:
        G.add_edge(node_ids[u], node_ids[v], weight=w)
    return G


def edges_from_graph(G: nx.DiGraph, weight: str = "weight") -> Tuple[List[Any], List[Edge]]:
    """
    Convierte un grafo dirigido de NetworkX en (node_ids, edges) con índices densos.
    Las aristas sin peso cuentan como 1; un peso fraccionario lanza ValueError.
    """
    node_ids = list(G.nodes)
    index = {label: i for i, label in enumerate(node_ids)}
    edges = [
        (index[u], index[v], integral_weight(data.get(weight, 1), f"la arista {u} -> {v}"))
        for u, v, data in G.edges(data=True)
    ]
    return node_ids, edges
