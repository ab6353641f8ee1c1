from typing import Any, List, Optional

import pandas as pd

INF_TOKEN = "INF"
NONE_TOKEN = "N/A"


def _frame(matrix, token, labels: Optional[List[Any]] = None) -> pd.DataFrame:
    labels = list(labels) if labels is not None else list(range(len(matrix)))
    rows = [[token if value is None else value for value in row] for row in matrix]
    return pd.DataFrame(rows, index=labels, columns=labels, dtype=object)


def distance_frame(dist, labels=None) -> pd.DataFrame:
    """Matriz de distancias como DataFrame; las celdas inalcanzables muestran INF."""
    return _frame(dist, INF_TOKEN, labels)


def next_frame(next_matrix, labels=None) -> pd.DataFrame:
    """
    Matriz 'next' como DataFrame. Con 'labels' los índices de vértice se
    traducen a sus etiquetas; las celdas sin camino muestran N/A.
    """
    if labels is not None:
        next_matrix = [[None if v is None else labels[v] for v in row] for row in next_matrix]
    return _frame(next_matrix, NONE_TOKEN, labels)


def format_result(dist, next_matrix, has_negative_cycle, labels=None) -> str:
    """Reporte en texto: matriz de distancias, matriz next y ciclo negativo (Yes/No)."""
    if not dist:
        body_dist = body_next = "(vacío)"
    else:
        body_dist = distance_frame(dist, labels).to_string()
        body_next = next_frame(next_matrix, labels).to_string()

    return "\n".join([
        "Distance Matrix:",
        body_dist,
        "",
        "Next Matrix:",
        body_next,
        "",
        f"Negative Cycle: {'Yes' if has_negative_cycle else 'No'}",
    ])
