import numpy as np

from shortest_paths.algorithms.floyd_warshall import ComputationCancelled, validate_input

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


class WeightOutOfRange(ValueError):
    """Un peso no se puede representar como int64."""


def _overflowed(a, b, total):
    """Máscara de las sumas int64 que dieron la vuelta (mismo signo en a y b, otro en total)."""
    same_sign = (a >= 0) == (b >= 0)
    return same_sign & ((total >= 0) != (a >= 0))


def floyd_warshall_numpy(num_vertices, edges, cancel_check=None):
    """
    Floyd–Warshall vectorizado con NumPy.
    Para cada k relaja todas las celdas (i, j) a la vez a partir de la fila y
    la columna k tomadas al inicio de la ronda; la ronda k+1 empieza solo
    cuando la ronda k terminó de escribirse.
    Parámetros y retorno iguales a floyd_warshall (listas con None como centinela).
    Las sumas que desbordan int64 nunca cuentan como mejora.
    """
    edges = validate_input(num_vertices, edges)
    for u, v, w in edges:
        if not INT64_MIN <= w <= INT64_MAX:
            raise WeightOutOfRange(f"peso {w} de la arista ({u}, {v}) no cabe en int64")

    n = num_vertices
    dist = np.zeros((n, n), dtype=np.int64)
    reach = np.eye(n, dtype=bool)
    nxt = np.full((n, n), -1, dtype=np.int64)

    for u, v, w in edges:
        dist[u, v] = w
        reach[u, v] = True
        nxt[u, v] = v

    # Un lazo no negativo nunca mejora el camino vacío
    diag = np.arange(n)
    keep_empty = diag[dist[diag, diag] >= 0]
    dist[keep_empty, keep_empty] = 0
    nxt[keep_empty, keep_empty] = -1

    for k in range(n):
        if cancel_check is not None and cancel_check():
            raise ComputationCancelled(f"cancelado antes de la iteración k={k}")

        col = dist[:, k].copy()[:, None]
        row = dist[k, :].copy()[None, :]
        col_reach = reach[:, k].copy()[:, None]
        row_reach = reach[k, :].copy()[None, :]
        next_col = nxt[:, k].copy()[:, None]

        alt = col + row
        better = col_reach & row_reach & ~_overflowed(col, row, alt)
        better &= ~reach | (alt < dist)

        dist = np.where(better, alt, dist)
        nxt = np.where(better, next_col, nxt)
        reach |= better

    has_negative_cycle = bool((np.diagonal(dist) < 0).any())

    dist_out = np.where(reach, dist.astype(object), None).tolist()
    next_out = np.where(nxt >= 0, nxt.astype(object), None).tolist()
    return dist_out, next_out, has_negative_cycle
