import numbers


class InvalidVertexCount(ValueError):
    """El número de vértices es negativo o no es un entero."""


class OutOfRangeEdge(IndexError):
    """Una arista (o una consulta) referencia un vértice fuera de [0, num_vertices)."""


class InvalidEdge(TypeError):
    """Un extremo o un peso de una arista no es un entero."""


class ComputationCancelled(RuntimeError):
    """El cálculo se interrumpió entre dos iteraciones de k."""


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_input(num_vertices, edges):
    """
    Revisa el número de vértices y los extremos de cada arista antes de
    construir cualquier matriz. Retorna las aristas como lista de tuplas.
    """
    if isinstance(num_vertices, bool) or not isinstance(num_vertices, int):
        raise InvalidVertexCount(f"num_vertices debe ser un entero, no {num_vertices!r}")
    if num_vertices < 0:
        raise InvalidVertexCount(f"num_vertices no puede ser negativo: {num_vertices}")

    checked = []
    for pos, (u, v, w) in enumerate(edges):
        for value in (u, v, w):
            if not _is_integer(value):
                raise InvalidEdge(f"arista #{pos} ({u}, {v}, {w}): {value!r} no es un entero")
        for vertex in (u, v):
            if not 0 <= vertex < num_vertices:
                raise OutOfRangeEdge(
                    f"arista #{pos} ({u}, {v}, {w}): vértice {vertex} fuera de [0, {num_vertices})"
                )
        checked.append((int(u), int(v), int(w)))
    return checked


def floyd_warshall(num_vertices, edges, cancel_check=None):
    """
    Implementación del algoritmo de Floyd–Warshall.
    Parámetros:
        num_vertices: número total de vértices (0..num_vertices-1)
        edges: lista de tuplas (u, v, peso); si se repite un par (u, v)
               gana la última arista
        cancel_check: función opcional sin argumentos; si retorna True entre
                      dos iteraciones de k se lanza ComputationCancelled
    Retorna:
        dist: matriz de distancias mínimas (None = inalcanzable)
        next_matrix: siguiente vértice en el camino de i a j (None = sin camino o i == j)
        has_negative_cycle: bool si se detectó un ciclo negativo
    """
    edges = validate_input(num_vertices, edges)
    n = num_vertices

    dist = [[None] * n for _ in range(n)]
    next_matrix = [[None] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0

    for u, v, w in edges:
        dist[u][v] = w
        next_matrix[u][v] = v

    # Un lazo no negativo nunca mejora el camino vacío
    for i in range(n):
        if dist[i][i] >= 0:
            dist[i][i] = 0
            next_matrix[i][i] = None

    # k debe ser el bucle externo
    for k in range(n):
        if cancel_check is not None and cancel_check():
            raise ComputationCancelled(f"cancelado antes de la iteración k={k}")
        dist_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik is None:
                continue
            dist_i = dist[i]
            next_i = next_matrix[i]
            for j in range(n):
                d_kj = dist_k[j]
                if d_kj is None:
                    continue
                alt = d_ik + d_kj
                if dist_i[j] is None or alt < dist_i[j]:
                    dist_i[j] = alt
                    next_i[j] = next_i[k]

    has_negative_cycle = any(dist[i][i] < 0 for i in range(n))

    return dist, next_matrix, has_negative_cycle


def reconstruct_path(next_matrix, start, goal):
    """
    Reconstruye el camino más corto de 'start' a 'goal' usando la matriz 'next'.
    Retorna la lista de vértices (ambos extremos incluidos) o [] si no hay camino.
    El recorrido se corta a los len(next_matrix) pasos, así que nunca se cuelga
    con una matriz afectada por un ciclo negativo.
    """
    n = len(next_matrix)
    for vertex in (start, goal):
        if not 0 <= vertex < n:
            raise OutOfRangeEdge(f"vértice {vertex} fuera de [0, {n})")

    if start == goal:
        return [start]
    if next_matrix[start][goal] is None:
        return []

    path = [start]
    node = start
    for _ in range(n):
        node = next_matrix[node][goal]
        if node is None:
            return []
        path.append(node)
        if node == goal:
            return path
    return []

