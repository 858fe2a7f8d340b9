"""
Algoritmo de Dijkstra: implementação manual, usada como referência "do zero" para o D* Lite.
Caminho de custo mínimo em grafo com pesos não negativos (busca exaustiva).
Fila de prioridade: heapq (min-heap).
"""

from __future__ import annotations
import heapq
from itertools import count
from typing import Any, List, Optional, Tuple

import networkx as nx

from ..graph_operations import CostFunction, GraphOperations


def dijkstra(
    G: nx.DiGraph,
    start: Any,
    goal: Any,
    cost: Optional[CostFunction] = None,
) -> Tuple[List[Any], float]:
    """
    Retorna (caminho do start ao goal, custo total) ou ([], inf) se não houver caminho.
    cost segue a mesma resolução do D* Lite (G.cost, senão custo uniforme).
    """
    GraphOperations.validate_path_nodes(G, start, goal)
    cost = GraphOperations.resolve_cost_function(G, cost)
    dist: dict = {start: 0.0}
    prev: dict = {start: None}
    tie = count()
    heap: List[Tuple[float, int, Any]] = [(0.0, next(tie), start)]

    while heap:
        d, _, u = heapq.heappop(heap)
        if u == goal:
            path: List[Any] = []
            cur = goal
            while cur is not None:
                path.append(cur)
                cur = prev[cur]
            path.reverse()
            return path, d

        if d > dist.get(u, float("inf")):
            continue

        for v in G.successors(u):
            w = cost(u, v)
            if w == float("inf"):
                continue
            alt = d + w
            if alt < dist.get(v, float("inf")):
                dist[v] = alt
                prev[v] = u
                heapq.heappush(heap, (alt, next(tie), v))

    return [], float("inf")
