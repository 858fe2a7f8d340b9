"""
Algoritmo A*: implementação manual, referência "do zero" para comparar com o D* Lite.
Busca heurística com f(n) = g(n) + h(n); reduz expansão de nós em relação ao Dijkstra.
Heurística padrão: a declarada pelo grafo (G.heuristic_cost), senão nula.
"""

from __future__ import annotations
import heapq
from itertools import count
from typing import Any, List, Optional, Tuple

import networkx as nx

from ..graph_operations import CostFunction, GraphOperations


def a_star(
    G: nx.DiGraph,
    start: Any,
    goal: Any,
    cost: Optional[CostFunction] = None,
    heuristic: Optional[CostFunction] = None,
) -> Tuple[List[Any], float]:
    """
    Retorna (caminho do start ao goal, custo total) ou ([], inf) se não houver caminho.
    """
    GraphOperations.validate_path_nodes(G, start, goal)
    cost = GraphOperations.resolve_cost_function(G, cost)
    heuristic = GraphOperations.resolve_heuristic_function(G, heuristic)

    g_score: dict = {start: 0.0}
    prev: dict = {start: None}
    tie = count()
    open_set: List[Tuple[float, int, Any]] = [(heuristic(start, goal), next(tie), start)]
    closed: set = set()

    while open_set:
        _, _, u = heapq.heappop(open_set)
        if u in closed:
            continue
        if u == goal:
            path: List[Any] = []
            cur = goal
            while cur is not None:
                path.append(cur)
                cur = prev[cur]
            path.reverse()
            return path, g_score[goal]

        closed.add(u)

        for v in G.successors(u):
            if v in closed:
                continue
            w = cost(u, v)
            if w == float("inf"):
                continue
            tentative_g = g_score[u] + w
            if tentative_g < g_score.get(v, float("inf")):
                prev[v] = u
                g_score[v] = tentative_g
                heapq.heappush(open_set, (tentative_g + heuristic(v, goal), next(tie), v))

    return [], float("inf")
