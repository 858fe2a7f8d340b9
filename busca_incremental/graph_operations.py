"""
Operações sobre o grafo: custo das arestas, função de peso, validação, distância e custo de caminho.
Também resolve as funções de custo/heurística padrão usadas pelo D* Lite.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Optional, Sequence

import networkx as nx

# Chaves em G.graph para parâmetros do cenário
KEY_CONGESTION_FACTOR = "congestion_factor"
KEY_EDGE_OVERRIDE = "edge_override"
KEY_EDGE_COST_MULTIPLIER = "edge_cost_multiplier"

CostFunction = Callable[[Any, Any], float]


def uniform_cost(u: Any, v: Any) -> float:
    """Custo unitário para qualquer aresta."""
    return 1.0


def null_heuristic(u: Any, v: Any) -> float:
    """Heurística nula: o D* Lite se comporta como busca de custo uniforme (Dijkstra)."""
    return 0.0


class GraphOperations:
    """Responsável pelos cálculos de custo das arestas e operações sobre o grafo."""

    @staticmethod
    def compute_edge_cost(d: Dict[str, Any], congestion_factor: float = 1.0) -> float:
        """
        Custo base do arco: atributo 'weight', senão 'distance', senão 1.0;
        multiplicado pelo fator de congestionamento global.
        """
        base = d.get("weight", d.get("distance", 1.0))
        return base * congestion_factor

    @staticmethod
    def get_weight_function(G: nx.DiGraph) -> Callable[[Any, Any, Dict], float]:
        """
        Retorna uma função (u, v, d) -> peso para uso em nx.dijkstra_path, nx.astar_path, etc.
        Override por aresta tem prioridade; depois congestionamento global e multiplicador por aresta.
        """
        override = G.graph.get(KEY_EDGE_OVERRIDE, {})
        edge_multiplier = G.graph.get(KEY_EDGE_COST_MULTIPLIER, {})
        congestion = G.graph.get(KEY_CONGESTION_FACTOR, 1.0)

        def weight(u: Any, v: Any, d: Dict) -> float:
            key = (u, v)
            if key in override:
                return override[key]
            base = GraphOperations.compute_edge_cost(d, congestion)
            return base * edge_multiplier.get(key, 1.0)

        return weight

    @staticmethod
    def get_edge_cost(G: nx.DiGraph, u: Any, v: Any) -> float:
        """Custo atual da aresta (u, v) com base nos atributos e no cenário em G.graph."""
        if not G.has_edge(u, v):
            return float("inf")
        wf = GraphOperations.get_weight_function(G)
        return wf(u, v, G.edges[u, v])

    @staticmethod
    def edge_cost_function(G: nx.DiGraph) -> CostFunction:
        """Função (u, v) -> custo que relê o cenário de G a cada chamada."""

        def cost(u: Any, v: Any) -> float:
            return GraphOperations.get_edge_cost(G, u, v)

        return cost

    @staticmethod
    def validate_path_nodes(G: nx.DiGraph, start: Any, goal: Any) -> None:
        """
        Levanta NetworkXError se start ou goal não existirem no grafo.
        """
        missing = [n for n in (start, goal) if n not in G]
        if not missing:
            return
        nodes_list = list(G.nodes())[:15]
        hint = "Nós neste grafo (amostra): " + str(nodes_list) + ("..." if len(G) > 15 else "")
        raise nx.NetworkXError(f"Nó(s) {missing} não existem no grafo. {hint}")

    @staticmethod
    def get_straight_line_distance(G: nx.DiGraph, u: Any, v: Any) -> float:
        """
        Distância em linha reta entre dois nós (atributo 'pos' = (x, y)). Para heurística A*/D* Lite.
        Sem 'pos' em algum dos nós a distância é 0.0 (heurística nula, continua admissível).
        """
        if u not in G.nodes or v not in G.nodes:
            return float("inf")
        pos_u = G.nodes[u].get("pos")
        pos_v = G.nodes[v].get("pos")
        if pos_u is None or pos_v is None:
            return 0.0
        return math.sqrt((pos_u[0] - pos_v[0]) ** 2 + (pos_u[1] - pos_v[1]) ** 2)

    @staticmethod
    def path_cost(cost: CostFunction, path: Sequence[Any]) -> float:
        """Custo total de um caminho (lista de nós) segundo a função de custo (u, v) -> float."""
        return sum((cost(u, v) for u, v in zip(path, path[1:])), 0.0)

    @staticmethod
    def resolve_cost_function(G: Any, cost: Optional[CostFunction] = None) -> CostFunction:
        """
        Função de custo efetiva: a informada, senão o método cost(u, v) declarado pelo grafo,
        senão custo uniforme.
        """
        if cost is not None:
            return cost
        declared = getattr(G, "cost", None)
        if callable(declared):
            return declared
        return uniform_cost

    @staticmethod
    def resolve_heuristic_function(G: Any, heuristic: Optional[CostFunction] = None) -> CostFunction:
        """
        Heurística efetiva: a informada, senão o método heuristic_cost(u, v) declarado pelo grafo,
        senão heurística nula.
        """
        if heuristic is not None:
            return heuristic
        declared = getattr(G, "heuristic_cost", None)
        if callable(declared):
            return declared
        return null_heuristic

