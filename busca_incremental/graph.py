"""
Modelagem dos grafos de exemplo usando NetworkX.

Vértices: células de uma grade (nós com 'pos') ou pontos nomeados.
Arestas: ligações direcionadas com atributo 'distance' (custo base).
Cenários (interdição, lentidão, congestionamento) são armazenados em G.graph e usados pela função de peso.

O D* Lite assume que o conjunto de vértices é fixo durante a sessão: os cenários alteram custos
e arestas, nunca adicionam ou removem nós.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Tuple

import networkx as nx

from .graph_operations import GraphOperations

Cell = Tuple[int, int]

# Deslocamentos da vizinhança 4 e 8 na grade
_STRAIGHT_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL_MOVES = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class CostGraph(nx.DiGraph):
    """
    DiGraph que declara suas próprias funções de custo e heurística.
    O D* Lite usa estes métodos quando nenhuma função é passada explicitamente.
    """

    def cost(self, u: Any, v: Any) -> float:
        """Custo atual da aresta (u, v), considerando o cenário em self.graph."""
        return GraphOperations.get_edge_cost(self, u, v)

    def heuristic_cost(self, u: Any, v: Any) -> float:
        """Distância em linha reta entre u e v (admissível se o custo base é a distância)."""
        return GraphOperations.get_straight_line_distance(self, u, v)


def build_grid_graph(
    width: int,
    height: int,
    blocked: Iterable[Cell] = (),
    diagonal: bool = False,
) -> CostGraph:
    """
    Grade width x height com arestas nos dois sentidos entre células vizinhas.
    Células em blocked existem como nós, mas ficam sem arestas (obstáculos).
    O custo base de cada aresta é a distância euclidiana entre as células.
    """
    blocked_set = set(blocked)
    G = CostGraph()
    for x in range(width):
        for y in range(height):
            G.add_node((x, y), pos=(float(x), float(y)), label=f"{x},{y}")

    moves = _STRAIGHT_MOVES + (_DIAGONAL_MOVES if diagonal else ())
    for (x, y) in G.nodes():
        if (x, y) in blocked_set:
            continue
        for dx, dy in moves:
            nb = (x + dx, y + dy)
            if nb not in G or nb in blocked_set:
                continue
            G.add_edge((x, y), nb, distance=math.hypot(dx, dy))
    return G


def build_corridor_example() -> CostGraph:
    """
    Corredor A -> B -> C -> D com custo unitário, mais o vértice de desvio D'.
    D' -> D tem custo 0; a aresta C -> D' não existe no início (é aberta por um cenário).
    """
    G = CostGraph()
    for label in ("A", "B", "C", "D", "D'"):
        G.add_node(label, label=label)
    G.add_edge("A", "B", distance=1.0)
    G.add_edge("B", "C", distance=1.0)
    G.add_edge("C", "D", distance=1.0)
    G.add_edge("D'", "D", distance=0.0)
    return G
