"""
Cenários de simulação: alteram custos (e arestas) de G durante o planejamento.

1. Cenário de Evento: peso infinito em arestas interditadas.
2. Lentidão de trânsito: multiplicador de custo por aresta.
3. Congestionamento global: fator sobre todas as arestas.

Cada função devolve a lista de arestas (u, v) cujo custo mudou, no formato que DStarLite.update espera.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from .graph_operations import (
    KEY_CONGESTION_FACTOR,
    KEY_EDGE_COST_MULTIPLIER,
    KEY_EDGE_OVERRIDE,
)

Edge = Tuple[Any, Any]


def apply_event_scenario(G: nx.DiGraph, blocked_edges: Iterable[Edge]) -> List[Edge]:
    """Cenário de evento: interditar arestas (custo infinito)."""
    override = G.graph.setdefault(KEY_EDGE_OVERRIDE, {})
    changed = []
    for (u, v) in blocked_edges:
        if override.get((u, v)) != float("inf"):
            override[(u, v)] = float("inf")
            changed.append((u, v))
    return changed


def clear_event_scenario(G: nx.DiGraph, blocked_edges: Optional[Iterable[Edge]] = None) -> List[Edge]:
    """Remove interdições (todas, se blocked_edges for None)."""
    override = G.graph.get(KEY_EDGE_OVERRIDE, {})
    if blocked_edges is None:
        blocked_edges = list(override)
    changed = []
    for (u, v) in blocked_edges:
        if override.pop((u, v), None) is not None:
            changed.append((u, v))
    return changed


def apply_traffic_slowdown(G: nx.DiGraph, edge_multipliers: Dict[Edge, float]) -> List[Edge]:
    """Lentidão de trânsito em trechos específicos: multiplicador de custo por aresta."""
    G.graph.setdefault(KEY_EDGE_COST_MULTIPLIER, {}).update(edge_multipliers)
    return list(edge_multipliers)


def clear_traffic_slowdown(G: nx.DiGraph) -> List[Edge]:
    """Remove lentidão por trecho."""
    changed = list(G.graph.get(KEY_EDGE_COST_MULTIPLIER, {}))
    G.graph[KEY_EDGE_COST_MULTIPLIER] = {}
    return changed


def apply_congestion_scenario(G: nx.DiGraph, congestion_factor: float = 2.0) -> List[Edge]:
    """Cenário de congestionamento global: todas as arestas mudam."""
    G.graph[KEY_CONGESTION_FACTOR] = congestion_factor
    return list(G.edges())


def add_edges(G: nx.DiGraph, edges: Dict[Edge, float]) -> List[Edge]:
    """Abre novas arestas {(u, v): distance} entre nós já existentes."""
    missing = {n for e in edges for n in e if n not in G}
    if missing:
        raise nx.NetworkXError(f"Nó(s) {sorted(map(str, missing))} não existem no grafo.")
    for (u, v), distance in edges.items():
        G.add_edge(u, v, distance=distance)
    return list(edges)


def remove_edges(G: nx.DiGraph, edges: Iterable[Edge]) -> List[Edge]:
    """Remove arestas existentes (os nós permanecem)."""
    changed = [(u, v) for (u, v) in edges if G.has_edge(u, v)]
    G.remove_edges_from(changed)
    return changed


def reset_scenarios(G: nx.DiGraph) -> List[Edge]:
    """Remove todos os overrides e restaura parâmetros padrão."""
    G.graph[KEY_EDGE_OVERRIDE] = {}
    G.graph[KEY_EDGE_COST_MULTIPLIER] = {}
    G.graph[KEY_CONGESTION_FACTOR] = 1.0
    return list(G.edges())
