"""
Movers: simulam o agente que percorre o grafo e informam o que mudou no mundo.

Um mover precisa de dois métodos:
  - move(target): o agente passa a estar em target;
  - changed_edges() -> (nova função de custo ou None, arestas alteradas desde a última chamada).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

import networkx as nx

from .graph_operations import CostFunction

Scenario = Callable[[nx.DiGraph], List[Tuple[Any, Any]]]


class Mover(Protocol):
    def move(self, target: Any) -> None:
        ...

    def changed_edges(self) -> Tuple[Optional[CostFunction], List[Any]]:
        ...


class StaticMover:
    """Mundo estático: registra as posições visitadas e nunca informa mudanças."""

    def __init__(self, G: nx.DiGraph, start: Any):
        if start not in G:
            raise nx.NetworkXError(f"Nó {start!r} não existe no grafo.")
        self.graph = G
        self.position = start
        self.history: List[Any] = [start]

    def move(self, target: Any) -> None:
        if not self.graph.has_edge(self.position, target):
            raise nx.NetworkXError(f"Movimento inválido: não há aresta {self.position!r} -> {target!r}.")
        self.position = target
        self.history.append(target)

    def changed_edges(self) -> Tuple[Optional[CostFunction], List[Any]]:
        return None, []


class ScenarioMover(StaticMover):
    """
    Mundo com eventos agendados por posição: events[v] é um cenário (G -> arestas alteradas)
    disparado quando o agente chega em v. As arestas ficam pendentes até changed_edges().
    """

    def __init__(
        self,
        G: nx.DiGraph,
        start: Any,
        events: Optional[Dict[Any, Scenario]] = None,
        cost: Optional[CostFunction] = None,
    ):
        super().__init__(G, start)
        self.events = dict(events or {})
        self.cost = cost
        self._pending: List[Any] = []

    def move(self, target: Any) -> None:
        super().move(target)
        scenario = self.events.pop(target, None)
        if scenario is not None:
            self._pending.extend(scenario(self.graph))

    def changed_edges(self) -> Tuple[Optional[CostFunction], List[Any]]:
        edges, self._pending = self._pending, []
        return (self.cost if edges else None), edges
