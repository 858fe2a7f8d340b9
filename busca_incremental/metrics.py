"""
Métricas de replanejamento:

- Latência de re-roteamento: tempo de um único DStarLite.update (< 100 ms para tempo real),
  com o número de vértices reexpandidos pelo reparo.
- Busca do zero: tempo médio de uma busca completa (Dijkstra, A*) para comparação.
"""

import time
from typing import Any, Callable, Iterable, List, NamedTuple, Optional, Tuple

from .algorithms.d_star_lite import DStarLite
from .graph_operations import CostFunction


class ReplanningStats(NamedTuple):
    latency_ms: float
    expansions: int
    g_start: float


def measure_replanning(
    ds: DStarLite,
    changed_edges: Iterable[Any],
    cost: Optional[CostFunction] = None,
) -> ReplanningStats:
    """Executa ds.update(cost, changed_edges) e mede tempo, expansões e o novo g do start."""
    before = ds.expansions
    start = time.perf_counter()
    ds.update(cost, changed_edges)
    elapsed = (time.perf_counter() - start) * 1000
    return ReplanningStats(elapsed, ds.expansions - before, ds.g_value(ds.start))


def measure_search_ms(
    search: Callable[[], Tuple[List[Any], float]],
    repetitions: int = 1,
) -> Tuple[float, List[Any], float]:
    """
    Tempo médio (ms) de uma busca do zero que devolve (caminho, custo).
    Retorna (tempo_medio_ms, caminho, custo) da última execução.
    """
    if repetitions < 1:
        raise ValueError("repetitions deve ser >= 1")
    start = time.perf_counter()
    for _ in range(repetitions):
        path, cost = search()
    elapsed = (time.perf_counter() - start) / repetitions * 1000
    return elapsed, path, cost
