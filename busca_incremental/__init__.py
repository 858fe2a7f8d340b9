# Busca incremental em grafos: D* Lite com replanejamento (grafo NetworkX)

from pathlib import Path

from dotenv import load_dotenv

# Carrega .env da raiz do projeto (sobe do diretório do pacote até encontrar .env)
_package_dir = Path(__file__).resolve().parent
_root = _package_dir.parent
for _candidate in [_root, _root.parent]:
    _env_file = _candidate / ".env"
    if _env_file.is_file():
        load_dotenv(_env_file)
        break

from .graph_operations import (
    GraphOperations,
    null_heuristic,
    uniform_cost,
)
from .graph import CostGraph, build_corridor_example, build_grid_graph
from .priority_queue import Key, OpenList, key_less
from .simulation import ScenarioMover, StaticMover
from .algorithms import (
    DStarLite,
    NoPathError,
    Outcome,
    RunResult,
    SynchronizedDStarLite,
    Trigger,
    a_star,
    d_star_lite,
    dijkstra,
    synchronized_d_star_lite,
)

__all__ = [
    "GraphOperations",
    "null_heuristic",
    "uniform_cost",
    "CostGraph",
    "build_corridor_example",
    "build_grid_graph",
    "Key",
    "OpenList",
    "key_less",
    "ScenarioMover",
    "StaticMover",
    "DStarLite",
    "NoPathError",
    "Outcome",
    "RunResult",
    "SynchronizedDStarLite",
    "Trigger",
    "a_star",
    "d_star_lite",
    "dijkstra",
    "synchronized_d_star_lite",
]
