from .dijkstra import dijkstra
from .a_star import a_star
from .d_star_lite import (
    DStarLite,
    NoPathError,
    Outcome,
    RunResult,
    SynchronizedDStarLite,
    Trigger,
    d_star_lite,
    synchronized_d_star_lite,
)

__all__ = [
    "dijkstra",
    "a_star",
    "d_star_lite",
    "synchronized_d_star_lite",
    "DStarLite",
    "NoPathError",
    "Outcome",
    "RunResult",
    "SynchronizedDStarLite",
    "Trigger",
]
