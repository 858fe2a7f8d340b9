import queue
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import networkx as nx

from busca_incremental import (
    NoPathError,
    Outcome,
    RunResult,
    StaticMover,
    SynchronizedDStarLite,
    Trigger,
    build_corridor_example,
    synchronized_d_star_lite,
)

TIMEOUT = 5.0


class ExplodingMover(StaticMover):
    def move(self, target):
        raise RuntimeError("motor travado")


def test_signals_drive_agent_to_goal():
    G = build_corridor_example()
    mover = StaticMover(G, "A")
    service = SynchronizedDStarLite(G, "A", "D", mover).start()
    for _ in range(3):
        service.signal()
    result = service.wait(TIMEOUT)
    assert result.outcome is Outcome.REACHED
    assert result.error is None
    assert result.path == ["A", "B", "C", "D"]
    assert mover.history == ["A", "B", "C", "D"]


def test_closing_trigger_cancels_without_final_move():
    G = build_corridor_example()
    mover = StaticMover(G, "A")
    service = SynchronizedDStarLite(G, "A", "D", mover).start()
    service.signal()
    service.cancel()
    result = service.wait(TIMEOUT)
    assert result.outcome is Outcome.CANCELLED
    assert result.error is None
    assert mover.history == ["A", "B"]


def test_unreachable_goal_is_reported():
    G = nx.DiGraph([("A", "B"), ("C", "D")])
    trigger = Trigger()
    done = queue.Queue()
    thread = synchronized_d_star_lite(G, "A", "D", StaticMover(G, "A"), trigger, done)
    trigger.fire()
    result = done.get(timeout=TIMEOUT)
    thread.join(TIMEOUT)
    assert result.outcome is Outcome.UNREACHABLE
    assert isinstance(result.error, NoPathError)
    assert result.path == ["A"]
    assert done.empty()


def test_already_at_goal_needs_no_signal():
    G = build_corridor_example()
    service = SynchronizedDStarLite(G, "D", "D", StaticMover(G, "D")).start()
    assert service.wait(TIMEOUT).outcome is Outcome.REACHED


def test_mover_failure_is_reported():
    G = build_corridor_example()
    service = SynchronizedDStarLite(G, "A", "D", ExplodingMover(G, "A")).start()
    service.signal()
    result = service.wait(TIMEOUT)
    assert result.outcome is Outcome.FAILED
    assert isinstance(result.error, RuntimeError)


def test_context_manager_cancels_on_exit():
    G = build_corridor_example()
    with SynchronizedDStarLite(G, "A", "D", StaticMover(G, "A")) as service:
        pass
    assert service.wait(TIMEOUT).outcome is Outcome.CANCELLED
    assert service.trigger.closed


def test_run_result_field_order():
    assert RunResult._fields == ("outcome", "error", "path")
    result = RunResult(Outcome.REACHED, None, ["A"])
    assert result.error is None and result.path == ["A"]
