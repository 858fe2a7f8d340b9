"""
D* Lite: busca incremental com replanejamento (Koenig & Likhachev, 2002).

Busca reversa (objetivo -> origem): g[v] é a melhor estimativa de custo até o objetivo e rhs[v]
a estimativa com um passo de antecedência, obtida dos sucessores. Vértices com g != rhs
(inconsistentes) ficam na lista aberta; compute_shortest_path só reexpande esses vértices.
Quando o agente anda e custos de arestas mudam, update() reaproveita as estimativas anteriores
em vez de recalcular o grafo inteiro.

Fluxo típico:

    ds = DStarLite(G, start, goal)
    while ds.start != ds.goal:
        nxt = ds.step()              # NoPathError se não houver caminho
        (mover o agente para nxt)
        ds.move_to(nxt)
        ds.update(novo_custo, arestas_alteradas)

d_star_lite() executa esse laço com um "mover"; SynchronizedDStarLite executa o mesmo laço
numa thread, um ciclo por sinal recebido.
"""

from __future__ import annotations

import os
import queue
import threading
from enum import Enum
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

import networkx as nx

from ..graph_operations import CostFunction, GraphOperations
from ..priority_queue import Key, OpenList, key_less
from ..simulation import Mover, StaticMover

DEFAULT_EPSILON = float(os.environ.get("DSTAR_EPSILON", "1e-6"))
DEFAULT_VERBOSE = os.environ.get("DSTAR_VERBOSE", "0") == "1"

INF = float("inf")


class NoPathError(nx.NetworkXNoPath):
    """Não existe caminho da posição atual até o objetivo (g[start] infinito)."""


def edge_tail(edge: Any) -> Any:
    """
    Vértice cuja rhs depende do custo da aresta: a origem u de (u, v).
    Aceita tuplas do NetworkX ou objetos com atributo 'head' (origem da aresta).
    """
    head = getattr(edge, "head", None)
    if head is not None:
        return head
    return edge[0]


class DStarLite:
    """
    Sessão de planejamento D* Lite sobre um grafo direcionado (NetworkX ou compatível).

    cost e heuristic são opcionais: sem eles usa-se G.cost / G.heuristic_cost quando o grafo
    declara esses métodos, e por fim custo uniforme / heurística nula.
    O conjunto de vértices é lido uma única vez aqui; nós adicionados depois não são suportados.
    """

    def __init__(
        self,
        G: nx.DiGraph,
        start: Any,
        goal: Any,
        cost: Optional[CostFunction] = None,
        heuristic: Optional[CostFunction] = None,
        epsilon: float = DEFAULT_EPSILON,
    ):
        GraphOperations.validate_path_nodes(G, start, goal)
        self._graph = G
        self._start = start
        self._goal = goal
        self._last = start
        self._cost = GraphOperations.resolve_cost_function(G, cost)
        self._heuristic = GraphOperations.resolve_heuristic_function(G, heuristic)
        self._epsilon = epsilon
        self._k_m = 0.0
        self._open = OpenList()
        self.expansions = 0

        self._g: Dict[Any, float] = {v: INF for v in G.nodes()}
        self._rhs: Dict[Any, float] = {v: INF for v in G.nodes()}
        self._rhs[goal] = 0.0
        self._open.push(goal, self.calculate_key(goal))
        self.compute_shortest_path()

    # --- estado (somente leitura) ---

    @property
    def graph(self) -> nx.DiGraph:
        return self._graph

    @property
    def start(self) -> Any:
        return self._start

    @property
    def goal(self) -> Any:
        return self._goal

    @property
    def last(self) -> Any:
        return self._last

    @property
    def k_m(self) -> float:
        return self._k_m

    @property
    def open_list(self) -> OpenList:
        return self._open

    @property
    def cost(self) -> CostFunction:
        return self._cost

    @property
    def heuristic(self) -> CostFunction:
        return self._heuristic

    def g_value(self, v: Any) -> float:
        return self._g.get(v, INF)

    def rhs_value(self, v: Any) -> float:
        return self._rhs.get(v, INF)

    def is_consistent(self, v: Any) -> bool:
        """g[v] == rhs[v] dentro da tolerância (inf == inf conta como consistente)."""
        g, rhs = self.g_value(v), self.rhs_value(v)
        if g == rhs:
            return True
        return abs(g - rhs) <= self._epsilon

    # --- motor de busca ---

    def calculate_key(self, v: Any) -> Key:
        m = min(self.g_value(v), self.rhs_value(v))
        return Key(m + self._heuristic(self._start, v) + self._k_m, m)

    def update_vertex(self, v: Any) -> None:
        """Recalcula rhs[v] pelos sucessores e ajusta a presença de v na lista aberta."""
        if v != self._goal:
            best = INF
            for succ in self._graph.successors(v):
                best = min(best, self._cost(v, succ) + self.g_value(succ))
            self._rhs[v] = best

        if self.is_consistent(v):
            self._open.remove(v)
        elif v in self._open:
            self._open.fix(v, self.calculate_key(v))
        else:
            self._open.push(v, self.calculate_key(v))

    def compute_shortest_path(self) -> None:
        """Reexpande vértices inconsistentes até a chave do start não ser superada e start ficar consistente."""
        while self._open and (
            key_less(self._open.top_key(), self.calculate_key(self._start))
            or not self.is_consistent(self._start)
        ):
            u, old_key = self._open.pop()
            self.expansions += 1
            new_key = self.calculate_key(u)
            if key_less(old_key, new_key):
                # chave ficou desatualizada enquanto estava na fila
                self._open.push(u, new_key)
            elif self.g_value(u) > self.rhs_value(u):
                self._g[u] = self._rhs[u]
                for pred in self._graph.predecessors(u):
                    self.update_vertex(pred)
            else:
                self._g[u] = INF
                self.update_vertex(u)
                for pred in self._graph.predecessors(u):
                    self.update_vertex(pred)

    # --- sessão ---

    def step(self) -> Any:
        """
        Próximo vértice a visitar a partir de start: o sucessor que minimiza cost(start, s) + g[s].
        Empates ficam com o primeiro sucessor na ordem de G.successors. Não altera o estado.
        """
        if self._start == self._goal:
            return self._start
        return self._best_successor(self._start)

    def _best_successor(self, v: Any) -> Any:
        if self.g_value(v) == INF:
            raise NoPathError(f"Não existe caminho de {v!r} até {self._goal!r}.")
        best = INF
        nxt = None
        for succ in self._graph.successors(v):
            candidate = self._cost(v, succ) + self.g_value(succ)
            if candidate < best:
                best = candidate
                nxt = succ
        if nxt is None:
            raise NoPathError(f"Não existe caminho de {v!r} até {self._goal!r}.")
        return nxt

    def move_to(self, v: Any) -> None:
        """Registra que o agente está agora em v (k_m e last só mudam em update)."""
        if v not in self._g:
            raise nx.NetworkXError(f"Nó {v!r} não existia quando a sessão D* Lite foi criada.")
        self._start = v

    def update(
        self,
        cost: Optional[CostFunction] = None,
        changed_edges: Optional[Iterable[Any]] = None,
    ) -> None:
        """
        Incorpora mudanças de custo e repara as estimativas.
        Sem arestas alteradas não faz nada (inclusive descarta a nova função de custo).
        """
        edges = list(changed_edges) if changed_edges else []
        if not edges:
            return

        if cost is not None:
            self._cost = cost
        self._k_m += self._heuristic(self._last, self._start)
        self._last = self._start

        for edge in edges:
            self.update_vertex(edge_tail(edge))
        self.compute_shortest_path()

    def planned_path(self, max_length: Optional[int] = None) -> List[Any]:
        """
        Caminho atual de start até goal, descendo pelos sucessores como step() faria.
        max_length limita o número de passos (padrão: número de vértices); acima dele
        a descida é considerada travada e levanta NoPathError.
        """
        path = [self._start]
        current = self._start
        limit = len(self._g) if max_length is None else max_length
        while current != self._goal:
            if len(path) > limit:
                raise NoPathError(f"Descida a partir de {self._start!r} não chega a {self._goal!r}.")
            current = self._best_successor(current)
            path.append(current)
        return path


def d_star_lite(
    G: nx.DiGraph,
    start: Any,
    goal: Any,
    mover: Optional[Mover] = None,
    cost: Optional[CostFunction] = None,
    heuristic: Optional[CostFunction] = None,
    verbose: bool = DEFAULT_VERBOSE,
) -> Tuple[List[Any], float]:
    """
    Executa o D* Lite completo: passo, movimento, mudanças de custo, replanejamento.
    Retorna (caminho percorrido, custo percorrido). Levanta NoPathError se em algum momento
    não existir caminho. Sem mover, o grafo é tratado como estático.
    """
    if mover is None:
        mover = StaticMover(G, start)
    ds = DStarLite(G, start, goal, cost, heuristic)
    if verbose:
        print(f"d_star_lite: plano inicial de {start!r} a {goal!r}, g={ds.g_value(start):.3f}, expansões={ds.expansions}")

    path = [start]
    total = 0.0
    while ds.start != ds.goal:
        nxt = ds.step()
        total += ds.cost(ds.start, nxt)
        mover.move(nxt)
        ds.move_to(nxt)
        path.append(nxt)

        new_cost, edges = mover.changed_edges()
        if edges:
            before = ds.expansions
            ds.update(new_cost, edges)
            if verbose:
                print(
                    f"d_star_lite: em {nxt!r}, {len(edges)} aresta(s) alterada(s), "
                    f"replanejado com {ds.expansions - before} expansões, g={ds.g_value(nxt):.3f}"
                )
    if verbose:
        print(f"d_star_lite: objetivo alcançado em {len(path) - 1} passos, custo={total:.3f}")
    return path, total


class Outcome(Enum):
    """Resultado final do laço sincronizado."""

    REACHED = "reached"
    UNREACHABLE = "unreachable"
    CANCELLED = "cancelled"
    FAILED = "failed"


class RunResult(NamedTuple):
    outcome: Outcome
    error: Optional[BaseException]
    path: List[Any]


_CLOSED = object()


class Trigger:
    """Canal de entrada: cada fire() libera um ciclo passo/movimento/atualização; close() cancela."""

    def __init__(self) -> None:
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._closed = False

    def fire(self) -> None:
        if self._closed:
            raise RuntimeError("Trigger já foi fechado.")
        self._queue.put(None)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put(_CLOSED)

    @property
    def closed(self) -> bool:
        return self._closed

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Bloqueia até o próximo sinal. False quando o canal foi fechado."""
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            # mantém o fechamento visível para chamadas seguintes
            self._queue.put(_CLOSED)
            return False
        return True


def synchronized_d_star_lite(
    G: nx.DiGraph,
    start: Any,
    goal: Any,
    mover: Mover,
    trigger: Trigger,
    done: "queue.Queue[RunResult]",
    cost: Optional[CostFunction] = None,
    heuristic: Optional[CostFunction] = None,
    verbose: bool = DEFAULT_VERBOSE,
) -> threading.Thread:
    """
    Inicia o D* Lite numa thread separada. A inicialização acontece na thread; cada sinal em
    trigger executa um ciclo passo/movimento/atualização. Fechar trigger antes do fim aborta
    sem movimento final. Exatamente um RunResult é colocado em done.
    """

    def run() -> None:
        path = [start]
        try:
            ds = DStarLite(G, start, goal, cost, heuristic)
            while ds.start != ds.goal:
                if not trigger.wait():
                    if verbose:
                        print(f"synchronized_d_star_lite: cancelado em {ds.start!r}")
                    done.put(RunResult(Outcome.CANCELLED, None, path))
                    return
                nxt = ds.step()
                mover.move(nxt)
                ds.move_to(nxt)
                path.append(nxt)
                new_cost, edges = mover.changed_edges()
                ds.update(new_cost, edges)
                if verbose:
                    print(f"synchronized_d_star_lite: passo para {nxt!r}")
        except NoPathError as e:
            done.put(RunResult(Outcome.UNREACHABLE, e, path))
            return
        except Exception as e:
            done.put(RunResult(Outcome.FAILED, e, path))
            return
        done.put(RunResult(Outcome.REACHED, None, path))

    thread = threading.Thread(target=run, name="d_star_lite", daemon=True)
    thread.start()
    return thread


class SynchronizedDStarLite:
    """
    Serviço D* Lite dirigido por sinais: start() dispara a thread, signal() libera um ciclo,
    cancel() fecha o canal de sinais e wait() devolve o RunResult final.
    """

    def __init__(
        self,
        G: nx.DiGraph,
        start: Any,
        goal: Any,
        mover: Mover,
        cost: Optional[CostFunction] = None,
        heuristic: Optional[CostFunction] = None,
        verbose: bool = DEFAULT_VERBOSE,
    ):
        self._args = (G, start, goal, mover)
        self._cost = cost
        self._heuristic = heuristic
        self._verbose = verbose
        self.trigger = Trigger()
        self.done: "queue.Queue[RunResult]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._result: Optional[RunResult] = None

    def start(self) -> "SynchronizedDStarLite":
        if self._thread is not None:
            raise RuntimeError("Serviço D* Lite já iniciado.")
        self._thread = synchronized_d_star_lite(
            *self._args,
            trigger=self.trigger,
            done=self.done,
            cost=self._cost,
            heuristic=self._heuristic,
            verbose=self._verbose,
        )
        return self

    def signal(self) -> None:
        self.trigger.fire()

    def cancel(self) -> None:
        self.trigger.close()

    def wait(self, timeout: Optional[float] = None) -> RunResult:
        """Resultado final (queue.Empty se não terminar dentro do timeout)."""
        if self._result is None:
            self._result = self.done.get(timeout=timeout)
            if self._thread is not None:
                self._thread.join(timeout)
        return self._result

    def __enter__(self) -> "SynchronizedDStarLite":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()
