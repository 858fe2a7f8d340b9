#!/usr/bin/env python3
"""
Demonstração do D* Lite numa grade: calcula o plano inicial, interdita um trecho do caminho
quando o agente chega perto e compara o replanejamento incremental com Dijkstra e A* do zero.

Uso (na raiz do projeto):
  python replanejamento_demo.py

Parâmetros opcionais no .env: GRID_WIDTH, GRID_HEIGHT, DSTAR_EPSILON.
"""
from pathlib import Path
import os
import sys

PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))


def main():
    from busca_incremental import (
        DStarLite,
        NoPathError,
        ScenarioMover,
        a_star,
        build_grid_graph,
        dijkstra,
    )
    from busca_incremental.metrics import measure_replanning, measure_search_ms
    from busca_incremental.scenarios import apply_event_scenario

    width = int(os.environ.get("GRID_WIDTH", "20"))
    height = int(os.environ.get("GRID_HEIGHT", "12"))
    start, goal = (0, height // 2), (width - 1, height // 2)

    G = build_grid_graph(width, height, diagonal=True)
    print(f"Grade construída: {G.number_of_nodes()} nós, {G.number_of_edges()} arestas.")

    ds = DStarLite(G, start, goal)
    initial = ds.planned_path()
    print(f"Plano inicial: {len(initial) - 1} passos, {ds.expansions} expansões, {initial[0]} -> {initial[-1]}")

    # Interdita, nos dois sentidos, a aresta do meio do plano inicial quando o agente chega a 2 passos dela
    mid = len(initial) // 2
    origin = initial[mid - 2]
    blocked = [(initial[mid], initial[mid + 1]), (initial[mid + 1], initial[mid])]
    mover = ScenarioMover(G, start, events={origin: lambda g: apply_event_scenario(g, blocked)})

    travelled = 0.0
    steps = 0
    try:
        while ds.start != ds.goal:
            nxt = ds.step()
            travelled += ds.cost(ds.start, nxt)
            mover.move(nxt)
            ds.move_to(nxt)
            steps += 1
            new_cost, edges = mover.changed_edges()
            if edges:
                stats = measure_replanning(ds, edges, new_cost)
                print(
                    f"Replanejamento em {nxt}: {stats.latency_ms:.2f} ms, "
                    f"{stats.expansions} expansões, novo custo restante={stats.g_start:.3f}"
                )
    except NoPathError as e:
        print(f"Sem caminho: {e}")
        sys.exit(1)
    print(f"D* Lite: {steps} passos, custo percorrido={travelled:.3f}")

    # Referências calculadas do zero no grafo final, a partir da posição do bloqueio
    for name, fn in (("Dijkstra", dijkstra), ("A*", a_star)):
        ms, _, ref_cost = measure_search_ms(lambda: fn(G, origin, goal), repetitions=5)
        print(f"{name} (do zero, a partir de {origin}): custo restante={ref_cost:.3f}, {ms:.2f} ms")

if __name__ == "__main__":
    main()
