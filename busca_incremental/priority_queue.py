"""
Lista aberta do D* Lite: heap binário indexado por vértice.

Além de push/pop/peek, permite alterar a chave (fix) e remover (remove) um vértice
qualquer em O(log n), pois update_vertex mexe em vértices que não estão no topo.
Chaves são pares (k1, k2) comparados em ordem lexicográfica.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, NamedTuple, Tuple


class Key(NamedTuple):
    """Chave de prioridade: k1 = min(g, rhs) + h(start, v) + k_m; k2 = min(g, rhs) (desempate)."""

    k1: float
    k2: float


INFINITE_KEY = Key(float("inf"), float("inf"))


def key_less(a: Key, b: Key) -> bool:
    """Ordem estrita lexicográfica: compara k1 e só usa k2 quando os k1 são iguais."""
    return a.k1 < b.k1 or (a.k1 == b.k1 and a.k2 < b.k2)


class OpenList:
    """Min-heap de (chave, vértice) com índice vértice -> posição no array."""

    def __init__(self) -> None:
        self._heap: List[Tuple[Key, Hashable]] = []
        self._index: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, vertex: Any) -> bool:
        return vertex in self._index

    def __iter__(self):
        """Itera (vértice, chave) na ordem interna do heap (não ordenada)."""
        return ((v, k) for k, v in self._heap)

    def key_of(self, vertex: Hashable) -> Key:
        """Chave atual do vértice (KeyError se ausente)."""
        return self._heap[self._index[vertex]][0]

    def push(self, vertex: Hashable, key: Key) -> None:
        """Insere um vértice que ainda não está na lista."""
        if vertex in self._index:
            raise KeyError(f"Vértice {vertex!r} já está na lista aberta.")
        self._heap.append((key, vertex))
        self._index[vertex] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> Tuple[Hashable, Key]:
        """Retorna (vértice, chave) de menor chave sem remover."""
        if not self._heap:
            raise IndexError("peek em lista aberta vazia")
        key, vertex = self._heap[0]
        return vertex, key

    def top_key(self) -> Key:
        """Menor chave; (inf, inf) se a lista estiver vazia."""
        if not self._heap:
            return INFINITE_KEY
        return self._heap[0][0]

    def pop(self) -> Tuple[Hashable, Key]:
        """Remove e retorna (vértice, chave) de menor chave."""
        if not self._heap:
            raise IndexError("pop em lista aberta vazia")
        key, vertex = self._heap[0]
        self._delete_at(0)
        return vertex, key

    def fix(self, vertex: Hashable, key: Key) -> None:
        """Troca a chave de um vértice presente e restaura o heap; sem efeito se ausente."""
        i = self._index.get(vertex)
        if i is None:
            return
        old_key = self._heap[i][0]
        self._heap[i] = (key, vertex)
        if key_less(key, old_key):
            self._sift_up(i)
        else:
            self._sift_down(i)

    def remove(self, vertex: Hashable) -> None:
        """Remove um vértice presente; sem efeito se ausente."""
        i = self._index.get(vertex)
        if i is None:
            return
        self._delete_at(i)

    def _delete_at(self, i: int) -> None:
        last = len(self._heap) - 1
        if i != last:
            self._swap(i, last)
        _, vertex = self._heap.pop()
        del self._index[vertex]
        if i < len(self._heap):
            # o elemento trazido do fim pode precisar subir ou descer
            self._sift_up(i)
            self._sift_down(i)

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
        self._index[self._heap[i][1]] = i
        self._index[self._heap[j][1]] = j

    def _sift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos - 1) >> 1
            if not key_less(self._heap[pos][0], self._heap[parent][0]):
                break
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        n = len(self._heap)
        while True:
            child = 2 * pos + 1
            if child >= n:
                break
            right = child + 1
            if right < n and key_less(self._heap[right][0], self._heap[child][0]):
                child = right
            if not key_less(self._heap[child][0], self._heap[pos][0]):
                break
            self._swap(pos, child)
            pos = child
