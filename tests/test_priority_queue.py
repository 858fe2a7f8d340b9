import random
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from busca_incremental.priority_queue import INFINITE_KEY, Key, OpenList, key_less


def drain(open_list):
    out = []
    while open_list:
        out.append(open_list.pop())
    return out


def test_key_order_is_lexicographic():
    assert key_less(Key(1.0, 9.0), Key(2.0, 0.0))
    assert not key_less(Key(2.0, 0.0), Key(1.0, 9.0))
    # só k2 difere: ordena por k2
    assert key_less(Key(3.0, 1.0), Key(3.0, 2.0))
    assert not key_less(Key(3.0, 2.0), Key(3.0, 1.0))
    # k1 menor com k2 igual também precede
    assert key_less(Key(1.0, 3.0), Key(2.0, 3.0))
    assert not key_less(Key(1.0, 1.0), Key(1.0, 1.0))


def test_pop_returns_keys_in_order():
    rng = random.Random(7)
    ol = OpenList()
    keys = {}
    for v in range(200):
        k = Key(float(rng.randint(0, 20)), float(rng.randint(0, 20)))
        keys[v] = k
        ol.push(v, k)
    popped = [k for _, k in drain(ol)]
    assert popped == sorted(keys.values())
    assert len(ol) == 0


def test_peek_does_not_remove():
    ol = OpenList()
    ol.push("a", Key(2.0, 0.0))
    ol.push("b", Key(1.0, 5.0))
    assert ol.peek() == ("b", Key(1.0, 5.0))
    assert len(ol) == 2
    assert ol.top_key() == Key(1.0, 5.0)


def test_fix_moves_entry_up_and_down():
    ol = OpenList()
    for v, k1 in zip("abcde", (1.0, 2.0, 3.0, 4.0, 5.0)):
        ol.push(v, Key(k1, 0.0))
    ol.fix("e", Key(0.5, 0.0))
    ol.fix("a", Key(10.0, 0.0))
    assert ol.key_of("e") == Key(0.5, 0.0)
    assert [v for v, _ in drain(ol)] == ["e", "b", "c", "d", "a"]


def test_fix_and_remove_absent_are_noops():
    ol = OpenList()
    ol.push("a", Key(1.0, 1.0))
    ol.fix("x", Key(0.0, 0.0))
    ol.remove("x")
    assert len(ol) == 1
    assert "x" not in ol
    assert ol.peek() == ("a", Key(1.0, 1.0))


def test_remove_arbitrary_entries_keeps_heap_valid():
    rng = random.Random(3)
    ol = OpenList()
    for v in range(100):
        ol.push(v, Key(float(rng.random()), 0.0))
    removed = set(rng.sample(range(100), 40))
    for v in removed:
        ol.remove(v)
    assert len(ol) == 60
    assert all(v not in ol for v in removed)
    popped = [k for _, k in drain(ol)]
    assert popped == sorted(popped)


def test_push_twice_fails():
    ol = OpenList()
    ol.push("a", Key(1.0, 1.0))
    with pytest.raises(KeyError):
        ol.push("a", Key(0.0, 0.0))


def test_empty_list():
    ol = OpenList()
    assert not ol
    assert ol.top_key() == INFINITE_KEY
    with pytest.raises(IndexError):
        ol.pop()
    with pytest.raises(IndexError):
        ol.peek()
