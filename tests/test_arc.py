import pytest
from conftest import ops

from cachesim.model import GET
from cachesim.policies import ARC
from cachesim.policies.arc import PLACEHOLDER


def _run(arc, text):
    results = []
    for op in ops(text):
        if op.type == GET:
            results.append(arc.get(op.key))
        else:
            results.append(arc.put(op.key, op.value))
    return results


def sets(arc):
    return arc.meta()["arcSets"]


def test_new_keys_enter_t1_front():
    arc = ARC(3)
    _run(arc, "PUT A 1; PUT B 2; PUT C 3")
    assert sets(arc) == {"T1": ["C", "B", "A"], "T2": [], "B1": [], "B2": [], "p": 0}


def test_t1_hit_promotes_to_t2():
    arc = ARC(3)
    _run(arc, "PUT A 1; PUT B 2; PUT C 3")
    assert arc.get("A") == (True, "1")
    s = sets(arc)
    assert s["T1"] == ["C", "B"] and s["T2"] == ["A"] and s["p"] == 0


def test_demo_walkthrough(demo_text):
    arc = ARC(3)
    for line in demo_text.splitlines():
        op, key, *rest = line.split()
        if op == "GET":
            arc.get(key)
        else:
            arc.put(key, " ".join(rest))
    assert sets(arc) == {"T1": ["C", "E", "B"], "T2": [], "B1": ["D"], "B2": ["A"], "p": 2}
    assert [e.key for e in arc.snapshot()] == ["B", "E", "C"]
    assert arc.store["C"] == PLACEHOLDER


def test_evicts_t1_tail_into_b1():
    arc = ARC(2)
    res = _run(arc, "PUT A 1; PUT B 2; PUT C 3")
    assert res[-1].evicted == "A"
    assert sets(arc)["B1"] == ["A"]


def test_b1_ghost_hit_is_miss_and_raises_p():
    arc = ARC(2)
    _run(arc, "PUT A 1; PUT B 2; PUT C 3")
    assert arc.get("A") == (False, None)
    s = sets(arc)
    assert s["p"] == 1
    assert s["B1"] == ["B"]          # B made room for the re-admitted A
    assert s["T1"] == ["A", "C"]
    assert arc.store["A"] == PLACEHOLDER


def test_t2_hit_is_not_repositioned():
    arc = ARC(2)
    _run(arc, "PUT A 1; PUT B 2; GET A; GET B; GET A")
    assert sets(arc)["T2"] == ["B", "A"]
    # A was hit last but stays at the T2 tail, so it goes first
    assert arc.put("C", "3").evicted == "A"
    assert sets(arc)["B2"] == ["A"]


def test_b2_ghost_hit_lowers_p():
    arc = ARC(2)
    _run(arc, "PUT A 1; PUT B 2; GET A; GET B; PUT C 3")
    arc.p = 1
    assert arc.get("A").hit is False
    s = sets(arc)
    assert s["p"] == 0
    assert "A" in s["T1"] and s["B2"] == []


def test_put_existing_reruns_promotion():
    arc = ARC(3)
    res = _run(arc, "PUT A 1; PUT A 2")
    assert res[-1].evicted is None
    assert sets(arc)["T2"] == ["A"]
    assert arc.get("A") == (True, "2")


def test_pure_miss_changes_nothing():
    arc = ARC(2)
    _run(arc, "PUT A 1")
    before = sets(arc)
    assert arc.get("Z") == (False, None)
    assert sets(arc) == before


def test_falls_back_to_other_list_when_chosen_list_empty():
    arc = ARC(1)
    _run(arc, "PUT A 1; GET A; PUT B 2; GET A")
    assert sets(arc)["B1"] == ["B"]
    # B1 hit pushes p to 1 = |T1|, T2 is empty so T1 gives up A
    assert arc.get("B").hit is False
    s = sets(arc)
    assert s["p"] == 1
    assert s["T1"] == ["B"] and s["B1"] == ["A"]
    assert len(arc.snapshot()) == 1


def test_put_of_ghost_key_leaves_ghost_list():
    arc = ARC(1)
    _run(arc, "PUT A 1; PUT B 2; PUT A 3")
    s = sets(arc)
    assert s["T1"] == ["A"] and s["B1"] == ["B"] and s["p"] == 0


@pytest.mark.parametrize("capacity", [1, 2, 3, 4])
@pytest.mark.parametrize("bound", [False, True])
def test_p_stays_in_range(capacity, bound, random_trace):
    arc = ARC(capacity, bound_ghosts=bound)
    for op in random_trace:
        if op.type == GET:
            arc.get(op.key)
        else:
            arc.put(op.key, op.value)
        assert 0 <= arc.p <= capacity
        assert len(arc.t1) + len(arc.t2) <= capacity
        assert not set(arc.store) & (set(arc.b1) | set(arc.b2))
        if bound:
            assert len(arc.t1) + len(arc.b1) <= capacity
            assert len(arc.t2) + len(arc.b2) <= 2 * capacity


def test_ghosts_unbounded_by_default():
    arc = ARC(1)
    _run(arc, "; ".join(f"PUT k{i} {i}" for i in range(6)))
    assert sets(arc)["B1"] == ["k4", "k3", "k2", "k1", "k0"]


def test_bounded_ghosts_trimmed():
    arc = ARC(1, bound_ghosts=True)
    _run(arc, "; ".join(f"PUT k{i} {i}" for i in range(6)))
    assert sets(arc)["B1"] == []
    arc = ARC(2, bound_ghosts=True)
    _run(arc, "PUT A 1; PUT B 2; GET B; PUT C 3")
    # T1=[C], T2=[B], B1 keeps A because |T1|+|B1| = 2
    assert sets(arc)["B1"] == ["A"]
