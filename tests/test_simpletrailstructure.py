import pytest

from succinctkit.simpletrailstructure import SimpleTrailStructure


def test_vertex_without_arcs_is_black():
    ts = SimpleTrailStructure(0)
    assert ts.is_black()
    assert ts.is_even()
    assert not ts.is_grey()
    assert ts.leave() is None


def test_initial_state():
    ts = SimpleTrailStructure(3)
    assert not ts.is_black()
    assert not ts.is_grey()
    assert not ts.is_even()
    assert not ts.has_starting_arc()
    assert ts.starting_arc() is None


def test_leave_takes_first_arc_and_flips_parity():
    ts = SimpleTrailStructure(3)
    assert ts.leave() == 0
    assert ts.is_grey()
    assert ts.is_even()
    assert ts.has_starting_arc()


def test_leave_all_arcs_in_order():
    degree = 5
    ts = SimpleTrailStructure(degree)
    taken = [ts.leave() for _ in range(degree)]
    assert taken == list(range(degree))
    assert ts.is_black()
    assert ts.leave() is None


def test_enter_pairs_with_next_arc():
    ts = SimpleTrailStructure(4)
    out = ts.enter(0)
    assert out == 1
    assert ts.matched(0) == out
    assert ts.matched(out) == 0
    assert ts.matched(2) == 2
    assert not ts.is_black()


def test_enter_single_arc_blackens():
    ts = SimpleTrailStructure(1)
    assert ts.enter(0) is None
    assert ts.is_black()
    assert ts.starting_arc() is None
    assert ts.enter(0) is None


def test_starting_arc_after_leave_and_enter():
    ts = SimpleTrailStructure(2)
    left = ts.leave()
    assert not ts.is_even()
    assert ts.enter(1) is None
    assert ts.is_black()
    assert ts.starting_arc() == left


def test_enter_until_black_then_marry():
    ts = SimpleTrailStructure(4)
    first = ts.enter(0)
    second = ts.enter(2)
    assert ts.is_black()
    assert ts.matched(2) == second
    ts.marry(0, second)
    assert ts.matched(0) == second
    assert ts.matched(second) == 0
    assert ts.matched(first) == first
    assert ts.matched(2) == 2


def test_enter_rejects_bad_arcs():
    ts = SimpleTrailStructure(3)
    with pytest.raises(IndexError):
        ts.enter(3)
    ts.enter(0)
    with pytest.raises(ValueError):
        ts.enter(0)


def test_matching_is_involution_after_enters():
    degree = 8
    ts = SimpleTrailStructure(degree)
    entered = [0, 2, 4, 6]
    for arc in entered:
        ts.enter(arc)
    assert ts.is_black()
    for arc in range(degree):
        assert ts.matched(ts.matched(arc)) == arc
    for arc in entered:
        assert ts.matched(arc) != arc