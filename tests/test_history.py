from lsqcalc.history import HistoryLog


def test_initial_state_is_single_empty_snapshot():
    log = HistoryLog()
    assert len(log) == 1
    assert log.cursor == 0
    assert log.current == ()
    assert not log.can_undo
    assert not log.can_redo


def test_push_undo_redo_round_trip(make_points):
    log = HistoryLog()
    snap = make_points([(1, 2), (3, 4)])
    log.push(snap)
    assert log.undo() == ()
    assert log.redo() == snap
    assert log.current == snap
    assert log.cursor == 1


def test_boundaries_are_no_ops(make_points):
    log = HistoryLog()
    assert log.undo() is None
    assert log.cursor == 0

    snap = make_points([(1, 2)])
    log.push(snap)
    assert log.redo() is None
    assert log.cursor == 1
    assert log.current == snap


def test_push_after_undo_discards_redo(make_points):
    log = HistoryLog()
    a = make_points([(1, 1)])
    b = a + make_points([(2, 2)])
    c = a + make_points([(3, 3)])
    log.push(a)
    log.push(b)
    log.undo()
    log.push(c)
    assert len(log) == 3
    assert log.current == c
    assert not log.can_redo
    assert log.undo() == a


def test_snapshots_are_copies(make_points):
    log = HistoryLog()
    pts = list(make_points([(1, 2)]))
    log.push(pts)
    pts.append(make_points([(5, 5)])[0])
    assert len(log.current) == 1
