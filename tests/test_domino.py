from domino_shuffle import Domino, make_pair


def test_horizontal_pair():
    north, south = make_pair(0, 0, horizontal=True)
    assert (north.x, north.y, north.w, north.h) == (-1, -1, 2, 1)
    assert (south.x, south.y, south.w, south.h) == (-1, 0, 2, 1)
    assert north.direction == "N" and south.direction == "S"
    assert north.is_horizontal and south.is_horizontal


def test_vertical_pair():
    west, east = make_pair(3, -2, horizontal=False)
    assert (west.x, west.y, west.w, west.h) == (2, -3, 1, 2)
    assert (east.x, east.y, east.w, east.h) == (3, -3, 1, 2)
    assert west.direction == "W" and east.direction == "E"
    assert not west.is_horizontal


def test_pair_covers_the_block():
    for horizontal in (True, False):
        cells = sorted(c for d in make_pair(1, 1, horizontal) for c in d.cells())
        assert cells == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_move_and_ahead():
    d = Domino(0, 0, 1, 2, 1, 0)
    assert d.ahead() == (1, 0)
    d.move()
    assert (d.x, d.y) == (1, 0)
    d = Domino(0, 0, 2, 1, 0, -1)
    d.move()
    assert (d.x, d.y) == (0, -1)


def test_identity_equality():
    a = Domino(0, 0, 2, 1, 0, 1)
    b = Domino(0, 0, 2, 1, 0, 1)
    assert a != b
    assert len({id(a), id(b)}) == 2


def test_to_dict():
    d = Domino(2, 3, 1, 2, -1, 0)
    assert d.to_dict() == {"x": 2, "y": 3, "w": 1, "h": 2, "vx": -1, "vy": 0, "direction": "W"}
