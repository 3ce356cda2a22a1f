from tilesmith.util.coordinates import Rect, is_rect_within, is_valid_world_tile_pos


def test_rect_bounds_are_exclusive() -> None:
    r = Rect(2, 3, 4, 5)
    assert (r.x1, r.y1, r.x2, r.y2) == (2, 3, 6, 8)
    assert r.width == 4
    assert r.height == 5
    assert not r.is_empty()
    assert Rect(2, 3, 0, 5).is_empty()


def test_center() -> None:
    assert Rect(0, 0, 5, 5).center() == (2, 2)
    assert Rect(1, 1, 4, 2).center() == (3, 2)


def test_bounds_helpers() -> None:
    assert is_valid_world_tile_pos((0, 0), 3, 3)
    assert not is_valid_world_tile_pos((3, 0), 3, 3)
    assert not is_valid_world_tile_pos((0, -1), 3, 3)
    assert is_rect_within(Rect(0, 0, 3, 3), 3, 3)
    assert not is_rect_within(Rect(1, 0, 3, 3), 3, 3)
    assert not is_rect_within(Rect(-1, 0, 2, 2), 3, 3)
    assert is_rect_within(Rect(10, 10, 0, 0), 3, 3)
