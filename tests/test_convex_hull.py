from contestkit.convex_hull import convex_hull, cross, dcmp

CORNERS = [0j, 2 + 0j, 2 + 2j, 2j]


def test_dcmp():
    assert dcmp(1.0, 1.0 + 1e-12) == 0
    assert dcmp(1.0, 2.0) == -1
    assert dcmp(2.0, 1.0) == 1


def test_cross_sign():
    assert cross(1 + 0j, 1j) > 0
    assert cross(1j, 1 + 0j) < 0
    assert cross(2 + 2j, 1 + 1j) == 0


def test_square_with_interior_point():
    hull = convex_hull([1 + 1j, *CORNERS])
    assert hull[0] == hull[-1] == 0j
    assert len(hull) == 5
    assert set(hull) == set(CORNERS)
    assert 1 + 1j not in hull


def test_hull_is_clockwise():
    hull = convex_hull([2 + 2j, 0.5 + 1j, 2j, 1.5 + 0.5j, 2 + 0j, 0j])
    closed = hull
    for a, b, c in zip(closed, closed[1:], closed[2:]):
        assert cross(b - a, c - b) <= 0
    assert set(hull) == set(CORNERS)


def test_input_not_modified():
    points = [2 + 2j, 0j, 2j, 2 + 0j]
    copy = list(points)
    convex_hull(points)
    assert points == copy


def test_small_inputs():
    assert convex_hull([]) == []
    assert convex_hull([3 + 4j]) == [3 + 4j]
    assert sorted(convex_hull([1 + 1j, 0j]), key=abs) == [0j, 1 + 1j]