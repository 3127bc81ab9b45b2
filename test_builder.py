import pytest

from museum_map.models import Point, TourState
from museum_map.tour.builder import TourBuilder


def make_point(point_id, lat, lon):
    return Point(point_id=point_id, label=point_id.upper(), lat=lat, lon=lon)


def builder_with(*points):
    builder = TourBuilder()
    for point in points:
        builder.add_point(point)
    return builder


def test_empty_selection():
    builder = TourBuilder()

    assert builder.state is TourState.EMPTY
    assert builder.compute_order() == []
    assert builder.build_route_requests(builder.compute_order()) == []


def test_single_point_needs_no_path():
    a = make_point("a", 0, 0)
    builder = builder_with(a)

    assert builder.state is TourState.PARTIAL
    assert builder.compute_order() == [a]
    assert builder.build_route_requests([a]) == []


def test_nearest_point_is_visited_first():
    a, b, c = make_point("a", 0, 0), make_point("b", 0, 1), make_point("c", 0, 3)
    builder = builder_with(a, c, b)

    order = builder.compute_order()

    assert builder.state is TourState.READY
    assert order == [a, b, c]
    assert builder.build_route_requests(order) == [(a, b), (b, c)]


def test_equidistant_candidates_keep_insertion_order():
    a, b, c = make_point("a", 0, 0), make_point("b", 1, 0), make_point("c", -1, 0)
    builder = builder_with(a, b, c)

    assert builder.compute_order() == [a, b, c]


def test_order_is_a_permutation_of_the_selection():
    points = [make_point(f"p{i}", (i * 7) % 5 * 0.01, (i * 3) % 4 * 0.01) for i in range(8)]
    builder = builder_with(*points)

    order = builder.compute_order()

    assert len(order) == len(points)
    assert len({p.point_id for p in order}) == len(points)
    assert set(order) == set(points)
    assert order[0] == points[0]


def test_compute_order_is_repeatable():
    points = [make_point("a", 0, 0), make_point("b", 0.2, 0.1), make_point("c", 0.1, 0.3), make_point("d", 0.05, 0.05)]
    builder = builder_with(*points)

    assert builder.compute_order() == builder.compute_order()
    assert TourBuilder.build_route_requests(builder.compute_order()) == builder.build_route_requests(builder.compute_order())


def test_removed_point_is_excluded_from_order_and_requests():
    a, b, c = make_point("a", 0, 0), make_point("b", 0, 1), make_point("c", 0, 3)
    builder = builder_with(a, b, c)
    builder.compute_order()

    builder.remove_point(b)
    order = builder.compute_order()

    assert order == [a, c]
    assert builder.build_route_requests(order) == [(a, c)]
    assert not b.selected


def test_removing_back_to_one_point_returns_to_partial():
    a, b = make_point("a", 0, 0), make_point("b", 0, 1)
    builder = builder_with(a, b)
    assert builder.state is TourState.READY

    builder.remove_point(a)

    assert builder.state is TourState.PARTIAL
    assert builder.compute_order() == [b]


def test_add_and_remove_flip_the_selection_flag():
    a = make_point("a", 0, 0)
    builder = TourBuilder()

    builder.add_point(a)
    assert a.selected
    builder.remove_point(a)
    assert not a.selected


def test_adding_the_same_point_twice_is_a_no_op():
    a, b = make_point("a", 0, 0), make_point("b", 0, 1)
    builder = builder_with(a, b, a)

    assert builder.selected_points == [a, b]
    assert builder.compute_order() == [a, b]


def test_removing_an_unknown_point_is_a_no_op():
    a, b = make_point("a", 0, 0), make_point("b", 0, 1)
    builder = builder_with(a)

    builder.remove_point(b)

    assert builder.selected_points == [a]


def test_toggle_point():
    a = make_point("a", 0, 0)
    builder = TourBuilder()

    assert builder.toggle_point(a) is True
    assert builder.selected_points == [a]
    assert builder.toggle_point(a) is False
    assert builder.selected_points == []


def test_readded_point_moves_to_the_end_of_the_selection():
    a, b, c = make_point("a", 0, 0), make_point("b", 0, 1), make_point("c", 0, 3)
    builder = builder_with(a, b, c)

    builder.remove_point(a)
    builder.add_point(a)

    # b is now the first point added, so the tour starts there
    assert builder.compute_order() == [b, a, c]


@pytest.mark.parametrize("lat", [-54.142857142857146, -12.5, 0.3, 37.7749, 48.8606, 71.0])
def test_north_and_south_neighbors_tie_on_a_meridian(lat):
    # Rounding in the great-circle formula can put the two legs a nanometre apart
    a = make_point("a", lat, 10.0)
    b = make_point("b", lat + 0.001, 10.0)
    c = make_point("c", lat - 0.001, 10.0)
    builder = builder_with(a, b, c)

    assert [p.point_id for p in builder.compute_order()] == ["a", "b", "c"]


def test_east_and_west_neighbors_tie_on_a_parallel():
    a = make_point("a", 37.7749, -122.4194)
    b = make_point("b", 37.7749, -122.4184)
    c = make_point("c", 37.7749, -122.4204)
    builder = builder_with(a, b, c)

    assert [p.point_id for p in builder.compute_order()] == ["a", "b", "c"]


def test_clearly_closer_point_still_wins_over_insertion_order():
    a = make_point("a", 0.0, 0.0)
    far = make_point("far", 0.0, 0.0002)
    near = make_point("near", 0.0, 0.0001)
    builder = builder_with(a, far, near)

    assert [p.point_id for p in builder.compute_order()] == ["a", "near", "far"]
