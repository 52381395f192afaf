import pytest

from beetsp.greedy import (
    format_tours,
    greedy_tours,
    main,
    nearest_neighbour_tour,
    parse_tours,
)
from beetsp.instance import Tour, parse_atsp

HEADER = (
    "NAME: demo\n"
    "TYPE: ATSP\n"
    "COMMENT: demo instance\n"
    "DIMENSION: 4\n"
    "EDGE_WEIGHT_TYPE: EXPLICIT\n"
    "EDGE_WEIGHT_FORMAT: FULL_MATRIX\n"
    "EDGE_WEIGHT_SECTION\n"
)
MATRIX = (
    "9999 3 1 8\n"
    "6 9999 2 5\n"
    "4 7 9999 9\n"
    "1 1 2 9999\n"
    "EOF\n"
)


@pytest.fixture
def instance():
    return parse_atsp(HEADER + MATRIX)


def test_tour_starts_at_start_and_is_permutation(instance):
    for start in range(1, 5):
        tour = nearest_neighbour_tour(instance, start)
        assert tour.path[0] == start
        assert sorted(tour.path) == [1, 2, 3, 4]
        assert tour.cost == instance.tour_cost(tour.path)


def test_tour_follows_cheapest_edge(instance):
    tour = nearest_neighbour_tour(instance, 1)
    # from 1 the cheapest is 3 (1), from 3 the cheapest left is 2 (7), then 4
    assert tour.path == (1, 3, 2, 4)


def test_ties_go_to_lowest_city(instance):
    tour = nearest_neighbour_tour(instance, 4)
    assert tour.path[1] == 1


def test_start_out_of_range(instance):
    with pytest.raises(ValueError):
        nearest_neighbour_tour(instance, 5)


def test_greedy_tours_sorted_and_complete(instance):
    tours = greedy_tours(instance)
    assert len(tours) == 4
    assert [t.cost for t in tours] == sorted(t.cost for t in tours)
    assert sorted(t.path[0] for t in tours) == [1, 2, 3, 4]


def test_format_tours_layout():
    text = format_tours([Tour(11, (1, 2, 3))], 0.5)
    assert text == "11\n1 2 3 \nThoi gian = 0.5\n"


def test_format_parse_round_trip(instance):
    tours = greedy_tours(instance)
    text = format_tours(tours, 1.25)
    assert parse_tours(text, 4, 4) == tours
    assert parse_tours(text, 4) == tours


def test_parse_tours_respects_limit(instance):
    tours = greedy_tours(instance)
    assert parse_tours(format_tours(tours, 0.0), 4, 2) == tours[:2]


def test_parse_tours_limit_beyond_available(instance):
    text = format_tours(greedy_tours(instance), 0.0)
    with pytest.raises(ValueError):
        parse_tours(text, 4, 5)


def test_parse_tours_incomplete_path():
    with pytest.raises(ValueError):
        parse_tours("7\n1 2\n", 3, 1)


def test_main_writes_sorted_tours(tmp_path, instance, capsys):
    source = tmp_path / "demo.atsp"
    source.write_text(HEADER + MATRIX)
    output = tmp_path / "out" / "greedy_demo.atsp"
    assert main([str(source), "--output", str(output)]) == 0
    assert "n = 4" in capsys.readouterr().out
    written = output.read_text()
    assert parse_tours(written, 4, 4) == greedy_tours(instance)
    assert written.splitlines()[-1].startswith("Thoi gian = ")