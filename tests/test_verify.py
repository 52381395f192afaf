import pytest

from beetsp.instance import parse_atsp
from beetsp.verify import TourCheck, check_tour, main, parse_result

HEADER = (
    "NAME: demo\n"
    "TYPE: ATSP\n"
    "COMMENT: demo instance\n"
    "DIMENSION: 3\n"
    "EDGE_WEIGHT_TYPE: EXPLICIT\n"
    "EDGE_WEIGHT_FORMAT: FULL_MATRIX\n"
    "EDGE_WEIGHT_SECTION\n"
)
MATRIX = "9999 1 5\n2 9999 7\n3 4 9999\nEOF\n"


@pytest.fixture
def instance():
    return parse_atsp(HEADER + MATRIX)


def test_parse_result_reads_cost_and_path():
    text = "cost = 42\nDuong di\n3 1 2 \nThoi gian = 0.1\n"
    assert parse_result(text, 3) == (42, [3, 1, 2])


def test_parse_result_too_few_cities():
    with pytest.raises(ValueError):
        parse_result("cost = 42\nDuong di\n3 1\n", 3)


def test_parse_result_without_cost():
    with pytest.raises(ValueError):
        parse_result("cost = ?\nDuong di\n1 2 3\n", 3)


def test_correct_tour_passes(instance):
    path = [2, 3, 1]
    check = check_tour(instance, path, instance.tour_cost(path))
    assert check.passed()
    assert check.duplicate_at is None
    assert check.actual_cost == instance.tour_cost(path)


def test_wrong_cost_fails(instance):
    path = [1, 2, 3]
    claimed = instance.tour_cost(path) + 1
    check = check_tour(instance, path, claimed)
    assert not check.cost_matches
    assert check.is_hamiltonian
    assert not check.passed()


def test_repeated_city_fails(instance):
    path = [1, 3, 1]
    check = check_tour(instance, path, instance.tour_cost(path))
    assert check.cost_matches
    assert check.duplicate_at == 0
    assert not check.passed()


def test_city_out_of_range(instance):
    with pytest.raises(ValueError):
        check_tour(instance, [1, 2, 4], 0)


def test_tour_check_passed_requires_both():
    assert TourCheck(5, 5, None).passed()
    assert not TourCheck(5, 5, 1).passed()
    assert not TourCheck(5, 6, None).passed()


def test_main_reports_pass(tmp_path, instance, capsys):
    source = tmp_path / "demo.atsp"
    source.write_text(HEADER + MATRIX)
    result = tmp_path / "bee_demo.atsp"
    cost = instance.tour_cost([1, 2, 3])
    result.write_text(f"cost = {cost}\nDuong di\n1 2 3 \nThoi gian = 0.2\n")
    assert main([str(result), str(source)]) == 0
    out = capsys.readouterr().out
    assert "Check 1 passed" in out
    assert "Check 2 passed" in out


def test_main_reports_failure(tmp_path, capsys):
    source = tmp_path / "demo.atsp"
    source.write_text(HEADER + MATRIX)
    result = tmp_path / "bee_demo.atsp"
    result.write_text("cost = 1\nDuong di\n2 2 3 \n")
    assert main([str(result), str(source)]) == 1
    out = capsys.readouterr().out
    assert "Check 1 failed" in out
    assert "repeated city at position 0" in out