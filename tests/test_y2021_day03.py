import pytest

from aocpuzzles.y2021_day03 import (
    co2_rating,
    count_set_bits,
    epsilon_rate,
    gamma_rate,
    oxygen_rating,
    parse_data,
    power_consumption,
    solve1,
    solve2,
)

SAMPLE = "\n".join(
    [
        "00100",
        "11110",
        "10110",
        "10111",
        "10101",
        "01111",
        "00111",
        "11100",
        "10000",
        "11001",
        "00010",
        "01010",
    ]
) + "\n"


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "test"
    path.write_text(SAMPLE)
    return path


def test_it_should_read_the_testfile(sample):
    assert len(parse_data(sample).binaries) == 12


def test_it_should_calculate_the_gamma_rate(sample):
    data = parse_data(sample)
    totals = count_set_bits(data.binaries)
    assert gamma_rate(totals, len(data.binaries)) == 22


def test_it_should_calculate_number_of_total_ones_correctly(sample):
    data = parse_data(sample)
    expected = [0] * 27 + [7, 5, 8, 7, 5]
    assert count_set_bits(data.binaries) == expected


def test_it_calculates_length_of_inputs(sample):
    assert parse_data(sample).length == 5


def test_it_calculate_epsilon_rate():
    assert epsilon_rate(334, 9) == 177


def test_it_calculate_power_consumption(sample):
    assert power_consumption(parse_data(sample)) == 198


def test_solve1(sample):
    assert solve1(sample) == 198


def test_it_calcs_oxygen(sample):
    assert oxygen_rating(parse_data(sample)) == 23


def test_it_calcs_co2(sample):
    assert co2_rating(parse_data(sample)) == 10


def test_solve2(sample):
    assert solve2(sample) == 230