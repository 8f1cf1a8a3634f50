from hamilton.core.model import (
    Difficulty,
    Location,
    distance,
    neighbors,
    number_map,
)


def test_location_hash_and_eq():
    a = Location(2, 3)
    b = Location(2, 3)
    assert a == b
    assert hash(a) == hash(b)
    assert a == (2, 3)
    assert a.x == 2 and a.y == 3


def test_difficulty_values():
    assert Difficulty("easy") is Difficulty.EASY
    assert Difficulty("hard") is Difficulty.HARD


def test_distance_metrics():
    a, b = Location(0, 0), Location(3, 2)
    assert distance(a, b, diagonal=False) == 5
    assert distance(a, b, diagonal=True) == 3


def test_neighbors_corner_and_center():
    assert neighbors(Location(0, 0), 3, 3, False) == [Location(1, 0), Location(0, 1)]
    assert len(neighbors(Location(0, 0), 3, 3, True)) == 3
    assert neighbors(Location(1, 1), 3, 3, False) == [
        Location(0, 1), Location(1, 0), Location(2, 1), Location(1, 2),
    ]
    assert len(neighbors(Location(1, 1), 3, 3, True)) == 8


def test_number_map():
    grid = [0, 1,
            3, 4]
    assert number_map(grid, 2, 2) == [None, Location(1, 0), None, Location(0, 1), Location(1, 1)]
