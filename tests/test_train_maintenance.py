import pytest

from problemset.train_maintenance import train_maintenance


def test_first_sample():
    trains = [(10, 15), (12, 10), (1, 1)]
    operations = [(1, 3), (1, 1), (2, 1), (2, 3)]
    assert train_maintenance(trains, operations) == [0, 1, 0, 0]


def test_second_sample():
    trains = [(1, 1), (10000000, 100000000), (998244353, 1), (2, 1), (1, 2)]
    operations = [(1, 5), (2, 5), (1, 5), (1, 1)]
    assert train_maintenance(trains, operations) == [0, 0, 0, 1]


@pytest.mark.parametrize("work, rest", [(2, 1), (1, 1), (4, 3), (3, 9)])
def test_lone_train_follows_its_cycle(work, rest):
    days = 30
    always_working = (10 ** 9, 1)
    trains = [(work, rest), always_working]
    operations = [(1, 1)]
    dummy_on = False
    for _ in range(days - 1):
        operations.append((2 if dummy_on else 1, 2))
        dummy_on = not dummy_on
    result = train_maintenance(trains, operations)
    expected = [1 if (day - 1) % (work + rest) >= work else 0 for day in range(1, days + 1)]
    assert result == expected


def test_counts_bounded_by_active_trains():
    trains = [(1, 2), (3, 1), (2, 2), (5, 4)]
    operations = [(1, 1), (1, 2), (1, 3), (1, 4), (2, 2), (1, 2), (2, 1), (2, 3)]
    result = train_maintenance(trains, operations)
    active = 0
    running = set()
    for (code, train), count in zip(operations, result):
        if code == 1:
            running.add(train)
        else:
            running.discard(train)
        active = len(running)
        assert 0 <= count <= active


def test_all_removed_gives_zero():
    trains = [(1, 1), (2, 3)]
    operations = [(1, 1), (1, 2), (2, 1), (2, 2)]
    assert train_maintenance(trains, operations)[-1] == 0


def test_remove_absent_train():
    with pytest.raises(ValueError):
        train_maintenance([(1, 1)], [(2, 1)])


def test_add_twice():
    with pytest.raises(ValueError):
        train_maintenance([(1, 1)], [(1, 1), (1, 1)])


def test_unknown_train():
    with pytest.raises(IndexError):
        train_maintenance([(1, 1)], [(1, 2)])