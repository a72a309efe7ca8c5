import functools
import operator

import pytest

from problemset.codechef_sequences import (
    alternating_prefix_lengths,
    can_bench_press,
    can_pay,
    count_non_decreasing_subarrays,
    even_game_winner,
    min_horse_difference,
    or_after_updates,
    shuffling_parties,
    smallest_pair_sum,
)


NOTES = [1, 2, 5, 10, 20]


def test_can_pay_full_total():
    assert can_pay(NOTES, sum(NOTES)) is True


def test_can_pay_more_than_total():
    assert can_pay(NOTES, sum(NOTES) + 1) is False


@pytest.mark.parametrize("note", NOTES)
def test_can_pay_single_note(note):
    assert can_pay(NOTES, note) is True


def test_can_pay_zero():
    assert can_pay(NOTES, 0) is True


def test_can_pay_odd_with_even_notes():
    assert can_pay([2, 4, 6, 8], 7) is False


def test_alternating_strict():
    values = [1, -1, 2, -2, 3]
    assert alternating_prefix_lengths(values) == list(range(len(values), 0, -1))


def test_alternating_same_sign_all_ones():
    values = [3, 4, 5, 6]
    assert alternating_prefix_lengths(values) == [1] * len(values)


def test_alternating_length_and_tail():
    values = [1, 2, -3, 4, -5, -6]
    result = alternating_prefix_lengths(values)
    assert len(result) == len(values)
    assert result[-1] == 1
    assert all(1 <= length <= len(values) - i for i, length in enumerate(result))


def test_bench_press_with_pair():
    assert can_bench_press(10 + 2 * 7, 10, [7, 7, 3]) is True


def test_bench_press_short_by_one():
    assert can_bench_press(10 + 2 * 7 + 1, 10, [7, 7, 3]) is False


def test_bench_press_no_pairs():
    assert can_bench_press(11, 10, [1, 2, 3]) is False


def test_bench_press_rod_alone():
    assert can_bench_press(10, 10, []) is True


def test_even_game_all_even():
    assert even_game_winner([2, 4, 6]) == 1


def test_even_game_single_odd():
    assert even_game_winner([2, 3, 6]) == 2


def test_even_game_parity_invariant():
    assert even_game_winner([1, 3, 5, 2]) == even_game_winner([1, 2])


def test_min_horse_difference_order_independent():
    skills = [40, 3, 17, 9, 28]
    assert min_horse_difference(skills) == min_horse_difference(sorted(skills, reverse=True))


def test_min_horse_difference_bounded_by_adjacent():
    skills = [40, 3, 17, 9, 28]
    ordered = sorted(skills)
    result = min_horse_difference(skills)
    assert all(result <= b - a for a, b in zip(ordered, ordered[1:]))
    assert any(result == b - a for a, b in zip(ordered, ordered[1:]))


def test_min_horse_difference_needs_two():
    with pytest.raises(ValueError):
        min_horse_difference([5])


def test_or_initial_value():
    values = [1, 4, 16, 3]
    assert or_after_updates(values, [])[0] == functools.reduce(operator.or_, values)


def test_or_updates_to_zero():
    values = [1, 4, 16]
    updates = [(1, 0), (2, 0), (3, 0)]
    result = or_after_updates(values, updates)
    assert len(result) == len(updates) + 1
    assert result[-1] == 0


def test_or_update_matches_fresh_computation():
    values = [1, 4, 16]
    result = or_after_updates(values, [(2, 8)])
    assert result[1] == or_after_updates([1, 8, 16], [])[0]


def test_or_update_bad_index():
    with pytest.raises(IndexError):
        or_after_updates([1, 2], [(3, 1)])


def test_non_decreasing_ascending():
    n = 6
    assert count_non_decreasing_subarrays(list(range(n))) == n * (n + 1) // 2


def test_non_decreasing_descending():
    n = 6
    assert count_non_decreasing_subarrays(list(range(n, 0, -1))) == n


def test_non_decreasing_empty():
    assert count_non_decreasing_subarrays([]) == 0


def test_shuffling_all_even():
    values = [2, 4, 6, 8, 10]
    assert shuffling_parties(values) == (len(values) + 1) // 2


def test_shuffling_bounded():
    values = [1, 2, 3, 5, 7, 8, 9]
    assert 0 <= shuffling_parties(values) <= len(values)


def test_smallest_pair_sum_example():
    assert smallest_pair_sum([5, 1, 3, 4]) == 4


def test_smallest_pair_sum_order_independent():
    values = [9, 2, 7, 5]
    assert smallest_pair_sum(values) == smallest_pair_sum(sorted(values))


def test_smallest_pair_sum_needs_two():
    with pytest.raises(ValueError):
        smallest_pair_sum([1])