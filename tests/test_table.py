from math import comb

import numpy as np
import pytest

from subset_sampling.sampling import (
    CountTable,
    InvalidArgument,
    TableTooLarge,
    build_count_table,
    count_subsets,
)


def test_base_row():
    table = build_count_table([3, 4], 6)

    assert isinstance(table, CountTable)
    assert table.counts.shape == (3, 7)
    assert table.cell(0, 0) == 1
    assert all(table.cell(0, s) == 0 for s in range(1, 7))


def test_cells_follow_recurrence():
    weights = [2, 3, 3, 5, 1, 4]
    target = 9
    table = build_count_table(weights, target)

    for i in range(1, len(weights) + 1):
        w = weights[i - 1]
        for s in range(target + 1):
            expected = table.cell(i - 1, s)
            if w <= s:
                expected += table.cell(i - 1, s - w)
            assert table.cell(i, s) == expected


def test_total_matches_known_instance():
    # {30, 50}, {10, 30, 40}, {10, 20, 50}
    table = build_count_table([10, 20, 30, 40, 50], 80)

    assert table.n_items == 5
    assert table.target == 80
    assert table.total == 3


def test_zero_weight_doubles_counts():
    assert count_subsets([0, 5], 5) == 2
    assert count_subsets([0, 0], 0) == 4
    assert count_subsets([0, 0, 7], 7) == 4


def test_empty_weights():
    assert count_subsets([], 0) == 1
    assert count_subsets([], 3) == 0


def test_weight_larger_than_target_is_skipped():
    table = build_count_table([100, 2], 2)
    assert table.total == 1
    assert table.cell(1, 0) == 1


def test_counts_are_unbounded_integers():
    table = build_count_table([1] * 100, 50)

    assert table.total == comb(100, 50)
    assert table.total > 2 ** 64
    assert type(table.total) is int


def test_numpy_integer_weights_accepted():
    weights = np.array([1, 2, 3, 4], dtype=np.int64)
    assert count_subsets(weights, np.int64(5)) == 2


@pytest.mark.parametrize("weights, target", [
    ([1, -2, 3], 3),
    ([1, 2.5, 3], 3),
    ([1, 2.0, 3], 3),
    ([1, True], 1),
    ([1, "2"], 3),
    ([1, 2], -1),
    ([1, 2], 1.5),
    ("123", 3),
    (None, 3),
])
def test_invalid_arguments_rejected(weights, target):
    with pytest.raises(InvalidArgument):
        build_count_table(weights, target)


def test_table_size_limit():
    with pytest.raises(TableTooLarge) as excinfo:
        build_count_table([1] * 9, 99, max_cells=999)

    assert excinfo.value.n_cells == 1000
    assert isinstance(excinfo.value, InvalidArgument)

    # exactly at the limit is fine
    assert build_count_table([1] * 9, 99, max_cells=1000).counts.size == 1000
