import random
from collections import Counter

import numpy as np
import pytest

from subset_sampling.sampling import (
    InternalInconsistency,
    InvalidArgument,
    build_count_table,
    sample_from_table,
    uniform_subset_sum_indices,
)


class CountingRNG:
    """Wraps a RandomState and counts draws."""

    def __init__(self, seed):
        self._rng = np.random.RandomState(seed)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self._rng.random_sample()


@pytest.fixture
def small_weights():
    return [10, 20, 30, 40, 50]


@pytest.fixture
def range_weights():
    return list(range(1, 11))


def test_single_element_exact_match():
    assert uniform_subset_sum_indices([5], 5, rng=0) == [0]


def test_single_element_no_match():
    assert uniform_subset_sum_indices([5], 3, rng=0) == []


def test_no_solution_consumes_no_draws():
    rng = CountingRNG(0)
    table = build_count_table([4, 6, 8], 5)

    assert sample_from_table(table, [4, 6, 8], 5, rng) == []
    assert rng.calls == 0


def test_one_draw_per_weight(range_weights):
    rng = CountingRNG(3)
    table = build_count_table(range_weights, 25)
    sample_from_table(table, range_weights, 25, rng)

    assert rng.calls == len(range_weights)


def test_sum_invariant_across_seeds(range_weights):
    for seed in range(300):
        indices = uniform_subset_sum_indices(range_weights, 25, rng=seed)

        assert sum(range_weights[i] for i in indices) == 25
        assert len(set(indices)) == len(indices)
        assert all(0 <= i < len(range_weights) for i in indices)
        assert indices == sorted(indices)


def test_exact_mode_sum_invariant(range_weights):
    for seed in range(100):
        indices = uniform_subset_sum_indices(range_weights, 25, rng=seed, exact=True)
        assert sum(range_weights[i] for i in indices) == 25


def test_exact_and_float_modes_agree_on_small_counts(range_weights):
    for seed in range(50):
        assert (
            uniform_subset_sum_indices(range_weights, 25, rng=seed)
            == uniform_subset_sum_indices(range_weights, 25, rng=seed, exact=True)
        )


def test_same_seed_same_result(small_weights):
    first = uniform_subset_sum_indices(small_weights, 80, rng=1234)
    for _ in range(10):
        assert uniform_subset_sum_indices(small_weights, 80, rng=1234) == first


def test_accepts_other_random_sources(small_weights):
    valid = {(2, 4), (0, 2, 3), (0, 1, 4)}

    for rng in (random.Random(5), np.random.default_rng(5), np.random.RandomState(5)):
        assert tuple(uniform_subset_sum_indices(small_weights, 80, rng=rng)) in valid


def test_rejects_unusable_rng(small_weights):
    with pytest.raises(InvalidArgument):
        uniform_subset_sum_indices(small_weights, 80, rng="not a generator")


def test_uniform_over_valid_subsets(small_weights):
    table = build_count_table(small_weights, 80)
    rng = np.random.RandomState(2024)
    n_draws = 30_000

    tally = Counter(
        tuple(sample_from_table(table, small_weights, 80, rng))
        for _ in range(n_draws)
    )

    assert set(tally) == {(2, 4), (0, 2, 3), (0, 1, 4)}
    p = 1 / 3
    std_error = (p * (1 - p) / n_draws) ** 0.5
    for count in tally.values():
        assert abs(count / n_draws - p) < 4 * std_error


def test_zero_weight_both_subsets_reachable():
    seen = {tuple(uniform_subset_sum_indices([0, 5], 5, rng=seed)) for seed in range(200)}
    assert seen == {(1,), (0, 1)}


def test_zero_target_with_zero_weights():
    seen = {tuple(uniform_subset_sum_indices([0, 3, 0], 0, rng=seed)) for seed in range(200)}
    assert seen == {(), (0,), (2,), (0, 2)}


def test_huge_counts():
    weights = [1] * 200
    indices = uniform_subset_sum_indices(weights, 100, rng=9)

    assert len(indices) == 100
    assert len(set(indices)) == 100


def test_table_shape_mismatch(small_weights):
    table = build_count_table(small_weights, 80)

    with pytest.raises(InvalidArgument):
        sample_from_table(table, small_weights, 70, rng=0)
    with pytest.raises(InvalidArgument):
        sample_from_table(table, small_weights[:-1], 80, rng=0)


def test_sampler_does_not_modify_table(range_weights):
    table = build_count_table(range_weights, 25)
    before = table.counts.copy()
    sample_from_table(table, range_weights, 25, rng=1)

    assert (table.counts == before).all()


def test_dead_end_raises():
    table = build_count_table([5], 5)
    table.counts[0, 0] = 0  # no way to complete after including the 5

    with pytest.raises(InternalInconsistency):
        sample_from_table(table, [5], 5, rng=0)


def test_leftover_sum_raises():
    table = build_count_table([5], 5)
    table.counts[0, 0] = 0
    table.counts[0, 5] = 1  # exclusion now looks like the only way

    with pytest.raises(InternalInconsistency):
        sample_from_table(table, [5], 5, rng=0)
