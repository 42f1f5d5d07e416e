"""Tests for the exact draw-probability calculators."""

import math

import pytest

from services.probability_service import (
    RemainingDistribution,
    calculate_opening_probability,
    calculate_prize_probability,
    calculate_remaining_distribution,
    calculate_remaining_in_deck_probability,
)
from utils.math_utils import hypergeometric_probability


class TestOpeningProbability:
    """Tests for calculate_opening_probability."""

    def test_zero_and_negative_copies(self) -> None:
        assert calculate_opening_probability(0) == "0.0"
        assert calculate_opening_probability(-3) == "0.0"

    def test_four_copies_matches_closed_form(self) -> None:
        """1 - C(56,7)/C(60,7) = 39.95%"""
        expected = 1 - math.comb(56, 7) / math.comb(60, 7)
        assert calculate_opening_probability(4) == f"{expected * 100:.1f}"
        assert calculate_opening_probability(4) == "39.9"

    def test_single_copy(self) -> None:
        """One copy lands in the hand with probability 7/60."""
        assert calculate_opening_probability(1) == "11.7"

    def test_full_deck_is_certain(self) -> None:
        assert calculate_opening_probability(60) == "100.0"

    def test_more_than_53_copies_is_certain(self) -> None:
        """Fewer than 7 other cards forces a copy into the hand."""
        assert calculate_opening_probability(54) == "100.0"

    def test_monotonic_in_copies(self) -> None:
        values = [float(calculate_opening_probability(copies)) for copies in range(0, 61)]
        assert values == sorted(values)

    def test_rejects_non_integer(self) -> None:
        with pytest.raises(TypeError):
            calculate_opening_probability("4")


class TestRemainingInDeckProbability:
    """Tests for calculate_remaining_in_deck_probability."""

    def test_zero_and_negative_copies(self) -> None:
        assert calculate_remaining_in_deck_probability(0) == "0.0"
        assert calculate_remaining_in_deck_probability(-1) == "0.0"

    def test_single_copy(self) -> None:
        """One copy is removed with probability 13/60."""
        assert calculate_remaining_in_deck_probability(1) == "78.3"

    def test_typical_counts(self) -> None:
        assert calculate_remaining_in_deck_probability(2) == "95.6"
        assert calculate_remaining_in_deck_probability(3) == "99.2"
        assert calculate_remaining_in_deck_probability(4) == "99.9"

    def test_values_drop_as_copies_decrease(self) -> None:
        values = [float(calculate_remaining_in_deck_probability(copies)) for copies in (4, 3, 2, 1)]
        assert values == sorted(values, reverse=True)
        assert values[0] > values[-1]

    def test_more_copies_than_removed_block(self) -> None:
        assert calculate_remaining_in_deck_probability(14) == "100.0"
        assert calculate_remaining_in_deck_probability(60) == "100.0"

    def test_all_copies_can_still_be_removed_at_thirteen(self) -> None:
        """13 copies can all be removed, but the chance rounds away."""
        assert calculate_remaining_in_deck_probability(13) == "100.0"


class TestPrizeProbability:
    """Tests for calculate_prize_probability."""

    def test_zero_and_negative_copies(self) -> None:
        assert calculate_prize_probability(0) == "0.0"
        assert calculate_prize_probability(-2) == "0.0"

    def test_single_copy_from_53_card_pool(self) -> None:
        """A single copy is prized with probability 6/53."""
        assert calculate_prize_probability(1) == "11.3"

    def test_four_copies(self) -> None:
        """1 - C(49,6)/C(53,6)"""
        expected = 1 - math.comb(49, 6) / math.comb(53, 6)
        assert calculate_prize_probability(4) == f"{expected * 100:.1f}"
        assert calculate_prize_probability(4) == "39.1"

    def test_uses_53_card_pool_not_60(self) -> None:
        from_sixty = 1 - math.comb(59, 6) / math.comb(60, 6)
        assert calculate_prize_probability(1) != f"{from_sixty * 100:.1f}"

    def test_more_copies_than_pool(self) -> None:
        assert calculate_prize_probability(54) == "100.0"

    def test_pool_too_small_for_clean_prizes(self) -> None:
        """48 copies leave 5 other cards, so a copy is always prized."""
        assert calculate_prize_probability(48) == "100.0"


class TestRemainingDistribution:
    """Tests for calculate_remaining_distribution."""

    def test_zero_copies(self) -> None:
        assert calculate_remaining_distribution(0) == RemainingDistribution(
            probabilities=[1.0], expected_value=0.0
        )

    def test_negative_copies_clamped_to_zero(self) -> None:
        assert calculate_remaining_distribution(-4) == calculate_remaining_distribution(0)

    def test_four_copies_shape_and_sum(self) -> None:
        distribution = calculate_remaining_distribution(4)
        assert len(distribution.probabilities) == 5
        assert all(prob >= 0 for prob in distribution.probabilities)
        assert abs(sum(distribution.probabilities) - 1.0) < 1e-6

    def test_four_copies_expected_value(self) -> None:
        """Hypergeometric mean: 4 * 47/60."""
        distribution = calculate_remaining_distribution(4)
        assert abs(distribution.expected_value - 4 * 47 / 60) < 1e-9

    def test_expected_value_is_weighted_index_sum(self) -> None:
        distribution = calculate_remaining_distribution(3)
        weighted = sum(index * prob for index, prob in enumerate(distribution.probabilities))
        assert abs(distribution.expected_value - weighted) < 1e-12

    def test_single_copy(self) -> None:
        distribution = calculate_remaining_distribution(1)
        assert abs(distribution.probabilities[0] - 13 / 60) < 1e-12
        assert abs(distribution.probabilities[1] - 47 / 60) < 1e-12

    def test_matches_hypergeometric_mass(self) -> None:
        distribution = calculate_remaining_distribution(4)
        for remaining, prob in enumerate(distribution.probabilities):
            used = 4 - remaining
            exact = math.comb(4, used) * math.comb(56, 13 - used) / math.comb(60, 13)
            assert abs(prob - exact) < 1e-12

    @pytest.mark.parametrize("copies", [0, 1, 2, 3, 4])
    def test_sums_to_one_for_typical_counts(self, copies) -> None:
        distribution = calculate_remaining_distribution(copies)
        assert len(distribution.probabilities) == copies + 1
        assert abs(sum(distribution.probabilities) - 1.0) < 1e-9

    def test_large_count_has_zero_mass_below_seven(self) -> None:
        """With 20 copies at most 13 can be removed, so at least 7 remain."""
        distribution = calculate_remaining_distribution(20)
        assert all(prob == 0.0 for prob in distribution.probabilities[:7])
        assert abs(sum(distribution.probabilities) - 1.0) < 1e-9

    def test_full_deck(self) -> None:
        distribution = calculate_remaining_distribution(60)
        assert distribution.probabilities[47] == 1.0
        assert distribution.expected_value == 47.0

    def test_above_deck_size_clamped(self) -> None:
        assert calculate_remaining_distribution(75) == calculate_remaining_distribution(60)

    def test_no_more_than_47_copies_remain(self) -> None:
        """Every entry past the 47-card remaining deck is empty."""
        distribution = calculate_remaining_distribution(55)
        assert len(distribution.probabilities) == 56
        assert all(prob == 0.0 for prob in distribution.probabilities[48:])
        assert abs(sum(distribution.probabilities) - 1.0) < 1e-9


class TestHypergeometricTerms:
    """The calculators are built on the shared hypergeometric term."""

    @pytest.mark.parametrize("copies", [1, 4, 12, 53, 54, 60])
    def test_opening_is_complement_of_empty_hand(self, copies) -> None:
        prob_none = hypergeometric_probability(60, copies, 7, 0)
        assert calculate_opening_probability(copies) == f"{(1 - prob_none) * 100:.1f}"

    @pytest.mark.parametrize("copies", [1, 4, 12, 47])
    def test_prize_is_complement_of_clean_prizes(self, copies) -> None:
        prob_none = hypergeometric_probability(53, copies, 6, 0)
        assert calculate_prize_probability(copies) == f"{(1 - prob_none) * 100:.1f}"

    @pytest.mark.parametrize("copies", [2, 4, 20])
    def test_distribution_entries_match_removed_block(self, copies) -> None:
        distribution = calculate_remaining_distribution(copies)
        for remaining, prob in enumerate(distribution.probabilities):
            used = copies - remaining
            if used > 13:
                assert prob == 0.0
            else:
                assert prob == hypergeometric_probability(60, copies, 13, used)
