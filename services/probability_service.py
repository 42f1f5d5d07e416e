"""
Exact draw probabilities for a 60-card deck.

Each calculator takes the number of copies of one card in the deck and
returns a one-decimal percentage string. Degenerate counts are clamped to
"0.0" or "100.0" rather than raised; only non-integer input is rejected.

Draw phases, in order:
- opening hand: 7 cards from 60
- prize cards: 6 cards set aside next
- remaining deck: the 47 cards left after those 13 are removed
"""

from __future__ import annotations

from dataclasses import dataclass, field

from utils.constants import (
    DECK_SIZE,
    HAND_SIZE,
    PRIZE_COUNT,
    PRIZE_POOL_SIZE,
    REMAINING_DECK_SIZE,
    REMOVED_COUNT,
)
from utils.math_utils import (
    combinations,
    format_percentage,
    hypergeometric_probability,
    require_int,
)


@dataclass(frozen=True)
class RemainingDistribution:
    """Distribution of copies left in the 47-card deck.

    probabilities[r] is the probability that exactly r copies remain.
    """

    probabilities: list[float] = field(default_factory=list)
    expected_value: float = 0.0


def calculate_opening_probability(copies: int) -> str:
    """
    Probability of at least one copy in the 7-card opening hand.

    P(X >= 1) = 1 - C(60-k, 7) / C(60, 7)

    With more than 53 copies C(60-k, 7) is 0 and the result is 100.0.
    """
    copies = require_int(copies, "copies")
    if copies <= 0:
        return "0.0"
    copies = min(copies, DECK_SIZE)

    prob_none = hypergeometric_probability(DECK_SIZE, copies, HAND_SIZE, 0)
    return format_percentage(1 - prob_none)


def calculate_remaining_in_deck_probability(copies: int) -> str:
    """
    Probability that at least one copy is still in the deck after hand and prizes.

    Zero copies remain only if every copy landed in the 13 removed cards:
    P(all k in removed) = C(13, k) / C(60, k)
    """
    copies = require_int(copies, "copies")
    if copies <= 0:
        return "0.0"
    # More copies than removed slots can never all be removed
    if copies > REMOVED_COUNT:
        return "100.0"

    prob_all_removed = combinations(REMOVED_COUNT, copies) / combinations(DECK_SIZE, copies)
    return format_percentage(1 - prob_all_removed)


def calculate_prize_probability(copies: int) -> str:
    """
    Probability of at least one copy among the 6 prize cards.

    The prizes are drawn from the 53 cards left after the opening hand, with
    all k copies assumed to be in that pool. This is the "prize risk" figure
    for a hand that is already known, not an unconditional draw from 60:

    P(X >= 1) = 1 - C(53-k, 6) / C(53, 6)
    """
    copies = require_int(copies, "copies")
    if copies <= 0:
        return "0.0"
    if copies > PRIZE_POOL_SIZE:
        return "100.0"

    prob_none = hypergeometric_probability(PRIZE_POOL_SIZE, copies, PRIZE_COUNT, 0)
    return format_percentage(1 - prob_none)


def calculate_remaining_distribution(total_copies: int) -> RemainingDistribution:
    """
    Full distribution of how many copies remain in the 47-card deck.

    For r remaining copies, used = k - r copies sit in the 13 removed cards:
    P(r) = C(k, used) * C(60-k, 13-used) / C(60, 13)

    Counts outside 0..60 are clamped so the probabilities always sum to 1.
    At most 47 copies can remain, so longer lists end in zeros.
    """
    total_copies = require_int(total_copies, "total_copies")
    total_copies = max(0, min(total_copies, DECK_SIZE))

    probabilities: list[float] = []
    expected_value = 0.0

    for remaining in range(total_copies + 1):
        used = total_copies - remaining
        if used < 0 or used > REMOVED_COUNT or remaining > REMAINING_DECK_SIZE:
            probabilities.append(0.0)
            continue

        prob = hypergeometric_probability(DECK_SIZE, total_copies, REMOVED_COUNT, used)
        probabilities.append(prob)
        expected_value += remaining * prob

    return RemainingDistribution(probabilities=probabilities, expected_value=expected_value)


__all__ = [
    "RemainingDistribution",
    "calculate_opening_probability",
    "calculate_prize_probability",
    "calculate_remaining_distribution",
    "calculate_remaining_in_deck_probability",
]
