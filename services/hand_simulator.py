"""
Compound opening-hand conditions.

Estimates the probability that a 7-card opening hand holds at least
target_quantity copies of every requested card group at once. The Monte
Carlo estimator is the primary entry point; exact_custom_hand_probability
gives the multivariate hypergeometric value for the same question.

Overcommitted decks (more reserved copies than the deck holds) return the
"Error" sentinel instead of raising.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

from loguru import logger

from utils.constants import DECK_SIZE, DEFAULT_TRIALS, HAND_SIZE, SIMULATION_ERROR
from utils.math_utils import combinations, format_percentage, require_int

FILLER = -1


@dataclass(frozen=True)
class CustomHandTarget:
    """One card group: copies in the deck and copies required in hand."""

    id: str
    deck_quantity: int
    target_quantity: int
    name: str = ""


def _validate_targets(targets: Sequence[CustomHandTarget]) -> int:
    """Check per-target counts and return the number of reserved deck slots."""
    reserved = 0
    for target in targets:
        deck_quantity = require_int(target.deck_quantity, "deck_quantity")
        target_quantity = require_int(target.target_quantity, "target_quantity")
        if deck_quantity < 0:
            raise ValueError(
                f"Deck quantity must be non-negative, got {deck_quantity} for {target.id!r}"
            )
        if target_quantity < 0:
            raise ValueError(
                f"Target quantity must be non-negative, got {target_quantity} for {target.id!r}"
            )
        reserved += deck_quantity
    return reserved


def _build_deck(targets: Sequence[CustomHandTarget]) -> list[int]:
    """Flat 60-slot deck tagged with target index, FILLER elsewhere."""
    deck: list[int] = []
    for index, target in enumerate(targets):
        deck.extend([index] * target.deck_quantity)
    deck.extend([FILLER] * (DECK_SIZE - len(deck)))
    return deck


def _count_successes(
    targets: Sequence[CustomHandTarget], trials: int, rng: random.Random
) -> int:
    deck = _build_deck(targets)
    required = [target.target_quantity for target in targets]
    size = len(deck)
    successes = 0

    for _ in range(trials):
        # Partial Fisher-Yates: the first HAND_SIZE slots become a uniform sample
        for i in range(HAND_SIZE):
            j = rng.randrange(i, size)
            deck[i], deck[j] = deck[j], deck[i]

        tally = [0] * len(required)
        for slot in deck[:HAND_SIZE]:
            if slot != FILLER:
                tally[slot] += 1

        if all(count >= need for count, need in zip(tally, required)):
            successes += 1

    return successes


def simulate_custom_hand_probability(
    targets: Sequence[CustomHandTarget],
    trials: int = DEFAULT_TRIALS,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> str:
    """
    Monte Carlo estimate for a compound opening-hand condition.

    Args:
        targets: Card groups that must all be satisfied
        trials: Number of simulated opening hands
        rng: Random source; takes precedence over seed
        seed: Seed for a private random.Random when rng is not given

    Returns:
        Percentage string such as "41.3", "0.0" for no targets, or "Error"
        when the targets reserve more than 60 cards

    Raises:
        ValueError: If trials is not positive or a quantity is negative
        TypeError: If a count is not an integer
    """
    trials = require_int(trials, "trials")
    if not targets:
        return "0.0"
    if trials <= 0:
        raise ValueError(f"Trials must be positive, got {trials}")

    reserved = _validate_targets(targets)
    if reserved > DECK_SIZE:
        logger.warning(f"Targets reserve {reserved} cards, deck holds {DECK_SIZE}")
        return SIMULATION_ERROR

    if rng is None:
        rng = random.Random(seed)
    successes = _count_successes(targets, trials, rng)
    logger.debug(f"Simulated {trials} hands for {len(targets)} targets: {successes} successes")
    return format_percentage(successes / trials)


def _run_batch(targets: tuple[CustomHandTarget, ...], trials: int, seed: int) -> int:
    return _count_successes(targets, trials, random.Random(seed))


def _split_trials(trials: int, batches: int) -> list[int]:
    base, extra = divmod(trials, batches)
    sizes = [base + 1] * extra + [base] * (batches - extra)
    return [size for size in sizes if size > 0]


def simulate_custom_hand_probability_parallel(
    targets: Sequence[CustomHandTarget],
    trials: int = DEFAULT_TRIALS,
    *,
    workers: int = 1,
    seed: int | None = None,
) -> str:
    """
    Same estimate as simulate_custom_hand_probability, split across processes.

    Each batch draws from its own random.Random seeded from seed, so a fixed
    seed and worker count give a repeatable result.
    """
    trials = require_int(trials, "trials")
    workers = require_int(workers, "workers")
    if workers <= 1:
        return simulate_custom_hand_probability(targets, trials, seed=seed)
    if not targets:
        return "0.0"
    if trials <= 0:
        raise ValueError(f"Trials must be positive, got {trials}")

    reserved = _validate_targets(targets)
    if reserved > DECK_SIZE:
        logger.warning(f"Targets reserve {reserved} cards, deck holds {DECK_SIZE}")
        return SIMULATION_ERROR

    seeder = random.Random(seed)
    batch_sizes = _split_trials(trials, workers)
    batch_seeds = [seeder.getrandbits(64) for _ in batch_sizes]
    frozen_targets = tuple(targets)

    with ProcessPoolExecutor(max_workers=len(batch_sizes)) as executor:
        futures = [
            executor.submit(_run_batch, frozen_targets, size, batch_seed)
            for size, batch_seed in zip(batch_sizes, batch_seeds)
        ]
        successes = sum(future.result() for future in futures)

    logger.debug(
        f"Simulated {trials} hands in {len(batch_sizes)} batches: {successes} successes"
    )
    return format_percentage(successes / trials)


def _exact_probability(targets: Sequence[CustomHandTarget]) -> float:
    filler = DECK_SIZE - sum(target.deck_quantity for target in targets)
    total = combinations(DECK_SIZE, HAND_SIZE)

    def walk(index: int, drawn: int, ways: float) -> float:
        if index == len(targets):
            return ways * combinations(filler, HAND_SIZE - drawn)
        target = targets[index]
        subtotal = 0.0
        upper = min(target.deck_quantity, HAND_SIZE - drawn)
        for count in range(target.target_quantity, upper + 1):
            subtotal += walk(
                index + 1, drawn + count, ways * combinations(target.deck_quantity, count)
            )
        return subtotal

    return walk(0, 0, 1.0) / total


def exact_custom_hand_probability(targets: Sequence[CustomHandTarget]) -> str:
    """
    Multivariate hypergeometric value of the compound condition.

    Sums C(K1, c1) * ... * C(Kn, cn) * C(filler, 7 - sum(c)) / C(60, 7) over
    every hand composition that meets all targets. Validation and the
    "Error" sentinel match the simulator.
    """
    if not targets:
        return "0.0"
    reserved = _validate_targets(targets)
    if reserved > DECK_SIZE:
        logger.warning(f"Targets reserve {reserved} cards, deck holds {DECK_SIZE}")
        return SIMULATION_ERROR
    return format_percentage(_exact_probability(targets))


__all__ = [
    "CustomHandTarget",
    "exact_custom_hand_probability",
    "simulate_custom_hand_probability",
    "simulate_custom_hand_probability_parallel",
]
