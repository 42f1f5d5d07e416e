"""
Mathematical utility functions for probability calculations.

This module provides the combinatorics core used by the deck probability
calculators: factorial, floating-point combinations (nCr), and the
hypergeometric term for card draws without replacement.
"""

from __future__ import annotations

from typing import Any


def require_int(value: Any, label: str) -> int:
    """
    Reject non-integer counts at the API boundary.

    Booleans are rejected even though they subclass int.

    Raises:
        TypeError: If value is not a plain integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be an integer, got {type(value).__name__}: {value!r}")
    return value


def factorial(n: int) -> int:
    """
    Calculate n! for small non-negative n.

    Returns 0 for negative input instead of raising. Not used for nCr, see
    combinations().
    """
    if n < 0:
        return 0
    if n in (0, 1):
        return 1
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def combinations(n: int, r: int) -> float:
    """
    Calculate nCr as a float without building factorials.

    The running product res * (n - i + 1) / i equals C(n, i) after step i,
    so intermediate values stay as small as the answer. Symmetry
    nCr = nC(n-r) keeps the loop to at most n/2 steps.

    Args:
        n: Population size
        r: Number chosen

    Returns:
        The combination count, or 0.0 when r < 0 or r > n

    Example:
        >>> combinations(60, 7)
        386206920.0
    """
    if r < 0 or r > n:
        return 0.0
    if r > n / 2:
        r = n - r

    res = 1.0
    for i in range(1, r + 1):
        res = res * (n - i + 1) / i
    return res


def format_percentage(probability: float) -> str:
    """Render a probability in [0, 1] as a one-decimal percentage string."""
    percent = probability * 100
    # Float residue around the bounds must not render as "-0.0" or "100.1"
    if percent <= 0:
        return "0.0"
    if percent >= 100:
        return "100.0"
    return f"{percent:.1f}"



def hypergeometric_probability(
    population: int,
    successes_in_pop: int,
    sample_size: int,
    successes_in_sample: int,
) -> float:
    """
    P(X = k) for a draw of n cards from N without replacement, K of them copies.

    P(X = k) = C(K, k) * C(N-K, n-k) / C(N, n)

    The deck calculators use this for the opening hand and prize "none drawn"
    terms (k = 0) and for each entry of the removed-block distribution.

    Raises:
        ValueError: If a count is negative or a sub-count exceeds its total
    """
    for label, value in (
        ("Population", population),
        ("Successes in population", successes_in_pop),
        ("Sample size", sample_size),
        ("Successes in sample", successes_in_sample),
    ):
        if value < 0:
            raise ValueError(f"{label} must be non-negative, got {value}")

    if successes_in_pop > population or sample_size > population:
        raise ValueError(
            f"Copies ({successes_in_pop}) and sample size ({sample_size}) "
            f"cannot exceed population ({population})"
        )
    if successes_in_sample > min(successes_in_pop, sample_size):
        raise ValueError(
            f"Successes in sample ({successes_in_sample}) cannot exceed "
            f"copies ({successes_in_pop}) or sample size ({sample_size})"
        )

    # The rest of the sample must fit in the non-copy cards
    others = population - successes_in_pop
    if sample_size - successes_in_sample > others:
        return 0.0

    return (
        combinations(successes_in_pop, successes_in_sample)
        * combinations(others, sample_size - successes_in_sample)
        / combinations(population, sample_size)
    )
