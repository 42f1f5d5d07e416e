"""Per-card probability tables and grouped hand conditions for a parsed deck."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from loguru import logger

from services.deck_parser import DeckCard, total_cards
from services.hand_simulator import CustomHandTarget
from services.probability_service import (
    RemainingDistribution,
    calculate_opening_probability,
    calculate_prize_probability,
    calculate_remaining_distribution,
    calculate_remaining_in_deck_probability,
)
from utils.constants import DECK_SIZE, SUPERTYPE_CATEGORIES


@dataclass(frozen=True)
class CardProbabilityRow:
    """Exact draw odds for one card of the deck."""

    name: str
    quantity: int
    supertype: str
    opening: str
    prize: str
    remaining: str
    distribution: RemainingDistribution


def build_card_row(card: DeckCard) -> CardProbabilityRow:
    return CardProbabilityRow(
        name=card.name,
        quantity=card.quantity,
        supertype=card.supertype,
        opening=calculate_opening_probability(card.quantity),
        prize=calculate_prize_probability(card.quantity),
        remaining=calculate_remaining_in_deck_probability(card.quantity),
        distribution=calculate_remaining_distribution(card.quantity),
    )


def build_deck_report(cards: Sequence[DeckCard]) -> dict[str, list[CardProbabilityRow]]:
    """
    Group per-card probability rows by category.

    Returns:
        Mapping of "pokemon", "trainer" and "energy" to rows in deck order.
        Categories without cards are omitted.
    """
    deck_total = total_cards(cards)
    if deck_total != DECK_SIZE:
        logger.warning(f"Deck has {deck_total} cards, probabilities assume {DECK_SIZE}")

    report: dict[str, list[CardProbabilityRow]] = {}
    for supertype, category in SUPERTYPE_CATEGORIES.items():
        rows = [build_card_row(card) for card in cards if card.supertype == supertype]
        if rows:
            report[category] = rows
    return report


def build_grouped_target(
    cards: Sequence[DeckCard],
    selected_names: Iterable[str],
    target_quantity: int,
    *,
    target_id: str | None = None,
) -> CustomHandTarget:
    """
    Combine several cards into one hand condition (e.g. "any Energy").

    The group's deck quantity is the sum of the selected cards. Names not in
    the deck are ignored.

    Raises:
        ValueError: If none of the selected names is in the deck
    """
    wanted = set(selected_names)
    selected = [card for card in cards if card.name in wanted]
    if not selected:
        raise ValueError("Select at least one card from the deck")

    if len(selected) == 1:
        label = selected[0].name
    else:
        label = f"{selected[0].name} etc ({len(selected)} types)"

    return CustomHandTarget(
        id=target_id or f"cond-{uuid.uuid4().hex}",
        deck_quantity=total_cards(selected),
        target_quantity=target_quantity,
        name=label,
    )


__all__ = ["CardProbabilityRow", "build_card_row", "build_deck_report", "build_grouped_target"]
