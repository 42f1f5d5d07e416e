"""Parsing helpers for exported deck-list text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from loguru import logger

from utils.constants import SUPERTYPE_ENERGY, SUPERTYPE_POKEMON, SUPERTYPE_TRAINER

SECTION_HEADERS = {
    "pokémon": SUPERTYPE_POKEMON,
    "pokemon": SUPERTYPE_POKEMON,
    "trainer": SUPERTYPE_TRAINER,
    "trainers": SUPERTYPE_TRAINER,
    "energy": SUPERTYPE_ENERGY,
}

_HEADER_RE = re.compile(r"^(?P<section>[^\d:][^:]*?)\s*:\s*\d*\s*$")
_CARD_RE = re.compile(r"^(?P<count>\d+)\s+(?P<name>.+?)$")
# Trailing "<SET> <collector number>", e.g. "SVI 166" or "PR-SV 12"
_PRINTING_RE = re.compile(r"\s+[A-Za-z0-9-]{2,6}\s+\d+[a-z]?$")

PARSE_ERROR_MESSAGE = "Could not parse any cards from the provided text. Please check the format."


class DeckParseError(ValueError):
    """Raised when deck text holds no recognizable card lines."""


@dataclass(frozen=True)
class DeckCard:
    name: str
    quantity: int
    supertype: str


class DeckParser:
    """Parse deck-list exports into card counts grouped by supertype."""

    def parse(self, deck_text: str) -> list[DeckCard]:
        """
        Convert deck text to a list of cards.

        Args:
            deck_text: Export text with "Pokémon: N", "Trainer: N" and
                "Energy: N" headers followed by "quantity name SET number" lines

        Returns:
            Cards in first-seen order; repeated names within a section are merged

        Raises:
            DeckParseError: If no card line could be parsed
        """
        totals: dict[tuple[str, str], int] = {}

        for card in self._iter_entries(deck_text):
            key = (card.name, card.supertype)
            totals[key] = totals.get(key, 0) + card.quantity

        if not totals:
            raise DeckParseError(PARSE_ERROR_MESSAGE)

        cards = [
            DeckCard(name=name, quantity=quantity, supertype=supertype)
            for (name, supertype), quantity in totals.items()
        ]
        logger.debug(f"Parsed {len(cards)} card types, {total_cards(cards)} cards")
        return cards

    def _iter_entries(self, deck_text: str) -> Iterable[DeckCard]:
        supertype = SUPERTYPE_POKEMON

        for line in deck_text.strip().splitlines():
            line = line.strip()
            if not line:
                continue

            header = _HEADER_RE.match(line)
            if header:
                section = header.group("section").strip().lower()
                if section in SECTION_HEADERS:
                    supertype = SECTION_HEADERS[section]
                # "Total Cards: 60" and unknown headers carry no cards
                continue

            match = _CARD_RE.match(line)
            if not match:
                continue

            quantity = int(match.group("count"))
            name = _PRINTING_RE.sub("", match.group("name")).strip()
            if quantity <= 0 or not name:
                continue

            yield DeckCard(name=name, quantity=quantity, supertype=supertype)


def total_cards(cards: Iterable[DeckCard]) -> int:
    return sum(card.quantity for card in cards)


__all__ = ["DeckCard", "DeckParseError", "DeckParser", "total_cards"]
