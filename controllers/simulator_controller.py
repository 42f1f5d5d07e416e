"""
Simulator Controller - Application logic for the deck probability simulator.

Coordinates deck parsing, the per-card probability report and the custom
opening-hand conditions so a presentation layer only deals with plain values.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from loguru import logger

from services.deck_parser import DeckCard, DeckParser
from services.deck_report import CardProbabilityRow, build_deck_report, build_grouped_target
from services.hand_simulator import (
    CustomHandTarget,
    exact_custom_hand_probability,
    simulate_custom_hand_probability_parallel,
)
from services.settings_service import SettingsService, SimulatorSettings
from utils.logging_setup import configure_logging


@dataclass(frozen=True)
class DeckAnalysis:
    """Parsed deck with its per-category probability rows."""

    cards: list[DeckCard]
    report: dict[str, list[CardProbabilityRow]]


class SimulatorController:

    def __init__(
        self,
        *,
        settings_service: SettingsService | None = None,
        deck_parser: DeckParser | None = None,
        settings: SimulatorSettings | None = None,
    ):
        self.settings_service = settings_service or SettingsService()
        self.deck_parser = deck_parser or DeckParser()
        self.settings = settings or self.settings_service.load()
        self.conditions: list[CustomHandTarget] = []

    def bootstrap_logging(self, enable_file: bool = True) -> list[int]:
        return configure_logging(self.settings.log_level, enable_file=enable_file)

    # ============= Deck Analysis =============

    def analyze_deck_text(self, deck_text: str) -> DeckAnalysis:
        """
        Parse a deck list and compute the exact per-card probabilities.

        Raises:
            DeckParseError: If the text holds no card lines
        """
        cards = self.deck_parser.parse(deck_text)
        return DeckAnalysis(cards=cards, report=build_deck_report(cards))

    # ============= Custom Conditions =============

    def add_condition(
        self, cards: list[DeckCard], selected_names: Iterable[str], target_quantity: int
    ) -> CustomHandTarget:
        target = build_grouped_target(cards, selected_names, target_quantity)
        self.conditions.append(target)
        logger.debug(
            f"Added condition {target.name!r}: "
            f"{target.target_quantity}+ of {target.deck_quantity}"
        )
        return target

    def remove_condition(self, condition_id: str) -> None:
        self.conditions = [target for target in self.conditions if target.id != condition_id]

    def update_target_quantity(self, condition_id: str, target_quantity: int) -> None:
        self.conditions = [
            replace(target, target_quantity=target_quantity)
            if target.id == condition_id
            else target
            for target in self.conditions
        ]

    def clear_conditions(self) -> None:
        self.conditions = []

    def run_custom_simulation(self, trials: int | None = None) -> str:
        """Estimate the probability that the opening hand meets every condition."""
        return simulate_custom_hand_probability_parallel(
            self.conditions,
            self.settings.default_trials if trials is None else trials,
            workers=self.settings.workers,
            seed=self.settings.seed,
        )

    def exact_custom_probability(self) -> str:
        return exact_custom_hand_probability(self.conditions)


__all__ = ["DeckAnalysis", "SimulatorController"]
