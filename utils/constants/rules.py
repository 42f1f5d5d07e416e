"""Deck, draw-phase and simulation constants for the 60-card ruleset."""

DECK_SIZE = 60
HAND_SIZE = 7
PRIZE_COUNT = 6

# Hand and prizes are set aside before the first turn.
REMOVED_COUNT = HAND_SIZE + PRIZE_COUNT
REMAINING_DECK_SIZE = DECK_SIZE - REMOVED_COUNT

# Prize odds are taken over the cards left after the opening hand.
PRIZE_POOL_SIZE = DECK_SIZE - HAND_SIZE

DEFAULT_TRIALS = 100000
SIMULATION_ERROR = "Error"

SUPERTYPE_POKEMON = "Pokémon"
SUPERTYPE_TRAINER = "Trainer"
SUPERTYPE_ENERGY = "Energy"

SUPERTYPE_CATEGORIES = {
    SUPERTYPE_POKEMON: "pokemon",
    SUPERTYPE_TRAINER: "trainer",
    SUPERTYPE_ENERGY: "energy",
}
