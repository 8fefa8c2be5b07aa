"""
Domain models and value objects.

Contains poker cards, hands and hand ranking.
"""

from src.euler.domain.cards import (
    CATEGORY_WEIGHT,
    HAND_SIZE,
    TIEBREAK_BASE,
    Card,
    CardParseError,
    CardValue,
    Hand,
    HandCategory,
    Suit,
    char_to_suit,
    char_to_value,
    play_round,
    show_groups,
)

__all__ = [
    # Constants
    "CATEGORY_WEIGHT",
    "HAND_SIZE",
    "TIEBREAK_BASE",
    # Exceptions
    "CardParseError",
    # Types
    "Card",
    "CardValue",
    "Hand",
    "HandCategory",
    "Suit",
    # Functions
    "char_to_suit",
    "char_to_value",
    "play_round",
    "show_groups",
]
