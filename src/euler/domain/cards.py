"""
Cards — покерные карты, руки и ранжирование рук

Immutable Pydantic модели карты (Card) и руки из пяти карт (Hand).
Используется в задаче Project Euler 54 (https://projecteuler.net/problem=54).

Ранг руки — одно int число, сравнимое напрямую:
    rank = category * CATEGORY_WEIGHT + tiebreak
где category — HandCategory (HIGH_CARD=0 ... STRAIGHT_FLUSH=8), а tiebreak —
значения карт по убыванию (размер группы, значение) в системе счисления
по основанию TIEBREAK_BASE.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. tiebreak < CATEGORY_WEIGHT: старшая категория всегда бьёт младшую
2. Ранг не зависит от порядка карт во входе
3. Стрит A-2-3-4-5 (wheel) оценивается как стрит от пятёрки

Examples:
    >>> Hand.parse("5H 5C 6S 7S KD").category()
    <HandCategory.PAIR: 1>
    >>> play_round("5H 5C 6S 7S KD 2C 3S 8S 8D TD")
    2
"""

import itertools
import logging
from enum import Enum, IntEnum
from typing import Final

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество карт в руке
HAND_SIZE: Final[int] = 5

# Вес категории руки в итоговом ранге
CATEGORY_WEIGHT: Final[int] = 1_000_000

# Основание для кодирования значений карт (> ACE = 14)
# TIEBREAK_BASE ** HAND_SIZE = 759375 < CATEGORY_WEIGHT
TIEBREAK_BASE: Final[int] = 15

_VALUE_CHARS: Final[str] = "23456789TJQKA"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CardParseError(ValueError):
    """Нераспознанный символ значения или масти карты."""

    pass


# =============================================================================
# ENUMS
# =============================================================================


class CardValue(IntEnum):
    """Значение карты (TWO=2 ... ACE=14)"""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(str, Enum):
    """Масть карты. Порядок объявления задаёт порядок сортировки."""

    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"


class HandCategory(IntEnum):
    """Категория покерной руки, от младшей к старшей"""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_KIND = 7
    STRAIGHT_FLUSH = 8


_SUIT_ORDER: Final[dict[Suit, int]] = {suit: i for i, suit in enumerate(Suit)}


# =============================================================================
# PARSING
# =============================================================================


def char_to_suit(c: str) -> Suit:
    """
    Масть по символу S/H/D/C.

    Raises:
        CardParseError: Если символ не является мастью
    """
    try:
        return Suit(c)
    except ValueError:
        raise CardParseError(f"error getting suit: {c!r}") from None


def char_to_value(c: str) -> CardValue:
    """
    Значение по символу 2-9/T/J/Q/K/A.

    Raises:
        CardParseError: Если символ не является значением карты
    """
    index = _VALUE_CHARS.find(c) if len(c) == 1 else -1
    if index < 0:
        raise CardParseError(f"error getting value: {c!r}")
    return CardValue(index + 2)


# =============================================================================
# CARD
# =============================================================================


class Card(BaseModel):
    """Игральная карта: значение и масть."""

    value: CardValue = Field(..., description="Значение карты")
    suit: Suit = Field(..., description="Масть карты")

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, code: str) -> "Card":
        """
        Карта из двухсимвольного кода, например "TS" (десятка пик).

        Raises:
            CardParseError: Если код не из двух символов или символы неизвестны
        """
        if len(code) != 2:
            raise CardParseError(f"card code must have 2 characters, got {code!r}")
        return cls(value=char_to_value(code[0]), suit=char_to_suit(code[1]))

    @property
    def code(self) -> str:
        return _VALUE_CHARS[self.value - 2] + self.suit.value

    @property
    def sort_key(self) -> tuple[int, int]:
        """Порядок сортировки: по значению, затем по масти."""
        return (int(self.value), _SUIT_ORDER[self.suit])

    def same_suit(self, other: "Card") -> bool:
        return self.suit == other.suit

    def next_value(self) -> CardValue:
        """Следующее значение по кругу: KING -> ACE -> TWO."""
        if self.value == CardValue.ACE:
            return CardValue.TWO
        return CardValue(self.value + 1)

    def __str__(self) -> str:
        return f"({self.value.name.title()}, {self.suit.name.title()})"


# =============================================================================
# HAND
# =============================================================================


class Hand(BaseModel):
    """
    Покерная рука из HAND_SIZE карт.

    Карты хранятся отсортированными (Card.sort_key), поэтому все проверки
    и ранг не зависят от порядка во входе.
    """

    cards: tuple[Card, ...] = Field(..., description="Карты руки")

    model_config = {"frozen": True}

    @field_validator("cards")
    @classmethod
    def validate_cards(cls, v: tuple[Card, ...]) -> tuple[Card, ...]:
        """Ровно HAND_SIZE различных карт; результат сортируется."""
        if len(v) != HAND_SIZE:
            raise ValueError(f"hand must contain {HAND_SIZE} cards, got {len(v)}")
        if len(set(v)) != len(v):
            raise ValueError("hand must not contain duplicate cards")
        return tuple(sorted(v, key=lambda card: card.sort_key))

    @classmethod
    def parse(cls, text: str) -> "Hand":
        """
        Рука из строки кодов через пробел, например "5H 5C 6S 7S KD".

        Raises:
            CardParseError: Если какой-либо код не распознан
            pydantic.ValidationError: Если карт не HAND_SIZE или есть дубликаты
        """
        return cls(cards=tuple(Card.parse(code) for code in text.split()))

    # -------------------------------------------------------------------------
    # Группировка
    # -------------------------------------------------------------------------

    def groups(self) -> list[tuple[Card, ...]]:
        """Карты, сгруппированные по значению, по возрастанию значения."""
        return [tuple(group) for _, group in itertools.groupby(self.cards, key=lambda c: c.value)]

    def _group_sizes(self) -> list[int]:
        return [len(group) for group in self.groups()]

    # -------------------------------------------------------------------------
    # Проверки категорий
    # -------------------------------------------------------------------------

    def is_flush(self) -> bool:
        first = self.cards[0]
        return all(first.same_suit(card) for card in self.cards[1:])

    def _is_wheel(self) -> bool:
        values = [card.value for card in self.cards]
        return values == [
            CardValue.TWO,
            CardValue.THREE,
            CardValue.FOUR,
            CardValue.FIVE,
            CardValue.ACE,
        ]

    def is_straight(self) -> bool:
        """Пять последовательных значений; туз может быть младшим (A-2-3-4-5)."""
        cards = list(self.cards)

        # Младший туз: переносим его в начало
        if self._is_wheel():
            cards = [cards[-1], *cards[:-1]]

        return all(prev.next_value() == card.value for prev, card in zip(cards, cards[1:]))

    def is_straight_flush(self) -> bool:
        return self.is_flush() and self.is_straight()

    def is_four_of_kind(self) -> bool:
        return 4 in self._group_sizes()

    def is_three_of_kind(self) -> bool:
        return 3 in self._group_sizes()

    def is_pair(self) -> bool:
        return 2 in self._group_sizes()

    def is_two_pair(self) -> bool:
        return self._group_sizes().count(2) == 2

    def is_full_house(self) -> bool:
        return self.is_pair() and self.is_three_of_kind()

    def is_high_card(self) -> bool:
        return len(self._group_sizes()) == HAND_SIZE

    # -------------------------------------------------------------------------
    # Ранг
    # -------------------------------------------------------------------------

    def category(self) -> HandCategory:
        """Старшая категория, которой соответствует рука."""
        if self.is_straight_flush():
            return HandCategory.STRAIGHT_FLUSH
        if self.is_four_of_kind():
            return HandCategory.FOUR_OF_KIND
        if self.is_full_house():
            return HandCategory.FULL_HOUSE
        if self.is_flush():
            return HandCategory.FLUSH
        if self.is_straight():
            return HandCategory.STRAIGHT
        if self.is_three_of_kind():
            return HandCategory.THREE_OF_KIND
        if self.is_two_pair():
            return HandCategory.TWO_PAIR
        if self.is_pair():
            return HandCategory.PAIR
        return HandCategory.HIGH_CARD

    def tiebreak_values(self) -> list[int]:
        """
        Значения для сравнения рук одной категории, старшее первым.

        Группы упорядочены по (размер, значение) по убыванию: для фулл-хауса
        это [тройка, пара], для двух пар — [старшая пара, младшая пара, кикер].
        Стрит сравнивается только по старшей карте (у wheel это пятёрка).
        """
        if self.is_straight():
            return [int(CardValue.FIVE) if self._is_wheel() else int(self.cards[-1].value)]

        ordered = sorted(self.groups(), key=lambda g: (len(g), g[0].value), reverse=True)
        return [int(group[0].value) for group in ordered]

    def rank(self) -> int:
        """
        Единый числовой ранг руки: больше — сильнее.

        Examples:
            >>> Hand.parse("2H 2D 4C 4D 4S").rank() > Hand.parse("3C 3D 3S 9S 9D").rank()
            True
        """
        tiebreak = 0
        for value in self.tiebreak_values():
            tiebreak = tiebreak * TIEBREAK_BASE + value

        return int(self.category()) * CATEGORY_WEIGHT + tiebreak

    def beats(self, other: "Hand") -> bool:
        return self.rank() > other.rank()

    def show(self) -> str:
        """Строковое представление: [(Two, Spades), (Five, Hearts), ...]"""
        return "[" + ", ".join(str(card) for card in self.cards) + "]"


def show_groups(groups: list[tuple[Card, ...]]) -> str:
    """Группы карт построчно, по одной группе на строку."""
    return "".join("[" + ", ".join(str(card) for card in group) + "]\n" for group in groups)


def play_round(line: str) -> int:
    """
    Раунд из задачи 54: первые пять карт — игрок 1, последние пять — игрок 2.

    Returns:
        1 или 2 — номер победителя; 0 при равных рангах

    Raises:
        CardParseError: Если какой-либо код карты не распознан
        ValueError: Если в строке не 2 * HAND_SIZE карт
    """
    codes = line.split()
    if len(codes) != 2 * HAND_SIZE:
        raise ValueError(f"round must contain {2 * HAND_SIZE} cards, got {len(codes)}")

    player1 = Hand.parse(" ".join(codes[:HAND_SIZE]))
    player2 = Hand.parse(" ".join(codes[HAND_SIZE:]))
    rank1, rank2 = player1.rank(), player2.rank()

    logger.debug("round %r: player1=%d player2=%d", line, rank1, rank2)

    if rank1 > rank2:
        return 1
    if rank2 > rank1:
        return 2
    return 0
