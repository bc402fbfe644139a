"""Playing cards for euchre: ranks, suits, cards and trump-aware ordering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Rank(IntEnum):
    """Card rank, ordered from Two up to Ace."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    def __str__(self) -> str:
        return self.name.capitalize()


class Suit(IntEnum):
    """Card suit. Suits two apart share a colour."""

    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3

    def __str__(self) -> str:
        return self.name.capitalize()


def string_to_rank(text: str) -> Rank:
    """Return the rank named by text, such as "Two" or "Ace"."""
    for rank in Rank:
        if str(rank) == text:
            return rank
    raise ValueError(f"invalid rank: {text!r}")


def string_to_suit(text: str) -> Suit:
    """Return the suit named by text, such as "Spades"."""
    for suit in Suit:
        if str(suit) == text:
            return suit
    raise ValueError(f"invalid suit: {text!r}")


def suit_next(suit: Suit) -> Suit:
    """Return the other suit of the same colour."""
    return Suit((suit + 2) % 4)


@dataclass(frozen=True, order=True)
class Card:
    """A single playing card; plain ordering is by rank, then suit."""

    rank: Rank = Rank.TWO
    suit: Suit = Suit.SPADES

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    @classmethod
    def parse(cls, text: str) -> Card:
        """Read a card written as "Two of Spades"."""
        parts = text.split()
        if len(parts) != 3:
            raise ValueError(f"invalid card: {text!r}")
        rank_text, _, suit_text = parts
        return cls(string_to_rank(rank_text), string_to_suit(suit_text))

    def effective_suit(self, trump: Suit) -> Suit:
        """Suit of the card when trump is known; the left bower counts as trump."""
        if self.suit == trump or self.is_left_bower(trump):
            return trump
        return self.suit

    def is_face_or_ace(self) -> bool:
        return self.rank >= Rank.JACK

    def is_right_bower(self, trump: Suit) -> bool:
        return self.suit == trump and self.rank == Rank.JACK

    def is_left_bower(self, trump: Suit) -> bool:
        return abs(self.suit - trump) == 2 and self.rank == Rank.JACK

    def is_trump(self, trump: Suit) -> bool:
        return self.effective_suit(trump) == trump


def _less_by_trump(a: Card, b: Card, trump: Suit) -> bool:
    a_trump = a.is_trump(trump)
    b_trump = b.is_trump(trump)
    if a_trump and b_trump:
        if a.rank == Rank.JACK and b.rank == Rank.JACK:
            return not a.is_right_bower(trump)
        if a.rank == Rank.JACK:
            return False
        if b.rank == Rank.JACK:
            return True
        return a < b
    if a_trump:
        return False
    if b_trump:
        return True
    return a < b


def card_less(a: Card, b: Card, trump: Suit, led_card: Card | None = None) -> bool:
    """Return True if a ranks below b given trump and, optionally, the led card."""
    if led_card is None:
        return _less_by_trump(a, b, trump)
    led = led_card.effective_suit(trump)
    if led == trump:
        return _less_by_trump(a, b, trump)
    a_suit = a.effective_suit(trump)
    b_suit = b.effective_suit(trump)
    if a_suit == trump:
        return b_suit == trump and _less_by_trump(a, b, trump)
    if a_suit == led:
        if b_suit == trump:
            return True
        if b_suit == led:
            return a < b
        return False
    if b_suit in (trump, led):
        return True
    return a < b