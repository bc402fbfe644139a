"""A 24-card euchre pack that deals from the top and can be in-shuffled."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .card import Card, Rank, Suit

PACK_SIZE = 24
_LOWEST_RANK = Rank.NINE
_SHUFFLE_TIMES = 7


def _standard_order() -> list[Card]:
    return [
        Card(rank, suit)
        for suit in Suit
        for rank in Rank
        if rank >= _LOWEST_RANK
    ]


class Pack:
    """An ordered pack of cards with a pointer to the next card to deal."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        """Create a pack from cards, or in standard order when none are given."""
        self._cards = _standard_order() if cards is None else list(cards)
        if len(self._cards) != PACK_SIZE:
            raise ValueError(
                f"a pack holds {PACK_SIZE} cards, got {len(self._cards)}"
            )
        self._next = 0

    @property
    def cards(self) -> tuple[Card, ...]:
        """All cards in the pack, in their current order."""
        return tuple(self._cards)

    def deal_one(self) -> Card:
        """Return the next card and advance past it."""
        if self.empty():
            raise IndexError("no cards left in the pack")
        card = self._cards[self._next]
        self._next += 1
        return card

    def reset(self) -> None:
        """Start dealing again from the first card."""
        self._next = 0

    def shuffle(self) -> None:
        """In-shuffle the pack seven times and reset the deal position."""
        self._next = 0
        half = PACK_SIZE // 2
        for _ in range(_SHUFFLE_TIMES):
            first, second = self._cards[:half], self._cards[half:]
            self._cards = [card for pair in zip(second, first) for card in pair]

    def empty(self) -> bool:
        """Return True when every card has been dealt."""
        return self._next >= len(self._cards)


def read_pack(stream: TextIO) -> Pack:
    """Read a pack of 24 cards written as "Nine of Spades" from a text stream."""
    words = stream.read().split()
    needed = PACK_SIZE * 3
    if len(words) < needed:
        raise ValueError(
            f"pack input holds {len(words) // 3} cards, need {PACK_SIZE}"
        )
    triples = zip(*[iter(words[:needed])] * 3)
    return Pack(Card.parse(" ".join(triple)) for triple in triples)