"""Euchre players: a simple computer strategy and an interactive human."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from functools import cmp_to_key
from typing import Callable, TextIO

from .card import Card, Suit, card_less, string_to_suit, suit_next

MAX_HAND_SIZE = 5


def _order_by(less: Callable[[Card, Card], bool]):
    def compare(a: Card, b: Card) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


class Player(ABC):
    """A euchre player holding a hand of up to five cards."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._hand: list[Card] = []

    def __str__(self) -> str:
        return self.name

    @property
    def hand(self) -> tuple[Card, ...]:
        """The cards currently held."""
        return tuple(self._hand)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        if len(self._hand) >= MAX_HAND_SIZE:
            raise ValueError(f"{self.name} already holds {MAX_HAND_SIZE} cards")
        self._hand.append(card)

    def _require_cards(self) -> None:
        if not self._hand:
            raise IndexError(f"{self.name} has no cards")

    @staticmethod
    def _check_round(round_number: int) -> None:
        if round_number not in (1, 2):
            raise ValueError(f"round must be 1 or 2, got {round_number}")

    @abstractmethod
    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        """Return the suit ordered up, or None to pass."""

    @abstractmethod
    def add_and_discard(self, upcard: Card) -> None:
        """Pick up the upcard and discard one card."""

    @abstractmethod
    def lead_card(self, trump: Suit) -> Card:
        """Remove and return the card led to a trick."""

    @abstractmethod
    def play_card(self, led_card: Card, trump: Suit) -> Card:
        """Remove and return the card played after led_card."""


class SimplePlayer(Player):
    """A computer player following a fixed, simple strategy."""

    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        self._check_round(round_number)
        upcard_suit = upcard.suit
        if round_number == 1:
            strong = sum(
                1 for card in self._hand
                if card.is_trump(upcard_suit) and card.is_face_or_ace()
            )
            return upcard_suit if strong >= 2 else None
        next_suit = suit_next(upcard_suit)
        if is_dealer:
            return next_suit
        strong = sum(
            1 for card in self._hand
            if card.suit == next_suit and card.is_face_or_ace()
        )
        return next_suit if strong >= 1 else None

    def add_and_discard(self, upcard: Card) -> None:
        self._require_cards()
        self._hand.append(upcard)
        trump = upcard.suit
        lowest = min(self._hand, key=_order_by(lambda a, b: card_less(a, b, trump)))
        self._hand.remove(lowest)

    def lead_card(self, trump: Suit) -> Card:
        self._require_cards()
        plain = [card for card in self._hand if not card.is_trump(trump)]
        if plain:
            chosen = max(plain)
        else:
            chosen = max(self._hand, key=_order_by(lambda a, b: card_less(a, b, trump)))
        self._hand.remove(chosen)
        return chosen

    def play_card(self, led_card: Card, trump: Suit) -> Card:
        self._require_cards()
        led_suit = led_card.effective_suit(trump)
        following = [card for card in self._hand if card.effective_suit(trump) == led_suit]
        if following:
            chosen = max(
                following,
                key=_order_by(lambda a, b: card_less(a, b, trump, led_card)),
            )
        else:
            chosen = min(self._hand, key=_order_by(lambda a, b: card_less(a, b, trump)))
        self._hand.remove(chosen)
        return chosen


class HumanPlayer(Player):
    """A player whose decisions are read from a text stream."""

    def __init__(
        self,
        name: str,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        super().__init__(name)
        self._input = input_stream
        self._output = output_stream
        self._pending: deque[str] = deque()

    @property
    def _in(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _next_token(self) -> str:
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError(f"no input for {self.name}")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _read_index(self) -> int:
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not a card index: {token!r}") from None

    def _pick_index(self) -> int:
        index = self._read_index()
        if not 0 <= index < len(self._hand):
            raise ValueError(f"no card at index {index}")
        return index

    def _print_hand(self) -> None:
        for index, card in enumerate(self._hand):
            self._say(f"Human player {self.name}'s hand: [{index}] {card}")

    def add_card(self, card: Card) -> None:
        super().add_card(card)
        self._hand.sort()

    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        self._check_round(round_number)
        self._print_hand()
        self._say(f'Human player {self.name}, please enter a suit, or "pass":')
        decision = self._next_token()
        if decision == "pass":
            return None
        return string_to_suit(decision)

    def add_and_discard(self, upcard: Card) -> None:
        self._require_cards()
        self._print_hand()
        self._say("Discard upcard: [-1]")
        self._say(f"Human player {self.name}, please select a card to discard:")
        index = self._read_index()
        if index == -1:
            self._say()
            return
        if not 0 <= index < len(self._hand):
            raise ValueError(f"no card at index {index}")
        del self._hand[index]
        self._hand.append(upcard)
        self._hand.sort()

    def _choose(self) -> Card:
        self._require_cards()
        self._print_hand()
        self._say(f"Human player {self.name}, please select a card:")
        return self._hand.pop(self._pick_index())

    def lead_card(self, trump: Suit) -> Card:
        return self._choose()

    def play_card(self, led_card: Card, trump: Suit) -> Card:
        return self._choose()


_STRATEGIES: dict[str, type[Player]] = {
    "Simple": SimplePlayer,
    "Human": HumanPlayer,
}


def player_factory(name: str, strategy: str) -> Player:
    """Create a player of the named strategy, "Simple" or "Human"."""
    try:
        kind = _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy: {strategy!r}") from None
    return kind(name)