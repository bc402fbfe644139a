"""Running a game of euchre between four players in two fixed teams."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .card import Card, Suit, card_less
from .pack import Pack
from .player import Player

_PLAYER_COUNT = 4
_TRICKS_PER_HAND = 5

# (offset from the dealer, number of cards) in dealing order: 3-2-3-2 then 2-3-2-3.
_DEAL_PATTERN = (
    (1, 3), (2, 2), (3, 3), (0, 2),
    (1, 2), (2, 3), (3, 2), (0, 3),
)


class Game:
    """A euchre game; players 0 and 2 form team 0, players 1 and 3 team 1."""

    def __init__(
        self,
        players: Iterable[Player],
        pack: Pack,
        shuffle: bool = False,
        out: TextIO | None = None,
    ) -> None:
        self._players = list(players)
        if len(self._players) != _PLAYER_COUNT:
            raise ValueError(
                f"euchre needs {_PLAYER_COUNT} players, got {len(self._players)}"
            )
        self._pack = pack
        self._shuffle = shuffle
        self._out = out
        self._points = [0, 0]
        self.hands = 0

    def _say(self, text: str = "") -> None:
        print(text, file=self._out if self._out is not None else sys.stdout)

    @staticmethod
    def _check_team(team: int) -> None:
        if team not in (0, 1):
            raise ValueError(f"team must be 0 or 1, got {team}")

    def points(self, team: int) -> int:
        """Return the points scored so far by team 0 or 1."""
        self._check_team(team)
        return self._points[team]

    def team_names(self, team: int) -> tuple[str, str]:
        """Return the names of the two players of team 0 or 1."""
        self._check_team(team)
        return self._players[team].name, self._players[team + 2].name

    def _team_label(self, team: int) -> str:
        first, second = self.team_names(team)
        return f"{first} and {second}"

    def _deal(self, dealer: int) -> Card:
        for offset, count in _DEAL_PATTERN:
            player = self._players[(dealer + offset) % _PLAYER_COUNT]
            for _ in range(count):
                player.add_card(self._pack.deal_one())
        return self._pack.deal_one()

    def _make_trump(self, dealer: int, upcard: Card) -> tuple[Suit, int]:
        for round_number in (1, 2):
            for offset in range(1, _PLAYER_COUNT + 1):
                index = (dealer + offset) % _PLAYER_COUNT
                player = self._players[index]
                suit = player.make_trump(upcard, index == dealer, round_number)
                if suit is None:
                    self._say(f"{player.name} passes")
                    continue
                self._say(f"{player.name} orders up {suit}")
                if round_number == 1:
                    self._players[dealer].add_and_discard(upcard)
                self._say()
                return suit, index
        raise RuntimeError("no player ordered up a trump suit")

    def _play_tricks(self, dealer: int, trump: Suit) -> list[int]:
        tricks = [0, 0]
        leader = (dealer + 1) % _PLAYER_COUNT
        for _ in range(_TRICKS_PER_HAND):
            led = self._players[leader].lead_card(trump)
            self._say(f"{led} led by {self._players[leader].name}")
            best, winner = led, leader
            for offset in range(1, _PLAYER_COUNT):
                index = (leader + offset) % _PLAYER_COUNT
                card = self._players[index].play_card(led, trump)
                self._say(f"{card} played by {self._players[index].name}")
                if card_less(best, card, trump, led):
                    best, winner = card, index
            self._say(f"{self._players[winner].name} takes the trick")
            self._say()
            tricks[winner % 2] += 1
            leader = winner
        return tricks

    def _score(self, tricks: list[int], orderer: int) -> None:
        winning = 0 if tricks[0] >= 3 else 1
        self._say(f"{self._team_label(winning)} win the hand")
        if orderer % 2 == winning:
            if tricks[winning] == _TRICKS_PER_HAND:
                self._say("march!")
                self._points[winning] += 2
            else:
                self._points[winning] += 1
        else:
            self._say("euchred!")
            self._points[winning] += 2
        for team in (0, 1):
            self._say(f"{self._team_label(team)} have {self._points[team]} points")
        self._say()

    def play_hand(self) -> None:
        """Deal, make trump, play five tricks and score one hand."""
        self._say(f"Hand {self.hands}")
        if self._shuffle:
            self._pack.shuffle()
        else:
            self._pack.reset()
        dealer = self.hands % _PLAYER_COUNT
        self._say(f"{self._players[dealer].name} deals")
        upcard = self._deal(dealer)
        self._say(f"{upcard} turned up")
        trump, orderer = self._make_trump(dealer, upcard)
        tricks = self._play_tricks(dealer, trump)
        self._score(tricks, orderer)
        self.hands += 1

    def play(self, points_to_win: int) -> int:
        """Play hands until a team reaches points_to_win; return that team."""
        if points_to_win < 1:
            raise ValueError(f"points to win must be positive, got {points_to_win}")
        while max(self._points) < points_to_win:
            self.play_hand()
        winner = 0 if self._points[0] >= points_to_win else 1
        self._say(f"{self._team_label(winner)} win!")
        return winner