"""Command-line entry point for playing a game of euchre."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .game import Game
from .pack import read_pack
from .player import player_factory

PROGRAM_NAME = "euchre.exe"
USAGE = (
    f"Usage: {PROGRAM_NAME} PACK_FILENAME [shuffle|noshuffle] "
    "POINTS_TO_WIN NAME1 TYPE1 NAME2 TYPE2 NAME3 TYPE3 "
    "NAME4 TYPE4"
)

_ARG_COUNT = 11
_SHUFFLE_CHOICES = ("shuffle", "noshuffle")
_PLAYER_TYPES = ("Simple", "Human")
_MIN_POINTS = 1
_MAX_POINTS = 100
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised when the command-line arguments are not valid."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Arguments:
    """Validated command-line arguments."""

    pack_file: str
    shuffle: bool
    points_to_win: int
    players: tuple[tuple[str, str], ...]


def _leading_int(text: str) -> int:
    """Read an integer from the start of text, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> Arguments:
    """Validate the arguments that follow the program name."""
    args = list(argv)
    if len(args) != _ARG_COUNT:
        raise UsageError()
    pack_file, shuffle, points_text, *player_args = args
    if shuffle not in _SHUFFLE_CHOICES:
        raise UsageError()
    points = _leading_int(points_text)
    if not _MIN_POINTS <= points <= _MAX_POINTS:
        raise UsageError()
    names = player_args[0::2]
    kinds = player_args[1::2]
    if any(kind not in _PLAYER_TYPES for kind in kinds):
        raise UsageError()
    return Arguments(
        pack_file=pack_file,
        shuffle=shuffle == "shuffle",
        points_to_win=points,
        players=tuple(zip(names, kinds)),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except UsageError as error:
        print(error)
        return 1

    try:
        stream = open(options.pack_file, encoding="utf-8")
    except OSError:
        print(f"Error opening {options.pack_file}")
        return 1

    with stream:
        print("".join(f"{word} " for word in [PROGRAM_NAME, *args]))
        pack = read_pack(stream)

    players = [player_factory(name, kind) for name, kind in options.players]
    game = Game(players, pack, shuffle=options.shuffle)
    game.play(options.points_to_win)
    return 0


if __name__ == "__main__":
    sys.exit(main())