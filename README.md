# euchregame

A four-player game of Euchre played in the terminal. Each seat is taken
by either a simple computer player or a human who answers prompts on
standard input. Players 1 and 3 form one team, and players 2 and 4 form
the other. Hands are played until one team reaches the target score.

## Installation

```
pip install .
```

## Running a game

```
euchre PACK_FILENAME [shuffle|noshuffle] POINTS_TO_WIN NAME1 TYPE1 NAME2 TYPE2 NAME3 TYPE3 NAME4 TYPE4
```

- `PACK_FILENAME` is a text file holding the 24 cards of the pack in the
  form `Nine of Spades`, separated by whitespace (one per line works
  well). Cards after the first 24 are ignored.
- `shuffle` in-shuffles the pack seven times before every hand, starting
  from the order the previous hand left it in. `noshuffle` deals every
  hand from the pack in file order.
- `POINTS_TO_WIN` is a whole number from 1 to 100.
- Each `TYPE` is `Simple` for a computer player or `Human` for a player
  who answers prompts.

Example:

```
euchre pack.in noshuffle 10 Alice Simple Bob Simple Cathy Simple Drew Simple
```

The first line of output repeats the arguments. After that the game
prints every hand: the dealer, the upcard, each player's bid, every card
played, who takes each trick, the team that wins the hand (with
`march!` or `euchred!` where they apply) and the score. It ends with the
names of the winning team.

If the arguments are wrong, the command prints a usage line and exits
with status 1. If the pack file cannot be opened it prints
`Error opening PACK_FILENAME` and exits with status 1.

### Human players

A human player is shown their hand, sorted, with an index before each
card. When bidding they type a suit name (`Spades`, `Hearts`, `Clubs`,
`Diamonds`) or `pass`. When dealer and asked to pick up the upcard they
type the index of the card to discard, or `-1` to leave the upcard and
keep their hand. When leading or playing they type the index of a card.

### Simple players

A simple player orders up in the first round with two or more face cards
or aces of the upcard's suit (the left bower counts), and in the second
round with at least one face card or ace of the suit of the same colour;
as dealer in the second round they always order up that suit. They lead
their highest non-trump card, or their highest trump when they hold only
trump, follow suit with their highest card, and otherwise throw their
lowest card.

## Using the library

```python
from euchregame.card import Card, Rank, Suit, card_less
from euchregame.player import player_factory

alice = player_factory("Alice", "Simple")
for card in (Card(Rank.NINE, Suit.DIAMONDS), Card(Rank.KING, Suit.DIAMONDS),
             Card(Rank.JACK, Suit.HEARTS), Card(Rank.TEN, Suit.SPADES),
             Card(Rank.ACE, Suit.HEARTS)):
    alice.add_card(card)

print(alice.make_trump(Card(Rank.TEN, Suit.DIAMONDS), False, 1))  # Diamonds
print(card_less(Card(Rank.ACE, Suit.HEARTS), Card(Rank.JACK, Suit.HEARTS), Suit.HEARTS))  # True
```

- `euchregame.card`: `Rank`, `Suit`, `Card`, `string_to_rank`,
  `string_to_suit`, `suit_next` and `card_less(a, b, trump, led_card=None)`.
  `Card.parse("Jack of Spades")` reads a card and `str(card)` writes it
  back in the same form.
- `euchregame.pack`: `Pack` (standard order when no cards are given,
  with `deal_one`, `reset`, `shuffle` and `empty`) and `read_pack(stream)`.
- `euchregame.player`: `SimplePlayer`, `HumanPlayer` and
  `player_factory(name, strategy)`. `make_trump` returns the suit ordered
  up, or `None` to pass.
- `euchregame.game`: `Game(players, pack, shuffle=False, out=None)` runs
  a game. `play(points_to_win)` plays hands until a team wins and
  returns that team (0 or 1); `play_hand()`, `points(team)` and
  `team_names(team)` are also available.

## Limitations

- Cards played by human players are not checked for following suit.
- If every player passes in both rounds of bidding (possible only when a
  human is dealer), the game stops with a `RuntimeError`; there is no
  redeal.
- Games are not saved; there is no network play.

## Running the tests

```
pip install .[test]
pytest
```