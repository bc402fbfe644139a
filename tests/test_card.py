import pytest

from euchregame.card import (
    Card,
    Rank,
    Suit,
    card_less,
    string_to_rank,
    string_to_suit,
    suit_next,
)


def test_card_ctor():
    c = Card(Rank.ACE, Suit.HEARTS)
    assert c.rank == Rank.ACE
    assert c.suit == Suit.HEARTS


def test_default_card_is_two_of_spades():
    assert Card() == Card(Rank.TWO, Suit.SPADES)


def test_str():
    assert str(Card(Rank.JACK, Suit.DIAMONDS)) == "Jack of Diamonds"
    assert str(Card(Rank.NINE, Suit.HEARTS)) == "Nine of Hearts"
    assert str(Card(Rank.ACE, Suit.CLUBS)) == "Ace of Clubs"


def test_parse():
    assert Card.parse("Jack of Spades") == Card(Rank.JACK, Suit.SPADES)


def test_parse_round_trip_all_cards():
    for rank in Rank:
        for suit in Suit:
            card = Card(rank, suit)
            assert Card.parse(str(card)) == card


@pytest.mark.parametrize("text", ["Jack Spades", "Eleven of Spades", "Jack of Stars", ""])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        Card.parse(text)


def test_string_to_rank_and_suit():
    assert string_to_rank("Two") == Rank.TWO
    assert string_to_rank("Ace") == Rank.ACE
    assert string_to_suit("Diamonds") == Suit.DIAMONDS
    with pytest.raises(ValueError):
        string_to_rank("two")
    with pytest.raises(ValueError):
        string_to_suit("spades")


def test_operator_comparison():
    jack_diamonds = Card(Rank.JACK, Suit.DIAMONDS)
    jack_hearts = Card(Rank.JACK, Suit.HEARTS)
    nine_hearts = Card(Rank.NINE, Suit.HEARTS)
    assert jack_hearts < jack_diamonds
    assert jack_hearts <= jack_diamonds
    assert jack_diamonds > jack_hearts
    assert jack_diamonds >= jack_hearts
    assert nine_hearts < jack_diamonds
    assert jack_diamonds == Card(Rank.JACK, Suit.DIAMONDS)
    assert jack_hearts != jack_diamonds


def test_get_suit_trump():
    trump = Suit.HEARTS
    assert Card(Rank.JACK, Suit.DIAMONDS).effective_suit(trump) == trump
    assert Card(Rank.JACK, Suit.HEARTS).effective_suit(trump) == trump
    assert Card(Rank.NINE, Suit.HEARTS).effective_suit(trump) == trump
    assert Card(Rank.ACE, Suit.DIAMONDS).effective_suit(trump) == Suit.DIAMONDS


def test_is_face_or_ace():
    assert not Card(Rank.NINE, Suit.HEARTS).is_face_or_ace()
    assert Card(Rank.JACK, Suit.HEARTS).is_face_or_ace()
    assert Card(Rank.QUEEN, Suit.HEARTS).is_face_or_ace()
    assert Card(Rank.KING, Suit.HEARTS).is_face_or_ace()
    assert Card(Rank.ACE, Suit.HEARTS).is_face_or_ace()
    assert not Card(Rank.TEN, Suit.CLUBS).is_face_or_ace()


def test_is_left_or_right_bower():
    trump = Suit.HEARTS
    assert Card(Rank.JACK, Suit.DIAMONDS).is_left_bower(trump)
    assert Card(Rank.JACK, Suit.HEARTS).is_right_bower(trump)
    assert not Card(Rank.JACK, Suit.HEARTS).is_left_bower(trump)
    assert not Card(Rank.JACK, Suit.CLUBS).is_left_bower(trump)


def test_is_trump():
    trump = Suit.HEARTS
    assert Card(Rank.JACK, Suit.DIAMONDS).is_trump(trump)
    assert Card(Rank.JACK, Suit.HEARTS).is_trump(trump)
    assert not Card(Rank.ACE, Suit.DIAMONDS).is_trump(trump)


def test_suit_next():
    assert suit_next(Suit.CLUBS) == Suit.SPADES
    assert suit_next(Suit.SPADES) == Suit.CLUBS
    assert suit_next(Suit.HEARTS) == Suit.DIAMONDS
    assert suit_next(Suit.DIAMONDS) == Suit.HEARTS


def test_right_bower_value():
    trump = Suit.HEARTS
    led = Card(Rank.KING, Suit.CLUBS)
    left = Card(Rank.JACK, Suit.DIAMONDS)
    right = Card(Rank.JACK, Suit.HEARTS)
    assert card_less(left, right, trump)
    assert card_less(Card(Rank.ACE, Suit.HEARTS), right, trump)
    assert not card_less(right, Card(Rank.TEN, Suit.HEARTS), trump)
    assert card_less(Card(Rank.ACE, Suit.CLUBS), right, trump, led)
    assert card_less(Card(Rank.TEN, Suit.DIAMONDS), right, trump, led)


def test_left_bower_value():
    trump = Suit.HEARTS
    led = Card(Rank.KING, Suit.CLUBS)
    left = Card(Rank.JACK, Suit.DIAMONDS)
    right = Card(Rank.JACK, Suit.HEARTS)
    assert not card_less(right, left, trump)
    assert card_less(Card(Rank.ACE, Suit.HEARTS), left, trump)
    assert not card_less(left, Card(Rank.TEN, Suit.HEARTS), trump)
    assert card_less(Card(Rank.ACE, Suit.CLUBS), left, trump, led)
    assert card_less(Card(Rank.TEN, Suit.DIAMONDS), left, trump, led)


def test_trump_value():
    trump = Suit.HEARTS
    led = Card(Rank.KING, Suit.CLUBS)
    left = Card(Rank.JACK, Suit.DIAMONDS)
    right = Card(Rank.JACK, Suit.HEARTS)
    ace_hearts = Card(Rank.ACE, Suit.HEARTS)
    nine_hearts = Card(Rank.NINE, Suit.HEARTS)
    ace_clubs = Card(Rank.ACE, Suit.CLUBS)
    ace_diamonds = Card(Rank.ACE, Suit.DIAMONDS)
    assert card_less(ace_hearts, right, trump)
    assert card_less(ace_hearts, left, trump)
    assert card_less(ace_clubs, ace_hearts, trump, led)
    assert not card_less(nine_hearts, ace_clubs, trump, led)
    assert card_less(ace_diamonds, ace_hearts, trump)
    assert card_less(ace_diamonds, nine_hearts, trump)


def test_led_suit_card_value():
    trump = Suit.HEARTS
    left = Card(Rank.JACK, Suit.DIAMONDS)
    right = Card(Rank.JACK, Suit.HEARTS)

    led1 = Card(Rank.KING, Suit.HEARTS)
    ace_hearts = Card(Rank.ACE, Suit.HEARTS)
    assert card_less(ace_hearts, right, trump, led1)
    assert card_less(ace_hearts, left, trump, led1)
    assert not card_less(ace_hearts, led1, trump, led1)
    ace_diamonds = Card(Rank.ACE, Suit.DIAMONDS)
    nine_hearts = Card(Rank.NINE, Suit.HEARTS)
    assert card_less(ace_diamonds, nine_hearts, trump, led1)

    led2 = Card(Rank.KING, Suit.CLUBS)
    ace_clubs = Card(Rank.ACE, Suit.CLUBS)
    queen_clubs = Card(Rank.QUEEN, Suit.CLUBS)
    assert not card_less(ace_clubs, led2, trump, led2)
    assert card_less(queen_clubs, led2, trump, led2)
    assert card_less(ace_diamonds, nine_hearts, trump, led2)


def test_led_suit_beats_off_suit():
    trump = Suit.HEARTS
    led = Card(Rank.KING, Suit.CLUBS)
    nine_clubs = Card(Rank.NINE, Suit.CLUBS)
    ace_spades = Card(Rank.ACE, Suit.SPADES)
    assert card_less(ace_spades, nine_clubs, trump, led)
    assert not card_less(nine_clubs, ace_spades, trump, led)


def test_normal_card_value():
    trump = Suit.SPADES
    ace_clubs = Card(Rank.ACE, Suit.CLUBS)
    ace_diamonds = Card(Rank.ACE, Suit.DIAMONDS)
    ten_clubs = Card(Rank.TEN, Suit.CLUBS)
    ten_hearts = Card(Rank.TEN, Suit.HEARTS)
    assert card_less(ten_hearts, ace_clubs, trump)
    assert card_less(ten_clubs, ace_clubs, trump)
    assert card_less(ace_clubs, ace_diamonds, trump)
    assert card_less(ten_hearts, ten_clubs, trump)