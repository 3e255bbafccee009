import pytest

from decklogic import HandCategory, compare_hands, evaluate_hand
from decklogic.errors import InvalidArgument, InvalidCardToken, InvalidHandSize


def test_evaluate_hand_identifies_all_categories():
    cases = [
        (HandCategory.STRAIGHT_FLUSH, ["9h", "8h", "7h", "6h", "5h"]),
        (HandCategory.FOUR_OF_A_KIND, ["As", "Ah", "Ad", "Ac", "Kd"]),
        (HandCategory.FULL_HOUSE, ["Qc", "Qd", "Qs", "9h", "9s"]),
        (HandCategory.FLUSH, ["Ah", "Jh", "9h", "6h", "2h"]),
        (HandCategory.STRAIGHT, ["9h", "8d", "7c", "6s", "5h"]),
        (HandCategory.THREE_OF_A_KIND, ["8h", "8d", "8s", "Qd", "Js"]),
        (HandCategory.TWO_PAIR, ["7h", "7d", "4s", "4c", "As"]),
        (HandCategory.ONE_PAIR, ["6h", "6s", "Qh", "8d", "4c"]),
        (HandCategory.HIGH_CARD, ["As", "Kd", "Jh", "9c", "4d"]),
    ]
    for expected, labels in cases:
        assert evaluate_hand(labels).category == expected, f"labels={labels}"


def test_high_card():
    hand = evaluate_hand(["2h", "7d", "9c", "Js", "Ks"])
    assert hand.name == "High Card"
    assert hand.rank == 1
    assert hand.label == "High Card, King"


def test_royal_flush_is_the_top_straight_flush():
    hand = evaluate_hand(["Ah", "Kh", "Qh", "Jh", "Th"])
    assert hand.category == HandCategory.STRAIGHT_FLUSH
    assert hand.rank == 9
    assert hand.name == "Straight Flush"
    assert hand.label == "Royal Flush"
    assert hand > evaluate_hand(["Kh", "Qh", "Jh", "Th", "9h"])


def test_full_house_label():
    hand = evaluate_hand(["2h", "2d", "2c", "5s", "5d"])
    assert hand.name == "Full House"
    assert hand.label == "Full House, Twos over Fives"
    assert evaluate_hand("Kh,Kd,Ks,4c,4d").label == "Full House, Kings over Fours"


def test_pair_of_aces_beats_pair_of_kings():
    aces = evaluate_hand(["Ah", "Ad", "7c", "5s", "3d"])
    kings = evaluate_hand(["Kh", "Kd", "7s", "5c", "3h"])
    assert compare_hands(aces, kings) > 0
    assert compare_hands(kings, aces) < 0
    assert kings < aces


def test_kickers_break_ties_within_a_category():
    a = evaluate_hand(["Ah", "Ad", "Kc", "Qs", "9h", "2d", "3c"])
    b = evaluate_hand(["Ac", "As", "Qc", "Js", "8h", "2h", "3s"])
    assert compare_hands(a, b) > 0


def test_identical_ranks_split():
    a = evaluate_hand(["Ah", "Kd", "Qc", "Js", "9h"])
    b = evaluate_hand(["As", "Kc", "Qd", "Jh", "9c"])
    assert compare_hands(a, b) == 0
    assert a == b


def test_wheel_is_a_five_high_straight():
    hand = evaluate_hand(["Ah", "2d", "3c", "4s", "5h", "9d", "Kd"])
    assert hand.category == HandCategory.STRAIGHT
    assert hand.label == "Straight, Five High"
    assert [c.token for c in hand.best_hand][0] == "5h"
    six_high = evaluate_hand(["2d", "3c", "4s", "5h", "6d"])
    assert six_high > hand


def test_seven_cards_pick_the_best_five():
    hand = evaluate_hand(["Ah", "Kh", "Qh", "Jh", "Th", "2c", "2d"])
    assert hand.label == "Royal Flush"
    assert len(hand.best_hand) == 5
    assert {c.token for c in hand.best_hand} == {"Ah", "Kh", "Qh", "Jh", "Th"}


def test_six_cards_find_the_full_house():
    hand = evaluate_hand(["9c", "9d", "9s", "4h", "4d", "Ac"])
    assert hand.category == HandCategory.FULL_HOUSE
    assert hand.label == "Full House, Nines over Fours"


def test_three_card_hands():
    assert evaluate_hand(["Ah", "Ad", "Ac"]).category == HandCategory.THREE_OF_A_KIND
    pair = evaluate_hand(["Ah", "Ad", "7c"])
    assert pair.category == HandCategory.ONE_PAIR
    assert pair.label == "One Pair, Aces"
    # no straights or flushes with three cards
    assert evaluate_hand(["Qh", "Kh", "Ah"]).category == HandCategory.HIGH_CARD


def test_value_encodes_category_before_kickers():
    worst_pair = evaluate_hand(["2h", "2d", "3c", "4s", "5d"])
    best_high_card = evaluate_hand(["Ah", "Kd", "Qc", "Js", "9d"])
    assert worst_pair.value > best_high_card.value
    assert worst_pair.value >> 20 == HandCategory.ONE_PAIR


def test_two_pair_label_orders_pairs_high_first():
    assert evaluate_hand(["Kh", "Kd", "Ac", "As", "2d"]).label == "Two Pair, Aces and Kings"


def test_hand_string_is_whitespace_tolerant():
    hand = evaluate_hand(" Ah, As ,2c,5d , 9h")
    assert hand.label == "One Pair, Aces"


@pytest.mark.parametrize("hand", [["Ah"], ["Ah", "Kh"], ["Ah", "Kh", "Qh", "Jh"], "2c,3c,4c,5c,6c,7c,8c,9c"])
def test_invalid_hand_sizes(hand):
    with pytest.raises(InvalidHandSize):
        evaluate_hand(hand)


def test_invalid_card_token():
    with pytest.raises(InvalidCardToken):
        evaluate_hand(["Ah", "Kh", "Qh", "Jh", "1h"])
    with pytest.raises(InvalidCardToken):
        evaluate_hand("Ah,,Kh,Qh,Jh")


def test_duplicate_cards_rejected():
    with pytest.raises(InvalidArgument):
        evaluate_hand(["Ah", "Ah", "Qh", "Jh", "Th"])
