"""Tests for multi-player hi-lo showdowns."""
import pytest

from hilo_poker.evaluation.errors import InsufficientCardsError, InvalidHandError
from hilo_poker.evaluation.showdown import evaluate_showdown
from hilo_poker.evaluation.types import CardCountRule, HandCategory


def test_high_and_low_go_to_different_players(cards):
    result = evaluate_showdown(
        {
            "p1": cards("KhKc"),
            "p2": cards("As2s"),
            "p3": cards("6h7h"),
        },
        cards("3h4d5cKdKs"),
        CardCountRule.TWO_FLEXIBLE,
    )

    assert result.high_winners == ["p1"]
    assert result.low_winners == ["p2"]
    assert result.has_low
    assert result.scoopers == []

    p1 = result.players["p1"]
    assert p1.evaluation.category == HandCategory.FOUR_OF_A_KIND
    assert p1.high_description == "Four of a Kind-K"
    assert p1.low_description == "No low"

    p2 = result.players["p2"]
    assert p2.high_description == "Straight-5"
    assert p2.low_description == "54321"

    p3 = result.players["p3"]
    assert p3.high_description == "Straight-7"
    assert p3.low_description == "76543"


def test_used_cards_are_split_by_source(cards):
    result = evaluate_showdown(
        {"p1": cards("KhKc")}, cards("3h4d5cKdKs"), CardCountRule.TWO_FLEXIBLE
    )
    p1 = result.players["p1"]
    assert set(p1.used_hole_cards) == set(cards("KhKc"))
    assert set(p1.used_community_cards) == set(cards("KdKs5c"))


def test_one_player_scoops(cards):
    result = evaluate_showdown(
        {"p1": cards("As2s"), "p2": cards("QhJh")},
        cards("3h4d5cKd9s"),
        CardCountRule.TWO_FLEXIBLE,
    )
    assert result.high_winners == ["p1"]
    assert result.low_winners == ["p1"]
    assert result.scoopers == ["p1"]


def test_high_tie_without_low(cards):
    result = evaluate_showdown(
        {"p1": cards("Tc3d"), "p2": cards("Td4c")},
        cards("AhKdQcJs2h"),
        CardCountRule.TWO_FLEXIBLE,
    )
    assert result.high_winners == ["p1", "p2"]
    assert result.low_winners == []
    assert not result.has_low
    # With no low the high winners take the whole pot
    assert result.scoopers == ["p1", "p2"]


def test_both_halves_tied(cards):
    result = evaluate_showdown(
        {"p1": cards("As2s"), "p2": cards("Ad2c"), "p3": cards("KhQh")},
        cards("3h4d5cKd9s"),
        CardCountRule.TWO_FLEXIBLE,
    )
    assert result.high_winners == ["p1", "p2"]
    assert result.low_winners == ["p1", "p2"]
    assert result.scoopers == ["p1", "p2"]


def test_omaha_showdown(cards):
    result = evaluate_showdown(
        {
            "alice": cards("AsAhKcQd"),
            "bob": cards("2c3c9h9s"),
        },
        cards("AdAc4h5d8s"),
        CardCountRule.FIXED_TWO_PLUS_THREE,
    )
    assert result.players["alice"].high_description == "Four of a Kind-A"
    assert result.players["alice"].low_description == "No low"
    assert result.players["bob"].low_description == "54321"
    assert result.high_winners == ["alice"]
    assert result.low_winners == ["bob"]


def test_to_json(cards):
    result = evaluate_showdown(
        {"p1": cards("As2s"), "p2": cards("QhJh")},
        cards("3h4d5cKd9s"),
        CardCountRule.TWO_FLEXIBLE,
    )
    data = result.to_json()
    assert data["high_winners"] == ["p1"]
    assert data["low_winners"] == ["p1"]
    assert data["scoopers"] == ["p1"]

    p1, p2 = data["players"]
    assert p1["player_id"] == "p1"
    assert p1["category"] == "Straight"
    assert sorted(p1["high_hand"]) == sorted(["As", "2s", "3h", "4d", "5c"])
    assert p1["low_description"] == "54321"
    assert p2["low_hand"] is None
    assert p2["low_description"] == "No low"


def test_player_result_str(cards):
    result = evaluate_showdown(
        {"p1": cards("As2s")}, cards("3h4d5cKd9s"), CardCountRule.TWO_FLEXIBLE
    )
    assert str(result.players["p1"]).startswith("Player p1: Straight-5 / 54321 (")


def test_no_players():
    with pytest.raises(ValueError):
        evaluate_showdown({}, [], CardCountRule.TWO_FLEXIBLE)


def test_before_the_flop(cards):
    with pytest.raises(InsufficientCardsError):
        evaluate_showdown({"p1": cards("AsKs")}, [], CardCountRule.TWO_FLEXIBLE)


def test_high_only_game(cards):
    result = evaluate_showdown(
        {"p1": cards("KhKc"), "p2": cards("As2s")},
        cards("3h4d5cKdKs"),
        CardCountRule.TWO_FLEXIBLE,
        hi_lo=False,
    )
    assert result.high_winners == ["p1"]
    assert result.low_winners == []
    assert not result.has_low
    assert result.scoopers == ["p1"]
    assert result.players["p2"].evaluation.low_hand is not None
    assert result.players["p2"].low_description == ""
    assert result.to_json()["hi_lo"] is False


def test_card_held_by_two_players(cards):
    with pytest.raises(InvalidHandError):
        evaluate_showdown(
            {"p1": cards("AsKd"), "p2": cards("As2c")},
            cards("3h4d5cKh9s"),
            CardCountRule.TWO_FLEXIBLE,
        )


def test_hole_card_also_on_board(cards):
    with pytest.raises(InvalidHandError):
        evaluate_showdown(
            {"p1": cards("AsKd"), "p2": cards("9s2c")},
            cards("3h4d5cKh9s"),
            CardCountRule.TWO_FLEXIBLE,
        )


def test_duplicate_board_card(cards):
    with pytest.raises(InvalidHandError):
        evaluate_showdown(
            {"p1": cards("AsKd")},
            cards("3h4d5c3h9s"),
            CardCountRule.TWO_FLEXIBLE,
        )
