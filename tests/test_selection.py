from dataclasses import dataclass

import pytest

from hearthdeck.selection import (
    Deck,
    DeckChoice,
    DeckTemplate,
    SelectionError,
    build_deck,
    select_decks,
)


@dataclass
class FakeCard:
    id: int
    name: str
    count: int = 1


KNOWN = {1001: "二段跳", 1003: "凶猛的外来者", 2001: "奇迹推销员", 2004: "恐惧猎犬训练师"}


def create_card(card_id):
    if card_id not in KNOWN:
        return None
    return FakeCard(card_id, KNOWN[card_id])


def test_deck_add_and_total():
    deck = Deck("Test")
    deck.add_card(FakeCard(1, "a", count=2))
    deck.add_card(FakeCard(2, "b", count=3))
    assert len(deck) == 2
    assert deck.total_cards() == 5


def test_empty_deck_total_is_zero():
    assert Deck("Empty").total_cards() == 0


def test_build_deck_sets_counts_and_order():
    templates = [DeckTemplate(1001, 2), DeckTemplate(1003, 1)]
    deck = build_deck("Mine", templates, create_card)
    assert deck.name == "Mine"
    assert [(card.id, card.count) for card in deck] == [(1001, 2), (1003, 1)]
    assert deck.total_cards() == 3


def test_build_deck_skips_unknown_and_missing_templates():
    templates = [None, DeckTemplate(9999, 4), DeckTemplate(2001, 2)]
    deck = build_deck("Mixed", templates, create_card)
    assert [card.id for card in deck] == [2001]
    assert deck.total_cards() == 2


def test_select_decks_uses_chosen_template():
    player_templates = {
        DeckChoice.DEMON_HUNTER: [DeckTemplate(1001, 2)],
        DeckChoice.DEATH_KNIGHT: [DeckTemplate(2001, 1), DeckTemplate(2004, 2)],
    }
    enemy_templates = [DeckTemplate(1003, 3)]
    player, enemy = select_decks(
        DeckChoice.DEATH_KNIGHT, player_templates, enemy_templates, create_card
    )
    assert player.name == DeckChoice.DEATH_KNIGHT.value
    assert [card.id for card in player] == [2001, 2004]
    assert enemy.name == "EnemyDeck"
    assert enemy.total_cards() == 3


def test_select_decks_builds_fresh_card_instances():
    player_templates = {DeckChoice.DEMON_HUNTER: [DeckTemplate(1003, 1)]}
    player, enemy = select_decks(
        DeckChoice.DEMON_HUNTER, player_templates, [DeckTemplate(1003, 2)], create_card
    )
    assert player.cards[0] is not enemy.cards[0]
    assert (player.cards[0].count, enemy.cards[0].count) == (1, 2)


def test_select_decks_missing_choice_raises():
    with pytest.raises(SelectionError):
        select_decks(DeckChoice.DEMON_HUNTER, {}, [], create_card)


def test_select_decks_rejects_unknown_choice():
    with pytest.raises(ValueError):
        select_decks("NotADeck", {}, [], create_card)