"""Choosing a deck and building the player's and opponent's decks from templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

_log = logging.getLogger(__name__)

ENEMY_DECK_NAME = "EnemyDeck"


class SelectionError(Exception):
    """Raised when a deck cannot be built for the chosen option."""


class DeckChoice(Enum):
    """The decks a player can pick on the selection screen."""

    DEMON_HUNTER = "DemonHunterDeck"
    DEATH_KNIGHT = "DeathKnightDeck"


@dataclass(frozen=True)
class DeckTemplate:
    """One entry of a deck list: a card id and how many copies."""

    card_id: int
    count: int = 1


class Deck:
    """A named collection of card instances."""

    def __init__(self, name):
        self.name = name
        self.cards = []

    def add_card(self, card):
        """Add a card instance to the deck."""
        self.cards.append(card)

    def total_cards(self):
        """Number of cards, counting every copy of each instance."""
        return sum(getattr(card, "count", 1) for card in self.cards)

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)


def build_deck(name, templates, create_card):
    """Build a deck by creating a card for each template; unknown ids are skipped."""
    deck = Deck(name)
    for template in templates:
        if template is None:
            continue
        card = create_card(template.card_id)
        if card is None:
            continue
        card.count = template.count
        deck.add_card(card)
        _log.debug(
            "Added card to deck: %s (ID: %d, Count: %d)",
            getattr(card, "name", card),
            template.card_id,
            template.count,
        )
    _log.info("Created deck: %s with %d cards", deck.name, deck.total_cards())
    return deck


def select_decks(choice, player_templates, enemy_templates, create_card):
    """Return the player's deck for the chosen option and the opponent's deck."""
    choice = DeckChoice(choice)
    try:
        templates = player_templates[choice]
    except KeyError:
        raise SelectionError(f"No deck template for {choice.name}") from None
    player = build_deck(choice.value, templates, create_card)
    enemy = build_deck(ENEMY_DECK_NAME, enemy_templates, create_card)
    return player, enemy