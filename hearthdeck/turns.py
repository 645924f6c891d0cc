"""Turn order, turn timer and mana bookkeeping for a match."""

from __future__ import annotations

from dataclasses import dataclass

from hearthdeck.constants import MAX_MANA

DEFAULT_TURN_TIME = 30
MANA_PER_TURN = 2
AUTO_END_DELAY = 5
TIMER_WARNING_SECONDS = 5
LOW_HEALTH = 10

PLAYER_TURN_TEXT = "Your Turn"
OPPONENT_TURN_TEXT = "Opponent's Turn"


@dataclass
class HeroState:
    """Health and mana of one hero."""

    health: int = 30
    mana: int = 0
    max_mana: int = 0

    def has_enough_mana(self, amount):
        """Whether the hero can pay the given amount of mana."""
        return self.mana >= amount

    def spend_mana(self, amount):
        """Pay mana; raise ValueError if there is not enough."""
        if amount < 0:
            raise ValueError("cannot spend a negative amount of mana")
        if not self.has_enough_mana(amount):
            raise ValueError(f"not enough mana: have {self.mana}, need {amount}")
        self.mana -= amount

    @property
    def low_health(self):
        """Whether health is low enough to be shown as a warning."""
        return self.health <= LOW_HEALTH


class TurnController:
    """Alternates turns between the player and the opponent and runs the turn timer.

    The player's hero is the one whose mana grows and refills at the start of
    each of the player's turns. The opponent's turn ends by itself a few
    seconds after it starts.
    """

    def __init__(self, player=None, opponent=None, turn_time=DEFAULT_TURN_TIME):
        if turn_time <= 0:
            raise ValueError("turn time must be positive")
        self.player = player if player is not None else HeroState(mana=5, max_mana=5)
        self.opponent = opponent if opponent is not None else HeroState(mana=5, max_mana=5)
        self.turn_time = turn_time
        self.time_remaining = turn_time
        self.is_player_turn = True
        self.hero_power_enabled = True
        self.has_attacked = set()
        self._auto_end_remaining = None

    @property
    def end_turn_enabled(self):
        """Whether the end-turn button can be pressed."""
        return self.is_player_turn

    @property
    def auto_end_pending(self):
        """Seconds until the opponent's turn ends by itself, or None."""
        return self._auto_end_remaining

    @property
    def timer_warning(self):
        """Whether the timer is low enough to be shown as a warning."""
        return self.time_remaining <= TIMER_WARNING_SECONDS

    def end_turn(self):
        """Pass the turn to the other side."""
        self.is_player_turn = not self.is_player_turn
        self.time_remaining = self.turn_time
        self._auto_end_remaining = None

        if self.is_player_turn:
            new_max = min(self.player.max_mana + MANA_PER_TURN, MAX_MANA)
            self.player.max_mana = new_max
            self.player.mana = new_max
            self.hero_power_enabled = True
        else:
            self.hero_power_enabled = False
            self._auto_end_remaining = AUTO_END_DELAY

        self.has_attacked.clear()

    def start_turn(self):
        """Switch sides and refill the player's mana, growing it up to the cap."""
        self.time_remaining = self.turn_time
        self.is_player_turn = not self.is_player_turn

        hero = self.player
        if hero.max_mana < MAX_MANA:
            hero.max_mana = min(hero.max_mana + MANA_PER_TURN, MAX_MANA)
        hero.mana = hero.max_mana

        self.has_attacked.clear()

    def tick(self):
        """Advance one second; return the time left in the current turn."""
        if self.time_remaining > 0:
            self.time_remaining -= 1
            if self.time_remaining == 0 and self.is_player_turn:
                self.end_turn()
                return self.time_remaining

        if self._auto_end_remaining is not None:
            self._auto_end_remaining -= 1
            if self._auto_end_remaining <= 0:
                self._auto_end_remaining = None
                self.end_turn()
        return self.time_remaining

    def mark_attacked(self, card):
        """Record that a card has attacked this turn."""
        self.has_attacked.add(card)

    def can_attack(self, card):
        """Whether a card may still attack this turn."""
        return self.is_player_turn and card not in self.has_attacked

    def add_mana(self, amount):
        """Give the player mana, never above the maximum."""
        self.player.mana = min(self.player.mana + amount, self.player.max_mana)

    def use_mana(self, amount):
        """Spend the player's mana if there is enough; return whether it was spent."""
        if self.player.mana >= amount:
            self.player.mana -= amount
            return True
        return False

    def has_enough_mana(self, amount):
        """Whether the player can pay the given amount of mana."""
        return self.player.mana >= amount

    def indicator(self):
        """Text of the turn indicator."""
        return PLAYER_TURN_TEXT if self.is_player_turn else OPPONENT_TURN_TEXT

    def mana_text(self):
        """Text of the player's mana display."""
        return f"{self.player.mana}/{self.player.max_mana}"