"""Moving between the menu, settings, deck selection, collection and match screens."""

from __future__ import annotations

import argparse
import sys
from enum import Enum

from hearthdeck.constants import Sound


class Screen(Enum):
    """The screens the game can show."""

    MENU = "menu"
    SELECT_CARDS = "select_cards"
    DECK_BUILDER = "deck_builder"
    SETTINGS = "settings"
    GAME = "game"
    ENDED = "ended"


class NavigationError(Exception):
    """Raised when an action is not available on the current screen."""


def _silent(_sound):
    return None


class Navigator:
    """Tracks the current screen and plays the sounds tied to each button."""

    def __init__(self, play_sound=None):
        self._play_sound = play_sound if play_sound is not None else _silent
        self.screen = Screen.MENU

    @property
    def running(self):
        """Whether the game is still running."""
        return self.screen is not Screen.ENDED

    def _require(self, action, *screens):
        if not self.running:
            raise NavigationError(f"cannot {action}: the game has ended")
        if self.screen not in screens:
            raise NavigationError(f"cannot {action} from the {self.screen.value} screen")

    def _play(self, *sounds):
        for sound in sounds:
            self._play_sound(sound)

    def play_game(self):
        """Leave the main menu for deck selection."""
        self._require("play", Screen.MENU)
        self._play(Sound.MAIN_MENU_THREEBUTTON_CLICK, Sound.CHANGE_SCENE_FROM_MAIN)
        self.screen = Screen.SELECT_CARDS
        return self.screen

    def open_deck_builder(self):
        """Leave the main menu for the card collection."""
        self._require("open the collection", Screen.MENU)
        self._play(Sound.MAIN_MENU_THREEBUTTON_CLICK, Sound.ENTER_MYCOLLECTION)
        self.screen = Screen.DECK_BUILDER
        return self.screen

    def open_settings(self):
        """Press the gear button: the menu opens settings, settings returns to the menu."""
        self._require("open settings", Screen.MENU, Screen.SETTINGS)
        self._play(Sound.CHANGE_HELP_SCENE)
        self.screen = Screen.SETTINGS if self.screen is Screen.MENU else Screen.MENU
        return self.screen

    def start_game(self):
        """Start a match once a deck has been chosen."""
        self._require("start a match", Screen.SELECT_CARDS)
        self.screen = Screen.GAME
        return self.screen

    def adventure_mode(self):
        """Press the adventure button; the screen does not change."""
        self._require("open adventure mode", Screen.MENU)
        self._play(Sound.MAIN_MENU_THREEBUTTON_CLICK)
        return self.screen

    def battlegrounds(self):
        """Press the battlegrounds button; the screen does not change."""
        self._require("open battlegrounds", Screen.MENU)
        self._play(Sound.MAIN_MENU_THREEBUTTON_CLICK)
        return self.screen

    def back(self):
        """Return to the main menu from deck selection, the collection or settings."""
        self._require("go back", Screen.SELECT_CARDS, Screen.DECK_BUILDER, Screen.SETTINGS)
        if self.screen is Screen.SETTINGS:
            self._play(Sound.CHANGE_HELP_SCENE)
        self.screen = Screen.MENU
        return self.screen

    def quit(self):
        """End the game from the menu, settings or a match."""
        self._require("quit", Screen.MENU, Screen.SETTINGS, Screen.GAME)
        self._play(Sound.MAIN_MENU_THREEBUTTON_CLICK)
        self.screen = Screen.ENDED
        return self.screen


_COMMANDS = {
    "play": Navigator.play_game,
    "collection": Navigator.open_deck_builder,
    "settings": Navigator.open_settings,
    "start": Navigator.start_game,
    "adventure": Navigator.adventure_mode,
    "battlegrounds": Navigator.battlegrounds,
    "back": Navigator.back,
    "quit": Navigator.quit,
}


def main(argv=None):
    """Apply a sequence of button presses, printing the screen after each."""
    parser = argparse.ArgumentParser(
        prog="hearthdeck", description="Walk through the game's screens."
    )
    parser.add_argument("actions", nargs="*", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)

    navigator = Navigator()
    print(navigator.screen.value)
    for action in args.actions:
        try:
            screen = _COMMANDS[action](navigator)
        except NavigationError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(screen.value)
    return 0