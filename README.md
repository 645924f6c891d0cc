# hearthdeck

The rules and screen flow behind a small two-player collectible card game,
with no graphics layer. The package has no dependencies outside the
standard library.

Modules:

- `hearthdeck.deck_builder`: the built-in card catalogue (`default_catalog()`)
  and `DeckBuilder`, a paged collection view with eight cards to a page laid
  out four to a row.
- `hearthdeck.selection`: `DeckChoice`, `DeckTemplate`, `Deck`,
  `build_deck()` and `select_decks()` for building the player's chosen deck
  and the opponent's deck from templates.
- `hearthdeck.turns`: `HeroState` (health and mana) and `TurnController`,
  which alternates turns, runs the turn timer, grows and refills the player's
  mana, and ends the opponent's turn by itself a few seconds after it starts.
- `hearthdeck.layout`: `Rect`, `card_rect()` and the functions giving the
  positions of hand cards, field cards and the opponent's revealed cards.
- `hearthdeck.config`: `ConfigManager`, which loads `CardConfig` entries from
  a JSON array of card objects and raises `ConfigError` on a missing or
  malformed file.
- `hearthdeck.navigation`: `Navigator`, which tracks the current `Screen`
  and plays the sound tied to each button, and the `hearthdeck` command.
- `hearthdeck.constants`: game limits, resource paths (`Resources`), sound
  names (`Sound`) and animation timings (`AnimationTiming`).

## Installation

```
pip install .
```

Add the `test` extra to install pytest as well:

```
pip install .[test]
```

## Command line

The `hearthdeck` command starts at the main menu, applies a sequence of
button presses and prints the screen after each one:

```
hearthdeck play start quit
```

prints

```
menu
select_cards
game
ended
```

The actions are `play`, `collection`, `settings`, `start`, `adventure`,
`battlegrounds`, `back` and `quit`. An action that is not available on the
current screen prints an error and the command exits with status 1.

## Examples

Browsing the card collection:

```python
from hearthdeck.deck_builder import DeckBuilder, default_catalog

builder = DeckBuilder(default_catalog(), 1920, 1080)
print(builder.page_label())      # Page 1/4
builder.page_right()
for placement in builder.layout():
    print(placement.card.name, placement.x, placement.y)
```

Building decks. `create_card` turns a card id into a card object (or
`None` to skip it); each created card gets a `count` attribute from its
template:

```python
from types import SimpleNamespace

from hearthdeck.selection import DeckChoice, DeckTemplate, select_decks

def create_card(card_id):
    return SimpleNamespace(name=str(card_id))

player, enemy = select_decks(
    DeckChoice.DEMON_HUNTER,
    {DeckChoice.DEMON_HUNTER: [DeckTemplate(1001, 2)]},
    [DeckTemplate(2001)],
    create_card,
)
print(player.name, player.total_cards())   # DemonHunterDeck 2
print(enemy.name, enemy.total_cards())     # EnemyDeck 1
```

Running turns:

```python
from hearthdeck.turns import HeroState, TurnController

controller = TurnController(HeroState(), HeroState(), 30)
controller.end_turn()
print(controller.indicator())    # Opponent's Turn
for _ in range(5):
    controller.tick()            # the opponent's turn ends by itself
print(controller.indicator())    # Your Turn
print(controller.mana_text())    # 2/2
```

Card positions:

```python
from hearthdeck.layout import hand_positions

print(hand_positions(3, 1920))   # [(860.0, 150.0), (960.0, 150.0), (1060.0, 150.0)]
```

Loading card configuration from `configs/cards.json`:

```python
from hearthdeck.config import ConfigManager

manager = ConfigManager("configs")
manager.load_configs()
print(manager.get_card_config(1001))
```

## What the package does not do

There is no graphical interface: screens are tracked as `Screen` values and
sounds are handed to a callback, not played. The package has no play board
that holds hands and fields, draws cards from a deck, plays cards onto the
field or resolves attacks between cards; it provides the turn, mana and
layout rules such a board would use. Logging goes through the standard
`logging` module and is not written to a file by the package.

## Running the tests

```
pip install .[test]
python -m pytest
```