"""Screen geometry of the match board: hit boxes and card positions."""

from __future__ import annotations

from dataclasses import dataclass

CARD_SPACING = 100.0
BOARD_CARD_SPACING = 150.0
HAND_Y = 150.0
FIELD_Y = 300.0
FIELD_HALF_HEIGHT = 100.0

PLAYER_FIELD_X_OFFSET = -1000.0
PLAYER_FIELD_HEIGHT_RATIO = 0.4
PLAYER_FIELD_Y_OFFSET = -250.0
ENEMY_FIELD_HEIGHT_RATIO = 0.6

# Fixed x positions at which the opponent's last three hand cards are revealed,
# keyed by how many cards the opponent held before revealing.
_ENEMY_REVEAL_X = {
    3: 806.003662 - 50,
    2: 950.001343 - 45,
    1: 1105.002441 - 50,
}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its lower-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self):
        return self.x

    @property
    def max_x(self):
        return self.x + self.width

    @property
    def min_y(self):
        return self.y

    @property
    def max_y(self):
        return self.y + self.height

    def contains(self, x, y):
        """Whether a point lies inside the rectangle, edges included."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def card_rect(x, y, width, height, scale):
    """Hit box of a card centred on (x, y) with the given size and scale."""
    scaled_w = width * scale
    scaled_h = height * scale
    return Rect(x - scaled_w / 2, y - scaled_h / 2, scaled_w, scaled_h)


def _check_count(count):
    if count < 0:
        raise ValueError("card count cannot be negative")


def _row(count, center_x, y, spacing):
    _check_count(count)
    start_x = center_x - (count - 1) * spacing / 2
    return [(start_x + i * spacing, y) for i in range(count)]


def hand_positions(count, visible_width):
    """Screen positions of the player's hand cards, centred along the bottom."""
    return _row(count, visible_width / 2, HAND_Y, CARD_SPACING)


def arranged_hand_offsets(count):
    """Offsets of hand cards relative to the centre of their hand area."""
    return _row(count, 0.0, 0.0, CARD_SPACING)


def field_positions(count, visible_width, visible_height):
    """Positions of the player's cards on the field."""
    center_x = visible_width / 2 + PLAYER_FIELD_X_OFFSET
    field_y = visible_height * PLAYER_FIELD_HEIGHT_RATIO + PLAYER_FIELD_Y_OFFSET
    return _row(count, center_x, field_y, BOARD_CARD_SPACING)


def enemy_field_positions(count, visible_width, visible_height):
    """Positions of the opponent's cards on the field."""
    field_y = visible_height * ENEMY_FIELD_HEIGHT_RATIO
    return _row(count, visible_width / 2, field_y, BOARD_CARD_SPACING)


def enemy_reveal_position(remaining, visible_height):
    """Where the opponent's next revealed card goes, or None if it has no fixed slot."""
    x = _ENEMY_REVEAL_X.get(remaining)
    if x is None:
        return None
    return (x, visible_height * ENEMY_FIELD_HEIGHT_RATIO)


def is_valid_field_position(y):
    """Whether a height lies within the player's field band."""
    return FIELD_Y - FIELD_HALF_HEIGHT <= y <= FIELD_Y + FIELD_HALF_HEIGHT