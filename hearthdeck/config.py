"""Card configuration loaded from a JSON array of card objects."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

_log = logging.getLogger(__name__)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ConfigError(Exception):
    """Raised when a configuration file is missing or malformed."""


@dataclass
class CardConfig:
    """Settings of one card."""

    id: int
    name: str = ""
    cost: int = 0
    attack: int = 0
    health: int = 0
    description: str = ""
    image_path: str = ""


def _is_int(value):
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and _INT_MIN <= value <= _INT_MAX
    )


_INT_FIELDS = {"cost": "cost", "attack": "attack", "health": "health"}
_STR_FIELDS = {"name": "name", "description": "description", "imagePath": "image_path"}


class ConfigManager:
    """Holds card configurations keyed by card id."""

    def __init__(self, config_dir="configs"):
        self.config_dir = Path(config_dir)
        self._cards: dict[int, CardConfig] = {}

    def load_configs(self):
        """Load every configuration file from the configuration directory."""
        try:
            return self.load_card_configs(self.config_dir / "cards.json")
        except ConfigError:
            _log.error("Failed to load card configs")
            raise

    def load_card_configs(self, path):
        """Read and parse a card configuration file; return the number of cards."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Card config file not found: {path}") from exc
        if not text:
            raise ConfigError(f"Card config file not found: {path}")
        return self.parse_card_json(text)

    def parse_card_json(self, text):
        """Replace the stored cards with those in a JSON array; return their count."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError("Failed to parse card config JSON") from exc
        if not isinstance(document, list):
            raise ConfigError("Card config JSON should be an array")

        cards: dict[int, CardConfig] = {}
        for entry in document:
            if not isinstance(entry, dict) or not _is_int(entry.get("id")):
                continue
            config = CardConfig(id=entry["id"])
            for key, attr in _INT_FIELDS.items():
                if _is_int(entry.get(key)):
                    setattr(config, attr, entry[key])
            for key, attr in _STR_FIELDS.items():
                if isinstance(entry.get(key), str):
                    setattr(config, attr, entry[key])
            cards[config.id] = config

        self._cards = cards
        _log.info("Successfully loaded %d card configs", len(cards))
        return len(cards)

    def get_card_config(self, card_id):
        """Return the configuration of a card, or None if it is unknown."""
        return self._cards.get(card_id)