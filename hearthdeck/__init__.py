"""Card catalogue, deck selection, turn rules, board layout and screen flow for a small card game."""

__version__ = "1.0.0"