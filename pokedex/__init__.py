"""Pokedex API: Pokemon lookups with fun-translated descriptions."""

__version__ = "1.0.0"
