"""Fuzzy inference, a genetic algorithm and table logging for game bots."""

__version__ = "0.1.0"
__all__ = [
    "chromosome",
    "membership",
    "operators",
    "population",
    "rules",
    "system",
    "tables",
    "variable",
]