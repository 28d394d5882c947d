"""Keep track of houseplants and their health in a SQLite database."""

__version__ = "2.0.0"