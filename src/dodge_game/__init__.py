"""
dodge_game
----------
Arcade game: move along the bottom of the field, dodge falling attacks and
collect falling items.
"""

__version__ = "0.1.0"
