"""
Pour Sort - State-space engine for the water sort puzzle.

Subpackages:
    engine: Glass and board model, pour rules, solver strategies
    levels: Level generation, play state and binary level packs
"""

__version__ = "0.1.0"
