"""
Game ranking: leaderboard computation from player-registry and score-event logs.
"""

__version__ = "1.0.0"
