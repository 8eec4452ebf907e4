"""
Services package for the game ranking tool.
"""

from .leaderboard import LeaderboardService

__all__ = ['LeaderboardService']
