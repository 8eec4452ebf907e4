"""
Ranking utilities for the game leaderboard.

Turns the aggregate store into a totally ordered list of RankedEntry rows with
competition ranks: equal totals share a rank and the next lower total gets the
next rank number ("1,2,2,3").
"""

from dataclasses import replace
from typing import Iterable, List, Optional

from scoreboard.data_models.leaderboard import AggregateStore, RankedEntry


class RankingUtility:
    """Shared ranking logic for the leaderboard service."""
    
    @staticmethod
    def sort_key(entry: RankedEntry):
        """Total score descending, then player id ascending among ties."""
        return (-entry.score, entry.player_id)
    
    @staticmethod
    def project_entries(store: AggregateStore, rank_only_scored: bool = False) -> List[RankedEntry]:
        """
        Project every stored aggregate to a provisional entry with rank 0.
        
        Players without any folded event are included at their zero total
        unless rank_only_scored is set.
        """
        return [
            RankedEntry(0, player_id, aggregate.display_name, aggregate.total_score)
            for player_id, aggregate in store.items()
            if not rank_only_scored or aggregate.event_count > 0
        ]
    
    @staticmethod
    def assign_competition_ranks(entries: Iterable[RankedEntry]) -> List[RankedEntry]:
        """
        Assign ranks in one pass over entries already sorted by score descending.
        
        The rank advances once per distinct score value, never by player count.
        """
        ranked = []
        current_rank = 0
        previous_score: Optional[int] = None
        
        for entry in entries:
            if previous_score is None or entry.score != previous_score:
                current_rank += 1
                previous_score = entry.score
            ranked.append(replace(entry, rank=current_rank))
        
        return ranked
    
    @staticmethod
    def build_ranking(store: AggregateStore, rank_only_scored: bool = False) -> List[RankedEntry]:
        """Build the full ranked sequence from the aggregate store."""
        entries = RankingUtility.project_entries(store, rank_only_scored)
        entries.sort(key=RankingUtility.sort_key)
        return RankingUtility.assign_competition_ranks(entries)
