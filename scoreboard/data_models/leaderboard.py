"""
Leaderboard data models for the game ranking tool.

PlayerAggregate is the mutable per-player fold target shared by both ingest
passes; RankedEntry is the immutable row produced by the ranking builder.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class PlayerAggregate:
    """Accumulated state for one registered player."""
    display_name: str = ""
    total_score: int = 0
    max_score: int = 0
    event_count: int = 0
    
    def fold(self, score: int) -> None:
        """Fold a single score event into the aggregate."""
        # max_score is seeded by the first event, not by the zero default
        if self.event_count == 0:
            self.max_score = score
        else:
            self.max_score = max(self.max_score, score)
        self.total_score += score
        self.event_count += 1


@dataclass(frozen=True)
class RankedEntry:
    """Single ranking row."""
    rank: int
    player_id: str
    display_name: str
    score: int


@dataclass(frozen=True)
class IngestSummary:
    """Row counts for one ingested source."""
    source_name: str
    rows_read: int = 0
    rows_folded: int = 0
    rows_skipped: int = 0


AggregateStore = Dict[str, PlayerAggregate]
