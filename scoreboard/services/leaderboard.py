"""
Leaderboard service: one full ranking run.

Ingests the registry log, then the score log, into a fresh aggregate store,
ranks it, and hands the result to the presenter. Nothing is kept between runs.
"""

import logging
from typing import List, TextIO

from scoreboard.config import RankingSettings
from scoreboard.data_models.leaderboard import AggregateStore, IngestSummary, RankedEntry
from scoreboard.operations.ingest import ingest_source, store_player, store_score
from scoreboard.utils.ranking import RankingUtility
from scoreboard.views.leaderboard import render_ranking

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Service computing and publishing the leaderboard for a pair of logs."""
    
    def __init__(self, settings: RankingSettings):
        self.settings = settings
        # Summaries of the most recent aggregate() call, registry first
        self.last_summaries: List[IngestSummary] = []
    
    def aggregate(self, registry_path: str, score_path: str) -> AggregateStore:
        """Build the aggregate store; the registry must be ingested first."""
        store: AggregateStore = {}
        registry = ingest_source(registry_path, store, store_player, self.settings, self.settings.registry_label)
        scores = ingest_source(score_path, store, store_score, self.settings, self.settings.score_label)
        self.last_summaries = [registry, scores]
        if scores.rows_skipped:
            logger.info(
                f"{scores.rows_skipped} of {scores.rows_read - 1} score events "
                f"referenced players missing from {registry.source_name}"
            )
        return store
    
    def build(self, registry_path: str, score_path: str) -> List[RankedEntry]:
        """Compute the full ranked sequence for the two logs."""
        store = self.aggregate(registry_path, score_path)
        ranking = RankingUtility.build_ranking(store, self.settings.rank_only_scored)
        logger.info(f"Ranked {len(ranking)} of {len(store)} registered players")
        return ranking
    
    def publish(self, registry_path: str, score_path: str, sink: TextIO) -> int:
        """Compute the ranking and write it to sink. Returns rows written."""
        ranking = self.build(registry_path, score_path)
        written = render_ranking(ranking, sink, self.settings)
        logger.debug(f"Wrote {written} ranking rows (cutoff rank {self.settings.display_ranking})")
        return written
