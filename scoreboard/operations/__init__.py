"""
Operations Layer

Row-level business rules for the two input logs. Each handler validates and
folds a single row into the shared aggregate store; ingest_source drives a
handler over a whole source, one row at a time.

- store_player: player-registry rows (player_id -> handle name)
- store_score: score-event rows (timestamp, player_id, score)
"""

from .ingest import ingest_source, store_player, store_score

__all__ = ['ingest_source', 'store_player', 'store_score']
