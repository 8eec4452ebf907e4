"""
Ingest operations for the player-registry and score-event logs.

Both handlers share one contract: given a row, its index within the source,
the aggregate store and the run settings, either mutate the store, skip the
row, or raise a fatal LeaderboardException.
"""

import logging
import re
from typing import Callable, List

from scoreboard.config import RankingSettings
from scoreboard.constants import LogSchemaConstants
from scoreboard.data_models.leaderboard import AggregateStore, IngestSummary, PlayerAggregate
from scoreboard.utils.csv_reader import read_rows
from scoreboard.utils.leaderboard_exceptions import (
    HeaderMismatchError,
    MalformedRowError,
    MalformedScoreError,
)

logger = logging.getLogger(__name__)

RowHandler = Callable[[List[str], int, AggregateStore, RankingSettings], bool]

_SCORE_RE = re.compile(r'[+-]?[0-9]+')


def _check_header(row: List[str], expected: str, source_name: str) -> None:
    header = ",".join(row)
    if header != expected:
        raise HeaderMismatchError(source_name, header)


def _check_width(row: List[str], expected_header: str, index: int, source_name: str) -> None:
    expected = len(expected_header.split(","))
    if len(row) != expected:
        raise MalformedRowError(source_name, index, expected, len(row))


def parse_score(text: str, line_number: int = None) -> int:
    """
    Parse a score field as a signed base-10 integer.
    
    Raises:
        MalformedScoreError: If the text is not an optional sign followed by digits
    """
    if not _SCORE_RE.fullmatch(text):
        raise MalformedScoreError(text, line_number)
    return int(text)


def store_player(row: List[str], index: int, store: AggregateStore, settings: RankingSettings) -> bool:
    """Validate the registry header or register a player with a fresh aggregate."""
    if index == LogSchemaConstants.HEADER_ROW_INDEX:
        _check_header(row, settings.registry_header, settings.registry_label)
        return False
    
    _check_width(row, settings.registry_header, index, settings.registry_label)
    player_id = row[LogSchemaConstants.REGISTRY_PLAYER_ID_FIELD]
    handle_name = row[LogSchemaConstants.REGISTRY_HANDLE_NAME_FIELD]
    
    if player_id in store:
        logger.debug(f"Player {player_id} registered again, resetting aggregate")
    store[player_id] = PlayerAggregate(display_name=handle_name)
    return True


def store_score(row: List[str], index: int, store: AggregateStore, settings: RankingSettings) -> bool:
    """
    Validate the score header or fold one score event into its player's aggregate.
    
    Events for player ids absent from the store are skipped without error;
    score logs may reference stale or future registrations.
    
    Returns:
        True if the event was folded, False for the header or a skipped event
    """
    if index == LogSchemaConstants.HEADER_ROW_INDEX:
        _check_header(row, settings.score_header, settings.score_label)
        return False
    
    _check_width(row, settings.score_header, index, settings.score_label)
    player_id = row[LogSchemaConstants.SCORE_PLAYER_ID_FIELD]
    score = parse_score(row[LogSchemaConstants.SCORE_VALUE_FIELD], index)
    
    aggregate = store.get(player_id)
    if aggregate is None:
        logger.debug(f"Skipping score for unregistered player {player_id}")
        return False
    
    aggregate.fold(score)
    return True


def ingest_source(
    path: str,
    store: AggregateStore,
    handler: RowHandler,
    settings: RankingSettings,
    source_name: str
) -> IngestSummary:
    """
    Drive a row handler over every row of a source, in order.
    
    Args:
        path: Path to the CSV source
        store: Shared aggregate store, mutated by the handler
        handler: store_player or store_score
        settings: Run configuration
        source_name: Label used in log messages
        
    Returns:
        Row counts for the source; the header counts as read but neither
        folded nor skipped
    """
    rows_read = 0
    rows_folded = 0
    rows_skipped = 0
    
    for index, row in enumerate(read_rows(path)):
        rows_read += 1
        if handler(row, index, store, settings):
            rows_folded += 1
        elif index != LogSchemaConstants.HEADER_ROW_INDEX:
            rows_skipped += 1
    
    summary = IngestSummary(
        source_name=source_name,
        rows_read=rows_read,
        rows_folded=rows_folded,
        rows_skipped=rows_skipped,
    )
    logger.info(
        f"Ingested {source_name}: {rows_read} rows read, "
        f"{rows_folded} folded, {rows_skipped} skipped"
    )
    return summary
