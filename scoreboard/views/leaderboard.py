"""
Leaderboard text output.

Writes the ranked sequence as CSV lines to a text sink, stopping at the
display cutoff rank.
"""

import csv
from typing import Iterable, TextIO

from scoreboard.config import RankingSettings
from scoreboard.data_models.leaderboard import RankedEntry


def render_ranking(ranking: Iterable[RankedEntry], sink: TextIO, settings: RankingSettings) -> int:
    """
    Write the ranking header and one line per entry ranked above the cutoff.
    
    The first entry whose rank equals settings.display_ranking ends the output,
    so ties sitting on the cutoff rank are omitted entirely. The header is only
    written together with the first data row.
    
    Args:
        ranking: Entries in ranked order
        sink: Writable text stream
        settings: Run configuration (header literal and cutoff)
        
    Returns:
        Number of data rows written
    """
    writer = csv.writer(sink, lineterminator='\n')
    written = 0
    
    for entry in ranking:
        if entry.rank == settings.display_ranking:
            break
        if written == 0:
            sink.write(settings.ranking_header + '\n')
        writer.writerow([entry.rank, entry.player_id, entry.display_name, entry.score])
        written += 1
    
    return written
