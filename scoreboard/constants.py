"""
Fixed literals for the game ranking tool.

Log schemas, display limits and exit codes live here so that the ingest,
ranking and presentation code never embeds magic strings.
"""

class LogSchemaConstants:
    """Expected file names and header rows of the two input logs."""
    
    # Default file names, used to name the source in error messages
    REGISTRY_LOG_FILENAME = "game_ently_log.csv"
    SCORE_LOG_FILENAME = "game_score_log.csv"
    
    # Header literals compared against row 0 joined by commas
    REGISTRY_LOG_HEADER = "player_id,handle_name"
    SCORE_LOG_HEADER = "create_timestamp,player_id,score"
    
    # Index of the header row within a source
    HEADER_ROW_INDEX = 0
    
    # Field positions
    REGISTRY_PLAYER_ID_FIELD = 0
    REGISTRY_HANDLE_NAME_FIELD = 1
    SCORE_PLAYER_ID_FIELD = 1
    SCORE_VALUE_FIELD = 2

class DisplayConstants:
    """Constants for the printed ranking."""
    
    RANKING_HEADER = "rank,player_id,handle_name,score"
    
    # Rank at which output stops (exclusive)
    DISPLAY_RANKING = 10

class ExitCodes:
    """Process exit statuses."""
    
    SUCCESS = 0
    FAILURE = 1
