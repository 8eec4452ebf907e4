import os
from dataclasses import dataclass
from dotenv import load_dotenv

from scoreboard.constants import LogSchemaConstants, DisplayConstants

load_dotenv()

class Config:
    """Ranking tool configuration settings"""
    
    # Logging settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING').upper()
    LOG_DIR = os.getenv('LOG_DIR', '')  # Empty disables the file handler
    
    # Ranking settings
    DISPLAY_RANKING = os.getenv('DISPLAY_RANKING', str(DisplayConstants.DISPLAY_RANKING))
    RANK_ONLY_SCORED = os.getenv('RANK_ONLY_SCORED', 'False').lower() == 'true'
    
    @classmethod
    def get_display_ranking(cls) -> int:
        """Get the display cutoff as an integer"""
        try:
            return int(cls.DISPLAY_RANKING)
        except (TypeError, ValueError):
            raise ValueError("DISPLAY_RANKING must be an integer")
    
    @classmethod
    def validate(cls):
        """Validate that configuration values are usable"""
        if cls.get_display_ranking() < 1:
            raise ValueError("DISPLAY_RANKING must be a positive integer")


@dataclass(frozen=True)
class RankingSettings:
    """Explicit configuration handed to ingest, ranking and presentation."""
    registry_header: str = LogSchemaConstants.REGISTRY_LOG_HEADER
    score_header: str = LogSchemaConstants.SCORE_LOG_HEADER
    ranking_header: str = DisplayConstants.RANKING_HEADER
    registry_label: str = LogSchemaConstants.REGISTRY_LOG_FILENAME
    score_label: str = LogSchemaConstants.SCORE_LOG_FILENAME
    display_ranking: int = DisplayConstants.DISPLAY_RANKING
    rank_only_scored: bool = False
    
    @classmethod
    def from_config(cls) -> "RankingSettings":
        """Build settings from the environment-backed Config."""
        Config.validate()
        return cls(
            display_ranking=Config.get_display_ranking(),
            rank_only_scored=Config.RANK_ONLY_SCORED,
        )
