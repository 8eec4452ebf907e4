import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from scoreboard.config import RankingSettings
from scoreboard.constants import ExitCodes, LogSchemaConstants
from scoreboard.services.leaderboard import LeaderboardService
from scoreboard.utils.leaderboard_exceptions import LeaderboardException, MissingArgumentError
from scoreboard.utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="game-ranking",
        description="Print the top of the leaderboard computed from a player registry log and a score log.",
    )
    # Optional here so that a missing file is reported as MissingArgumentError
    parser.add_argument("registry_log", nargs="?", help=f"Path to {LogSchemaConstants.REGISTRY_LOG_FILENAME}")
    parser.add_argument("score_log", nargs="?", help=f"Path to {LogSchemaConstants.SCORE_LOG_FILENAME}")
    # Further positionals are accepted and ignored
    parser.add_argument("extra_args", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument(
        "--display-ranking",
        type=int,
        default=None,
        help="Rank at which output stops, exclusive (default: DISPLAY_RANKING or 10)",
    )
    parser.add_argument(
        "--rank-only-scored",
        action="store_true",
        help="Leave out registered players without any score event",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def resolve_settings(args: argparse.Namespace) -> RankingSettings:
    """Merge command-line overrides into the configured settings."""
    try:
        settings = RankingSettings.from_config()
    except ValueError as e:
        raise LeaderboardException(f"Invalid configuration: {e}") from e
    
    if args.display_ranking is not None:
        if args.display_ranking < 1:
            raise LeaderboardException("--display-ranking must be a positive integer")
        settings = replace(settings, display_ranking=args.display_ranking)
    if args.rank_only_scored:
        settings = replace(settings, rank_only_scored=True)
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    
    logger = setup_logger("scoreboard", debug=args.debug)
    if args.extra_args:
        logger.debug(f"Ignoring extra arguments: {args.extra_args}")
    
    try:
        if not args.registry_log:
            raise MissingArgumentError(LogSchemaConstants.REGISTRY_LOG_FILENAME)
        if not args.score_log:
            raise MissingArgumentError(LogSchemaConstants.SCORE_LOG_FILENAME)
        
        settings = resolve_settings(args)
        service = LeaderboardService(settings)
        service.publish(args.registry_log, args.score_log, sys.stdout)
    except LeaderboardException as e:
        logger.debug(f"Run aborted: {e}")
        print(f"[Error]: {e.user_message}", file=sys.stderr)
        return ExitCodes.FAILURE
    
    return ExitCodes.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
