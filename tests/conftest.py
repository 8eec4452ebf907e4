"""
Shared fixtures: write registry and score logs into a temporary directory.
"""

import pytest

from scoreboard.config import RankingSettings

REGISTRY_HEADER = "player_id,handle_name"
SCORE_HEADER = "create_timestamp,player_id,score"


@pytest.fixture
def settings():
    return RankingSettings()


@pytest.fixture
def write_csv(tmp_path):
    """Write lines to a file under tmp_path and return its path as a string."""
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def registry_log(write_csv):
    """Factory for a registry log from (player_id, handle_name) pairs."""
    def _make(players, header=REGISTRY_HEADER):
        return write_csv("game_ently_log.csv", [header] + [f"{pid},{name}" for pid, name in players])
    return _make


@pytest.fixture
def score_log(write_csv):
    """Factory for a score log from (player_id, score) pairs."""
    def _make(events, header=SCORE_HEADER):
        lines = [header] + [
            f"2021/01/01 12:{i % 60:02d},{pid},{score}" for i, (pid, score) in enumerate(events)
        ]
        return write_csv("game_score_log.csv", lines)
    return _make


@pytest.fixture
def scenario_logs(registry_log, score_log):
    """Three registered players tied at 30, plus one unregistered event."""
    registry = registry_log([("p1", "Alice"), ("p2", "Bob"), ("p3", "Carol")])
    scores = score_log([("p1", 10), ("p2", 30), ("p1", 20), ("p3", 30), ("p4", 999)])
    return registry, scores
