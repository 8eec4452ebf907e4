"""Tests for competition ranking."""

from scoreboard.data_models.leaderboard import PlayerAggregate, RankedEntry
from scoreboard.utils.ranking import RankingUtility


def make_store(totals, counts=None):
    counts = counts or {}
    return {
        pid: PlayerAggregate(f"name-{pid}", total, total, counts.get(pid, 1))
        for pid, total in totals.items()
    }


def test_ties_share_rank_and_next_rank_counts_distinct_scores():
    ranking = RankingUtility.build_ranking(make_store({"a": 50, "b": 50, "c": 30, "d": 10}))
    assert [e.rank for e in ranking] == [1, 1, 2, 3]
    assert [e.score for e in ranking] == [50, 50, 30, 10]


def test_rank_is_one_plus_count_of_greater_distinct_scores():
    totals = {"a": 7, "b": 3, "c": 7, "d": -1, "e": 3, "f": 0, "g": 12}
    ranking = RankingUtility.build_ranking(make_store(totals))
    for entry in ranking:
        greater = {s for s in totals.values() if s > entry.score}
        assert entry.rank == len(greater) + 1
    ranks = [e.rank for e in ranking]
    assert ranks == sorted(ranks)


def test_equal_scores_ordered_by_player_id():
    ranking = RankingUtility.build_ranking(make_store({"p3": 30, "p1": 30, "p2": 30}))
    assert [e.player_id for e in ranking] == ["p1", "p2", "p3"]
    assert {e.rank for e in ranking} == {1}


def test_all_zero_leaderboard_ranks_everyone_first():
    ranking = RankingUtility.build_ranking(make_store({"a": 0, "b": 0}, counts={"a": 0, "b": 0}))
    assert [e.rank for e in ranking] == [1, 1]


def test_leading_zero_then_negative_scores():
    ranking = RankingUtility.build_ranking(make_store({"a": 0, "b": -4}))
    assert [(e.player_id, e.rank) for e in ranking] == [("a", 1), ("b", 2)]


def test_players_without_events_are_ranked_by_default():
    store = make_store({"a": 10, "b": 0}, counts={"b": 0})
    ranking = RankingUtility.build_ranking(store)
    assert [e.player_id for e in ranking] == ["a", "b"]
    assert ranking[1] == RankedEntry(2, "b", "name-b", 0)


def test_rank_only_scored_drops_players_without_events():
    store = make_store({"a": 10, "b": 0}, counts={"b": 0})
    ranking = RankingUtility.build_ranking(store, rank_only_scored=True)
    assert [e.player_id for e in ranking] == ["a"]


def test_empty_store_gives_empty_ranking():
    assert RankingUtility.build_ranking({}) == []


def test_strictly_decreasing_scores_rank_in_order():
    store = make_store({f"p{i:02d}": 100 - i for i in range(15)})
    ranking = RankingUtility.build_ranking(store)
    assert [e.rank for e in ranking] == list(range(1, 16))
