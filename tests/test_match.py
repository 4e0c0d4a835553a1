import pytest

from minigames.mini_darts.match import OPPONENT, PLAYER, MatchState, other_side
from minigames.mini_darts.scoring import resolve_score


def single_20(layout):
    return resolve_score(0.5, 9.0, layout)


def test_new_match() -> None:
    m = MatchState.new()
    assert (m.totals, m.darts_left, m.turn, m.winner) == ({PLAYER: 301, OPPONENT: 301}, 3, PLAYER, None)
    assert m.is_player_turn()


def test_shots_count_down_the_throwers_total(layout) -> None:
    m = MatchState.new()
    throw = m.record_shot(single_20(layout))
    assert (throw.side, throw.total_after) == (PLAYER, 281)
    assert (m.totals[PLAYER], m.totals[OPPONENT], m.darts_left) == (281, 301, 2)


def test_miss_costs_a_dart_but_no_points(layout) -> None:
    m = MatchState.new()
    m.record_shot(resolve_score(2.0, 9.0, layout))
    assert (m.current_total, m.darts_left) == (301, 2)


def test_turn_passes_after_three_darts(layout) -> None:
    m = MatchState.new()
    for _ in range(2):
        m.record_shot(single_20(layout))
        assert m.check_turn() is False
    m.record_shot(single_20(layout))
    assert m.check_turn() is True
    assert (m.turn, m.darts_left, m.totals[PLAYER]) == (OPPONENT, 3, 241)

    for _ in range(3):
        m.record_shot(single_20(layout))
    assert m.check_turn() is True
    assert (m.turn, m.totals[OPPONENT]) == (PLAYER, 241)
    assert (m.darts_thrown(), m.darts_thrown(PLAYER), m.darts_thrown(OPPONENT)) == (6, 3, 3)


def test_reaching_zero_wins(layout) -> None:
    m = MatchState.new(start_score=50)
    m.record_shot(resolve_score(0.0, 0.0, layout))
    assert (m.is_over, m.winner, m.totals[PLAYER]) == (True, PLAYER, 0)
    assert m.check_turn() is False


def test_overshoot_still_finishes_the_leg(layout) -> None:
    m = MatchState.new(start_score=40)
    m.record_shot(resolve_score(0.6, 9.0, layout))  # treble 20
    assert (m.winner, m.totals[PLAYER]) == (PLAYER, -20)


def test_no_throws_after_the_leg_ends(layout) -> None:
    m = MatchState.new(start_score=20)
    m.record_shot(single_20(layout))
    with pytest.raises(RuntimeError):
        m.record_shot(single_20(layout))


def test_summary(layout) -> None:
    m = MatchState.new(darts_per_turn=2)
    m.record_shot(single_20(layout))
    assert m.summary() == {
        "totals": {PLAYER: 281, OPPONENT: 301},
        "turn": PLAYER,
        "darts_left": 1,
        "darts_thrown": 1,
        "winner": None,
    }


def test_other_side() -> None:
    assert (other_side(PLAYER), other_side(OPPONENT)) == (OPPONENT, PLAYER)
