import pytest

from bracketpairing import (
    Bracket,
    CompletionReason,
    Tournament,
    TournamentConfig,
    TournamentType,
    create_roster,
)
from bracketpairing.testing import ResultPattern, SimulationConfig, simulate_tournament


def _roster(count):
    return create_roster(f"Player {i}" for i in range(1, count + 1))


def _tournament(count, reset=True):
    config = TournamentConfig(
        tournament_type=TournamentType.DOUBLE_ELIMINATION, grand_final_reset=reset
    )
    return Tournament(TournamentType.DOUBLE_ELIMINATION, _roster(count), config)


def _play_to_grand_final(tournament):
    """Four players: 1 wins the winners bracket, 2 wins the losers bracket."""
    w1 = tournament.next_round()
    assert [(m.match_id, m.participant_a, m.participant_b) for m in w1] == [
        ("W1-M1", 1, 2),
        ("W1-M2", 3, 4),
    ]
    tournament.resolve("W1-M1", 1)
    tournament.resolve("W1-M2", 3)

    l1 = tournament.next_round()
    assert [(m.match_id, m.participant_a, m.participant_b) for m in l1] == [
        ("L1-M1", 2, 4)
    ]
    assert l1[0].bracket is Bracket.LOSERS
    tournament.resolve("L1-M1", 2)
    assert tournament.get_participant(4).eliminated

    w2 = tournament.next_round()
    assert [(m.match_id, m.participant_a, m.participant_b) for m in w2] == [
        ("W2-M1", 1, 3)
    ]
    tournament.resolve("W2-M1", 1)

    l2 = tournament.next_round()
    assert [(m.match_id, m.participant_a, m.participant_b) for m in l2] == [
        ("L2-M1", 2, 3)
    ]
    tournament.resolve("L2-M1", 2)

    final = tournament.next_round()
    assert [(m.match_id, m.participant_a, m.participant_b) for m in final] == [
        ("GF-M1", 1, 2)
    ]
    assert final[0].bracket is Bracket.GRAND_FINAL
    return final[0]


def test_winners_finalist_takes_grand_final():
    tournament = _tournament(4)
    _play_to_grand_final(tournament)

    tournament.resolve("GF-M1", 1)
    assert tournament.next_round() == []

    assert tournament.result.winner_id == 1
    assert tournament.result.reason is CompletionReason.BRACKET_DECIDED
    assert tournament.result.rounds_played == 5
    assert tournament.get_participant(2).losses == 2
    assert tournament.result.ranking == [1, 2, 3, 4]


def test_grand_final_reset_played_when_losers_finalist_wins():
    tournament = _tournament(4, reset=True)
    _play_to_grand_final(tournament)

    tournament.resolve("GF-M1", 2)
    assert not tournament.get_participant(1).eliminated
    assert tournament.get_participant(1).losses == 1

    reset = tournament.next_round()
    assert [(m.match_id, m.participant_a, m.participant_b) for m in reset] == [
        ("GF-M2", 1, 2)
    ]

    tournament.resolve("GF-M2", 2)
    assert tournament.next_round() == []
    assert tournament.result.winner_id == 2
    assert tournament.get_participant(1).losses == 2
    assert tournament.get_participant(1).eliminated


def test_grand_final_without_reset_ends_on_first_final():
    tournament = _tournament(4, reset=False)
    _play_to_grand_final(tournament)

    tournament.resolve("GF-M1", 2)
    assert tournament.next_round() == []

    assert tournament.result.winner_id == 2
    runner_up = tournament.get_participant(1)
    assert runner_up.eliminated
    assert runner_up.losses == 1


@pytest.mark.parametrize("count", range(2, 14))
def test_every_eliminated_participant_lost_twice(count):
    config = SimulationConfig(
        tournament_type=TournamentType.DOUBLE_ELIMINATION,
        num_players=count,
        seed=100 + count,
    )
    tournament, result = simulate_tournament(config)

    champion = tournament.get_participant(result.winner_id)
    assert champion.losses <= 1
    assert not champion.eliminated

    for participant, _, losses in tournament.standings():
        if participant.id != champion.id:
            assert participant.eliminated
            assert losses == 2

    assert len(tournament.history()) == 2 * (count - 1) + champion.losses


def test_no_participant_plays_after_second_loss():
    config = SimulationConfig(
        tournament_type=TournamentType.DOUBLE_ELIMINATION,
        num_players=9,
        seed=3,
    )
    tournament, _ = simulate_tournament(config)

    losses = {}
    for match in tournament.history():
        for pid in (match.participant_a, match.participant_b):
            assert losses.get(pid, 0) < 2
        losses[match.loser] = losses.get(match.loser, 0) + 1


def test_favourite_wins_without_losing():
    config = SimulationConfig(
        tournament_type=TournamentType.DOUBLE_ELIMINATION,
        num_players=8,
        result_pattern=ResultPattern.FAVOURITE,
    )
    tournament, result = simulate_tournament(config)

    assert result.winner_id == 1
    assert tournament.get_participant(1).losses == 0
    assert len(tournament.history()) == 14


def test_match_rounds_count_within_bracket():
    config = SimulationConfig(
        tournament_type=TournamentType.DOUBLE_ELIMINATION,
        num_players=8,
        seed=11,
    )
    tournament, _ = simulate_tournament(config)

    for round_data in tournament.round_manager.rounds:
        for match in round_data.matches:
            assert match.bracket is round_data.bracket
            assert match.round == round_data.bracket_round
