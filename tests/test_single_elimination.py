import math

import pytest

from bracketpairing import (
    CompletionReason,
    Tournament,
    TournamentType,
    create_roster,
)
from bracketpairing.exceptions import InvalidRosterException, TournamentStateException
from bracketpairing.pairing import SingleEliminationBracket, pair_in_order
from bracketpairing.testing import ResultPattern, SimulationConfig, simulate_tournament


def _roster(count):
    return create_roster(f"Player {i}" for i in range(1, count + 1))


def _pairs(matches):
    return [(m.participant_a, m.participant_b) for m in matches]


def test_four_player_scenario():
    tournament = Tournament(TournamentType.SINGLE_ELIMINATION, _roster(4))

    first = tournament.next_round()
    assert _pairs(first) == [(1, 2), (3, 4)]
    assert [m.match_id for m in first] == ["R1-M1", "R1-M2"]

    tournament.resolve("R1-M1", 1)
    tournament.resolve("R1-M2", 3)

    second = tournament.next_round()
    assert _pairs(second) == [(1, 3)]

    tournament.resolve(second[0].match_id, 1)
    assert tournament.next_round() == []

    assert tournament.is_complete
    assert tournament.winner.id == 1
    assert tournament.result.reason is CompletionReason.BRACKET_DECIDED
    assert tournament.result.rounds_played == 2
    assert tournament.result.ranking[0] == 1


@pytest.mark.parametrize("count", range(2, 18))
def test_round_and_match_counts(count):
    config = SimulationConfig(
        tournament_type=TournamentType.SINGLE_ELIMINATION,
        num_players=count,
        seed=count,
    )
    tournament, result = simulate_tournament(config)

    assert result.rounds_played == math.ceil(math.log2(count))
    assert len(tournament.history()) == count - 1

    for participant, wins, losses in tournament.standings():
        if participant.id == result.winner_id:
            assert losses == 0
            assert not participant.eliminated
        else:
            assert losses == 1
            assert participant.eliminated


def test_eliminated_participants_are_never_paired_again():
    config = SimulationConfig(
        tournament_type=TournamentType.SINGLE_ELIMINATION,
        num_players=11,
        seed=7,
    )
    tournament, _ = simulate_tournament(config)

    out_after = {}
    for match in tournament.history():
        for pid in (match.participant_a, match.participant_b):
            assert pid not in out_after
        out_after[match.loser] = match.match_id


def test_odd_last_participant_gets_bye():
    tournament = Tournament(TournamentType.SINGLE_ELIMINATION, _roster(3))
    matches = tournament.next_round()

    assert _pairs(matches) == [(1, 2)]
    assert tournament.round_manager.current_round.bye_id == 3
    assert tournament.get_participant(3).byes == 1
    # an elimination bye is not a win
    assert tournament.get_participant(3).wins == 0

    tournament.resolve("R1-M1", 2)
    assert _pairs(tournament.next_round()) == [(2, 3)]


def test_single_participant_is_uncontested():
    tournament = Tournament("single_elimination", _roster(1))

    assert tournament.is_complete
    assert tournament.result.reason is CompletionReason.UNCONTESTED
    assert tournament.result.is_uncontested
    assert tournament.result.winner_id == 1
    assert tournament.result.rounds_played == 0
    assert tournament.history() == []

    with pytest.raises(TournamentStateException):
        tournament.next_round()


def test_empty_roster_rejected():
    with pytest.raises(InvalidRosterException):
        Tournament(TournamentType.SINGLE_ELIMINATION, [])


def test_favourite_always_wins():
    config = SimulationConfig(
        tournament_type=TournamentType.SINGLE_ELIMINATION,
        num_players=16,
        result_pattern=ResultPattern.FAVOURITE,
    )
    _, result = simulate_tournament(config)
    assert result.winner_id == 1


def test_pair_in_order_labels_matches():
    round_data = pair_in_order([5, 9, 2, 7, 4], round_number=3, bracket_round=2)

    assert [m.match_id for m in round_data.matches] == ["R2-M1", "R2-M2"]
    assert _pairs(round_data.matches) == [(5, 9), (2, 7)]
    assert round_data.bye_id == 4
    assert round_data.round_number == 3


def test_engine_terminates_without_match_for_one_participant():
    bracket = SingleEliminationBracket()
    assert bracket.initialize([42]) is None
    assert bracket.uncontested
    assert bracket.champion_id == 42
    assert bracket.is_complete
