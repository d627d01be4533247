import pytest

from bracketpairing.exceptions import (
    DuplicateParticipantException,
    InvalidConfigurationException,
    InvalidWinnerException,
    MatchAlreadyResolvedException,
)
from bracketpairing.models import (
    Bracket,
    Match,
    PairingHistory,
    Participant,
    ParticipantRegistry,
    TournamentConfig,
    TournamentType,
    create_roster,
)
from bracketpairing.utils.validation import (
    validate_participant_id,
    validate_participant_name,
)


def _match(**overrides):
    fields = dict(match_id="W1-M1", participant_a=1, participant_b=2, round=1)
    fields.update(overrides)
    return Match(**fields)


def test_participant_str():
    assert str(Participant(id=7, name="Ada")) == "Ada (ID: 7)"


def test_create_roster_numbers_from_start_id():
    roster = create_roster(["Ann", "Bob", "Cy"], start_id=10)
    assert [(p.id, p.name) for p in roster] == [(10, "Ann"), (11, "Bob"), (12, "Cy")]
    assert all(p.wins == 0 and p.losses == 0 for p in roster)


def test_participant_from_dict_defaults():
    participant = Participant.from_dict({"id": 3, "name": "Cy"})
    assert participant == Participant(id=3, name="Cy")


def test_match_resolve_and_loser():
    match = _match()
    assert not match.is_resolved
    assert match.loser is None
    assert str(match) == "1 vs 2 - No winner yet"

    match.resolve(2)

    assert match.is_resolved
    assert match.loser == 1
    assert str(match) == "1 vs 2 - Winner: 2"


def test_match_rejects_outsider_and_second_result():
    match = _match()
    with pytest.raises(InvalidWinnerException):
        match.resolve(5)
    assert match.winner is None

    match.resolve(1)
    with pytest.raises(MatchAlreadyResolvedException):
        match.resolve(2)
    assert match.winner == 1


def test_bye_match_has_no_winner_to_pick():
    match = _match(participant_b=None)
    assert match.is_bye
    with pytest.raises(InvalidWinnerException):
        match.resolve(1)


def test_match_pair_key_is_unordered():
    assert _match().pair_key() == _match(participant_a=2, participant_b=1).pair_key()
    assert _match().involves(2)
    assert not _match().involves(3)


def test_match_to_dict():
    data = _match(bracket=Bracket.LOSERS, match_id="L1-M1").to_dict()
    assert data["bracket"] == "losers"
    assert data["winner"] is None


def test_registry_assigns_seeds_in_order():
    registry = ParticipantRegistry(create_roster(["A", "B", "C"]))
    assert registry.ids() == [1, 2, 3]
    assert [registry.get(pid).seed for pid in registry.ids()] == [1, 2, 3]
    assert 2 in registry
    assert 9 not in registry
    assert len(registry) == 3


def test_registry_rejects_duplicate():
    registry = ParticipantRegistry([Participant(id=1, name="A")])
    with pytest.raises(DuplicateParticipantException):
        registry.register(Participant(id=1, name="Again"))


def test_registry_records_results_byes_and_eliminations():
    registry = ParticipantRegistry(create_roster(["A", "B", "C"]))

    registry.record_result(1, 2)
    registry.record_bye(3, counts_as_win=False)
    registry.eliminate(2, round_number=1)

    assert (registry.get(1).wins, registry.get(1).losses) == (1, 0)
    assert (registry.get(2).wins, registry.get(2).losses) == (0, 1)
    assert registry.get(3).byes == 1
    assert registry.get(3).wins == 0
    assert registry.get(2).eliminated_in_round == 1
    assert [p.id for p in registry.active()] == [1, 3]


def test_registry_snapshot_is_detached():
    registry = ParticipantRegistry(create_roster(["A"]))
    snapshot = registry.snapshot()
    snapshot[0].wins = 5
    assert registry.get(1).wins == 0


def test_pairing_history():
    history = PairingHistory()
    history.add_pairing(1, 2)
    assert history.have_played(2, 1)
    assert not history.have_played(1, 3)
    assert len(history) == 1


def test_config_rounds_for():
    config = TournamentConfig(tournament_type=TournamentType.SWISS)
    assert config.rounds_for(1) == 0
    assert config.rounds_for(2) == 1
    assert config.rounds_for(5) == 3
    assert config.rounds_for(16) == 4

    config.num_rounds = 6
    assert config.rounds_for(4) == 6


@pytest.mark.parametrize(
    "settings",
    [
        {"num_rounds": 0},
        {"num_rounds": "3"},
        {"swiss_tiebreak": "buchholz"},
    ],
)
def test_config_validation(settings):
    config = TournamentConfig(tournament_type=TournamentType.SWISS, **settings)
    with pytest.raises(InvalidConfigurationException):
        config.validate()


def test_config_from_dict():
    config = TournamentConfig.from_dict(
        {"tournament_type": "double_elimination", "grand_final_reset": False}
    )
    assert config.tournament_type is TournamentType.DOUBLE_ELIMINATION
    assert config.grand_final_reset is False
    assert config.to_dict()["tournament_type"] == "double_elimination"

    with pytest.raises(InvalidConfigurationException):
        TournamentConfig.from_dict({"tournament_type": "ladder"})


def test_field_validators():
    assert validate_participant_id(0)
    assert not validate_participant_id(False)
    assert not validate_participant_id("1")
    assert validate_participant_name("  Ada ").sanitized_value == "Ada"
    assert not validate_participant_name(None)
