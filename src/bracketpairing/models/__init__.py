from bracketpairing.models.enums import Bracket, CompletionReason, TournamentType
from bracketpairing.models.match import Match
from bracketpairing.models.pairing_history import PairingHistory
from bracketpairing.models.participant import Participant, create_roster
from bracketpairing.models.registry import ParticipantRegistry
from bracketpairing.models.round_data import RoundData, TournamentResult
from bracketpairing.models.tournament_config import TournamentConfig

__all__ = [
    "Bracket",
    "CompletionReason",
    "TournamentType",
    "Match",
    "PairingHistory",
    "Participant",
    "create_roster",
    "ParticipantRegistry",
    "RoundData",
    "TournamentResult",
    "TournamentConfig",
]
