"""Data model for tournament round."""

# Bracket Pairing
# Copyright (C) 2025  Bracket Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bracketpairing.models.enums import Bracket, CompletionReason, TournamentType
from bracketpairing.models.match import Match


@dataclass
class RoundData:
    """Container for all matches paired together in one controller round.

    Attributes
    ----------
    round_number : int
        Controller round number (1-indexed, counts every batch).
    bracket : Bracket
        Bracket line the round's matches belong to.
    bracket_round : int
        Round number within that bracket line.
    matches : list of Match
        Matches paired for this round.
    bye_id : int or None
        Id of the participant advancing without a match, or None.
    """

    round_number: int
    bracket: Bracket = Bracket.WINNERS
    bracket_round: int = 1
    matches: List[Match] = field(default_factory=list)
    bye_id: Optional[int] = None

    @property
    def is_completed(self) -> bool:
        return all(match.is_resolved for match in self.matches)

    def pending_matches(self) -> List[Match]:
        return [match for match in self.matches if not match.is_resolved]

    def get_match(self, match_id: str) -> Optional[Match]:
        for match in self.matches:
            if match.match_id == match_id:
                return match
        return None

    def winners(self) -> List[int]:
        """Advancing ids: match winners in pairing order, then the bye."""
        advancing = [match.winner for match in self.matches if match.is_resolved]
        if self.bye_id is not None:
            advancing.append(self.bye_id)
        return advancing

    def losers(self) -> List[int]:
        return [match.loser for match in self.matches if match.loser is not None]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "bracket": self.bracket.value,
            "bracket_round": self.bracket_round,
            "matches": [m.to_dict() for m in self.matches],
            "bye_id": self.bye_id,
        }


@dataclass
class TournamentResult:
    """Terminal outcome of a tournament.

    ``winner_id`` is None only for an uncontested tournament with no
    participants; ``ranking`` lists every participant id best first.
    """

    tournament_type: TournamentType
    winner_id: Optional[int]
    ranking: List[int]
    reason: CompletionReason
    rounds_played: int

    @property
    def is_uncontested(self) -> bool:
        return self.reason is CompletionReason.UNCONTESTED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tournament_type": self.tournament_type.value,
            "winner_id": self.winner_id,
            "ranking": list(self.ranking),
            "reason": self.reason.value,
            "rounds_played": self.rounds_played,
        }
