"""Match data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bracketpairing.exceptions import (
    InvalidWinnerException,
    MatchAlreadyResolvedException,
)
from bracketpairing.models.enums import Bracket


@dataclass
class Match:
    """Represents one paired contest.

    Attributes
    ----------
    match_id : str
        Identifier unique within the tournament (e.g. ``"R1-M2"``).
    participant_a : int
        Id of the first participant.
    participant_b : int or None
        Id of the second participant; ``None`` marks a bye.
    round : int
        Round number within the match's bracket line.
    bracket : Bracket
        Bracket line the match belongs to.
    winner : int or None
        Id of the winner once resolved.
    """

    match_id: str
    participant_a: int
    participant_b: Optional[int]
    round: int
    bracket: Bracket = Bracket.WINNERS
    winner: Optional[int] = None

    @property
    def is_bye(self) -> bool:
        return self.participant_b is None

    @property
    def is_resolved(self) -> bool:
        return self.winner is not None

    @property
    def loser(self) -> Optional[int]:
        """Id of the losing participant, or None if unresolved or a bye."""
        if self.winner is None or self.participant_b is None:
            return None
        if self.winner == self.participant_a:
            return self.participant_b
        return self.participant_a

    def involves(self, participant_id: int) -> bool:
        return participant_id in (self.participant_a, self.participant_b)

    def pair_key(self) -> frozenset:
        return frozenset({self.participant_a, self.participant_b})

    def check_winner(self, winner_id: int) -> None:
        """Raise unless ``winner_id`` may be recorded as this match's winner."""
        if self.is_resolved:
            raise MatchAlreadyResolvedException(
                f"Match {self.match_id} already resolved (winner {self.winner})"
            )
        if self.is_bye or winner_id not in (self.participant_a, self.participant_b):
            raise InvalidWinnerException(
                f"Participant {winner_id} did not play in match {self.match_id}"
            )

    def resolve(self, winner_id: int) -> None:
        """Record the winner. A match is resolved exactly once.

        Raises:
            MatchAlreadyResolvedException: If a winner was already recorded
            InvalidWinnerException: If ``winner_id`` is not one of the two participants
        """
        self.check_winner(winner_id)
        self.winner = winner_id

    def __str__(self) -> str:
        if self.winner is not None:
            return (
                f"{self.participant_a} vs {self.participant_b} - "
                f"Winner: {self.winner}"
            )
        return f"{self.participant_a} vs {self.participant_b} - No winner yet"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "match_id": self.match_id,
            "participant_a": self.participant_a,
            "participant_b": self.participant_b,
            "round": self.round,
            "bracket": self.bracket.value,
            "winner": self.winner,
        }
