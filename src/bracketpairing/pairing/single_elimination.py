"""Single elimination bracket."""

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

from typing import List, Optional, Sequence

from bracketpairing.constants import MATCH_PREFIX_ROUND, SINGLE_ELIMINATION_LOSS_LIMIT
from bracketpairing.exceptions import RoundNotCompleteException
from bracketpairing.models.enums import Bracket
from bracketpairing.models.match import Match
from bracketpairing.models.participant import Participant
from bracketpairing.models.round_data import RoundData
from bracketpairing.utils import setup_logger

logger = setup_logger(__name__)


def pair_in_order(
    participant_ids: Sequence[int],
    round_number: int,
    bracket_round: int,
    bracket: Bracket = Bracket.WINNERS,
    prefix: str = MATCH_PREFIX_ROUND,
) -> RoundData:
    """Pair index 2i with 2i+1; an odd last participant gets the bye.

    Args:
        participant_ids: Ids in seeding order
        round_number: Controller round number
        bracket_round: Round number within the bracket line
        bracket: Bracket line the matches belong to
        prefix: Match id prefix

    Returns:
        The new round, with no match created for the bye participant
    """
    round_data = RoundData(
        round_number=round_number, bracket=bracket, bracket_round=bracket_round
    )
    for i in range(0, len(participant_ids) - 1, 2):
        round_data.matches.append(
            Match(
                match_id=f"{prefix}{bracket_round}-M{len(round_data.matches) + 1}",
                participant_a=participant_ids[i],
                participant_b=participant_ids[i + 1],
                round=bracket_round,
                bracket=bracket,
            )
        )
    if len(participant_ids) % 2 == 1:
        round_data.bye_id = participant_ids[-1]
    return round_data


def ensure_completed(round_data: RoundData) -> None:
    """Raise RoundNotCompleteException if any match of the round is pending."""
    pending = round_data.pending_matches()
    if pending:
        raise RoundNotCompleteException(
            round_data.round_number, [m.match_id for m in pending]
        )


class SingleEliminationBracket:
    """Single elimination: one loss and you are out.

    Each round pairs the advancing participants in order. The bracket is
    decided when exactly one participant remains, which takes
    ceil(log2(N)) rounds and N - 1 matches.
    """

    def __init__(self):
        self.rounds: List[RoundData] = []
        self.champion_id: Optional[int] = None
        self.uncontested = False

    @property
    def is_complete(self) -> bool:
        return self.uncontested or self.champion_id is not None

    def initialize(self, participant_ids: Sequence[int]) -> Optional[RoundData]:
        """Seed round 1 in input order.

        Returns:
            The first round, or None when zero or one participant means the
            bracket terminates immediately (``uncontested`` is set).
        """
        ids = list(participant_ids)
        if len(ids) <= 1:
            self.champion_id = ids[0] if ids else None
            self.uncontested = True
            logger.info(f"Single elimination uncontested, champion: {self.champion_id}")
            return None
        return self._open(ids, round_number=1)

    def advance(self, completed_round: RoundData) -> Optional[RoundData]:
        """Move winners (and the bye) on to the next round.

        Returns:
            The next round, or None once a champion is decided.

        Raises:
            RoundNotCompleteException: If the round still has pending matches
        """
        ensure_completed(completed_round)
        advancing = completed_round.winners()
        if len(advancing) == 1:
            self.champion_id = advancing[0]
            logger.info(f"Single elimination decided, champion: {self.champion_id}")
            return None
        return self._open(advancing, completed_round.round_number + 1)

    def eliminates(self, match: Match, loser: Participant) -> bool:
        return loser.losses >= SINGLE_ELIMINATION_LOSS_LIMIT

    def _open(self, participant_ids: List[int], round_number: int) -> RoundData:
        round_data = pair_in_order(participant_ids, round_number, round_number)
        self.rounds.append(round_data)
        return round_data
