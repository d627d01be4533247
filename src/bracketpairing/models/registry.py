"""Participant registry: the single owner of participant records."""

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

from dataclasses import replace
from typing import Dict, Iterable, Iterator, List

from bracketpairing.exceptions import DuplicateParticipantException
from bracketpairing.models.participant import Participant
from bracketpairing.utils import setup_logger

logger = setup_logger(__name__)


class ParticipantRegistry:
    """Owns every participant of one tournament, indexed by id.

    Matches refer to participants by id only; all win/loss bookkeeping goes
    through this registry. Registration order is preserved and recorded as
    each participant's ``seed``.
    """

    def __init__(self, participants: Iterable[Participant] = ()):
        self._participants: Dict[int, Participant] = {}
        for participant in participants:
            self.register(participant)

    def register(self, participant: Participant) -> Participant:
        """Store a private copy of ``participant`` and return it.

        Raises:
            DuplicateParticipantException: If the id is already registered
        """
        if participant.id in self._participants:
            raise DuplicateParticipantException(
                f"Duplicate participant id: {participant.id}"
            )
        stored = replace(participant, seed=len(self._participants) + 1)
        self._participants[stored.id] = stored
        return stored

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self._participants

    def __iter__(self) -> Iterator[Participant]:
        return iter(self._participants.values())

    def __len__(self) -> int:
        return len(self._participants)

    def get(self, participant_id: int) -> Participant:
        return self._participants[participant_id]

    def ids(self) -> List[int]:
        """Participant ids in registration order."""
        return list(self._participants)

    def active(self) -> List[Participant]:
        return [p for p in self._participants.values() if not p.eliminated]

    def record_result(self, winner_id: int, loser_id: int) -> None:
        winner = self._participants[winner_id]
        loser = self._participants[loser_id]
        winner.wins += 1
        loser.losses += 1
        logger.debug(
            f"Recorded: {winner} ({winner.wins}-{winner.losses}) beat "
            f"{loser} ({loser.wins}-{loser.losses})"
        )

    def record_bye(self, participant_id: int, counts_as_win: bool) -> None:
        participant = self._participants[participant_id]
        participant.byes += 1
        if counts_as_win:
            participant.wins += 1
        logger.debug(
            f"Recorded bye for {participant} (counts as win: {counts_as_win})"
        )

    def eliminate(self, participant_id: int, round_number: int) -> None:
        participant = self._participants[participant_id]
        participant.eliminated = True
        participant.eliminated_in_round = round_number
        logger.info(
            f"{participant} eliminated in round {round_number} "
            f"with {participant.losses} loss(es)"
        )

    def snapshot(self) -> List[Participant]:
        """Copies of all participants, safe to hand to callers."""
        return [replace(p) for p in self._participants.values()]
