"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
"""

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

from typing import Callable

from bracketpairing.models import Match, Participant, ParticipantRegistry
from bracketpairing.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Rejecting winners that did not play the match
    - Preventing duplicate result recording
    - Updating participant records
    - Marking participants eliminated when the engine says so
    """

    def record_result(
        self,
        match: Match,
        winner_id: int,
        registry: ParticipantRegistry,
        round_number: int,
        eliminates: Callable[[Match, Participant], bool],
    ) -> None:
        """Resolve ``match`` and apply it to the registry.

        All checks run before anything is written, so a rejected result
        leaves the match and the registry untouched.

        Args:
            match: Pending match to resolve
            winner_id: Id of the winning participant
            registry: Participant records to update
            round_number: Controller round, stored on an elimination
            eliminates: Engine rule deciding whether the loser is out

        Raises:
            InvalidWinnerException: If ``winner_id`` did not play in the match
            MatchAlreadyResolvedException: If the match already has a winner
        """
        match.check_winner(winner_id)
        match.resolve(winner_id)

        loser_id = match.loser
        registry.record_result(winner_id, loser_id)

        loser = registry.get(loser_id)
        if eliminates(match, loser):
            registry.eliminate(loser_id, round_number)
        else:
            logger.debug(f"{loser} stays in with {loser.losses} loss(es)")
