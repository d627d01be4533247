"""Round management for tournaments.

This module handles all round-related operations including engine selection,
round progression, and round history management.
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

from typing import List, Optional, Tuple, Union

from bracketpairing.exceptions import RoundNotCompleteException
from bracketpairing.models import (
    Match,
    PairingHistory,
    Participant,
    ParticipantRegistry,
    RoundData,
    TournamentConfig,
    TournamentType,
)
from bracketpairing.pairing import (
    DoubleEliminationBracket,
    SingleEliminationBracket,
    SwissSystem,
)
from bracketpairing.tournament.ranking import rank_swiss
from bracketpairing.utils import setup_logger

logger = setup_logger(__name__)

Engine = Union[SingleEliminationBracket, DoubleEliminationBracket, SwissSystem]


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Building the pairing engine for the tournament type
    - Tracking round history
    - Keeping the pairing history and bye records in step with new rounds
    """

    def __init__(
        self,
        config: TournamentConfig,
        registry: ParticipantRegistry,
        pairing_history: PairingHistory,
    ):
        """Initialize the round manager.

        Args:
            config: Tournament settings; ``tournament_type`` picks the engine
            registry: Participants of the tournament
            pairing_history: History of pairings to prevent repeats

        Raises:
            NotImplementedError: If the tournament type has no engine
        """
        self.config = config
        self.registry = registry
        self.pairing_history = pairing_history
        self.engine = self._create_engine()

    def _create_engine(self) -> Engine:
        tournament_type = self.config.tournament_type
        if tournament_type is TournamentType.SINGLE_ELIMINATION:
            return SingleEliminationBracket()
        elif tournament_type is TournamentType.DOUBLE_ELIMINATION:
            return DoubleEliminationBracket(self.config.grand_final_reset)
        elif tournament_type is TournamentType.SWISS:
            num_rounds = self.config.rounds_for(len(self.registry))
            logger.info(
                f"Swiss with {len(self.registry)} participants: {num_rounds} rounds"
            )
            return SwissSystem(num_rounds, self.config.swiss_bye_counts_as_win)
        raise NotImplementedError(
            f"Tournament type '{tournament_type}' is not implemented"
        )

    @property
    def is_swiss(self) -> bool:
        return self.config.tournament_type is TournamentType.SWISS

    @property
    def rounds(self) -> List[RoundData]:
        return self.engine.rounds

    @property
    def current_round(self) -> Optional[RoundData]:
        return self.rounds[-1] if self.rounds else None

    @property
    def current_round_number(self) -> int:
        """Get the current round number (1-indexed).

        Returns:
            The current round number, or 0 if no rounds have been created.
        """
        return len(self.rounds)

    @property
    def completed_rounds_count(self) -> int:
        """Get the number of completed rounds.

        Returns:
            Count of rounds whose matches all have a winner.
        """
        return sum(1 for round_data in self.rounds if round_data.is_completed)

    @property
    def champion_id(self) -> Optional[int]:
        return self.engine.champion_id

    @property
    def uncontested(self) -> bool:
        return self.engine.uncontested

    @property
    def is_complete(self) -> bool:
        return self.engine.is_complete

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            RoundData for the specified round, or None if invalid round number
        """
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        return None

    def locate_match(self, match_id: str) -> Optional[Tuple[RoundData, Match]]:
        """Find a match by id in any round, most recent first."""
        for round_data in reversed(self.rounds):
            match = round_data.get_match(match_id)
            if match is not None:
                return round_data, match
        return None

    def eliminates(self, match: Match, loser: Participant) -> bool:
        """Ask the engine whether ``loser`` is out after losing ``match``."""
        return self.engine.eliminates(match, loser)

    def create_next_round(self) -> Optional[RoundData]:
        """Open the next round.

        The first call opens round 1. Later calls require the current round
        to be complete and let the engine advance from it.

        Returns:
            The new round, or None if the engine reached its end state.

        Raises:
            RoundNotCompleteException: If the current round has pending matches
        """
        current = self.current_round
        if current is None:
            round_data = self._initialize()
        else:
            pending = current.pending_matches()
            if pending:
                raise RoundNotCompleteException(
                    current.round_number, [m.match_id for m in pending]
                )
            round_data = self._advance(current)

        if round_data is None:
            logger.info(
                f"No further rounds after {self.current_round_number} round(s)"
            )
            return None

        self._register(round_data)
        return round_data

    def _standings(self) -> List[Participant]:
        return rank_swiss(self.registry.active(), self.config.swiss_tiebreak)

    def _initialize(self) -> Optional[RoundData]:
        if self.is_swiss:
            return self.engine.initialize(self._standings(), self.pairing_history)
        return self.engine.initialize(self.registry.ids())

    def _advance(self, completed: RoundData) -> Optional[RoundData]:
        logger.info(f"Round {completed.round_number} completed")
        if self.is_swiss:
            return self.engine.advance(
                completed, self._standings(), self.pairing_history
            )
        return self.engine.advance(completed)

    def _register(self, round_data: RoundData) -> None:
        """Record the new round's pairs and bye."""
        for match in round_data.matches:
            self.pairing_history.add_pairing(match.participant_a, match.participant_b)

        if round_data.bye_id is not None:
            counts_as_win = self.is_swiss and self.config.swiss_bye_counts_as_win
            self.registry.record_bye(round_data.bye_id, counts_as_win)

        bye = self.registry.get(round_data.bye_id) if round_data.bye_id is not None else None
        logger.info(
            f"Created round {round_data.round_number} "
            f"({round_data.bracket.value} round {round_data.bracket_round}): "
            f"{len(round_data.matches)} match(es), bye: {bye if bye else 'None'}"
        )
