"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for running a tournament, coordinating the
round manager and result recorder behind a small API: ``next_round``,
``resolve``, ``start``, ``standings`` and ``history``.
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

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from bracketpairing.exceptions import (
    InvalidConfigurationException,
    TournamentStateException,
    UnknownMatchException,
)
from bracketpairing.models import (
    CompletionReason,
    Match,
    PairingHistory,
    Participant,
    ParticipantRegistry,
    TournamentConfig,
    TournamentResult,
    TournamentType,
)
from bracketpairing.tournament.ranking import rank_elimination, rank_swiss
from bracketpairing.tournament.result_recorder import ResultRecorder
from bracketpairing.tournament.round_manager import RoundManager
from bracketpairing.type_hints import WinnerDecider
from bracketpairing.utils import setup_logger
from bracketpairing.utils.validation import validate_roster

logger = setup_logger(__name__)


def _coerce_type(tournament_type: Union[TournamentType, str]) -> TournamentType:
    if isinstance(tournament_type, TournamentType):
        return tournament_type
    try:
        return TournamentType(tournament_type)
    except ValueError:
        raise InvalidConfigurationException(
            f"Unknown tournament type: {tournament_type!r}"
        ) from None


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - RoundManager: builds the pairing engine and opens rounds
    - ResultRecorder: validates and applies match results

    Participants and the config are copied on construction, so the caller's
    objects are never modified or consulted again. Every query returns copies.
    """

    def __init__(
        self,
        tournament_type: Union[TournamentType, str],
        participants: Iterable[Participant],
        config: Optional[TournamentConfig] = None,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        tournament_type: Pairing discipline, as enum or its string value
        participants: Roster in seeding order
        config: Optional settings; its ``tournament_type`` must agree

        Raises
        ------
        InvalidRosterException: If the roster is empty or has invalid entries
        InvalidConfigurationException: If the type or settings are invalid
        """
        tournament_type = _coerce_type(tournament_type)
        if config is None:
            config = TournamentConfig(tournament_type=tournament_type)
        elif config.tournament_type is not tournament_type:
            raise InvalidConfigurationException(
                f"Config is for {config.tournament_type.value}, "
                f"tournament is {tournament_type.value}"
            )
        config.validate()
        roster = validate_roster(participants)

        self.config = replace(config)
        self.registry = ParticipantRegistry(roster)
        self.pairing_history = PairingHistory()

        self.round_manager = RoundManager(
            config=self.config,
            registry=self.registry,
            pairing_history=self.pairing_history,
        )
        self.result_recorder = ResultRecorder()
        self._result: Optional[TournamentResult] = None

        logger.info(
            f"Created {tournament_type.value} tournament '{config.name}' "
            f"with {len(self.registry)} participant(s)"
        )

        if len(self.registry) < 2:
            self.next_round()

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def tournament_type(self) -> TournamentType:
        return self.config.tournament_type

    @property
    def current_round(self) -> int:
        """Controller round number of the latest round, 0 before the first."""
        return self.round_manager.current_round_number

    @property
    def is_complete(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[TournamentResult]:
        """Terminal result, or None while the tournament is running."""
        return self._result

    @property
    def winner(self) -> Optional[Participant]:
        if self._result is None or self._result.winner_id is None:
            return None
        return self.get_participant(self._result.winner_id)

    # ========== Round Management ==========

    def next_round(self) -> List[Match]:
        """Open the next round and return its pending matches.

        Returns:
            Copies of the new matches, or an empty list when the tournament
            has just finished.

        Raises:
            TournamentStateException: If the tournament is already complete
            RoundNotCompleteException: If the current round has pending matches
        """
        if self.is_complete:
            raise TournamentStateException(
                f"Tournament '{self.name}' is complete, no further rounds"
            )

        round_data = self.round_manager.create_next_round()
        if round_data is None:
            self._finalize()
            return []
        return [replace(match) for match in round_data.matches]

    def resolve(self, match_id: str, winner_id: int) -> None:
        """Record the winner of a pending match.

        Raises:
            UnknownMatchException: If no match has ``match_id``
            InvalidWinnerException: If ``winner_id`` did not play in the match
            MatchAlreadyResolvedException: If the match already has a winner
        """
        located = self.round_manager.locate_match(match_id)
        if located is None:
            raise UnknownMatchException(f"No match with id '{match_id}'")
        round_data, match = located

        self.result_recorder.record_result(
            match,
            winner_id,
            self.registry,
            round_data.round_number,
            self.round_manager.eliminates,
        )

    def start(self, decide_winner: WinnerDecider) -> TournamentResult:
        """Play the tournament to the end.

        Args:
            decide_winner: Called with a copy of each pending match, returns
                the winner's id

        Returns:
            The terminal result
        """
        while not self.is_complete:
            for match in self.pending_matches():
                self.resolve(match.match_id, decide_winner(match))
            self.next_round()
        return self._result

    def pending_matches(self) -> List[Match]:
        current = self.round_manager.current_round
        if current is None:
            return []
        return [replace(match) for match in current.pending_matches()]

    # ========== Queries ==========

    def get_participant(self, participant_id: int) -> Optional[Participant]:
        if participant_id not in self.registry:
            return None
        return replace(self.registry.get(participant_id))

    def standings(self) -> List[Tuple[Participant, int, int]]:
        """Ranked (participant, wins, losses) rows.

        Swiss ranks by wins and the configured tiebreak; elimination
        brackets rank the champion first, then by how long each participant
        survived.
        """
        return [(p, p.wins, p.losses) for p in self._ranked()]

    def history(self) -> List[Match]:
        """Resolved matches in the order their rounds were played."""
        return [
            replace(match)
            for round_data in self.round_manager.rounds
            for match in round_data.matches
            if match.is_resolved
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the tournament for export."""
        return {
            "config": self.config.to_dict(),
            "participants": [p.to_dict() for p in self.registry.snapshot()],
            "rounds": [r.to_dict() for r in self.round_manager.rounds],
            "pairing_history": self.pairing_history.to_dict(),
            "standings": [
                {"id": p.id, "name": p.name, "wins": wins, "losses": losses}
                for p, wins, losses in self.standings()
            ],
            "result": self._result.to_dict() if self._result else None,
        }

    # ========== Internals ==========

    def _ranked(self) -> List[Participant]:
        participants = self.registry.snapshot()
        if self.tournament_type.is_elimination:
            return rank_elimination(participants, self.round_manager.champion_id)
        return rank_swiss(participants, self.config.swiss_tiebreak)

    def _finalize(self) -> None:
        ranking = [p.id for p in self._ranked()]
        if self.round_manager.uncontested:
            reason = CompletionReason.UNCONTESTED
        elif self.tournament_type.is_elimination:
            reason = CompletionReason.BRACKET_DECIDED
        else:
            reason = CompletionReason.ROUNDS_EXHAUSTED

        if self.tournament_type.is_elimination:
            winner_id = self.round_manager.champion_id
        else:
            winner_id = ranking[0] if ranking else None

        self._result = TournamentResult(
            tournament_type=self.tournament_type,
            winner_id=winner_id,
            ranking=ranking,
            reason=reason,
            rounds_played=self.round_manager.completed_rounds_count,
        )
        logger.info(
            f"Tournament '{self.name}' complete ({reason.value}), "
            f"winner: {self.winner if self.winner else 'None'}"
        )
