"""Tournament simulator - drives whole tournaments with seedable random results.

This module stands in for the outside world around the pairing engine: it
builds rosters and decides match winners, so complete tournaments can be
played from the command line and in tests.
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

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from bracketpairing.constants import DEFAULT_GRAND_FINAL_RESET, DEFAULT_SWISS_TIEBREAK
from bracketpairing.models import (
    Match,
    Participant,
    TournamentConfig,
    TournamentResult,
    TournamentType,
    create_roster,
)
from bracketpairing.tournament import Tournament
from bracketpairing.utils import setup_logger

logger = setup_logger(__name__)

# Probability that the better seed wins under UPSET_FRIENDLY
UPSET_FRIENDLY_FAVOURITE_ODDS = 0.6


class ResultPattern(Enum):
    """Result generation patterns for simulated matches."""

    RANDOM = "random"
    FAVOURITE = "favourite"
    UPSET_FRIENDLY = "upset_friendly"


@dataclass
class SimulationConfig:
    """Configuration for a simulated tournament."""

    tournament_type: TournamentType
    num_players: int = 8
    num_rounds: Optional[int] = None
    result_pattern: ResultPattern = ResultPattern.RANDOM
    seed: Optional[int] = None
    grand_final_reset: bool = DEFAULT_GRAND_FINAL_RESET
    swiss_tiebreak: str = DEFAULT_SWISS_TIEBREAK
    shuffle_roster: bool = False
    name: str = "Simulated Tournament"

    def to_tournament_config(self) -> TournamentConfig:
        return TournamentConfig(
            tournament_type=self.tournament_type,
            name=self.name,
            num_rounds=self.num_rounds,
            grand_final_reset=self.grand_final_reset,
            swiss_tiebreak=self.swiss_tiebreak,
        )


class RosterFactory:
    """Factory for creating simulation rosters."""

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def create_participants(self) -> List[Participant]:
        """Create ``Player 1`` .. ``Player N``, optionally in shuffled seeding order."""
        participants = create_roster(
            f"Player {i}" for i in range(1, self.config.num_players + 1)
        )
        if self.config.shuffle_roster:
            self.random.shuffle(participants)
        logger.info(f"Created {len(participants)} participants")
        return participants


class ResultSimulator:
    """Decides match winners.

    The better seed is the participant listed earlier in the roster.
    """

    def __init__(self, config: SimulationConfig, roster: Sequence[Participant]):
        self.config = config
        self.seeds: Dict[int, int] = {p.id: index for index, p in enumerate(roster)}
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def __call__(self, match: Match) -> int:
        return self.decide_winner(match)

    def decide_winner(self, match: Match) -> int:
        """Return the winner's id for a pending match."""
        a, b = match.participant_a, match.participant_b
        if self.config.result_pattern == ResultPattern.RANDOM:
            return a if self.random.random() < 0.5 else b

        favourite, underdog = (a, b) if self.seeds[a] < self.seeds[b] else (b, a)
        if self.config.result_pattern == ResultPattern.FAVOURITE:
            return favourite
        if self.random.random() < UPSET_FRIENDLY_FAVOURITE_ODDS:
            return favourite
        return underdog


def simulate_tournament(
    config: SimulationConfig,
) -> Tuple[Tournament, TournamentResult]:
    """Build a roster, run the tournament to completion and return both."""
    roster = RosterFactory(config).create_participants()
    tournament = Tournament(
        config.tournament_type, roster, config.to_tournament_config()
    )
    simulator = ResultSimulator(config, roster)
    result = tournament.start(simulator)
    logger.info(
        f"Simulated {config.tournament_type.value} with {config.num_players} "
        f"participants in {result.rounds_played} round(s)"
    )
    return tournament, result
