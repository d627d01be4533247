"""TournamentConfig data class."""

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

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from bracketpairing.constants import (
    DEFAULT_GRAND_FINAL_RESET,
    DEFAULT_SWISS_BYE_COUNTS_AS_WIN,
    DEFAULT_SWISS_TIEBREAK,
    TIEBREAK_NAMES,
)
from bracketpairing.exceptions import InvalidConfigurationException
from bracketpairing.models.enums import TournamentType


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    tournament_type : TournamentType
        Pairing discipline.
    name : str
        Tournament name.
    num_rounds : int or None
        Swiss round count. None means ceil(log2(N)) for N participants.
    grand_final_reset : bool
        Double elimination: play a second final when the losers-bracket
        finalist wins the first one.
    swiss_tiebreak : str
        Deterministic rule ordering equal win counts. One of
        "registration_order", "fewest_losses" or "name".
    swiss_bye_counts_as_win : bool
        Whether a Swiss bye adds a win to the participant's record.
    """

    tournament_type: TournamentType
    name: str = "Untitled Tournament"
    num_rounds: Optional[int] = None
    grand_final_reset: bool = DEFAULT_GRAND_FINAL_RESET
    swiss_tiebreak: str = DEFAULT_SWISS_TIEBREAK
    swiss_bye_counts_as_win: bool = DEFAULT_SWISS_BYE_COUNTS_AS_WIN

    def validate(self) -> None:
        """Check the settings.

        Raises:
            InvalidConfigurationException: If any setting is out of range
        """
        if not isinstance(self.tournament_type, TournamentType):
            raise InvalidConfigurationException(
                f"Unknown tournament type: {self.tournament_type!r}"
            )
        if self.num_rounds is not None:
            if isinstance(self.num_rounds, bool) or not isinstance(self.num_rounds, int):
                raise InvalidConfigurationException(
                    f"num_rounds must be an integer, got {self.num_rounds!r}"
                )
            if self.num_rounds < 1:
                raise InvalidConfigurationException(
                    f"num_rounds must be at least 1, got {self.num_rounds}"
                )
        if self.swiss_tiebreak not in TIEBREAK_NAMES:
            raise InvalidConfigurationException(
                f"Unknown Swiss tiebreak '{self.swiss_tiebreak}'. "
                f"Expected one of: {', '.join(TIEBREAK_NAMES)}"
            )

    def rounds_for(self, participant_count: int) -> int:
        """Number of Swiss rounds to play for ``participant_count`` players."""
        if participant_count < 2:
            return 0
        if self.num_rounds is not None:
            return self.num_rounds
        return max(1, math.ceil(math.log2(participant_count)))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "tournament_type": self.tournament_type.value,
            "name": self.name,
            "num_rounds": self.num_rounds,
            "grand_final_reset": self.grand_final_reset,
            "swiss_tiebreak": self.swiss_tiebreak,
            "swiss_bye_counts_as_win": self.swiss_bye_counts_as_win,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        try:
            tournament_type = TournamentType(data["tournament_type"])
        except (KeyError, ValueError) as e:
            raise InvalidConfigurationException(
                f"Invalid tournament type in config: {data.get('tournament_type')!r}"
            ) from e
        return cls(
            tournament_type=tournament_type,
            name=data.get("name", "Untitled Tournament"),
            num_rounds=data.get("num_rounds"),
            grand_final_reset=data.get("grand_final_reset", DEFAULT_GRAND_FINAL_RESET),
            swiss_tiebreak=data.get("swiss_tiebreak", DEFAULT_SWISS_TIEBREAK),
            swiss_bye_counts_as_win=data.get(
                "swiss_bye_counts_as_win", DEFAULT_SWISS_BYE_COUNTS_AS_WIN
            ),
        )
