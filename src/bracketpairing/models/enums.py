"""Enumerations shared across the tournament models."""

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

from enum import Enum

from bracketpairing.constants import (
    TYPE_DOUBLE_ELIMINATION,
    TYPE_SINGLE_ELIMINATION,
    TYPE_SWISS,
)


class TournamentType(Enum):
    """Pairing discipline of a tournament."""

    SINGLE_ELIMINATION = TYPE_SINGLE_ELIMINATION
    DOUBLE_ELIMINATION = TYPE_DOUBLE_ELIMINATION
    SWISS = TYPE_SWISS

    @property
    def is_elimination(self) -> bool:
        return self is not TournamentType.SWISS


class Bracket(Enum):
    """Bracket line a match belongs to."""

    WINNERS = "winners"
    LOSERS = "losers"
    GRAND_FINAL = "grand_final"


class CompletionReason(Enum):
    """Why a tournament reached its terminal state."""

    # Zero or one participant: nothing was played
    UNCONTESTED = "uncontested"
    # An elimination final produced a champion
    BRACKET_DECIDED = "bracket_decided"
    # Swiss reached its configured number of rounds
    ROUNDS_EXHAUSTED = "rounds_exhausted"
