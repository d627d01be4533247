"""Tournament management for Bracket Pairing.

This package ties the pairing engines to a participant registry and exposes
the ``Tournament`` controller used to run a tournament round by round.
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

from bracketpairing.tournament.ranking import (
    rank_elimination,
    rank_swiss,
    sort_key_for,
)
from bracketpairing.tournament.result_recorder import ResultRecorder
from bracketpairing.tournament.round_manager import RoundManager
from bracketpairing.tournament.tournament import Tournament

__all__ = [
    "Tournament",
    "RoundManager",
    "ResultRecorder",
    "rank_elimination",
    "rank_swiss",
    "sort_key_for",
]
