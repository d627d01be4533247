"""Pairing engines: single elimination, double elimination and Swiss."""

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

from bracketpairing.pairing.double_elimination import DoubleEliminationBracket
from bracketpairing.pairing.single_elimination import (
    SingleEliminationBracket,
    pair_in_order,
)
from bracketpairing.pairing.swiss import (
    SwissSystem,
    find_pairing,
    group_by_score,
    pair_round,
)

__all__ = [
    "SingleEliminationBracket",
    "DoubleEliminationBracket",
    "SwissSystem",
    "pair_in_order",
    "pair_round",
    "find_pairing",
    "group_by_score",
]
