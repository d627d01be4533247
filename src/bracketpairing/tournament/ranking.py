"""Standings order for finished and running tournaments."""

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

from typing import Callable, Iterable, List, Optional

from bracketpairing.constants import (
    TB_FEWEST_LOSSES,
    TB_NAME,
    TB_REGISTRATION_ORDER,
    TIEBREAK_NAMES,
)
from bracketpairing.exceptions import InvalidConfigurationException
from bracketpairing.models.participant import Participant

_SORT_KEYS = {
    TB_REGISTRATION_ORDER: lambda p: (-p.wins, p.seed),
    TB_FEWEST_LOSSES: lambda p: (-p.wins, p.losses, p.seed),
    TB_NAME: lambda p: (-p.wins, p.name, p.seed),
}


def sort_key_for(tiebreak: str) -> Callable[[Participant], tuple]:
    """Return the sort key for a Swiss tiebreak rule.

    Every key ends with the seed, so the order is total.

    Raises:
        InvalidConfigurationException: If the rule is unknown
    """
    try:
        return _SORT_KEYS[tiebreak]
    except KeyError:
        raise InvalidConfigurationException(
            f"Unknown Swiss tiebreak '{tiebreak}'. "
            f"Expected one of: {', '.join(TIEBREAK_NAMES)}"
        ) from None


def rank_swiss(
    participants: Iterable[Participant], tiebreak: str = TB_REGISTRATION_ORDER
) -> List[Participant]:
    """Wins descending, equal wins ordered by ``tiebreak``."""
    return sorted(participants, key=sort_key_for(tiebreak))


def rank_elimination(
    participants: Iterable[Participant], champion_id: Optional[int] = None
) -> List[Participant]:
    """Champion first, then survivors, then the later an exit the better.

    Participants knocked out in the same round are ordered by wins, losses
    and seed.
    """

    def key(p: Participant):
        return (
            p.id != champion_id,
            p.eliminated,
            -(p.eliminated_in_round or 0),
            -p.wins,
            p.losses,
            p.seed,
        )

    return sorted(participants, key=key)
