"""A participant in a tournament."""

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

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional


@dataclass
class Participant:
    """Represents a participant in the tournament.

    Attributes
    ----------
    id : int
        Unique identifier within one tournament.
    name : str
        Display name.
    wins : int
        Number of matches won (Swiss byes included when configured).
    losses : int
        Number of matches lost.
    byes : int
        Number of rounds sat out with an automatic advance.
    eliminated : bool
        Whether the participant has been knocked out of an elimination bracket.
    eliminated_in_round : int or None
        Controller round in which the elimination happened.
    seed : int
        1-based registration order, assigned by the registry.
    """

    id: int
    name: str
    wins: int = 0
    losses: int = 0
    byes: int = 0
    eliminated: bool = False
    eliminated_in_round: Optional[int] = None
    seed: int = 0

    @property
    def has_received_bye(self) -> bool:
        return self.byes > 0

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.id})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "byes": self.byes,
            "eliminated": self.eliminated,
            "eliminated_in_round": self.eliminated_in_round,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            byes=data.get("byes", 0),
            eliminated=data.get("eliminated", False),
            eliminated_in_round=data.get("eliminated_in_round"),
            seed=data.get("seed", 0),
        )


def create_roster(names: Iterable[str], start_id: int = 1) -> List[Participant]:
    """Build an ordered roster, numbering ids from ``start_id``.

    Example:
        >>> [str(p) for p in create_roster(["Ann", "Bob"])]
        ['Ann (ID: 1)', 'Bob (ID: 2)']
    """
    return [
        Participant(id=start_id + offset, name=name)
        for offset, name in enumerate(names)
    ]
