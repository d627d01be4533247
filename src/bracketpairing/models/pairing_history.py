"""Data models for tournament pairing history."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Set


@dataclass
class PairingHistory:
    """
    Tracks historical pairings to prevent repeat matches.

    The set only grows: pairs are added when a round is created and never
    removed.

    Attributes
    ----------
    previous_matches : set of frozenset of int
        Set containing frozensets of participant id pairs representing
        matches that have already been played.
    """

    previous_matches: Set[frozenset] = field(default_factory=set)

    def add_pairing(self, participant1_id: int, participant2_id: int) -> None:
        """Record that two participants have been paired."""
        self.previous_matches.add(frozenset({participant1_id, participant2_id}))

    def have_played(self, participant1_id: int, participant2_id: int) -> bool:
        """Check if two participants have previously played each other."""
        return frozenset({participant1_id, participant2_id}) in self.previous_matches

    def __len__(self) -> int:
        return len(self.previous_matches)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "previous_matches": sorted(sorted(pair) for pair in self.previous_matches),
        }
