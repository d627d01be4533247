"""Type hints used in Bracket Pairing."""

from typing import Callable, List, Optional, Tuple

MaybeParticipantId = Optional[int]

# Tuple of participant ids in one match
MatchPairing = Tuple[int, int]
# Matches plus the id of the participant sitting out
Pairings = Tuple[List["Match"], MaybeParticipantId]

# Result-determination collaborator: given a pending match, name its winner
WinnerDecider = Callable[["Match"], int]

#  LocalWords:  MatchPairing WinnerDecider
