"""Swiss-system pairing.

Participants are grouped by win count and paired inside their score group,
never against a previous opponent when that can be avoided. The search is
exhaustive: a rematch only appears when no repeat-free pairing of the current
standings exists at all.
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

from itertools import groupby
from operator import attrgetter
from typing import (
    AbstractSet,
    Dict,
    Iterable,
    List,
    Optional,
    Sequence,
    Set,
    Tuple,
)

from bracketpairing.constants import (
    DEFAULT_SWISS_BYE_COUNTS_AS_WIN,
    MATCH_PREFIX_ROUND,
)
from bracketpairing.exceptions import NoPairingAvailableException
from bracketpairing.models.enums import Bracket
from bracketpairing.models.match import Match
from bracketpairing.models.pairing_history import PairingHistory
from bracketpairing.models.participant import Participant
from bracketpairing.models.round_data import RoundData
from bracketpairing.pairing.single_elimination import ensure_completed
from bracketpairing.type_hints import MatchPairing, Pairings
from bracketpairing.utils import setup_logger

logger = setup_logger(__name__)


def group_by_score(
    standings: Iterable[Participant],
) -> List[Tuple[int, List[Participant]]]:
    """Split standings into score groups, highest win count first.

    The incoming order is kept inside each group, so the caller's tiebreak
    decides who is paired first.
    """
    ordered = sorted(standings, key=lambda p: -p.wins)
    return [(wins, list(group)) for wins, group in groupby(ordered, key=attrgetter("wins"))]


def _opponent_order(
    top: int,
    rest: Sequence[int],
    wins: Dict[int, int],
    history: PairingHistory,
    allow_repeats: bool,
) -> List[int]:
    """Candidates for ``top``: fresh opponents first, then by score gap, then rank."""
    candidates = []
    for index, participant_id in enumerate(rest):
        repeat = history.have_played(top, participant_id)
        if repeat and not allow_repeats:
            continue
        gap = abs(wins[top] - wins[participant_id])
        candidates.append((repeat, gap, index, participant_id))
    candidates.sort()
    return [candidate[-1] for candidate in candidates]


def find_pairing(
    participant_ids: Sequence[int],
    wins: Dict[int, int],
    history: PairingHistory,
    allow_repeats: bool = False,
) -> Optional[List[MatchPairing]]:
    """Pair everyone in ``participant_ids`` (an even count, ranked order).

    Depth-first search: the highest-ranked unpaired participant takes the
    nearest-score opponent first, backtracking when the rest cannot be
    paired. Remaining sets already proven unpairable are memoized.

    Returns:
        List of (higher ranked, lower ranked) id pairs, or None if no pairing
        exists without repeats and ``allow_repeats`` is False.
    """
    failed: Set[frozenset] = set()

    def search(remaining: Tuple[int, ...]) -> Optional[List[MatchPairing]]:
        if not remaining:
            return []
        key = frozenset(remaining)
        if key in failed:
            return None
        top, rest = remaining[0], remaining[1:]
        for opponent in _opponent_order(top, rest, wins, history, allow_repeats):
            tail = search(tuple(pid for pid in rest if pid != opponent))
            if tail is not None:
                return [(top, opponent)] + tail
        failed.add(key)
        return None

    return search(tuple(participant_ids))


def _bye_candidates(
    ordered: Sequence[Participant], bye_recipients: AbstractSet[int]
) -> List[Participant]:
    """No previous bye first, then fewest wins, then lowest ranked."""

    def had_bye(participant: Participant) -> bool:
        return participant.id in bye_recipients or participant.has_received_bye

    ranked = list(enumerate(ordered))
    ranked.sort(key=lambda item: (had_bye(item[1]), item[1].wins, -item[0]))
    return [participant for _, participant in ranked]


def _pair_with_bye(
    ordered: Sequence[Participant],
    wins: Dict[int, int],
    history: PairingHistory,
    bye_recipients: AbstractSet[int],
) -> Tuple[int, List[MatchPairing]]:
    candidates = _bye_candidates(ordered, bye_recipients)
    for candidate in candidates:
        rest = [p.id for p in ordered if p.id != candidate.id]
        pairs = find_pairing(rest, wins, history)
        if pairs is not None:
            if candidate.id in bye_recipients or candidate.has_received_bye:
                logger.warning(
                    f"All bye candidates without a bye would force a rematch, "
                    f"assigning second bye to {candidate}"
                )
            return candidate.id, pairs

    candidate = candidates[0]
    logger.warning(
        f"No repeat-free pairing exists for {len(ordered)} participants, "
        f"allowing rematches (bye: {candidate})"
    )
    rest = [p.id for p in ordered if p.id != candidate.id]
    return candidate.id, find_pairing(rest, wins, history, allow_repeats=True)


def pair_round(
    standings: Sequence[Participant],
    pairing_history: PairingHistory,
    round_number: int = 1,
    bye_recipients: AbstractSet[int] = frozenset(),
) -> Pairings:
    """Compute one Swiss round.

    Args:
        standings: Active participants in ranking order
        pairing_history: Pairs already played; never modified here
        round_number: Round being paired, used for match ids
        bye_recipients: Ids that already sat out a round

    Returns:
        Tuple of (matches, bye participant id or None). Exactly one bye is
        given when the participant count is odd.

    Raises:
        NoPairingAvailableException: If fewer than two participants remain
    """
    if len(standings) < 2:
        raise NoPairingAvailableException(
            f"Cannot pair round {round_number} with {len(standings)} participant(s)"
        )

    ordered = [p for _, group in group_by_score(standings) for p in group]
    wins = {p.id: p.wins for p in ordered}
    bye_id: Optional[int] = None

    if len(ordered) % 2 == 1:
        bye_id, pairs = _pair_with_bye(ordered, wins, pairing_history, bye_recipients)
    else:
        ids = [p.id for p in ordered]
        pairs = find_pairing(ids, wins, pairing_history)
        if pairs is None:
            logger.warning(
                f"Round {round_number}: no repeat-free pairing exists, "
                "allowing rematches"
            )
            pairs = find_pairing(ids, wins, pairing_history, allow_repeats=True)

    matches = [
        Match(
            match_id=f"{MATCH_PREFIX_ROUND}{round_number}-M{index}",
            participant_a=a,
            participant_b=b,
            round=round_number,
            bracket=Bracket.WINNERS,
        )
        for index, (a, b) in enumerate(pairs, start=1)
    ]
    return matches, bye_id


class SwissSystem:
    """Fixed number of Swiss rounds; nobody is eliminated.

    Attributes:
        num_rounds: Rounds to play before the final ranking
        bye_counts_as_win: Whether a bye adds a win to the record
        bye_recipients: Ids that have sat out a round
    """

    def __init__(
        self,
        num_rounds: int,
        bye_counts_as_win: bool = DEFAULT_SWISS_BYE_COUNTS_AS_WIN,
    ):
        self.num_rounds = num_rounds
        self.bye_counts_as_win = bye_counts_as_win
        self.rounds: List[RoundData] = []
        self.bye_recipients: Set[int] = set()
        self.uncontested = False
        self.champion_id: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.uncontested or len(self.rounds) >= self.num_rounds

    def initialize(
        self, standings: Sequence[Participant], pairing_history: PairingHistory
    ) -> Optional[RoundData]:
        """Open round 1, or return None when there is nothing to play."""
        if self.num_rounds < 1 or len(standings) < 2:
            self.uncontested = True
            logger.info(f"Swiss uncontested with {len(standings)} participant(s)")
            return None
        return self._open(1, standings, pairing_history)

    def advance(
        self,
        completed_round: RoundData,
        standings: Sequence[Participant],
        pairing_history: PairingHistory,
    ) -> Optional[RoundData]:
        """Open the next round, or return None after ``num_rounds`` rounds.

        Raises:
            RoundNotCompleteException: If the round still has pending matches
        """
        ensure_completed(completed_round)
        if len(self.rounds) >= self.num_rounds:
            logger.info(f"Swiss finished after {len(self.rounds)} rounds")
            return None
        return self._open(completed_round.round_number + 1, standings, pairing_history)

    def eliminates(self, match: Match, loser: Participant) -> bool:
        return False

    def _open(
        self,
        round_number: int,
        standings: Sequence[Participant],
        pairing_history: PairingHistory,
    ) -> RoundData:
        matches, bye_id = pair_round(
            standings, pairing_history, round_number, self.bye_recipients
        )
        if bye_id is not None:
            self.bye_recipients.add(bye_id)
        round_data = RoundData(
            round_number=round_number,
            bracket=Bracket.WINNERS,
            bracket_round=round_number,
            matches=matches,
            bye_id=bye_id,
        )
        self.rounds.append(round_data)
        return round_data
