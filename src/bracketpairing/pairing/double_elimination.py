"""Double elimination bracket.

Participants start in the winners bracket. A first loss moves them to the
back of the losers-bracket queue; a second loss eliminates them.

Batches alternate between the two brackets: winners round N is followed by
losers round N, which pairs the losers-bracket survivors first and then the
winners round N drops, index 2i against 2i+1. A bracket with fewer than two
live participants is skipped. Once each bracket is down to one participant
the two finalists meet in the grand final. With ``grand_final_reset`` on, a
losers-bracket finalist who wins that match forces a second, deciding match.
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

from typing import Dict, List, Optional, Sequence

from bracketpairing.constants import (
    DEFAULT_GRAND_FINAL_RESET,
    DOUBLE_ELIMINATION_LOSS_LIMIT,
    MATCH_PREFIX_GRAND_FINAL,
    MATCH_PREFIX_LOSERS,
    MATCH_PREFIX_WINNERS,
)
from bracketpairing.models.enums import Bracket
from bracketpairing.models.match import Match
from bracketpairing.models.participant import Participant
from bracketpairing.models.round_data import RoundData
from bracketpairing.pairing.single_elimination import ensure_completed, pair_in_order
from bracketpairing.utils import setup_logger

logger = setup_logger(__name__)

_PREFIXES = {
    Bracket.WINNERS: MATCH_PREFIX_WINNERS,
    Bracket.LOSERS: MATCH_PREFIX_LOSERS,
}


class DoubleEliminationBracket:
    """Winners and losers bracket lines feeding a grand final."""

    def __init__(self, grand_final_reset: bool = DEFAULT_GRAND_FINAL_RESET):
        self.grand_final_reset = grand_final_reset
        self.rounds: List[RoundData] = []
        self.winners_pool: List[int] = []
        self.losers_pool: List[int] = []
        self.champion_id: Optional[int] = None
        self.uncontested = False
        self._bracket_rounds: Dict[Bracket, int] = {bracket: 0 for bracket in Bracket}
        self._last_bracket: Optional[Bracket] = None
        self._reset_pending = False

    @property
    def is_complete(self) -> bool:
        return self.uncontested or self.champion_id is not None

    def initialize(self, participant_ids: Sequence[int]) -> Optional[RoundData]:
        """Put everyone in the winners bracket and open winners round 1.

        Returns:
            The first round, or None for an uncontested bracket.
        """
        ids = list(participant_ids)
        if len(ids) <= 1:
            self.champion_id = ids[0] if ids else None
            self.uncontested = True
            logger.info(f"Double elimination uncontested, champion: {self.champion_id}")
            return None
        self.winners_pool = ids
        return self._schedule_next(round_number=1)

    def advance(self, completed_round: RoundData) -> Optional[RoundData]:
        """Route the finished round's results and open the next batch.

        Returns:
            The next round, or None once the grand final is decided.

        Raises:
            RoundNotCompleteException: If the round still has pending matches
        """
        ensure_completed(completed_round)
        self._apply(completed_round)
        if self.champion_id is not None:
            logger.info(f"Double elimination decided, champion: {self.champion_id}")
            return None
        return self._schedule_next(completed_round.round_number + 1)

    def eliminates(self, match: Match, loser: Participant) -> bool:
        """Whether the loss just recorded for ``loser`` knocks them out.

        Called after the loss is counted. The winners-bracket finalist losing
        the first grand final survives into the reset match; with the reset
        disabled that loss is final.
        """
        if match.bracket is Bracket.GRAND_FINAL:
            if loser.losses >= DOUBLE_ELIMINATION_LOSS_LIMIT:
                return True
            return not (self.grand_final_reset and match.round == 1)
        return loser.losses >= DOUBLE_ELIMINATION_LOSS_LIMIT

    def _apply(self, round_data: RoundData) -> None:
        if round_data.bracket is Bracket.WINNERS:
            self.winners_pool = round_data.winners()
            self.losers_pool.extend(round_data.losers())
        elif round_data.bracket is Bracket.LOSERS:
            self.losers_pool = round_data.winners()
        else:
            final = round_data.matches[0]
            winners_finalist = self.winners_pool[0]
            needs_reset = (
                self.grand_final_reset
                and round_data.bracket_round == 1
                and final.winner != winners_finalist
            )
            if needs_reset:
                logger.info(
                    f"Losers-bracket finalist {final.winner} won the grand final, "
                    "bracket reset"
                )
                self._reset_pending = True
            else:
                self.champion_id = final.winner

    def _schedule_next(self, round_number: int) -> Optional[RoundData]:
        if self._reset_pending:
            self._reset_pending = False
            return self._open_grand_final(round_number)

        if self._last_bracket is Bracket.WINNERS:
            order = [Bracket.LOSERS, Bracket.WINNERS]
        else:
            order = [Bracket.WINNERS, Bracket.LOSERS]
        for bracket in order:
            pool = self._pool(bracket)
            if len(pool) >= 2:
                return self._open(bracket, pool, round_number)

        if self.winners_pool and self.losers_pool:
            return self._open_grand_final(round_number)

        # a lone survivor with nobody left to play
        self.champion_id = (self.winners_pool or self.losers_pool)[0]
        return None

    def _pool(self, bracket: Bracket) -> List[int]:
        if bracket is Bracket.WINNERS:
            return self.winners_pool
        return self.losers_pool

    def _open(self, bracket: Bracket, pool: List[int], round_number: int) -> RoundData:
        self._bracket_rounds[bracket] += 1
        round_data = pair_in_order(
            list(pool),
            round_number,
            self._bracket_rounds[bracket],
            bracket=bracket,
            prefix=_PREFIXES[bracket],
        )
        return self._record(round_data)

    def _open_grand_final(self, round_number: int) -> RoundData:
        self._bracket_rounds[Bracket.GRAND_FINAL] += 1
        bracket_round = self._bracket_rounds[Bracket.GRAND_FINAL]
        final = Match(
            match_id=f"{MATCH_PREFIX_GRAND_FINAL}-M{bracket_round}",
            participant_a=self.winners_pool[0],
            participant_b=self.losers_pool[0],
            round=bracket_round,
            bracket=Bracket.GRAND_FINAL,
        )
        round_data = RoundData(
            round_number=round_number,
            bracket=Bracket.GRAND_FINAL,
            bracket_round=bracket_round,
            matches=[final],
        )
        return self._record(round_data)

    def _record(self, round_data: RoundData) -> RoundData:
        self._last_bracket = round_data.bracket
        self.rounds.append(round_data)
        return round_data
