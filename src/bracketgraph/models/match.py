"""Match data class and score string helpers."""

# Bracket Graph
# Copyright (C) 2025  Bracket Graph developers
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

import dataclasses
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from bracketgraph.constants import SCORE_SEPARATOR, SET_SEPARATOR
from bracketgraph.models.enums import MatchState
from bracketgraph.models.participant import Participant
from bracketgraph.type_hints import MaybeMatchId
from bracketgraph.utils import format_timestamp, parse_timestamp

_SET_PATTERN = re.compile(r"^\s*(-?\d+)\s*-\s*(-?\d+)\s*$")


def parse_scores_csv(scores_csv: Optional[str]) -> Tuple[int, int]:
    """Sum a ``scores_csv`` string into per-player totals.

    Supports formats like:
      ""            -> (0, 0)
      "3-1"         -> (3, 1)
      "3-1,2-3"     -> (5, 4)
      "-1-3"        -> (-1, 3)

    Raises:
        ValueError: If a set is not of the form ``a-b``
    """
    if not scores_csv or not scores_csv.strip():
        return 0, 0

    one_total = 0
    two_total = 0
    for part in scores_csv.split(SET_SEPARATOR):
        match = _SET_PATTERN.match(part)
        if match is None:
            raise ValueError(f"Invalid set score {part!r} in {scores_csv!r}")
        one_total += int(match.group(1))
        two_total += int(match.group(2))
    return one_total, two_total


def format_scores(player_one_score: int, player_two_score: int) -> str:
    """Render a single-set score the way the service expects it (``3-1``)."""
    return f"{player_one_score}{SCORE_SEPARATOR}{player_two_score}"


@dataclass
class Match:
    """A single bracket match.

    Player and winner ids are ``0`` while the slot is still undecided.
    ``player_one``, ``player_two`` and ``winner`` are non-owning references
    into the owning tournament's participants; they are only populated by
    the relation resolver, and only for complete matches.
    """

    id: int
    state: MatchState = MatchState.PENDING
    round: int = 0
    identifier: str = ""
    player_one_id: int = 0
    player_two_id: int = 0
    player_one_prereq_match_id: MaybeMatchId = None
    player_two_prereq_match_id: MaybeMatchId = None
    winner_id: int = 0
    scores_csv: str = ""
    player_one_score: int = 0
    player_two_score: int = 0
    updated_at: Optional[datetime] = None

    player_one: Optional[Participant] = field(
        default=None, compare=False, repr=False
    )
    player_two: Optional[Participant] = field(
        default=None, compare=False, repr=False
    )
    winner: Optional[Participant] = field(default=None, compare=False, repr=False)

    @property
    def is_complete(self) -> bool:
        return self.state is MatchState.COMPLETE

    @property
    def is_open(self) -> bool:
        return self.state is MatchState.OPEN

    @property
    def has_resolved_references(self) -> bool:
        return self.player_one is not None or self.player_two is not None

    @property
    def has_valid_result(self) -> bool:
        """Complete, two distinct players, and the winner is one of them."""
        return (
            self.is_complete
            and bool(self.player_one_id)
            and bool(self.player_two_id)
            and self.player_one_id != self.player_two_id
            and self.winner_id in self.player_ids
        )

    @property
    def player_ids(self) -> Tuple[int, int]:
        return self.player_one_id, self.player_two_id

    @property
    def loser_id(self) -> int:
        """Id of the player who did not win, or ``0`` without a valid winner."""
        if self.winner_id and self.winner_id == self.player_one_id:
            return self.player_two_id
        if self.winner_id and self.winner_id == self.player_two_id:
            return self.player_one_id
        return 0

    @property
    def prerequisite_ids(self) -> List[int]:
        """Ids of the matches feeding this one, player one's side first."""
        return [
            match_id
            for match_id in (
                self.player_one_prereq_match_id,
                self.player_two_prereq_match_id,
            )
            if match_id is not None
        ]

    def involves(self, participant_id: int) -> bool:
        return bool(participant_id) and participant_id in self.player_ids

    def without_references(self) -> "Match":
        """Copy of this match with the resolved references cleared."""
        return dataclasses.replace(
            self, player_one=None, player_two=None, winner=None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to its wire field names."""
        return {
            "id": self.id,
            "identifier": self.identifier,
            "state": self.state.value,
            "round": self.round,
            "player1_id": self.player_one_id or None,
            "player2_id": self.player_two_id or None,
            "player1_prereq_match_id": self.player_one_prereq_match_id,
            "player2_prereq_match_id": self.player_two_prereq_match_id,
            "winner_id": self.winner_id or None,
            "scores_csv": self.scores_csv,
            "updated_at": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from its wire field names.

        Raises:
            PayloadDecodeError: If ``state`` is not a known match state
            ValueError: If ``scores_csv`` or ``updated_at`` cannot be parsed
        """
        scores_csv = data.get("scores_csv") or ""
        player_one_score, player_two_score = parse_scores_csv(scores_csv)
        return cls(
            id=int(data["id"]),
            state=MatchState.parse(data.get("state", MatchState.PENDING.value)),
            round=int(data.get("round") or 0),
            identifier=data.get("identifier") or "",
            player_one_id=int(data.get("player1_id") or 0),
            player_two_id=int(data.get("player2_id") or 0),
            player_one_prereq_match_id=_optional_int(
                data.get("player1_prereq_match_id")
            ),
            player_two_prereq_match_id=_optional_int(
                data.get("player2_prereq_match_id")
            ),
            winner_id=int(data.get("winner_id") or 0),
            scores_csv=scores_csv,
            player_one_score=player_one_score,
            player_two_score=player_two_score,
            updated_at=parse_timestamp(data.get("updated_at")),
        )


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(value)
