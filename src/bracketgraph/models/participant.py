"""Participant data class."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Participant:
    """A registered participant of one tournament.

    Attributes
    ----------
    id : int
        Service-assigned participant id.
    name : str
        Display name (``display_name`` on the wire).
    misc : str
        Free-form tag, usable as an alternate lookup key.
    seed : int
        Bracket seed.
    final_rank : int or None
        Final placing reported by the service once the tournament ends.
    wins, losses, total_score : int
        Derived from complete matches by the relation resolver, never read
        from the wire.
    """

    id: int
    name: str = ""
    misc: str = ""
    seed: int = 0
    final_rank: Optional[int] = None
    wins: int = field(default=0, compare=False)
    losses: int = field(default=0, compare=False)
    total_score: int = field(default=0, compare=False)

    def win(self) -> None:
        self.wins += 1

    def lose(self) -> None:
        self.losses += 1

    def add_score(self, score: int) -> None:
        self.total_score += score

    def reset_statistics(self) -> None:
        """Zero the derived counters before matches are attributed again."""
        self.wins = 0
        self.losses = 0
        self.total_score = 0

    @property
    def matches_decided(self) -> int:
        return self.wins + self.losses

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to its wire field names."""
        return {
            "id": self.id,
            "display_name": self.name,
            "misc": self.misc,
            "seed": self.seed,
            "final_rank": self.final_rank,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from its wire field names.

        ``display_name`` wins over ``name`` when both are present.
        """
        return cls(
            id=int(data["id"]),
            name=data.get("display_name") or data.get("name") or "",
            misc=data.get("misc") or "",
            seed=int(data.get("seed") or 0),
            final_rank=(
                int(data["final_rank"]) if data.get("final_rank") is not None else None
            ),
        )
