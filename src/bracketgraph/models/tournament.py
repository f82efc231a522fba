"""Tournament data class - owner of participants and matches."""

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
from datetime import datetime
from typing import Any, Dict, List, Optional

from bracketgraph.constants import WIRE_MATCHES, WIRE_PARTICIPANTS
from bracketgraph.models.enums import TournamentState, TournamentType
from bracketgraph.models.items import MatchItem, ParticipantItem
from bracketgraph.models.match import Match
from bracketgraph.models.participant import Participant
from bracketgraph.utils import format_timestamp, parse_timestamp


@dataclass
class Tournament:
    """A tournament and the participants and matches it owns.

    A freshly decoded tournament carries its embedded entities in
    ``participant_items`` / ``match_items``. The relation resolver moves
    them into ``participants`` / ``matches`` and leaves the item lists
    empty.

    Attributes:
        id: Service-assigned tournament id
        url: Slug used in routes
        name: Display name
        state: Lifecycle state
        subdomain: Organization sub-domain, empty if none
        sub_url: Identifier the caller fetched this tournament with
    """

    id: int
    url: str = ""
    name: str = ""
    state: TournamentState = TournamentState.PENDING
    subdomain: str = ""
    full_url: str = ""
    tournament_type: Optional[TournamentType] = None
    description: str = ""
    game_name: str = ""
    participants_count: int = 0
    progress: int = 0
    started_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    sub_url: str = ""

    participant_items: List[ParticipantItem] = field(default_factory=list)
    match_items: List[Optional[MatchItem]] = field(default_factory=list)

    participants: List[Participant] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)

    def get_url(self) -> str:
        """Return ``"<subdomain>-<url>"`` or ``url`` without a sub-domain."""
        if self.subdomain:
            return f"{self.subdomain}-{self.url}"
        return self.url

    @property
    def has_pending_items(self) -> bool:
        """Whether wrapped items are still waiting to be resolved."""
        return bool(self.participant_items or self.match_items)

    @property
    def is_completed(self) -> bool:
        return self.state.is_finished

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament back to wire field names.

        Resolved entities are emitted in the wrapped wire form, so the
        result can be decoded and resolved again.
        """
        if self.has_pending_items:
            participants = [item.to_dict() for item in self.participant_items]
            matches = [item.to_dict() if item else None for item in self.match_items]
        else:
            participants = [ParticipantItem(p).to_dict() for p in self.participants]
            matches = [MatchItem(m).to_dict() for m in self.matches]

        return {
            "id": self.id,
            "url": self.url,
            "name": self.name,
            "state": self.state.value,
            "subdomain": self.subdomain or None,
            "full_challonge_url": self.full_url,
            "tournament_type": (
                self.tournament_type.value if self.tournament_type else None
            ),
            "description": self.description,
            "game_name": self.game_name,
            "participants_count": self.participants_count,
            "progress_meter": self.progress,
            "started_at": format_timestamp(self.started_at),
            "updated_at": format_timestamp(self.updated_at),
            WIRE_PARTICIPANTS: participants,
            WIRE_MATCHES: matches,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize the tournament's own fields from wire field names.

        Embedded participants and matches are left to
        :func:`bracketgraph.wire.decode_tournament`.

        Raises:
            PayloadDecodeError: If ``state`` or ``tournament_type`` is unknown
            KeyError: If ``id`` is missing
            ValueError: If a number or timestamp cannot be parsed
        """
        raw_type = data.get("tournament_type")
        return cls(
            id=int(data["id"]),
            url=data.get("url") or "",
            name=data.get("name") or "",
            state=TournamentState.parse(
                data.get("state") or TournamentState.PENDING.value
            ),
            subdomain=data.get("subdomain") or "",
            full_url=data.get("full_challonge_url") or "",
            tournament_type=TournamentType.parse(raw_type) if raw_type else None,
            description=data.get("description") or "",
            game_name=data.get("game_name") or "",
            participants_count=int(data.get("participants_count") or 0),
            progress=int(data.get("progress_meter") or 0),
            started_at=parse_timestamp(data.get("started_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )
