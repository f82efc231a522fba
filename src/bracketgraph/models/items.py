"""Wrapper items mirroring the service's one-key JSON envelopes.

The service nests every embedded participant as ``{"participant": {...}}``
and every embedded match as ``{"match": {...}}``. These wrappers hold the
decoded entity until the relation resolver flattens them.
"""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bracketgraph.constants import WIRE_MATCH, WIRE_PARTICIPANT
from bracketgraph.models.match import Match
from bracketgraph.models.participant import Participant


@dataclass(frozen=True)
class ParticipantItem:
    participant: Participant

    def to_dict(self) -> Dict[str, Any]:
        return {WIRE_PARTICIPANT: self.participant.to_dict()}


@dataclass(frozen=True)
class MatchItem:
    # The service sends {"match": null} for placeholder slots
    match: Optional[Match]

    def to_dict(self) -> Dict[str, Any]:
        return {WIRE_MATCH: self.match.to_dict() if self.match else None}
