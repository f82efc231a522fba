"""Client-side entity graph for a bracket tournament service.

Decoded service responses are turned into a cross-referenced graph of
tournaments, participants and matches, with participant statistics
derived from match outcomes.
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

from bracketgraph.config import EngineConfig, load_config
from bracketgraph.exceptions import (
    BracketGraphException,
    DataConsistencyError,
    NotFoundError,
    PayloadDecodeError,
    RemoteRejectionError,
    TournamentStateError,
    UnexpectedShapeError,
)
from bracketgraph.graph import (
    RelationResolver,
    ResolvedGraph,
    diff_matches,
    find_participant,
    get_match,
    is_completed,
    list_matches,
    open_match_for,
    resolve_relations,
)
from bracketgraph.models import (
    Match,
    MatchState,
    Participant,
    Tournament,
    TournamentState,
    TournamentType,
)
from bracketgraph.remote import BracketSession, RemoteCall
from bracketgraph.wire import decode_response, decode_tournament

__version__ = "0.1.0"

__all__ = [
    "BracketSession",
    "RemoteCall",
    "EngineConfig",
    "load_config",
    "Tournament",
    "TournamentState",
    "TournamentType",
    "Participant",
    "Match",
    "MatchState",
    "RelationResolver",
    "ResolvedGraph",
    "resolve_relations",
    "find_participant",
    "list_matches",
    "get_match",
    "open_match_for",
    "is_completed",
    "diff_matches",
    "decode_tournament",
    "decode_response",
    "BracketGraphException",
    "DataConsistencyError",
    "NotFoundError",
    "PayloadDecodeError",
    "RemoteRejectionError",
    "TournamentStateError",
    "UnexpectedShapeError",
]
