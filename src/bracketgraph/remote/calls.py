"""Outbound call descriptions handed to the transport shell."""

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
from typing import Any, Dict

from bracketgraph.constants import (
    API_VERSION,
    INCLUDE_FLAG,
    INCLUDE_MATCHES,
    INCLUDE_PARTICIPANTS,
    METHOD_DELETE,
    METHOD_GET,
    METHOD_POST,
    METHOD_PUT,
    TOURNAMENTS_ROUTE,
)
from bracketgraph.type_hints import ParamMap

HTTP_METHODS = (METHOD_GET, METHOD_POST, METHOD_PUT, METHOD_DELETE)


@dataclass(frozen=True)
class RemoteCall:
    """One request for the transport shell to perform.

    Attributes:
        method: HTTP method
        route: Route below the API version, e.g. ``tournaments/my-cup/start``
        params: Query/form parameters, string to string
        api_version: Version prefix the shell puts in front of ``route``
    """

    method: str
    route: str
    params: ParamMap = field(default_factory=dict)
    api_version: str = API_VERSION

    def __post_init__(self) -> None:
        if self.method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method {self.method!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "route": self.route,
            "params": dict(self.params),
            "api_version": self.api_version,
        }


class TournamentRequest:
    """Builder for fetching one tournament.

    Example:
        >>> call = session.tournament_request("my-cup").with_participants().with_matches().call()
    """

    def __init__(self, tournament_id: str, api_version: str = API_VERSION) -> None:
        self.id = tournament_id
        self.api_version = api_version
        self.params: ParamMap = {}

    def with_participants(self) -> "TournamentRequest":
        self.params[INCLUDE_PARTICIPANTS] = INCLUDE_FLAG
        return self

    def with_matches(self) -> "TournamentRequest":
        self.params[INCLUDE_MATCHES] = INCLUDE_FLAG
        return self

    def call(self) -> RemoteCall:
        return RemoteCall(
            method=METHOD_GET,
            route=f"{TOURNAMENTS_ROUTE}/{self.id}",
            params=dict(self.params),
            api_version=self.api_version,
        )
