"""Caller-owned session: builds outbound calls and applies their responses.

A session never talks to the network. Each operation is split in two:
a method returning a :class:`RemoteCall` for the transport shell, and a
``handle_*`` method taking the decoded JSON body the shell got back.
Handlers check the service's ``errors`` list before anything else and
return new values instead of mutating the tournament they are given.
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

import dataclasses
from typing import Any, List, Optional, Tuple

from bracketgraph.config import EngineConfig
from bracketgraph.constants import (
    INCLUDE_FLAG,
    INCLUDE_MATCHES,
    INCLUDE_PARTICIPANTS,
    LIST_STATE_ALL,
    LIST_STATES,
    LOOKUP_NAME,
    MATCHES_ROUTE,
    METHOD_DELETE,
    METHOD_GET,
    METHOD_POST,
    METHOD_PUT,
    PARAM_MATCH_SCORES,
    PARAM_MATCH_WINNER,
    PARAM_PARTICIPANT_MISC,
    PARAM_PARTICIPANT_NAME,
    PARAM_STATE,
    PARAM_SUBDOMAIN,
    PARAM_TOURNAMENT_DESCRIPTION,
    PARAM_TOURNAMENT_NAME,
    PARAM_TOURNAMENT_OPEN_SIGNUP,
    PARAM_TOURNAMENT_SUBDOMAIN,
    PARAM_TOURNAMENT_TYPE,
    PARAM_TOURNAMENT_URL,
    PARAM_TYPE,
    PARTICIPANTS_ROUTE,
    TOURNAMENTS_ROUTE,
)
from bracketgraph.exceptions import (
    DataConsistencyError,
    NotFoundError,
    RemoteRejectionError,
    TournamentStateError,
    UnexpectedShapeError,
)
from bracketgraph.graph import RelationResolver, ResolvedGraph, require_match
from bracketgraph.graph.query import require_participant
from bracketgraph.models import (
    Match,
    Participant,
    Tournament,
    TournamentState,
    TournamentType,
    format_scores,
)
from bracketgraph.remote.calls import RemoteCall, TournamentRequest
from bracketgraph.type_hints import ParamMap
from bracketgraph.utils import configure_logging, setup_logger
from bracketgraph.wire import (
    RandomizeRejected,
    decode_randomize_response,
    decode_response,
    decode_tournament_list,
)
from bracketgraph.wire.responses import APIResponse

logger = setup_logger(__name__)

_INCLUDE_ALL: ParamMap = {
    INCLUDE_PARTICIPANTS: INCLUDE_FLAG,
    INCLUDE_MATCHES: INCLUDE_FLAG,
}


class BracketSession:
    """Handle through which a caller talks to one tournament service account.

    Sessions hold configuration only; every tournament is passed in
    explicitly, so several sessions can coexist in one process.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.config.validate()
        self.resolver = RelationResolver(strict=self.config.strict)
        if self.config.debug:
            configure_logging(debug=True)

    # ========== Helpers ==========

    def _call(
        self, method: str, route: str, params: Optional[ParamMap] = None
    ) -> RemoteCall:
        call = RemoteCall(
            method=method,
            route=route,
            params=dict(params or {}),
            api_version=self.config.api_version,
        )
        logger.debug("Prepared %s %s %s", call.method, call.route, call.params)
        return call

    def _tournament_route(self, tournament: Tournament, *parts: Any) -> str:
        return "/".join(
            [TOURNAMENTS_ROUTE, tournament.get_url()] + [str(p) for p in parts]
        )

    def _decode(self, body: Any, context: str) -> APIResponse:
        response = decode_response(body)
        response.raise_for_errors(context=context)
        return response

    def _resolve_tournament(self, body: Any, context: str) -> ResolvedGraph:
        response = self._decode(body, context)
        if response.tournament is None:
            raise UnexpectedShapeError(f"{context}: response has no tournament")
        return self.resolver.resolve(response.tournament)

    # ========== Fetching ==========

    def tournament_request(self, tournament_id: str) -> TournamentRequest:
        return TournamentRequest(tournament_id, api_version=self.config.api_version)

    def refresh_request(self, tournament: Tournament) -> TournamentRequest:
        """Request for re-fetching a tournament with everything embedded."""
        sub_url = tournament.sub_url or tournament.get_url()
        return self.tournament_request(sub_url).with_participants().with_matches()

    def handle_tournament(self, body: Any, sub_url: str = "") -> ResolvedGraph:
        """Apply a fetched tournament.

        Raises:
            RemoteRejectionError: If the service reported errors
        """
        graph = self._resolve_tournament(body, "unable to retrieve tournament")
        graph.tournament.sub_url = sub_url or graph.tournament.get_url()
        return graph

    def list_tournaments(
        self,
        state: str = LIST_STATE_ALL,
        tournament_type: str = "",
        subdomain: Optional[str] = None,
    ) -> RemoteCall:
        """Call listing the account's tournaments.

        Args:
            state: ``all``, ``pending``, ``in_progress`` or ``ended``
            tournament_type: Optional type filter (short aliases allowed)
            subdomain: Organization; defaults to the configured one
        """
        if state not in LIST_STATES:
            raise ValueError(
                f"Unknown tournament list state {state!r} (expected one of {LIST_STATES})"
            )
        params = {PARAM_STATE: state}
        if tournament_type:
            params[PARAM_TYPE] = TournamentType.from_alias(tournament_type).value
        subdomain = self.config.subdomain if subdomain is None else subdomain
        if subdomain:
            params[PARAM_SUBDOMAIN] = subdomain
        return self._call(METHOD_GET, TOURNAMENTS_ROUTE, params)

    def handle_tournament_list(self, body: Any) -> List[Tournament]:
        return [self.resolver.resolve(t).tournament for t in decode_tournament_list(body)]

    # ========== Tournament lifecycle ==========

    def create_tournament(
        self,
        name: str,
        url: str,
        subdomain: Optional[str] = None,
        description: str = "",
        tournament_type: str = "",
        open_signup: bool = False,
    ) -> RemoteCall:
        """Call creating a tournament.

        ``tournament_type`` accepts ``single``, ``double``, ``round robin``
        and ``swiss`` (or the full names); empty means single elimination.
        """
        subdomain = self.config.subdomain if subdomain is None else subdomain
        params = {
            PARAM_TOURNAMENT_NAME: name,
            PARAM_TOURNAMENT_URL: url,
            PARAM_TOURNAMENT_OPEN_SIGNUP: "true" if open_signup else "false",
            PARAM_TOURNAMENT_SUBDOMAIN: subdomain,
            PARAM_TOURNAMENT_DESCRIPTION: description,
            PARAM_TOURNAMENT_TYPE: TournamentType.from_alias(tournament_type).value,
        }
        return self._call(METHOD_POST, TOURNAMENTS_ROUTE, params)

    def handle_created(self, body: Any) -> ResolvedGraph:
        return self._resolve_tournament(body, "unable to create tournament")

    def start(self, tournament: Tournament) -> RemoteCall:
        return self._call(
            METHOD_POST, self._tournament_route(tournament, "start"), _INCLUDE_ALL
        )

    def handle_start(self, body: Any) -> ResolvedGraph:
        """Apply a start response.

        Raises:
            RemoteRejectionError: If the service refused to start
            TournamentStateError: If the tournament is still not underway
        """
        graph = self._resolve_tournament(body, "error starting tournament")
        tournament = graph.tournament
        if not tournament.state.is_running:
            raise TournamentStateError(
                f"tournament has state {tournament.state.value!r}, probably not started"
            )
        logger.info("Tournament %r started", tournament.name)
        return graph

    def finalize(self, tournament: Tournament) -> RemoteCall:
        return self._call(
            METHOD_POST, self._tournament_route(tournament, "finalize"), _INCLUDE_ALL
        )

    def handle_finalize(self, body: Any) -> ResolvedGraph:
        """Apply a finalize response.

        Raises:
            RemoteRejectionError: If the service refused to finalize
            TournamentStateError: If the tournament is not complete afterwards
        """
        graph = self._resolve_tournament(body, "error finishing tournament")
        tournament = graph.tournament
        if tournament.state is not TournamentState.COMPLETE:
            raise TournamentStateError(
                f"tournament has state {tournament.state.value!r}, probably not finished"
            )
        logger.info("Tournament %r completed", tournament.name)
        return graph

    def reset(self, tournament: Tournament) -> RemoteCall:
        return self._call(
            METHOD_POST, self._tournament_route(tournament, "reset"), _INCLUDE_ALL
        )

    def handle_reset(self, body: Any) -> ResolvedGraph:
        return self._resolve_tournament(body, "error resetting tournament")

    def destroy(self, tournament: Tournament) -> RemoteCall:
        return self._call(METHOD_DELETE, self._tournament_route(tournament))

    def handle_destroy(self, body: Any) -> None:
        self._decode(body, "error destroying tournament")

    # ========== Participants ==========

    def randomize(self, tournament: Tournament) -> RemoteCall:
        return self._call(
            METHOD_POST,
            self._tournament_route(tournament, PARTICIPANTS_ROUTE, "randomize"),
        )

    def handle_randomize(self, body: Any) -> List[Participant]:
        """Apply a randomize response.

        Returns:
            Participants in their new seed order

        Raises:
            RemoteRejectionError: If the service answered with an error map
            UnexpectedShapeError: If the body is neither list nor error map
        """
        result = decode_randomize_response(body)
        if isinstance(result, RandomizeRejected):
            raise RemoteRejectionError(
                result.errors, context="error randomizing participants"
            )
        return result.participants

    def add_participant(
        self, tournament: Tournament, name: str, misc: str = ""
    ) -> RemoteCall:
        params = {PARAM_PARTICIPANT_NAME: name, PARAM_PARTICIPANT_MISC: misc}
        return self._call(
            METHOD_POST, self._tournament_route(tournament, PARTICIPANTS_ROUTE), params
        )

    def handle_add_participant(
        self, tournament: Tournament, body: Any
    ) -> Tuple[Tournament, Participant]:
        """Append the created participant to a copy of ``tournament``."""
        response = self._decode(body, "unable to add participant")
        if response.participant is None:
            raise UnexpectedShapeError("unable to add participant: no participant returned")
        participant = response.participant
        updated = dataclasses.replace(
            tournament,
            participants=list(tournament.participants) + [participant],
            participants_count=tournament.participants_count + 1,
        )
        return updated, participant

    def remove_participant(self, tournament: Tournament, name: str) -> RemoteCall:
        """Call removing the first participant called ``name``.

        Raises:
            NotFoundError: If nobody in the tournament has that name
        """
        participant = require_participant(tournament, name, by=LOOKUP_NAME)
        return self.remove_participant_by_id(tournament, participant.id)

    def remove_participant_by_id(
        self, tournament: Tournament, participant_id: int
    ) -> RemoteCall:
        return self._call(
            METHOD_DELETE,
            self._tournament_route(tournament, PARTICIPANTS_ROUTE, participant_id),
        )

    def handle_remove_participant(
        self, tournament: Tournament, body: Any, participant_id: int
    ) -> Tournament:
        """Drop ``participant_id`` from a copy of ``tournament``."""
        self._decode(body, "unable to delete participant")
        remaining = [p for p in tournament.participants if p.id != participant_id]
        removed = len(tournament.participants) - len(remaining)
        return dataclasses.replace(
            tournament,
            participants=remaining,
            participants_count=max(0, tournament.participants_count - removed),
        )

    # ========== Matches ==========

    def submit_match(
        self,
        tournament: Tournament,
        match: Match,
        player_one_score: int,
        player_two_score: int,
        winner_id: int,
    ) -> RemoteCall:
        """Call reporting a match result.

        Raises:
            DataConsistencyError: If ``winner_id`` is not one of the players
        """
        if not winner_id or winner_id not in match.player_ids:
            raise DataConsistencyError(
                f"Winner {winner_id} is not a player of match {match.id}",
                match_id=match.id,
                participant_id=winner_id,
            )
        params = {
            PARAM_MATCH_SCORES: format_scores(player_one_score, player_two_score),
            PARAM_MATCH_WINNER: str(winner_id),
        }
        return self._call(
            METHOD_PUT,
            self._tournament_route(tournament, MATCHES_ROUTE, match.id),
            params,
        )

    def handle_submit_match(
        self, tournament: Tournament, body: Any
    ) -> Tuple[ResolvedGraph, Match]:
        """Swap the returned match into the graph and re-derive statistics.

        Returns:
            The re-resolved graph and the updated match as it appears in it

        Raises:
            RemoteRejectionError: If the service rejected the result
            NotFoundError: If the returned match is not part of ``tournament``
        """
        response = self._decode(body, "unable to submit match")
        if response.match is None:
            raise UnexpectedShapeError("unable to submit match: no match returned")
        updated = response.match

        matches = list(tournament.matches)
        for index, match in enumerate(matches):
            if match.id == updated.id:
                matches[index] = updated
                break
        else:
            raise NotFoundError(
                f"Match {updated.id} not found in tournament {tournament.id}"
            )

        graph = self.resolver.resolve(dataclasses.replace(tournament, matches=matches))
        return graph, require_match(graph.tournament, updated.id)
