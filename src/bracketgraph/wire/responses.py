"""Known response shapes returned by the tournament service."""

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
from typing import Any, List, Optional, Union

from bracketgraph.constants import (
    WIRE_ERRORS,
    WIRE_MATCH,
    WIRE_PARTICIPANT,
    WIRE_TOURNAMENT,
)
from bracketgraph.exceptions import RemoteRejectionError, UnexpectedShapeError
from bracketgraph.models import Match, Participant, Tournament
from bracketgraph.utils import setup_logger
from bracketgraph.wire.payload import (
    decode_match,
    decode_participant,
    decode_participant_list,
    decode_tournament,
)

logger = setup_logger(__name__)


def _decode_errors(data: Any) -> List[str]:
    errors = data.get(WIRE_ERRORS) if isinstance(data, dict) else None
    if not errors:
        return []
    if isinstance(errors, str):
        return [errors]
    if isinstance(errors, list):
        return [str(e) for e in errors]
    raise UnexpectedShapeError(f"Unrecognized errors field: {errors!r}")


@dataclass
class APIResponse:
    """A decoded single-entity response.

    Only one of ``tournament``, ``participant`` and ``match`` is normally
    set. When ``errors`` is non-empty none of them are decoded.
    """

    tournament: Optional[Tournament] = None
    participant: Optional[Participant] = None
    match: Optional[Match] = None
    errors: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def raise_for_errors(self, context: Optional[str] = None) -> None:
        """Raise RemoteRejectionError if the service reported errors."""
        if self.has_errors:
            logger.debug("Response had errors: %r", self.errors)
            raise RemoteRejectionError(self.errors, context=context)


def decode_response(data: Any) -> APIResponse:
    """Decode a single-entity response body.

    Raises:
        UnexpectedShapeError: If the body is not a JSON object
        PayloadDecodeError: If an entity in a successful body is malformed
    """
    if not isinstance(data, dict):
        raise UnexpectedShapeError(
            f"Expected a JSON object response, got {type(data).__name__}"
        )

    errors = _decode_errors(data)
    if errors:
        return APIResponse(errors=errors)

    response = APIResponse()
    if data.get(WIRE_TOURNAMENT) is not None:
        response.tournament = decode_tournament(data[WIRE_TOURNAMENT])
    if data.get(WIRE_PARTICIPANT) is not None:
        response.participant = decode_participant(data[WIRE_PARTICIPANT])
    if data.get(WIRE_MATCH) is not None:
        response.match = decode_match(data[WIRE_MATCH])
    return response


def decode_tournament_list(data: Any) -> List[Tournament]:
    """Decode the ``[{"tournament": {...}}, ...]`` list endpoint body.

    Raises:
        RemoteRejectionError: If the body is an error map
        UnexpectedShapeError: If the body is neither a list nor an error map
    """
    if isinstance(data, dict):
        errors = _decode_errors(data)
        if errors:
            raise RemoteRejectionError(errors, context="unable to list tournaments")
    if not isinstance(data, list):
        raise UnexpectedShapeError(
            f"Expected a JSON list of tournaments, got {type(data).__name__}"
        )
    return [decode_tournament(item) for item in data]


# ========== Randomize ==========


@dataclass(frozen=True)
class RandomizeAccepted:
    """The service reseeded the participants and returned them."""

    participants: List[Participant]


@dataclass(frozen=True)
class RandomizeRejected:
    """The service refused to reseed (for example after the start)."""

    errors: List[str]


RandomizeResult = Union[RandomizeAccepted, RandomizeRejected]


def decode_randomize_response(data: Any) -> RandomizeResult:
    """Classify a randomize-participants response body.

    Returns:
        RandomizeAccepted for a list body, RandomizeRejected for an
        ``{"errors": [...]}`` body

    Raises:
        UnexpectedShapeError: For any other body
    """
    if isinstance(data, list):
        return RandomizeAccepted(participants=decode_participant_list(data))
    if isinstance(data, dict) and WIRE_ERRORS in data:
        return RandomizeRejected(errors=_decode_errors(data))
    logger.warning("Unknown randomize response: %r", data)
    raise UnexpectedShapeError(f"Unknown randomize response: {data!r}")
