"""Decoders turning service JSON into entity graph objects.

This module is the decode boundary: state strings are checked against
the closed enumerations here, so an unknown state never reaches the
resolver or the query engine.
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

from typing import Any, List, Optional

from bracketgraph.constants import (
    WIRE_MATCH,
    WIRE_MATCHES,
    WIRE_PARTICIPANT,
    WIRE_PARTICIPANTS,
    WIRE_TOURNAMENT,
)
from bracketgraph.exceptions import PayloadDecodeError
from bracketgraph.models import (
    Match,
    MatchItem,
    Participant,
    ParticipantItem,
    Tournament,
)
from bracketgraph.utils import setup_logger

logger = setup_logger(__name__)


def _unwrap(data: Any, key: str) -> Any:
    """Strip a one-key ``{key: {...}}`` envelope if present."""
    if isinstance(data, dict) and key in data and "id" not in data:
        return data[key]
    return data


def _require_mapping(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise PayloadDecodeError(
            f"Expected a JSON object for {what}, got {type(data).__name__}"
        )
    return data


def decode_participant(data: Any) -> Participant:
    """Decode a bare or wrapped participant object.

    Raises:
        PayloadDecodeError: If the object is missing its id or is mistyped
    """
    body = _require_mapping(_unwrap(data, WIRE_PARTICIPANT), WIRE_PARTICIPANT)
    try:
        return Participant.from_dict(body)
    except (KeyError, TypeError, ValueError) as e:
        raise PayloadDecodeError(f"Invalid participant {body!r}: {e}") from e


def decode_match(data: Any) -> Match:
    """Decode a bare or wrapped match object.

    Raises:
        PayloadDecodeError: If the state is unknown or a field is mistyped
    """
    body = _require_mapping(_unwrap(data, WIRE_MATCH), WIRE_MATCH)
    try:
        return Match.from_dict(body)
    except (KeyError, TypeError, ValueError) as e:
        raise PayloadDecodeError(f"Invalid match {body!r}: {e}") from e


def decode_participant_item(data: Any) -> ParticipantItem:
    return ParticipantItem(participant=decode_participant(data))


def decode_match_item(data: Any) -> Optional[MatchItem]:
    """Decode one entry of a tournament's ``matches`` list.

    Returns:
        ``None`` for a null entry, an item holding ``None`` for
        ``{"match": null}``, otherwise the decoded match item
    """
    if data is None:
        return None
    body = _require_mapping(data, WIRE_MATCH)
    if WIRE_MATCH in body and body[WIRE_MATCH] is None:
        return MatchItem(match=None)
    return MatchItem(match=decode_match(body))


def decode_tournament(data: Any) -> Tournament:
    """Decode a tournament object, keeping embedded entities wrapped.

    Args:
        data: The tournament object or its ``{"tournament": {...}}`` envelope

    Returns:
        An unresolved Tournament; pass it to ``resolve_relations``

    Raises:
        PayloadDecodeError: On unknown states or malformed fields
    """
    body = _require_mapping(_unwrap(data, WIRE_TOURNAMENT), WIRE_TOURNAMENT)

    raw_participants = body.get(WIRE_PARTICIPANTS) or []
    raw_matches = body.get(WIRE_MATCHES) or []
    if not isinstance(raw_participants, list) or not isinstance(raw_matches, list):
        raise PayloadDecodeError("Tournament participants and matches must be lists")

    try:
        tournament = Tournament.from_dict(body)
    except (KeyError, TypeError, ValueError) as e:
        raise PayloadDecodeError(f"Invalid tournament: {e}") from e

    tournament.participant_items = [
        decode_participant_item(item) for item in raw_participants
    ]
    tournament.match_items = [decode_match_item(item) for item in raw_matches]

    logger.debug(
        "Decoded tournament %s (%s): %d participant items, %d match items",
        tournament.id,
        tournament.state,
        len(tournament.participant_items),
        len(tournament.match_items),
    )
    return tournament


def decode_participant_list(data: Any) -> List[Participant]:
    """Decode a list of bare or wrapped participants."""
    if not isinstance(data, list):
        raise PayloadDecodeError(
            f"Expected a JSON list of participants, got {type(data).__name__}"
        )
    return [decode_participant(item) for item in data]
