"""Read-only lookups over a resolved tournament."""

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

from typing import Any, Callable, List, Optional

from bracketgraph.constants import (
    FILTER_ALL,
    FILTER_OPEN,
    LOOKUP_ID,
    LOOKUP_NAME,
    LOOKUP_TAG,
    UNRANKED,
)
from bracketgraph.exceptions import NotFoundError
from bracketgraph.graph.resolver import attach_references, index_participants
from bracketgraph.models import Match, MatchState, Participant, Tournament
from bracketgraph.type_hints import LookupKey, MatchFilter

_LOOKUPS = {
    LOOKUP_ID: lambda p: p.id,
    LOOKUP_NAME: lambda p: p.name,
    LOOKUP_TAG: lambda p: p.misc,
}


# ========== Participants ==========


def find_participant(
    tournament: Tournament, value: Any, by: LookupKey = LOOKUP_ID
) -> Optional[Participant]:
    """Find a participant by id, display name or misc tag.

    Names and tags are not unique keys: the first participant in wire
    order wins.

    Args:
        tournament: A resolved tournament
        value: Id, name or tag to look for
        by: Which field to compare

    Returns:
        The participant, or None if nothing matches

    Raises:
        ValueError: If ``by`` is not one of ``id``, ``name``, ``tag``
    """
    try:
        key: Callable[[Participant], Any] = _LOOKUPS[by]
    except KeyError:
        raise ValueError(f"Unknown participant lookup {by!r}") from None

    for participant in tournament.participants:
        if key(participant) == value:
            return participant
    return None


def get_participant(tournament: Tournament, participant_id: int) -> Optional[Participant]:
    return find_participant(tournament, participant_id, by=LOOKUP_ID)


def get_participant_by_name(tournament: Tournament, name: str) -> Optional[Participant]:
    return find_participant(tournament, name, by=LOOKUP_NAME)


def get_participant_by_tag(tournament: Tournament, tag: str) -> Optional[Participant]:
    return find_participant(tournament, tag, by=LOOKUP_TAG)


def require_participant(
    tournament: Tournament, value: Any, by: LookupKey = LOOKUP_ID
) -> Participant:
    """Like :func:`find_participant` but raises NotFoundError."""
    participant = find_participant(tournament, value, by=by)
    if participant is None:
        raise NotFoundError(
            f"Participant with {by} {value!r} not found in tournament {tournament.id}"
        )
    return participant


# ========== Matches ==========


def list_matches(tournament: Tournament, state: MatchFilter = FILTER_ALL) -> List[Match]:
    """List matches in wire order, references re-resolved on access.

    Args:
        tournament: A resolved tournament
        state: ``"all"`` for every match, ``"open"`` for open matches only

    Raises:
        ValueError: If ``state`` is not ``all`` or ``open``
    """
    if state not in (FILTER_ALL, FILTER_OPEN):
        raise ValueError(f"Unknown match filter {state!r}")

    by_id = index_participants(tournament.participants)
    matches = []
    for match in tournament.matches:
        if state == FILTER_OPEN and match.state is not MatchState.OPEN:
            continue
        matches.append(attach_references(match, by_id))
    return matches


def get_open_matches(tournament: Tournament) -> List[Match]:
    return list_matches(tournament, FILTER_OPEN)


def get_match(tournament: Tournament, match_id: int) -> Optional[Match]:
    """Return the match with resolved references, or None."""
    for match in tournament.matches:
        if match.id == match_id:
            return attach_references(match, index_participants(tournament.participants))
    return None


def require_match(tournament: Tournament, match_id: int) -> Match:
    """Like :func:`get_match` but raises NotFoundError."""
    match = get_match(tournament, match_id)
    if match is None:
        raise NotFoundError(
            f"Match {match_id} not found in tournament {tournament.id}"
        )
    return match


def open_match_for(tournament: Tournament, participant: Participant) -> Optional[Match]:
    """The participant's earliest open match in wire order, if any."""
    for match in get_open_matches(tournament):
        if match.involves(participant.id):
            return match
    return None


def prerequisite_matches(tournament: Tournament, match: Match) -> List[Match]:
    """Matches whose results feed ``match``, player one's side first.

    Ids missing from the tournament are skipped.
    """
    by_match_id = {m.id: m for m in tournament.matches}
    return [
        by_match_id[match_id]
        for match_id in match.prerequisite_ids
        if match_id in by_match_id
    ]


def is_completed(tournament: Tournament) -> bool:
    """True once the tournament is complete or awaiting review."""
    return tournament.is_completed


def standings(tournament: Tournament) -> List[Participant]:
    """Participants ordered by final rank, then wins, then total score.

    Participants without a final rank sort after ranked ones. Ties keep
    wire order.
    """
    return sorted(
        tournament.participants,
        key=lambda p: (
            p.final_rank if p.final_rank is not None else UNRANKED,
            -p.wins,
            -p.total_score,
        ),
    )
