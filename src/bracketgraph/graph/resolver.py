"""Relation resolution for decoded tournaments.

This module turns the wrapped participant and match items of a decoded
tournament into a cross-referenced entity graph and derives each
participant's wins, losses and total score from the complete matches.
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
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bracketgraph.exceptions import DataConsistencyError
from bracketgraph.models import Match, Participant, Tournament
from bracketgraph.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class ResolvedGraph:
    """A resolved tournament plus the consistency errors found on the way.

    Attributes:
        tournament: Tournament with flat ``participants`` and ``matches``
        errors: One DataConsistencyError per match that failed to resolve
    """

    tournament: Tournament
    errors: List[DataConsistencyError] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return not self.errors

    @property
    def participants(self) -> List[Participant]:
        return self.tournament.participants

    @property
    def matches(self) -> List[Match]:
        return self.tournament.matches

    def errors_for(self, match_id: int) -> List[DataConsistencyError]:
        return [e for e in self.errors if e.match_id == match_id]


def index_participants(participants: List[Participant]) -> Dict[int, Participant]:
    """Map participant id to participant, keeping the first of duplicates."""
    by_id: Dict[int, Participant] = {}
    for participant in participants:
        if participant.id in by_id:
            logger.warning(
                "Duplicate participant id %s (%s), keeping %s",
                participant.id,
                participant.name,
                by_id[participant.id].name,
            )
            continue
        by_id[participant.id] = participant
    return by_id


class RelationResolver:
    """Builds the entity graph from a decoded tournament.

    The input tournament is never modified. Participants and matches are
    copied, participant counters are zeroed, and only then are complete
    matches attributed, so resolving the same payload (or an already
    resolved tournament) any number of times gives the same statistics.
    """

    def __init__(self, strict: bool = False) -> None:
        """
        Args:
            strict: Raise the first DataConsistencyError instead of
                collecting it in the result
        """
        self.strict = strict

    def resolve(self, tournament: Tournament) -> ResolvedGraph:
        """Resolve a decoded (or previously resolved) tournament.

        Args:
            tournament: Tournament carrying wrapped items or flat collections

        Returns:
            ResolvedGraph with a new Tournament and any per-match errors

        Raises:
            TypeError: If ``tournament`` is None
            DataConsistencyError: Only in strict mode
        """
        if tournament is None:
            raise TypeError("resolve() needs a Tournament, got None")

        participants = self._unwrap_participants(tournament)
        by_id = index_participants(participants)
        for participant in by_id.values():
            participant.reset_statistics()

        matches: List[Match] = []
        errors: List[DataConsistencyError] = []
        for match in self._unwrap_matches(tournament):
            try:
                matches.append(self._resolve_match(match, by_id))
            except DataConsistencyError as e:
                if self.strict:
                    raise
                logger.warning("Tournament %s: %s", tournament.id, e)
                errors.append(e)
                matches.append(match)

        resolved = dataclasses.replace(
            tournament,
            participant_items=[],
            match_items=[],
            participants=list(by_id.values()),
            matches=matches,
        )
        logger.debug(
            "Resolved tournament %s: %d participants, %d matches, %d errors",
            tournament.id,
            len(resolved.participants),
            len(matches),
            len(errors),
        )
        return ResolvedGraph(tournament=resolved, errors=errors)

    def _unwrap_participants(self, tournament: Tournament) -> List[Participant]:
        if tournament.participant_items:
            source = [item.participant for item in tournament.participant_items]
        else:
            source = tournament.participants
        return [dataclasses.replace(p) for p in source]

    def _unwrap_matches(self, tournament: Tournament) -> List[Match]:
        if not tournament.match_items:
            return [m.without_references() for m in tournament.matches]

        matches = []
        for position, item in enumerate(tournament.match_items):
            if item is None or item.match is None:
                logger.debug(
                    "Tournament %s: skipping empty match item at %d",
                    tournament.id,
                    position,
                )
                continue
            matches.append(item.match.without_references())
        return matches

    def _resolve_match(self, match: Match, by_id: Dict[int, Participant]) -> Match:
        """Validate one match and attribute it if complete.

        All checks run before any counter is touched, so a rejected match
        leaves no partial statistics behind.
        """
        ids = (match.player_one_id, match.player_two_id, match.winner_id)
        for participant_id in ids:
            if participant_id and participant_id not in by_id:
                raise DataConsistencyError(
                    f"Match {match.id} references unknown participant {participant_id}",
                    match_id=match.id,
                    participant_id=participant_id,
                )

        if not match.is_complete:
            return match

        if not match.player_one_id or not match.player_two_id:
            raise DataConsistencyError(
                f"Complete match {match.id} is missing a player",
                match_id=match.id,
            )
        if match.player_one_id == match.player_two_id:
            raise DataConsistencyError(
                f"Complete match {match.id} has participant {match.player_one_id} "
                f"on both sides",
                match_id=match.id,
                participant_id=match.player_one_id,
            )
        if not match.winner_id:
            raise DataConsistencyError(
                f"Complete match {match.id} has no winner",
                match_id=match.id,
            )
        if match.winner_id not in match.player_ids:
            raise DataConsistencyError(
                f"Complete match {match.id} winner {match.winner_id} is not one "
                f"of its players {match.player_ids}",
                match_id=match.id,
                participant_id=match.winner_id,
            )

        player_one = by_id[match.player_one_id]
        player_two = by_id[match.player_two_id]
        winner = by_id[match.winner_id]
        loser = by_id[match.loser_id]

        winner.win()
        loser.lose()
        player_one.add_score(match.player_one_score)
        player_two.add_score(match.player_two_score)

        return dataclasses.replace(
            match, player_one=player_one, player_two=player_two, winner=winner
        )


def resolve_relations(tournament: Tournament, strict: bool = False) -> ResolvedGraph:
    """Resolve ``tournament`` with a fresh RelationResolver."""
    return RelationResolver(strict=strict).resolve(tournament)


def attach_references(match: Match, by_id: Dict[int, Participant]) -> Match:
    """Return ``match`` with its participant references filled in.

    Used on read access: counters are left untouched. Non-complete matches,
    matches whose ids cannot be found and complete matches without a valid
    result (the ones resolution rejects) come back without references.
    """
    if not match.has_valid_result:
        return match.without_references() if match.has_resolved_references else match
    if match.has_resolved_references:
        return match

    player_one: Optional[Participant] = by_id.get(match.player_one_id)
    player_two: Optional[Participant] = by_id.get(match.player_two_id)
    if player_one is None or player_two is None:
        logger.debug("Match %s has unresolvable players, leaving it bare", match.id)
        return match
    return dataclasses.replace(
        match,
        player_one=player_one,
        player_two=player_two,
        winner=by_id.get(match.winner_id),
    )
