"""Positional comparison of two match snapshots."""

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
from typing import Iterator, List, Sequence

from bracketgraph.models import Match, MatchState


@dataclass(frozen=True)
class MatchTransition:
    """One match whose state changed between two snapshots."""

    match: Match
    previous: MatchState
    current: MatchState


def state_transitions(
    before: Sequence[Match], after: Sequence[Match]
) -> Iterator[MatchTransition]:
    """Yield the state changes between two snapshots of the same bracket.

    Matches are paired by position, not by id: both snapshots must be in
    the same wire order. Only the common prefix is compared; a length
    mismatch is not an error.
    """
    for old, new in zip(before, after):
        if old.state is not new.state:
            yield MatchTransition(match=new, previous=old.state, current=new.state)


def diff_matches(before: Sequence[Match], after: Sequence[Match]) -> List[Match]:
    """Matches of ``after`` whose state differs from ``before``, in order."""
    return [t.match for t in state_transitions(before, after)]
