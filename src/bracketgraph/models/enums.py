"""Closed enumerations for wire state fields."""

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

from enum import Enum

from bracketgraph.exceptions import PayloadDecodeError


class _WireEnum(str, Enum):
    """String enum that rejects unknown wire values with a decode error."""

    @classmethod
    def parse(cls, value: str) -> "_WireEnum":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise PayloadDecodeError(
                f"Unknown {cls.__name__} {value!r} (expected one of: {allowed})"
            ) from None

    def __str__(self) -> str:
        return self.value


class TournamentState(_WireEnum):
    """Lifecycle of a tournament on the service."""

    PENDING = "pending"
    UNDERWAY = "underway"
    IN_PROGRESS = "in_progress"
    AWAITING_REVIEW = "awaiting_review"
    COMPLETE = "complete"

    @property
    def is_running(self) -> bool:
        return self in (TournamentState.UNDERWAY, TournamentState.IN_PROGRESS)

    @property
    def is_finished(self) -> bool:
        return self in (TournamentState.COMPLETE, TournamentState.AWAITING_REVIEW)


class MatchState(_WireEnum):
    """State of a single bracket match."""

    PENDING = "pending"
    OPEN = "open"
    COMPLETE = "complete"


class TournamentType(_WireEnum):
    """Bracket format of a tournament."""

    SINGLE_ELIMINATION = "single elimination"
    DOUBLE_ELIMINATION = "double elimination"
    ROUND_ROBIN = "round robin"
    SWISS = "swiss"

    @classmethod
    def from_alias(cls, alias: str) -> "TournamentType":
        """Map the short names used when creating a tournament.

        An empty alias means single elimination.
        """
        key = (alias or "").strip().lower()
        if key in ("", "single"):
            return cls.SINGLE_ELIMINATION
        if key == "double":
            return cls.DOUBLE_ELIMINATION
        return cls.parse(key)
