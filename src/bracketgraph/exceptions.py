"""Exceptions for use in Bracket Graph"""

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

from typing import List, Optional

# ========== Base Application Exception ==========


class BracketGraphException(Exception):
    """Base exception for all Bracket Graph errors.

    All custom exceptions in the package inherit from this class.
    This enables catching all package-specific errors with a single except clause.
    """

    pass


# ========== Graph Exceptions ==========


class GraphException(BracketGraphException):
    """Base exception for entity graph errors."""

    pass


class DataConsistencyError(GraphException):
    """Raised (or collected) when a match disagrees with its tournament.

    Covers a player or winner id that is not a participant of the owning
    tournament, and a complete match whose winner is not one of its players.
    """

    def __init__(
        self,
        message: str,
        match_id: Optional[int] = None,
        participant_id: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.match_id = match_id
        self.participant_id = participant_id


class NotFoundError(GraphException):
    """Raised when a requested participant or match does not exist."""

    pass


# ========== Remote Exceptions ==========


class RemoteException(BracketGraphException):
    """Base exception for errors reported by the tournament service."""

    pass


class RemoteRejectionError(RemoteException):
    """Raised when a decoded response carries a non-empty errors list.

    The message is the first reported error; ``errors`` keeps all of them.
    """

    def __init__(self, errors: List[str], context: Optional[str] = None) -> None:
        self.errors = list(errors)
        first = self.errors[0] if self.errors else "unknown error"
        message = f"{context}: {first}" if context else first
        super().__init__(message)

    @property
    def first_error(self) -> str:
        return self.errors[0] if self.errors else ""


class UnexpectedShapeError(RemoteException):
    """Raised when a response body matches none of the known shapes."""

    pass


class TournamentStateError(RemoteException):
    """Raised when a state-changing call did not move the tournament."""

    pass


# ========== Payload Exceptions ==========


class PayloadException(BracketGraphException):
    """Base exception for wire payload errors."""

    pass


class PayloadDecodeError(PayloadException):
    """Raised when a wire field is missing, mistyped or out of range."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(BracketGraphException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
