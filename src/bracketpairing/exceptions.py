"""Exceptions for use in Bracket Pairing"""

# Bracket Pairing
# Copyright (C) 2025  Bracket Pairing developers
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


# ========== Base Application Exception ==========


class BracketPairingException(Exception):
    """Base exception for all Bracket Pairing errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every engine error with a single except clause.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(BracketPairingException):
    """Base exception for tournament-related errors."""

    pass


class InvalidRosterException(TournamentException):
    """Raised when the participant roster is empty or malformed."""

    pass


class DuplicateParticipantException(InvalidRosterException):
    """Raised when two participants in a roster share an id."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundNotCompleteException(TournamentException):
    """Raised when a new round is requested while matches are still pending."""

    def __init__(self, round_number: int, pending_ids):
        self.round_number = round_number
        self.pending_ids = list(pending_ids)
        super().__init__(
            f"Round {round_number} has {len(self.pending_ids)} unresolved "
            f"match(es): {', '.join(self.pending_ids)}"
        )


# ========== Match Exceptions ==========


class MatchException(BracketPairingException):
    """Base exception for match result errors."""

    pass


class UnknownMatchException(MatchException):
    """Raised when a result is submitted for a match id that does not exist."""

    pass


class InvalidWinnerException(MatchException):
    """Raised when the submitted winner did not take part in the match."""

    pass


class MatchAlreadyResolvedException(MatchException):
    """Raised when attempting to resolve a match a second time."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(BracketPairingException):
    """Base exception for pairing-related errors."""

    pass


class NoPairingAvailableException(PairingException):
    """Raised when no valid pairing can be generated."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(BracketPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
