"""Validation utilities for Bracket Pairing.

This module provides reusable roster validation with consistent error handling.
"""

from dataclasses import replace
from typing import Any, Iterable, List, Optional, Set

from bracketpairing.exceptions import (
    DuplicateParticipantException,
    InvalidRosterException,
)
from bracketpairing.models.participant import Participant


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Participant Fields ==========


def validate_participant_id(participant_id: Any) -> ValidationResult:
    """Validate a participant id: a non-negative integer.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Example:
        >>> validate_participant_id(3).is_valid
        True
        >>> validate_participant_id(-1).error_message
        'Participant id must be non-negative, got -1'
    """
    if isinstance(participant_id, bool) or not isinstance(participant_id, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Participant id must be an integer, got {participant_id!r}",
        )
    if participant_id < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Participant id must be non-negative, got {participant_id}",
        )
    return ValidationResult(is_valid=True, sanitized_value=participant_id)


def validate_participant_name(name: Any) -> ValidationResult:
    """Validate a participant name: a non-empty string.

    Returns:
        ValidationResult whose sanitized value is the stripped name
    """
    if not isinstance(name, str) or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"Participant name must be a non-empty string, got {name!r}",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_fresh_record(participant: Participant) -> ValidationResult:
    """A participant entering a tournament must have no results yet."""
    if participant.wins or participant.losses:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"{participant} must start with a 0-0 record, "
                f"got {participant.wins}-{participant.losses}"
            ),
        )
    if participant.byes:
        return ValidationResult(
            is_valid=False,
            error_message=f"{participant} must start without byes, got {participant.byes}",
        )
    if participant.eliminated or participant.eliminated_in_round is not None:
        return ValidationResult(
            is_valid=False,
            error_message=f"{participant} is already eliminated",
        )
    return ValidationResult(is_valid=True, sanitized_value=participant)


# ========== Roster Validation ==========


def validate_roster(participants: Iterable[Participant]) -> List[Participant]:
    """Validate a roster before a tournament is built from it.

    The caller's participants are not modified.

    Args:
        participants: Roster in seeding order

    Returns:
        Copies of the participants, with surrounding whitespace stripped
        from their names

    Raises:
        InvalidRosterException: If the roster is empty or any entry is invalid
        DuplicateParticipantException: If two participants share an id
    """
    roster = list(participants)
    if not roster:
        raise InvalidRosterException("Roster must contain at least one participant")

    seen: Set[int] = set()
    validated: List[Participant] = []
    for participant in roster:
        if not isinstance(participant, Participant):
            raise InvalidRosterException(
                f"Roster entries must be Participant objects, got {participant!r}"
            )
        name_result = validate_participant_name(participant.name)
        for result in (
            validate_participant_id(participant.id),
            name_result,
            validate_fresh_record(participant),
        ):
            if not result:
                raise InvalidRosterException(result.error_message)
        if participant.id in seen:
            raise DuplicateParticipantException(
                f"Duplicate participant id: {participant.id}"
            )
        seen.add(participant.id)
        validated.append(replace(participant, name=name_result.sanitized_value))
    return validated
