"""Outcome classification for a single version check.

Every call to `validate` ends in exactly one `Outcome`. The enum values are
the stable identifiers callers may switch on, and each member also knows its
human-readable description and the process exit status the CLI uses for it.
"""

from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple


class Outcome(Enum):
    """The terminal classification of a version string."""

    VALID = "valid"
    EMPTY_STRING = "empty-string"
    WRONG_SEGMENT_COUNT = "wrong-segment-count"
    INVALID_CHARACTERS = "invalid-characters"
    LEADING_ZERO_SEGMENT = "leading-zero-segment"
    INTEGER_OVERFLOW = "integer-overflow"
    GENERIC_INVALID = "generic-invalid"

    @property
    def description(self) -> str:
        """A short sentence describing the outcome."""
        return _DESCRIPTIONS[self]

    @property
    def exit_code(self) -> int:
        """The process exit status that reports this outcome."""
        return _EXIT_CODES[self]

    @property
    def is_valid(self) -> bool:
        return self is Outcome.VALID


_DESCRIPTIONS = {
    Outcome.VALID: "Semantic Version is valid",
    Outcome.EMPTY_STRING: "Version string empty",
    Outcome.WRONG_SEGMENT_COUNT: "Version does not have 3 parts",
    Outcome.INVALID_CHARACTERS: "Invalid characters in version",
    Outcome.LEADING_ZERO_SEGMENT: "Version segment starts with 0",
    Outcome.INTEGER_OVERFLOW: "Version segment exceeds the 64-bit unsigned range",
    Outcome.GENERIC_INVALID: "Invalid Semantic Version",
}

# Overflow has no dedicated status and is reported as a general invalid version.
_EXIT_CODES = {
    Outcome.VALID: 0,
    Outcome.GENERIC_INVALID: 2,
    Outcome.EMPTY_STRING: 3,
    Outcome.WRONG_SEGMENT_COUNT: 4,
    Outcome.INVALID_CHARACTERS: 5,
    Outcome.LEADING_ZERO_SEGMENT: 6,
    Outcome.INTEGER_OVERFLOW: 2,
}


class ValidationResult:
    """The outcome of checking one version string, plus its diagnostics.

    Iterating a result yields the `(outcome, diagnostics)` pair, so it can be
    unpacked directly::

        outcome, diagnostics = validate("1.2.3")

    Attributes:
        candidate (str): The string that was checked.
        outcome (Outcome): The terminal classification.
        diagnostics (Tuple[str, ...]): Messages in the order the checks ran.
        segment (Optional[str]): The part or identifier that caused a failure,
            if the failing check names one.
    """

    def __init__(self, candidate: str, outcome: Outcome, diagnostics: Tuple[str, ...], segment: Optional[str] = None) -> None:
        self.candidate = candidate
        self.outcome = outcome
        self.diagnostics = diagnostics
        self.segment = segment

    @property
    def is_valid(self) -> bool:
        return self.outcome.is_valid

    def __iter__(self) -> Iterator[Any]:
        return iter((self.outcome, self.diagnostics))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return (self.candidate, self.outcome, self.diagnostics, self.segment) == (
            other.candidate,
            other.outcome,
            other.diagnostics,
            other.segment,
        )

    def __repr__(self) -> str:
        return f"ValidationResult(candidate={self.candidate!r}, outcome={self.outcome.value}, segment={self.segment!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Returns the result in a JSON-serializable dictionary.

        Returns:
            Dict[str, Any]: The candidate, outcome identifier, description,
            exit code, failing segment and diagnostics.
        """
        return {
            "version": self.candidate,
            "outcome": self.outcome.value,
            "valid": self.is_valid,
            "description": self.outcome.description,
            "exit_code": self.outcome.exit_code,
            "segment": self.segment,
            "diagnostics": list(self.diagnostics),
        }
