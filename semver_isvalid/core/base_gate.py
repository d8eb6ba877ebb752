"""
Base gate class that every version check inherits from.
"""

import json
from abc import ABC, abstractmethod
from typing import List, Optional

from .outcome import Outcome

# Names of the three dot-separated core parts, by position.
SEGMENT_NAMES = ("major", "minor", "patch")

DIGITS = frozenset("0123456789")
IDENTIFIER_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-") | DIGITS


def segment_name(index: int) -> str:
    """Returns the name of a core part by its position.

    Args:
        index (int): 0 for major, 1 for minor, 2 for patch.

    Returns:
        str: The part name.

    Raises:
        ValueError: If the index does not name a core part.
    """
    if 0 <= index < len(SEGMENT_NAMES):
        return SEGMENT_NAMES[index]
    raise ValueError(f"Invalid part number: {index}")


def contains_only(text: str, allowed: frozenset) -> bool:
    """Checks that every character of `text` is in `allowed`.

    An empty string passes.
    """
    return all(char in allowed for char in text)


def quote(text: str) -> str:
    """Wraps a value in double quotes, escaping control characters."""
    return json.dumps(text, ensure_ascii=False)


class ParseState:
    """Transient state shared by the gates during one `validate` call.

    Attributes:
        candidate (str): The raw input string.
        parts (List[str]): The major, minor and patch pieces once split. The
            patch piece loses its suffixes during suffix extraction.
        prerelease (Optional[str]): The pre-release candidate, if extracted.
        metadata (Optional[str]): The build-metadata candidate, if extracted.
        numbers (List[int]): The parsed major, minor and patch values.
        diagnostics (List[str]): Messages in the order they were produced.
    """

    def __init__(self, candidate: str) -> None:
        self.candidate = candidate
        self.parts: List[str] = []
        self.prerelease: Optional[str] = None
        self.metadata: Optional[str] = None
        self.numbers: List[int] = []
        self.diagnostics: List[str] = []


class BaseGate(ABC):
    """Abstract base class for all gates of the checking pipeline.

    A gate inspects the shared `ParseState`, appends diagnostics to it, and
    either passes or records a terminal `Outcome`. The pipeline stops at the
    first gate that records one.

    Attributes:
        name (str): The display name of the gate.
        description (str): A brief explanation of what the gate checks.
    """

    name: str = "UnnamedGate"
    description: str = "No description provided"

    def __init__(self, state: ParseState) -> None:
        """Initializes the gate with the state of the current call.

        Args:
            state (ParseState): The state shared by all gates of this call.
        """
        self.state = state
        self.outcome: Optional[Outcome] = None
        self.segment: Optional[str] = None

    def validate(self) -> Optional[Outcome]:
        """Runs the check.

        Returns:
            Optional[Outcome]: The terminal outcome if the check failed, or
            None if the pipeline should continue.
        """
        self._validate()
        return self.outcome

    @abstractmethod
    def _validate(self) -> None:
        """Abstract method for implementing the check.

        Subclasses use `add_diagnostic` to report findings and `fail` to end
        the pipeline.
        """
        raise NotImplementedError("Subclasses must implement _validate()")

    def add_diagnostic(self, message: str) -> None:
        """Appends a message to the diagnostic sequence.

        Args:
            message (str): The message to add.
        """
        self.state.diagnostics.append(message)

    def fail(self, outcome: Outcome, message: Optional[str] = None, segment: Optional[str] = None) -> None:
        """Records a terminal outcome for this gate.

        Args:
            outcome (Outcome): The classification of the failure.
            message (Optional[str]): A diagnostic explaining the failure. The
                empty-string outcome is the only one reported without one.
            segment (Optional[str]): The part or identifier at fault.
        """
        if message is not None:
            self.add_diagnostic(message)
        self.outcome = outcome
        self.segment = segment
