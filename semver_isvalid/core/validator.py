"""Runs the checking pipeline for a single version string.

The pipeline is a fixed sequence of gates:
1.  Reject the empty string.
2.  Split into major, minor and patch pieces.
3.  Extract build metadata and pre-release suffixes from the patch piece.
4.  Check the characters and leading zeros of each core part.
5.  Parse the core parts as unsigned 64-bit integers.
6.  Check the pre-release identifiers.
7.  Check the build metadata identifiers.

The first gate that fails decides the outcome; if none fails the version is
valid. Malformed input is never an exception, it is a returned outcome.
"""

import logging
from typing import List, Type

from .base_gate import BaseGate, ParseState
from .outcome import Outcome, ValidationResult
from ..gates import (
    BuildMetadataGate,
    CoreSegmentGate,
    EmptyStringGate,
    NumericParseGate,
    PreReleaseGate,
    SegmentCountGate,
    SuffixExtractionGate,
)

# Initialize a logger for this module.
logger = logging.getLogger(__name__)

GATES: List[Type[BaseGate]] = [
    EmptyStringGate,
    SegmentCountGate,
    SuffixExtractionGate,
    CoreSegmentGate,
    NumericParseGate,
    PreReleaseGate,
    BuildMetadataGate,
]


def validate(candidate: str) -> ValidationResult:
    """Checks that a string is a Semantic Version 2.0.0.

    No pre-processing is done; a leading "v" is an invalid character like any
    other. The function is pure and safe to call from several threads.

    Args:
        candidate (str): The version string to check.

    Returns:
        ValidationResult: The outcome and the diagnostics gathered up to the
        point where the pipeline stopped.
    """
    logger.debug(f"Validating version candidate: {candidate!r}")
    state = ParseState(candidate)

    for gate_class in GATES:
        gate = gate_class(state)
        outcome = gate.validate()
        if outcome is not None:
            logger.debug(f"Gate {gate.name} failed with outcome {outcome.value}")
            return ValidationResult(candidate, outcome, tuple(state.diagnostics), gate.segment)
        logger.debug(f"Gate {gate.name} passed")

    return ValidationResult(candidate, Outcome.VALID, tuple(state.diagnostics))
