"""Rejects the empty string before any splitting happens."""
from ..core.base_gate import BaseGate
from ..core.outcome import Outcome


class EmptyStringGate(BaseGate):
    """Fails on a zero-length candidate without adding a diagnostic."""

    name = "EmptyString"
    description = "Checks that a version string was supplied at all."

    def _validate(self) -> None:
        if len(self.state.candidate) == 0:
            self.fail(Outcome.EMPTY_STRING)
