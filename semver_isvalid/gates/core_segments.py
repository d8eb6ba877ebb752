"""Lexical checks for the major, minor and patch parts."""
from ..core.base_gate import DIGITS, BaseGate, contains_only, quote, segment_name
from ..core.outcome import Outcome


class CoreSegmentGate(BaseGate):
    """Each core part must be plain ASCII digits without a leading zero.

    Parts are checked in order and both rules are applied to one part before
    the next is looked at, so `01.x.3` reports the leading zero in "major".
    """

    name = "CoreSegments"
    description = "Checks the characters and leading zeros of the core parts."

    def _validate(self) -> None:
        for index, part in enumerate(self.state.parts):
            name = segment_name(index)
            if not contains_only(part, DIGITS):
                self.fail(
                    Outcome.INVALID_CHARACTERS,
                    f"illegal non-numeric characters found in {quote(name)} part",
                    segment=name,
                )
                return
            if len(part) > 1 and part[0] == "0":
                self.fail(
                    Outcome.LEADING_ZERO_SEGMENT,
                    f"illegal leading 0 found in {quote(name)} part",
                    segment=name,
                )
                return
