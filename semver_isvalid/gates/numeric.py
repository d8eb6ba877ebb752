"""Converts the core parts to integers.

Values are stored as unsigned 64-bit numbers. Python integers never wrap, so
the range is enforced explicitly and anything larger is reported as an
overflow instead of being accepted.
"""
from ..core.base_gate import BaseGate, segment_name
from ..core.outcome import Outcome

MAX_UINT64 = 2 ** 64 - 1
MAX_UINT64_DIGITS = len(str(MAX_UINT64))


class NumericParseGate(BaseGate):
    """Parses major, minor and patch, reporting each value found."""

    name = "NumericParse"
    description = "Parses the core parts as unsigned 64-bit integers."

    def _validate(self) -> None:
        for index, part in enumerate(self.state.parts):
            name = segment_name(index)
            # Only reachable for an empty part, e.g. "1..3".
            if not part:
                self.fail(
                    Outcome.GENERIC_INVALID,
                    f"unable to parse {name} part. Must be valid numeric characters [0-9]",
                    segment=name,
                )
                return

            # Leading zeros are already rejected, so a longer part cannot fit.
            if len(part) > MAX_UINT64_DIGITS or int(part) > MAX_UINT64:
                self.fail(
                    Outcome.INTEGER_OVERFLOW,
                    f"unable to parse {name} part. Value exceeds the 64-bit unsigned maximum of {MAX_UINT64}",
                    segment=name,
                )
                return

            value = int(part)
            self.state.numbers.append(value)
            self.add_diagnostic(f"found {name} version of {value}")
