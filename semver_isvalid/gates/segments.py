"""Splits a candidate into its major, minor and patch pieces.

A Semantic Version has exactly three dot-separated core parts. The split
stops after the second dot, so the patch piece may still carry a pre-release
(after `-`) and build metadata (after `+`), both of which may contain dots of
their own. `SuffixExtractionGate` peels those suffixes off, right-most first.
"""
from ..core.base_gate import BaseGate
from ..core.outcome import Outcome


class SegmentCountGate(BaseGate):
    """Requires exactly three dot-separated pieces."""

    name = "SegmentCount"
    description = "Checks that the version has major, minor and patch parts."

    def _validate(self) -> None:
        parts = self.state.candidate.split(".", 2)
        if len(parts) != 3:
            self.fail(Outcome.WRONG_SEGMENT_COUNT, f"found {len(parts)} number of parts")
            return
        self.state.parts = parts


class SuffixExtractionGate(BaseGate):
    """Moves build metadata and pre-release suffixes out of the patch piece.

    This gate never fails; the extracted values are checked later by
    `PreReleaseGate` and `BuildMetadataGate`.
    """

    name = "SuffixExtraction"
    description = "Separates pre-release and build metadata from the patch part."

    def _validate(self) -> None:
        patch = self.state.parts[2]
        if "+" not in patch and "-" not in patch:
            return

        # Metadata is the right-most suffix, so it is taken off first.
        head, sep, tail = patch.partition("+")
        if sep:
            self.state.metadata = tail
            patch = head

        head, sep, tail = patch.partition("-")
        if sep:
            self.state.prerelease = tail
            patch = head

        self.state.parts[2] = patch
