"""Checks the build metadata that follows the first `+`.

Metadata identifiers are never treated as numbers, so `build.01` is fine.
"""
from ..core.base_gate import IDENTIFIER_CHARS, BaseGate, contains_only, quote
from ..core.outcome import Outcome

PRECEDENCE_NOTICE = (
    "NOTICE: Build metadata MUST be ignored when determining version precedence. "
    "Thus two versions that differ only in the build metadata, have the same precedence."
)


class BuildMetadataGate(BaseGate):
    """Validates the build-metadata candidate, if one was extracted."""

    name = "BuildMetadata"
    description = "Checks build metadata identifiers for illegal characters."

    def _validate(self) -> None:
        metadata = self.state.metadata
        if metadata is None:
            return

        for identifier in metadata.split("."):
            if not identifier:
                self.fail(
                    Outcome.INVALID_CHARACTERS,
                    f"illegal empty identifier found in metadata part {quote(metadata)}",
                    segment=identifier,
                )
                return
            if not contains_only(identifier, IDENTIFIER_CHARS):
                self.fail(
                    Outcome.INVALID_CHARACTERS,
                    f"illegal characters found in metadata part {quote(identifier)}. Must be [0-9A-Za-z-]",
                    segment=identifier,
                )
                return

        self.add_diagnostic(f"found build metadata on version of {quote(metadata)}")
        self.add_diagnostic(PRECEDENCE_NOTICE)
