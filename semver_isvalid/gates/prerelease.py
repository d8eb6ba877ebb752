"""Checks the pre-release identifiers that follow the first `-`.

Identifiers are dot-separated. A purely numeric identifier must not have a
leading zero; any other identifier may only use `[0-9A-Za-z-]`.
"""
from ..core.base_gate import DIGITS, IDENTIFIER_CHARS, BaseGate, contains_only, quote
from ..core.outcome import Outcome

UNSTABLE_NOTICE = (
    "NOTICE: A pre-release version indicates that the version is unstable and might not "
    "satisfy the intended compatibility requirements as denoted by its associated normal version."
)


class PreReleaseGate(BaseGate):
    """Validates the pre-release candidate, if one was extracted."""

    name = "PreRelease"
    description = "Checks pre-release identifiers for leading zeros and illegal characters."

    def _validate(self) -> None:
        prerelease = self.state.prerelease
        if prerelease is None:
            return

        for identifier in prerelease.split("."):
            if not identifier:
                self.fail(
                    Outcome.INVALID_CHARACTERS,
                    f"illegal empty identifier found in pre-release part {quote(prerelease)}",
                    segment=identifier,
                )
                return
            if contains_only(identifier, DIGITS):
                if len(identifier) > 1 and identifier[0] == "0":
                    self.fail(
                        Outcome.LEADING_ZERO_SEGMENT,
                        f"illegal leading 0 found in pre-release numeric part {quote(identifier)}",
                        segment=identifier,
                    )
                    return
            elif not contains_only(identifier, IDENTIFIER_CHARS):
                self.fail(
                    Outcome.INVALID_CHARACTERS,
                    f"illegal characters found in pre-release non-numeric part {quote(identifier)}. Must be [0-9A-Za-z-]",
                    segment=identifier,
                )
                return

        self.add_diagnostic(
            "version is a pre-release version rather than a stable release version "
            f"with a pre-release identifier of {quote(prerelease)}"
        )
        self.add_diagnostic(UNSTABLE_NOTICE)
