"""semver-isvalid: A Semantic Versioning 2.0.0 checker.

This package provides a command-line tool and an importable routine that
validate a single version string and explain, line by line, what was found
in it or why it is not a Semantic Version.
"""

from .core.outcome import Outcome, ValidationResult
from .core.validator import validate

__version__ = "0.1.0"
__author__ = "semver-isvalid contributors"
__license__ = "MIT"

__all__ = ["Outcome", "ValidationResult", "validate", "__version__", "__author__", "__license__"]
